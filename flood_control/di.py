from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Optional, Protocol, runtime_checkable

from .config import AppSettings, get_settings
from .constants import APP_NAME
from .domain.context import CheckContext
from .infrastructure.rate_gate import RateGate


class DIError(RuntimeError):
    pass


# Port for presentation (so presentation DOES NOT import infrastructure)
@runtime_checkable
class FloodControlPort(Protocol):
    def check(self, user_id: int, ctx: Optional[CheckContext] = None) -> bool: ...


@dataclass(slots=True)
class Container:
    settings: AppSettings
    _components: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def build(cls, settings: AppSettings | None = None) -> "Container":
        return cls(settings=settings if settings is not None else get_settings())

    def register(self, name: str, component: Any) -> None:
        if not name or not name.strip():
            raise DIError("Component name must be non-empty")
        if name in self._components:
            raise DIError(f"Component already registered: {name}")
        self._components[name] = component

    def get(self, name: str) -> Any:
        try:
            return self._components[name]
        except KeyError as exc:
            raise DIError(f"Unknown component: {name}") from exc


def build_graph(container: Container) -> None:
    """
    Wire the flood gate into the container.
    Invalid config must crash at startup.
    """

    s = container.settings

    flood_gate: FloodControlPort = RateGate(s.to_flood_config())
    container.register("flood_gate", flood_gate)

    logging.getLogger(APP_NAME).info(
        "flood gate ready: window=%ss max_checks=%s",
        s.flood_window_sec,
        s.flood_max_checks,
    )
