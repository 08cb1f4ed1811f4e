from __future__ import annotations


class FloodControlError(Exception):
    """Base flood-control error."""


class ConfigError(FloodControlError):
    pass


class CheckAbortedError(FloodControlError):
    """
    Check was not evaluated: the caller's context was cancelled or its deadline passed.
    Callers must treat it as "decision unknown", not as admit or reject.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(f"flood check aborted: {reason}")
        self.reason = reason
