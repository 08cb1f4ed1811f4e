from .logging import LoggingMiddleware
from .throttling import ThrottlingMiddleware

__all__ = ["LoggingMiddleware", "ThrottlingMiddleware"]
