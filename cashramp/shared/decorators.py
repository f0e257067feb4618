from collections.abc import Callable
from functools import wraps
from typing import ParamSpec, TypeVar

from loguru import logger

P = ParamSpec("P")
R = TypeVar("R")


def log_errors(func: Callable[P, R]) -> Callable[P, R]:
    """Record every exception leaving a Cashramp call, then re-raise it.

    ``TransportError`` wraps the httpx or pydantic failure behind it, so the
    chained ``__cause__`` type is appended to the message. Failed responses
    returned as data are not exceptions and are not logged here.
    """

    @wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            cause = f" (caused by {type(exc.__cause__).__name__})" if exc.__cause__ else ""
            logger.error(f"[{func.__qualname__}] {type(exc).__name__}: {exc}{cause}")
            raise

    return wrapper
