"""API call logging for the HTTP layer."""

from __future__ import annotations

import functools
import logging
import time
from typing import Any, Callable, TypeVar

F = TypeVar("F", bound=Callable[..., Any])

logger = logging.getLogger("sambasafety.api")


def log_api_call(fn: F) -> F:
    """Decorator that logs each ``(method, path)`` round trip with its timing.

    Only the method and path are logged; query strings, bodies and headers
    may carry personal data or credentials.
    """

    @functools.wraps(fn)
    def wrapper(self: Any, method: str, path: str, *args: Any, **kwargs: Any) -> Any:
        logger.debug("CALL: %s %s", method, path)

        start = time.monotonic()
        try:
            result = fn(self, method, path, *args, **kwargs)
        except Exception as exc:
            elapsed = time.monotonic() - start
            logger.warning(
                "FAIL: %s %s -> %s: %s (%.3fs)",
                method, path, type(exc).__name__, exc, elapsed,
            )
            raise
        elapsed = time.monotonic() - start
        logger.info("OK: %s %s (%.3fs)", method, path, elapsed)
        return result

    return wrapper  # type: ignore[return-value]
