"""Shared plumbing for page helpers.

Helpers come in two kinds. Permissive query helpers turn "element absent"
and "timed out" into a definite negative result (False, 0, "", None or an
empty list) via the ``permissive`` decorator. Strict helpers let
ElementNotFound and Timeout propagate and fail the scenario.
"""

import copy
import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from playwright.async_api import Error as PlaywrightError

from portalcheck.utils.exceptions import ElementNotFound, Timeout

logger = logging.getLogger(__name__)

R = TypeVar("R")

RECOVERABLE_ERRORS: tuple[type[Exception], ...] = (
    ElementNotFound,
    Timeout,
    PlaywrightError,
)


def permissive(
    default: Any,
) -> Callable[[Callable[..., Awaitable[R]]], Callable[..., Awaitable[R]]]:
    """Make an async query helper return ``default`` instead of failing.

    Only absence and timeout conditions are converted. Programming errors
    still raise. Mutable defaults are copied per call.

    Args:
        default: Value returned when the helper cannot resolve its element.
    """

    def decorator(
        func: Callable[..., Awaitable[R]],
    ) -> Callable[..., Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> R:
            try:
                return await func(*args, **kwargs)
            except RECOVERABLE_ERRORS as e:
                logger.debug(f"{func.__name__} degraded to {default!r}: {e}")
                return copy.copy(default)

        wrapper.permissive_default = default  # type: ignore[attr-defined]
        return wrapper

    return decorator


def css_string(value: str) -> str:
    """Quote ``value`` for use inside a CSS attribute selector."""
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'
