"""Translation of host failures into script exceptions."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, TypeVar

from ..errors import ScriptError

F = TypeVar("F", bound=Callable[..., Any])

_logger = logging.getLogger(__name__)


def script_function(method: F) -> F:
    """Mark a host method as callable from scripts.

    Scripts pass positional arguments only. Any failure inside the call is
    re-raised as :class:`ScriptError` carrying the original message.
    """

    @functools.wraps(method)
    def wrapper(self, *args: Any, **kwargs: Any) -> Any:
        if kwargs:
            raise ScriptError(
                f"{method.__name__}() takes positional arguments only, got {', '.join(sorted(kwargs))}"
            )
        try:
            return method(self, *args)
        except ScriptError:
            raise
        except Exception as exc:  # noqa: BLE001 - every failure is surfaced to the script
            _logger.debug("Script call %s failed: %s", method.__name__, exc)
            raise ScriptError(str(exc)) from exc

    return wrapper  # type: ignore[return-value]


__all__ = ["script_function"]
