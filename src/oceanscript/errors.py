"""Exception types raised by oceanscript."""

from __future__ import annotations

from typing import Optional


class OceanScriptError(Exception):
    """Base class for all oceanscript failures."""


class APIError(OceanScriptError):
    """The DigitalOcean API rejected a request or could not be reached."""

    def __init__(
        self,
        message: str,
        *,
        status: Optional[int] = None,
        error_id: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.error_id = error_id


class ResponseError(OceanScriptError):
    """A response arrived but did not have the expected shape."""


class CoercionError(OceanScriptError):
    """A script argument does not have the shape an operation expects."""


class ProjectionError(OceanScriptError):
    """A record field cannot be represented as a script value."""


class ScriptError(OceanScriptError):
    """Exception thrown into a running script.

    Every failure of a bound operation reaches the script as this type, with
    the original failure's message as its text.
    """


__all__ = [
    "APIError",
    "CoercionError",
    "OceanScriptError",
    "ProjectionError",
    "ResponseError",
    "ScriptError",
]
