"""Public package surface for oceanscript."""

from .client import DEFAULT_API_URL, DigitalOcean
from .errors import (
    APIError,
    CoercionError,
    OceanScriptError,
    ProjectionError,
    ResponseError,
    ScriptError,
)
from .script import ScriptEngine, ScriptObject, ScriptResult

__all__ = [
    "APIError",
    "CoercionError",
    "DEFAULT_API_URL",
    "DigitalOcean",
    "OceanScriptError",
    "ProjectionError",
    "ResponseError",
    "ScriptEngine",
    "ScriptError",
    "ScriptObject",
    "ScriptResult",
]
