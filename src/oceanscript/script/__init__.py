"""Embedded script environment (RestrictedPython) and its value space."""

from .engine import ScriptEngine, ScriptResult, build_restricted_globals, compile_script
from .values import UNDEFINED, ScriptObject, to_script_value

__all__ = [
    "UNDEFINED",
    "ScriptEngine",
    "ScriptObject",
    "ScriptResult",
    "build_restricted_globals",
    "compile_script",
    "to_script_value",
]
