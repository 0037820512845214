"""Embedded script environment built on RestrictedPython.

Scripts are ordinary Python source compiled in restricted mode. The host
exposes a small set of named roots (e.g. ``images``) whose members are the
only way a script can reach the API.
"""

from __future__ import annotations

import logging
import operator
import warnings
from dataclasses import dataclass, field
from types import CodeType
from typing import Any, Callable, Mapping, Optional, TYPE_CHECKING

from RestrictedPython import compile_restricted, safe_builtins
from RestrictedPython.Eval import default_guarded_getitem, default_guarded_getiter
from RestrictedPython.Guards import (
    full_write_guard,
    guarded_iter_unpack_sequence,
    guarded_unpack_sequence,
    safer_getattr,
)
from RestrictedPython.PrintCollector import PrintCollector

from ..errors import ScriptError

if TYPE_CHECKING:  # pragma: no cover
    from ..client import DigitalOcean

_logger = logging.getLogger(__name__)

_INPLACE_OPERATORS: dict[str, Callable[[Any, Any], Any]] = {
    "+=": operator.iadd,
    "-=": operator.isub,
    "*=": operator.imul,
    "/=": operator.itruediv,
    "//=": operator.ifloordiv,
    "%=": operator.imod,
    "**=": operator.ipow,
}

_EXTRA_BUILTINS: dict[str, Any] = {
    "all": all,
    "any": any,
    "dict": dict,
    "enumerate": enumerate,
    "filter": filter,
    "list": list,
    "map": map,
    "max": max,
    "min": min,
    "sum": sum,
}


def _apply(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    return func(*args, **kwargs)


def _inplacevar(op: str, target: Any, value: Any) -> Any:
    try:
        return _INPLACE_OPERATORS[op](target, value)
    except KeyError:
        raise SyntaxError(f"unsupported in-place operator {op}") from None


def compile_script(source: str, filename: str = "<script>") -> CodeType:
    """Compile ``source`` in restricted mode.

    Raises
    ------
    SyntaxError
        If the source is invalid or uses constructs the sandbox forbids.
    """
    with warnings.catch_warnings():
        # output is collected through _print, so scripts never need `printed`
        warnings.filterwarnings("ignore", message=".*never reads 'printed'", category=SyntaxWarning)
        return compile_restricted(source, filename=filename, mode="exec")


def build_restricted_globals(roots: Mapping[str, Any]) -> dict[str, Any]:
    """Build the guarded globals a script runs with, including ``roots``."""
    builtins = dict(safe_builtins)
    builtins.update(_EXTRA_BUILTINS)
    glb: dict[str, Any] = {
        "__builtins__": builtins,
        "__name__": "__script__",
        "_getattr_": safer_getattr,
        "_getitem_": default_guarded_getitem,
        "_getiter_": default_guarded_getiter,
        "_iter_unpack_sequence_": guarded_iter_unpack_sequence,
        "_unpack_sequence_": guarded_unpack_sequence,
        "_write_": full_write_guard,
        "_inplacevar_": _inplacevar,
        "_apply_": _apply,
        "_print_": PrintCollector,
        "ScriptError": ScriptError,
    }
    glb.update(roots)
    return glb


@dataclass
class ScriptResult:
    """Outcome of one script run."""

    namespace: dict[str, Any] = field(default_factory=dict)
    output: str = ""


class ScriptEngine:
    """Runs restricted scripts against a fixed set of host roots."""

    def __init__(self, roots: Mapping[str, Any]) -> None:
        self._globals = build_restricted_globals(roots)
        self._reserved = frozenset(self._globals)

    @classmethod
    def for_client(cls, client: "DigitalOcean") -> "ScriptEngine":
        """Create an engine exposing every root bound to ``client``."""
        from ..bindings import install

        return cls(install(client))

    def run(
        self,
        source: str,
        *,
        filename: str = "<script>",
        inputs: Optional[Mapping[str, Any]] = None,
    ) -> ScriptResult:
        """Compile and execute ``source``.

        Parameters
        ----------
        source
            Script source text.
        filename
            Name reported in tracebacks and syntax errors.
        inputs
            Extra global names for this run only.

        Returns
        -------
        ScriptResult
            Names the script defined and the text it printed.

        Raises
        ------
        SyntaxError
            If the script fails to compile.
        ScriptError
            If a bound operation failed and the script did not catch it.
        """
        code = compile_script(source, filename)
        glb = dict(self._globals)
        if inputs:
            glb.update(inputs)
        _logger.debug("Running script %s", filename)
        exec(code, glb)  # noqa: S102 - restricted bytecode with guarded globals

        collector = glb.get("_print")
        output = collector() if isinstance(collector, PrintCollector) else ""
        namespace = {
            key: value
            for key, value in glb.items()
            if key not in self._reserved and key != "_print" and not (inputs and key in inputs)
        }
        return ScriptResult(namespace=namespace, output=output)


__all__ = ["ScriptEngine", "ScriptResult", "build_restricted_globals", "compile_script"]
