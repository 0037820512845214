"""Bindings that expose API resources to scripts."""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import images
from .translate import script_function

if TYPE_CHECKING:  # pragma: no cover
    from ..client import DigitalOcean
    from ..script.values import ScriptObject


def install(client: "DigitalOcean") -> dict[str, "ScriptObject"]:
    """Return every script root bound to ``client``, keyed by global name."""
    return {
        "images": images.apply(client.images),
    }


__all__ = ["images", "install", "script_function"]
