"""Projection of image records into script objects."""

from __future__ import annotations

from typing import Any, Mapping

from ..errors import ProjectionError
from ..script.values import ScriptObject, to_script_value

# Field set and order shared by every image handed to a script
IMAGE_FIELDS: tuple[str, ...] = (
    "id",
    "name",
    "type",
    "distribution",
    "slug",
    "public",
    "regions",
    "min_disk_size",
    "created_at",
)


def project(record: Mapping[str, Any], fields: tuple[str, ...], *, kind: str = "record") -> ScriptObject:
    """Copy ``fields`` of ``record`` into a new script object, in order.

    Absent fields project as ``None``.

    Raises
    ------
    ProjectionError
        If ``record`` is not an object or any field has no script
        representation.
    """
    if not isinstance(record, Mapping):
        raise ProjectionError(f"can't prepare {kind}: expected an object, got {type(record).__name__}")
    values: dict[str, Any] = {}
    for name in fields:
        try:
            values[name] = to_script_value(record.get(name))
        except TypeError as exc:
            raise ProjectionError(f"can't prepare field {name!r}: {exc}") from exc
    return ScriptObject(values)


def image_to_script(record: Mapping[str, Any]) -> ScriptObject:
    return project(record, IMAGE_FIELDS, kind="image")


__all__ = ["IMAGE_FIELDS", "image_to_script", "project"]
