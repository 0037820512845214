"""Script argument coercion.

Every helper takes the script call's positional arguments and a position,
and either returns a typed host value or raises :class:`CoercionError`.
Argument shapes are probed in a fixed order: number, then string, then
object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Sequence, Union

from ..errors import CoercionError
from ..resources.images_types import ImageUpdateRequest
from ..script.values import UNDEFINED, is_number, is_object

_logger = logging.getLogger(__name__)


def argument(args: Sequence[Any], index: int) -> Any:
    """Return the argument at ``index``, or ``UNDEFINED`` when it was not passed."""
    if 0 <= index < len(args):
        return args[index]
    return UNDEFINED


def field_of(obj: Mapping[str, Any], name: str) -> Any:
    if name in obj:
        return obj[name]
    return UNDEFINED


def to_int(value: Any, what: str) -> int:
    if not is_number(value):
        raise CoercionError(f"{what} must be a number, got {_describe(value)}")
    if isinstance(value, float):
        if not value.is_integer():
            raise CoercionError(f"{what} must be an integer, got {value!r}")
        return int(value)
    return value


def to_str(value: Any, what: str) -> str:
    if isinstance(value, str):
        return value
    if is_number(value):
        return str(value)
    raise CoercionError(f"{what} must be a string, got {_describe(value)}")


def _describe(value: Any) -> str:
    if value is UNDEFINED:
        return "undefined"
    if value is None:
        return "null"
    return type(value).__name__


@dataclass(frozen=True)
class ById:
    id: int


@dataclass(frozen=True)
class BySlug:
    slug: str


@dataclass(frozen=True)
class ByRecord:
    record: Mapping[str, Any]

    def resolve(self) -> Union[ById, BySlug]:
        """Pick the lookup path from the record, id first."""
        image_id = field_of(self.record, "id")
        if is_number(image_id):
            return ById(to_int(image_id, "field 'id'"))
        slug = field_of(self.record, "slug")
        if isinstance(slug, str):
            return BySlug(slug)
        raise CoercionError("argument must be an Image, an ImageID or an ImageSlug")


ImageRef = Union[ById, BySlug, ByRecord]


def image_ref(args: Sequence[Any], index: int) -> ImageRef:
    value = argument(args, index)
    if is_number(value):
        return ById(to_int(value, "ImageID"))
    if isinstance(value, str):
        return BySlug(value)
    if is_object(value):
        return ByRecord(value)
    raise CoercionError("argument must be an Image, an ImageID or an ImageSlug")


def image_id(args: Sequence[Any], index: int) -> int:
    value = argument(args, index)
    if is_number(value):
        return to_int(value, "ImageID")
    if is_object(value) and is_number(field_of(value, "id")):
        return to_int(value["id"], "field 'id'")
    raise CoercionError("argument must be an Image or an ImageID")


def image_slug(args: Sequence[Any], index: int) -> str:
    value = argument(args, index)
    if isinstance(value, str):
        return value
    if is_object(value) and isinstance(field_of(value, "slug"), str):
        return value["slug"]
    raise CoercionError("argument must be an Image or an ImageSlug")


def image_update(args: Sequence[Any], index: int) -> ImageUpdateRequest:
    """Build a fresh update request from an image-like object.

    A missing or null ``name`` becomes an empty string rather than an error.
    """
    value = argument(args, index)
    if not is_object(value):
        raise CoercionError("argument must be an ImageRecord")
    name = field_of(value, "name")
    if name is UNDEFINED or name is None:
        _logger.debug("Update argument has no name; sending an empty name")
        name = ""
    return ImageUpdateRequest(name=to_str(name, "field 'name'"))


__all__ = [
    "ById",
    "ByRecord",
    "BySlug",
    "ImageRef",
    "argument",
    "image_id",
    "image_ref",
    "image_slug",
    "image_update",
]
