"""Types for the images resource."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, TypedDict, get_args

from typing_extensions import ReadOnly

# Origin categories accepted by the ``type`` filter of the list endpoint
ImageListType = Literal["distribution", "application"]
IMAGE_LIST_TYPES: tuple[ImageListType, ...] = get_args(ImageListType)


class ImageResponse(TypedDict, total=False):
    """Readonly image dict returned by image endpoints."""
    id: ReadOnly[int]
    name: ReadOnly[str]
    type: ReadOnly[str]
    distribution: ReadOnly[str]
    slug: ReadOnly[str | None]
    public: ReadOnly[bool]
    regions: ReadOnly[list[str]]
    min_disk_size: ReadOnly[int]
    size_gigabytes: ReadOnly[float]
    description: ReadOnly[str]
    tags: ReadOnly[list[str]]
    status: ReadOnly[str]
    error_message: ReadOnly[str]
    created_at: ReadOnly[str]


@dataclass(frozen=True)
class ImageUpdateRequest:
    """Mutable image fields accepted by the update endpoint."""

    name: str = ""

    def to_payload(self) -> dict[str, str]:
        return {"name": self.name}


__all__ = ["IMAGE_LIST_TYPES", "ImageListType", "ImageResponse", "ImageUpdateRequest"]
