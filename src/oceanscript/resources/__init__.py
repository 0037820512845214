"""Resource module exports."""

from ._common_types import DEFAULT_PER_PAGE, Links, ListOptions, Page, Pages
from .images import Images
from .images_types import ImageResponse, ImageUpdateRequest

__all__ = [
    "DEFAULT_PER_PAGE",
    "ImageResponse",
    "ImageUpdateRequest",
    "Images",
    "Links",
    "ListOptions",
    "Page",
    "Pages",
]
