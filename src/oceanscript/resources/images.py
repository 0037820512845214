"""Image resource wrapper."""

from __future__ import annotations

from typing import Any, Optional, cast

from ..errors import ResponseError
from .base import Resource
from .images_types import ImageListType, ImageResponse, ImageUpdateRequest
from ._common_types import Links, ListOptions, Page


class Images(Resource):
    """Image resource operations."""

    def get_by_id(self, image_id: int, *, timeout: Optional[int] = None) -> ImageResponse:
        """Fetch a single image by numeric ID.

        Parameters
        ----------
        image_id
            Image identifier.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        ImageResponse
            Image dict.
        """
        response = self._get(f"/images/{image_id}", timeout=timeout)
        return self._image_from(response, f"image {image_id}")

    def get_by_slug(self, slug: str, *, timeout: Optional[int] = None) -> ImageResponse:
        """Fetch a single public image by slug, e.g. ``"ubuntu-24-04-x64"``."""
        response = self._get(f"/images/{slug}", timeout=timeout)
        return self._image_from(response, f"image {slug!r}")

    def update(
        self,
        image_id: int,
        request: ImageUpdateRequest,
        *,
        timeout: Optional[int] = None,
    ) -> ImageResponse:
        """Rename an image.

        Parameters
        ----------
        image_id
            Image identifier.
        request
            Fields to change.
        timeout
            Timeout in seconds for this request.

        Returns
        -------
        ImageResponse
            The updated image dict.
        """
        response = self._put(f"/images/{image_id}", json=request.to_payload(), timeout=timeout)
        return self._image_from(response, f"updated image {image_id}")

    def delete(self, image_id: int, *, timeout: Optional[int] = None) -> None:
        """Delete an image. The API answers with an empty body on success."""
        self._delete(f"/images/{image_id}", timeout=timeout)

    def list(self, options: ListOptions, *, timeout: Optional[int] = None) -> Page[ImageResponse]:
        """Fetch one page of all images visible to the account."""
        return self._list_page(options, timeout=timeout)

    def list_distribution(
        self, options: ListOptions, *, timeout: Optional[int] = None
    ) -> Page[ImageResponse]:
        """Fetch one page of base distribution images."""
        return self._list_page(options, image_type="distribution", timeout=timeout)

    def list_application(
        self, options: ListOptions, *, timeout: Optional[int] = None
    ) -> Page[ImageResponse]:
        """Fetch one page of one-click application images."""
        return self._list_page(options, image_type="application", timeout=timeout)

    def list_user(self, options: ListOptions, *, timeout: Optional[int] = None) -> Page[ImageResponse]:
        """Fetch one page of the account's private snapshots and custom images."""
        return self._list_page(options, private=True, timeout=timeout)

    def _list_page(
        self,
        options: ListOptions,
        *,
        image_type: Optional[ImageListType] = None,
        private: bool = False,
        timeout: Optional[int],
    ) -> Page[ImageResponse]:
        params: dict[str, Any] = dict(options.params())
        if image_type is not None:
            params["type"] = image_type
        if private:
            params["private"] = "true"

        response = self._get("/images", params=params, timeout=timeout)
        images = response.get("images") if isinstance(response, dict) else None
        if not isinstance(images, list):
            self._logger.warning("Images response missing expected list; Response was %s", response)
            raise ResponseError("images response missing expected images list")

        links = Links.from_payload(response.get("links") if isinstance(response, dict) else None)
        return Page(items=cast(list[ImageResponse], images), links=links)

    def _image_from(self, response: Optional[dict[str, Any]], what: str) -> ImageResponse:
        image = response.get("image") if isinstance(response, dict) else None
        if isinstance(image, dict):
            return cast(ImageResponse, image)
        self._logger.warning("Response for %s missing expected image data", what)
        raise ResponseError(f"response for {what} missing expected image data")
