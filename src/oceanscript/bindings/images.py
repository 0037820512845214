"""Script bindings for the images resource."""

from __future__ import annotations

from typing import Any, Callable, Optional, Protocol

from ..resources._common_types import DEFAULT_PER_PAGE, ListOptions, Page
from ..resources.images_types import ImageResponse, ImageUpdateRequest
from ..script.values import ScriptObject
from .coercion import ById, ByRecord, image_id, image_ref, image_update
from .pagination import flatten_pages
from .projection import image_to_script
from .translate import script_function

ListFunc = Callable[[ListOptions], Page[ImageResponse]]


class ImagesService(Protocol):
    """Image operations the bindings consume."""

    def get_by_id(self, image_id: int) -> ImageResponse: ...

    def get_by_slug(self, slug: str) -> ImageResponse: ...

    def update(self, image_id: int, request: ImageUpdateRequest) -> ImageResponse: ...

    def delete(self, image_id: int) -> None: ...

    def list(self, options: ListOptions) -> Page[ImageResponse]: ...

    def list_distribution(self, options: ListOptions) -> Page[ImageResponse]: ...

    def list_application(self, options: ListOptions) -> Page[ImageResponse]: ...

    def list_user(self, options: ListOptions) -> Page[ImageResponse]: ...


# Names visible to scripts, in the order they are bound
OPERATIONS: tuple[str, ...] = (
    "list",
    "list_distribution",
    "list_application",
    "list_user",
    "get",
    "update",
    "delete",
)


class ImagesBinding:
    """Script-callable image operations over an :class:`ImagesService`."""

    def __init__(self, service: ImagesService, *, per_page: int = DEFAULT_PER_PAGE) -> None:
        self._svc = service
        self._per_page = per_page

    @script_function
    def list(self, *args: Any) -> list[ScriptObject]:
        return self._list_common(self._svc.list)

    @script_function
    def list_distribution(self, *args: Any) -> list[ScriptObject]:
        return self._list_common(self._svc.list_distribution)

    @script_function
    def list_application(self, *args: Any) -> list[ScriptObject]:
        return self._list_common(self._svc.list_application)

    @script_function
    def list_user(self, *args: Any) -> list[ScriptObject]:
        return self._list_common(self._svc.list_user)

    @script_function
    def get(self, *args: Any) -> ScriptObject:
        """Fetch one image by ID, by slug, or from an image-like object."""
        ref = image_ref(args, 0)
        if isinstance(ref, ByRecord):
            ref = ref.resolve()
        if isinstance(ref, ById):
            image = self._svc.get_by_id(ref.id)
        else:
            image = self._svc.get_by_slug(ref.slug)
        return image_to_script(image)

    @script_function
    def update(self, *args: Any) -> ScriptObject:
        """Rename the image described by an image-like object."""
        # they read the same argument, just different fields
        target = image_id(args, 0)
        request = image_update(args, 0)
        image = self._svc.update(target, request)
        return image_to_script(image)

    @script_function
    def delete(self, *args: Any) -> None:
        self._svc.delete(image_id(args, 0))
        return None

    def _list_common(self, listfn: ListFunc) -> list[ScriptObject]:
        return flatten_pages(listfn, image_to_script, per_page=self._per_page)


def apply(service: ImagesService, *, per_page: Optional[int] = None) -> ScriptObject:
    """Build the ``images`` root object exposed to scripts."""
    binding = ImagesBinding(service, per_page=per_page or DEFAULT_PER_PAGE)
    return ScriptObject({name: getattr(binding, name) for name in OPERATIONS})


__all__ = ["OPERATIONS", "ImagesBinding", "ImagesService", "apply"]
