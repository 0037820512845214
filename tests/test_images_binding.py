import logging
import sys
import unittest
from pathlib import Path

# Ensure src/ is on sys.path so we can import the package without installation
PROJECT_ROOT = Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))

from oceanscript.bindings import install  # noqa: E402
from oceanscript.bindings.images import OPERATIONS, ImagesBinding, apply  # noqa: E402
from oceanscript.bindings.projection import IMAGE_FIELDS  # noqa: E402
from oceanscript.client import DigitalOcean  # noqa: E402
from oceanscript.errors import APIError, ScriptError  # noqa: E402
from oceanscript.resources._common_types import Links, Page, Pages  # noqa: E402
from oceanscript.script.values import ScriptObject  # noqa: E402


logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s:%(name)s:%(message)s",
    stream=sys.stdout,
    force=True,
)


def make_image(image_id, **overrides):
    image = {
        "id": image_id,
        "name": f"image-{image_id}",
        "type": "snapshot",
        "distribution": "Ubuntu",
        "slug": f"slug-{image_id}",
        "public": True,
        "regions": ["nyc1"],
        "min_disk_size": 20,
        "created_at": "2024-01-01T00:00:00Z",
    }
    image.update(overrides)
    return image


class FakeImagesService:
    """Records every call; serves ``pages`` to all list operations."""

    def __init__(self, pages=None, *, error=None, fail_on_page=None):
        self.pages = pages if pages is not None else [[make_image(1)]]
        self.error = error
        self.fail_on_page = fail_on_page
        self.calls = []

    def _raise(self):
        if self.error is not None:
            raise self.error

    def get_by_id(self, image_id):
        self.calls.append(("get_by_id", image_id))
        self._raise()
        return make_image(image_id)

    def get_by_slug(self, slug):
        self.calls.append(("get_by_slug", slug))
        self._raise()
        return make_image(7, slug=slug)

    def update(self, image_id, request):
        self.calls.append(("update", image_id, request))
        self._raise()
        return make_image(image_id, name=request.name)

    def delete(self, image_id):
        self.calls.append(("delete", image_id))
        self._raise()

    def _page(self, kind, options):
        self.calls.append((kind, options.page, options.per_page))
        if self.fail_on_page == options.page:
            raise APIError("GET /v2/images: 503 service unavailable", status=503)
        items = self.pages[options.page - 1]
        last = "" if options.page == len(self.pages) else "last"
        return Page(items=list(items), links=Links(pages=Pages(last=last)))

    def list(self, options):
        return self._page("list", options)

    def list_distribution(self, options):
        return self._page("list_distribution", options)

    def list_application(self, options):
        return self._page("list_application", options)

    def list_user(self, options):
        return self._page("list_user", options)


class ApplyTests(unittest.TestCase):
    def test_root_exposes_operations(self):
        root = apply(FakeImagesService())
        self.assertIsInstance(root, ScriptObject)
        self.assertEqual(tuple(root), OPERATIONS)
        for name in OPERATIONS:
            self.assertTrue(callable(root[name]))

    def test_root_is_immutable(self):
        root = apply(FakeImagesService())
        with self.assertRaises(AttributeError):
            root.list = lambda: []

    def test_get_attribute_is_operation(self):
        service = FakeImagesService()
        root = apply(service)
        self.assertEqual(root.get(3).id, 3)

    def test_install_uses_client_images(self):
        client = DigitalOcean(token="t")
        roots = install(client)
        self.assertEqual(list(roots), ["images"])
        self.assertEqual(tuple(roots["images"]), OPERATIONS)


class GetTests(unittest.TestCase):
    def setUp(self) -> None:
        self.service = FakeImagesService()
        self.binding = ImagesBinding(self.service)

    def test_by_id(self):
        result = self.binding.get(42)
        self.assertEqual(self.service.calls, [("get_by_id", 42)])
        self.assertEqual(result.id, 42)

    def test_by_slug(self):
        result = self.binding.get("ubuntu-24-04-x64")
        self.assertEqual(self.service.calls, [("get_by_slug", "ubuntu-24-04-x64")])
        self.assertEqual(result.slug, "ubuntu-24-04-x64")

    def test_by_record_id(self):
        self.binding.get({"id": 5, "slug": "x"})
        self.assertEqual(self.service.calls, [("get_by_id", 5)])

    def test_by_record_slug(self):
        self.binding.get(ScriptObject(id=None, slug="x"))
        self.assertEqual(self.service.calls, [("get_by_slug", "x")])

    def test_record_without_id_or_slug(self):
        with self.assertRaisesRegex(ScriptError, "Image, an ImageID or an ImageSlug"):
            self.binding.get({"name": "nope"})
        self.assertEqual(self.service.calls, [])

    def test_no_argument(self):
        with self.assertRaises(ScriptError):
            self.binding.get()
        self.assertEqual(self.service.calls, [])

    def test_missing_record_from_service(self):
        self.service.get_by_id = lambda image_id: None
        with self.assertRaisesRegex(ScriptError, "expected an object, got NoneType"):
            self.binding.get(3)

    def test_remote_error(self):
        self.service.error = APIError("GET /v2/images/9: 404 image not found", status=404)
        with self.assertRaisesRegex(ScriptError, "not found"):
            self.binding.get(9)

    def test_projection_shape(self):
        by_id = self.binding.get(1)
        listed = self.binding.list()[0]
        self.assertEqual(tuple(by_id), IMAGE_FIELDS)
        self.assertEqual(tuple(listed), IMAGE_FIELDS)


class UpdateTests(unittest.TestCase):
    def setUp(self) -> None:
        self.service = FakeImagesService()
        self.binding = ImagesBinding(self.service)

    def test_update_renames(self):
        result = self.binding.update({"id": 42, "name": "new-name"})
        self.assertEqual(len(self.service.calls), 1)
        op, image_id, request = self.service.calls[0]
        self.assertEqual((op, image_id, request.name), ("update", 42, "new-name"))
        self.assertEqual(result.name, "new-name")

    def test_update_from_projected_record(self):
        record = self.binding.get(42)
        self.service.calls.clear()
        self.binding.update(record)
        self.assertEqual(self.service.calls[0][1], 42)
        self.assertEqual(self.service.calls[0][2].name, "image-42")

    def test_update_missing_name_sends_empty(self):
        self.binding.update({"id": 1})
        self.assertEqual(self.service.calls[0][2].name, "")

    def test_update_without_id(self):
        with self.assertRaisesRegex(ScriptError, "Image or an ImageID"):
            self.binding.update({"name": "x"})
        self.assertEqual(self.service.calls, [])

    def test_update_not_object(self):
        with self.assertRaises(ScriptError):
            self.binding.update(42)
        self.assertEqual(self.service.calls, [])


class DeleteTests(unittest.TestCase):
    def setUp(self) -> None:
        self.service = FakeImagesService()
        self.binding = ImagesBinding(self.service)

    def test_delete_success(self):
        self.assertIsNone(self.binding.delete(42))
        self.assertEqual(self.service.calls, [("delete", 42)])

    def test_delete_record(self):
        self.binding.delete({"id": 8})
        self.assertEqual(self.service.calls, [("delete", 8)])

    def test_delete_not_found(self):
        self.service.error = APIError("DELETE /v2/images/42: 404 image not found", status=404)
        with self.assertRaises(ScriptError) as ctx:
            self.binding.delete(42)
        self.assertIn("not found", str(ctx.exception))

    def test_delete_slug_rejected(self):
        with self.assertRaises(ScriptError):
            self.binding.delete("ubuntu")
        self.assertEqual(self.service.calls, [])


class ListTests(unittest.TestCase):
    def test_all_pages_flattened(self):
        pages = [[make_image(1), make_image(2)], [make_image(3)], [make_image(4)]]
        service = FakeImagesService(pages)
        result = ImagesBinding(service).list()
        self.assertIsInstance(result, list)
        self.assertEqual([image.id for image in result], [1, 2, 3, 4])
        self.assertEqual(service.calls, [("list", 1, 200), ("list", 2, 200), ("list", 3, 200)])

    def test_each_list_variant(self):
        for name in ("list_distribution", "list_application", "list_user"):
            with self.subTest(name=name):
                service = FakeImagesService([[make_image(1)]])
                result = getattr(ImagesBinding(service), name)()
                self.assertEqual(len(result), 1)
                self.assertEqual(service.calls, [(name, 1, 200)])

    def test_custom_page_size(self):
        service = FakeImagesService()
        apply(service, per_page=10).list()
        self.assertEqual(service.calls, [("list", 1, 10)])

    def test_second_page_failure(self):
        service = FakeImagesService([[make_image(1)], [make_image(2)]], fail_on_page=2)
        with self.assertRaisesRegex(ScriptError, "service unavailable"):
            ImagesBinding(service).list()

    def test_non_object_item_in_page(self):
        service = FakeImagesService([["garbage"]])
        with self.assertRaisesRegex(ScriptError, "expected an object, got str"):
            ImagesBinding(service).list()

    def test_projection_failure(self):
        service = FakeImagesService([[make_image(1, regions=[object()])]])
        with self.assertRaisesRegex(ScriptError, "can't prepare field 'regions'"):
            ImagesBinding(service).list_user()


if __name__ == "__main__":
    unittest.main()
