"""
Storage Infrastructure Tests
=============================

Unit tests for the object storage abstraction layer.
"""

from io import BytesIO
from unittest.mock import MagicMock

import requests
from django.test import SimpleTestCase, override_settings

from infrastructure.storage import (
    MockStorageAdapter,
    StorageException,
    StorageFactory,
    StorageFile,
    StorageInterface,
    SupabaseStorageAdapter,
)


def http_response(status_code=200, payload=None):
    response = MagicMock()
    response.ok = status_code < 400
    response.status_code = status_code
    response.json.return_value = payload if payload is not None else {}
    response.text = ""
    return response


class StorageInterfaceTest(SimpleTestCase):
    """Test StorageInterface contract."""

    def test_interface_is_abstract(self):
        """StorageInterface should not be instantiable."""
        with self.assertRaises(TypeError):
            StorageInterface()

    def test_path_from_url(self):
        storage = MockStorageAdapter("service-images")
        url = storage.get_url("user-1/cover.png")

        self.assertEqual(storage.path_from_url(url), "user-1/cover.png")
        self.assertEqual(storage.path_from_url(url + "?t=123"), "user-1/cover.png")

    def test_path_from_foreign_url(self):
        storage = MockStorageAdapter("service-images")

        self.assertIsNone(storage.path_from_url("https://picsum.photos/seed/x/600/400"))
        self.assertIsNone(storage.path_from_url(""))


@override_settings(SUPABASE_URL="https://project.supabase.test/", SERVICE_IMAGES_BUCKET="service-images")
class SupabaseStorageAdapterTest(SimpleTestCase):
    """Test SupabaseStorageAdapter implementation."""

    def setUp(self):
        """Set up test fixtures."""
        self.http = MagicMock()
        self.adapter = SupabaseStorageAdapter(http=self.http)
        self.test_content = b"image bytes"

    def test_upload_file_success(self):
        """Test successful upload to the bucket."""
        self.http.post.return_value = http_response(200, {"Key": "service-images/user-1/a.png"})

        result = self.adapter.upload(BytesIO(self.test_content), "user-1/a.png", "image/png", access_token="tok")

        self.assertIsInstance(result, StorageFile)
        self.assertEqual(result.key, "user-1/a.png")
        self.assertEqual(result.size, len(self.test_content))
        self.assertEqual(
            result.url, "https://project.supabase.test/storage/v1/object/public/service-images/user-1/a.png"
        )

        args, kwargs = self.http.post.call_args
        self.assertEqual(args[0], "https://project.supabase.test/storage/v1/object/service-images/user-1/a.png")
        self.assertEqual(kwargs["headers"]["Authorization"], "Bearer tok")
        self.assertEqual(kwargs["headers"]["Content-Type"], "image/png")
        self.assertEqual(kwargs["data"], self.test_content)

    def test_upload_rejected(self):
        self.http.post.return_value = http_response(400, {"message": "The resource already exists"})

        with self.assertRaises(StorageException) as ctx:
            self.adapter.upload(BytesIO(self.test_content), "user-1/a.png", "image/png")

        self.assertIn("already exists", str(ctx.exception))

    def test_upload_network_error(self):
        self.http.post.side_effect = requests.ConnectionError("no route")

        with self.assertRaises(StorageException):
            self.adapter.upload(BytesIO(self.test_content), "user-1/a.png", "image/png")

    def test_remove(self):
        self.http.delete.return_value = http_response(200, [])

        self.adapter.remove(["user-1/a.png", "user-1/b.png"])

        _, kwargs = self.http.delete.call_args
        self.assertEqual(kwargs["json"], {"prefixes": ["user-1/a.png", "user-1/b.png"]})

    def test_remove_nothing(self):
        self.adapter.remove([])
        self.http.delete.assert_not_called()

    def test_remove_failure(self):
        self.http.delete.return_value = http_response(403, {"error": "Unauthorized"})

        with self.assertRaises(StorageException):
            self.adapter.remove(["user-1/a.png"])


class MockStorageAdapterTest(SimpleTestCase):
    def test_upload_and_remove(self):
        storage = MockStorageAdapter()

        stored = storage.upload(BytesIO(b"png"), "user-1/a.png", "image/png")
        storage.remove([stored.key])

        self.assertEqual(storage.objects, {})
        self.assertEqual(storage.removed, ["user-1/a.png"])

    def test_simulated_failure(self):
        storage = MockStorageAdapter()
        storage.fail_removals = True

        with self.assertRaises(StorageException):
            storage.remove(["user-1/a.png"])


class StorageFactoryTest(SimpleTestCase):
    def test_create_mock(self):
        self.assertIsInstance(StorageFactory.create("mock"), MockStorageAdapter)

    def test_create_invalid(self):
        with self.assertRaises(ValueError):
            StorageFactory.create("s3")
