"""
Mock Storage Adapter
====================

In-memory implementation of StorageInterface for testing.
"""

import logging
from typing import BinaryIO, Dict, List, Optional

from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class MockStorageAdapter(StorageInterface):
    """
    Mock storage keeping object bytes in a dict.

    Set ``fail_removals = True`` to simulate a storage outage on delete.
    """

    def __init__(self, bucket: str = "service-images"):
        self._bucket_name = bucket
        self.objects: Dict[str, bytes] = {}
        self.removed: List[str] = []
        self.fail_removals = False

    def upload(
        self,
        file: BinaryIO,
        path: str,
        content_type: str,
        access_token: Optional[str] = None,
    ) -> StorageFile:
        content = file.read()
        self.objects[path] = content
        logger.info(f"[MOCK STORAGE] Uploaded {path} ({len(content)} bytes)")
        return StorageFile(
            key=path, url=self.get_url(path), size=len(content), content_type=content_type, bucket=self._bucket_name
        )

    def remove(self, paths: List[str], access_token: Optional[str] = None) -> None:
        if self.fail_removals:
            raise StorageException("Simulated storage failure")
        for path in paths:
            self.objects.pop(path, None)
            self.removed.append(path)

    def get_url(self, key: str) -> str:
        return f"https://mock-storage.local/object/public/{self._bucket_name}/{key}"

    @property
    def bucket_name(self) -> str:
        return self._bucket_name
