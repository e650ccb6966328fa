"""
Supabase Storage Adapter
========================

Concrete implementation of StorageInterface using the hosted storage REST API.
Implements the Dependency Inversion Principle by depending on the abstract StorageInterface.
"""

import logging
from typing import BinaryIO, List, Optional

import requests
from django.conf import settings

from ..http import error_message
from .interface import StorageException, StorageFile, StorageInterface

logger = logging.getLogger(__name__)


class SupabaseStorageAdapter(StorageInterface):
    """
    Hosted bucket storage.

    Configuration (in settings.py):
        SUPABASE_URL: Project URL
        SUPABASE_ANON_KEY: Public anon key
        SERVICE_IMAGES_BUCKET: Bucket holding service images
    """

    def __init__(self, http: Optional[requests.Session] = None):
        self.base_url = settings.SUPABASE_URL.rstrip("/") + "/storage/v1"
        self.anon_key = settings.SUPABASE_ANON_KEY
        self.timeout = settings.REMOTE_CALL_TIMEOUT_SECONDS
        self._bucket_name = getattr(settings, "SERVICE_IMAGES_BUCKET", "service-images")
        self.http = http or requests.Session()

    def _headers(self, access_token: Optional[str], content_type: str = "application/json"):
        return {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token or self.anon_key}",
            "Content-Type": content_type,
        }

    def upload(
        self,
        file: BinaryIO,
        path: str,
        content_type: str,
        access_token: Optional[str] = None,
    ) -> StorageFile:
        """
        Upload a file to the bucket.

        Raises:
            StorageException: If upload fails
        """
        content = file.read()
        try:
            response = self.http.post(
                f"{self.base_url}/object/{self._bucket_name}/{path}",
                headers=self._headers(access_token, content_type),
                data=content,
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Failed to upload file to storage: {path}. Error: {str(e)}")
            raise StorageException(f"Upload failed: {str(e)}") from e

        if not response.ok:
            raise StorageException(error_message(response))

        logger.info(f"Successfully uploaded file to storage: {path}")
        return StorageFile(
            key=path,
            url=self.get_url(path),
            size=len(content),
            content_type=content_type,
            bucket=self._bucket_name,
        )

    def remove(self, paths: List[str], access_token: Optional[str] = None) -> None:
        """
        Delete objects from the bucket.

        Raises:
            StorageException: If deletion fails
        """
        if not paths:
            return
        try:
            response = self.http.delete(
                f"{self.base_url}/object/{self._bucket_name}",
                headers=self._headers(access_token),
                json={"prefixes": list(paths)},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"Failed to delete files from storage: {paths}. Error: {str(e)}")
            raise StorageException(f"Delete failed: {str(e)}") from e

        if not response.ok:
            raise StorageException(error_message(response))
        logger.info(f"Deleted {len(paths)} file(s) from {self._bucket_name}")

    def get_url(self, key: str) -> str:
        return f"{self.base_url}/object/public/{self._bucket_name}/{key}"

    @property
    def bucket_name(self) -> str:
        return self._bucket_name
