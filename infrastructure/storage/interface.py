"""
Storage Interface
=================

Abstract base class defining the contract for object storage operations.
Implements the Interface Segregation Principle by providing only essential storage methods.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import BinaryIO, List, Optional


@dataclass
class StorageFile:
    """
    Represents a stored file with its metadata.

    Attributes:
        key: Path of the object inside the bucket
        url: Public URL to access the file
        size: File size in bytes
        content_type: MIME type of the file
        bucket: Storage bucket name (optional)
    """

    key: str
    url: str
    size: int
    content_type: str
    bucket: Optional[str] = None


class StorageInterface(ABC):
    """
    Abstract interface for object storage operations.

    Concrete implementations must provide:
        - SupabaseStorageAdapter: Hosted bucket storage
        - MockStorageAdapter: In-memory storage for testing
    """

    @abstractmethod
    def upload(
        self,
        file: BinaryIO,
        path: str,
        content_type: str,
        access_token: Optional[str] = None,
    ) -> StorageFile:
        """
        Upload a file to storage.

        Args:
            file: Binary file object to upload
            path: Destination path inside the bucket
            content_type: MIME type of the file
            access_token: Bearer token of the signed-in user

        Returns:
            StorageFile object with metadata

        Raises:
            StorageException: If upload fails
        """
        pass

    @abstractmethod
    def remove(self, paths: List[str], access_token: Optional[str] = None) -> None:
        """
        Delete objects from storage.

        Args:
            paths: Object paths inside the bucket

        Raises:
            StorageException: If deletion fails
        """
        pass

    @abstractmethod
    def get_url(self, key: str) -> str:
        """
        Get the public URL of an object.

        Args:
            key: Object path inside the bucket

        Returns:
            URL string to access the file
        """
        pass

    @property
    @abstractmethod
    def bucket_name(self) -> str:
        """
        Get the storage bucket name.

        Returns:
            Bucket name string
        """
        pass

    def path_from_url(self, url: str) -> Optional[str]:
        """
        Recover the object path from a public URL of this bucket.

        Returns:
            Object path, or None if the URL does not belong to the bucket
        """
        marker = f"/{self.bucket_name}/"
        if not url or marker not in url:
            return None
        path = url.split(marker, 1)[1].split("?", 1)[0]
        return path or None


class StorageException(Exception):
    """Base exception for storage operations."""

    pass
