"""
Storage Factory
===============

Factory pattern for creating object storage instances.
Implements the Dependency Inversion Principle.
"""

import logging
from typing import Literal, Optional

from django.conf import settings

from .interface import StorageInterface
from .mock_service import MockStorageAdapter
from .supabase_adapter import SupabaseStorageAdapter

logger = logging.getLogger(__name__)

StorageBackend = Literal["supabase", "mock"]


class StorageFactory:
    """
    Factory for creating the object storage backend.

    Usage:
        # In your code
        storage = StorageFactory.create()
    """

    @staticmethod
    def create(backend: Optional[StorageBackend] = None) -> StorageInterface:
        """
        Create a storage backend instance.

        Args:
            backend: Storage backend type ('supabase' or 'mock')
                    If None, reads from settings.INFRASTRUCTURE['STORAGE_BACKEND']

        Returns:
            StorageInterface implementation

        Raises:
            ValueError: If backend type is invalid
        """
        backend_type = backend or settings.INFRASTRUCTURE.get("STORAGE_BACKEND", "supabase")
        logger.info(f"Creating storage backend: {backend_type}")

        if backend_type == "supabase":
            return SupabaseStorageAdapter()
        elif backend_type == "mock":
            return MockStorageAdapter(getattr(settings, "SERVICE_IMAGES_BUCKET", "service-images"))
        else:
            raise ValueError(f"Invalid storage backend: {backend_type}. Must be 'supabase' or 'mock'")
