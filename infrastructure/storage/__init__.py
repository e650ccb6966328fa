"""
Storage Abstraction Layer
==========================

Provides a unified interface for object storage operations (service images bucket).
"""

from .factory import StorageFactory
from .interface import StorageException, StorageFile, StorageInterface
from .mock_service import MockStorageAdapter
from .supabase_adapter import SupabaseStorageAdapter

__all__ = [
    "StorageInterface",
    "StorageFile",
    "StorageException",
    "SupabaseStorageAdapter",
    "MockStorageAdapter",
    "StorageFactory",
]
