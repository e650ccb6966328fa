"""
Data Service Factory
====================

Factory pattern for creating row storage instances based on configuration.
"""

import logging
from typing import Literal, Optional

from django.conf import settings

from .interface import DataServiceInterface
from .mock_service import MockDataService
from .supabase_adapter import SupabaseDataService

logger = logging.getLogger(__name__)

DataBackend = Literal["supabase", "mock"]


class DataFactory:
    """
    Factory for creating data service instances.

    Usage:
        # In settings.py
        INFRASTRUCTURE = {"DATA_BACKEND": "supabase"}

        # In your code
        data = DataFactory.create()
    """

    @staticmethod
    def create(backend: Optional[DataBackend] = None) -> DataServiceInterface:
        """
        Create a data service instance.

        Args:
            backend: Data backend type ('supabase' or 'mock')
                    If None, reads from settings.INFRASTRUCTURE['DATA_BACKEND']

        Returns:
            DataServiceInterface implementation

        Raises:
            ValueError: If backend type is invalid
        """
        backend_type = backend or settings.INFRASTRUCTURE.get("DATA_BACKEND", "supabase")

        logger.info(f"Creating data service: {backend_type}")

        if backend_type == "supabase":
            return SupabaseDataService()
        elif backend_type == "mock":
            return MockDataService()
        else:
            raise ValueError(f"Invalid data backend: {backend_type}. Must be 'supabase' or 'mock'")
