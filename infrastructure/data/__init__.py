"""
Data Abstraction Layer
======================

Provides a unified interface for row storage on the hosted backend.
"""

from .factory import DataFactory
from .interface import DataServiceException, DataServiceInterface, Row
from .mock_service import MockDataService
from .supabase_adapter import SupabaseDataService

__all__ = [
    "DataServiceInterface",
    "DataServiceException",
    "Row",
    "SupabaseDataService",
    "MockDataService",
    "DataFactory",
]
