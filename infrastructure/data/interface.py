"""
Data Service Interface
======================

Abstract base class defining the contract for row storage on the hosted backend.
Collections used by the storefront: services, orders, reviews, profiles, messages.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

Row = Dict[str, Any]


class DataServiceInterface(ABC):
    """
    Abstract interface for row-oriented create/read/update/delete.

    Concrete implementations:
        - SupabaseDataService: PostgREST over HTTP
        - MockDataService: In-memory tables for testing

    Filters are equality matches ({"developer_id": "ai-genix"}). ``columns`` follows
    the PostgREST select syntax, including embedded resources such as ``services(*)``.
    """

    @abstractmethod
    def select(
        self,
        collection: str,
        columns: str = "*",
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> List[Row]:
        """
        Read rows from a collection.

        Args:
            collection: Collection (table) name
            columns: Columns to return, PostgREST syntax
            filters: Equality filters
            order: Sort expression, e.g. "created_at.desc"
            access_token: Bearer token of the signed-in user (anon key if None)

        Returns:
            List of rows

        Raises:
            DataServiceException: If the read fails
        """
        pass

    @abstractmethod
    def insert(self, collection: str, rows: List[Row], access_token: Optional[str] = None) -> List[Row]:
        """
        Insert rows as a single batch.

        Returns:
            Inserted rows as stored remotely

        Raises:
            DataServiceException: If the write fails (no row is written)
        """
        pass

    @abstractmethod
    def update(
        self, collection: str, values: Row, filters: Dict[str, Any], access_token: Optional[str] = None
    ) -> List[Row]:
        """
        Update matching rows.

        Returns:
            Updated rows

        Raises:
            DataServiceException: If the write fails
        """
        pass

    @abstractmethod
    def upsert(self, collection: str, rows: List[Row], access_token: Optional[str] = None) -> List[Row]:
        """
        Insert rows, merging on primary key conflicts.

        Raises:
            DataServiceException: If the write fails
        """
        pass

    @abstractmethod
    def delete(self, collection: str, filters: Dict[str, Any], access_token: Optional[str] = None) -> None:
        """
        Delete matching rows.

        Raises:
            DataServiceException: If the delete fails
        """
        pass


class DataServiceException(Exception):
    """Base exception for data service operations."""

    pass
