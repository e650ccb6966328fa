"""
Supabase Data Adapter
=====================

Concrete implementation of DataServiceInterface using the PostgREST API exposed
by the hosted backend.
"""

import logging
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings

from ..http import error_message
from .interface import DataServiceException, DataServiceInterface, Row

logger = logging.getLogger(__name__)


class SupabaseDataService(DataServiceInterface):
    """
    Row storage via PostgREST.

    Configuration (in settings.py):
        SUPABASE_URL: Project URL
        SUPABASE_ANON_KEY: Public anon key
        REMOTE_CALL_TIMEOUT_SECONDS: Timeout applied to every request
    """

    def __init__(self, http: Optional[requests.Session] = None):
        self.base_url = settings.SUPABASE_URL.rstrip("/") + "/rest/v1"
        self.anon_key = settings.SUPABASE_ANON_KEY
        self.timeout = settings.REMOTE_CALL_TIMEOUT_SECONDS
        self.http = http or requests.Session()

    def _headers(self, access_token: Optional[str], prefer: Optional[str] = None) -> Dict[str, str]:
        headers = {
            "apikey": self.anon_key,
            "Authorization": f"Bearer {access_token or self.anon_key}",
            "Content-Type": "application/json",
        }
        if prefer:
            headers["Prefer"] = prefer
        return headers

    @staticmethod
    def _filter_params(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
        return {column: f"eq.{value}" for column, value in (filters or {}).items()}

    def _request(
        self,
        method: str,
        collection: str,
        access_token: Optional[str],
        prefer: Optional[str] = None,
        **kwargs,
    ) -> requests.Response:
        try:
            response = self.http.request(
                method,
                f"{self.base_url}/{collection}",
                headers=self._headers(access_token, prefer),
                timeout=self.timeout,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.error(f"Data service request failed: {method} {collection}. Error: {str(e)}")
            raise DataServiceException(f"Data service unavailable: {str(e)}") from e

        if not response.ok:
            message = error_message(response)
            logger.warning(f"Data service {method} {collection} returned {response.status_code}: {message}")
            raise DataServiceException(message)
        return response

    @staticmethod
    def _rows(response: requests.Response, collection: str) -> List[Row]:
        """Decode a row list; a body that is not a JSON list of objects is a service error."""
        try:
            payload = response.json()
        except ValueError as e:
            logger.warning(f"Data service returned a malformed body for {collection}: {str(e)}")
            raise DataServiceException(f"Malformed response from data service: {str(e)}") from e
        if not isinstance(payload, list) or not all(isinstance(row, dict) for row in payload):
            raise DataServiceException("Malformed response from data service")
        return payload

    def select(
        self,
        collection: str,
        columns: str = "*",
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> List[Row]:
        params = {"select": columns, **self._filter_params(filters)}
        if order:
            params["order"] = order
        response = self._request("GET", collection, access_token, params=params)
        return self._rows(response, collection)

    def insert(self, collection: str, rows: List[Row], access_token: Optional[str] = None) -> List[Row]:
        response = self._request("POST", collection, access_token, prefer="return=representation", json=rows)
        logger.info(f"Inserted {len(rows)} row(s) into {collection}")
        return self._rows(response, collection)

    def update(
        self, collection: str, values: Row, filters: Dict[str, Any], access_token: Optional[str] = None
    ) -> List[Row]:
        if not filters:
            raise DataServiceException("Refusing to update without filters")
        response = self._request(
            "PATCH",
            collection,
            access_token,
            prefer="return=representation",
            params=self._filter_params(filters),
            json=values,
        )
        return self._rows(response, collection)

    def upsert(self, collection: str, rows: List[Row], access_token: Optional[str] = None) -> List[Row]:
        response = self._request(
            "POST",
            collection,
            access_token,
            prefer="resolution=merge-duplicates,return=representation",
            json=rows,
        )
        return self._rows(response, collection)

    def delete(self, collection: str, filters: Dict[str, Any], access_token: Optional[str] = None) -> None:
        if not filters:
            raise DataServiceException("Refusing to delete without filters")
        self._request("DELETE", collection, access_token, params=self._filter_params(filters))
        logger.info(f"Deleted rows from {collection} matching {sorted(filters)}")
