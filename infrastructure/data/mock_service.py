"""
Mock Data Service
=================

In-memory implementation of DataServiceInterface for testing and development.
"""

import copy
import logging
import re
import threading
import uuid
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple

from .interface import DataServiceException, DataServiceInterface, Row

logger = logging.getLogger(__name__)

_EMBED_PATTERN = re.compile(r"^(\w+)\((.*)\)$")


class MockDataService(DataServiceInterface):
    """
    Mock data service holding tables in memory.

    Instead of talking to the hosted backend, this service:
        - Keeps one list of rows per collection
        - Resolves embedded resources (``services(*)``) through ``<singular>_id`` columns
        - Records every call for verification
        - Fails on demand for collections listed in ``failing_reads`` / ``failing_writes``
    """

    def __init__(self, tables: Optional[Dict[str, List[Row]]] = None):
        self._lock = threading.Lock()
        self.tables: Dict[str, List[Row]] = {name: [dict(row) for row in rows] for name, rows in (tables or {}).items()}
        self.calls: List[Tuple[str, str]] = []
        self.failing_reads: Set[str] = set()
        self.failing_writes: Set[str] = set()

    def seed(self, collection: str, rows: Iterable[Row]) -> None:
        with self._lock:
            self.tables.setdefault(collection, []).extend(dict(row) for row in rows)

    def rows(self, collection: str) -> List[Row]:
        return copy.deepcopy(self.tables.get(collection, []))

    def calls_to(self, operation: str, collection: str) -> int:
        return self.calls.count((operation, collection))

    def _record(self, operation: str, collection: str, failing: Set[str]) -> None:
        self.calls.append((operation, collection))
        if collection in failing:
            logger.info(f"[MOCK DATA] Simulated {operation} failure on {collection}")
            raise DataServiceException(f"Simulated {operation} failure on {collection}")

    @staticmethod
    def _matches(row: Row, filters: Optional[Dict[str, Any]]) -> bool:
        return all(str(row.get(column)) == str(value) for column, value in (filters or {}).items())

    def _project(self, row: Row, columns: str) -> Row:
        result: Row = {}
        for column in [c.strip() for c in columns.split(",") if c.strip()]:
            embed = _EMBED_PATTERN.match(column)
            if column == "*":
                result.update(row)
            elif embed:
                name = embed.group(1)
                foreign_key = f"{name[:-1] if name.endswith('s') else name}_id"
                related = next(
                    (r for r in self.tables.get(name, []) if str(r.get("id")) == str(row.get(foreign_key))),
                    None,
                )
                result[name] = dict(related) if related is not None else None
            else:
                result[column] = row.get(column)
        return result

    def select(
        self,
        collection: str,
        columns: str = "*",
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        access_token: Optional[str] = None,
    ) -> List[Row]:
        self._record("select", collection, self.failing_reads)
        with self._lock:
            rows = [row for row in self.tables.get(collection, []) if self._matches(row, filters)]
            if order:
                column, _, direction = order.partition(".")
                rows = sorted(rows, key=lambda r: str(r.get(column, "")), reverse=direction == "desc")
            return [copy.deepcopy(self._project(row, columns)) for row in rows]

    def insert(self, collection: str, rows: List[Row], access_token: Optional[str] = None) -> List[Row]:
        self._record("insert", collection, self.failing_writes)
        with self._lock:
            stored = [{"id": str(uuid.uuid4()), **row} for row in rows]
            self.tables.setdefault(collection, []).extend(stored)
            return copy.deepcopy(stored)

    def update(
        self, collection: str, values: Row, filters: Dict[str, Any], access_token: Optional[str] = None
    ) -> List[Row]:
        self._record("update", collection, self.failing_writes)
        with self._lock:
            updated = []
            for row in self.tables.get(collection, []):
                if self._matches(row, filters):
                    row.update(values)
                    updated.append(copy.deepcopy(row))
            return updated

    def upsert(self, collection: str, rows: List[Row], access_token: Optional[str] = None) -> List[Row]:
        self._record("upsert", collection, self.failing_writes)
        with self._lock:
            table = self.tables.setdefault(collection, [])
            stored = []
            for row in rows:
                existing = next((r for r in table if "id" in row and str(r.get("id")) == str(row["id"])), None)
                if existing is not None:
                    existing.update(row)
                    stored.append(copy.deepcopy(existing))
                else:
                    new_row = {"id": str(uuid.uuid4()), **row}
                    table.append(new_row)
                    stored.append(copy.deepcopy(new_row))
            return stored

    def delete(self, collection: str, filters: Dict[str, Any], access_token: Optional[str] = None) -> None:
        self._record("delete", collection, self.failing_writes)
        with self._lock:
            self.tables[collection] = [r for r in self.tables.get(collection, []) if not self._matches(r, filters)]
