"""
Vendor Storage

Narrow storage interface used by the vendor resolution pipeline, with a
Postgres (psycopg2) implementation and an in-memory one for dry runs.
"""
import uuid
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Tuple

import psycopg2

from ..utils.logging_setup import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class ExistingVendor:
    """Vendor row as the matcher sees it"""
    id: str
    name: str


class StorageError(RuntimeError):
    """A storage read or write failed"""

    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation} failed: {message}")
        self.operation = operation


class VendorStore(Protocol):
    def find_mapping(self, owner: str, raw_key: str) -> Optional[str]:
        ...

    def insert_mapping(self, owner: str, raw_key: str, vendor_id: str) -> None:
        ...

    def insert_vendor(self, owner: str, name: str) -> ExistingVendor:
        ...

    def list_vendors(self, owner: str) -> List[ExistingVendor]:
        ...

    def list_categories(self, owner: str) -> List[Dict]:
        ...


class PostgresVendorStore:
    """
    Vendor store backed by the vendors / vendor_mappings / categories tables.

    Every write is committed immediately; a failed statement is rolled back
    on its own so one bad row never poisons the rest of an import. Any
    psycopg2 error, including a closed connection, surfaces as StorageError.
    """

    def __init__(self, conn):
        self.conn = conn

    def _rollback(self) -> None:
        try:
            self.conn.rollback()
        except psycopg2.Error as e:
            # Connection is already gone; the caller gets the original error
            logger.warning("Rollback failed: %s", e)

    def _fetch(self, operation: str, sql: str, params: Tuple) -> List[Tuple]:
        cursor = None
        try:
            cursor = self.conn.cursor()
            cursor.execute(sql, params)
            return cursor.fetchall()
        except psycopg2.Error as e:
            self._rollback()
            raise StorageError(operation, str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

    def find_mapping(self, owner: str, raw_key: str) -> Optional[str]:
        rows = self._fetch(
            'find_mapping',
            """
            SELECT vendor_id
            FROM vendor_mappings
            WHERE user_id = %s AND raw_name = %s
            """,
            (owner, raw_key),
        )
        return str(rows[0][0]) if rows else None

    def insert_mapping(self, owner: str, raw_key: str, vendor_id: str) -> None:
        cursor = None
        try:
            cursor = self.conn.cursor()
            # Upsert, not insert-once: the resolver repoints stale mappings,
            # and concurrent syncs racing on one raw name end last-write-wins
            cursor.execute("""
                INSERT INTO vendor_mappings (user_id, raw_name, vendor_id)
                VALUES (%s, %s, %s)
                ON CONFLICT (user_id, raw_name) DO UPDATE
                SET vendor_id = EXCLUDED.vendor_id
            """, (owner, raw_key, vendor_id))
            self.conn.commit()
        except psycopg2.Error as e:
            self._rollback()
            raise StorageError('insert_mapping', str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

    def insert_vendor(self, owner: str, name: str) -> ExistingVendor:
        cursor = None
        try:
            cursor = self.conn.cursor()
            cursor.execute("""
                INSERT INTO vendors (user_id, name)
                VALUES (%s, %s)
                RETURNING id, name
            """, (owner, name))
            row = cursor.fetchone()
            self.conn.commit()
        except psycopg2.Error as e:
            self._rollback()
            raise StorageError('insert_vendor', str(e)) from e
        finally:
            if cursor is not None:
                cursor.close()

        if row is None:
            raise StorageError('insert_vendor', 'no row returned')
        return ExistingVendor(id=str(row[0]), name=row[1])

    def list_vendors(self, owner: str) -> List[ExistingVendor]:
        rows = self._fetch(
            'list_vendors',
            "SELECT id, name FROM vendors WHERE user_id = %s ORDER BY created_at, id",
            (owner,),
        )
        return [ExistingVendor(id=str(row[0]), name=row[1]) for row in rows]

    def list_categories(self, owner: str) -> List[Dict]:
        rows = self._fetch(
            'list_categories',
            """
            SELECT id, name, group_name
            FROM categories
            WHERE user_id = %s
            ORDER BY display_order, name
            """,
            (owner,),
        )
        return [
            {'id': str(row[0]), 'name': row[1], 'group_name': row[2]}
            for row in rows
        ]


class InMemoryVendorStore:
    """Dict-backed store for dry runs; nothing leaves the process"""

    def __init__(self,
                 vendors: Optional[Dict[str, List[ExistingVendor]]] = None,
                 categories: Optional[Dict[str, List[Dict]]] = None):
        self.vendors: Dict[str, List[ExistingVendor]] = {
            owner: list(rows) for owner, rows in (vendors or {}).items()
        }
        self.categories: Dict[str, List[Dict]] = dict(categories or {})
        self.mappings: Dict[Tuple[str, str], str] = {}

    def find_mapping(self, owner: str, raw_key: str) -> Optional[str]:
        return self.mappings.get((owner, raw_key))

    def insert_mapping(self, owner: str, raw_key: str, vendor_id: str) -> None:
        self.mappings[(owner, raw_key)] = vendor_id

    def insert_vendor(self, owner: str, name: str) -> ExistingVendor:
        vendor = ExistingVendor(id=str(uuid.uuid4()), name=name)
        self.vendors.setdefault(owner, []).append(vendor)
        return vendor

    def delete_vendor(self, owner: str, vendor_id: str) -> None:
        """Remove a vendor; its mappings are left behind and go stale"""
        self.vendors[owner] = [
            v for v in self.vendors.get(owner, []) if v.id != vendor_id
        ]

    def list_vendors(self, owner: str) -> List[ExistingVendor]:
        return list(self.vendors.get(owner, []))

    def list_categories(self, owner: str) -> List[Dict]:
        return list(self.categories.get(owner, []))
