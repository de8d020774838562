"""Tests for the psycopg2-backed vendor store, against a mocked connection."""

from unittest.mock import MagicMock

import psycopg2
import pytest

from budget_sync.core.vendor_matcher import VendorResolution, VendorResolver
from budget_sync.core.vendor_store import ExistingVendor, PostgresVendorStore, StorageError


@pytest.fixture
def conn():
    connection = MagicMock()
    connection.cursor.return_value = MagicMock()
    return connection


def cursor_of(conn):
    return conn.cursor.return_value


class TestPostgresVendorStore:

    def test_find_mapping_hit(self, conn):
        cursor_of(conn).fetchall.return_value = [('v-1',)]

        assert PostgresVendorStore(conn).find_mapping('user-1', 'TESCO') == 'v-1'
        _, params = cursor_of(conn).execute.call_args[0]
        assert params == ('user-1', 'TESCO')

    def test_find_mapping_miss(self, conn):
        cursor_of(conn).fetchall.return_value = []
        assert PostgresVendorStore(conn).find_mapping('user-1', 'TESCO') is None

    def test_insert_mapping_upserts_and_commits(self, conn):
        PostgresVendorStore(conn).insert_mapping('user-1', 'TESCO', 'v-1')

        sql, params = cursor_of(conn).execute.call_args[0]
        assert 'ON CONFLICT (user_id, raw_name) DO UPDATE' in sql
        assert params == ('user-1', 'TESCO', 'v-1')
        conn.commit.assert_called_once()

    def test_insert_vendor_returns_row(self, conn):
        cursor_of(conn).fetchone.return_value = ('v-9', 'Tesco')

        vendor = PostgresVendorStore(conn).insert_vendor('user-1', 'Tesco')

        assert vendor == ExistingVendor('v-9', 'Tesco')
        conn.commit.assert_called_once()

    def test_insert_vendor_without_returned_row(self, conn):
        cursor_of(conn).fetchone.return_value = None
        with pytest.raises(StorageError, match='no row returned'):
            PostgresVendorStore(conn).insert_vendor('user-1', 'Tesco')

    def test_database_error_becomes_storage_error(self, conn):
        cursor_of(conn).execute.side_effect = psycopg2.OperationalError('server closed the connection')

        with pytest.raises(StorageError) as excinfo:
            PostgresVendorStore(conn).list_vendors('user-1')

        assert excinfo.value.operation == 'list_vendors'
        conn.rollback.assert_called_once()
        cursor_of(conn).close.assert_called_once()

    @pytest.mark.parametrize('operation, args', [
        ('find_mapping', ('user-1', 'TESCO')),
        ('insert_mapping', ('user-1', 'TESCO', 'v-1')),
        ('insert_vendor', ('user-1', 'Tesco')),
        ('list_vendors', ('user-1',)),
    ])
    def test_closed_connection_becomes_storage_error(self, conn, operation, args):
        conn.cursor.side_effect = psycopg2.InterfaceError('connection already closed')
        conn.rollback.side_effect = psycopg2.InterfaceError('connection already closed')

        with pytest.raises(StorageError) as excinfo:
            getattr(PostgresVendorStore(conn), operation)(*args)

        assert excinfo.value.operation == operation

    def test_closed_connection_does_not_stop_a_batch(self, conn):
        conn.cursor.side_effect = psycopg2.InterfaceError('connection already closed')
        conn.rollback.side_effect = psycopg2.InterfaceError('connection already closed')

        results = VendorResolver(PostgresVendorStore(conn)).resolve_batch('user-1', ['TESCO', 'NETFLIX'], [])

        assert results == [
            VendorResolution('', 'Tesco', is_new=True),
            VendorResolution('', 'Netflix', is_new=True),
        ]

    def test_list_categories(self, conn):
        cursor_of(conn).fetchall.return_value = [('c-1', 'Groceries', 'Food')]

        assert PostgresVendorStore(conn).list_categories('user-1') == [
            {'id': 'c-1', 'name': 'Groceries', 'group_name': 'Food'},
        ]
