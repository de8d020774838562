"""Shared fixtures: in-memory vendor stores, some of which fail on purpose."""

import pytest

from budget_sync.core.vendor_store import ExistingVendor, InMemoryVendorStore, StorageError

OWNER = 'user-1'


class FlakyVendorStore(InMemoryVendorStore):
    """In-memory store whose operations can be told to fail."""

    def __init__(self, *args, fail_on=(), **kwargs):
        super().__init__(*args, **kwargs)
        self.fail_on = set(fail_on)
        self.calls = []

    def _maybe_fail(self, operation):
        self.calls.append(operation)
        if operation in self.fail_on:
            raise StorageError(operation, 'connection reset')

    def find_mapping(self, owner, raw_key):
        self._maybe_fail('find_mapping')
        return super().find_mapping(owner, raw_key)

    def insert_mapping(self, owner, raw_key, vendor_id):
        self._maybe_fail('insert_mapping')
        super().insert_mapping(owner, raw_key, vendor_id)

    def insert_vendor(self, owner, name):
        self._maybe_fail('insert_vendor')
        return super().insert_vendor(owner, name)

    def list_vendors(self, owner):
        self._maybe_fail('list_vendors')
        return super().list_vendors(owner)


@pytest.fixture
def owner():
    return OWNER


@pytest.fixture
def store():
    return InMemoryVendorStore()


@pytest.fixture
def vendors():
    return [
        ExistingVendor('v-tesco', 'Tesco'),
        ExistingVendor('v-netflix', 'Netflix'),
        ExistingVendor('v-pret', 'Pret A Manger'),
    ]


@pytest.fixture
def flaky_store():
    def _make(*fail_on):
        return FlakyVendorStore(fail_on=fail_on)
    return _make
