"""Tests for the default category seed list."""

from budget_sync.cli.init_db import SCHEMA_FILE, default_categories
from budget_sync.core.category_rules import GOING_OUT


class TestDefaultCategories:

    def test_pairs_are_unique_and_ordered(self):
        pairs = default_categories()

        assert len(pairs) == len(set(pairs))
        assert pairs[0] == ('Groceries', 'Food')
        assert ('Dining Out', GOING_OUT) in pairs

    def test_schema_file_ships_with_package(self):
        assert SCHEMA_FILE.exists()
        assert 'vendor_mappings' in SCHEMA_FILE.read_text()
