"""
Budget Sync engine

Normalizes bank merchant strings, matches them to the user's vendors and
suggests budget categories for imported transactions.
"""

# Expose main classes for easy imports
from .merchant_normalizer import normalize_vendor_name
from .similarity import string_similarity
from .vendor_matcher import MATCH_THRESHOLD, VendorResolution, VendorResolver
from .vendor_store import ExistingVendor, InMemoryVendorStore, PostgresVendorStore, StorageError
from .rule_matcher import CategorySuggestion, resolve_category, suggest_category

__all__ = [
    'normalize_vendor_name',
    'string_similarity',
    'MATCH_THRESHOLD',
    'VendorResolution',
    'VendorResolver',
    'ExistingVendor',
    'InMemoryVendorStore',
    'PostgresVendorStore',
    'StorageError',
    'CategorySuggestion',
    'resolve_category',
    'suggest_category',
]
