"""
Budget Sync

Vendor matching and category suggestion for bank-feed syncs and CSV imports.
"""

__version__ = "1.0.0"
