"""
Import Orchestrator

Prepares parsed CSV rows for insertion:
1. Vendor resolution (stored mapping, fuzzy match or new vendor)
2. Category suggestion from the keyword rules
3. Suggestion resolved against the user's own categories

Nothing is auto-applied silently: every row keeps its suggestion so the
user can override it, and anything short of a high-confidence hit on an
existing category is flagged for review.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, List, Optional

from .rule_matcher import HIGH, CategorySuggestion, resolve_category, suggest_category
from .vendor_matcher import VendorResolver, remember_vendor
from .vendor_store import ExistingVendor


@dataclass
class ImportTransaction:
    """Transaction data structure"""
    txn_date: str
    payee: str
    description: str
    amount: Decimal
    type: str  # 'payment' or 'income'
    source: str
    source_row_hash: str

    # Will be filled by the orchestrator
    vendor_id: Optional[str] = None
    vendor: Optional[str] = None
    suggestion: Optional[CategorySuggestion] = None
    category_id: Optional[str] = None
    needs_review: bool = True


class ImportOrchestrator:
    """
    Orchestrates vendor resolution and category suggestion for an import
    """

    def __init__(self, resolver: VendorResolver, categories: List[Dict]):
        """
        Args:
            resolver: Vendor resolver bound to a store
            categories: The user's categories (dicts with 'id' and 'name')
        """
        self.resolver = resolver
        self.categories = categories

        # Stats
        self.stats = {
            'total': 0,
            'new_vendors': 0,
            'suggested': 0,
            'auto_categorized': 0,
            'needs_review': 0,
        }

    def categorize_transaction(self,
                               owner: str,
                               txn: ImportTransaction,
                               existing_vendors: List[ExistingVendor]) -> ImportTransaction:
        """
        Resolve the vendor and suggest a category for one transaction.

        A newly created vendor is appended to existing_vendors so later rows
        in the same import reuse it.
        """
        self.stats['total'] += 1

        # Step 1: Vendor
        resolution = self.resolver.resolve(owner, txn.payee, existing_vendors)
        txn.vendor = resolution.vendor_name
        txn.vendor_id = resolution.vendor_id or None
        remember_vendor(existing_vendors, resolution)
        if resolution.is_new:
            self.stats['new_vendors'] += 1

        # Income is left for the user to file
        if txn.type == 'income':
            txn.needs_review = True
            self.stats['needs_review'] += 1
            return txn

        # Step 2: Suggestion (raw payee first, it carries more brand detail)
        suggestion = suggest_category(txn.payee) or suggest_category(resolution.vendor_name)
        txn.suggestion = suggestion
        if suggestion is None:
            txn.needs_review = True
            self.stats['needs_review'] += 1
            return txn
        self.stats['suggested'] += 1

        # Step 3: Map onto the user's categories
        category = resolve_category(suggestion, self.categories)
        txn.category_id = category['id'] if category else None
        txn.needs_review = not (category and suggestion.confidence == HIGH)

        if txn.needs_review:
            self.stats['needs_review'] += 1
        else:
            self.stats['auto_categorized'] += 1
        return txn

    def categorize_batch(self,
                         owner: str,
                         transactions: List[ImportTransaction],
                         existing_vendors: List[ExistingVendor]) -> List[ImportTransaction]:
        """
        Categorize transactions in file order.

        Rows are handled strictly one after another: each may add a vendor
        that the next one should match.
        """
        return [
            self.categorize_transaction(owner, txn, existing_vendors)
            for txn in transactions
        ]

    def print_stats(self):
        """Print import statistics"""
        if self.stats['total'] == 0:
            print("No transactions categorized yet")
            return

        total = self.stats['total']

        print("\n" + "=" * 80)
        print("📊 IMPORT STATISTICS")
        print("=" * 80)
        print(f"Total transactions: {total}")
        print(f"  ➕ New vendors: {self.stats['new_vendors']}")
        print(f"  💡 Category suggested: {self.stats['suggested']} ({self.stats['suggested']/total*100:.1f}%)")
        print(f"  ✅ Auto-categorized: {self.stats['auto_categorized']} ({self.stats['auto_categorized']/total*100:.1f}%)")
        print(f"  ⚠️  Needs review: {self.stats['needs_review']} ({self.stats['needs_review']/total*100:.1f}%)")
        print("=" * 80)


def transactions_from_rows(rows: List[Dict]) -> List[ImportTransaction]:
    """Build ImportTransaction objects from csv_parser output"""
    return [
        ImportTransaction(
            txn_date=row['txn_date'],
            payee=row['payee'],
            description=row['description'],
            amount=row['amount'],
            type=row['type'],
            source=row['source'],
            source_row_hash=row['source_row_hash'],
        )
        for row in rows
    ]
