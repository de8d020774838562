"""
Bank Feed Sync

Turns one account's bank-feed transactions into rows ready for insertion.
Fetching the feed and inserting rows are left to the caller.

Feed sign convention: positive amount = money spent. Stored rows use the
budget convention: negative = expense, positive = income.
"""
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, Iterable, List, Set

from .vendor_matcher import VendorResolver, remember_vendor
from .vendor_store import ExistingVendor
from ..utils.logging_setup import get_logger

logger = get_logger(__name__)

FEED_DESCRIPTION_PREFIX = '[LF] '


@dataclass(frozen=True)
class FeedTransaction:
    """One transaction as delivered by the bank feed"""
    id: str
    account_id: int
    amount: Decimal
    currency: str
    date: str
    merchant: str
    description: str
    is_pending: bool

    @classmethod
    def from_dict(cls, data: Dict) -> 'FeedTransaction':
        return cls(
            id=str(data['id']),
            account_id=int(data['accountId']),
            amount=Decimal(str(data['amount'])),
            currency=data.get('currency') or 'GBP',
            date=data['date'],
            merchant=data.get('merchant') or '',
            description=data.get('description') or '',
            is_pending=bool(data.get('isPending', False)),
        )


@dataclass
class SyncBatch:
    """Rows to insert for one account, plus how many were already imported"""
    rows: List[Dict] = field(default_factory=list)
    skipped: int = 0
    pending: int = 0


def sync_feed_transactions(resolver: VendorResolver,
                           owner: str,
                           account_id: str,
                           feed_transactions: Iterable[FeedTransaction],
                           existing_vendors: List[ExistingVendor],
                           known_external_ids: Set[str]) -> SyncBatch:
    """
    Prepare new feed transactions for one account.

    Args:
        resolver: Vendor resolver bound to the user's store
        owner: User scope
        account_id: Budget account the rows belong to
        feed_transactions: Transactions fetched from the feed
        existing_vendors: User's vendors; new vendors are appended in place
        known_external_ids: Feed ids already imported for this user (updated in place)

    Returns:
        SyncBatch with insertable rows in feed order
    """
    batch = SyncBatch()

    for feed_txn in feed_transactions:
        if feed_txn.is_pending:
            batch.pending += 1
            continue
        if feed_txn.id in known_external_ids:
            batch.skipped += 1
            continue

        merchant_name = feed_txn.merchant or feed_txn.description or 'Unknown'

        # A vendor created here must be visible to the next row
        resolution = resolver.resolve(owner, merchant_name, existing_vendors)
        remember_vendor(existing_vendors, resolution)

        is_expense = feed_txn.amount > 0
        amount = -abs(feed_txn.amount) if is_expense else abs(feed_txn.amount)

        batch.rows.append({
            'user_id': owner,
            'account_id': account_id,
            'amount': amount,
            'type': 'expense' if is_expense else 'income',
            'date': feed_txn.date,
            'vendor': resolution.vendor_name,
            'vendor_id': resolution.vendor_id or None,
            'description': f"{FEED_DESCRIPTION_PREFIX}{feed_txn.description or merchant_name}",
            'external_id': feed_txn.id,
        })
        # Same id twice in one payload is imported once
        known_external_ids.add(feed_txn.id)

    logger.info(
        "Prepared %d feed rows for account %s (%d already imported, %d pending)",
        len(batch.rows), account_id, batch.skipped, batch.pending,
    )
    return batch
