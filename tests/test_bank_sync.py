"""Tests for turning bank-feed transactions into budget rows."""

from decimal import Decimal

from budget_sync.core.bank_sync import (
    FEED_DESCRIPTION_PREFIX,
    FeedTransaction,
    sync_feed_transactions,
)
from budget_sync.core.vendor_matcher import VendorResolver


def feed_txn(txn_id, amount='12.50', merchant='TESCO STORES 2093', description='', pending=False):
    return FeedTransaction.from_dict({
        'id': txn_id,
        'accountId': 7,
        'amount': amount,
        'date': '2024-03-01',
        'merchant': merchant,
        'description': description,
        'isPending': pending,
    })


class TestFeedTransaction:

    def test_from_dict(self):
        txn = FeedTransaction.from_dict({
            'id': 991,
            'accountId': '7',
            'amount': 4.5,
            'currency': 'EUR',
            'date': '2024-03-01',
            'merchant': None,
            'description': 'CARD PAYMENT',
        })

        assert txn.id == '991'
        assert txn.account_id == 7
        assert txn.amount == Decimal('4.5')
        assert txn.currency == 'EUR'
        assert txn.merchant == ''
        assert txn.is_pending is False

    def test_currency_defaults_to_gbp(self):
        assert feed_txn('t1').currency == 'GBP'


class TestSyncFeedTransactions:

    def sync(self, store, owner, transactions, vendors=None, known=None):
        return sync_feed_transactions(
            VendorResolver(store), owner, 'acct-1', transactions,
            vendors if vendors is not None else [],
            known if known is not None else set(),
        )

    def test_spend_becomes_negative_expense(self, store, owner):
        [row] = self.sync(store, owner, [feed_txn('t1', '12.50')]).rows

        assert row['amount'] == Decimal('-12.50')
        assert row['type'] == 'expense'
        assert row['external_id'] == 't1'
        assert row['account_id'] == 'acct-1'
        assert row['user_id'] == owner

    def test_refund_becomes_positive_income(self, store, owner):
        [row] = self.sync(store, owner, [feed_txn('t1', '-30.00')]).rows

        assert row['amount'] == Decimal('30.00')
        assert row['type'] == 'income'

    def test_description_is_prefixed(self, store, owner):
        batch = self.sync(store, owner, [
            feed_txn('t1', description='Contactless'),
            feed_txn('t2'),
        ])

        assert batch.rows[0]['description'] == FEED_DESCRIPTION_PREFIX + 'Contactless'
        assert batch.rows[1]['description'] == '[LF] TESCO STORES 2093'

    def test_missing_merchant_falls_back(self, store, owner):
        batch = self.sync(store, owner, [
            feed_txn('t1', merchant='', description='OCTOPUS ENERGY'),
            feed_txn('t2', merchant='', description=''),
        ])

        assert [r['vendor'] for r in batch.rows] == ['Octopus Energy', 'Unknown']

    def test_pending_and_known_rows_are_skipped(self, store, owner):
        known = {'t1'}
        batch = self.sync(store, owner, [
            feed_txn('t1'),
            feed_txn('t2', pending=True),
            feed_txn('t3'),
            feed_txn('t3'),
        ], known=known)

        assert [r['external_id'] for r in batch.rows] == ['t3']
        assert batch.skipped == 2
        assert batch.pending == 1
        assert known == {'t1', 't3'}

    def test_vendor_created_once_per_sync(self, store, owner):
        vendors = []
        batch = self.sync(store, owner, [
            feed_txn('t1', merchant='PURE GYM LTD'),
            feed_txn('t2', merchant='PUREGYM'),
        ], vendors=vendors)

        assert batch.rows[0]['vendor_id'] == batch.rows[1]['vendor_id']
        assert len(vendors) == 1

    def test_existing_vendor_is_reused(self, store, owner, vendors):
        [row] = self.sync(store, owner, [feed_txn('t1', merchant='NETFLIX')], vendors=vendors).rows

        assert row['vendor_id'] == 'v-netflix'
        assert row['vendor'] == 'Netflix'

    def test_storage_failure_keeps_row_without_vendor_id(self, flaky_store, owner):
        [row] = self.sync(flaky_store('insert_vendor'), owner, [feed_txn('t1')]).rows

        assert row['vendor_id'] is None
        assert row['vendor'] == 'Tesco Stores 2093'
