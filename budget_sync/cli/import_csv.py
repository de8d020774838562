#!/usr/bin/env python3
"""
Transaction import CLI

Imports a bank CSV export: resolves vendors, suggests categories and
inserts the transactions.
"""
import argparse
import sys
from pathlib import Path
from typing import List

import psycopg2

from budget_sync.core.csv_parser import PRESETS, parse_bank_csv
from budget_sync.core.import_orchestrator import (
    ImportOrchestrator,
    ImportTransaction,
    transactions_from_rows,
)
from budget_sync.core.vendor_matcher import VendorResolver
from budget_sync.core.vendor_store import InMemoryVendorStore, PostgresVendorStore, StorageError
from budget_sync.utils.db_connection import default_owner, get_db_connection
from budget_sync.utils.logging_setup import configure_logging


def insert_transactions(conn, owner: str, transactions: List[ImportTransaction]):
    """Insert transactions into database with deduplication"""
    cursor = conn.cursor()

    inserted = 0
    duplicates = 0
    errors = 0

    for txn in transactions:
        try:
            cursor.execute("""
                INSERT INTO transactions (
                    user_id, txn_date, amount, type,
                    vendor, vendor_id, category_id, description,
                    needs_review, source, source_row_hash
                )
                VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)
            """, (
                owner, txn.txn_date, txn.amount, txn.type,
                txn.vendor, txn.vendor_id, txn.category_id, txn.description,
                txn.needs_review, txn.source, txn.source_row_hash,
            ))

            conn.commit()  # Commit each row so one failure doesn't drop the rest
            inserted += 1

        except psycopg2.IntegrityError:
            conn.rollback()
            duplicates += 1
        except psycopg2.Error as e:
            conn.rollback()
            print(f"⚠️  Error: {e}")
            print(f"   Transaction: {txn.payee[:50]}")
            errors += 1

    cursor.close()

    return inserted, duplicates, errors


def print_sample(categorized: List[ImportTransaction], limit: int = 10):
    print(f"\n📋 Sample Results (first {limit}):")
    for i, txn in enumerate(categorized[:limit], 1):
        status = "✅" if not txn.needs_review else "⚠️ "
        if txn.suggestion:
            guess = f"{txn.suggestion.category_keyword} ({txn.suggestion.confidence})"
        else:
            guess = "no suggestion"
        print(f"{status} {i:2d}. {txn.payee[:36]:<36} → {txn.vendor:<24} | {guess}")

    if len(categorized) > limit:
        print(f"       ... and {len(categorized) - limit} more")


def main():
    """Main import function"""
    parser = argparse.ArgumentParser(description='Import bank CSV transactions')
    parser.add_argument('csv_file', help='Path to bank CSV export')
    parser.add_argument('--preset', choices=sorted(PRESETS), default='generic',
                        help='CSV layout (default: generic)')
    parser.add_argument('--user', default=default_owner(),
                        help='User id to import for (default: BUDGET_SYNC_USER_ID)')
    parser.add_argument('--dry-run', action='store_true',
                        help='Resolve and suggest in memory only; no database needed')
    parser.add_argument('--log-level', default=None, help='Logging level (default: INFO)')

    args = parser.parse_args()
    configure_logging(args.log_level)

    csv_path = Path(args.csv_file)
    if not csv_path.exists():
        print(f"❌ File not found: {csv_path}")
        sys.exit(1)
    if not args.user and not args.dry_run:
        print("❌ No user id: pass --user or set BUDGET_SYNC_USER_ID")
        sys.exit(1)
    owner = args.user or 'dry-run'

    print("=" * 80)
    print("📥 TRANSACTION IMPORT")
    print("=" * 80)
    print(f"CSV File: {csv_path}")
    print(f"Preset: {PRESETS[args.preset].display_name}")
    print(f"Dry Run: {args.dry_run}")
    print("=" * 80)

    conn = None
    if args.dry_run:
        store = InMemoryVendorStore()
    else:
        print("\n🔌 Connecting to database...")
        try:
            conn = get_db_connection()
            print("   ✅ Connected")
        except psycopg2.Error as e:
            print(f"   ❌ Connection failed: {e}")
            sys.exit(1)
        store = PostgresVendorStore(conn)

    try:
        print("\n📄 Parsing CSV file...")
        rows = parse_bank_csv(csv_path, args.preset)
        print(f"   ✅ Parsed {len(rows)} rows")

        print("\n📚 Loading vendors and categories...")
        try:
            existing_vendors = store.list_vendors(owner)
        except StorageError as e:
            # Matching still works, it just can't reuse old vendors
            print(f"   ⚠️  {e}; continuing with no known vendors")
            existing_vendors = []
        categories = store.list_categories(owner)
        print(f"   ✅ {len(existing_vendors)} vendors, {len(categories)} categories")

        resolver = VendorResolver(store)
        orchestrator = ImportOrchestrator(resolver, categories)

        print(f"\n🏷️  Categorizing {len(rows)} transactions...")
        categorized = orchestrator.categorize_batch(
            owner, transactions_from_rows(rows), existing_vendors
        )

        resolver.print_stats()
        orchestrator.print_stats()
        print_sample(categorized)

        if args.dry_run:
            print("\n🔍 DRY RUN - Not inserting into database")
        else:
            print("\n💾 Inserting into database...")
            inserted, duplicates, errors = insert_transactions(conn, owner, categorized)

            print(f"   ✅ Inserted: {inserted}")
            if duplicates > 0:
                print(f"   ⏭️  Skipped (duplicates): {duplicates}")
            if errors > 0:
                print(f"   ❌ Errors: {errors}")

        needs_review = [t for t in categorized if t.needs_review]
        if needs_review:
            print(f"\n⚠️  {len(needs_review)} transactions need review")
        else:
            print("\n✅ All transactions categorized with high confidence!")

        print("\n" + "=" * 80)
        print("✅ Import complete!")
        print("=" * 80)

    except (ValueError, StorageError) as e:
        print(f"\n❌ Import failed: {e}")
        sys.exit(1)
    finally:
        if conn is not None:
            conn.close()


if __name__ == "__main__":
    main()
