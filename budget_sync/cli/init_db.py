#!/usr/bin/env python3
"""
Database initialization script

Creates the budget_sync tables and, optionally, seeds a user's categories
from the category keyword vocabulary.
"""
import argparse
import sys
from pathlib import Path
from typing import List, Tuple

import psycopg2

from budget_sync.core.category_rules import HIGH_CONFIDENCE_RULES, MEDIUM_CONFIDENCE_RULES
from budget_sync.utils.db_connection import default_owner, get_db_connection
from budget_sync.utils.logging_setup import configure_logging

SCHEMA_FILE = Path(__file__).parent.parent / "db" / "schema.sql"


def run_sql_file(conn, sql_file: Path, description: str):
    """Execute a SQL file"""
    print(f"\n📄 {description}")
    print(f"   File: {sql_file}")

    sql = sql_file.read_text()

    cursor = conn.cursor()
    try:
        cursor.execute(sql)
        conn.commit()
        print("   ✅ Success")
    except psycopg2.Error as e:
        conn.rollback()
        print(f"   ❌ Error: {e}")
        raise
    finally:
        cursor.close()


def default_categories() -> List[Tuple[str, str]]:
    """(category, group) pairs used by the keyword rules, in rule order"""
    seen = []
    for _, category, group in HIGH_CONFIDENCE_RULES + MEDIUM_CONFIDENCE_RULES:
        if (category, group) not in seen:
            seen.append((category, group))
    return seen


def seed_categories(conn, owner: str):
    """Give a user one category per keyword so suggestions resolve"""
    print(f"\n📚 Seeding categories for {owner}")

    cursor = conn.cursor()
    try:
        cursor.execute("SELECT COUNT(*) FROM categories WHERE user_id = %s", (owner,))
        if cursor.fetchone()[0] > 0:
            print("   ⚠️  User already has categories, skipping")
            return

        rows = [
            (owner, category, group, order)
            for order, (category, group) in enumerate(default_categories())
        ]
        cursor.executemany("""
            INSERT INTO categories (user_id, name, group_name, display_order)
            VALUES (%s, %s, %s, %s)
        """, rows)
        conn.commit()
        print(f"   ✅ Created {len(rows)} categories")

    except psycopg2.Error as e:
        conn.rollback()
        print(f"   ❌ Error: {e}")
        raise
    finally:
        cursor.close()


def print_summary(conn):
    """Print database summary"""
    cursor = conn.cursor()

    print("\n" + "=" * 80)
    print("📊 DATABASE SUMMARY")
    print("=" * 80)

    for table in ('vendors', 'vendor_mappings', 'categories', 'transactions'):
        cursor.execute(f"SELECT COUNT(*) FROM {table}")
        print(f"{table}: {cursor.fetchone()[0]}")

    print("=" * 80)

    cursor.close()


def main():
    """Main initialization function"""
    parser = argparse.ArgumentParser(description='Initialize the budget_sync database')
    parser.add_argument('--seed-user', default=default_owner(),
                        help='Seed default categories for this user id (default: BUDGET_SYNC_USER_ID)')
    args = parser.parse_args()

    configure_logging()

    print("=" * 80)
    print("🚀 BUDGET SYNC DATABASE INITIALIZATION")
    print("=" * 80)

    # Connect to database
    print("\n🔌 Connecting to database...")
    try:
        conn = get_db_connection()
        print("   ✅ Connected")
    except psycopg2.Error as e:
        print(f"   ❌ Connection failed: {e}")
        sys.exit(1)

    try:
        run_sql_file(conn, SCHEMA_FILE, "Creating database schema")

        if args.seed_user:
            seed_categories(conn, args.seed_user)

        print_summary(conn)

        print("\n✅ Database initialization complete!")
        print("\nNext steps:")
        print("  1. Import transactions: budget-sync-import /path/to/statement.csv --user <id>")

    except psycopg2.Error as e:
        print(f"\n❌ Initialization failed: {e}")
        sys.exit(1)
    finally:
        conn.close()


if __name__ == "__main__":
    main()
