"""
Database connection utilities
"""
import os
from typing import Optional

import psycopg2
from dotenv import load_dotenv


# Load environment variables
load_dotenv()


def get_db_connection(
    host: Optional[str] = None,
    port: Optional[int] = None,
    database: Optional[str] = None,
    user: Optional[str] = None,
    password: Optional[str] = None
):
    """
    Get database connection using environment variables or provided values

    Args:
        host: Database host (default: from DB_HOST env var)
        port: Database port (default: from DB_PORT env var)
        database: Database name (default: from DB_NAME env var)
        user: Database user (default: from DB_USER env var)
        password: Database password (default: from DB_PASSWORD env var)

    Returns:
        psycopg2 connection object
    """
    return psycopg2.connect(
        host=host or os.getenv('DB_HOST', 'localhost'),
        port=port or int(os.getenv('DB_PORT', '5432')),
        database=database or os.getenv('DB_NAME', 'budget_db'),
        user=user or os.getenv('DB_USER', 'budget_user'),
        password=password or os.getenv('DB_PASSWORD', '')
    )


def default_owner() -> Optional[str]:
    """User id the CLI acts for when none is passed (BUDGET_SYNC_USER_ID)"""
    return os.getenv('BUDGET_SYNC_USER_ID') or None
