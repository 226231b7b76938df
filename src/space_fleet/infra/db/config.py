from __future__ import annotations

import os


TRUTHY = {"1", "true", "yes", "on"}


def database_url() -> str:
    url = os.getenv("DATABASE_URL")

    if not url:
        raise RuntimeError("DATABASE_URL environment variable is not set")

    return url


def sql_echo() -> bool:
    """Log every SQL statement when SQL_ECHO is set to a truthy value."""
    return os.getenv("SQL_ECHO", "").strip().lower() in TRUTHY
