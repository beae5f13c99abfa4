"""
Infrastructure module: database provider, sessions and request correlation.

Provides:
- Backend adapters and the process-wide provider (providers.py)
- Request sessions and commit helpers (db.py)
- Correlation IDs for logging (correlation.py)
"""

from ranch_shared.infrastructure.providers import (
    DatabaseAdapter,
    DatabaseConfig,
    DatabaseProvider,
    MySQLAdapter,
    PostgreSQLAdapter,
    SQLiteAdapter,
)
from ranch_shared.infrastructure.db import (
    get_db,
    get_db_context,
    safe_commit,
)

__all__ = [
    # providers
    "DatabaseAdapter",
    "DatabaseConfig",
    "DatabaseProvider",
    "MySQLAdapter",
    "PostgreSQLAdapter",
    "SQLiteAdapter",
    # db
    "get_db",
    "get_db_context",
    "safe_commit",
]
