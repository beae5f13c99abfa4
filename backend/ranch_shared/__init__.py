"""
Shared building blocks for the Ranch Manager backend.

STRUCTURE:
- ranch_shared.config: Configuration
  - settings.py: Environment config (pydantic-settings)
  - logging.py: Structured logging
  - constants.py: Roles, entity status values, limits

- ranch_shared.infrastructure: Database access
  - providers.py: Multi-backend DatabaseProvider (PostgreSQL, MySQL, SQLite)
  - db.py: Request-scoped sessions, safe_commit()
  - correlation.py: Request correlation IDs

- ranch_shared.security: Authentication and throttling
  - auth.py: Bearer token verification, current_user_context
  - rate_limit.py: slowapi limiter

- ranch_shared.utils: Utilities
  - exceptions.py: HTTP exceptions with auto-logging
  - money.py: Decimal helpers for amounts and quantities

IMPORT EXAMPLES:
    from ranch_shared.config.settings import settings
    from ranch_shared.infrastructure.providers import DatabaseProvider, DatabaseConfig
    from ranch_shared.infrastructure.db import get_db, safe_commit
    from ranch_shared.security.auth import current_user_context
    from ranch_shared.utils.exceptions import NotFoundError, ForbiddenError
"""
