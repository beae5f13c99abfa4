"""
Centralized constants for the backend application.

Usage:
    from ranch_shared.config.constants import AnimalStatus, EquipmentStatus

    if animal.status == AnimalStatus.ACTIVE:
        ...

    if equipment.status in EquipmentStatus.ISSUES:
        ...
"""

from typing import Final


# =============================================================================
# User Roles
# =============================================================================


class Roles:
    """User role constants."""

    USER: Final[str] = "user"
    MANAGER: Final[str] = "manager"
    ADMIN: Final[str] = "admin"

    ALL: Final[list[str]] = [USER, MANAGER, ADMIN]


# =============================================================================
# Database Backends
# =============================================================================


class DatabaseType:
    """Supported relational backends."""

    POSTGRESQL: Final[str] = "postgresql"
    MYSQL: Final[str] = "mysql"
    SQLITE: Final[str] = "sqlite"

    ALL: Final[list[str]] = [POSTGRESQL, MYSQL, SQLITE]


# =============================================================================
# Livestock
# =============================================================================


class AnimalStatus:
    """Animal registry status."""

    ACTIVE: Final[str] = "active"
    SOLD: Final[str] = "sold"
    DECEASED: Final[str] = "deceased"
    QUARANTINE: Final[str] = "quarantine"

    ALL: Final[list[str]] = [ACTIVE, SOLD, DECEASED, QUARANTINE]


class HealthRecordType:
    VACCINATION: Final[str] = "vaccination"
    TREATMENT: Final[str] = "treatment"
    CHECKUP: Final[str] = "checkup"
    DEWORMING: Final[str] = "deworming"
    TEST: Final[str] = "test"

    ALL: Final[list[str]] = [VACCINATION, TREATMENT, CHECKUP, DEWORMING, TEST]


class BreedingStatus:
    """Derived at read time from the record's dates, never stored."""

    PREGNANT: Final[str] = "pregnant"
    OVERDUE: Final[str] = "overdue"
    BORN: Final[str] = "born"


# =============================================================================
# Finance
# =============================================================================


class TransactionType:
    INCOME: Final[str] = "income"
    EXPENSE: Final[str] = "expense"

    ALL: Final[list[str]] = [INCOME, EXPENSE]


class BudgetPeriod:
    WEEKLY: Final[str] = "weekly"
    MONTHLY: Final[str] = "monthly"
    QUARTERLY: Final[str] = "quarterly"
    YEARLY: Final[str] = "yearly"

    ALL: Final[list[str]] = [WEEKLY, MONTHLY, QUARTERLY, YEARLY]


class BudgetState:
    """Budget status buckets reported by the budget-status endpoint."""

    OK: Final[str] = "ok"
    WARNING: Final[str] = "warning"
    OVER: Final[str] = "over"


class AccountType:
    """Chart-of-accounts types and their normal balance side."""

    ASSET: Final[str] = "asset"
    LIABILITY: Final[str] = "liability"
    EQUITY: Final[str] = "equity"
    REVENUE: Final[str] = "revenue"
    EXPENSE: Final[str] = "expense"

    ALL: Final[list[str]] = [ASSET, LIABILITY, EQUITY, REVENUE, EXPENSE]
    DEBIT_NORMAL: Final[frozenset[str]] = frozenset({ASSET, EXPENSE})
    CREDIT_NORMAL: Final[frozenset[str]] = frozenset({LIABILITY, EQUITY, REVENUE})


class JournalStatus:
    DRAFT: Final[str] = "draft"
    POSTED: Final[str] = "posted"

    ALL: Final[list[str]] = [DRAFT, POSTED]


# =============================================================================
# Equipment
# =============================================================================


class EquipmentStatus:
    OPERATIONAL: Final[str] = "operational"
    MAINTENANCE: Final[str] = "maintenance"
    REPAIR: Final[str] = "repair"
    RETIRED: Final[str] = "retired"

    ALL: Final[list[str]] = [OPERATIONAL, MAINTENANCE, REPAIR, RETIRED]
    ISSUES: Final[list[str]] = [MAINTENANCE, REPAIR]  # Counted on the dashboard


# =============================================================================
# Validation Limits
# =============================================================================


class Limits:
    """Numeric limits and windows used across services."""

    # Decimal precision (digits, scale)
    MONEY_PRECISION: Final[int] = 12
    MONEY_SCALE: Final[int] = 2
    QUANTITY_PRECISION: Final[int] = 10
    QUANTITY_SCALE: Final[int] = 3
    WEIGHT_PRECISION: Final[int] = 8
    WEIGHT_SCALE: Final[int] = 2

    # Derived-state windows
    EXPIRING_SOON_DAYS: Final[int] = 30
    RECENT_UPLOAD_DAYS: Final[int] = 7

    # Budgets
    DEFAULT_ALERT_THRESHOLD: Final[int] = 80

    # Storage quota reported by the documents stats endpoint
    STORAGE_QUOTA_BYTES: Final[int] = 1024 * 1024 * 1024  # 1 GB

    # String lengths
    MAX_NAME_LENGTH: Final[int] = 255
    MAX_TEXT_LENGTH: Final[int] = 5000
