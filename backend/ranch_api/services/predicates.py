"""
Derived-state predicates.

Each rule is defined once here and used by every endpoint that reports it
(dashboard counts, low-stock list, document stats, breeding status), so the
counts and the lists can never disagree.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Any

from ranch_shared.config.constants import BreedingStatus, EquipmentStatus, Limits


def is_low_stock(item: Any) -> bool:
    """Quantity at or below the item's threshold. No threshold means never low."""
    if item.min_threshold is None or item.quantity is None:
        return False
    return item.quantity <= item.min_threshold


def is_health_alert(record: Any, today: date) -> bool:
    """Follow-up due today or already past."""
    return record.next_due_date is not None and record.next_due_date <= today


def is_expiring_soon(document: Any, today: date) -> bool:
    """Expiry within the next EXPIRING_SOON_DAYS days (already expired counts)."""
    if document.expiry_date is None:
        return False
    return document.expiry_date <= today + timedelta(days=Limits.EXPIRING_SOON_DAYS)


def has_equipment_issue(equipment: Any) -> bool:
    return equipment.status in EquipmentStatus.ISSUES


def breeding_status(record: Any, today: date) -> str:
    if record.actual_birth_date is not None:
        return BreedingStatus.BORN
    if record.expected_birth_date is not None and record.expected_birth_date < today:
        return BreedingStatus.OVERDUE
    return BreedingStatus.PREGNANT
