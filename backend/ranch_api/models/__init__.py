"""
SQLAlchemy ORM Models Package.

All models are organized into domain-specific modules:
- base: Base class, OwnedMixin, UpdatedAtMixin, DecimalString, StringList
- user: User, UserSession, NotificationSettings
- livestock: Animal, HealthRecord, BreedingRecord
- finance: Transaction, Budget, Account, JournalEntry
- inventory: InventoryItem
- equipment: Equipment, MaintenanceRecord
- document: Document
"""

# Base classes
from .base import Base, OwnedMixin, UpdatedAtMixin, DecimalString, StringList

# Users
from .user import User, UserSession, NotificationSettings

# Livestock
from .livestock import Animal, HealthRecord, BreedingRecord

# Finance
from .finance import Transaction, Budget, Account, JournalEntry

# Inventory and equipment
from .inventory import InventoryItem
from .equipment import Equipment, MaintenanceRecord

# Documents
from .document import Document

__all__ = [
    "Base",
    "OwnedMixin",
    "UpdatedAtMixin",
    "DecimalString",
    "StringList",
    "User",
    "UserSession",
    "NotificationSettings",
    "Animal",
    "HealthRecord",
    "BreedingRecord",
    "Transaction",
    "Budget",
    "Account",
    "JournalEntry",
    "InventoryItem",
    "Equipment",
    "MaintenanceRecord",
    "Document",
]
