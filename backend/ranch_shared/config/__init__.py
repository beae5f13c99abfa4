"""
Configuration module: Settings, logging, constants.
"""

from ranch_shared.config.settings import settings, get_settings
from ranch_shared.config.logging import get_logger, setup_logging
from ranch_shared.config.constants import (
    Roles,
    AnimalStatus,
    TransactionType,
    EquipmentStatus,
    Limits,
)

__all__ = [
    # settings
    "settings",
    "get_settings",
    # logging
    "get_logger",
    "setup_logging",
    # constants
    "Roles",
    "AnimalStatus",
    "TransactionType",
    "EquipmentStatus",
    "Limits",
]
