"""
Application services.

Architecture:
    Router (thin) -> Service (business logic) -> OwnedRepository -> Model
"""

from ranch_api.services.base_service import BaseService, OwnedCRUDService
from ranch_api.services.livestock import AnimalService, BreedingRecordService, HealthRecordService
from ranch_api.services.operations import (
    DocumentService,
    EquipmentService,
    InventoryService,
    MaintenanceRecordService,
)
from ranch_api.services.dashboard import DashboardService
from ranch_api.services.users import UserService

__all__ = [
    "BaseService",
    "OwnedCRUDService",
    "AnimalService",
    "BreedingRecordService",
    "HealthRecordService",
    "DocumentService",
    "EquipmentService",
    "InventoryService",
    "MaintenanceRecordService",
    "DashboardService",
    "UserService",
]
