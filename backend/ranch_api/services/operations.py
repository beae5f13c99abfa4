"""
Operations services: inventory, equipment, maintenance records, documents.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone
from typing import Any

from sqlalchemy.orm import Session

from ranch_api.models import Document, Equipment, InventoryItem, MaintenanceRecord
from ranch_api.schemas import (
    DocumentOutput,
    DocumentStatsOutput,
    EquipmentOutput,
    InventoryItemOutput,
    MaintenanceRecordOutput,
)
from ranch_api.services.base_service import OwnedCRUDService
from ranch_api.services.predicates import is_expiring_soon, is_low_stock
from ranch_shared.config.constants import Limits
from ranch_shared.config.logging import mask_user_id
from ranch_shared.config.settings import settings
from ranch_shared.utils.exceptions import NotFoundError, ValidationError


class InventoryService(OwnedCRUDService[InventoryItem, InventoryItemOutput]):
    required_fields = frozenset({"name", "category", "quantity", "unit"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=InventoryItem,
            output_schema=InventoryItemOutput,
            entity_name="Inventory item",
        )

    def low_stock_entities(self, user_id: str) -> list[InventoryItem]:
        # Decimal comparison happens in Python; the columns are decimal strings
        items = self._repo.find_all(user_id, order_by=[InventoryItem.name.asc(), InventoryItem.id.asc()])
        return [item for item in items if is_low_stock(item)]

    def list_low_stock(self, user_id: str) -> list[InventoryItemOutput]:
        """Items at or below their threshold, ordered by name."""
        return [self.to_output(item) for item in self.low_stock_entities(user_id)]


class EquipmentService(OwnedCRUDService[Equipment, EquipmentOutput]):
    required_fields = frozenset({"name", "type", "status"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Equipment,
            output_schema=EquipmentOutput,
            entity_name="Equipment",
        )


class MaintenanceRecordService(OwnedCRUDService[MaintenanceRecord, MaintenanceRecordOutput]):
    required_fields = frozenset({"type", "date"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=MaintenanceRecord,
            output_schema=MaintenanceRecordOutput,
            entity_name="Maintenance record",
        )

    def default_order(self):
        return [MaintenanceRecord.date.desc(), MaintenanceRecord.id.desc()]

    def _require_equipment(self, equipment_id: int, user_id: str) -> None:
        if not EquipmentService(self._db).repo.exists(equipment_id, user_id):
            raise NotFoundError("Equipment", equipment_id, user_id=mask_user_id(user_id))

    def list_for_equipment(self, equipment_id: int, user_id: str) -> list[MaintenanceRecordOutput]:
        self._require_equipment(equipment_id, user_id)
        return self.list_all(user_id, MaintenanceRecord.equipment_id == equipment_id)

    def _validate_create(self, data: dict[str, Any], user_id: str) -> None:
        self._require_equipment(data["equipment_id"], user_id)


class DocumentService(OwnedCRUDService[Document, DocumentOutput]):
    """
    Document metadata. The file itself is stored elsewhere; only its
    declared size and mime type are checked against the upload settings.
    """

    required_fields = frozenset({"title", "category", "file_url", "file_name", "is_public"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Document,
            output_schema=DocumentOutput,
            entity_name="Document",
        )

    def _check_file(self, data: dict[str, Any]) -> None:
        size = data.get("file_size")
        if size is not None and size > settings.max_file_size:
            raise ValidationError(
                f"File size exceeds the {settings.max_file_size} byte limit",
                field="file_size",
                value=size,
            )
        mime_type = data.get("mime_type")
        if mime_type is not None and mime_type not in settings.allowed_mime_type_list:
            raise ValidationError(
                f"Mime type '{mime_type}' is not allowed",
                field="mime_type",
                value=mime_type,
            )

    def _validate_create(self, data: dict[str, Any], user_id: str) -> None:
        self._check_file(data)
        data.setdefault("uploaded_by", user_id)

    def _validate_update(self, entity: Document, data: dict[str, Any], user_id: str) -> None:
        self._check_file(data)

    def stats(self, user_id: str, today: date | None = None) -> DocumentStatsOutput:
        today = today or date.today()
        documents = self._repo.find_all(user_id)

        recent_since = datetime.combine(
            today - timedelta(days=Limits.RECENT_UPLOAD_DAYS), time.min, tzinfo=timezone.utc
        )
        recent = 0
        for doc in documents:
            created = doc.created_at
            # SQLite hands back naive datetimes
            if created.tzinfo is None:
                created = created.replace(tzinfo=timezone.utc)
            if created >= recent_since:
                recent += 1

        total_size = sum(doc.file_size or 0 for doc in documents)

        return DocumentStatsOutput(
            total_documents=len(documents),
            recent_uploads=recent,
            expiring_soon=sum(1 for doc in documents if is_expiring_soon(doc, today)),
            categories=len({doc.category for doc in documents}),
            total_size=total_size,
            storage_used_percent=round(total_size / Limits.STORAGE_QUOTA_BYTES * 100, 2),
        )
