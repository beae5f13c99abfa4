"""
Operations endpoints: inventory, equipment, maintenance records, documents.

Static sub-paths (/low-stock, /stats) are declared before the /{id} routes
so they are matched first.
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from ranch_api.routers._common import current_user, get_db, get_user_id, updates_from
from ranch_api.schemas import (
    DocumentCreate,
    DocumentOutput,
    DocumentStatsOutput,
    DocumentUpdate,
    EquipmentCreate,
    EquipmentOutput,
    EquipmentUpdate,
    InventoryItemCreate,
    InventoryItemOutput,
    InventoryItemUpdate,
    MaintenanceRecordCreate,
    MaintenanceRecordOutput,
    MaintenanceRecordUpdate,
)
from ranch_api.services.operations import (
    DocumentService,
    EquipmentService,
    InventoryService,
    MaintenanceRecordService,
)


router = APIRouter(prefix="/api", tags=["operations"])


# =============================================================================
# Inventory
# =============================================================================


@router.get("/inventory", response_model=list[InventoryItemOutput])
def list_inventory(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[InventoryItemOutput]:
    return InventoryService(db).list_all(get_user_id(user))


@router.get("/inventory/low-stock", response_model=list[InventoryItemOutput])
def list_low_stock(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[InventoryItemOutput]:
    """Items whose quantity is at or below their minimum threshold."""
    return InventoryService(db).list_low_stock(get_user_id(user))


@router.get("/inventory/{item_id}", response_model=InventoryItemOutput)
def get_inventory_item(
    item_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> InventoryItemOutput:
    return InventoryService(db).get_by_id(item_id, get_user_id(user))


@router.post("/inventory", response_model=InventoryItemOutput, status_code=status.HTTP_201_CREATED)
def create_inventory_item(
    body: InventoryItemCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> InventoryItemOutput:
    return InventoryService(db).create(body.model_dump(), get_user_id(user))


@router.put("/inventory/{item_id}", response_model=InventoryItemOutput)
@router.patch("/inventory/{item_id}", response_model=InventoryItemOutput)
def update_inventory_item(
    item_id: int,
    body: InventoryItemUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> InventoryItemOutput:
    return InventoryService(db).update(item_id, updates_from(body), get_user_id(user))


@router.delete("/inventory/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_inventory_item(
    item_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    InventoryService(db).delete(item_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Equipment
# =============================================================================


@router.get("/equipment", response_model=list[EquipmentOutput])
def list_equipment(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[EquipmentOutput]:
    return EquipmentService(db).list_all(get_user_id(user))


@router.get("/equipment/{equipment_id}", response_model=EquipmentOutput)
def get_equipment(
    equipment_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> EquipmentOutput:
    return EquipmentService(db).get_by_id(equipment_id, get_user_id(user))


@router.post("/equipment", response_model=EquipmentOutput, status_code=status.HTTP_201_CREATED)
def create_equipment(
    body: EquipmentCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> EquipmentOutput:
    return EquipmentService(db).create(body.model_dump(), get_user_id(user))


@router.put("/equipment/{equipment_id}", response_model=EquipmentOutput)
@router.patch("/equipment/{equipment_id}", response_model=EquipmentOutput)
def update_equipment(
    equipment_id: int,
    body: EquipmentUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> EquipmentOutput:
    return EquipmentService(db).update(equipment_id, updates_from(body), get_user_id(user))


@router.delete("/equipment/{equipment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_equipment(
    equipment_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    EquipmentService(db).delete(equipment_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/equipment/{equipment_id}/maintenance-records",
    response_model=list[MaintenanceRecordOutput],
)
def list_equipment_maintenance(
    equipment_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[MaintenanceRecordOutput]:
    return MaintenanceRecordService(db).list_for_equipment(equipment_id, get_user_id(user))


# =============================================================================
# Maintenance Records
# =============================================================================


@router.get("/maintenance-records", response_model=list[MaintenanceRecordOutput])
def list_maintenance_records(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[MaintenanceRecordOutput]:
    return MaintenanceRecordService(db).list_all(get_user_id(user))


@router.post(
    "/maintenance-records",
    response_model=MaintenanceRecordOutput,
    status_code=status.HTTP_201_CREATED,
)
def create_maintenance_record(
    body: MaintenanceRecordCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> MaintenanceRecordOutput:
    return MaintenanceRecordService(db).create(body.model_dump(), get_user_id(user))


@router.get("/maintenance-records/{record_id}", response_model=MaintenanceRecordOutput)
def get_maintenance_record(
    record_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> MaintenanceRecordOutput:
    return MaintenanceRecordService(db).get_by_id(record_id, get_user_id(user))


@router.put("/maintenance-records/{record_id}", response_model=MaintenanceRecordOutput)
@router.patch("/maintenance-records/{record_id}", response_model=MaintenanceRecordOutput)
def update_maintenance_record(
    record_id: int,
    body: MaintenanceRecordUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> MaintenanceRecordOutput:
    return MaintenanceRecordService(db).update(record_id, updates_from(body), get_user_id(user))


@router.delete("/maintenance-records/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_maintenance_record(
    record_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    MaintenanceRecordService(db).delete(record_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Documents
# =============================================================================


@router.get("/documents", response_model=list[DocumentOutput])
def list_documents(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[DocumentOutput]:
    return DocumentService(db).list_all(get_user_id(user))


@router.get("/documents/stats", response_model=DocumentStatsOutput)
def get_document_stats(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> DocumentStatsOutput:
    """Totals, recent uploads, expiring documents and storage usage."""
    return DocumentService(db).stats(get_user_id(user))


@router.get("/documents/{document_id}", response_model=DocumentOutput)
def get_document(
    document_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> DocumentOutput:
    return DocumentService(db).get_by_id(document_id, get_user_id(user))


@router.post("/documents", response_model=DocumentOutput, status_code=status.HTTP_201_CREATED)
def create_document(
    body: DocumentCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> DocumentOutput:
    """Register document metadata. File bytes are stored elsewhere."""
    return DocumentService(db).create(body.model_dump(), get_user_id(user))


@router.put("/documents/{document_id}", response_model=DocumentOutput)
@router.patch("/documents/{document_id}", response_model=DocumentOutput)
def update_document(
    document_id: int,
    body: DocumentUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> DocumentOutput:
    return DocumentService(db).update(document_id, updates_from(body), get_user_id(user))


@router.delete("/documents/{document_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_document(
    document_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    DocumentService(db).delete(document_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
