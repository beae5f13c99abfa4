"""
Operations schemas: inventory, equipment, maintenance records, documents.
"""

import datetime

from pydantic import BaseModel, Field

from ranch_api.schemas.common import (
    EquipmentStatus,
    LongText,
    Money,
    MoneyOut,
    Name,
    Quantity,
    ShortText,
    SmallMoney,
)


# =============================================================================
# Inventory
# =============================================================================


class InventoryItemCreate(BaseModel):
    name: Name
    category: Name
    quantity: Quantity
    unit: Name
    cost_per_unit: SmallMoney | None = None
    supplier: ShortText | None = None
    location: ShortText | None = None
    expiry_date: datetime.date | None = None
    min_threshold: Quantity | None = None
    notes: LongText | None = None


class InventoryItemUpdate(BaseModel):
    name: Name | None = None
    category: Name | None = None
    quantity: Quantity | None = None
    unit: Name | None = None
    cost_per_unit: SmallMoney | None = None
    supplier: ShortText | None = None
    location: ShortText | None = None
    expiry_date: datetime.date | None = None
    min_threshold: Quantity | None = None
    notes: LongText | None = None


class InventoryItemOutput(BaseModel):
    id: int
    user_id: str
    name: str
    category: str
    quantity: MoneyOut
    unit: str
    cost_per_unit: MoneyOut | None = None
    supplier: str | None = None
    location: str | None = None
    expiry_date: datetime.date | None = None
    min_threshold: MoneyOut | None = None
    notes: str | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime | None = None

    class Config:
        from_attributes = True


# =============================================================================
# Equipment and Maintenance
# =============================================================================


class EquipmentCreate(BaseModel):
    name: Name
    type: Name
    model: ShortText | None = None
    manufacturer: ShortText | None = None
    serial_number: ShortText | None = None
    purchase_date: datetime.date | None = None
    purchase_price: Money | None = None
    current_value: Money | None = None
    warranty_expiry: datetime.date | None = None
    status: EquipmentStatus = "operational"
    location: ShortText | None = None
    notes: LongText | None = None


class EquipmentUpdate(BaseModel):
    name: Name | None = None
    type: Name | None = None
    model: ShortText | None = None
    manufacturer: ShortText | None = None
    serial_number: ShortText | None = None
    purchase_date: datetime.date | None = None
    purchase_price: Money | None = None
    current_value: Money | None = None
    warranty_expiry: datetime.date | None = None
    status: EquipmentStatus | None = None
    location: ShortText | None = None
    notes: LongText | None = None


class EquipmentOutput(BaseModel):
    id: int
    user_id: str
    name: str
    type: str
    model: str | None = None
    manufacturer: str | None = None
    serial_number: str | None = None
    purchase_date: datetime.date | None = None
    purchase_price: MoneyOut | None = None
    current_value: MoneyOut | None = None
    warranty_expiry: datetime.date | None = None
    status: str
    location: str | None = None
    notes: str | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime | None = None

    class Config:
        from_attributes = True


class MaintenanceRecordCreate(BaseModel):
    equipment_id: int
    type: Name
    description: LongText | None = None
    date: datetime.date
    cost: SmallMoney | None = None
    performed_by: ShortText | None = None
    next_maintenance_date: datetime.date | None = None
    notes: LongText | None = None


class MaintenanceRecordUpdate(BaseModel):
    type: Name | None = None
    description: LongText | None = None
    date: datetime.date | None = None
    cost: SmallMoney | None = None
    performed_by: ShortText | None = None
    next_maintenance_date: datetime.date | None = None
    notes: LongText | None = None


class MaintenanceRecordOutput(BaseModel):
    id: int
    user_id: str
    equipment_id: int
    type: str
    description: str | None = None
    date: datetime.date
    cost: MoneyOut | None = None
    performed_by: str | None = None
    next_maintenance_date: datetime.date | None = None
    notes: str | None = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True


# =============================================================================
# Documents
# =============================================================================


class DocumentCreate(BaseModel):
    title: Name
    category: Name
    description: LongText | None = None
    file_url: Name
    file_name: Name
    file_size: int | None = Field(default=None, ge=0)
    mime_type: ShortText | None = None
    tags: list[str] | None = None
    is_public: bool = False
    expiry_date: datetime.date | None = None
    reminder_date: datetime.date | None = None
    related_entity_type: ShortText | None = None
    related_entity_id: int | None = None


class DocumentUpdate(BaseModel):
    title: Name | None = None
    category: Name | None = None
    description: LongText | None = None
    file_url: Name | None = None
    file_name: Name | None = None
    file_size: int | None = Field(default=None, ge=0)
    mime_type: ShortText | None = None
    tags: list[str] | None = None
    is_public: bool | None = None
    expiry_date: datetime.date | None = None
    reminder_date: datetime.date | None = None
    related_entity_type: ShortText | None = None
    related_entity_id: int | None = None


class DocumentOutput(BaseModel):
    id: int
    user_id: str
    title: str
    category: str
    description: str | None = None
    file_url: str
    file_name: str
    file_size: int | None = None
    mime_type: str | None = None
    tags: list[str] | None = None
    is_public: bool
    expiry_date: datetime.date | None = None
    reminder_date: datetime.date | None = None
    related_entity_type: str | None = None
    related_entity_id: int | None = None
    uploaded_by: str | None = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True


class DocumentStatsOutput(BaseModel):
    total_documents: int
    recent_uploads: int
    expiring_soon: int
    categories: int
    total_size: int
    storage_used_percent: float
