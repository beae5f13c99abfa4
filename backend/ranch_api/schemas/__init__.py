"""
Pydantic request/response schemas.
"""

from ranch_api.schemas.common import ErrorResponse, ErrorDetail
from ranch_api.schemas.livestock import (
    AnimalCreate,
    AnimalUpdate,
    AnimalOutput,
    HealthRecordCreate,
    HealthRecordUpdate,
    HealthRecordOutput,
    BreedingRecordCreate,
    BreedingRecordUpdate,
    BreedingRecordOutput,
)
from ranch_api.schemas.finance import (
    TransactionCreate,
    TransactionUpdate,
    TransactionOutput,
    BudgetCreate,
    BudgetUpdate,
    BudgetOutput,
    AccountCreate,
    AccountUpdate,
    AccountOutput,
    JournalEntryCreate,
    JournalEntryUpdate,
    JournalEntryOutput,
    CategoryTotalOutput,
    FinancialSummaryOutput,
    BudgetStatusOutput,
    TrialBalanceLineOutput,
    TrialBalanceOutput,
)
from ranch_api.schemas.operations import (
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemOutput,
    EquipmentCreate,
    EquipmentUpdate,
    EquipmentOutput,
    MaintenanceRecordCreate,
    MaintenanceRecordUpdate,
    MaintenanceRecordOutput,
    DocumentCreate,
    DocumentUpdate,
    DocumentOutput,
    DocumentStatsOutput,
)
from ranch_api.schemas.users import (
    UserOutput,
    UserSyncRequest,
    ProfileUpdate,
    NotificationSettingsUpdate,
    NotificationSettingsOutput,
    AdminUserCreate,
    RoleUpdate,
    SystemStatsOutput,
    DashboardStatsOutput,
)
