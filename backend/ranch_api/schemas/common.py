"""
Shared Pydantic types used across the API schemas.
"""

from decimal import Decimal
from typing import Annotated, Literal

from pydantic import BaseModel, Field, PlainSerializer

from ranch_shared.config.constants import Limits


# =============================================================================
# Common Types
# =============================================================================

Role = Literal["user", "manager", "admin"]
AnimalStatus = Literal["active", "sold", "deceased", "quarantine"]
HealthRecordType = Literal["vaccination", "treatment", "checkup", "deworming", "test"]
BreedingStatus = Literal["pregnant", "overdue", "born"]
TransactionType = Literal["income", "expense"]
BudgetPeriod = Literal["weekly", "monthly", "quarterly", "yearly"]
AccountType = Literal["asset", "liability", "equity", "revenue", "expense"]
JournalStatus = Literal["draft", "posted"]
EquipmentStatus = Literal["operational", "maintenance", "repair", "retired"]

# Decimals are accepted as JSON numbers or numeric strings and rendered as
# JSON numbers on the way out.
_as_number = PlainSerializer(lambda v: float(v), return_type=float, when_used="json")

Money = Annotated[
    Decimal, Field(max_digits=Limits.MONEY_PRECISION, decimal_places=Limits.MONEY_SCALE), _as_number
]
NonNegativeMoney = Annotated[
    Decimal,
    Field(ge=0, max_digits=Limits.MONEY_PRECISION, decimal_places=Limits.MONEY_SCALE),
    _as_number,
]
Percent = Annotated[int, Field(ge=0, le=100)]
SmallMoney = Annotated[Decimal, Field(max_digits=10, decimal_places=2), _as_number]
Quantity = Annotated[
    Decimal, Field(max_digits=Limits.QUANTITY_PRECISION, decimal_places=Limits.QUANTITY_SCALE), _as_number
]
Weight = Annotated[
    Decimal, Field(max_digits=Limits.WEIGHT_PRECISION, decimal_places=Limits.WEIGHT_SCALE), _as_number
]

# Output side: no precision constraints, values come from the database
MoneyOut = Annotated[Decimal, _as_number]

Name = Annotated[str, Field(min_length=1, max_length=Limits.MAX_NAME_LENGTH)]
ShortText = Annotated[str, Field(max_length=Limits.MAX_NAME_LENGTH)]
LongText = Annotated[str, Field(max_length=Limits.MAX_TEXT_LENGTH)]


class ErrorDetail(BaseModel):
    field: str
    message: str
    type: str


class ErrorResponse(BaseModel):
    """Body of 4xx/5xx responses."""

    detail: str
    errors: list[ErrorDetail] | None = None
