"""
Finance schemas: transactions, budgets, accounts, journal entries and the
aggregation reports built on them.
"""

import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from ranch_api.schemas.common import (
    AccountType,
    BudgetPeriod,
    JournalStatus,
    LongText,
    Money,
    MoneyOut,
    NonNegativeMoney,
    Percent,
    Name,
    ShortText,
    TransactionType,
)


# =============================================================================
# Transactions
# =============================================================================


class TransactionCreate(BaseModel):
    type: TransactionType
    category: Name
    description: LongText | None = None
    amount: Money
    date: datetime.date
    payment_method: ShortText | None = None
    receipt_url: ShortText | None = None
    tags: list[str] | None = None


class TransactionUpdate(BaseModel):
    type: TransactionType | None = None
    category: Name | None = None
    description: LongText | None = None
    amount: Money | None = None
    date: datetime.date | None = None
    payment_method: ShortText | None = None
    receipt_url: ShortText | None = None
    tags: list[str] | None = None


class TransactionOutput(BaseModel):
    id: int
    user_id: str
    type: str
    category: str
    description: str | None = None
    amount: MoneyOut
    date: datetime.date
    payment_method: str | None = None
    receipt_url: str | None = None
    tags: list[str] | None = None
    created_at: datetime.datetime

    class Config:
        from_attributes = True


# =============================================================================
# Budgets
# =============================================================================


class BudgetCreate(BaseModel):
    name: Name
    category: Name
    budgeted_amount: NonNegativeMoney
    period: BudgetPeriod = "monthly"
    start_date: datetime.date
    end_date: datetime.date
    alert_threshold: Percent = 80
    is_active: bool = True
    notes: LongText | None = None

    @model_validator(mode="after")
    def check_dates(self) -> "BudgetCreate":
        if self.end_date < self.start_date:
            raise ValueError("end_date must be on or after start_date")
        return self


class BudgetUpdate(BaseModel):
    name: Name | None = None
    category: Name | None = None
    budgeted_amount: NonNegativeMoney | None = None
    period: BudgetPeriod | None = None
    start_date: datetime.date | None = None
    end_date: datetime.date | None = None
    alert_threshold: Percent | None = None
    is_active: bool | None = None
    notes: LongText | None = None


class BudgetOutput(BaseModel):
    id: int
    user_id: str
    name: str
    category: str
    budgeted_amount: MoneyOut
    period: str
    start_date: datetime.date
    end_date: datetime.date
    alert_threshold: int
    is_active: bool
    notes: str | None = None
    created_at: datetime.datetime
    updated_at: datetime.datetime | None = None

    class Config:
        from_attributes = True


# =============================================================================
# Accounts and Journal Entries
# =============================================================================


class AccountCreate(BaseModel):
    account_number: Name
    name: Name
    type: AccountType
    sub_type: ShortText | None = None
    balance: Money = Decimal("0.00")
    is_active: bool = True


class AccountUpdate(BaseModel):
    account_number: Name | None = None
    name: Name | None = None
    type: AccountType | None = None
    sub_type: ShortText | None = None
    balance: Money | None = None
    is_active: bool | None = None


class AccountOutput(BaseModel):
    id: int
    user_id: str
    account_number: str
    name: str
    type: str
    sub_type: str | None = None
    balance: MoneyOut
    is_active: bool
    created_at: datetime.datetime
    updated_at: datetime.datetime | None = None

    class Config:
        from_attributes = True


class JournalEntryCreate(BaseModel):
    entry_number: Name
    date: datetime.date
    description: LongText = Field(min_length=1)
    reference: ShortText | None = None
    total_debit: Money
    total_credit: Money
    status: JournalStatus = "draft"


class JournalEntryUpdate(BaseModel):
    entry_number: Name | None = None
    date: datetime.date | None = None
    description: LongText | None = None
    reference: ShortText | None = None
    total_debit: Money | None = None
    total_credit: Money | None = None
    status: JournalStatus | None = None


class JournalEntryOutput(BaseModel):
    id: int
    user_id: str
    entry_number: str
    date: datetime.date
    description: str
    reference: str | None = None
    total_debit: MoneyOut
    total_credit: MoneyOut
    status: str
    created_at: datetime.datetime
    updated_at: datetime.datetime | None = None

    class Config:
        from_attributes = True


# =============================================================================
# Reports
# =============================================================================


class CategoryTotalOutput(BaseModel):
    category: str
    amount: MoneyOut


class FinancialSummaryOutput(BaseModel):
    total_income: MoneyOut
    total_expenses: MoneyOut
    net_profit: MoneyOut
    income_by_category: list[CategoryTotalOutput]
    expenses_by_category: list[CategoryTotalOutput]


class BudgetStatusOutput(BaseModel):
    budget_id: int
    name: str
    category: str
    period: str
    budgeted_amount: MoneyOut
    spent: MoneyOut
    remaining: MoneyOut
    percent_used: float
    alert_threshold: int
    window_start: datetime.date | None = None
    window_end: datetime.date | None = None
    status: str
    is_alert: bool


class TrialBalanceLineOutput(BaseModel):
    account_id: int
    account_number: str
    name: str
    type: str
    debit: MoneyOut
    credit: MoneyOut


class TrialBalanceOutput(BaseModel):
    accounts: list[TrialBalanceLineOutput]
    total_debit: MoneyOut
    total_credit: MoneyOut
    is_balanced: bool
