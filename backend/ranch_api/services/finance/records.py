"""
CRUD services for the financial ledger: transactions, budgets, accounts,
journal entries.
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from ranch_api.models import Account, Budget, JournalEntry, Transaction
from ranch_api.schemas import AccountOutput, BudgetOutput, JournalEntryOutput, TransactionOutput
from ranch_api.services.base_service import OwnedCRUDService
from ranch_shared.utils.exceptions import ValidationError


class TransactionService(OwnedCRUDService[Transaction, TransactionOutput]):
    required_fields = frozenset({"type", "category", "amount", "date"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Transaction,
            output_schema=TransactionOutput,
            entity_name="Transaction",
        )

    def default_order(self):
        return [Transaction.date.desc(), Transaction.created_at.desc(), Transaction.id.desc()]


class BudgetService(OwnedCRUDService[Budget, BudgetOutput]):
    required_fields = frozenset(
        {"name", "category", "budgeted_amount", "period", "start_date", "end_date",
         "alert_threshold", "is_active"}
    )

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Budget,
            output_schema=BudgetOutput,
            entity_name="Budget",
        )

    def _validate_update(self, entity: Budget, data: dict[str, Any], user_id: str) -> None:
        start = data.get("start_date", entity.start_date)
        end = data.get("end_date", entity.end_date)
        if end < start:
            raise ValidationError("end_date must be on or after start_date", field="end_date")


class AccountService(OwnedCRUDService[Account, AccountOutput]):
    required_fields = frozenset({"account_number", "name", "type", "balance", "is_active"})

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Account,
            output_schema=AccountOutput,
            entity_name="Account",
        )


class JournalEntryService(OwnedCRUDService[JournalEntry, JournalEntryOutput]):
    required_fields = frozenset(
        {"entry_number", "date", "description", "total_debit", "total_credit", "status"}
    )

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=JournalEntry,
            output_schema=JournalEntryOutput,
            entity_name="Journal entry",
        )

    def default_order(self):
        return [JournalEntry.date.desc(), JournalEntry.id.desc()]
