"""
Finance endpoints: transactions, budgets, accounts, journal entries and the
aggregated reports built on top of them.
"""

from dataclasses import asdict
from datetime import date

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from ranch_api.routers._common import current_user, get_db, get_user_id, updates_from
from ranch_api.schemas.common import BudgetPeriod
from ranch_api.schemas import (
    AccountCreate,
    AccountOutput,
    AccountUpdate,
    BudgetCreate,
    BudgetOutput,
    BudgetStatusOutput,
    BudgetUpdate,
    FinancialSummaryOutput,
    JournalEntryCreate,
    JournalEntryOutput,
    JournalEntryUpdate,
    TransactionCreate,
    TransactionOutput,
    TransactionUpdate,
    TrialBalanceOutput,
)
from ranch_api.services.finance import (
    AccountService,
    BudgetService,
    BudgetStatusService,
    FinancialSummaryService,
    JournalEntryService,
    TransactionService,
    TrialBalanceService,
)


router = APIRouter(prefix="/api", tags=["finance"])


# =============================================================================
# Transactions
# =============================================================================


@router.get("/transactions", response_model=list[TransactionOutput])
def list_transactions(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[TransactionOutput]:
    """List the caller's transactions, most recent date first."""
    return TransactionService(db).list_all(get_user_id(user))


@router.get("/transactions/{transaction_id}", response_model=TransactionOutput)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> TransactionOutput:
    return TransactionService(db).get_by_id(transaction_id, get_user_id(user))


@router.post("/transactions", response_model=TransactionOutput, status_code=status.HTTP_201_CREATED)
def create_transaction(
    body: TransactionCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> TransactionOutput:
    return TransactionService(db).create(body.model_dump(), get_user_id(user))


@router.put("/transactions/{transaction_id}", response_model=TransactionOutput)
@router.patch("/transactions/{transaction_id}", response_model=TransactionOutput)
def update_transaction(
    transaction_id: int,
    body: TransactionUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> TransactionOutput:
    return TransactionService(db).update(transaction_id, updates_from(body), get_user_id(user))


@router.delete("/transactions/{transaction_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    TransactionService(db).delete(transaction_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Budgets
# =============================================================================


@router.get("/budgets", response_model=list[BudgetOutput])
def list_budgets(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[BudgetOutput]:
    return BudgetService(db).list_all(get_user_id(user))


@router.get("/budgets/{budget_id}", response_model=BudgetOutput)
def get_budget(
    budget_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> BudgetOutput:
    return BudgetService(db).get_by_id(budget_id, get_user_id(user))


@router.post("/budgets", response_model=BudgetOutput, status_code=status.HTTP_201_CREATED)
def create_budget(
    body: BudgetCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> BudgetOutput:
    return BudgetService(db).create(body.model_dump(), get_user_id(user))


@router.put("/budgets/{budget_id}", response_model=BudgetOutput)
@router.patch("/budgets/{budget_id}", response_model=BudgetOutput)
def update_budget(
    budget_id: int,
    body: BudgetUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> BudgetOutput:
    return BudgetService(db).update(budget_id, updates_from(body), get_user_id(user))


@router.delete("/budgets/{budget_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_budget(
    budget_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    BudgetService(db).delete(budget_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Accounts
# =============================================================================


@router.get("/accounts", response_model=list[AccountOutput])
def list_accounts(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[AccountOutput]:
    """Chart of accounts ordered by account number."""
    return AccountService(db).list_all(get_user_id(user))


@router.get("/accounts/{account_id}", response_model=AccountOutput)
def get_account(
    account_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> AccountOutput:
    return AccountService(db).get_by_id(account_id, get_user_id(user))


@router.post("/accounts", response_model=AccountOutput, status_code=status.HTTP_201_CREATED)
def create_account(
    body: AccountCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> AccountOutput:
    return AccountService(db).create(body.model_dump(), get_user_id(user))


@router.put("/accounts/{account_id}", response_model=AccountOutput)
@router.patch("/accounts/{account_id}", response_model=AccountOutput)
def update_account(
    account_id: int,
    body: AccountUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> AccountOutput:
    return AccountService(db).update(account_id, updates_from(body), get_user_id(user))


@router.delete("/accounts/{account_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_account(
    account_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    AccountService(db).delete(account_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Journal Entries
# =============================================================================


@router.get("/journal-entries", response_model=list[JournalEntryOutput])
def list_journal_entries(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[JournalEntryOutput]:
    return JournalEntryService(db).list_all(get_user_id(user))


@router.get("/journal-entries/{entry_id}", response_model=JournalEntryOutput)
def get_journal_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> JournalEntryOutput:
    return JournalEntryService(db).get_by_id(entry_id, get_user_id(user))


@router.post("/journal-entries", response_model=JournalEntryOutput, status_code=status.HTTP_201_CREATED)
def create_journal_entry(
    body: JournalEntryCreate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> JournalEntryOutput:
    return JournalEntryService(db).create(body.model_dump(), get_user_id(user))


@router.put("/journal-entries/{entry_id}", response_model=JournalEntryOutput)
@router.patch("/journal-entries/{entry_id}", response_model=JournalEntryOutput)
def update_journal_entry(
    entry_id: int,
    body: JournalEntryUpdate,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> JournalEntryOutput:
    return JournalEntryService(db).update(entry_id, updates_from(body), get_user_id(user))


@router.delete("/journal-entries/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_journal_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> Response:
    JournalEntryService(db).delete(entry_id, get_user_id(user))
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Reports
# =============================================================================


@router.get("/financial-summary", response_model=FinancialSummaryOutput)
def get_financial_summary(
    start_date: date | None = Query(default=None),
    end_date: date | None = Query(default=None),
    start_date_alias: date | None = Query(default=None, alias="startDate"),
    end_date_alias: date | None = Query(default=None, alias="endDate"),
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> FinancialSummaryOutput:
    """
    Income, expenses and net profit with per-category breakdowns.

    Both bounds are optional and inclusive. Accepts ISO dates as
    start_date/end_date or startDate/endDate.
    """
    summary = FinancialSummaryService(db).summarize(
        get_user_id(user),
        start_date or start_date_alias,
        end_date or end_date_alias,
    )
    return FinancialSummaryOutput.model_validate(asdict(summary))


@router.get("/budget-status", response_model=list[BudgetStatusOutput])
def get_budget_status(
    period: BudgetPeriod | None = Query(default=None),
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> list[BudgetStatusOutput]:
    """Spend against every active budget for the current period window."""
    statuses = BudgetStatusService(db).status(get_user_id(user), period=period)
    return [
        BudgetStatusOutput.model_validate({**asdict(s), "percent_used": float(s.percent_used)})
        for s in statuses
    ]


@router.get("/trial-balance", response_model=TrialBalanceOutput)
def get_trial_balance(
    db: Session = Depends(get_db),
    user: dict = Depends(current_user),
) -> TrialBalanceOutput:
    report = TrialBalanceService(db).trial_balance(get_user_id(user))
    return TrialBalanceOutput.model_validate(
        {**asdict(report), "is_balanced": report.is_balanced}
    )
