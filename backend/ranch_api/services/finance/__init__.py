"""
Finance services: ledger CRUD and the aggregation engine (summary, budget
status, trial balance).
"""

from ranch_api.services.finance.summary import (
    CategoryTotal,
    FinancialSummary,
    FinancialSummaryService,
)
from ranch_api.services.finance.budgets import BudgetStatus, BudgetStatusService
from ranch_api.services.finance.ledger import TrialBalance, TrialBalanceService
from ranch_api.services.finance.records import (
    AccountService,
    BudgetService,
    JournalEntryService,
    TransactionService,
)

__all__ = [
    "CategoryTotal",
    "FinancialSummary",
    "FinancialSummaryService",
    "BudgetStatus",
    "BudgetStatusService",
    "TrialBalance",
    "TrialBalanceService",
    "AccountService",
    "BudgetService",
    "JournalEntryService",
    "TransactionService",
]
