"""
Trial balance over the chart of accounts.

Reporting only: nothing here enforces that debits equal credits.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from sqlalchemy.orm import Session

from ranch_api.models import Account
from ranch_api.repositories.owned import OwnedRepository
from ranch_shared.config.constants import AccountType
from ranch_shared.utils.money import ZERO, money


@dataclass
class TrialBalanceLine:
    account_id: int
    account_number: str
    name: str
    type: str
    debit: Decimal
    credit: Decimal


@dataclass
class TrialBalance:
    accounts: list[TrialBalanceLine] = field(default_factory=list)
    total_debit: Decimal = field(default_factory=lambda: money(0))
    total_credit: Decimal = field(default_factory=lambda: money(0))

    @property
    def is_balanced(self) -> bool:
        return self.total_debit == self.total_credit


def split_balance(account_type: str, balance: Decimal) -> tuple[Decimal, Decimal]:
    """
    Place a balance in the (debit, credit) column.

    Debit-normal accounts report a positive balance as a debit, credit-normal
    accounts as a credit; a negative balance goes to the opposite column.
    """
    balance = money(balance)
    debit_normal = account_type in AccountType.DEBIT_NORMAL
    if balance < ZERO:
        debit_normal = not debit_normal
        balance = -balance
    if debit_normal:
        return balance, money(0)
    return money(0), balance


class TrialBalanceService:
    def __init__(self, db: Session):
        self._db = db
        self._repo = OwnedRepository(Account, db)

    def trial_balance(self, user_id: str) -> TrialBalance:
        accounts = self._repo.find_all(
            user_id,
            Account.is_active.is_(True),
            order_by=[Account.account_number.asc(), Account.id.asc()],
        )

        report = TrialBalance()
        for account in accounts:
            debit, credit = split_balance(account.type, account.balance)
            report.accounts.append(
                TrialBalanceLine(
                    account_id=account.id,
                    account_number=account.account_number,
                    name=account.name,
                    type=account.type,
                    debit=debit,
                    credit=credit,
                )
            )
            report.total_debit += debit
            report.total_credit += credit

        return report
