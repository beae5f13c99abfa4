"""
Finance Models: Transaction, Budget, Account, JournalEntry.
"""

from __future__ import annotations

import datetime
from decimal import Decimal
from typing import Optional

from sqlalchemy import Boolean, Date, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from ranch_shared.config.constants import BudgetPeriod, JournalStatus, Limits

from .base import Base, DecimalString, OwnedMixin, StringList, UpdatedAtMixin


class Transaction(OwnedMixin, Base):
    """Income or expense entry. The financial summary aggregates these."""

    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    amount: Mapped[Decimal] = mapped_column(
        DecimalString(Limits.MONEY_PRECISION, Limits.MONEY_SCALE), nullable=False
    )
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    payment_method: Mapped[Optional[str]] = mapped_column(String(255))
    receipt_url: Mapped[Optional[str]] = mapped_column(String(1024))
    tags: Mapped[Optional[list[str]]] = mapped_column(StringList)

    __table_args__ = (
        Index("ix_transaction_user_date", "user_id", "date"),
    )


class Budget(OwnedMixin, UpdatedAtMixin, Base):
    """Spending plan for one category over a recurring period."""

    __tablename__ = "budgets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(255), nullable=False)
    budgeted_amount: Mapped[Decimal] = mapped_column(
        DecimalString(Limits.MONEY_PRECISION, Limits.MONEY_SCALE), nullable=False
    )
    period: Mapped[str] = mapped_column(String(32), default=BudgetPeriod.MONTHLY, nullable=False)
    start_date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    end_date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    alert_threshold: Mapped[int] = mapped_column(
        Integer, default=Limits.DEFAULT_ALERT_THRESHOLD, nullable=False
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text)


class Account(OwnedMixin, UpdatedAtMixin, Base):
    """Chart-of-accounts entry."""

    __tablename__ = "accounts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    account_number: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(32), nullable=False)
    sub_type: Mapped[Optional[str]] = mapped_column(String(255))
    balance: Mapped[Decimal] = mapped_column(
        DecimalString(Limits.MONEY_PRECISION, Limits.MONEY_SCALE),
        default=Decimal("0.00"),
        nullable=False,
    )
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class JournalEntry(OwnedMixin, UpdatedAtMixin, Base):
    """Journal entry header. Debits and credits are recorded, not enforced."""

    __tablename__ = "journal_entries"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    entry_number: Mapped[str] = mapped_column(String(64), nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    reference: Mapped[Optional[str]] = mapped_column(String(255))
    total_debit: Mapped[Decimal] = mapped_column(
        DecimalString(Limits.MONEY_PRECISION, Limits.MONEY_SCALE), nullable=False
    )
    total_credit: Mapped[Decimal] = mapped_column(
        DecimalString(Limits.MONEY_PRECISION, Limits.MONEY_SCALE), nullable=False
    )
    status: Mapped[str] = mapped_column(String(32), default=JournalStatus.DRAFT, nullable=False)
