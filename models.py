"""
Data models for Expenso
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Union


class ExpensoError(Exception):
    """Base class for Expenso errors."""


class InvalidAmountError(ExpensoError, ValueError):
    """Amount is not a finite, non-negative number."""


class InvalidTransactionTypeError(ExpensoError, ValueError):
    """Type is neither income nor expense."""


# Largest accepted amount is just under 10**13
MAX_AMOUNT_EXPONENT = 12


class TransactionType(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Transaction:
    """Single income or expense entry"""
    id: int  # creation timestamp in ms
    description: str
    amount: Decimal
    type: TransactionType
    date: str  # formatted once at creation
    created_at: datetime

    @property
    def is_income(self) -> bool:
        return self.type is TransactionType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type is TransactionType.EXPENSE


@dataclass(frozen=True)
class Bucket:
    """Aggregated amount under a category or summary label"""
    name: str
    value: Decimal


@dataclass(frozen=True)
class TrendPoint:
    name: str  # formatted date
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class Totals:
    total_income: Decimal
    total_expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.total_income - self.total_expense


def parse_amount(value: Union[str, int, float, Decimal, None]) -> Decimal:
    """
    Parse user input into a non-negative Decimal.
    Raises InvalidAmountError for anything else (text, NaN, infinity,
    negatives, amounts of 10**13 or more).
    """
    if value is None or isinstance(value, bool):
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    if isinstance(value, Decimal):
        amount = value
    else:
        text = str(value).strip()
        if not text:
            raise InvalidAmountError("Amount is empty")
        try:
            amount = Decimal(text)
        except InvalidOperation:
            raise InvalidAmountError(f"Amount is not a number: {value!r}") from None

    if not amount.is_finite():
        raise InvalidAmountError(f"Amount must be finite: {value!r}")
    if amount < 0:
        raise InvalidAmountError(f"Amount must not be negative: {value!r}")
    if amount.adjusted() > MAX_AMOUNT_EXPONENT:
        raise InvalidAmountError(f"Amount is too large: {value!r}")
    return amount


def parse_type(value: Union[str, TransactionType]) -> TransactionType:
    if isinstance(value, TransactionType):
        return value
    try:
        return TransactionType(str(value).strip().lower())
    except ValueError:
        raise InvalidTransactionTypeError(f"Unknown transaction type: {value!r}") from None
