# pipeline.py: totals, buckets and trend points derived from the transaction list

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, List, Optional, Tuple

import pandas as pd

from categories import KeywordClassifier
from models import Bucket, Totals, Transaction, TrendPoint

TOTAL_EXPENSES_BUCKET = "Total Expenses"
BALANCE_BUCKET = "Balance"

ZERO = Decimal("0")


def compute_totals(transactions: Iterable[Transaction]) -> Totals:
    """Income and expense sums; ``Totals.balance`` is their difference."""
    income = ZERO
    expense = ZERO
    for t in transactions:
        if t.is_income:
            income += t.amount
        else:
            expense += t.amount
    return Totals(total_income=income, total_expense=expense)


def category_buckets(transactions: Iterable[Transaction], classifier: KeywordClassifier) -> List[Bucket]:
    """
    Sum amounts per inferred category, keeping the order in which each
    category first appears.
    """
    sums: Dict[str, Decimal] = {}
    for t in transactions:
        key = classifier.classify(t)
        sums[key] = sums.get(key, ZERO) + t.amount
    return [Bucket(name, value) for name, value in sums.items()]


def summary_buckets(totals: Totals) -> List[Bucket]:
    return [
        Bucket(TOTAL_EXPENSES_BUCKET, totals.total_expense),
        Bucket(BALANCE_BUCKET, totals.balance),
    ]


def pie_buckets(
    transactions: Iterable[Transaction],
    classifier: KeywordClassifier,
    include_summary: bool = False,
) -> List[Bucket]:
    """
    Slices for the category donut.

    With ``include_summary`` the Total Expenses and Balance figures are
    appended as extra slices, which counts expenses twice in the same chart.
    """
    transactions = list(transactions)
    buckets = category_buckets(transactions, classifier)
    if include_summary:
        buckets.extend(summary_buckets(compute_totals(transactions)))
    return buckets


def trend_points(transactions: Iterable[Transaction], by_day: bool = False) -> List[TrendPoint]:
    """
    One point per transaction in insertion order, or with ``by_day`` one
    point per calendar day in chronological order.
    """
    if not by_day:
        return [
            TrendPoint(
                name=t.date,
                income=t.amount if t.is_income else ZERO,
                expense=t.amount if t.is_expense else ZERO,
            )
            for t in transactions
        ]

    days: Dict[object, Tuple[str, Decimal, Decimal]] = {}
    for t in transactions:
        day = t.created_at.date()
        label, income, expense = days.get(day, (t.date, ZERO, ZERO))
        if t.is_income:
            income += t.amount
        else:
            expense += t.amount
        days[day] = (label, income, expense)
    return [TrendPoint(label, income, expense) for _, (label, income, expense) in sorted(days.items())]


# --- DataFrames for the table and charts ---

TRANSACTION_COLUMNS = ["ID", "Description", "Amount", "Type", "Date", "Category"]


def transactions_frame(
    transactions: Iterable[Transaction],
    classifier: Optional[KeywordClassifier] = None,
) -> pd.DataFrame:
    rows = [
        {
            "ID": t.id,
            "Description": t.description,
            "Amount": float(t.amount),
            "Type": t.type.value,
            "Date": t.date,
            "Category": classifier.classify(t) if classifier else None,
        }
        for t in transactions
    ]
    return pd.DataFrame(rows, columns=TRANSACTION_COLUMNS)


def buckets_frame(buckets: Iterable[Bucket]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"name": b.name, "value": float(b.value)} for b in buckets],
        columns=["name", "value"],
    )


def trend_frame(points: Iterable[TrendPoint]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"name": p.name, "income": float(p.income), "expense": float(p.expense)} for p in points],
        columns=["name", "income", "expense"],
    )
