from datetime import datetime
from decimal import Decimal

from categories import (
    CATEGORY_COLORS,
    PIE_COLORS,
    CategoryRule,
    KeywordClassifier,
    color_for,
)
from models import Transaction, TransactionType


def _txn(description, kind=TransactionType.EXPENSE):
    return Transaction(
        id=1,
        description=description,
        amount=Decimal("10"),
        type=kind,
        date="19/10/2026",
        created_at=datetime(2026, 10, 19),
    )


def test_default_keywords(classifier):
    assert classifier.classify(_txn("Monthly rent")) == "rent"
    assert classifier.classify(_txn("Spotify SUBSCRIPTIONS")) == "subscriptions"
    assert classifier.classify(_txn("weekly groceries")) == "groceries"
    assert classifier.classify(_txn("Travel to Goa")) == "travel"


def test_unmatched_expense_is_other(classifier):
    assert classifier.classify(_txn("Coffee")) == "Other"


def test_income_ignores_keywords(classifier):
    assert classifier.classify(_txn("rent received", TransactionType.INCOME)) == "Income"


def test_first_matching_rule_wins(classifier):
    # both "rent" and "travel" appear; rent comes first in the rule order
    assert classifier.classify(_txn("travel agent rent")) == "rent"


def test_custom_rules():
    clf = KeywordClassifier([
        CategoryRule("Dining", ("cafe", "coffee")),
        CategoryRule("Fuel", ("petrol",)),
    ])
    assert clf.classify(_txn("Coffee Day")) == "Dining"
    assert clf.classify(_txn("Petrol pump")) == "Fuel"
    assert clf.classify(_txn("Monthly rent")) == "Other"


def test_color_for():
    assert color_for("rent", 5) == CATEGORY_COLORS["rent"]
    assert color_for("Income", 0) == PIE_COLORS[0]
    assert color_for("Other", len(PIE_COLORS) + 1) == PIE_COLORS[1]
