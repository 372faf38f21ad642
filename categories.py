"""
categories.py

Keyword based category inference for expense descriptions.  A classifier
is an ordered list of ``CategoryRule`` entries; the first rule with a
keyword contained in the description (case-insensitive) names the
category.  Income is always bucketed as ``Income`` and unmatched
expenses fall into ``Other``.

Any object with a ``classify(txn) -> str`` method can stand in for
``KeywordClassifier`` in the pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from config import DEFAULT_CATEGORIES
from models import Transaction

INCOME_CATEGORY = "Income"
OTHER_CATEGORY = "Other"

CATEGORY_COLORS = {
    "rent": "#00FFFF",
    "subscriptions": "#BF00FF",
    "groceries": "#FFA500",
    "travel": "#FF69B4",
}

PIE_COLORS = [
    "#39FF14", "#00FFFF", "#BF00FF", "#FFA500", "#FF69B4", "#FF6347", "#FF4500", "#00FF00"
]


@dataclass(frozen=True)
class CategoryRule:
    name: str
    keywords: Tuple[str, ...]

    def matches(self, description: str) -> bool:
        text = description.lower()
        return any(k.lower() in text for k in self.keywords)


class KeywordClassifier:
    def __init__(self, rules: Sequence[CategoryRule]):
        self.rules: List[CategoryRule] = list(rules)

    @classmethod
    def from_names(cls, names: Iterable[str] = DEFAULT_CATEGORIES) -> "KeywordClassifier":
        """Each name doubles as its own keyword, e.g. ``rent`` matches "Monthly Rent"."""
        return cls([CategoryRule(n, (n,)) for n in names])

    def classify_description(self, description: str) -> str:
        for rule in self.rules:
            if rule.matches(description):
                return rule.name
        return OTHER_CATEGORY

    def classify(self, txn: Transaction) -> str:
        if txn.is_income:
            return INCOME_CATEGORY
        return self.classify_description(txn.description)


def color_for(name: str, index: int) -> str:
    """Slice colour: fixed per known category, palette position otherwise."""
    return CATEGORY_COLORS.get(name, PIE_COLORS[index % len(PIE_COLORS)])
