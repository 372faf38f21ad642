"""
Runtime settings for Expenso, read from the environment (and a local .env).
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

DEFAULT_CATEGORIES = ("rent", "subscriptions", "groceries", "travel")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    currency: str = "₹"
    report_currency: str = "Rs."  # built-in PDF fonts have no ₹ glyph
    date_format: str = "%d/%m/%Y"  # en-IN short date, e.g. 19/10/2026
    categories: Tuple[str, ...] = DEFAULT_CATEGORIES
    pie_summary_slices: bool = False
    trend_by_day: bool = False
    report_filename: str = "finance_report.pdf"
    log_level: str = "INFO"


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def _categories(raw: str | None) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_CATEGORIES
    names = tuple(c.strip().lower() for c in raw.split(",") if c.strip())
    return names or DEFAULT_CATEGORIES


def load_settings() -> Settings:
    """Build a ``Settings`` from the current environment."""
    return Settings(
        currency=os.getenv("EXPENSO_CURRENCY", "₹"),
        report_currency=os.getenv("EXPENSO_REPORT_CURRENCY", "Rs."),
        date_format=os.getenv("EXPENSO_DATE_FORMAT", "%d/%m/%Y"),
        categories=_categories(os.getenv("EXPENSO_CATEGORIES")),
        pie_summary_slices=_flag("EXPENSO_PIE_SUMMARY_SLICES"),
        trend_by_day=_flag("EXPENSO_TREND_BY_DAY"),
        report_filename=os.getenv("EXPENSO_REPORT_FILENAME", "finance_report.pdf"),
        log_level=os.getenv("EXPENSO_LOG_LEVEL", "INFO"),
    )
