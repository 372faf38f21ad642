"""Drive the Streamlit page headlessly with AppTest."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def at():
    app = AppTest.from_file(APP_PATH, default_timeout=30)
    return app.run()


def _metrics(at):
    return {m.label: m.value for m in at.metric}


def _click(at, label):
    next(b for b in at.button if b.label == label).click()
    return at.run()


def _submit(at, description, amount, kind="Expense"):
    at.text_input(key="description").input(description)
    at.text_input(key="amount").input(amount)
    at.radio(key="type").set_value(kind)
    return _click(at, "Add Transaction")


def test_empty_page(at):
    assert not at.exception
    assert _metrics(at) == {
        "Total Income": "₹0.00",
        "Total Expense": "₹0.00",
        "Balance": "₹0.00",
    }


def test_add_expense_updates_summary(at):
    _submit(at, "Monthly rent", "1000")

    assert not at.exception
    assert _metrics(at)["Total Expense"] == "₹1,000.00"
    assert _metrics(at)["Balance"] == "₹-1,000.00"
    assert len(at.session_state["store"]) == 1


def test_invalid_amount_shows_warning(at):
    _submit(at, "Coffee", "fifty")

    assert [w.value for w in at.warning if "non-negative" in w.value]
    assert len(at.session_state["store"]) == 0


def test_delete_selected(at):
    _submit(at, "Salary", "5000", "Income")
    assert _metrics(at)["Total Income"] == "₹5,000.00"

    _click(at, "Delete Selected")

    assert not at.exception
    assert len(at.session_state["store"]) == 0
    assert _metrics(at)["Balance"] == "₹0.00"


def test_huge_amount_is_rejected(at):
    _submit(at, "Lottery", "1e200000", "Income")

    assert not at.exception
    assert [w.value for w in at.warning if "non-negative" in w.value]
    assert _metrics(at)["Total Income"] == "₹0.00"
