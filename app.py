import streamlit as st
from pathlib import Path
import sys

# Add current directory to path
sys.path.append(str(Path(__file__).parent))

from config import load_settings
from logging_setup import configure_logging
from ledger import TransactionStore
from categories import KeywordClassifier
from pipeline import compute_totals, pie_buckets, trend_points, transactions_frame
from charts import category_donut, income_expense_trend
from report import build_report

# --- Configuration ---
st.set_page_config(page_title="Expenso", layout="centered", page_icon="💰")
settings = load_settings()
configure_logging(settings.log_level)
CURRENCY = settings.currency

# --- Session State ---
if "store" not in st.session_state:
    st.session_state.store = TransactionStore.from_settings(settings)
if "dark_mode" not in st.session_state:
    st.session_state["dark_mode"] = False


def get_store() -> TransactionStore:
    return st.session_state.store


def money(value) -> str:
    return f"{CURRENCY}{value:,.2f}"


def apply_theme(dark: bool):
    """Swap the page palette; Streamlit's own theme is fixed at startup."""
    bg, fg, accent = ("#111827", "#FFFFFF", "#FFFFFF") if dark else ("#FFFFFF", "#000000", "#15803D")
    st.markdown(f"""
    <style>
        .stApp {{ background: {bg} !important; color: {fg} !important; }}
        .stApp h1 {{ color: {accent} !important; font-weight: 800; }}
        .stApp h2, .stApp h3, .stApp label, .stApp p {{ color: {fg} !important; }}
    </style>
    """, unsafe_allow_html=True)


store = get_store()
classifier = KeywordClassifier.from_names(settings.categories)
apply_theme(st.session_state["dark_mode"])

# --- Header ---
col_title, col_pdf, col_mode = st.columns([3, 2, 2])
col_title.title("Expenso")

# --- Add Transaction ---
with st.form("add_transaction", clear_on_submit=True):
    col1, col2, col3 = st.columns(3)
    description = col1.text_input("Description", key="description", placeholder="e.g., Grocery")
    amount = col2.text_input("Amount", key="amount", placeholder="e.g., 500")
    txn_type = col3.radio("Type", ["Income", "Expense"], index=1, key="type", horizontal=True)

    if st.form_submit_button("Add Transaction"):
        if store.add(description, amount, txn_type.lower()) is None:
            st.warning("Enter a description and a non-negative numeric amount.")

# Everything below is derived from the store after this run's add
transactions = store.transactions
totals = compute_totals(transactions)

col_pdf.download_button(
    "📄 Download PDF",
    data=build_report(transactions, totals, currency=settings.report_currency),
    file_name=settings.report_filename,
    mime="application/pdf",
)
col_mode.toggle("🌙 Dark Mode", key="dark_mode")

# --- Summary ---
c1, c2, c3 = st.columns(3)
c1.metric("Total Income", money(totals.total_income))
c2.metric("Total Expense", money(totals.total_expense))
c3.metric("Balance", money(totals.balance))

# --- Transactions ---
st.subheader("Transactions")
if not transactions:
    st.info("No transactions yet.")
else:
    df = transactions_frame(transactions, classifier)

    def color_amount(row):
        color = "green" if row["Type"] == "income" else "red"
        return [f"color: {color}" if c == "Amount" else "" for c in row.index]

    view = df[["Description", "Amount", "Type", "Date", "Category"]]
    st.dataframe(
        view.style.apply(color_amount, axis=1).format({"Amount": money}),
        hide_index=True,
    )

    labels = {t.id: f"{t.description} ({money(t.amount)}, {t.date})" for t in transactions}
    to_delete = st.selectbox("Select to Delete", list(labels), format_func=labels.get, key="delete_id")
    if st.button("Delete Selected"):
        store.remove(to_delete)
        st.rerun()

# --- Charts ---
st.subheader("Holographic Finance Dashboard")
buckets = pie_buckets(transactions, classifier, include_summary=settings.pie_summary_slices)
st.plotly_chart(category_donut(buckets, CURRENCY), key="category_chart")

st.subheader("Income vs Expense Over Time")
points = trend_points(transactions, by_day=settings.trend_by_day)
st.plotly_chart(income_expense_trend(points, CURRENCY), key="trend_chart")
