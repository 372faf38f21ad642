"""
PDF export of the current totals and transaction list.
"""
from __future__ import annotations

from io import BytesIO
from typing import Iterable, List, Optional

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from logging_setup import get_logger
from models import Totals, Transaction
from pipeline import compute_totals

logger = get_logger("expenso.report")

REPORT_TITLE = "Finance Report"


def report_lines(totals: Totals, currency: str = "Rs.") -> List[str]:
    """The three summary lines printed under the title."""
    return [
        f"Total Income: {currency}{totals.total_income:.2f}",
        f"Total Expense: {currency}{totals.total_expense:.2f}",
        f"Balance: {currency}{totals.balance:.2f}",
    ]


def report_rows(transactions: Iterable[Transaction], currency: str = "Rs.") -> List[List[str]]:
    rows = [["Description", f"Amount ({currency})", "Type", "Date"]]
    for t in transactions:
        rows.append([t.description, f"{t.amount:.2f}", t.type.value, t.date])
    return rows


def build_report(
    transactions: Iterable[Transaction],
    totals: Optional[Totals] = None,
    currency: str = "Rs.",
    compress: bool = True,
) -> bytes:
    """
    Render the report and return the PDF bytes.
    Totals default to the ones computed from ``transactions``. Pass
    ``compress=False`` to keep the page content streams as plain text.
    """
    transactions = list(transactions)
    if totals is None:
        totals = compute_totals(transactions)

    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer, pagesize=A4, title=REPORT_TITLE, pageCompression=1 if compress else 0
    )
    styles = getSampleStyleSheet()
    story = [Paragraph(REPORT_TITLE, styles["Title"]), Spacer(1, 12)]

    for line in report_lines(totals, currency):
        story.append(Paragraph(line, styles["Normal"]))
    story.append(Spacer(1, 12))

    table = Table(report_rows(transactions, currency), repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2E379A")),
        ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("FONTSIZE", (0, 0), (-1, -1), 9),
        ("ALIGN", (1, 1), (1, -1), "RIGHT"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
    ]))
    story.append(table)
    doc.build(story)

    pdf = buffer.getvalue()
    logger.info("Built report with %d transactions (%d bytes)", len(transactions), len(pdf))
    return pdf
