# charts.py: plotly figures for the category breakdown and the income/expense trend

from __future__ import annotations

from typing import Iterable

import plotly.graph_objects as go

from categories import color_for
from models import Bucket, TrendPoint
from pipeline import buckets_frame, trend_frame

INCOME_COLOR = "#39FF14"
EXPENSE_COLOR = "#FF69B4"


def category_donut(buckets: Iterable[Bucket], currency: str = "₹"):
    """
    Donut chart of amounts per category bucket.
    """
    df = buckets_frame(buckets)
    fig = go.Figure()
    if df.empty:
        fig.update_layout(title="No transactions yet", height=400)
        return fig

    fig.add_trace(go.Pie(
        labels=df["name"],
        values=df["value"],
        hole=0.4,
        sort=False,
        marker=dict(colors=[color_for(name, i) for i, name in enumerate(df["name"])]),
        textinfo="label+percent",
        hovertemplate=f"%{{label}}: {currency}%{{value:,.2f}}<extra></extra>",
    ))
    fig.update_layout(title="Holographic Finance Dashboard", height=400)
    return fig


def income_expense_trend(points: Iterable[TrendPoint], currency: str = "₹"):
    """
    Income and expense lines. Points are plotted by position so entries
    sharing a date stay separate.
    """
    df = trend_frame(points)
    fig = go.Figure()
    if df.empty:
        fig.update_layout(title="No transactions yet", height=300)
        return fig

    x = list(range(len(df)))
    hover = f"%{{customdata}}: {currency}%{{y:,.2f}}<extra>%{{fullData.name}}</extra>"
    fig.add_trace(go.Scatter(
        x=x, y=df["income"], customdata=df["name"], mode="lines+markers",
        name="Income", line=dict(color=INCOME_COLOR, width=2, shape="spline"),
        hovertemplate=hover,
    ))
    fig.add_trace(go.Scatter(
        x=x, y=df["expense"], customdata=df["name"], mode="lines+markers",
        name="Expense", line=dict(color=EXPENSE_COLOR, width=2, shape="spline"),
        hovertemplate=hover,
    ))
    fig.update_layout(
        title="Income vs Expense Over Time",
        height=300,
        xaxis=dict(tickmode="array", tickvals=x, ticktext=list(df["name"])),
    )
    return fig
