"""Altair chart builders for the Streamlit dashboard."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt

from src.domain.models import CategoryShare, TrendPoint
from src.utils.decimal_utils import format_amount

PALETTE = [
    "#1b9aaa",
    "#2e7d32",
    "#f4a261",
    "#e76f51",
    "#457b9d",
    "#f6c453",
    "#6c8ead",
    "#a0c4ff",
]


def format_currency(value: Decimal) -> str:
    """Format an amount in dollars for display."""
    return f"${Decimal(format_amount(value)):,.2f}"


def prepare_category_chart_data(
    shares: Sequence[CategoryShare],
    max_categories: int = 6,
) -> list[dict[str, str | float]]:
    """Prepare donut chart data with a Top-N + Other grouping.

    Args:
        shares: Category shares sorted by descending total.
        max_categories: Maximum categories to keep before grouping into
            Other.

    Returns:
        list[dict]: Altair-ready rows.
    """
    top_items = list(shares[:max_categories])
    rest = shares[max_categories:]
    rows: list[dict[str, str | float]] = [
        {
            "category": item.category.value,
            "amount": float(item.total),
            "amount_label": format_currency(item.total),
            "share_label": f"{item.percentage:.1f}%",
        }
        for item in top_items
    ]
    if rest:
        other_total = sum((item.total for item in rest), start=Decimal("0"))
        other_share = sum(
            (item.percentage for item in rest),
            start=Decimal("0"),
        )
        rows.append(
            {
                "category": "Other (grouped)",
                "amount": float(other_total),
                "amount_label": format_currency(other_total),
                "share_label": f"{other_share:.1f}%",
            }
        )
    return rows


def prepare_trend_chart_data(
    points: Sequence[TrendPoint],
) -> list[dict[str, str | float | int]]:
    """Flatten trend points into one row per month and series.

    Args:
        points: Trend points ordered oldest first.

    Returns:
        list[dict]: Rows with month label, series, amount and sort order.
    """
    rows: list[dict[str, str | float | int]] = []
    for order, point in enumerate(points):
        label = f"{point.label} {point.year}"
        rows.append(
            {
                "month": label,
                "order": order,
                "series": "Expenses",
                "amount": float(point.total_expenses),
                "amount_label": format_currency(point.total_expenses),
            }
        )
        rows.append(
            {
                "month": label,
                "order": order,
                "series": "Income",
                "amount": float(point.total_income),
                "amount_label": format_currency(point.total_income),
            }
        )
    return rows


def build_category_chart(
    shares: Sequence[CategoryShare],
    chart_size: int = 320,
    max_categories: int = 6,
) -> alt.LayerChart:
    """Return a donut chart of expenses by category.

    Args:
        shares: Category shares sorted by descending total.
        chart_size: Width/height for the chart canvas.
        max_categories: Maximum categories before grouping into Other.
    """
    data = prepare_category_chart_data(shares, max_categories=max_categories)
    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="mouseover",
        clear="mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=PALETTE),
            legend=alt.Legend(orient="bottom", title=None, columns=3),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(text="amount_label:N")
    return alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )


def build_trend_chart(points: Sequence[TrendPoint]) -> alt.Chart:
    """Return a grouped bar chart of monthly expenses and income."""
    data = prepare_trend_chart_data(points)
    return alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadiusTopLeft=4,
        cornerRadiusTopRight=4,
    ).encode(
        x=alt.X(
            "month:N",
            sort=alt.EncodingSortField(field="order", order="ascending"),
            title=None,
        ),
        xOffset="series:N",
        y=alt.Y("amount:Q", title="Amount ($)"),
        color=alt.Color(
            "series:N",
            scale=alt.Scale(
                domain=["Expenses", "Income"],
                range=["#e76f51", "#2e7d32"],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("series:N"),
            alt.Tooltip("amount_label:N"),
        ],
    )


__all__ = [
    "PALETTE",
    "build_category_chart",
    "build_trend_chart",
    "format_currency",
    "prepare_category_chart_data",
    "prepare_trend_chart_data",
]
