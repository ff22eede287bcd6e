"""Streamlit dashboard entry point."""

import asyncio
from collections.abc import Sequence
import dataclasses
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation

import streamlit as st

from src.adapters.interface.streamlit.charts import (
    build_category_chart,
    build_trend_chart,
    format_currency,
)
from src.application.errors import StorageError
from src.application.use_cases.check_connection import CheckConnectionUseCase
from src.application.use_cases.generate_insights import InsightPipeline
from src.application.use_cases.get_monthly_summary import (
    GetMonthlySummaryUseCase,
    GetTrendSeriesUseCase,
)
from src.application.use_cases.manage_ledger import LedgerService
from src.domain.models import (
    Expense,
    ExpenseCategory,
    Income,
    IncomeType,
    Insight,
    InsightPriority,
)
from src.infrastructure.container import (
    build_insight_backend,
    build_insight_pipeline,
    build_ledger_service,
)
from src.infrastructure.logging.logger import get_usage_logger

PAGES = [
    "Insights",
    "Add Expense",
    "Add Income",
    "History",
    "Summary",
    "Charts",
    "Profile",
    "AI Settings",
]

_PRIORITY_BADGES = {
    InsightPriority.HIGH: "🔴",
    InsightPriority.MEDIUM: "🟠",
    InsightPriority.LOW: "🟢",
}


@st.cache_resource(show_spinner=False)
def _load_ledger_service() -> LedgerService:
    """Shared ledger service, loaded once per server process."""
    return build_ledger_service()


def _get_pipeline() -> InsightPipeline:
    """Return the insight pipeline of the current session."""
    if "pipeline" not in st.session_state:
        st.session_state["pipeline"] = build_insight_pipeline()
    return st.session_state["pipeline"]


def parse_amount(raw: str) -> Decimal | None:
    """Parse a user-entered amount; return None when invalid or negative."""
    cleaned = raw.strip().replace("$", "").replace(",", "")
    if not cleaned:
        return None
    try:
        value = Decimal(cleaned)
    except InvalidOperation:
        return None
    if not value.is_finite() or value < 0:
        return None
    return value


def _combine(day: date) -> datetime:
    return datetime.combine(day, time(hour=12))


def _render_insight(insight: Insight) -> None:
    badge = _PRIORITY_BADGES.get(insight.priority, "")
    with st.container(border=True):
        st.markdown(f"**{badge} {insight.title}**")
        st.caption(
            f"{insight.type.value.title()} · "
            f"{insight.priority.value.title()} priority"
        )
        st.write(insight.message)
        for item in insight.action_items:
            st.markdown(f"- {item}")


def _render_insights_page(ledger: LedgerService) -> None:
    pipeline = _get_pipeline()
    st.subheader("AI Financial Insights")
    st.caption(f"Backend: {pipeline.backend_name}")

    refresh_col, advice_col = st.columns(2)
    refresh = refresh_col.button("Refresh insights")
    needs_first_run = pipeline.summary is None
    if refresh or needs_first_run:
        with st.spinner("Analyzing your finances..."):
            asyncio.run(pipeline.refresh(ledger.snapshot()))

    if pipeline.error:
        st.error(pipeline.error)
        if st.button("Retry"):
            with st.spinner("Analyzing your finances..."):
                asyncio.run(pipeline.refresh(ledger.snapshot()))
            st.rerun()
        if pipeline.used_fallback:
            st.caption("Showing rule-based insights instead.")

    if not pipeline.insights:
        st.info(
            "No insights yet. Add some expenses and income to get "
            "personalized insights."
        )
    for insight in pipeline.insights:
        _render_insight(insight)

    if advice_col.button("Get personalized advice"):
        with st.spinner("Writing advice..."):
            advice = asyncio.run(pipeline.advise(ledger.snapshot()))
        st.subheader("Personalized Advice")
        st.write(advice)


def _render_add_expense_page(ledger: LedgerService) -> None:
    st.subheader("Add Expense")
    with st.form("add_expense", clear_on_submit=True):
        name = st.text_input("Name")
        raw_cost = st.text_input("Cost", placeholder="0.00")
        category = st.selectbox(
            "Category",
            options=list(ExpenseCategory),
            format_func=lambda item: item.value,
        )
        day = st.date_input("Date", value=date.today())
        note = st.text_area("Note")
        submitted = st.form_submit_button("Save expense")
    if not submitted:
        return
    amount = parse_amount(raw_cost)
    if not name.strip() or amount is None:
        st.error("Enter a name and a valid, non-negative cost.")
        return
    expense = Expense(
        date=_combine(day),
        label=name.strip(),
        category=category,
        amount=amount,
        note=note.strip(),
    )
    _save(ledger.add_expense, expense)


def _render_add_income_page(ledger: LedgerService) -> None:
    st.subheader("Add Income")
    with st.form("add_income", clear_on_submit=True):
        source = st.text_input("Source")
        raw_amount = st.text_input("Amount", placeholder="0.00")
        income_type = st.selectbox(
            "Type",
            options=list(IncomeType),
            format_func=lambda item: item.value,
        )
        day = st.date_input("Date", value=date.today())
        note = st.text_area("Note")
        submitted = st.form_submit_button("Save income")
    if not submitted:
        return
    amount = parse_amount(raw_amount)
    if not source.strip() or amount is None:
        st.error("Enter a source and a valid, non-negative amount.")
        return
    income = Income(
        date=_combine(day),
        label=source.strip(),
        category=income_type,
        amount=amount,
        note=note.strip(),
    )
    _save(ledger.add_income, income)


def _save(add, record: Expense | Income) -> None:
    try:
        stored = add(record)
    except StorageError as exc:
        st.error(f"Could not save: {exc}")
        return
    if stored:
        st.success(f"Saved {record.label} ({format_currency(record.amount)}).")
    else:
        st.warning("An identical entry already exists; nothing was added.")


def _history_rows(
    transactions: Sequence[Expense | Income],
) -> list[dict[str, str]]:
    return [
        {
            "Date": f"{tx.date:%Y-%m-%d}",
            "Kind": "Expense" if isinstance(tx, Expense) else "Income",
            "Name": tx.label,
            "Category": tx.category.value,
            "Amount": format_currency(tx.amount),
            "Note": tx.note,
        }
        for tx in transactions
    ]


def _render_history_page(ledger: LedgerService) -> None:
    st.subheader("History")
    transactions = ledger.history()
    if not transactions:
        st.info("No transactions recorded yet.")
        return
    st.dataframe(
        _history_rows(transactions),
        width="stretch",
        hide_index=True,
    )
    by_label = {
        f"{tx.date:%Y-%m-%d} · {tx.label} · "
        f"{format_currency(tx.amount)} · {tx.id[:8]}": tx
        for tx in transactions
    }
    selected = st.selectbox(
        "Delete a transaction",
        options=["(none)", *by_label],
    )
    if selected != "(none)" and st.button("Delete"):
        tx = by_label[selected]
        remove = (
            ledger.delete_expense
            if isinstance(tx, Expense)
            else ledger.delete_income
        )
        try:
            remove(tx.id)
        except StorageError as exc:
            st.error(f"Could not delete: {exc}")
            return
        st.rerun()


def _render_summary_page(ledger: LedgerService) -> None:
    st.subheader("Monthly Summary")
    today = date.today()
    month_col, year_col = st.columns(2)
    month = month_col.selectbox(
        "Month",
        options=list(range(1, 13)),
        index=today.month - 1,
        format_func=lambda value: date(2000, value, 1).strftime("%B"),
    )
    year = year_col.number_input(
        "Year",
        min_value=2000,
        max_value=2100,
        value=today.year,
    )
    view = GetMonthlySummaryUseCase(ledger).execute(month, int(year))
    summary = view.summary
    income_col, expense_col, net_col = st.columns(3)
    income_col.metric("Income", format_currency(summary.total_income))
    expense_col.metric("Expenses", format_currency(summary.total_expenses))
    net_col.metric("Net", format_currency(summary.net_income))
    if not view.shares:
        st.info("No expenses recorded for this month.")
        return
    st.dataframe(
        [
            {
                "Category": share.category.value,
                "Total": format_currency(share.total),
                "Share": f"{share.percentage:.1f}%",
            }
            for share in view.shares
        ],
        width="stretch",
        hide_index=True,
    )


def _render_charts_page(ledger: LedgerService) -> None:
    st.subheader("Charts")
    today = date.today()
    view = GetMonthlySummaryUseCase(ledger).execute(today.month, today.year)
    window = st.slider("Months", min_value=3, max_value=12, value=6)
    points = GetTrendSeriesUseCase(ledger).execute(window, today)
    donut_col, trend_col = st.columns(2)
    with donut_col:
        st.markdown("**Expenses by Category (this month)**")
        if view.shares:
            st.altair_chart(build_category_chart(view.shares))
        else:
            st.info("No expenses recorded this month.")
    with trend_col:
        st.markdown("**Monthly Trends**")
        st.altair_chart(build_trend_chart(points), width="stretch")


def _render_profile_page(ledger: LedgerService) -> None:
    st.subheader("Profile")
    totals = ledger.totals()
    income_col, expense_col, net_col = st.columns(3)
    income_col.metric("Lifetime income", format_currency(totals.total_income))
    expense_col.metric(
        "Lifetime expenses",
        format_currency(totals.total_expenses),
    )
    net_col.metric("Net", format_currency(totals.net_income))
    st.caption(f"{totals.transaction_count} transactions recorded")

    pipeline = _get_pipeline()
    raw_goals = st.text_area(
        "Financial goals (one per line)",
        value=st.session_state.get("goals", ""),
    )
    if st.button("Save goals"):
        st.session_state["goals"] = raw_goals
        pipeline.set_user_goals(tuple(raw_goals.splitlines()))
        st.success("Goals will be included in the next analysis.")


def _render_settings_page() -> None:
    pipeline = _get_pipeline()
    settings = pipeline.settings
    st.subheader("AI Settings")
    use_remote = st.toggle(
        "Use language model insights",
        value=settings.use_remote_backend,
    )
    api_key = st.text_input(
        "OpenAI API key",
        value=settings.api_key,
        type="password",
    )
    model = st.text_input("Model", value=settings.model)
    updated = dataclasses.replace(
        settings,
        use_remote_backend=use_remote,
        api_key=api_key.strip(),
        model=model.strip() or settings.model,
    )
    if st.button("Apply"):
        pipeline.update_backend(updated)
        st.session_state.pop("connection_result", None)
        if use_remote and not updated.has_credential:
            st.warning("No API key configured; using rule-based insights.")
        else:
            st.success(f"Using {pipeline.backend_name} insights.")
    if st.button("Test AI Connection"):
        with st.spinner("Contacting the model..."):
            result = asyncio.run(
                CheckConnectionUseCase(build_insight_backend).execute(updated)
            )
        st.session_state["connection_result"] = result
    result = st.session_state.get("connection_result")
    if result is not None:
        if result.success:
            st.success(result.message)
        else:
            st.error(result.message)


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="DailySpender", layout="wide")
    st.title("DailySpender")

    page = st.sidebar.selectbox("Page", PAGES)
    get_usage_logger().info(f"page_view {page}")
    try:
        ledger = _load_ledger_service()
    except StorageError as exc:
        st.error(f"Unable to load the ledger: {exc}")
        return

    if page == "Insights":
        _render_insights_page(ledger)
    elif page == "Add Expense":
        _render_add_expense_page(ledger)
    elif page == "Add Income":
        _render_add_income_page(ledger)
    elif page == "History":
        _render_history_page(ledger)
    elif page == "Summary":
        _render_summary_page(ledger)
    elif page == "Charts":
        _render_charts_page(ledger)
    elif page == "Profile":
        _render_profile_page(ledger)
    else:
        _render_settings_page()


if __name__ == "__main__":  # pragma: no cover
    main()
