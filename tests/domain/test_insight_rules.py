"""Tests for the deterministic insight rules."""

from decimal import Decimal

import pytest

from src.domain.models import (
    FinancialProfile,
    InsightPriority,
    InsightType,
    MonthKey,
)
from src.domain.services.insight_rules import (
    DEFICIT_ADVICE,
    SURPLUS_ADVICE,
    generate_rule_advice,
    generate_rule_insights,
)


def _profile(income: str, expenses: str, categories=()) -> FinancialProfile:
    return FinancialProfile(
        month=MonthKey(2024, 3),
        total_monthly_income=Decimal(income),
        total_monthly_expenses=Decimal(expenses),
        top_spending_categories=tuple(
            (name, Decimal(amount)) for name, amount in categories
        ),
    )


def test_overspending_emits_single_high_warning() -> None:
    insights = generate_rule_insights(_profile("2500", "3000"))

    warnings = [i for i in insights if i.type is InsightType.WARNING]
    assert len(warnings) == 1
    assert warnings[0].priority is InsightPriority.HIGH
    assert warnings[0].title == "Overspending Alert"
    assert "500.00" in warnings[0].message
    assert len(warnings[0].action_items) == 3


def test_top_category_share_is_reported() -> None:
    insights = generate_rule_insights(
        _profile("5000", "1650", [("Rent", "1200"), ("Food", "300")])
    )

    assert [i.title for i in insights] == ["Top Spending Category"]
    top = insights[0]
    assert top.type is InsightType.SPENDING
    assert "72.7%" in top.message
    assert "Rent" in top.message
    assert top.action_items[0] == "Set a monthly limit for Rent"


def test_low_savings_rate_is_flagged() -> None:
    insights = generate_rule_insights(_profile("1000", "900"))

    assert [i.title for i in insights] == ["Savings Opportunity"]
    assert "10.0%" in insights[0].message
    assert insights[0].type is InsightType.SAVING


@pytest.mark.parametrize(
    ("income", "expenses"),
    [("1000", "700"), ("1000", "800"), ("2500", "2000")],
)
def test_savings_rate_at_or_above_target_is_not_flagged(
    income: str,
    expenses: str,
) -> None:
    insights = generate_rule_insights(_profile(income, expenses))

    assert insights == []


def test_all_rules_fire_in_order() -> None:
    insights = generate_rule_insights(
        _profile("2500", "3000", [("Food", "300")])
    )

    assert [i.type for i in insights] == [
        InsightType.WARNING,
        InsightType.SPENDING,
        InsightType.SAVING,
    ]


def test_empty_profile_yields_no_insights() -> None:
    assert generate_rule_insights(_profile("0", "0")) == []


def test_rule_output_is_deterministic() -> None:
    profile = _profile("2500", "3000", [("Food", "300")])

    assert generate_rule_insights(profile) == generate_rule_insights(profile)


def test_healthy_month_yields_no_insights_without_categories() -> None:
    assert generate_rule_insights(_profile("4000", "1000")) == []


def test_advice_depends_on_net_income_sign() -> None:
    assert generate_rule_advice(_profile("100", "200")) == DEFICIT_ADVICE
    assert generate_rule_advice(_profile("200", "200")) == SURPLUS_ADVICE
