"""Deterministic insight rules evaluated over a financial profile."""

from decimal import Decimal

from src.domain.models import (
    FinancialProfile,
    Insight,
    InsightPriority,
    InsightType,
)
from src.utils.decimal_utils import format_amount

SAVINGS_RATE_TARGET = Decimal("20")

OVERSPENDING_ACTIONS = (
    "Review and eliminate unnecessary expenses",
    "Look for ways to increase income",
    "Create a strict monthly budget",
)
SAVINGS_ACTIONS = (
    "Set up automatic savings transfers",
    "Review expenses to find savings opportunities",
    "Consider the 50/30/20 budget rule",
)

DEFICIT_ADVICE = """I notice you're spending more than you earn this month. \
This is a critical situation that needs immediate attention.

Here's what I recommend: First, create a detailed budget that accounts for \
every dollar. Cut non-essential expenses immediately. Look for ways to \
increase your income through side gigs or freelance work. Consider using the \
envelope method to control spending in problem categories.

Remember, small changes compound over time. Even saving $50-100 per month \
can make a significant difference in your financial health."""

SURPLUS_ADVICE = """Great job on maintaining a positive cash flow! You're on \
the right track to building wealth.

To optimize your financial situation further, consider automating your \
savings and investments. Set up automatic transfers to a high-yield savings \
account and consider investing in low-cost index funds. Track your spending \
patterns to identify areas where you can optimize without sacrificing your \
lifestyle.

Keep up the excellent work, and remember that consistency is key to \
long-term financial success!"""


def _rule_id(rule: str, profile: FinancialProfile) -> str:
    return f"rule-{rule}-{profile.month.year}-{profile.month.month:02d}"


def overspending_insight(profile: FinancialProfile) -> Insight | None:
    """Warn when the month's expenses exceed its income."""
    if profile.net_income >= 0:
        return None
    overspend = format_amount(abs(profile.net_income))
    return Insight(
        id=_rule_id("overspending", profile),
        title="Overspending Alert",
        message=(
            f"You're spending ${overspend} more than you earn. "
            "This is unsustainable long-term."
        ),
        type=InsightType.WARNING,
        priority=InsightPriority.HIGH,
        action_items=OVERSPENDING_ACTIONS,
    )


def top_category_insight(profile: FinancialProfile) -> Insight | None:
    """Report the share of the month spent on the largest category."""
    if not profile.top_spending_categories:
        return None
    if profile.total_monthly_expenses <= 0:
        return None
    category, amount = profile.top_spending_categories[0]
    share = (amount / profile.total_monthly_expenses) * Decimal("100")
    return Insight(
        id=_rule_id("top-category", profile),
        title="Top Spending Category",
        message=(
            f"You spend {format_amount(share, 1)}% of your budget on "
            f"{category}. Consider if this aligns with your priorities."
        ),
        type=InsightType.SPENDING,
        priority=InsightPriority.MEDIUM,
        action_items=(
            f"Set a monthly limit for {category}",
            "Track daily spending in this category",
            "Look for ways to reduce costs",
        ),
    )


def savings_rate_insight(profile: FinancialProfile) -> Insight | None:
    """Recommend a higher savings rate when it falls below the target."""
    if profile.total_monthly_income <= 0:
        return None
    rate = (profile.net_income / profile.total_monthly_income) * Decimal("100")
    if rate >= SAVINGS_RATE_TARGET:
        return None
    return Insight(
        id=_rule_id("savings-rate", profile),
        title="Savings Opportunity",
        message=(
            f"You're saving {format_amount(rate, 1)}% of your income. "
            "Financial experts recommend saving at least "
            f"{SAVINGS_RATE_TARGET}%."
        ),
        type=InsightType.SAVING,
        priority=InsightPriority.MEDIUM,
        action_items=SAVINGS_ACTIONS,
    )


RULES = (
    overspending_insight,
    top_category_insight,
    savings_rate_insight,
)


def generate_rule_insights(profile: FinancialProfile) -> list[Insight]:
    """Apply every rule in order and keep the insights they produce.

    Args:
        profile: Profile of the analyzed month.

    Returns:
        list[Insight]: Zero to three insights, in rule order.
    """
    insights: list[Insight] = []
    for rule in RULES:
        insight = rule(profile)
        if insight is not None:
            insights.append(insight)
    return insights


def generate_rule_advice(profile: FinancialProfile) -> str:
    """Return canned coaching text matching the sign of net income."""
    if profile.net_income < 0:
        return DEFICIT_ADVICE
    return SURPLUS_ADVICE


__all__ = [
    "RULES",
    "SAVINGS_RATE_TARGET",
    "generate_rule_advice",
    "generate_rule_insights",
    "overspending_insight",
    "savings_rate_insight",
    "top_category_insight",
]
