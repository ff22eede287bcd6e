"""Prompt templates sent to the language-model backend."""

from decimal import Decimal

from src.domain.models import FinancialProfile
from src.utils.decimal_utils import format_amount

INSIGHTS_SCHEMA = """{
    "insights": [
        {
            "title": "Insight Title",
            "message": "Detailed explanation of the insight",
            "type": "spending|saving|income|budget|warning",
            "priority": "high|medium|low",
            "actionItems": ["Action 1", "Action 2", "Action 3"]
        }
    ]
}"""


def _money(value: Decimal) -> str:
    return f"${format_amount(value)}"


def _format_categories(profile: FinancialProfile, limit: int | None = None) -> str:
    categories = profile.top_spending_categories
    if limit is not None:
        categories = categories[:limit]
    if not categories:
        return "none recorded"
    return ", ".join(
        f"{name}: {_money(amount)}" for name, amount in categories
    )


def _format_trends(profile: FinancialProfile) -> str:
    if not profile.spending_trends:
        return "none recorded"
    return ", ".join(
        f"{key.month_name}: {_money(amount)}"
        for key, amount in profile.spending_trends.items()
    )


def _format_goals(profile: FinancialProfile) -> str:
    if not profile.user_goals:
        return ""
    return "\n- User Goals: " + "; ".join(profile.user_goals)


def build_insights_prompt(profile: FinancialProfile) -> str:
    """Return the prompt asking for structured JSON insights.

    Args:
        profile: Profile of the analyzed month.

    Returns:
        str: Prompt embedding the figures and the JSON response schema.
    """
    return f"""You are a professional financial advisor AI. Analyze the \
following user's financial data and provide 3-5 personalized, actionable \
financial insights.

User Financial Data:
- Monthly Income: {_money(profile.total_monthly_income)}
- Monthly Expenses: {_money(profile.total_monthly_expenses)}
- Net Income: {_money(profile.net_income)}
- Top Spending Categories: {_format_categories(profile)}
- Spending Trends: {_format_trends(profile)}{_format_goals(profile)}

Please provide insights in the following JSON format:
{INSIGHTS_SCHEMA}

Guidelines:
1. Be specific and actionable
2. Consider the user's spending patterns
3. Provide practical advice
4. Use appropriate priority levels
5. Include 2-4 action items per insight
6. Be encouraging but honest about financial health
7. Respond with the JSON document only"""


def build_advice_prompt(profile: FinancialProfile) -> str:
    """Return the prompt asking for free-text coaching advice."""
    top_names = ", ".join(
        name for name, _ in profile.top_spending_categories[:3]
    ) or "none recorded"
    return f"""You are a personal financial coach. Based on this user's \
financial situation, provide a personalized 2-3 paragraph advice.

Financial Situation:
- Monthly Income: {_money(profile.total_monthly_income)}
- Monthly Expenses: {_money(profile.total_monthly_expenses)}
- Net Income: {_money(profile.net_income)}
- Top Spending: {top_names}{_format_goals(profile)}

Provide encouraging, practical advice that helps them improve their \
financial health. Be specific and actionable."""


__all__ = ["INSIGHTS_SCHEMA", "build_advice_prompt", "build_insights_prompt"]
