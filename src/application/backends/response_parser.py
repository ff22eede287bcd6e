"""Schema validation of language-model insight responses."""

import json
import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.application.errors import ParseError
from src.domain.models import Insight, InsightPriority, InsightType

_FENCE_PATTERN = re.compile(
    r"^\s*```[a-zA-Z]*\s*\n(?P<body>.*?)\n?\s*```\s*$",
    re.DOTALL,
)

FALLBACK_TITLE = "AI Analysis Complete"
FALLBACK_ACTIONS = (
    "Review the analysis above",
    "Consider implementing suggested changes",
)


class InsightPayload(BaseModel):
    """One insight item as returned by the model."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    title: str
    message: str
    type: str
    priority: str
    action_items: list[str] = Field(alias="actionItems")

    def to_insight(self) -> Insight:
        return Insight(
            title=self.title,
            message=self.message,
            type=InsightType.parse(self.type),
            priority=InsightPriority.parse(self.priority),
            action_items=tuple(self.action_items),
        )


class InsightsEnvelope(BaseModel):
    """Top-level document wrapping the insight items."""

    model_config = ConfigDict(extra="ignore")

    insights: list[Any]


def strip_code_fence(text: str) -> str:
    """Remove a surrounding Markdown code fence, if any."""
    match = _FENCE_PATTERN.match(text)
    if match:
        return match.group("body")
    return text


def parse_insights_response(text: str) -> list[Insight]:
    """Validate a completion against the insights schema.

    Items that do not match the item schema are skipped.

    Args:
        text: Raw completion text.

    Returns:
        list[Insight]: Insights in response order.

    Raises:
        ParseError: If the text is not JSON, lacks the ``insights`` list,
            or yields no usable item.
    """
    try:
        document = json.loads(strip_code_fence(text))
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Response is not valid JSON: {exc}") from exc

    try:
        envelope = InsightsEnvelope.model_validate(document)
    except ValidationError as exc:
        raise ParseError("Response does not contain an insights list") from exc

    insights: list[Insight] = []
    for item in envelope.insights:
        try:
            insights.append(InsightPayload.model_validate(item).to_insight())
        except ValidationError:
            continue
    if not insights:
        raise ParseError("Response contains no usable insight")
    return insights


def fallback_insight(raw_text: str) -> Insight:
    """Wrap unstructured model output into a single generic insight."""
    return Insight(
        title=FALLBACK_TITLE,
        message=raw_text,
        type=InsightType.BUDGET,
        priority=InsightPriority.MEDIUM,
        action_items=FALLBACK_ACTIONS,
    )


__all__ = [
    "FALLBACK_ACTIONS",
    "FALLBACK_TITLE",
    "InsightPayload",
    "InsightsEnvelope",
    "fallback_insight",
    "parse_insights_response",
    "strip_code_fence",
]
