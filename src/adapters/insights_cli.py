"""CLI adapter printing the current month's insights.

This module wires the ledger service and the insight pipeline from the
composition root and prints the generated insights to the console.
"""

import asyncio

from src.application.errors import StorageError
from src.infrastructure.container import (
    build_insight_pipeline,
    build_ledger_service,
)
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Generate and print insights for the current month."""
    logger = get_app_logger()
    try:
        ledger = build_ledger_service()
    except StorageError as exc:
        logger.error(f"Unable to load the ledger: {exc}")
        return
    pipeline = build_insight_pipeline()

    asyncio.run(pipeline.refresh(ledger.snapshot()))

    summary = pipeline.summary
    print(
        f"{summary.year}-{summary.month:02d}: "
        f"income={summary.total_income}, "
        f"expenses={summary.total_expenses}, "
        f"net={summary.net_income}"
    )
    if pipeline.error:
        print(f"Backend error: {pipeline.error} (showing rule-based insights)")
    if not pipeline.insights:
        print("No insights for this month.")
    for insight in pipeline.insights:
        print(
            f"[{insight.priority.value.upper()}] {insight.title} "
            f"({insight.type.value})"
        )
        print(f"  {insight.message}")
        for item in insight.action_items:
            print(f"  - {item}")


if __name__ == "__main__":  # pragma: no cover
    main()
