"""Simple CLI to validate the language-model connection.

This adapter is meant for local operations: it reads the insight settings
from the environment and asks the configured model for advice on a sample
profile.
"""

import asyncio
import dataclasses

from src.application.use_cases.check_connection import CheckConnectionUseCase
from src.infrastructure.container import build_insight_backend
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import InsightSettings


def main() -> None:
    """Run a single advice request against the configured endpoint."""
    logger = get_app_logger()
    settings = dataclasses.replace(
        InsightSettings.from_env(),
        use_remote_backend=True,
    )
    logger.info(f"Endpoint: {settings.base_url} (model {settings.model})")

    use_case = CheckConnectionUseCase(build_insight_backend, logger=logger)
    result = asyncio.run(use_case.execute(settings))

    if result.success:
        logger.info(result.message)
    else:
        logger.error(result.message)


if __name__ == "__main__":
    main()
