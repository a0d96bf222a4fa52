import logging
import logging.config
from typing import Any

from loop_runner.settings import settings


def init_logging(
    *,
    log_level: str | None = None,
    dep_log_level: str | None = None,
) -> None:
    """Configure logging for loop_runner.

    Defaults come from `loop_runner.settings.settings` (env prefix: `LOOP_RUNNER_`).
    """

    update: dict[str, Any] = {}
    if log_level is not None:
        update["log_level"] = log_level.upper()
    if dep_log_level is not None:
        update["dep_log_level"] = dep_log_level.upper()

    effective_settings = settings.model_copy(update=update) if update else settings
    logging.config.dictConfig(effective_settings.logging_config)
