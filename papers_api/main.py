"""Main module entrypoint for local runtime execution.

This module validates startup configuration and runs the service lifecycle.
"""

import argparse
import asyncio

from papers_api.bootstrap import bootstrap_create_orchestrator
from papers_api.config import SettingsLoadError, config_load_settings
from papers_api.observability import observability_configure_logging, observability_get_logger
from papers_api.runtime import EXIT_CODE_STARTUP_FAILURE

logger = observability_get_logger(__name__)


def main() -> None:
    """Run the selected runtime command and exit with its status.

    Returns:
        None: This function does not return; it raises SystemExit.

    Raises:
        SystemExit: Always raised with the lifecycle exit status.
    """

    argument_parser = argparse.ArgumentParser(description="Papers API runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api",),
        help="Runtime command: `api` connects storage and starts the HTTP server",
        type=str,
    )
    argument_parser.parse_args()

    try:
        settings = config_load_settings()
    except SettingsLoadError as error:
        observability_configure_logging()
        logger.error("failed to start server: invalid configuration", error=str(error))
        raise SystemExit(EXIT_CODE_STARTUP_FAILURE) from error

    observability_configure_logging(level=settings.log_level, fmt=settings.log_format)
    orchestrator = bootstrap_create_orchestrator(settings)
    raise SystemExit(asyncio.run(orchestrator.lifecycle_run()))


if __name__ == "__main__":
    main()
