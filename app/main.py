"""Main module entrypoint for local runtime execution.

This module loads runtime settings and launches the FastAPI service or one
of the setup commands.
"""

import argparse
import asyncio
import logging

import uvicorn

from app.bootstrap import bootstrap_create_health_service
from app.api import create_api_application
from app.config import AppSettings, Strictness, config_load_settings, config_render_env_template
from app.domain import OverallStatus
from app.health import health_render_console_report


def main() -> None:
    """Run selected runtime command with validated startup configuration.

    Returns:
        None: This function does not return a runtime value.

    Raises:
        SettingsLoadError: Raised when configuration validation fails.
        SystemExit: Raised with code 1 when `validate-setup` finds the system unhealthy.
    """

    argument_parser = argparse.ArgumentParser(description="MDM Hub health runtime entrypoint")
    argument_parser.add_argument(
        "command",
        nargs="?",
        default="api",
        choices=("api", "validate-setup", "env-template"),
        help="Runtime command: `api` starts server, `validate-setup` runs every check once and prints a report, "
        "`env-template` prints a .env template",
        type=str,
    )
    argument_parser.add_argument(
        "--strict",
        dest="strict",
        action="store_true",
        help="Treat missing required configuration as fatal in `validate-setup` regardless of environment",
    )
    parsed_arguments = argument_parser.parse_args()

    if parsed_arguments.command == "env-template":
        print(config_render_env_template())
        return

    settings = config_load_settings()
    main_configure_logging(settings)

    if parsed_arguments.command == "validate-setup":
        strictness = Strictness.STRICT if parsed_arguments.strict else None
        if not main_run_setup_validation(settings, strictness=strictness):
            raise SystemExit(1)
        return

    application = create_api_application(health_service=bootstrap_create_health_service(settings))
    uvicorn.run(
        application,
        host=settings.application_host,
        port=settings.application_port,
    )


def main_configure_logging(settings: AppSettings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main_run_setup_validation(settings: AppSettings, strictness: Strictness | None = None) -> bool:
    """Run every check once and print the setup report to stdout.

    Args:
        settings: Validated runtime settings.
        strictness: Optional strictness override.

    Returns:
        bool: True unless the overall status is unhealthy.

    Raises:
        SettingsLoadError: This helper does not load settings itself.
    """

    health_service = bootstrap_create_health_service(settings, strictness=strictness)
    validation = health_service.health_validate_configuration()
    aggregate = asyncio.run(health_service.health_run_all())
    print(health_render_console_report(aggregate, validation=validation))
    return aggregate.overall_status != OverallStatus.UNHEALTHY


if __name__ == "__main__":
    main()
