"""Setup-wizard router exposing validation and individual probes."""

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse, PlainTextResponse

from app.config import Strictness, config_render_env_template
from app.health import HealthCheckService, UnknownCheckError, config_build_environment_status


def api_create_setup_router(health_service: HealthCheckService) -> APIRouter:
    """Create setup router used by the interactive configuration wizard.

    Validation here always runs in lenient mode so an incomplete
    configuration is reported step by step instead of blocking the wizard.

    Args:
        health_service: Service running probes and validation.

    Returns:
        APIRouter: Router exposing `/setup/*` endpoints.

    Raises:
        ValueError: Raised when health_service is invalid.
    """

    if health_service is None:
        raise ValueError("health_service must not be None")

    router = APIRouter(prefix="/setup", tags=["setup"])

    @router.get("/configuration")
    def api_setup_configuration() -> JSONResponse:
        """Return the lenient configuration validation result.

        Returns:
            JSONResponse: Validation issues and key classification.

        Raises:
            RuntimeError: Raised when validation cannot run.
        """

        validation = health_service.health_validate_configuration(strictness=Strictness.LENIENT)
        return JSONResponse(content=validation.to_dict(), headers={"Cache-Control": "no-store"})

    @router.get("/environment")
    def api_setup_environment() -> JSONResponse:
        """Return the masked per-key configuration status table.

        Returns:
            JSONResponse: Counts, issues and per-key presence.

        Raises:
            RuntimeError: Raised when validation cannot run.
        """

        validation = health_service.health_validate_configuration(strictness=Strictness.LENIENT)
        payload = config_build_environment_status(health_service.context.environment_reader, validation)
        return JSONResponse(content=payload, headers={"Cache-Control": "no-store"})

    @router.get("/checks/{check_name}")
    async def api_setup_run_check(check_name: str) -> JSONResponse:
        """Run one probe for the wizard's step-by-step progress view.

        Args:
            check_name: Probe name.

        Returns:
            JSONResponse: Single probe result.

        Raises:
            HTTPException: Raised with 404 when the check name is unknown.
        """

        try:
            result = await health_service.health_check_named(check_name, strictness=Strictness.LENIENT)
        except UnknownCheckError as error:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error.args[0])) from error
        return JSONResponse(
            content={"check": check_name, **result.to_dict()},
            headers={"Cache-Control": "no-store"},
        )

    @router.get("/env-template", response_class=PlainTextResponse)
    def api_setup_env_template() -> PlainTextResponse:
        return PlainTextResponse(config_render_env_template())

    return router
