"""Developer API — validate and acknowledge Developer records."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

import structlog

from developer_api.models.requests import Developer
from developer_api.models.responses import (
    DeveloperAcceptedResponse,
    RuleCatalogResponse,
    ValidationFailedResponse,
)
from developer_api.validators import Validator

logger = structlog.get_logger()

router = APIRouter()


def _get_validator(request: Request) -> Validator:
    return request.app.state.developer_validator


@router.post(
    "/developer",
    response_model=DeveloperAcceptedResponse,
    responses={400: {"model": ValidationFailedResponse}},
)
async def create_developer(developer: Developer, request: Request):
    """Validate a Developer record.

    Nothing is persisted: a valid record is acknowledged, an invalid one is
    rejected with every (field, code) failure.
    """
    result = _get_validator(request).validate(developer)

    if not result.is_valid:
        logger.info(
            "developer_rejected",
            failures=[f"{f.field}:{f.code}" for f in result.failures],
        )
        return JSONResponse(
            status_code=400,
            content=ValidationFailedResponse(failures=list(result.failures)).model_dump(),
        )

    logger.info("developer_accepted")
    return DeveloperAcceptedResponse()


@router.get("/developer/rules", response_model=RuleCatalogResponse)
async def list_developer_rules(request: Request):
    """Rule catalogue of the Developer validator (nothing is evaluated)."""
    validator = _get_validator(request)
    return RuleCatalogResponse(
        record=getattr(validator.record_type, "__name__", "record"),
        rule_sets=validator.describe(),
    )
