"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal

from developer_api.validators.models import FieldFailure


class DeveloperAcceptedResponse(BaseModel):
    """Response after a Developer record passes validation."""

    accepted: bool = True


class ValidationFailedResponse(BaseModel):
    """Response when a Developer record is rejected by the validator."""

    error: Literal["validation_failed"] = "validation_failed"
    failures: list[FieldFailure]


class RuleDescription(BaseModel):
    """A single rule in the catalogue."""

    name: str
    code: str


class RuleSetDescription(BaseModel):
    """The rules bound to one field."""

    field: str
    mode: Literal["short_circuit", "accumulate"]
    rules: list[RuleDescription]


class RuleCatalogResponse(BaseModel):
    """Rule catalogue of a record validator."""

    record: str
    rule_sets: list[RuleSetDescription]


class HealthDependency(BaseModel):
    """Health status of a single dependency."""

    status: Literal["healthy", "unhealthy", "degraded"]
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    dependencies: dict[str, HealthDependency]
