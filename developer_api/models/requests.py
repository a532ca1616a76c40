"""API request models."""

from pydantic import BaseModel, Field
from typing import Optional


class Developer(BaseModel):
    """Developer record submitted to the API.

    Both fields are optional on the wire; presence is a validation rule,
    not a parsing concern.
    """

    first_name: Optional[str] = Field(
        default=None,
        alias="FirstName",
        description="Developer first name",
        examples=["Ada"],
    )
    email: Optional[str] = Field(
        default=None,
        alias="Email",
        description="Contact email address",
        examples=["ada@example.com"],
    )

    model_config = {"populate_by_name": True, "frozen": True}
