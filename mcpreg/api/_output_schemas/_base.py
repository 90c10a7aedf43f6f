"""Base output schema with standard success, errors and warnings fields."""

from pydantic import BaseModel, Field


class BaseOutputSchema(BaseModel):
    """Base schema for all API command outputs.

    All commands must include success, errors and warnings for consistency.
    """

    success: bool = Field(..., description="Whether the command succeeded")
    errors: list[str] = Field(default_factory=list, description="List of error messages, empty list if no errors")
    warnings: list[str] = Field(default_factory=list, description="List of warning messages, empty list if no warnings")
