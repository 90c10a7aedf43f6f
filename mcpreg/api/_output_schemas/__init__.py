"""Output schemas for API commands - enforces consistent output structure.

Each command has a Pydantic model that defines its output structure.
Importing a schema module registers its models.
"""

from ._base import BaseOutputSchema
from ._registry import get_output_schema, register_output_schema

__all__ = ["BaseOutputSchema", "get_output_schema", "register_output_schema"]
