"""Output schemas for registry commands (remote README and GitHub metadata)."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class RegistrySearchOutput(BaseOutputSchema):
    """Output schema for registry search command.

    Each server is {name, url, description, category, installation}.
    """

    query: str = Field(..., description="Lower-cased search query")
    total_results: int = Field(..., description="Number of servers returned")
    showing: int = Field(..., description="Number of servers shown, never more than the limit")
    category_filter: str = Field(..., description="Category filter that was applied")
    servers: list[dict[str, Any]] = Field(..., description="Matching servers in document order")


class RegistryListOutput(BaseOutputSchema):
    """Output schema for registry list command."""

    total_servers: int = Field(..., description="Servers in the category before pagination")
    showing: int = Field(..., description="Servers in this page")
    offset: int = Field(..., description="Offset that was applied")
    limit: int = Field(..., description="Limit that was applied")
    category_filter: str = Field(..., description="Category filter that was applied")
    has_more: bool = Field(..., description="True when servers exist past this page")
    servers: list[dict[str, Any]] = Field(..., description="Servers in this page")


class RegistryDetailsOutput(BaseOutputSchema):
    """Output schema for registry details command.

    Repository fields are None when the lookup failed.
    """

    github_url: str = Field(..., description="URL that was looked up")
    name: str | None = Field(..., description="Repository name")
    full_name: str | None = Field(..., description="owner/repo")
    description: str | None = Field(..., description="Repository description")
    url: str | None = Field(..., description="Repository HTML URL")
    stars: int | None = Field(..., description="Stargazer count")
    forks: int | None = Field(..., description="Fork count")
    open_issues: int | None = Field(..., description="Open issue count")
    language: str | None = Field(..., description="Primary language")
    created_at: str | None = Field(..., description="Creation timestamp")
    updated_at: str | None = Field(..., description="Last update timestamp")
    pushed_at: str | None = Field(..., description="Last push timestamp")
    license: str | None = Field(..., description="License name or 'No license'")
    topics: list[str] = Field(..., description="Repository topics")
    readme_preview: str | None = Field(..., description="README text, truncated")
    clone_url: str | None = Field(..., description="HTTPS clone URL")


register_output_schema("registry", "search", RegistrySearchOutput)
register_output_schema("registry", "list", RegistryListOutput)
register_output_schema("registry", "details", RegistryDetailsOutput)
