"""Remote source configuration."""

from pydantic import BaseModel, ConfigDict, Field

from ...constants import DEFAULT_API_URL, DEFAULT_FETCH_TIMEOUT, DEFAULT_RAW_URL, DEFAULT_README_URL


class SourceConfig(BaseModel):
    """Where the registry README and repository metadata are fetched from."""

    model_config = ConfigDict(extra="forbid")

    readme_url: str = Field(default=DEFAULT_README_URL, description="Registry README (markdown)")
    api_url: str = Field(default=DEFAULT_API_URL, description="GitHub REST API base URL")
    raw_url: str = Field(default=DEFAULT_RAW_URL, description="Raw file host for repository READMEs")
    timeout: float = Field(default=DEFAULT_FETCH_TIMEOUT, gt=0, description="Seconds before a fetch is abandoned")
