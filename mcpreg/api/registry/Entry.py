"""One parsed registry listing."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Category = Literal["official", "community"]


class Entry(BaseModel):
    """A server listed in the registry README.

    Entries are produced only by the parser and never mutated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(description="Link label")
    url: str = Field(description="Link target")
    description: str = Field(description="Text after the separator")
    category: Category = Field(description="Section the entry was found in")
