"""GitHub owner/repo pair."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RepoRef:
    """GitHub repository reference extracted from a URL."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
