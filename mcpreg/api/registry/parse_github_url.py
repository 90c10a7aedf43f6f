"""Extract owner/repo from a GitHub URL."""

from ._patterns import GITHUB_REPO_PATTERN
from .RepoRef import RepoRef


def parse_github_url(url: str) -> RepoRef:
    """Return the owner/repo of a github.com URL.

    Raises:
        ValueError: If the URL has no owner/repo segments
    """
    match = GITHUB_REPO_PATTERN.search(url or "")
    if match is None:
        raise ValueError("Invalid GitHub URL format")
    owner, repo = match.group(1), match.group(2)
    if repo.endswith(".git"):
        repo = repo[: -len(".git")]
    if not repo:
        raise ValueError("Invalid GitHub URL format")
    return RepoRef(owner=owner, repo=repo)
