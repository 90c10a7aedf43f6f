"""Repository details command."""

from collections.abc import Iterator
from typing import Any

from ...constants import README_PREVIEW_LIMIT, README_TRUNCATION_MARKER, README_UNAVAILABLE
from ...utils.get_logger import get_logger
from .._output_schemas.registry import RegistryDetailsOutput
from ..config.McpregConfig import McpregConfig
from ..StageResult import StageResult
from .fetch_document import fetch_document
from .fetch_json import fetch_json
from .FetchError import FetchError
from .parse_github_url import parse_github_url
from .RepoRef import RepoRef

logger = get_logger("registry.details")


def _readme_preview(config: McpregConfig, ref: RepoRef) -> str:
    url = f"{config.source.raw_url.rstrip('/')}/{ref.owner}/{ref.repo}/main/README.md"
    try:
        readme = fetch_document(url, config.source.timeout, "README")
    except FetchError as e:
        logger.info("No README preview for %s: %s", ref.full_name, e)
        return README_UNAVAILABLE
    if len(readme) > README_PREVIEW_LIMIT:
        return readme[:README_PREVIEW_LIMIT] + README_TRUNCATION_MARKER
    return readme


def _empty_details(github_url: str, errors: list[str]) -> dict[str, Any]:
    return RegistryDetailsOutput(
        success=False,
        errors=errors,
        warnings=[],
        github_url=github_url,
        name=None,
        full_name=None,
        description=None,
        url=None,
        stars=None,
        forks=None,
        open_issues=None,
        language=None,
        created_at=None,
        updated_at=None,
        pushed_at=None,
        license=None,
        topics=[],
        readme_preview=None,
        clone_url=None,
    ).model_dump(mode="python")


def cmd_details(github_url: str, config: McpregConfig | None = None) -> StageResult:
    """Get repository metadata and a README preview for a GitHub-hosted server.

    Args:
        github_url: Repository URL (e.g. "https://github.com/microsoft/playwright-mcp")
        config: Configuration to use (loaded from MCPREG_HOME when omitted)

    Returns:
        StageResult with stars, forks, issues, license, topics, timestamps and README preview
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        try:
            yield (0.1, "Parsing GitHub URL...")
            ref = parse_github_url(github_url)
            cfg = config or McpregConfig.load()

            yield (0.3, "Fetching repository metadata...")
            api_url = f"{cfg.source.api_url.rstrip('/')}/repos/{ref.owner}/{ref.repo}"
            repo_data = fetch_json(api_url, cfg.source.timeout, "repo details")
            if not isinstance(repo_data, dict):
                raise FetchError("Unexpected repo details payload")

            yield (0.7, "Fetching README...")
            readme = _readme_preview(cfg, ref)
            license_info = repo_data.get("license") or {}
            if isinstance(license_info, dict):
                license_name = license_info.get("name") or "No license"
            else:
                license_name = str(license_info)
            details = RegistryDetailsOutput(
                success=True,
                errors=[],
                warnings=[] if readme != README_UNAVAILABLE else [README_UNAVAILABLE],
                github_url=github_url,
                name=repo_data.get("name"),
                full_name=repo_data.get("full_name"),
                description=repo_data.get("description"),
                url=repo_data.get("html_url"),
                stars=repo_data.get("stargazers_count"),
                forks=repo_data.get("forks_count"),
                open_issues=repo_data.get("open_issues_count"),
                language=repo_data.get("language"),
                created_at=repo_data.get("created_at"),
                updated_at=repo_data.get("updated_at"),
                pushed_at=repo_data.get("pushed_at"),
                license=license_name,
                topics=repo_data.get("topics") or [],
                readme_preview=readme,
                clone_url=repo_data.get("clone_url"),
            ).model_dump(mode="python")
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Details failed: {e}"
            result_obj.output = _empty_details(github_url, [str(e)])
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Details for {details['full_name'] or ref.full_name}"
        result_obj.output = details
        result_obj.success = True

    return StageResult(
        announce=f"Getting details for {github_url}...",
        progress_callback=do_work,
    )
