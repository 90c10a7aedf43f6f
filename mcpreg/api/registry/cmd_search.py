"""Search registry command."""

from collections.abc import Iterator

from ...constants import SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT
from .._output_schemas.registry import RegistrySearchOutput
from ..config.McpregConfig import McpregConfig
from ..StageResult import StageResult
from .clamp_limit import clamp_limit
from .describe_entry import describe_entry
from .filter_by_category import filter_by_category
from .load_entries import load_entries
from .search_entries import search_entries


def cmd_search(
    query: str,
    limit: int = SEARCH_DEFAULT_LIMIT,
    category: str = "all",
    config: McpregConfig | None = None,
) -> StageResult:
    """Search the MCP servers README by name and description.

    Args:
        query: Case-insensitive substring (e.g. "playwright", "database")
        limit: Maximum results (default 10, max 50)
        category: "official", "community" or "all"
        config: Configuration to use (loaded from MCPREG_HOME when omitted)

    Returns:
        StageResult with matching servers and install hints
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        needle = str(query or "").lower()
        category_filter = str(category or "all")
        try:
            max_results = clamp_limit(limit, SEARCH_DEFAULT_LIMIT, SEARCH_MAX_LIMIT)
            yield (0.2, "Fetching registry README...")
            entries = load_entries(config or McpregConfig.load())
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"Search failed: {e}"
            result_obj.output = RegistrySearchOutput(
                success=False,
                errors=[str(e)],
                warnings=[],
                query=needle,
                total_results=0,
                showing=0,
                category_filter=category_filter,
                servers=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Searching entries...")
        results = search_entries(filter_by_category(entries, category_filter), needle, max_results)

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(results)} server(s) matching '{needle}'"
        result_obj.output = RegistrySearchOutput(
            success=True,
            errors=[],
            warnings=[],
            query=needle,
            total_results=len(results),
            showing=min(len(results), max_results),
            category_filter=category_filter,
            servers=[describe_entry(entry) for entry in results],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Searching registry for '{query}'...",
        progress_callback=do_work,
    )
