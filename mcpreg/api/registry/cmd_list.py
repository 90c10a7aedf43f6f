"""List registry command."""

from collections.abc import Iterator

from ...constants import LIST_DEFAULT_LIMIT, LIST_MAX_LIMIT
from .._output_schemas.registry import RegistryListOutput
from ..config.McpregConfig import McpregConfig
from ..StageResult import StageResult
from .clamp_limit import clamp_limit
from .describe_entry import describe_entry
from .filter_by_category import filter_by_category
from .load_entries import load_entries
from .paginate_entries import paginate_entries


def cmd_list(
    limit: int = LIST_DEFAULT_LIMIT,
    offset: int = 0,
    category: str = "all",
    config: McpregConfig | None = None,
) -> StageResult:
    """List servers from the MCP servers README, one page at a time.

    Args:
        limit: Page size (default 20, max 100)
        offset: Servers to skip (default 0)
        category: "official", "community" or "all"
        config: Configuration to use (loaded from MCPREG_HOME when omitted)

    Returns:
        StageResult with the requested page and whether more servers follow
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result."""
        category_filter = str(category or "all")
        try:
            page_size = clamp_limit(limit, LIST_DEFAULT_LIMIT, LIST_MAX_LIMIT)
            start = int(offset or 0)
            yield (0.2, "Fetching registry README...")
            entries = load_entries(config or McpregConfig.load())
        except Exception as e:
            yield (1.0, "Complete")
            result_obj.result = f"List failed: {e}"
            result_obj.output = RegistryListOutput(
                success=False,
                errors=[str(e)],
                warnings=[],
                total_servers=0,
                showing=0,
                offset=0,
                limit=0,
                category_filter=category_filter,
                has_more=False,
                servers=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (0.7, "Paginating entries...")
        page = paginate_entries(filter_by_category(entries, category_filter), start, page_size)

        yield (1.0, "Complete")
        result_obj.result = f"Showing {len(page.entries)} of {page.total} server(s)"
        result_obj.output = RegistryListOutput(
            success=True,
            errors=[],
            warnings=[],
            total_servers=page.total,
            showing=len(page.entries),
            offset=page.offset,
            limit=page.limit,
            category_filter=category_filter,
            has_more=page.has_more,
            servers=[describe_entry(entry) for entry in page.entries],
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce="Listing registry servers...",
        progress_callback=do_work,
    )
