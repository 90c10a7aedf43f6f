"""Invoke one tool without the transport."""

import inspect
from typing import Any

from ..api.config.McpregConfig import McpregConfig
from ..api.StageResult import StageResult
from .tools import TOOLS
from .UnknownToolError import UnknownToolError


def _bind_arguments(func: Any, arguments: dict[str, Any], config: McpregConfig | None) -> dict[str, Any]:
    """Map tool arguments onto the command signature.

    Raises:
        ValueError: If a required argument is missing
    """
    kwargs: dict[str, Any] = {}
    for param_name, param in inspect.signature(func).parameters.items():
        if param_name == "config":
            kwargs["config"] = config
            continue
        val = arguments.get(param_name)
        if val is not None:
            kwargs[param_name] = val
        elif param.default is inspect.Parameter.empty:
            raise ValueError(f"Missing required argument: {param_name}")
    return kwargs


def _payload(result: StageResult) -> dict[str, Any]:
    payload = dict(result.output)
    if not result.success:
        errors = payload.get("errors") or []
        payload["error"] = errors[0] if errors else result.result
    return payload


def call_tool(tool_name: str, arguments: dict[str, Any] | None = None, config: McpregConfig | None = None) -> dict[str, Any]:
    """Run a tool to completion and return its JSON payload.

    Failures inside the tool come back as ``success: false`` payloads.

    Raises:
        UnknownToolError: If ``tool_name`` is not defined
    """
    spec = TOOLS.get(tool_name)
    if spec is None:
        raise UnknownToolError(tool_name)
    if arguments is not None and not isinstance(arguments, dict):
        error = "Tool arguments must be an object"
        return {"success": False, "errors": [error], "warnings": [], "error": error}
    try:
        kwargs = _bind_arguments(spec.func, arguments or {}, config)
    except ValueError as e:
        return {"success": False, "errors": [str(e)], "warnings": [], "error": str(e)}

    result = spec.func(**kwargs)
    list(result.progress_callback(result))
    return _payload(result)
