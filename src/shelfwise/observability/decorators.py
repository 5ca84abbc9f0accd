"""Decorators for tracing MCP tool handlers."""

import functools
from collections.abc import Awaitable, Callable
from datetime import datetime
from typing import Any

import logfire

ToolHandler = Callable[..., Awaitable[dict[str, Any]]]


def trace_tool(tool_name: str) -> Callable[[ToolHandler], ToolHandler]:
    """Open a Logfire span around each call of a tool handler."""

    def decorator(func: ToolHandler) -> ToolHandler:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            with logfire.span(
                "tool.execution.{tool_name}",
                tool_name=tool_name,
                tool_category=_categorize_tool(tool_name),
            ) as span:
                start_time = datetime.now()
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    span.set_attribute("tool.success", False)
                    span.set_attribute("tool.error", str(e))
                    raise

                span.set_attribute("tool.success", not result.get("isError", False))
                span.set_attribute(
                    "tool.duration_ms", (datetime.now() - start_time).total_seconds() * 1000
                )
                return result

        return wrapper

    return decorator


def _categorize_tool(tool_name: str) -> str:
    if "borrow" in tool_name or "return" in tool_name or "waiting" in tool_name:
        return "circulation"
    if "route" in tool_name or "path" in tool_name:
        return "routing"
    if "recommend" in tool_name:
        return "recommendation"
    return "catalog"
