"""
MCP tools for read-only cluster inspection.

Tools:
- list-pods, get-pod, get-pod-logs
- list-services, get-service
- list-deployments, get-deployment
- list-namespaces
"""

from k8s_mcp_server.tools.base import (
    ToolArgument,
    ToolArgumentError,
    ToolCallError,
    ToolError,
    ToolSpec,
    UnknownToolError,
)
from k8s_mcp_server.tools.catalog import TOOL_CATALOG, TOOLS_BY_NAME
from k8s_mcp_server.tools.handlers import ToolHandlers
from k8s_mcp_server.tools.registry import register_tools

__all__ = [
    # Base classes
    "ToolArgument",
    "ToolSpec",
    # Exceptions
    "ToolError",
    "ToolArgumentError",
    "ToolCallError",
    "UnknownToolError",
    # Catalog
    "TOOL_CATALOG",
    "TOOLS_BY_NAME",
    # Dispatch
    "ToolHandlers",
    "register_tools",
]
