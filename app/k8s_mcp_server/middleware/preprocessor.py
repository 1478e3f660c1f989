"""
Tool Call Preprocessor Middleware.

Filters unexpected parameters from tool calls to ensure MCP protocol compliance.
This handles non-standard MCP clients that add extra fields.
"""

from typing import Mapping

from fastmcp.server.middleware import Middleware, MiddlewareContext
from fastmcp.server.middleware.middleware import CallNext

from k8s_mcp_server.tools.base import ToolSpec
from k8s_mcp_server.utils import get_logger

logger = get_logger(__name__)


class ToolCallPreprocessor(Middleware):
    """
    Preprocess tool call arguments to ensure MCP protocol compliance.

    This middleware uses WHITELIST-based filtering: any argument that is not
    declared in the tool catalog is removed before FastMCP validates the
    call against the tool's signature.

    Example:
        Incoming: {"name": "web-0", "toolCallId": "call_xxx"}
        Catalog allows: ["name", "namespace"]
        Outgoing: {"name": "web-0"}  # toolCallId removed

    Tools that are not in the catalog are passed through untouched.
    """

    def __init__(self, allowed_params: Mapping[str, set[str]], verbose: bool = False):
        """
        Initialize preprocessor.

        Args:
            allowed_params: Tool name -> declared argument names
            verbose: If True, log filtered fields at debug level
        """
        self.allowed_params = dict(allowed_params)
        self.verbose = verbose

    async def on_call_tool(
        self,
        context: MiddlewareContext,
        call_next: CallNext,
    ):
        """
        Preprocess tool arguments by filtering to declared parameters.

        Args:
            context: Middleware context containing the tool call message
            call_next: Function to call next middleware/handler in chain

        Returns:
            Result from the tool execution
        """
        self._filter_arguments(context)
        return await call_next(context)

    def _filter_arguments(self, context: MiddlewareContext) -> None:
        # For on_call_tool, context.message is CallToolRequestParams directly
        message = context.message
        arguments = getattr(message, "arguments", None)
        if not arguments:
            return

        tool_name = message.name
        allowed = self.allowed_params.get(tool_name)
        if allowed is None:
            return

        removed = set(arguments) - allowed
        if not removed:
            return

        if self.verbose:
            logger.debug(
                "Filtered undeclared tool arguments",
                extra={"tool": tool_name, "removed": sorted(removed)},
            )

        for key in removed:
            del arguments[key]


def create_preprocessor(
    catalog: tuple[ToolSpec, ...], verbose: bool = False
) -> ToolCallPreprocessor:
    """
    Factory function to create a ToolCallPreprocessor.

    Args:
        catalog: Tool specs whose declared arguments form the whitelist
        verbose: If True, log filtered fields

    Returns:
        Configured ToolCallPreprocessor instance
    """
    allowed = {spec.name: set(spec.argument_names) for spec in catalog}
    return ToolCallPreprocessor(allowed, verbose=verbose)
