"""
MCP Middleware for request preprocessing.

Contains:
- ToolCallPreprocessor: Filters undeclared parameters from tool calls
"""

from k8s_mcp_server.middleware.preprocessor import (
    ToolCallPreprocessor,
    create_preprocessor,
)

__all__ = [
    "ToolCallPreprocessor",
    "create_preprocessor",
]
