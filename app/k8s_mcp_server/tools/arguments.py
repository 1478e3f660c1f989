"""
Argument extraction for tool calls.

Protocol clients are loosely typed: numbers may arrive as floats or
strings, optional fields as empty strings. These helpers normalize them.
"""

import math
from typing import Any, Mapping, Optional

from k8s_mcp_server.tools.base import ToolArgumentError

DEFAULT_NAMESPACE = "default"


def resolve_namespace(args: Mapping[str, Any]) -> str:
    """Return the namespace argument, or "default" if absent or empty."""
    namespace = args.get("namespace")
    if isinstance(namespace, str) and namespace:
        return namespace
    return DEFAULT_NAMESPACE


def require_name(args: Mapping[str, Any], kind: str) -> str:
    """
    Return the required name argument.

    Raises:
        ToolArgumentError: If name is absent, empty or not a string
    """
    name = args.get("name")
    if not isinstance(name, str) or not name:
        raise ToolArgumentError(f"{kind} name is required")
    return name


def parse_tail(value: Any) -> Optional[int]:
    """
    Parse the tail argument of get-pod-logs.

    Integers, floats (truncated) and numeric strings are accepted alike.
    Anything unparseable means "no tail limit" rather than an error.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return parse_tail(float(text))
        except ValueError:
            return None
    return None
