"""Display helpers shared by the resource projections."""

from datetime import datetime, timezone
from typing import Optional


def format_age(created: Optional[datetime], now: Optional[datetime] = None) -> str:
    """
    Format the age of a resource as a single, floor-truncated unit.

    Under a minute renders seconds, under an hour minutes, under a day
    hours, anything older days: "30s", "5m", "3h", "1d". Never composite.

    Args:
        created: Creation timestamp (naive values are taken as UTC)
        now: Reference time, defaults to the current UTC time

    Returns:
        Age string, or "unknown" when there is no timestamp
    """
    if created is None:
        return "unknown"

    if created.tzinfo is None:
        created = created.replace(tzinfo=timezone.utc)
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    # Clock skew can put the timestamp slightly in the future
    seconds = max(int((now - created).total_seconds()), 0)

    if seconds < 60:
        return f"{seconds}s"
    if seconds < 3600:
        return f"{seconds // 60}m"
    if seconds < 86400:
        return f"{seconds // 3600}h"
    return f"{seconds // 86400}d"


def format_ready(ready: int, total: int) -> str:
    """Render a "ready/total" count."""
    return f"{ready}/{total}"


def format_port(port: int, protocol: Optional[str], node_port: Optional[int]) -> str:
    """Render a service port as "80/TCP", or "80/TCP:30080" with a node port."""
    text = f"{port}/{protocol or 'TCP'}"
    if node_port:
        text += f":{node_port}"
    return text
