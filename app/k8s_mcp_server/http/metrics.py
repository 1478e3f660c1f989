"""
Prometheus metrics for tool calls.

Counts calls and failures per tool and accumulates the time spent in the
cluster API, rendered in the Prometheus text exposition format.
"""

import time
from dataclasses import dataclass, field

from starlette.responses import PlainTextResponse

from k8s_mcp_server import __version__

PREFIX = "k8s_mcp"


@dataclass
class MetricsCollector:
    """
    In-process tool call metrics.

    Counters only ever grow; updates happen on the event loop thread.
    """

    started_at: float = field(default_factory=time.time)

    calls: dict[str, int] = field(default_factory=dict)
    failures: dict[str, int] = field(default_factory=dict)
    seconds: dict[str, float] = field(default_factory=dict)

    @property
    def tool_calls_total(self) -> int:
        return sum(self.calls.values())

    @property
    def tool_calls_error(self) -> int:
        return sum(self.failures.values())

    @property
    def tool_calls_success(self) -> int:
        return self.tool_calls_total - self.tool_calls_error

    def record_tool_call(
        self, tool_name: str, success: bool = True, duration: float = 0.0
    ) -> None:
        """Count one finished tool call and the time it took."""
        self.calls[tool_name] = self.calls.get(tool_name, 0) + 1
        self.seconds[tool_name] = self.seconds.get(tool_name, 0.0) + duration
        if not success:
            self.failures[tool_name] = self.failures.get(tool_name, 0) + 1

    def format_prometheus(self) -> str:
        """Render all metrics as Prometheus exposition text."""
        lines: list[str] = []

        def metric(name: str, kind: str, help_text: str, samples: list[tuple[str, object]]):
            lines.append(f"# HELP {PREFIX}_{name} {help_text}")
            lines.append(f"# TYPE {PREFIX}_{name} {kind}")
            for labels, value in samples:
                lines.append(f"{PREFIX}_{name}{labels} {value}")
            lines.append("")

        metric("info", "gauge", "Server information", [(f'{{version="{__version__}"}}', 1)])
        metric(
            "uptime_seconds", "gauge", "Server uptime in seconds",
            [("", f"{time.time() - self.started_at:.2f}")],
        )
        metric("tool_calls_total", "counter", "Total tool calls", [("", self.tool_calls_total)])
        metric(
            "tool_calls_success_total", "counter", "Successful tool calls",
            [("", self.tool_calls_success)],
        )
        metric(
            "tool_calls_error_total", "counter", "Failed tool calls",
            [("", self.tool_calls_error)],
        )

        if self.calls:
            metric(
                "tool_calls_by_name", "counter", "Tool calls by tool name",
                [(f'{{tool="{name}"}}', n) for name, n in sorted(self.calls.items())],
            )
            metric(
                "tool_call_seconds_sum", "counter", "Time spent serving tool calls",
                [(f'{{tool="{name}"}}', f"{s:.6f}") for name, s in sorted(self.seconds.items())],
            )
        if self.failures:
            metric(
                "tool_errors_by_name", "counter", "Failed tool calls by tool name",
                [(f'{{tool="{name}"}}', n) for name, n in sorted(self.failures.items())],
            )

        return "\n".join(lines)


def metrics_response(metrics: MetricsCollector) -> PlainTextResponse:
    return PlainTextResponse(
        metrics.format_prometheus(),
        media_type="text/plain; version=0.0.4; charset=utf-8",
    )
