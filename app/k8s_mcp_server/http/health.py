"""
Health check endpoints for Kubernetes probes.

Provides /health (liveness), /ready (readiness) and /metrics when the
server runs with the streamable-http transport.
"""

from typing import Callable

from fastmcp import FastMCP
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse

from k8s_mcp_server import __version__
from k8s_mcp_server.http.metrics import MetricsCollector, metrics_response


def register_http_routes(
    mcp: FastMCP,
    service_name: str,
    metrics: MetricsCollector,
    get_registered_tools: Callable[[], list[str]],
) -> None:
    """Register custom HTTP routes for health checks and metrics."""

    @mcp.custom_route("/health", methods=["GET"])
    async def health_check(request: Request) -> JSONResponse:
        """Kubernetes liveness probe endpoint."""
        return JSONResponse({
            "status": "healthy",
            "version": __version__,
            "service": service_name,
        })

    @mcp.custom_route("/ready", methods=["GET"])
    async def ready_check(request: Request) -> JSONResponse:
        """Kubernetes readiness probe endpoint."""
        tools = get_registered_tools()
        checks = {
            "server": True,
            "tools_registered": len(tools) > 0,
        }
        is_ready = all(checks.values())
        return JSONResponse(
            {
                "status": "ready" if is_ready else "not_ready",
                "checks": checks,
                "registered_tools": tools,
            },
            status_code=200 if is_ready else 503,
        )

    @mcp.custom_route("/metrics", methods=["GET"])
    async def metrics_endpoint(request: Request) -> PlainTextResponse:
        """Prometheus metrics endpoint."""
        return metrics_response(metrics)
