"""
HTTP endpoints for health checks and metrics.

Provides:
- /health: Kubernetes liveness probe
- /ready: Kubernetes readiness probe
- /metrics: Prometheus-format metrics
"""

from k8s_mcp_server.http.health import register_http_routes
from k8s_mcp_server.http.metrics import MetricsCollector, metrics_response

__all__ = [
    "register_http_routes",
    "MetricsCollector",
    "metrics_response",
]
