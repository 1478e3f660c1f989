"""
FastMCP Server Setup.

This module creates and configures the MCP server instance.
Components are built in dependency order:
config -> cluster client -> tool handlers -> FastMCP server.
"""

from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from fastmcp import FastMCP

from k8s_mcp_server.config import K8sMCPServerConfig
from k8s_mcp_server.http import MetricsCollector, register_http_routes
from k8s_mcp_server.k8s import KubernetesClient
from k8s_mcp_server.middleware import create_preprocessor
from k8s_mcp_server.resources import register_resources
from k8s_mcp_server.tools import TOOL_CATALOG, ToolHandlers, register_tools
from k8s_mcp_server.utils import get_logger

logger = get_logger(__name__)


@dataclass
class ServerBundle:
    """Bundle containing server and related components."""

    server: FastMCP
    client: KubernetesClient
    handlers: ToolHandlers
    metrics: MetricsCollector
    registered_tools: list[str]


def create_server(
    config: K8sMCPServerConfig,
    client: Optional[KubernetesClient] = None,
) -> ServerBundle:
    """
    Create and configure the MCP server.

    Args:
        config: Server configuration
        client: Pre-built cluster client; built from config when omitted

    Returns:
        ServerBundle containing the FastMCP instance and its components

    Raises:
        KubernetesConfigError: If the cluster client cannot be configured
    """
    if client is None:
        client = KubernetesClient.from_settings(config.kubernetes)

    metrics = MetricsCollector()
    handlers = ToolHandlers(client, metrics=metrics)

    @asynccontextmanager
    async def lifespan(server: FastMCP) -> AsyncIterator[dict]:
        """Log startup and shutdown; expose components to request context."""
        logger.info(
            "Starting K8s MCP Server",
            extra={"server": config.server.name, "version": config.server.version},
        )
        yield {"config": config, "handlers": handlers, "metrics": metrics}
        logger.info("K8s MCP Server shutting down")

    mcp = FastMCP(
        name=config.server.name,
        version=config.server.version,
        lifespan=lifespan,
    )

    _register_middleware(mcp, config)

    registered_tools = register_tools(mcp, handlers)
    logger.debug("Registered tools", extra={"tools": registered_tools})

    register_resources(mcp, config, client)

    if config.server.transport == "streamable-http":
        register_http_routes(
            mcp,
            service_name=config.server.name,
            metrics=metrics,
            get_registered_tools=lambda: registered_tools,
        )

    return ServerBundle(
        server=mcp,
        client=client,
        handlers=handlers,
        metrics=metrics,
        registered_tools=registered_tools,
    )


def _register_middleware(mcp: FastMCP, config: K8sMCPServerConfig) -> None:
    """
    Register MCP middleware for request processing.

    Args:
        mcp: FastMCP server instance
        config: Server configuration
    """
    verbose = config.logging.level == "debug"
    mcp.add_middleware(create_preprocessor(TOOL_CATALOG, verbose=verbose))
    logger.debug("Registered ToolCallPreprocessor middleware", extra={"verbose": verbose})
