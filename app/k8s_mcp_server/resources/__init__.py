"""
MCP Resources for server and cluster information.

Provides read-only resources:
- k8s://server/info - Server identity, connection mode and tool catalog
- k8s://cluster/namespaces - Namespaces in the cluster
"""

import asyncio
import json

from fastmcp import FastMCP

from k8s_mcp_server.config import K8sMCPServerConfig
from k8s_mcp_server.k8s import KubernetesClient, KubernetesClientError
from k8s_mcp_server.tools.catalog import TOOL_CATALOG
from k8s_mcp_server.utils import get_logger

logger = get_logger(__name__)


def register_resources(
    mcp: FastMCP,
    config: K8sMCPServerConfig,
    client: KubernetesClient,
) -> None:
    """
    Register server and cluster resources with the MCP server.

    Args:
        mcp: FastMCP server instance
        config: Server configuration
        client: Cluster client used by the namespace listing
    """

    @mcp.resource(
        uri="k8s://server/info",
        name="Server Info",
        description="Server name, version, cluster connection mode and tools",
        mime_type="application/json",
    )
    async def get_server_info() -> str:
        """Describe this server and the tools it exposes."""
        info = {
            "name": config.server.name,
            "version": config.server.version,
            "connection": "in-cluster" if config.kubernetes.in_cluster else "kubeconfig",
            "tools": [
                {
                    "name": spec.name,
                    "description": spec.description,
                    "input_schema": spec.input_schema(),
                }
                for spec in TOOL_CATALOG
            ],
        }
        return json.dumps(info, indent=2)

    @mcp.resource(
        uri="k8s://cluster/namespaces",
        name="Kubernetes Namespaces",
        description="Lists all available namespaces in the cluster",
        mime_type="application/json",
    )
    async def get_namespaces() -> str:
        """Get list of all namespaces."""
        try:
            namespaces = await asyncio.to_thread(client.list_namespaces)
        except KubernetesClientError as e:
            logger.error("Failed to read namespaces resource", extra={"error": str(e)})
            return json.dumps({"error": str(e)})
        return json.dumps(
            {"namespaces": [ns.to_dict() for ns in namespaces]}, indent=2
        )

    logger.debug("Registered 2 resources")
