"""
K8s MCP Server.

Read-only MCP server exposing Kubernetes cluster inspection tools
(pods, services, deployments, namespaces and pod logs) to LLM clients.
"""

__version__ = "2.0.0"
