"""
Configuration system for K8s MCP Server.

Exports:
    K8sMCPServerConfig: Main configuration container
    load_config: Load configuration from YAML/env
"""

from k8s_mcp_server.config.models import (
    K8sMCPServerConfig,
    KubernetesSettings,
    LoggingSettings,
    ServerSettings,
)
from k8s_mcp_server.config.loader import ConfigError, load_config

__all__ = [
    "K8sMCPServerConfig",
    "ServerSettings",
    "KubernetesSettings",
    "LoggingSettings",
    "ConfigError",
    "load_config",
]
