"""
Pydantic models for server configuration.

Configuration is loaded once at startup and passed to the server
components explicitly; nothing mutates it afterwards.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def default_kubeconfig_path() -> Optional[str]:
    """Conventional per-user kubeconfig location, or None without a home dir."""
    try:
        home = Path.home()
    except RuntimeError:
        return None
    return str(home / ".kube" / "config")


class ServerSettings(BaseModel):
    """Server identity and transport settings."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        default="k8s-mcp-server",
        min_length=1,
        description="Server name reported during MCP initialization",
    )
    version: str = Field(
        default="2.0.0",
        min_length=1,
        description="Server version reported during MCP initialization",
    )
    transport: Literal["stdio", "streamable-http"] = Field(
        default="stdio",
        description="Transport protocol to use",
    )
    host: str = Field(
        default="127.0.0.1",
        description="Host to bind to (streamable-http only)",
    )
    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port to listen on (streamable-http only)",
    )

    @field_validator("name", "version", mode="before")
    @classmethod
    def coerce_to_str(cls, v):
        # YAML and env parsing turn "2" or "2.0" into numbers
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v


class KubernetesSettings(BaseModel):
    """Cluster connection settings."""

    model_config = ConfigDict(frozen=True)

    in_cluster: bool = Field(
        default=False,
        description="Use the service account credentials mounted into the pod",
    )
    kubeconfig: Optional[str] = Field(
        default_factory=default_kubeconfig_path,
        description="Path to the kubeconfig file (ignored in-cluster)",
    )

    @field_validator("kubeconfig", mode="before")
    @classmethod
    def expand_kubeconfig(cls, v):
        if isinstance(v, str) and v:
            return str(Path(v).expanduser())
        return v


class LoggingSettings(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(frozen=True)

    level: Literal["debug", "info", "warn", "warning", "error"] = Field(
        default="info",
        description="Logging level",
    )
    format: Literal["text", "json"] = Field(
        default="text",
        description="Log line format",
    )

    @field_validator("level", "format", mode="before")
    @classmethod
    def lowercase(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


class K8sMCPServerConfig(BaseModel):
    """
    Main configuration container.

    Loaded from packaged YAML defaults, an optional user config file and
    environment variables, then handed to the server components.
    """

    server: ServerSettings = Field(default_factory=ServerSettings)
    kubernetes: KubernetesSettings = Field(default_factory=KubernetesSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    # Allow extra fields to be ignored (forward compatibility)
    model_config = ConfigDict(extra="ignore", frozen=True)
