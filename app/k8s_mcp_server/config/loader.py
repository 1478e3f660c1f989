"""
Configuration loader with YAML and environment variable support.

Priority (highest to lowest):
1. Explicit overrides (command line flags)
2. Environment variables: SERVER_NAME, KUBECONFIG, LOG_LEVEL, ...
3. User config: --config-dir path / ~/.k8s-mcp-server/config.yaml
4. Built-in defaults: k8s_mcp_server/config/defaults/settings.yaml
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from k8s_mcp_server.config.models import K8sMCPServerConfig

logger = logging.getLogger(__name__)


# Default config locations
DEFAULT_CONFIG_DIR = Path.home() / ".k8s-mcp-server"
PACKAGE_DEFAULTS_DIR = Path(__file__).parent / "defaults"

# Environment variable -> (section, key)
ENV_MAPPING: dict[str, tuple[str, str]] = {
    "SERVER_NAME": ("server", "name"),
    "SERVER_VERSION": ("server", "version"),
    "SERVER_TRANSPORT": ("server", "transport"),
    "SERVER_HOST": ("server", "host"),
    "SERVER_PORT": ("server", "port"),
    "KUBECONFIG": ("kubernetes", "kubeconfig"),
    "K8S_IN_CLUSTER": ("kubernetes", "in_cluster"),
    "LOG_LEVEL": ("logging", "level"),
    "LOG_FORMAT": ("logging", "format"),
}


class ConfigError(Exception):
    """Raised when configuration values are unusable."""


def _deep_merge(base: dict, override: dict) -> dict:
    """
    Deep merge two dictionaries.

    Values from 'override' take precedence over 'base'.
    Nested dicts are merged recursively.
    """
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML file, returning empty dict if not found."""
    if not path.exists():
        return {}
    try:
        with open(path) as f:
            content = yaml.safe_load(f)
            return content if isinstance(content, dict) else {}
    except yaml.YAMLError as e:
        logger.warning("Failed to parse %s: %s", path, e)
        return {}


def _get_env_overrides(environ: Optional[dict[str, str]] = None) -> dict[str, Any]:
    """
    Extract configuration overrides from environment variables.

    Only the variables in ENV_MAPPING are consulted. Empty values count as
    unset. Values stay strings; pydantic coerces them to the field types.
    """
    environ = os.environ if environ is None else environ
    overrides: dict[str, Any] = {}

    for env_key, (section, key) in ENV_MAPPING.items():
        value = environ.get(env_key)
        if value is None or value == "":
            continue
        overrides.setdefault(section, {})[key] = value

    return overrides


def load_config(
    config_dir: Optional[str | Path] = None,
    overrides: Optional[dict[str, Any]] = None,
    environ: Optional[dict[str, str]] = None,
) -> K8sMCPServerConfig:
    """
    Load configuration from multiple sources.

    Args:
        config_dir: Optional path to configuration directory.
                   If not provided, uses ~/.k8s-mcp-server/
        overrides: Nested dict applied on top of everything else
        environ: Environment mapping (defaults to os.environ)

    Returns:
        K8sMCPServerConfig: Validated configuration object

    Raises:
        ConfigError: If configuration is invalid
    """
    # Start with package defaults
    config_data = _load_yaml_file(PACKAGE_DEFAULTS_DIR / "settings.yaml")

    # Merge user config
    user_config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR
    user_config = _load_yaml_file(user_config_dir / "config.yaml")
    config_data = _deep_merge(config_data, user_config)

    # Environment variables
    config_data = _deep_merge(config_data, _get_env_overrides(environ))

    if overrides:
        config_data = _deep_merge(config_data, overrides)

    try:
        return K8sMCPServerConfig.model_validate(config_data)
    except ValidationError as e:
        raise ConfigError(f"invalid configuration: {e}") from e
