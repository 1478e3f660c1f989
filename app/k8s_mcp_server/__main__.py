"""
K8s MCP Server - Entry Point

Loads configuration, connects to the cluster and serves MCP requests
until the process is interrupted. Supports stdio (default) and
streamable-http transports.
"""

import argparse
import signal
import sys
from typing import Any, Optional

from k8s_mcp_server import __version__
from k8s_mcp_server.config import ConfigError, load_config
from k8s_mcp_server.k8s import KubernetesConfigError
from k8s_mcp_server.server import create_server
from k8s_mcp_server.utils import get_logger, setup_logging

logger = get_logger("k8s_mcp_server")


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Read-only MCP server for Kubernetes cluster inspection",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Start with stdio transport (default)
  k8s-mcp-server

  # Start with HTTP transport inside a cluster
  K8S_IN_CLUSTER=true k8s-mcp-server --transport streamable-http --host 0.0.0.0

  # Use custom config directory
  k8s-mcp-server --config-dir /path/to/config
        """,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"k8s-mcp-server {__version__}",
    )
    parser.add_argument(
        "--config-dir",
        type=str,
        help="Configuration directory path (default: ~/.k8s-mcp-server/)",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "streamable-http"],
        help="Transport protocol (overrides config)",
    )
    parser.add_argument(
        "--host",
        type=str,
        help="Host to bind to (for HTTP transport, overrides config)",
    )
    parser.add_argument(
        "--port",
        type=int,
        help="Port to listen on (for HTTP transport, overrides config)",
    )
    return parser.parse_args(argv)


def cli_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Translate command line flags into a nested config override."""
    server: dict[str, Any] = {}
    if args.transport:
        server["transport"] = args.transport
    if args.host:
        server["host"] = args.host
    if args.port:
        server["port"] = args.port
    return {"server": server} if server else {}


def setup_signal_handlers() -> None:
    """Make SIGTERM stop the serve loop the same way Ctrl-C does."""
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, signal.default_int_handler)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    # Until the configured format is known, log plain text to stderr
    setup_logging()

    try:
        config = load_config(args.config_dir, overrides=cli_overrides(args))
    except ConfigError as e:
        logger.error("Failed to load configuration", extra={"error": str(e)})
        return 1

    setup_logging(config.logging.level, config.logging.format)

    try:
        bundle = create_server(config)
    except KubernetesConfigError as e:
        logger.error("Failed to create server", extra={"error": str(e)})
        return 1

    setup_signal_handlers()

    try:
        if config.server.transport == "stdio":
            bundle.server.run(transport="stdio")
        else:
            logger.info(
                "Listening",
                extra={"url": f"http://{config.server.host}:{config.server.port}"},
            )
            bundle.server.run(
                transport="streamable-http",
                host=config.server.host,
                port=config.server.port,
            )
    except KeyboardInterrupt:
        logger.info("Received shutdown signal")
    except Exception as e:
        logger.error("Server failed", extra={"error": str(e)})
        return 1

    logger.info("Server shutdown gracefully")
    return 0


if __name__ == "__main__":
    sys.exit(main())
