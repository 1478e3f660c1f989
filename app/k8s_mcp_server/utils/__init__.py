from k8s_mcp_server.utils.logging import get_logger, setup_logging

__all__ = ["get_logger", "setup_logging"]
