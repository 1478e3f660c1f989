"""
Tool handlers.

Routes a tool call by name to its handler. Each handler validates its
arguments, runs the matching cluster client call on a worker thread and
renders the result as indented JSON under a one-line heading.
"""

import asyncio
import json
import time
from typing import Any, Awaitable, Callable, Mapping, Optional

from k8s_mcp_server.http.metrics import MetricsCollector
from k8s_mcp_server.k8s import KubernetesClient, KubernetesClientError
from k8s_mcp_server.tools.arguments import parse_tail, require_name, resolve_namespace
from k8s_mcp_server.tools.base import ToolCallError, UnknownToolError
from k8s_mcp_server.utils import get_logger

logger = get_logger(__name__)

Handler = Callable[[dict[str, Any]], Awaitable[str]]


def _to_json(value: Any, what: str) -> str:
    """Serialize a record or list of records as indented JSON."""
    if isinstance(value, list):
        payload = [item.to_dict() for item in value]
    else:
        payload = value.to_dict()
    try:
        return json.dumps(payload, indent=2)
    except (TypeError, ValueError) as e:
        raise ToolCallError(f"failed to marshal {what}: {e}") from e


class ToolHandlers:
    """
    Stateless dispatch table for the eight cluster tools.

    The only shared state is the read-only cluster client and the
    metrics collector.
    """

    def __init__(
        self,
        client: KubernetesClient,
        metrics: Optional[MetricsCollector] = None,
    ):
        self.client = client
        self.metrics = metrics if metrics is not None else MetricsCollector()
        self._handlers: dict[str, Handler] = {
            "list-pods": self.list_pods,
            "get-pod": self.get_pod,
            "get-pod-logs": self.get_pod_logs,
            "list-services": self.list_services,
            "get-service": self.get_service,
            "list-deployments": self.list_deployments,
            "get-deployment": self.get_deployment,
            "list-namespaces": self.list_namespaces,
        }

    @property
    def tool_names(self) -> list[str]:
        """Names of all tools with a handler."""
        return list(self._handlers)

    async def call(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> str:
        """
        Run the tool called ``name``.

        Args:
            name: Tool name (e.g., 'list-pods')
            arguments: Raw tool arguments; None values count as absent

        Returns:
            Text result

        Raises:
            UnknownToolError: If no handler exists for ``name``
            ToolArgumentError: If a required argument is missing
            ToolCallError: If the cluster call or serialization fails
        """
        handler = self._handlers.get(name)
        if handler is None:
            logger.warning("Unknown tool requested", extra={"tool": name})
            raise UnknownToolError(name)

        args = {k: v for k, v in (arguments or {}).items() if v is not None}
        started = time.monotonic()
        try:
            result = await handler(args)
        except Exception:
            self.metrics.record_tool_call(
                name, success=False, duration=time.monotonic() - started
            )
            raise

        self.metrics.record_tool_call(name, duration=time.monotonic() - started)
        return result

    async def _run(
        self,
        action: str,
        fn: Callable[..., Any],
        *args: Any,
        context: Optional[dict[str, Any]] = None,
    ) -> Any:
        """Run a blocking client call off the event loop, wrapping failures."""
        try:
            return await asyncio.to_thread(fn, *args)
        except KubernetesClientError as e:
            logger.error(
                f"Failed to {action}",
                extra={**(context or {}), "error": str(e)},
            )
            raise ToolCallError(f"failed to {action}: {e}") from e

    # Pods

    async def list_pods(self, args: dict[str, Any]) -> str:
        namespace = resolve_namespace(args)
        logger.debug("Listing pods", extra={"namespace": namespace})

        pods = await self._run(
            "list pods", self.client.list_pods, namespace,
            context={"namespace": namespace},
        )
        return f"Pods in namespace '{namespace}':\n{_to_json(pods, 'pods')}"

    async def get_pod(self, args: dict[str, Any]) -> str:
        name = require_name(args, "pod")
        namespace = resolve_namespace(args)
        logger.debug("Getting pod", extra={"resource_name": name, "namespace": namespace})

        pod = await self._run(
            "get pod", self.client.get_pod, namespace, name,
            context={"resource_name": name, "namespace": namespace},
        )
        return f"Pod '{name}' in namespace '{namespace}':\n{_to_json(pod, 'pod')}"

    async def get_pod_logs(self, args: dict[str, Any]) -> str:
        name = require_name(args, "pod")
        namespace = resolve_namespace(args)
        tail_lines = parse_tail(args.get("tail"))
        logger.debug(
            "Getting pod logs",
            extra={"resource_name": name, "namespace": namespace, "tail": tail_lines},
        )

        logs = await self._run(
            "get pod logs", self.client.get_pod_logs, namespace, name, tail_lines,
            context={"resource_name": name, "namespace": namespace},
        )
        return f"Logs for pod '{name}' in namespace '{namespace}':\n{logs}"

    # Services

    async def list_services(self, args: dict[str, Any]) -> str:
        namespace = resolve_namespace(args)
        logger.debug("Listing services", extra={"namespace": namespace})

        services = await self._run(
            "list services", self.client.list_services, namespace,
            context={"namespace": namespace},
        )
        return f"Services in namespace '{namespace}':\n{_to_json(services, 'services')}"

    async def get_service(self, args: dict[str, Any]) -> str:
        name = require_name(args, "service")
        namespace = resolve_namespace(args)
        logger.debug("Getting service", extra={"resource_name": name, "namespace": namespace})

        service = await self._run(
            "get service", self.client.get_service, namespace, name,
            context={"resource_name": name, "namespace": namespace},
        )
        return f"Service '{name}' in namespace '{namespace}':\n{_to_json(service, 'service')}"

    # Deployments

    async def list_deployments(self, args: dict[str, Any]) -> str:
        namespace = resolve_namespace(args)
        logger.debug("Listing deployments", extra={"namespace": namespace})

        deployments = await self._run(
            "list deployments", self.client.list_deployments, namespace,
            context={"namespace": namespace},
        )
        return (
            f"Deployments in namespace '{namespace}':\n"
            f"{_to_json(deployments, 'deployments')}"
        )

    async def get_deployment(self, args: dict[str, Any]) -> str:
        name = require_name(args, "deployment")
        namespace = resolve_namespace(args)
        logger.debug(
            "Getting deployment", extra={"resource_name": name, "namespace": namespace}
        )

        deployment = await self._run(
            "get deployment", self.client.get_deployment, namespace, name,
            context={"resource_name": name, "namespace": namespace},
        )
        return (
            f"Deployment '{name}' in namespace '{namespace}':\n"
            f"{_to_json(deployment, 'deployment')}"
        )

    # Namespaces

    async def list_namespaces(self, args: dict[str, Any]) -> str:
        logger.debug("Listing namespaces")

        namespaces = await self._run("list namespaces", self.client.list_namespaces)
        return f"Namespaces:\n{_to_json(namespaces, 'namespaces')}"
