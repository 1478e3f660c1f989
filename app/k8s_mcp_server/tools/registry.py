"""
Tool Registry.

Registers the tool catalog with a FastMCP server. Each tool gets a typed
wrapper so FastMCP can derive its input schema; the wrapper forwards the
raw arguments to ToolHandlers and turns handler failures into MCP tool
errors (``isError: true``).
"""

from typing import Annotated, Any

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError as MCPToolError
from pydantic import Field

from k8s_mcp_server.tools.base import ToolArgument, ToolError, ToolSpec
from k8s_mcp_server.tools.catalog import (
    GET_DEPLOYMENT,
    GET_POD,
    GET_SERVICE,
    NAMESPACE_ARG,
    TAIL_ARG,
    TOOLS_BY_NAME,
)
from k8s_mcp_server.tools.handlers import ToolHandlers


def _field(arg: ToolArgument) -> Any:
    """Schema metadata for a parameter, taken from the catalog."""
    return Field(description=arg.description, json_schema_extra={"type": arg.json_type})


# namespace and tail reach the handlers unvalidated; arguments.py normalizes them
Namespace = Annotated[Any, _field(NAMESPACE_ARG)]
Tail = Annotated[Any, _field(TAIL_ARG)]
PodName = Annotated[str, _field(GET_POD.required[0])]
ServiceName = Annotated[str, _field(GET_SERVICE.required[0])]
DeploymentName = Annotated[str, _field(GET_DEPLOYMENT.required[0])]


def _annotations(spec: ToolSpec) -> dict[str, Any]:
    return {
        "title": spec.title,
        "readOnlyHint": True,
        "destructiveHint": False,
        "idempotentHint": True,
        "openWorldHint": True,
    }


def register_tools(mcp: FastMCP, handlers: ToolHandlers) -> list[str]:
    """
    Register every catalog tool with the FastMCP server.

    Args:
        mcp: FastMCP server instance
        handlers: Tool handlers backed by a cluster client

    Returns:
        Names of the registered tools
    """

    async def dispatch(name: str, arguments: dict[str, Any]) -> str:
        try:
            return await handlers.call(name, arguments)
        except ToolError as e:
            raise MCPToolError(str(e)) from e

    def tool(name: str):
        spec = TOOLS_BY_NAME[name]
        return mcp.tool(
            name=spec.name,
            description=spec.description,
            annotations=_annotations(spec),
        )

    @tool("list-pods")
    async def list_pods(namespace: Namespace = None) -> str:
        return await dispatch("list-pods", {"namespace": namespace})

    @tool("get-pod")
    async def get_pod(name: PodName, namespace: Namespace = None) -> str:
        return await dispatch("get-pod", {"name": name, "namespace": namespace})

    @tool("get-pod-logs")
    async def get_pod_logs(
        name: PodName,
        namespace: Namespace = None,
        tail: Tail = None,
    ) -> str:
        return await dispatch(
            "get-pod-logs", {"name": name, "namespace": namespace, "tail": tail}
        )

    @tool("list-services")
    async def list_services(namespace: Namespace = None) -> str:
        return await dispatch("list-services", {"namespace": namespace})

    @tool("get-service")
    async def get_service(name: ServiceName, namespace: Namespace = None) -> str:
        return await dispatch("get-service", {"name": name, "namespace": namespace})

    @tool("list-deployments")
    async def list_deployments(namespace: Namespace = None) -> str:
        return await dispatch("list-deployments", {"namespace": namespace})

    @tool("get-deployment")
    async def get_deployment(name: DeploymentName, namespace: Namespace = None) -> str:
        return await dispatch("get-deployment", {"name": name, "namespace": namespace})

    @tool("list-namespaces")
    async def list_namespaces() -> str:
        return await dispatch("list-namespaces", {})

    return list(TOOLS_BY_NAME)
