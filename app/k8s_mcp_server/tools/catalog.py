"""
Tool catalog.

The eight read-only tools this server exposes. The list is fixed at
startup; tools are never added or removed at runtime.
"""

from k8s_mcp_server.tools.base import ToolArgument, ToolSpec

NAMESPACE_ARG = ToolArgument(
    name="namespace",
    description="Kubernetes namespace (default: default)",
)

TAIL_ARG = ToolArgument(
    name="tail",
    description="Number of lines to tail from the end of the log",
    json_type=["integer", "number", "string"],
)


def _name_arg(kind: str) -> ToolArgument:
    return ToolArgument(name="name", description=f"{kind} name")


LIST_PODS = ToolSpec(
    name="list-pods",
    title="List Pods",
    description="List pods in a namespace",
    optional=(NAMESPACE_ARG,),
)

GET_POD = ToolSpec(
    name="get-pod",
    title="Get Pod",
    description="Get detailed information about a specific pod",
    required=(_name_arg("Pod"),),
    optional=(NAMESPACE_ARG,),
)

GET_POD_LOGS = ToolSpec(
    name="get-pod-logs",
    title="Get Pod Logs",
    description="Get logs from a specific pod",
    required=(_name_arg("Pod"),),
    optional=(NAMESPACE_ARG, TAIL_ARG),
)

LIST_SERVICES = ToolSpec(
    name="list-services",
    title="List Services",
    description="List services in a namespace",
    optional=(NAMESPACE_ARG,),
)

GET_SERVICE = ToolSpec(
    name="get-service",
    title="Get Service",
    description="Get detailed information about a specific service",
    required=(_name_arg("Service"),),
    optional=(NAMESPACE_ARG,),
)

LIST_DEPLOYMENTS = ToolSpec(
    name="list-deployments",
    title="List Deployments",
    description="List deployments in a namespace",
    optional=(NAMESPACE_ARG,),
)

GET_DEPLOYMENT = ToolSpec(
    name="get-deployment",
    title="Get Deployment",
    description="Get detailed information about a specific deployment",
    required=(_name_arg("Deployment"),),
    optional=(NAMESPACE_ARG,),
)

LIST_NAMESPACES = ToolSpec(
    name="list-namespaces",
    title="List Namespaces",
    description="List all namespaces in the cluster",
)

TOOL_CATALOG: tuple[ToolSpec, ...] = (
    LIST_PODS,
    GET_POD,
    GET_POD_LOGS,
    LIST_SERVICES,
    GET_SERVICE,
    LIST_DEPLOYMENTS,
    GET_DEPLOYMENT,
    LIST_NAMESPACES,
)

TOOLS_BY_NAME: dict[str, ToolSpec] = {spec.name: spec for spec in TOOL_CATALOG}
