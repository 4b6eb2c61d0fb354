"""
Output formatting for the kubectl simulator.

Reproduces kubectl's textual output with literal tab separators. There is
no column-width computation.
"""

from typing import Iterable, Sequence, Tuple

from kubesandbox.modules.catalog import Pod, ResourceKind, ResourceRecord

CLUSTER_INFO = (
    "Kubernetes control plane is running at https://kubernetes.docker.internal:6443\n"
    "CoreDNS is running at https://kubernetes.docker.internal:6443"
    "/api/v1/namespaces/kube-system/services/kube-dns:dns/proxy\n\n"
    "To further debug and diagnose cluster problems, use 'kubectl cluster-info dump'."
)

VERSION = (
    'Client Version: version.Info{Major:"1", Minor:"28", GitVersion:"v1.28.0"}\n'
    'Server Version: version.Info{Major:"1", Minor:"28", GitVersion:"v1.28.0"}'
)

API_RESOURCES = (
    "NAME\t\tSHORTNAMES\tAPIVERSION\t\tNAMESPACED\tKIND\n"
    "pods\t\tpo\t\tv1\t\t\ttrue\t\tPod\n"
    "services\tsvc\t\tv1\t\t\ttrue\t\tService\n"
    "deployments\tdeploy\t\tapps/v1\t\t\ttrue\t\tDeployment\n"
    "nodes\t\tno\t\tv1\t\t\tfalse\t\tNode\n"
)

APPLY_CONFIRMATION = (
    "✅ Resource created/updated successfully!\n\n"
    "This is a simulated environment. In a real cluster, your manifest would be applied."
)

DESCRIBE_IMAGE = "nginx:latest"


def render_table(kind: ResourceKind, records: Iterable[ResourceRecord]) -> str:
    """Render a header line plus one newline-terminated line per record."""
    lines = [kind.header]
    lines.extend(kind.row.format(r=record) for record in records)
    return "\n".join(lines) + "\n"


def render_no_resources(namespace: str) -> str:
    return f"No resources found in {namespace} namespace."


def render_summary(namespace: str, counts: Sequence[Tuple[str, int]]) -> str:
    """
    Render the ``get all`` summary.

    Args:
        namespace: Namespace shown in the heading
        counts: (label, count) pairs in display order
    """
    output = f"Resources in {namespace} namespace:\n\n"
    for label, count in counts:
        output += f"{label}: {count}\n"
    return output


def render_pod_description(pod: Pod, namespace: str) -> str:
    """Render ``kubectl describe pod`` output with a static container block."""
    return (
        f"Name:         {pod.name}\n"
        f"Namespace:    {namespace}\n"
        f"Status:       {pod.status}\n"
        f"Ready:        {pod.ready}\n"
        f"Age:          {pod.age}\n\n"
        f"Containers:\n"
        f"  {pod.name}:\n"
        f"    Image:     {DESCRIBE_IMAGE}\n"
        f"    Ready:     True\n"
        f"    Restarts:  0\n"
    )


def render_deleted(resource: str, name: str) -> str:
    return (
        f"✅ {resource}/{name} deleted\n\n"
        "This is a simulated environment. In a real cluster, the resource would be deleted."
    )
