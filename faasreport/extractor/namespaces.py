"""Classification of cluster namespaces."""

from __future__ import annotations

from dataclasses import dataclass

from faasreport.cluster.views import NamespaceView

DEFAULT_FUNCTION_NAMESPACE = "openfaas-fn"
FUNCTION_NAMESPACE_ANNOTATION = "openfaas"
SERVICE_MESH_NAMESPACE = "istio-system"


@dataclass(frozen=True)
class NamespaceSummary:
    core_namespace_present: bool
    service_mesh_present: bool
    function_namespaces: tuple[str, ...]


def is_function_namespace(namespace: NamespaceView) -> bool:
    return (
        namespace.name == DEFAULT_FUNCTION_NAMESPACE
        or FUNCTION_NAMESPACE_ANNOTATION in namespace.annotations
    )


def classify_namespaces(namespaces: list[NamespaceView], core_namespace: str) -> NamespaceSummary:
    """Summarise the namespace listing.

    The default function namespace is always included, whether or not it
    exists; the result is deduplicated and sorted.
    """
    names = {n.name for n in namespaces}
    function_namespaces = {DEFAULT_FUNCTION_NAMESPACE}
    function_namespaces.update(n.name for n in namespaces if is_function_namespace(n))
    return NamespaceSummary(
        core_namespace_present=core_namespace in names,
        service_mesh_present=SERVICE_MESH_NAMESPACE in names,
        function_namespaces=tuple(sorted(function_namespaces)),
    )
