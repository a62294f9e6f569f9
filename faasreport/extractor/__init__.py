"""Extractor: pure conversion of cluster views into a PlatformInstallation.

Nothing in this package performs I/O or parses durations.

Submodules
----------
values     -- strict boolean / lenient integer parsing, ExtractionError.
namespaces -- function namespace classification.
platform   -- gateway, controller, queue-worker, autoscaler, dashboard, NATS.
functions  -- function records and scaling labels.
"""

from __future__ import annotations

from faasreport.cluster.views import WorkloadView
from faasreport.extractor.functions import extract_functions
from faasreport.extractor.namespaces import NamespaceSummary, classify_namespaces
from faasreport.extractor.platform import extract_control_plane
from faasreport.extractor.values import ExtractionError
from faasreport.models.platform import PlatformInstallation

__all__ = [
    "ExtractionError",
    "NamespaceSummary",
    "build_installation",
    "classify_namespaces",
]


def build_installation(
    namespaces: NamespaceSummary,
    platform_workloads: list[WorkloadView],
    function_workloads: dict[str, list[WorkloadView]],
    orchestrator_version: str,
) -> PlatformInstallation:
    """Assemble the installation record from one snapshot of reads.

    *function_workloads* is keyed by function namespace; namespaces missing
    from it are recorded with no functions.

    Raises ExtractionError when a control-plane boolean setting is invalid.
    """
    control_plane = extract_control_plane(platform_workloads)
    return PlatformInstallation(
        orchestrator_version=orchestrator_version,
        core_namespace_present=namespaces.core_namespace_present,
        service_mesh_present=namespaces.service_mesh_present,
        function_namespaces=namespaces.function_namespaces,
        gateway=control_plane.gateway,
        controller=control_plane.controller,
        queue_worker=control_plane.queue_worker,
        autoscaler=control_plane.autoscaler,
        dashboard=control_plane.dashboard,
        internal_messaging=control_plane.internal_messaging,
        functions_by_namespace={
            ns: extract_functions(function_workloads.get(ns, [])) for ns in namespaces.function_namespaces
        },
    )
