"""Cluster view adapter.

Narrows the Kubernetes API to the four reads a report needs and returns typed,
immutable views of the objects.

Submodules
----------
views      -- WorkloadView, ContainerView, EnvVarView, NamespaceView.
base       -- ClusterView protocol and ClusterAccessError.
kubernetes -- KubernetesClusterView: kubernetes-asyncio implementation.
"""

from faasreport.cluster.base import PLATFORM_SELECTOR, ClusterAccessError, ClusterView
from faasreport.cluster.views import ContainerView, EnvVarView, NamespaceView, WorkloadView

__all__ = [
    "PLATFORM_SELECTOR",
    "ClusterAccessError",
    "ClusterView",
    "ContainerView",
    "EnvVarView",
    "NamespaceView",
    "WorkloadView",
]
