"""The read-only surface of the cluster that a report is built from."""

from __future__ import annotations

from typing import Protocol

from faasreport.cluster.views import NamespaceView, WorkloadView

PLATFORM_SELECTOR = "app=openfaas"


class ClusterAccessError(Exception):
    """Raised when credentials cannot be built or an API read fails."""

    def __init__(self, operation: str, cause: Exception | str) -> None:
        super().__init__(f"{operation}: {cause}")
        self.operation = operation
        self.cause = cause


class ClusterView(Protocol):
    """Four reads, each deterministic against an unchanged cluster."""

    async def list_platform_workloads(self, namespace: str) -> list[WorkloadView]: ...

    async def list_namespaces(self) -> list[NamespaceView]: ...

    async def list_workloads(self, namespace: str) -> list[WorkloadView]: ...

    async def server_version(self) -> str: ...

    async def close(self) -> None: ...
