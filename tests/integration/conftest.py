"""Shared fixtures for faasreport integration tests.

Provides a fake ClusterView serving a fixed snapshot so the full pipeline
(reads → extractor → rules → reporter) runs without a Kubernetes cluster.
"""

from __future__ import annotations

import pytest

from faasreport.cluster import ClusterAccessError, ContainerView, EnvVarView, NamespaceView, WorkloadView
from faasreport.models.config import ReportConfig

# ---------------------------------------------------------------------------
# View factory helpers
# ---------------------------------------------------------------------------


def make_container(
    name: str,
    image: str = "",
    env: dict[str, str] | None = None,
    mounts: tuple[str, ...] = (),
    requests: dict[str, str] | None = None,
    limits: dict[str, str] | None = None,
    read_only: bool | None = None,
) -> ContainerView:
    return ContainerView(
        name=name,
        image=image or f"ghcr.io/openfaas/{name}:latest",
        env=tuple(EnvVarView(k, v) for k, v in (env or {}).items()),
        volume_mounts=mounts,
        requests=requests or {},
        limits=limits or {},
        read_only_root_filesystem=read_only,
    )


def make_workload(
    name: str,
    *containers: ContainerView,
    namespace: str = "openfaas",
    replicas: int = 1,
    template_labels: dict[str, str] | None = None,
) -> WorkloadView:
    return WorkloadView(
        namespace=namespace,
        name=name,
        replicas=replicas,
        template_labels=template_labels or {},
        containers=containers or (make_container(name),),
    )


def make_gateway(image: str = "ghcr.io/openfaas/gateway:0.27.0", replicas: int = 3, **env: str) -> WorkloadView:
    gateway_env = {
        "read_timeout": "65s",
        "write_timeout": "65s",
        "upstream_timeout": "60s",
    }
    gateway_env.update(env)
    return make_workload(
        "gateway",
        make_container("gateway", image=image, env=gateway_env),
        make_container(
            "operator",
            image="ghcr.io/openfaasltd/faas-netes:0.5.0",
            env={"read_timeout": "60s", "write_timeout": "60s", "set_nonroot_user": "true", "cluster_role": "true"},
        ),
        replicas=replicas,
    )


def make_function(name: str, namespace: str = "openfaas-fn", **labels: str) -> WorkloadView:
    return make_workload(
        name,
        make_container(
            name,
            env={"read_timeout": "10s", "write_timeout": "10s", "exec_timeout": "10s"},
            requests={"memory": "64Mi", "cpu": "50m"},
            read_only=True,
        ),
        namespace=namespace,
        template_labels={"com.openfaas.scale.zero": "true", **labels},
    )


class FakeClusterView:
    """In-memory ClusterView recording the order of reads."""

    def __init__(
        self,
        platform_workloads: list[WorkloadView] | None = None,
        namespaces: list[NamespaceView] | None = None,
        function_workloads: dict[str, list[WorkloadView]] | None = None,
        version: str = "v1.29.2",
        fail_on: str | None = None,
    ) -> None:
        self.platform_workloads = platform_workloads if platform_workloads is not None else [make_gateway()]
        self.namespaces = namespaces if namespaces is not None else [NamespaceView("openfaas"), NamespaceView("openfaas-fn")]
        self.function_workloads = function_workloads or {}
        self.version = version
        self.fail_on = fail_on
        self.calls: list[str] = []
        self.closed = False

    def _record(self, call: str) -> None:
        self.calls.append(call)
        if self.fail_on and call.startswith(self.fail_on):
            raise ClusterAccessError(call, "(403) Forbidden")

    async def list_platform_workloads(self, namespace: str) -> list[WorkloadView]:
        self._record(f"list_platform_workloads:{namespace}")
        return [w for w in self.platform_workloads if w.namespace == namespace]

    async def list_namespaces(self) -> list[NamespaceView]:
        self._record("list_namespaces")
        return list(self.namespaces)

    async def list_workloads(self, namespace: str) -> list[WorkloadView]:
        self._record(f"list_workloads:{namespace}")
        return list(self.function_workloads.get(namespace, []))

    async def server_version(self) -> str:
        self._record("server_version")
        return self.version

    async def close(self) -> None:
        self.closed = True


def connect_to(cluster: FakeClusterView):
    """ClusterView factory returning *cluster* for any kubeconfig."""

    async def _connect(kubeconfig: str) -> FakeClusterView:
        return cluster

    return _connect


@pytest.fixture()
def config() -> ReportConfig:
    return ReportConfig(kubeconfig="/nonexistent/kubeconfig", namespace="openfaas")
