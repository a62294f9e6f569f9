"""Integration tests: the full report pipeline against a fake cluster."""

from __future__ import annotations

import pytest

from faasreport.app import FatalError, MissingNamespaceError, ReportApp
from faasreport.cluster import ClusterAccessError, NamespaceView
from faasreport.models.config import ReportConfig

from .conftest import (
    FakeClusterView,
    connect_to,
    make_container,
    make_function,
    make_gateway,
    make_workload,
)

pytestmark = pytest.mark.integration


def _namespaces(*extra: NamespaceView) -> list[NamespaceView]:
    return [NamespaceView("openfaas"), NamespaceView("openfaas-fn"), *extra]


async def _run(cluster: FakeClusterView, config: ReportConfig) -> str:
    return await ReportApp(config, connect=connect_to(cluster)).run()


class TestReportPipeline:
    async def test_reads_in_order_and_closes(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(namespaces=_namespaces(NamespaceView("dev", {"openfaas": "1"})))

        await _run(cluster, config)

        assert cluster.calls == [
            "list_platform_workloads:openfaas",
            "list_namespaces",
            "list_workloads:dev",
            "list_workloads:openfaas-fn",
            "server_version",
        ]
        assert cluster.closed is True

    async def test_full_installation(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(
            platform_workloads=[
                make_gateway(image="ghcr.io/openfaasltd/gateway:0.4.0", direct_functions="true", probe_functions="true"),
                make_workload(
                    "queue-worker",
                    make_container(
                        "queue-worker",
                        image="ghcr.io/openfaasltd/jetstream-queue-worker:0.3.0",
                        env={"ack_wait": "30s", "max_inflight": "50"},
                    ),
                    replicas=3,
                ),
                make_workload("autoscaler", make_container("autoscaler", image="ghcr.io/openfaasltd/autoscaler:0.3.0")),
                make_workload("dashboard", make_container("dashboard", mounts=("dashboard-jwt",))),
            ],
            namespaces=_namespaces(NamespaceView("istio-system")),
            function_workloads={
                "openfaas-fn": [make_function("env", **{"com.openfaas.scale.zero-duration": "15m"})],
            },
        )

        report = await _run(cluster, config)

        assert report.startswith("OpenFaaS Pro Report\n")
        for feature in ("Async", "Pro gateway", "HA Gateway", "Operator mode", "Autoscaler", "Dashboard", "JetStream", "Istio"):
            assert f"- ✅ {feature}\n" in report
        assert "- Asynchronous concurrency (cluster): 150\n" in report
        assert "* env (1 replicas)\n" in report
        assert "- scale to zero duration 15m\n" in report
        assert report.endswith("\nWarnings:\n\n")

    async def test_default_installation_warnings(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(
            platform_workloads=[make_gateway(replicas=2)],
            function_workloads={"openfaas-fn": [make_function("env")]},
        )

        report = await _run(cluster, config)

        warnings = report.split("\nWarnings:\n\n", 1)[1].splitlines()
        assert warnings == ["⚠️ gateway replicas want >= 3 but got 2, (not Highly Available (HA))"]

    async def test_pro_detection_by_image(self, config: ReportConfig) -> None:
        pro = FakeClusterView(platform_workloads=[make_gateway(image="ghcr.io/openfaasltd/gateway:0.2.0")])
        community = FakeClusterView(platform_workloads=[make_gateway(image="ghcr.io/openfaas/gateway:0.23.2")])

        assert "- ✅ Pro gateway\n" in await _run(pro, config)
        assert "- ❌ Pro gateway\n" in await _run(community, config)

    async def test_pro_detection_by_license_mount(self, config: ReportConfig) -> None:
        gateway = make_workload(
            "gateway",
            make_container(
                "gateway",
                image="ghcr.io/openfaas/gateway:0.27.0",
                env={"upstream_timeout": "60s"},
                mounts=("license",),
            ),
            replicas=3,
        )
        report = await _run(FakeClusterView(platform_workloads=[gateway]), config)
        assert "- ✅ Pro gateway\n" in report
        assert "⚠️ Pro gateway detected, but autoscaler is not enabled\n" in report

    async def test_empty_default_namespace(self, config: ReportConfig) -> None:
        report = await _run(FakeClusterView(), config)
        assert "\nFunctions in (openfaas-fn):\n\nNone detected\n" in report

    async def test_byte_identical_runs(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(
            namespaces=_namespaces(NamespaceView("b-fn", {"openfaas": "x"}), NamespaceView("a-fn", {"openfaas": "y"})),
            function_workloads={
                "a-fn": [make_function("one", namespace="a-fn"), make_function("two", namespace="a-fn")],
                "b-fn": [make_function("three", namespace="b-fn")],
            },
        )
        assert await _run(cluster, config) == await _run(cluster, config)


class TestFatalErrors:
    async def test_missing_platform_namespace(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(namespaces=[NamespaceView("openfaas-fn"), NamespaceView("default")])

        with pytest.raises(FatalError) as exc_info:
            await _run(cluster, config)

        assert exc_info.value.stage == "namespaces"
        assert isinstance(exc_info.value.cause, MissingNamespaceError)
        assert str(exc_info.value) == 'OpenFaaS Core namespace "openfaas" not found. Exiting'
        assert not any(call.startswith("list_workloads") for call in cluster.calls)
        assert cluster.closed is True

    async def test_custom_platform_namespace(self) -> None:
        cluster = FakeClusterView(
            platform_workloads=[make_workload("gateway", make_container("gateway", env={"upstream_timeout": "1m"}), namespace="faas")],
            namespaces=[NamespaceView("faas")],
        )
        report = await _run(cluster, ReportConfig(namespace="faas"))
        assert cluster.calls[0] == "list_platform_workloads:faas"
        assert "- gateway_timeout - read: <not set> write: <not set> upstream: 1m\n" in report

    async def test_api_error(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(fail_on="list_namespaces")
        with pytest.raises(FatalError) as exc_info:
            await _run(cluster, config)
        assert exc_info.value.stage == "cluster"
        assert cluster.closed is True

    async def test_credentials_error(self, config: ReportConfig) -> None:
        async def _connect(kubeconfig: str) -> FakeClusterView:
            raise ClusterAccessError("building credentials from in-cluster config", "service host/port is not set")

        with pytest.raises(FatalError) as exc_info:
            await ReportApp(config, connect=_connect).run()
        assert exc_info.value.stage == "credentials"

    async def test_invalid_gateway_boolean(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(platform_workloads=[make_gateway(probe_functions="enabled")])
        with pytest.raises(FatalError) as exc_info:
            await _run(cluster, config)
        assert exc_info.value.stage == "extractor"
        assert "probe_functions" in str(exc_info.value)

    async def test_unparsable_upstream_timeout(self, config: ReportConfig) -> None:
        cluster = FakeClusterView(platform_workloads=[make_gateway(upstream_timeout="60")])
        with pytest.raises(FatalError) as exc_info:
            await _run(cluster, config)
        assert exc_info.value.stage == "rules"

    async def test_unparsable_function_timeout_is_not_fatal(self, config: ReportConfig) -> None:
        fn = make_workload(
            "env",
            make_container("env", env={"read_timeout": "soon", "write_timeout": "1s", "exec_timeout": "1s"}),
            namespace="openfaas-fn",
        )
        report = await _run(FakeClusterView(function_workloads={"openfaas-fn": [fn]}), config)
        assert "⚠️ env.openfaas-fn read_timeout (soon) is not a valid duration\n" in report
