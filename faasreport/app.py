"""Report bootstrap for faasreport.

Wires the components in order:
config → logging → cluster view → four reads → extractor → rules → reporter

Every failure that makes the report meaningless is raised as FatalError
naming the stage it happened in; nothing is printed by this module.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from faasreport.cluster import ClusterAccessError, ClusterView, WorkloadView
from faasreport.extractor import ExtractionError, build_installation, classify_namespaces
from faasreport.models.config import ReportConfig
from faasreport.models.platform import PlatformInstallation
from faasreport.observability.logging import get_logger
from faasreport.report import render_report
from faasreport.rules import TimeoutSettingError, build_rule_engine

if TYPE_CHECKING:
    import structlog

ClusterViewFactory = Callable[[str], Awaitable[ClusterView]]


class FatalError(Exception):
    """Raised when a stage fails and no report can be produced."""

    def __init__(self, stage: str, cause: Exception | str) -> None:
        super().__init__(str(cause))
        self.stage = stage
        self.cause = cause


class MissingNamespaceError(Exception):
    def __init__(self, namespace: str) -> None:
        super().__init__(f'OpenFaaS Core namespace "{namespace}" not found. Exiting')
        self.namespace = namespace


async def _connect_kubernetes(kubeconfig: str) -> ClusterView:
    from faasreport.cluster.kubernetes import KubernetesClusterView

    return await KubernetesClusterView.connect(kubeconfig)


class ReportApp:
    """Produces one report from one snapshot of the cluster.

    Args:
        config:     Run configuration (kubeconfig path, platform namespace).
        connect:    Factory returning a ClusterView for a kubeconfig path.
                    Defaults to the kubernetes-asyncio implementation.
    """

    def __init__(self, config: ReportConfig, connect: ClusterViewFactory | None = None) -> None:
        self.config = config
        self._connect = connect or _connect_kubernetes
        self._log: structlog.stdlib.BoundLogger = get_logger("app")

    async def run(self) -> str:
        """Read the cluster and return the report text.

        Raises FatalError on credential or API failures, a missing platform
        namespace, invalid control-plane booleans, or unusable gateway
        timeouts.
        """
        installation = await self.inspect()

        try:
            warnings = build_rule_engine().evaluate(installation)
        except TimeoutSettingError as exc:
            raise FatalError("rules", exc) from exc

        return render_report(installation, warnings)

    async def inspect(self) -> PlatformInstallation:
        """Perform the four cluster reads and build the installation record."""
        namespace = self.config.namespace
        try:
            cluster = await self._connect(self.config.kubeconfig)
        except ClusterAccessError as exc:
            raise FatalError("credentials", exc) from exc

        try:
            platform_workloads = await cluster.list_platform_workloads(namespace)
            namespaces = classify_namespaces(await cluster.list_namespaces(), namespace)
            if not namespaces.core_namespace_present:
                raise FatalError("namespaces", MissingNamespaceError(namespace))

            function_workloads: dict[str, list[WorkloadView]] = {}
            for fn_namespace in namespaces.function_namespaces:
                function_workloads[fn_namespace] = await cluster.list_workloads(fn_namespace)

            version = await cluster.server_version()
        except ClusterAccessError as exc:
            raise FatalError("cluster", exc) from exc
        finally:
            await cluster.close()

        self._log.info(
            "cluster read",
            platform_workloads=len(platform_workloads),
            function_namespaces=len(namespaces.function_namespaces),
            version=version,
        )

        try:
            installation = build_installation(namespaces, platform_workloads, function_workloads, version)
        except ExtractionError as exc:
            raise FatalError("extractor", exc) from exc

        self._log.debug(
            "installation extracted",
            gateway=installation.gateway is not None,
            controller=str(installation.controller_mode),
            async_enabled=installation.async_enabled,
            autoscaler=installation.autoscaler is not None,
            dashboard=installation.dashboard is not None,
        )
        return installation
