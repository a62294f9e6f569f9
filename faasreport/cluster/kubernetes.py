"""ClusterView backed by kubernetes-asyncio."""

from __future__ import annotations

import os
from typing import Any

import aiohttp
import yaml
from kubernetes_asyncio import client as k8s_client  # type: ignore[import-untyped]
from kubernetes_asyncio import config as k8s_config  # type: ignore[import-untyped]
from kubernetes_asyncio.client.exceptions import ApiException  # type: ignore[import-untyped]

from faasreport.cluster.base import PLATFORM_SELECTOR, ClusterAccessError
from faasreport.cluster.views import ContainerView, EnvVarView, NamespaceView, WorkloadView
from faasreport.observability.logging import get_logger

_log = get_logger("cluster")


def _container_view(container: Any) -> ContainerView:
    resources = container.resources
    security = container.security_context
    return ContainerView(
        name=container.name,
        image=container.image or "",
        env=tuple(EnvVarView(name=e.name, value=e.value) for e in container.env or []),
        volume_mounts=tuple(m.name for m in container.volume_mounts or []),
        requests=dict((resources.requests if resources else None) or {}),
        limits=dict((resources.limits if resources else None) or {}),
        read_only_root_filesystem=security.read_only_root_filesystem if security else None,
    )


def workload_view(deployment: Any) -> WorkloadView:
    """Convert a V1Deployment into a WorkloadView."""
    metadata = deployment.metadata
    spec = deployment.spec
    template = spec.template if spec else None
    template_meta = template.metadata if template else None
    pod_spec = template.spec if template else None
    return WorkloadView(
        namespace=metadata.namespace or "",
        name=metadata.name,
        replicas=spec.replicas if spec else None,
        labels=dict(metadata.labels or {}),
        annotations=dict(metadata.annotations or {}),
        template_labels=dict((template_meta.labels if template_meta else None) or {}),
        containers=tuple(_container_view(c) for c in (pod_spec.containers if pod_spec else None) or []),
    )


def namespace_view(namespace: Any) -> NamespaceView:
    """Convert a V1Namespace into a NamespaceView."""
    return NamespaceView(
        name=namespace.metadata.name,
        annotations=dict(namespace.metadata.annotations or {}),
    )


class KubernetesClusterView:
    """Reads Deployments, Namespaces and the server version through one ApiClient."""

    def __init__(self, api_client: Any) -> None:
        self._api_client = api_client
        self._apps = k8s_client.AppsV1Api(api_client)
        self._core = k8s_client.CoreV1Api(api_client)
        self._version = k8s_client.VersionApi(api_client)

    @classmethod
    async def connect(cls, kubeconfig: str) -> KubernetesClusterView:
        """Load credentials from *kubeconfig*, or in-cluster when the file is missing."""
        from_file = os.path.exists(kubeconfig)
        try:
            if from_file:
                # load_kube_config() is async in kubernetes-asyncio
                await k8s_config.load_kube_config(config_file=kubeconfig)
                _log.info("k8s client configured from kubeconfig", path=kubeconfig)
            else:
                # load_incluster_config() is synchronous in kubernetes-asyncio
                k8s_config.load_incluster_config()
                _log.info("k8s client configured from in-cluster service account")
        except (k8s_config.ConfigException, OSError, TypeError, ValueError, yaml.YAMLError) as exc:
            # unreadable or malformed kubeconfig files surface as plain Python errors
            source = kubeconfig if from_file else "in-cluster config"
            raise ClusterAccessError(f"building credentials from {source}", exc) from exc
        return cls(k8s_client.ApiClient())

    async def list_platform_workloads(self, namespace: str) -> list[WorkloadView]:
        _log.debug("listing platform deployments", namespace=namespace, selector=PLATFORM_SELECTOR)
        try:
            result = await self._apps.list_namespaced_deployment(namespace, label_selector=PLATFORM_SELECTOR)
        except (ApiException, aiohttp.ClientError) as exc:
            raise ClusterAccessError(f"listing deployments in {namespace}", exc) from exc
        return [workload_view(d) for d in result.items]

    async def list_namespaces(self) -> list[NamespaceView]:
        _log.debug("listing namespaces")
        try:
            result = await self._core.list_namespace()
        except (ApiException, aiohttp.ClientError) as exc:
            raise ClusterAccessError("listing namespaces", exc) from exc
        return [namespace_view(n) for n in result.items]

    async def list_workloads(self, namespace: str) -> list[WorkloadView]:
        _log.debug("listing function deployments", namespace=namespace)
        try:
            result = await self._apps.list_namespaced_deployment(namespace)
        except (ApiException, aiohttp.ClientError) as exc:
            raise ClusterAccessError(f"listing deployments in {namespace}", exc) from exc
        return [workload_view(d) for d in result.items]

    async def server_version(self) -> str:
        try:
            info = await self._version.get_code()
        except (ApiException, aiohttp.ClientError) as exc:
            raise ClusterAccessError("reading server version", exc) from exc
        return info.git_version or ""

    async def close(self) -> None:
        """Close the ApiClient connection pool."""
        await self._api_client.close()
