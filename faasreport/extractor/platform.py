"""Extraction of control-plane components from the platform namespace."""

from __future__ import annotations

from dataclasses import dataclass

from faasreport.cluster.views import ContainerView, WorkloadView
from faasreport.extractor.values import env_map, find_container, parse_bool, parse_count
from faasreport.models.platform import (
    Autoscaler,
    Controller,
    ControllerMode,
    Dashboard,
    Gateway,
    InternalMessaging,
    QueueWorker,
)

PRO_IMAGE_MARKER = "openfaasltd"
LICENSE_MOUNT = "license"
JETSTREAM_IMAGE_MARKER = "jetstream-queue-worker"
DASHBOARD_JWT_MOUNT = "dashboard-jwt"


@dataclass(frozen=True)
class ControlPlane:
    """Components found in the platform namespace; None when not deployed."""

    gateway: Gateway | None = None
    controller: Controller | None = None
    queue_worker: QueueWorker | None = None
    autoscaler: Autoscaler | None = None
    dashboard: Dashboard | None = None
    internal_messaging: InternalMessaging | None = None


def is_pro_image(image: str) -> bool:
    return PRO_IMAGE_MARKER in image


def has_license_mount(container: ContainerView) -> bool:
    return LICENSE_MOUNT in container.volume_mounts


def is_pro_component(container: ContainerView) -> bool:
    return is_pro_image(container.image) or has_license_mount(container)


def _optional_bool(workload: str, env: dict[str, str], key: str) -> bool | None:
    value = env.get(key)
    if value is None:
        return None
    return parse_bool(workload, key, value)


def _primary_container(workload: WorkloadView) -> ContainerView | None:
    """The container named after the workload, else the first one."""
    container = find_container(workload.containers, workload.name)
    if container is None and workload.containers:
        container = workload.containers[0]
    return container


def extract_gateway(workload: WorkloadView) -> tuple[Gateway | None, Controller | None]:
    """Read the gateway and its controller sidecar from the ``gateway`` deployment.

    Raises ExtractionError when a boolean setting is not a valid boolean.
    """
    gateway: Gateway | None = None
    controller: Controller | None = None

    for container in workload.containers:
        env = env_map(container)
        if container.name == "gateway":
            gateway = Gateway(
                image=container.image,
                replicas=workload.replicas or 0,
                pro_variant=is_pro_component(container),
                read_timeout=env.get("read_timeout"),
                write_timeout=env.get("write_timeout"),
                upstream_timeout=env.get("upstream_timeout"),
                direct_functions=_optional_bool(workload.name, env, "direct_functions"),
                probe_functions=_optional_bool(workload.name, env, "probe_functions"),
            )
        elif container.name in (ControllerMode.FAAS_NETES, ControllerMode.OPERATOR):
            controller = Controller(
                mode=ControllerMode(container.name),
                image=container.image,
                read_timeout=env.get("read_timeout"),
                write_timeout=env.get("write_timeout"),
                set_nonroot_user=_optional_bool(workload.name, env, "set_nonroot_user"),
                cluster_role=_optional_bool(workload.name, env, "cluster_role"),
            )

    return gateway, controller


def extract_queue_worker(workload: WorkloadView) -> QueueWorker | None:
    container = _primary_container(workload)
    if container is None:
        return None
    env = env_map(container)
    return QueueWorker(
        image=container.image,
        replicas=workload.replicas or 0,
        ack_wait=env.get("ack_wait"),
        max_inflight=parse_count(env.get("max_inflight")),
        jetstream_variant=JETSTREAM_IMAGE_MARKER in container.image,
    )


def extract_autoscaler(workload: WorkloadView) -> Autoscaler | None:
    container = _primary_container(workload)
    if container is None:
        return None
    return Autoscaler(image=container.image, replicas=workload.replicas or 0)


def extract_dashboard(workload: WorkloadView) -> Dashboard | None:
    container = _primary_container(workload)
    if container is None:
        return None
    return Dashboard(
        image=container.image,
        jwt_secret_mounted=DASHBOARD_JWT_MOUNT in container.volume_mounts,
    )


def extract_internal_messaging(workload: WorkloadView) -> InternalMessaging:
    container = _primary_container(workload)
    return InternalMessaging(image=container.image if container else "")


def extract_control_plane(workloads: list[WorkloadView]) -> ControlPlane:
    """Dispatch each platform deployment by name to its extractor.

    Deployments with any other name are ignored.
    """
    gateway = controller = queue_worker = autoscaler = dashboard = nats = None

    for workload in workloads:
        if workload.name == "gateway":
            gateway, controller = extract_gateway(workload)
        elif workload.name == "queue-worker":
            queue_worker = extract_queue_worker(workload)
        elif workload.name == "autoscaler":
            autoscaler = extract_autoscaler(workload)
        elif workload.name == "dashboard":
            dashboard = extract_dashboard(workload)
        elif workload.name == "nats":
            nats = extract_internal_messaging(workload)

    return ControlPlane(
        gateway=gateway,
        controller=controller,
        queue_worker=queue_worker,
        autoscaler=autoscaler,
        dashboard=dashboard,
        internal_messaging=nats,
    )
