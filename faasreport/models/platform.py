"""Records describing an OpenFaaS installation.

Produced once by the extractor from a single cluster snapshot. Every record is
frozen: the rule engine and the reporter only ever read them.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType

NOT_SET = "<not set>"
UNSET_QUANTITY = "0"

HA_REPLICAS = 3


class ControllerMode(StrEnum):
    """Which container reconciles functions inside the gateway deployment."""

    FAAS_NETES = "faas-netes"
    OPERATOR = "operator"
    NONE = ""


@dataclass(frozen=True)
class Gateway:
    """The gateway container of the ``gateway`` deployment."""

    image: str
    replicas: int = 0
    pro_variant: bool = False
    read_timeout: str | None = None
    write_timeout: str | None = None
    upstream_timeout: str | None = None
    direct_functions: bool | None = None
    probe_functions: bool | None = None


@dataclass(frozen=True)
class Controller:
    """The faas-netes or operator container running beside the gateway."""

    mode: ControllerMode
    image: str
    read_timeout: str | None = None
    write_timeout: str | None = None
    set_nonroot_user: bool | None = None
    cluster_role: bool | None = None


@dataclass(frozen=True)
class QueueWorker:
    """Asynchronous invocation executor."""

    image: str
    replicas: int = 0
    ack_wait: str | None = None
    max_inflight: int | None = None
    jetstream_variant: bool = False


@dataclass(frozen=True)
class Autoscaler:
    image: str
    replicas: int = 0


@dataclass(frozen=True)
class Dashboard:
    image: str
    jwt_secret_mounted: bool = False


@dataclass(frozen=True)
class InternalMessaging:
    """NATS deployed inside the platform namespace."""

    image: str = ""


@dataclass(frozen=True)
class Resources:
    """Memory and CPU quantities in canonical form; ``"0"`` means unset."""

    memory: str = UNSET_QUANTITY
    cpu: str = UNSET_QUANTITY

    @property
    def is_unset(self) -> bool:
        return self.memory == UNSET_QUANTITY and self.cpu == UNSET_QUANTITY


@dataclass(frozen=True)
class Scaling:
    """Autoscaling labels set on a function's pod template.

    https://docs.openfaas.com/architecture/autoscaling/
    """

    min: int | None = None
    max: int | None = None
    type: str | None = None
    target: str | None = None
    proportion: str | None = None
    zero: str | None = None
    zero_duration: str | None = None

    @property
    def scales_to_zero(self) -> bool:
        return self.zero == "true"


@dataclass(frozen=True)
class Function:
    """A function deployment in one of the function namespaces."""

    namespace: str
    name: str
    replicas: int = 0
    max_inflight: int | None = None
    read_timeout: str | None = None
    write_timeout: str | None = None
    exec_timeout: str | None = None
    requests: Resources = field(default_factory=Resources)
    limits: Resources = field(default_factory=Resources)
    read_only_root_filesystem: bool = False
    scaling: Scaling | None = None


@dataclass(frozen=True)
class PlatformInstallation:
    """Root record for one inspected installation."""

    orchestrator_version: str
    core_namespace_present: bool
    service_mesh_present: bool = False
    function_namespaces: tuple[str, ...] = ()
    gateway: Gateway | None = None
    controller: Controller | None = None
    queue_worker: QueueWorker | None = None
    autoscaler: Autoscaler | None = None
    dashboard: Dashboard | None = None
    internal_messaging: InternalMessaging | None = None
    functions_by_namespace: Mapping[str, tuple[Function, ...]] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "functions_by_namespace", MappingProxyType(dict(self.functions_by_namespace)))

    @property
    def async_enabled(self) -> bool:
        return self.queue_worker is not None

    @property
    def controller_mode(self) -> ControllerMode:
        if self.controller is None:
            return ControllerMode.NONE
        return self.controller.mode

    @property
    def async_concurrency(self) -> int:
        """Cluster-wide async concurrency, or 0 when it cannot be computed."""
        qw = self.queue_worker
        if qw is None or qw.max_inflight is None:
            return 0
        return qw.replicas * qw.max_inflight

    def functions_in(self, namespace: str) -> tuple[Function, ...]:
        return self.functions_by_namespace.get(namespace, ())
