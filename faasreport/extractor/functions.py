"""Extraction of function records from function namespaces."""

from __future__ import annotations

from faasreport.cluster.views import WorkloadView
from faasreport.extractor.values import env_map, parse_count
from faasreport.models.platform import UNSET_QUANTITY, Function, Resources, Scaling

SCALE_MIN = "com.openfaas.scale.min"
SCALE_MAX = "com.openfaas.scale.max"
SCALE_TYPE = "com.openfaas.scale.type"
SCALE_TARGET = "com.openfaas.scale.target"
SCALE_PROPORTION = "com.openfaas.scale.target-proportion"
SCALE_ZERO = "com.openfaas.scale.zero"
SCALE_ZERO_DURATION = "com.openfaas.scale.zero-duration"

SCALING_LABELS = (
    SCALE_MIN,
    SCALE_MAX,
    SCALE_TYPE,
    SCALE_TARGET,
    SCALE_PROPORTION,
    SCALE_ZERO,
    SCALE_ZERO_DURATION,
)


def extract_scaling(labels: dict[str, str]) -> Scaling | None:
    """Scaling settings, or None when no scaling label is set.

    min and max stay unset when their label is not an integer.
    """
    if not any(label in labels for label in SCALING_LABELS):
        return None
    return Scaling(
        min=parse_count(labels.get(SCALE_MIN)),
        max=parse_count(labels.get(SCALE_MAX)),
        type=labels.get(SCALE_TYPE),
        target=labels.get(SCALE_TARGET),
        proportion=labels.get(SCALE_PROPORTION),
        zero=labels.get(SCALE_ZERO),
        zero_duration=labels.get(SCALE_ZERO_DURATION),
    )


def _resources(quantities: dict[str, str]) -> Resources:
    return Resources(
        memory=quantities.get("memory", UNSET_QUANTITY),
        cpu=quantities.get("cpu", UNSET_QUANTITY),
    )


def extract_function(workload: WorkloadView) -> Function:
    """Build a Function from its deployment; the first container is the function."""
    scaling = extract_scaling(workload.template_labels)
    if not workload.containers:
        return Function(
            namespace=workload.namespace,
            name=workload.name,
            replicas=workload.replicas or 0,
            scaling=scaling,
        )

    container = workload.containers[0]
    env = env_map(container)
    return Function(
        namespace=workload.namespace,
        name=workload.name,
        replicas=workload.replicas or 0,
        max_inflight=parse_count(env.get("max_inflight")),
        read_timeout=env.get("read_timeout"),
        write_timeout=env.get("write_timeout"),
        exec_timeout=env.get("exec_timeout"),
        requests=_resources(container.requests),
        limits=_resources(container.limits),
        read_only_root_filesystem=bool(container.read_only_root_filesystem),
        scaling=scaling,
    )


def extract_functions(workloads: list[WorkloadView]) -> tuple[Function, ...]:
    """Functions in listing order."""
    return tuple(extract_function(w) for w in workloads)
