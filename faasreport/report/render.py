"""Report rendering.

Section order is fixed: header, gateway, queue-worker (async only), function
namespaces, autoscaler and dashboard (when deployed), features, other, the
functions of each namespace, then warnings.
"""

from __future__ import annotations

from faasreport.models.platform import (
    HA_REPLICAS,
    NOT_SET,
    UNSET_QUANTITY,
    ControllerMode,
    Function,
    PlatformInstallation,
    Resources,
    Scaling,
)
from faasreport.report.grid import GridWriter

HEADER = "OpenFaaS Pro Report"
NO_RESOURCES = "<none>"
ENABLED = "✅"
DISABLED = "❌"
WARNING = "⚠️"


def _text(value: str | None) -> str:
    return value if value else NOT_SET


def _number(value: int | None) -> str:
    return NOT_SET if value is None else str(value)


def _glyph(enabled: bool) -> str:
    return ENABLED if enabled else DISABLED


def _quantity(value: str) -> str:
    return NO_RESOURCES if value == UNSET_QUANTITY else value


def _gateway_section(inst: PlatformInstallation) -> list[str]:
    gw = inst.gateway
    ctrl = inst.controller
    return [
        "",
        "Gateway",
        "",
        f"- gateway image: {_text(gw.image if gw else None)}",
        f"- controller image: {_text(ctrl.image if ctrl else None)}",
        f"- gateway_replicas: {gw.replicas if gw else 0}",
        "- gateway_timeout - "
        f"read: {_text(gw.read_timeout if gw else None)} "
        f"write: {_text(gw.write_timeout if gw else None)} "
        f"upstream: {_text(gw.upstream_timeout if gw else None)}",
        f"- controller_mode: {_text(inst.controller_mode)}",
        "- controller_timeout - "
        f"read: {_text(ctrl.read_timeout if ctrl else None)} "
        f"write: {_text(ctrl.write_timeout if ctrl else None)}",
    ]


def _queue_worker_section(inst: PlatformInstallation) -> list[str]:
    qw = inst.queue_worker
    if qw is None:
        return []
    return [
        "",
        "Queue-worker",
        "",
        f"- queue_worker_image: {_text(qw.image)}",
        f"- queue_worker_replicas: {qw.replicas}",
        f"- queue_worker_ack_wait: {_text(qw.ack_wait)}",
        f"- queue_worker_max_inflight: {_number(qw.max_inflight)}",
    ]


def _namespaces_section(inst: PlatformInstallation) -> list[str]:
    return ["", "Function namespaces:", ""] + [f"- {ns}" for ns in inst.function_namespaces]


def _autoscaler_section(inst: PlatformInstallation) -> list[str]:
    if inst.autoscaler is None:
        return []
    return [
        "",
        "Autoscaler",
        "",
        f"- autoscaler_image: {_text(inst.autoscaler.image)}",
        f"- autoscaler_replicas: {inst.autoscaler.replicas}",
    ]


def _dashboard_section(inst: PlatformInstallation) -> list[str]:
    if inst.dashboard is None:
        return []
    return [
        "",
        "Dashboard",
        "",
        f"- dashboard_image: {_text(inst.dashboard.image)}",
        f"- dashboard_jwt_signing_key: {_glyph(inst.dashboard.jwt_secret_mounted)}",
    ]


def feature_flags(inst: PlatformInstallation) -> list[tuple[str, bool]]:
    """The features checklist, in display order."""
    gw = inst.gateway
    qw = inst.queue_worker
    return [
        ("Async", inst.async_enabled),
        ("Pro gateway", gw is not None and gw.pro_variant),
        ("HA Gateway", gw is not None and gw.replicas >= HA_REPLICAS),
        ("Operator mode", inst.controller_mode == ControllerMode.OPERATOR),
        ("Autoscaler", inst.autoscaler is not None),
        ("Dashboard", inst.dashboard is not None),
        ("JetStream", qw is not None and qw.jetstream_variant),
        ("Istio", inst.service_mesh_present),
    ]


def _features_section(inst: PlatformInstallation) -> list[str]:
    lines = ["", "Features detected:", ""]
    lines += [f"- {_glyph(enabled)} {name}" for name, enabled in feature_flags(inst)]
    return lines + [""]


def _other_section(inst: PlatformInstallation) -> list[str]:
    return [
        "Other:",
        "",
        f"- Kubernetes version: {inst.orchestrator_version}",
        f"- Asynchronous concurrency (cluster): {inst.async_concurrency}",
        "",
    ]


def _write_scaling(w: GridWriter, scaling: Scaling | None) -> None:
    if scaling is None:
        w.write("\nno scaling configuration was set\n")
        return

    w.write("\nscaling configuration\n\n")
    w.row("- min/max replicas", f"({_number(scaling.min)} / {_number(scaling.max)})")
    w.row("- type", _text(scaling.type))
    w.row("- target", _text(scaling.target))
    w.row("- target-proportion", _text(scaling.proportion))
    w.write("\n")

    if not scaling.zero or scaling.zero == "false":
        w.row("- scale to zero", "disabled")
    else:
        w.row("- scale to zero", scaling.zero)
        w.row("- scale to zero duration", _text(scaling.zero_duration))


def _write_resources(w: GridWriter, label: str, resources: Resources) -> None:
    if resources.is_unset:
        w.row(f"- {label}:", f" {NO_RESOURCES}")
    else:
        w.row(f"- {label}:", f" RAM: {_quantity(resources.memory)} CPU: {_quantity(resources.cpu)}")


def render_function(fn: Function, autoscaling: bool) -> str:
    """One function as an aligned table.

    The scaling block is only shown when an autoscaler is deployed.
    """
    w = GridWriter(padding=1)
    w.row(f"* {fn.name}", f"({fn.replicas} replicas)")
    w.write("\n")
    w.row("- read_timeout", _text(fn.read_timeout))
    w.row("- write_timeout", _text(fn.write_timeout))
    w.row("- exec_timeout", _text(fn.exec_timeout))
    w.row("- max_inflight", _number(fn.max_inflight))

    if autoscaling:
        _write_scaling(w, fn.scaling)

    w.write("\nresources and limits\n\n")
    _write_resources(w, "requests", fn.requests)
    _write_resources(w, "limits", fn.limits)
    w.write("\n")
    return w.getvalue()


def _functions_sections(inst: PlatformInstallation) -> str:
    autoscaling = inst.autoscaler is not None
    out = []
    for ns in inst.function_namespaces:
        out.append(f"\nFunctions in ({ns}):\n\n")
        functions = inst.functions_in(ns)
        if not functions:
            out.append("None detected\n")
        for fn in functions:
            out.append(render_function(fn, autoscaling))
    return "".join(out)


def _warnings_section(warnings: list[str]) -> list[str]:
    return ["", "Warnings:", ""] + [f"{WARNING} {w}" for w in warnings]


def render_report(inst: PlatformInstallation, warnings: list[str]) -> str:
    """Render the complete report text, ending with a newline."""
    head = [HEADER]
    head += _gateway_section(inst)
    head += _queue_worker_section(inst)
    head += _namespaces_section(inst)
    head += _autoscaler_section(inst)
    head += _dashboard_section(inst)
    head += _features_section(inst)
    head += _other_section(inst)

    tail = _warnings_section(warnings)
    return "\n".join(head) + "\n" + _functions_sections(inst) + "\n".join(tail) + "\n"
