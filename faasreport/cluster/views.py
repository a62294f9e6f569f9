"""Typed views of the Kubernetes objects the extractor reads.

Views are a shape conversion of the API objects and nothing more: values are
carried through exactly as the API server returned them.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class EnvVarView:
    name: str
    value: str | None = None  # None when the variable uses valueFrom


@dataclass(frozen=True)
class ContainerView:
    """One container of a pod template."""

    name: str
    image: str = ""
    env: tuple[EnvVarView, ...] = ()
    volume_mounts: tuple[str, ...] = ()  # mount names
    requests: dict[str, str] = field(default_factory=dict)
    limits: dict[str, str] = field(default_factory=dict)
    read_only_root_filesystem: bool | None = None


@dataclass(frozen=True)
class WorkloadView:
    """A Deployment and its pod template."""

    namespace: str
    name: str
    replicas: int | None = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    template_labels: dict[str, str] = field(default_factory=dict)
    containers: tuple[ContainerView, ...] = ()


@dataclass(frozen=True)
class NamespaceView:
    name: str
    annotations: dict[str, str] = field(default_factory=dict)
