"""Configuration data structures."""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_KUBECONFIG = "$HOME/.kube/config"
DEFAULT_NAMESPACE = "openfaas"


@dataclass
class LogConfig:
    """Logging configuration."""

    level: str = "warning"


@dataclass
class ReportConfig:
    """Top-level faasreport configuration."""

    kubeconfig: str = DEFAULT_KUBECONFIG
    namespace: str = DEFAULT_NAMESPACE
    log: LogConfig = field(default_factory=LogConfig)
