"""Configuration loading from command-line values and environment variables."""

from __future__ import annotations

import os
import re

from faasreport.models.config import (
    DEFAULT_KUBECONFIG,
    DEFAULT_NAMESPACE,
    LogConfig,
    ReportConfig,
)

_RE_NAMESPACE = re.compile(r"^[a-z0-9]([-a-z0-9]{0,61}[a-z0-9])?$")


def _env(key: str, default: str = "") -> str:
    return os.environ.get(f"FAASREPORT_{key}", default)


def _validate_log_level(value: str) -> str:
    valid = {"debug", "info", "warning", "error"}
    if value.lower() not in valid:
        raise ValueError(f"Invalid log level: {value}. Must be one of {valid}")
    return value.lower()


def _validate_namespace(value: str) -> str:
    if not _RE_NAMESPACE.match(value):
        raise ValueError(f"Invalid namespace name: {value!r}")
    return value


def expand_kubeconfig_path(path: str) -> str:
    """Replace every literal ``$HOME`` and ``~`` in *path* with $HOME."""
    home = os.environ.get("HOME", "")
    return path.replace("$HOME", home).replace("~", home)


def load_config(
    kubeconfig: str | None = None,
    namespace: str | None = None,
    log_level: str | None = None,
) -> ReportConfig:
    """Build the run configuration.

    Explicit values (usually command-line flags) win over FAASREPORT_*
    environment variables, which win over the defaults.
    """
    return ReportConfig(
        kubeconfig=expand_kubeconfig_path(kubeconfig or _env("KUBECONFIG", DEFAULT_KUBECONFIG)),
        namespace=_validate_namespace(namespace or _env("NAMESPACE", DEFAULT_NAMESPACE)),
        log=LogConfig(
            level=_validate_log_level(log_level or _env("LOG_LEVEL", "warning")),
        ),
    )
