"""Core data structures for faasreport."""

from faasreport.models.config import LogConfig, ReportConfig
from faasreport.models.platform import (
    Autoscaler,
    Controller,
    ControllerMode,
    Dashboard,
    Function,
    Gateway,
    InternalMessaging,
    PlatformInstallation,
    QueueWorker,
    Resources,
    Scaling,
)

__all__ = [
    "Autoscaler",
    "Controller",
    "ControllerMode",
    "Dashboard",
    "Function",
    "Gateway",
    "InternalMessaging",
    "LogConfig",
    "PlatformInstallation",
    "QueueWorker",
    "ReportConfig",
    "Resources",
    "Scaling",
]
