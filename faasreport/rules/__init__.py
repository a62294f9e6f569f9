"""Diagnostic rules.

build_rule_engine() registers every rule; registration order is the order
in which warnings appear in the report.
"""

from __future__ import annotations

from faasreport.rules.base import (
    FunctionRule,
    NamespaceRule,
    Rule,
    RuleContext,
    RuleEngine,
    TimeoutSettingError,
    build_context,
)
from faasreport.rules.controller import (
    AutoscalerClusterRoleRule,
    AutoscalerReplicasRule,
    NonRootRule,
    OperatorModeRule,
)
from faasreport.rules.dashboard import DashboardSigningKeyRule
from faasreport.rules.functions import (
    ExecTimeoutRule,
    MemoryRequestRule,
    ReadOnlyRootFilesystemRule,
    ReadTimeoutRule,
    ScaleDownRule,
    ScaleToZeroDelayRule,
    WriteTimeoutRule,
)
from faasreport.rules.gateway import (
    GatewayHARule,
    IstioDirectFunctionsRule,
    IstioProbeFunctionsRule,
    ProGatewayAutoscalerRule,
)
from faasreport.rules.queue_worker import (
    AckWaitRule,
    AsyncConcurrencyRule,
    InternalNatsRule,
    JetStreamRule,
    MaxInflightRule,
    QueueWorkerHARule,
)

__all__ = [
    "FunctionRule",
    "NamespaceRule",
    "Rule",
    "RuleContext",
    "RuleEngine",
    "TimeoutSettingError",
    "build_context",
    "build_rule_engine",
]


def build_rule_engine() -> RuleEngine:
    return RuleEngine(
        rules=[
            AckWaitRule(),
            AsyncConcurrencyRule(),
            MaxInflightRule(),
            QueueWorkerHARule(),
            InternalNatsRule(),
            GatewayHARule(),
            JetStreamRule(),
            IstioDirectFunctionsRule(),
            IstioProbeFunctionsRule(),
            AutoscalerClusterRoleRule(),
            AutoscalerReplicasRule(),
            OperatorModeRule(),
            ProGatewayAutoscalerRule(),
            NonRootRule(),
            DashboardSigningKeyRule(),
        ],
        function_rules=[
            ScaleToZeroDelayRule(),
            ReadTimeoutRule(),
            WriteTimeoutRule(),
            ExecTimeoutRule(),
            MemoryRequestRule(),
        ],
        namespace_rules=[
            ScaleDownRule(),
            ReadOnlyRootFilesystemRule(),
        ],
    )
