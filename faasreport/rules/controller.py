"""Checks on the controller (faas-netes or operator) and the autoscaler."""

from __future__ import annotations

from faasreport.models.platform import ControllerMode
from faasreport.rules.base import Rule, RuleContext


class AutoscalerClusterRoleRule(Rule):
    """The autoscaler reads CPU/RAM metrics through the controller's cluster role."""

    rule_id = "R10_autoscaler_cluster_role"
    display_name = "autoscaler without cluster_role"

    def check(self, ctx: RuleContext) -> str | None:
        controller = ctx.installation.controller
        if ctx.installation.autoscaler is None:
            return None
        if controller is not None and controller.cluster_role is True:
            return None
        return "Pro autoscaler detected, but cluster_role is disabled - unable to collect CPU/RAM metrics"


class AutoscalerReplicasRule(Rule):
    rule_id = "R11_autoscaler_replicas"
    display_name = "more than one autoscaler replica"

    def check(self, ctx: RuleContext) -> str | None:
        autoscaler = ctx.installation.autoscaler
        if autoscaler is None or autoscaler.replicas <= 1:
            return None
        return "autoscaler replicas should be 1 to prevent double scaling actions"


class OperatorModeRule(Rule):
    rule_id = "R12_operator_mode"
    display_name = "operator mode not enabled"

    def check(self, ctx: RuleContext) -> str | None:
        if ctx.installation.controller_mode == ControllerMode.OPERATOR:
            return None
        return "Operator mode is not enabled, OpenFaaS Pro customers should use the OpenFaaS operator"


class NonRootRule(Rule):
    rule_id = "R14_non_root"
    display_name = "functions may run as root"

    def check(self, ctx: RuleContext) -> str | None:
        controller = ctx.installation.controller
        if controller is not None and controller.set_nonroot_user is True:
            return None
        return "Non-root flag is not set for the controller/operator"
