"""Checks on the gateway deployment."""

from __future__ import annotations

from faasreport.models.platform import HA_REPLICAS
from faasreport.rules.base import Rule, RuleContext


class GatewayHARule(Rule):
    rule_id = "R06_gateway_ha"
    display_name = "gateway not highly available"

    def check(self, ctx: RuleContext) -> str | None:
        gateway = ctx.installation.gateway
        replicas = gateway.replicas if gateway else 0
        if replicas >= HA_REPLICAS:
            return None
        return f"gateway replicas want >= {HA_REPLICAS} but got {replicas}, (not Highly Available (HA))"


class IstioDirectFunctionsRule(Rule):
    """With a service mesh the gateway should invoke functions directly."""

    rule_id = "R08_istio_direct_functions"
    display_name = "Istio without direct_functions"

    def check(self, ctx: RuleContext) -> str | None:
        gateway = ctx.installation.gateway
        if not ctx.installation.service_mesh_present:
            return None
        if gateway is not None and gateway.direct_functions is True:
            return None
        return "Istio detected, but direct_functions is disabled"


class IstioProbeFunctionsRule(Rule):
    rule_id = "R09_istio_probe_functions"
    display_name = "Istio without probe_functions"

    def check(self, ctx: RuleContext) -> str | None:
        gateway = ctx.installation.gateway
        if not ctx.installation.service_mesh_present:
            return None
        if gateway is not None and gateway.probe_functions is True:
            return None
        return "Istio detected, but probe_functions is disabled"


class ProGatewayAutoscalerRule(Rule):
    rule_id = "R13_pro_gateway_autoscaler"
    display_name = "Pro gateway without autoscaler"

    def check(self, ctx: RuleContext) -> str | None:
        gateway = ctx.installation.gateway
        if gateway is None or not gateway.pro_variant or ctx.installation.autoscaler is not None:
            return None
        return "Pro gateway detected, but autoscaler is not enabled"
