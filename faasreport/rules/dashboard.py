"""Checks on the Pro dashboard."""

from __future__ import annotations

from faasreport.rules.base import Rule, RuleContext


class DashboardSigningKeyRule(Rule):
    """Without a mounted key, sessions are signed with a key generated at start-up."""

    rule_id = "R15_dashboard_signing_key"
    display_name = "dashboard without a JWT signing key"

    def check(self, ctx: RuleContext) -> str | None:
        dashboard = ctx.installation.dashboard
        if dashboard is None or dashboard.jwt_secret_mounted:
            return None
        return (
            "Dashboard uses auto generated signing keys: "
            "https://docs.openfaas.com/openfaas-pro/dashboard/#create-a-signing-key"
        )
