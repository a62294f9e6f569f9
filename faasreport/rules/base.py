"""Rule base classes and the RuleEngine that runs them in order."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from faasreport.duration import DurationError, parse_duration
from faasreport.models.platform import Function, PlatformInstallation
from faasreport.observability.logging import get_logger

_logger = get_logger("rules")


class TimeoutSettingError(Exception):
    """Raised when a control-plane timeout the rules compare against is unusable."""

    def __init__(self, setting: str, reason: str) -> None:
        super().__init__(f"unable to parse {setting}: {reason}")
        self.setting = setting
        self.reason = reason


@dataclass(frozen=True)
class RuleContext:
    """What every rule may read: the installation and its resolved timeouts."""

    installation: PlatformInstallation
    upstream_timeout: int  # nanoseconds
    ack_wait: int | None = None  # nanoseconds, set when async is enabled


def _parse_setting(setting: str, value: str | None) -> int:
    if value is None:
        raise TimeoutSettingError(setting, "not set")
    try:
        return parse_duration(value)
    except DurationError as exc:
        raise TimeoutSettingError(setting, exc.reason) from exc


def build_context(installation: PlatformInstallation) -> RuleContext:
    """Resolve the gateway upstream timeout and queue-worker ack_wait.

    Raises TimeoutSettingError when either is missing or malformed; the
    ordering checks are meaningless without them.
    """
    gateway = installation.gateway
    upstream = _parse_setting(
        "gateway.upstream_timeout",
        gateway.upstream_timeout if gateway else None,
    )
    ack_wait = None
    if installation.queue_worker is not None:
        ack_wait = _parse_setting("queue-worker ack_wait", installation.queue_worker.ack_wait)
    return RuleContext(installation=installation, upstream_timeout=upstream, ack_wait=ack_wait)


class Rule(ABC):
    """A check against the installation as a whole."""

    rule_id: str
    display_name: str

    @abstractmethod
    def check(self, ctx: RuleContext) -> str | None:
        """Return a warning, or None when the installation passes."""


class FunctionRule(ABC):
    """A check run once per function."""

    rule_id: str
    display_name: str

    @abstractmethod
    def check(self, fn: Function, ctx: RuleContext) -> str | None: ...


class NamespaceRule(ABC):
    """A check run once per function namespace, after its functions."""

    rule_id: str
    display_name: str

    @abstractmethod
    def check(self, namespace: str, functions: tuple[Function, ...], ctx: RuleContext) -> str | None: ...


class RuleEngine:
    """Evaluates rules in registration order.

    Order: every installation rule, then for each function namespace (in
    namespace order) every function rule for each function (in listing
    order) followed by the namespace rules. Warnings are neither ranked
    nor deduplicated.
    """

    def __init__(
        self,
        rules: list[Rule],
        function_rules: list[FunctionRule],
        namespace_rules: list[NamespaceRule],
    ) -> None:
        self.rules = rules
        self.function_rules = function_rules
        self.namespace_rules = namespace_rules

    def evaluate(self, installation: PlatformInstallation) -> list[str]:
        """Return the warnings for *installation*.

        Raises TimeoutSettingError when the gateway timeouts cannot be resolved.
        """
        ctx = build_context(installation)
        warnings: list[str] = []
        evaluated = 0

        for rule in self.rules:
            evaluated += 1
            _collect(warnings, rule.rule_id, rule.check(ctx))

        for namespace in installation.function_namespaces:
            functions = installation.functions_in(namespace)
            for fn in functions:
                for fn_rule in self.function_rules:
                    evaluated += 1
                    _collect(warnings, fn_rule.rule_id, fn_rule.check(fn, ctx))
            for ns_rule in self.namespace_rules:
                evaluated += 1
                _collect(warnings, ns_rule.rule_id, ns_rule.check(namespace, functions, ctx))

        _logger.info("rules evaluated", rules_evaluated=evaluated, warnings=len(warnings))
        return warnings


def _collect(warnings: list[str], rule_id: str, warning: str | None) -> None:
    if warning is not None:
        _logger.debug("rule matched", rule_id=rule_id)
        warnings.append(warning)
