"""Per-function and per-namespace checks."""

from __future__ import annotations

from faasreport.duration import MINUTE, DurationError, format_duration, parse_duration, to_minutes
from faasreport.models.platform import UNSET_QUANTITY, Function
from faasreport.rules.base import FunctionRule, NamespaceRule, RuleContext

MIN_SCALE_DOWN_DELAY = 5 * MINUTE


def _qualified(fn: Function) -> str:
    return f"{fn.name}.{fn.namespace}"


class ScaleToZeroDelayRule(FunctionRule):
    """A scale-down delay below five minutes causes frequent cold starts."""

    rule_id = "R16_scale_to_zero_delay"
    display_name = "function scales to zero too soon"

    def check(self, fn: Function, ctx: RuleContext) -> str | None:
        if fn.scaling is None or fn.scaling.zero_duration is None:
            return None
        try:
            delay = parse_duration(fn.scaling.zero_duration)
        except DurationError:
            return None
        if delay >= MIN_SCALE_DOWN_DELAY:
            return None
        return (
            f"{_qualified(fn)} scales down after {to_minutes(delay):.2f} minutes, "
            "this may be too soon, 5 minutes or higher is recommended"
        )


class _TimeoutRule(FunctionRule):
    """A function timeout must be set and must fit inside the gateway's upstream timeout."""

    key: str

    def check(self, fn: Function, ctx: RuleContext) -> str | None:
        value: str | None = getattr(fn, self.key)
        if value is None:
            return f"{_qualified(fn)} {self.key} is not set"
        try:
            timeout = parse_duration(value)
        except DurationError:
            return f"{_qualified(fn)} {self.key} ({value}) is not a valid duration"
        if timeout <= ctx.upstream_timeout:
            return None
        return (
            f"{_qualified(fn)} {self.key} ({value}) is greater than "
            f"gateway.upstream_timeout ({format_duration(ctx.upstream_timeout)})"
        )


class ReadTimeoutRule(_TimeoutRule):
    rule_id = "R17_function_read_timeout"
    display_name = "function read_timeout"
    key = "read_timeout"


class WriteTimeoutRule(_TimeoutRule):
    rule_id = "R18_function_write_timeout"
    display_name = "function write_timeout"
    key = "write_timeout"


class ExecTimeoutRule(_TimeoutRule):
    rule_id = "R19_function_exec_timeout"
    display_name = "function exec_timeout"
    key = "exec_timeout"


class MemoryRequestRule(FunctionRule):
    rule_id = "R20_memory_requests"
    display_name = "function without memory requests"

    def check(self, fn: Function, ctx: RuleContext) -> str | None:
        if fn.requests.memory != UNSET_QUANTITY:
            return None
        return f"{_qualified(fn)} no memory requests set"


class ScaleDownRule(NamespaceRule):
    rule_id = "R21_namespace_scale_down"
    display_name = "no function in namespace scales to zero"

    def check(self, namespace: str, functions: tuple[Function, ...], ctx: RuleContext) -> str | None:
        if not functions:
            return None
        if any(fn.scaling is not None and fn.scaling.scales_to_zero for fn in functions):
            return None
        return f"no functions in namespace {namespace} are configured to scale down, this may be inefficient"


class ReadOnlyRootFilesystemRule(NamespaceRule):
    rule_id = "R22_read_only_root_filesystem"
    display_name = "writable root file system"

    def check(self, namespace: str, functions: tuple[Function, ...], ctx: RuleContext) -> str | None:
        if all(fn.read_only_root_filesystem for fn in functions):
            return None
        return f"at least one function in namespace {namespace} does not set the file system to read-only"
