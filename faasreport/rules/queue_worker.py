"""Checks on asynchronous invocation: queue-worker sizing and NATS."""

from __future__ import annotations

from faasreport.duration import format_duration
from faasreport.models.platform import HA_REPLICAS
from faasreport.rules.base import Rule, RuleContext

MIN_ASYNC_CONCURRENCY = 100
MAX_INFLIGHT_CEILING = 500


class AckWaitRule(Rule):
    """ack_wait must not outlast the gateway's upstream timeout."""

    rule_id = "R01_ack_wait_upstream"
    display_name = "queue-worker ack_wait exceeds gateway upstream_timeout"

    def check(self, ctx: RuleContext) -> str | None:
        qw = ctx.installation.queue_worker
        if qw is None or ctx.ack_wait is None or ctx.ack_wait <= ctx.upstream_timeout:
            return None
        return (
            f"queue-worker ack_wait ({qw.ack_wait}) must be <= "
            f"gateway.upstream_timeout ({format_duration(ctx.upstream_timeout)})"
        )


class AsyncConcurrencyRule(Rule):
    rule_id = "R02_async_concurrency_low"
    display_name = "queue-worker concurrency too low"

    def check(self, ctx: RuleContext) -> str | None:
        if not ctx.installation.async_enabled:
            return None
        concurrency = ctx.installation.async_concurrency
        if concurrency >= MIN_ASYNC_CONCURRENCY:
            return None
        return f"queue-worker maximum concurrency is ({concurrency}), this may be too low"


class MaxInflightRule(Rule):
    rule_id = "R03_max_inflight_high"
    display_name = "queue-worker max_inflight too high"

    def check(self, ctx: RuleContext) -> str | None:
        qw = ctx.installation.queue_worker
        if qw is None or qw.max_inflight is None or qw.max_inflight <= MAX_INFLIGHT_CEILING:
            return None
        return f"queue-worker max_inflight is ({qw.max_inflight}), this may be too high"


class QueueWorkerHARule(Rule):
    rule_id = "R04_queue_worker_ha"
    display_name = "queue-worker not highly available"

    def check(self, ctx: RuleContext) -> str | None:
        qw = ctx.installation.queue_worker
        if qw is None or qw.replicas >= HA_REPLICAS:
            return None
        return f"queue-worker replicas want >= {HA_REPLICAS} but got {qw.replicas}, (not Highly Available (HA))"


class InternalNatsRule(Rule):
    rule_id = "R05_internal_nats"
    display_name = "async backed by in-namespace NATS"

    def check(self, ctx: RuleContext) -> str | None:
        if not ctx.installation.async_enabled or ctx.installation.internal_messaging is None:
            return None
        return "Use external NATS to ensure high-availability and persistence"


class JetStreamRule(Rule):
    rule_id = "R07_nats_streaming_deprecated"
    display_name = "classic queue-worker in use"

    def check(self, ctx: RuleContext) -> str | None:
        qw = ctx.installation.queue_worker
        if qw is None or qw.jetstream_variant:
            return None
        return (
            "NATS Streaming will be deprecated and replaced with NATS JetStream: "
            "https://www.openfaas.com/blog/jetstream-for-openfaas/"
        )
