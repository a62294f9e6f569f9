"""Parsing of environment variable values read from containers."""

from __future__ import annotations

import re

from faasreport.cluster.views import ContainerView

_TRUE = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE = frozenset({"0", "f", "F", "FALSE", "false", "False"})

_RE_INT = re.compile(r"^[+-]?[0-9]+$")


class ExtractionError(Exception):
    """Raised when a control-plane value cannot be interpreted."""

    def __init__(self, workload: str, key: str, value: str, reason: str) -> None:
        super().__init__(f"error parsing {key} on {workload}: {reason}, value: {value!r}")
        self.workload = workload
        self.key = key
        self.value = value


def parse_bool(workload: str, key: str, value: str) -> bool:
    """Strict boolean parsing; only the canonical spellings are accepted."""
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ExtractionError(workload, key, value, "invalid syntax")


def parse_count(value: str | None) -> int | None:
    """Non-negative integer, or None when *value* is missing or malformed."""
    if value is None or not _RE_INT.match(value):
        return None
    number = int(value)
    return number if number >= 0 else None


def env_map(container: ContainerView) -> dict[str, str]:
    """Literal environment values by name; the last definition wins.

    Variables sourced through valueFrom and empty values are left out.
    """
    return {e.name: e.value for e in container.env if e.value}


def find_container(containers: tuple[ContainerView, ...], name: str) -> ContainerView | None:
    for container in containers:
        if container.name == name:
            return container
    return None
