"""Shared types and naming helpers for metric conversion."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class MetricRecord:
    """A single exposition line: disambiguated name and formatted value."""
    name: str
    value: str

    def to_line(self) -> str:
        return f"{self.name} {self.value}"


def metric_name(path: Sequence[str]) -> str:
    """Join an element path into a metric name.

    ``["ocs", "data", "nextcloud.system"]`` becomes ``ocs_data_nextcloud_system``.
    """
    return "_".join(path).replace(".", "_")
