"""XML status page to Prometheus text conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

from nce.metrics.base import MetricRecord, metric_name
from nce.metrics.flatten import flatten_status_xml
from nce.metrics.names import HASH_METRIC, NameCounter, names_hash
from nce.metrics.values import (
    ReplacementValue,
    UnconvertibleValueError,
    to_metric_value,
)

logger = logging.getLogger(__name__)

HASH_COMMENT = (
    "# nc_metric_names_hash: first digits of a hash of all extracted metric names",
    "# this number indicates change of names or change of number of metrics",
)


@dataclass
class Conversion:
    """Outcome of converting one status document."""
    records: list[MetricRecord] = field(default_factory=list)
    names: frozenset[str] = frozenset()

    @property
    def signature(self) -> int:
        return names_hash(self.names)

    def render(self, preamble: Iterable[str] = ()) -> str:
        """Serialize to exposition text, optionally after *preamble* lines.

        The preamble is copied verbatim and never inspected.
        """
        lines = list(preamble)
        lines.extend(record.to_line() for record in self.records)
        lines.extend(HASH_COMMENT)
        lines.append(f"{HASH_METRIC} {self.signature}")
        return "\n".join(lines)


def convert(
    document: str | bytes,
    replacements: Mapping[str, ReplacementValue] | None = None,
) -> Conversion:
    """Flatten *document* and coerce every text value into a metric.

    Values that are neither numeric nor in *replacements* are skipped.
    """
    counter = NameCounter()
    records: list[MetricRecord] = []

    for path, text in flatten_status_xml(document):
        name = metric_name(path)
        try:
            value = to_metric_value(text, replacements)
        except UnconvertibleValueError:
            logger.debug("IGNORED METRIC: %s %s", name, text)
            continue
        records.append(MetricRecord(name=counter.register(name), value=value))

    return Conversion(records=records, names=counter.names)


def xml_to_prometheus(
    document: str | bytes,
    replacements: Mapping[str, ReplacementValue] | None = None,
    preamble: Iterable[str] = (),
) -> str:
    """Convert the XML status page into Prometheus compatible metrics.

    Some parts of the status page contain string values; these are either
    dropped or mapped to numbers through *replacements*.  The output ends
    with ``nc_metric_names_hash``, a short hash over the metric names that
    makes structural changes of the status page visible.
    """
    return convert(document, replacements).render(preamble)
