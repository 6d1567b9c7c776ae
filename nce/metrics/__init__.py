"""Status page conversion: XML in, Prometheus exposition text out."""

from __future__ import annotations

from nce.metrics.base import MetricRecord, metric_name
from nce.metrics.exposition import Conversion, convert, xml_to_prometheus
from nce.metrics.flatten import flatten_status_xml
from nce.metrics.names import NameCounter, names_hash
from nce.metrics.values import UnconvertibleValueError, to_metric_value

__all__ = [
    "Conversion",
    "MetricRecord",
    "NameCounter",
    "UnconvertibleValueError",
    "convert",
    "flatten_status_xml",
    "metric_name",
    "names_hash",
    "to_metric_value",
    "xml_to_prometheus",
]
