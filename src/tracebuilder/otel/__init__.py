"""OpenTelemetry convention registry.

Maps an instrumentation-convention version to the canonical trace column
layout used to populate query columns when OTel is enabled.
"""

from tracebuilder.otel.versions import LATEST, OTEL_1_2_9, OtelRegistry, OtelVersion, get_version, otel

__all__ = [
    "LATEST",
    "OTEL_1_2_9",
    "OtelRegistry",
    "OtelVersion",
    "get_version",
    "otel",
]
