"""Prometheus metric definitions shared across the node runtime."""

from __future__ import annotations

from collections.abc import Iterable

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Histogram

__all__ = [
    "API_REQUESTS",
    "API_REQUEST_DURATION",
    "OPERATIONS_DISPATCHED",
    "OPERATION_FAILURES",
    "ensure_metrics_registered",
]


API_REQUESTS = Counter(
    "astrology_api_requests_total",
    "Total HTTP requests issued to the Astrology API.",
    ("method", "outcome"),
    registry=None,
)

API_REQUEST_DURATION = Histogram(
    "astrology_api_request_duration_seconds",
    "Round-trip duration of Astrology API requests.",
    ("method",),
    registry=None,
)

OPERATIONS_DISPATCHED = Counter(
    "astrology_node_operations_total",
    "Operations dispatched by resource and operation name.",
    ("resource", "operation"),
    registry=None,
)

OPERATION_FAILURES = Counter(
    "astrology_node_operation_failures_total",
    "Operations that raised, grouped by resource and error type.",
    ("resource", "error"),
    registry=None,
)


def _iter_metrics() -> Iterable[Counter | Histogram]:
    yield API_REQUESTS
    yield API_REQUEST_DURATION
    yield OPERATIONS_DISPATCHED
    yield OPERATION_FAILURES


def ensure_metrics_registered(
    registry: CollectorRegistry | None = None,
) -> None:
    """Register shared metrics with ``registry`` if not already present."""

    target = registry or REGISTRY
    for metric in _iter_metrics():
        try:
            target.register(metric)
        except ValueError:
            # Prometheus raises when a metric name already exists in the registry.
            continue
