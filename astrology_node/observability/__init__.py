"""Observability helpers (Prometheus metrics)."""

from .metrics import ensure_metrics_registered

__all__ = ["ensure_metrics_registered"]
