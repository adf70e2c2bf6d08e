"""Metrics instrumentation."""

from __future__ import annotations

from prometheus_client import Counter

snapshots_total = Counter(
    "stockroom_snapshots_total",
    "Snapshot saves/loads by outcome",
    ["operation", "status"],
)
failures_total = Counter(
    "stockroom_failures_total",
    "Failures reported by repositories",
    ["kind"],
)


def inc_snapshot(operation: str, status: str) -> None:
    snapshots_total.labels(operation=operation, status=status).inc()


def inc_failure(kind: str) -> None:
    failures_total.labels(kind=kind).inc()
