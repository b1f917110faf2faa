# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

REQUEST_LATENCY = Histogram(
    "transapi_request_latency_seconds",
    "Request latency",
    labelnames=("method", "endpoint"),
    buckets=(0.01, 0.05, 0.1, 0.25, 0.5, 1, 2, 5, 10),
)
REQUEST_COUNTER = Counter(
    "transapi_requests_total",
    "Number of processed requests",
    labelnames=("method", "endpoint", "status"),
)
TRANSLATION_ITEMS = Counter(
    "transapi_translation_items_total",
    "Translated batch items by outcome",
    labelnames=("status",),
)


def observe_request(method: str, endpoint: str, status: int, duration: float) -> None:
    REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(duration)
    REQUEST_COUNTER.labels(method=method, endpoint=endpoint, status=str(status)).inc()


def record_translation_item(ok: bool) -> None:
    TRANSLATION_ITEMS.labels(status="ok" if ok else "failed").inc()


def render_metrics() -> tuple[bytes, str]:
    return generate_latest(), CONTENT_TYPE_LATEST


__all__ = [
    "REQUEST_COUNTER",
    "REQUEST_LATENCY",
    "TRANSLATION_ITEMS",
    "observe_request",
    "record_translation_item",
    "render_metrics",
]
