# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

from prometheus_client import Counter, Histogram

# Upstream request metrics, labelled by connector and vendor function
REQUESTS = Counter("av_requests_total", "Upstream API requests", ["provider", "function"])
ERRORS = Counter("av_errors_total", "Upstream API errors", ["provider", "function", "code"])
LATENCY = Histogram(
    "av_request_latency_seconds", "Upstream request latency", ["provider", "function"]
)

# Observations skipped during normalization because their timestamp did not resolve
DROPPED_OBSERVATIONS = Counter(
    "av_dropped_observations_total",
    "Upstream observations dropped for an unparseable or ambiguous timestamp",
    ["series"],
)

__all__ = [
    "REQUESTS",
    "ERRORS",
    "LATENCY",
    "DROPPED_OBSERVATIONS",
]
