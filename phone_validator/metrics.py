"""Prometheus metrics for the validator API."""

import logging

from prometheus_client import Counter, Histogram, start_http_server

logger = logging.getLogger(__name__)

REQUESTS_TOTAL = Counter(
    "phone_validator_requests_total", "Total number of requests", ["endpoint"]
)
VERDICTS_TOTAL = Counter(
    "phone_validator_verdicts_total", "Verdicts returned by reason", ["reason"]
)
PROVIDER_ERRORS = Counter(
    "phone_validator_provider_errors_total",
    "Failed provider calls",
    ["operation"],
)
PROVIDER_DURATION = Histogram(
    "phone_validator_provider_duration_seconds",
    "Time spent waiting for the provider",
    ["operation"],
)


def start_metrics_server(port: int) -> bool:
    """Expose metrics on ``port``; ``0`` leaves the server disabled."""
    if not port:
        return False
    try:
        start_http_server(port)
    except OSError as e:
        logger.error("Failed to start metrics server: %s", e)
        return False
    logger.info("Started Prometheus metrics server on port %d", port)
    return True
