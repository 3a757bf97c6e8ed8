from __future__ import annotations

import os

from motor_metrics.domain.filters import DEFAULT_PAGE_SIZE

DEFAULT_API_URL = "http://localhost:8080"
DEFAULT_SEARCH_TIMEOUT_SECONDS = 10.0


def api_url() -> str:
    """Base URL of the service answering /api/search and /api/models."""
    return os.getenv("MOTOR_METRICS_API_URL", DEFAULT_API_URL).rstrip("/")


def search_timeout_seconds() -> float:
    raw = os.getenv("MOTOR_METRICS_SEARCH_TIMEOUT")

    if not raw:
        return DEFAULT_SEARCH_TIMEOUT_SECONDS

    try:
        timeout = float(raw)
    except ValueError:
        raise RuntimeError(f"MOTOR_METRICS_SEARCH_TIMEOUT must be a number, got {raw!r}")

    if timeout <= 0:
        raise RuntimeError("MOTOR_METRICS_SEARCH_TIMEOUT must be > 0")

    return timeout


def page_size() -> int:
    raw = os.getenv("MOTOR_METRICS_PAGE_SIZE")

    if not raw:
        return DEFAULT_PAGE_SIZE

    try:
        rows = int(raw)
    except ValueError:
        raise RuntimeError(f"MOTOR_METRICS_PAGE_SIZE must be an integer, got {raw!r}")

    if rows <= 0:
        raise RuntimeError("MOTOR_METRICS_PAGE_SIZE must be > 0")

    return rows
