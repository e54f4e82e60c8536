"""Prometheus metrics for ibancountry.

Counts classification outcomes and times the one-off pattern set build.
Only the classification counter honours ``IBANCOUNTRY_METRICS_ENABLED``: the
build runs inside ``classify`` and must not depend on settings parsing.
"""

from prometheus_client import Counter, Histogram

from .utils.config import get_settings

# ============================================================================
# Metric Definitions
# ============================================================================

classifications_total = Counter(
    "ibancountry_classifications_total",
    "Total number of addresses classified",
    ["result"],  # labels: valid/invalid/country_unknown
)

pattern_set_build_seconds = Histogram(
    "ibancountry_pattern_set_build_seconds",
    "Time taken to compile a multi-pattern matcher",
    ["matcher"],  # labels: country_code/remainder
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 5.0),
)


# ============================================================================
# Helper Functions
# ============================================================================


def record_classification(result: str) -> None:
    if not get_settings().metrics_enabled:
        return
    classifications_total.labels(result=result).inc()


def record_build_time(matcher: str, duration_seconds: float) -> None:
    # Observed once per process, so it is never gated
    pattern_set_build_seconds.labels(matcher=matcher).observe(duration_seconds)
