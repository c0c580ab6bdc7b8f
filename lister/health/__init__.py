"""Health aggregation across the catalog's backing stores."""

from .aggregator import (
    APPLICATIONS_DEPENDENCY_NAME,
    ENVIRONMENTS_DEPENDENCY_NAME,
    HealthAggregator,
)

__all__ = ["APPLICATIONS_DEPENDENCY_NAME", "ENVIRONMENTS_DEPENDENCY_NAME", "HealthAggregator"]
