"""Domain models used across application layer boundaries."""

from .models import (
    ApplicationRecord,
    DependencyHealth,
    EnvironmentRecord,
    HealthReport,
    MetadataItem,
    RESERVED_NAME_KEY,
)

__all__ = [
    "ApplicationRecord",
    "DependencyHealth",
    "EnvironmentRecord",
    "HealthReport",
    "MetadataItem",
    "RESERVED_NAME_KEY",
]
