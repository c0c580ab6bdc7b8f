"""Typed domain models shared across runtime layers.

Records returned by the persistence layer never carry the resource name inside
their metadata mapping; the name is always surfaced separately.
"""

from dataclasses import dataclass, field

RESERVED_NAME_KEY = "name"


@dataclass(frozen=True)
class ApplicationRecord:
    """Stored application with its open-ended metadata bag.

    Attributes:
        name: Unique application name, also used as the path segment.
        metadata: Metadata key to value mapping.
    """

    name: str
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EnvironmentRecord:
    """Stored environment with its metadata bag, including `account`.

    Attributes:
        name: Unique environment name.
        metadata: Metadata key to value mapping.
    """

    name: str
    metadata: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class MetadataItem:
    """Single metadata key/value pair scoped to one resource.

    Attributes:
        key: Metadata key.
        value: Metadata value.
    """

    key: str
    value: str

    def as_payload(self) -> dict[str, str]:
        """Return the item as a single-entry mapping."""

        return {self.key: self.value}


@dataclass(frozen=True)
class DependencyHealth:
    """Outcome of one backing store health check.

    Attributes:
        name: Dependency label reported to health-check callers.
        success: Whether the check succeeded.
    """

    name: str
    success: bool


@dataclass(frozen=True)
class HealthReport:
    """Aggregated readiness verdict across all backing stores.

    Attributes:
        name: Service name.
        version: Service version.
        dependencies: Per-dependency check outcomes, in reporting order.
    """

    name: str
    version: str
    dependencies: tuple[DependencyHealth, ...]

    @property
    def success(self) -> bool:
        """Return True only when every dependency check succeeded."""

        return all(dependency.success for dependency in self.dependencies)

    def as_payload(self) -> dict:
        """Return the JSON-ready health payload."""

        return {
            "name": self.name,
            "version": self.version,
            "success": self.success,
            "dependencies": [
                {"name": dependency.name, "success": dependency.success} for dependency in self.dependencies
            ],
        }
