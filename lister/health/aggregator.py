"""Concurrent readiness checks for the applications and environments stores."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from lister.db import ApplicationStorePort, EnvironmentStorePort
from lister.domain import DependencyHealth, HealthReport

logger = logging.getLogger(__name__)

APPLICATIONS_DEPENDENCY_NAME = "dynamo-applications"
ENVIRONMENTS_DEPENDENCY_NAME = "dynamo-environments"


class HealthAggregator:
    """Run both store checks in parallel and combine them into one verdict.

    Checks are blocking calls, so each runs in a worker thread; total latency
    is bounded by the slower check. A check that raises is reported as failed.
    """

    def __init__(
        self,
        application_store: ApplicationStorePort,
        environment_store: EnvironmentStorePort,
        service_name: str,
        version: str,
    ):
        if application_store is None:
            raise ValueError("application_store must not be None")
        if environment_store is None:
            raise ValueError("environment_store must not be None")
        self._service_name = service_name
        self._version = version
        self._checks: tuple[tuple[str, Callable[[], bool]], ...] = (
            (APPLICATIONS_DEPENDENCY_NAME, application_store.db_application_healthcheck),
            (ENVIRONMENTS_DEPENDENCY_NAME, environment_store.db_environment_healthcheck),
        )

    async def health_check(self) -> HealthReport:
        """Check every dependency concurrently and wait for all of them.

        Returns:
            HealthReport: Aggregated report; `success` is the AND of all checks.
        """

        outcomes = await asyncio.gather(
            *(asyncio.to_thread(check) for _, check in self._checks),
            return_exceptions=True,
        )
        dependencies = tuple(
            DependencyHealth(name=name, success=self._health_check_succeeded(name, outcome))
            for (name, _), outcome in zip(self._checks, outcomes)
        )
        return HealthReport(name=self._service_name, version=self._version, dependencies=dependencies)

    @staticmethod
    def _health_check_succeeded(name: str, outcome: object) -> bool:
        if isinstance(outcome, BaseException):
            logger.warning("health check %s raised %s: %s", name, type(outcome).__name__, outcome)
            return False
        if outcome is not True:
            logger.warning("health check %s reported failure", name)
            return False
        return True
