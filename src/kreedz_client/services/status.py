"""Status page (statuspage.io style) and health-check endpoints."""

from __future__ import annotations

from typing import Any

from ..enums import HealthEndpoint
from .base import ServiceBase


class StatusService(ServiceBase):
    """Read the public status page of the global API."""

    def summary(self) -> dict[str, Any]:
        return self._call("status.summary")

    def status(self) -> dict[str, Any]:
        return self._call("status.status")

    def components(self) -> dict[str, Any]:
        return self._call("status.components")

    def unresolved_incidents(self) -> dict[str, Any]:
        return self._call("status.unresolved_incidents")

    def recent_incidents(self) -> dict[str, Any]:
        return self._call("status.recent_incidents")

    def upcoming_scheduled_incidents(self) -> dict[str, Any]:
        return self._call("status.upcoming_scheduled_incidents")

    def active_scheduled_incidents(self) -> dict[str, Any]:
        return self._call("status.active_scheduled_incidents")

    def recent_scheduled_incidents(self) -> dict[str, Any]:
        return self._call("status.recent_scheduled_incidents")


class HealthService(ServiceBase):
    """Query uptime checks from the health API."""

    def statuses(self) -> list[dict[str, Any]]:
        return self._call("health.statuses")

    def by_endpoint(
        self,
        endpoint: HealthEndpoint | str = HealthEndpoint.GLOBAL_API,
        *,
        group: str = "",
    ) -> dict[str, Any]:
        """Fetch the checks of one endpoint, given as `HealthEndpoint` or a raw name."""

        if isinstance(endpoint, HealthEndpoint):
            group, endpoint = endpoint.group, endpoint.endpoint
        return self._call(
            "health.by_endpoint",
            path_params={"group": group, "endpoint": endpoint},
        )
