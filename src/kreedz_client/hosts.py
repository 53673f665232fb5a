"""Pick the physical host that serves a given logical service."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from .exceptions import HostConfigurationError
from .operations import (
    HEALTH_SERVICE,
    MAP_IMAGE_SERVICE,
    MAP_INFO_SERVICE,
    STATUS_SERVICE,
    OperationRegistry,
)
from .urls import normalize_fragment, strip_scheme

logger = logging.getLogger(__name__)

STATIC_HOSTS: Mapping[str, str] = MappingProxyType(
    {
        HEALTH_SERVICE: "health.global-api.com/api/v1",
        MAP_IMAGE_SERVICE: "raw.githubusercontent.com/KZGlobalTeam/map-images",
        MAP_INFO_SERVICE: "raw.githubusercontent.com/iwyfewwnt/maps-info/main",
        STATUS_SERVICE: "status.global-api.com/api/v2",
    }
)


def normalize_host(value: str | None, *, service: str = "<default>") -> str:
    """Strip the scheme and stray slashes from a host; fail if nothing is left."""

    normalized = normalize_fragment(strip_scheme(value or ""))
    if not normalized:
        raise HostConfigurationError(service, value)
    return normalized


class HostResolver:
    """Resolve hosts with precedence: override table, declared base host, default."""

    def __init__(
        self,
        default_host: str,
        registry: OperationRegistry,
        overrides: Mapping[str, str] | None = None,
    ) -> None:
        self._default_host = normalize_host(default_host)
        self._registry = registry
        table = dict(STATIC_HOSTS)
        if overrides:
            for service, host in overrides.items():
                normalize_host(host, service=service)
            table.update(overrides)
        self._overrides: Mapping[str, str] = MappingProxyType(table)

    @property
    def default_host(self) -> str:
        return self._default_host

    @property
    def overrides(self) -> Mapping[str, str]:
        return self._overrides

    def resolve(self, service: str) -> str:
        override = self._overrides.get(service)
        if override is not None:
            logger.debug("Host for %s taken from override table: %s", service, override)
            return override
        declared = self._registry.service(service).base_host
        if declared is not None:
            return normalize_host(declared, service=service)
        return self._default_host


__all__ = ["HostResolver", "STATIC_HOSTS", "normalize_host"]
