"""Static registry describing every operation the client can dispatch."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from .exceptions import UnknownOperationError
from .versions import V1_0, V2_0, ApiVersion, compare

HTTP_METHODS = frozenset({"GET", "HEAD", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"})

BAN_SERVICE = "BanService"
HEALTH_SERVICE = "HealthService"
JUMPSTAT_SERVICE = "JumpstatService"
MAP_SERVICE = "MapService"
MAP_IMAGE_SERVICE = "MapImageService"
MAP_INFO_SERVICE = "MapInfoService"
MODE_SERVICE = "ModeService"
PLAYER_SERVICE = "PlayerService"
PLAYER_RANK_SERVICE = "PlayerRankService"
RECORD_FILTER_SERVICE = "RecordFilterService"
RECORD_SERVICE = "RecordService"
SERVER_SERVICE = "ServerService"
STATUS_SERVICE = "StatusService"

MAPS_INFO_URL = "https://raw.githubusercontent.com/iwyfewwnt/maps-info/main"


@dataclass(frozen=True, slots=True)
class VersionConstraint:
    """Either "at least ``version``" or, when ``exact``, "exactly ``version``"."""

    version: ApiVersion
    exact: bool = False

    @property
    def operator(self) -> str:
        return "=" if self.exact else "≥"

    def allows(self, client_version: ApiVersion | None) -> bool:
        result = compare(client_version, self.version)
        if self.exact:
            return result == 0
        return result >= 0


@dataclass(frozen=True, slots=True)
class ServiceDescriptor:
    """A logical service and the base host it declares for itself, if any."""

    name: str
    base_host: str | None = None


@dataclass(frozen=True, slots=True)
class OperationDescriptor:
    """Verb, path template, owning service and optional version constraint of one operation."""

    operation_id: str
    service: str
    method: str
    path_template: str
    constraint: VersionConstraint | None = None

    def __post_init__(self) -> None:
        method = self.method.upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method '{self.method}' for {self.operation_id}")
        object.__setattr__(self, "method", method)


class OperationRegistry:
    """Read-only lookup table of operation descriptors keyed by operation id."""

    def __init__(
        self,
        operations: Iterable[OperationDescriptor],
        services: Iterable[ServiceDescriptor] = (),
    ) -> None:
        table: dict[str, OperationDescriptor] = {}
        for descriptor in operations:
            if descriptor.operation_id in table:
                raise ValueError(f"Duplicate operation id '{descriptor.operation_id}'")
            table[descriptor.operation_id] = descriptor
        self._operations: Mapping[str, OperationDescriptor] = MappingProxyType(table)
        self._services: Mapping[str, ServiceDescriptor] = MappingProxyType(
            {service.name: service for service in services}
        )

    def lookup(self, operation_id: str) -> OperationDescriptor:
        try:
            return self._operations[operation_id]
        except KeyError:
            raise UnknownOperationError(operation_id) from None

    def service(self, name: str) -> ServiceDescriptor:
        return self._services.get(name) or ServiceDescriptor(name)

    def operations_for(self, service: str) -> list[OperationDescriptor]:
        return [op for op in self._operations.values() if op.service == service]

    def __contains__(self, operation_id: object) -> bool:
        return operation_id in self._operations

    def __iter__(self) -> Iterator[OperationDescriptor]:
        return iter(self._operations.values())

    def __len__(self) -> int:
        return len(self._operations)


def _get(
    operation_id: str,
    service: str,
    path: str,
    since: ApiVersion | None = None,
    *,
    exact: bool = False,
) -> OperationDescriptor:
    constraint = VersionConstraint(since, exact=exact) if since is not None else None
    return OperationDescriptor(operation_id, service, "GET", path, constraint)


_SERVICES: tuple[ServiceDescriptor, ...] = (
    ServiceDescriptor(STATUS_SERVICE, base_host="status.global-api.com/api/v2"),
)

_OPERATIONS: tuple[OperationDescriptor, ...] = (
    _get("bans.list", BAN_SERVICE, "bans", V1_0),
    _get("jumpstats.list", JUMPSTAT_SERVICE, "jumpstats", V1_0),
    _get("jumpstats.top", JUMPSTAT_SERVICE, "jumpstats/{jump_type}/top", V1_0),
    _get("maps.list", MAP_SERVICE, "maps", V1_0),
    _get("maps.by_id", MAP_SERVICE, "maps/{id}", V1_0),
    _get("maps.by_name", MAP_SERVICE, "maps/name/{map_name}", V1_0),
    _get("map_images.list", MAP_IMAGE_SERVICE, "public/api.min.json"),
    _get("maps_info.all", MAP_INFO_SERVICE, f"{MAPS_INFO_URL}/maps.min.json"),
    _get("maps_info.global", MAP_INFO_SERVICE, f"{MAPS_INFO_URL}/global.min.json"),
    _get("maps_info.non_global", MAP_INFO_SERVICE, f"{MAPS_INFO_URL}/non-global.min.json"),
    _get("maps_info.uncompleted", MAP_INFO_SERVICE, f"{MAPS_INFO_URL}/uncompleted.min.json"),
    _get("modes.list", MODE_SERVICE, "modes", V1_0),
    _get("modes.by_id", MODE_SERVICE, "modes/id/{id}", V1_0),
    _get("modes.by_name", MODE_SERVICE, "modes/name/{mode_name}", V1_0),
    _get("players.list", PLAYER_SERVICE, "players", V1_0),
    _get("player_ranks.list", PLAYER_RANK_SERVICE, "player_ranks", V1_0),
    _get("record_filters.list", RECORD_FILTER_SERVICE, "record_filters", V1_0),
    _get(
        "record_filters.distributions",
        RECORD_FILTER_SERVICE,
        "record_filters/distributions",
        V1_0,
    ),
    _get("records.place", RECORD_SERVICE, "records/place/{id}", V1_0),
    _get("records.top", RECORD_SERVICE, "records/top", V1_0),
    _get("records.world_records", RECORD_SERVICE, "records/top/world_records", V1_0),
    _get("records.recent", RECORD_SERVICE, "records/top/recent", V1_0),
    _get("records.by_id", RECORD_SERVICE, "records/{id}", V2_0),
    _get("servers.list", SERVER_SERVICE, "servers", V1_0),
    _get("servers.by_id", SERVER_SERVICE, "servers/{id}", V1_0),
    _get("status.summary", STATUS_SERVICE, "summary.json"),
    _get("status.status", STATUS_SERVICE, "status.json"),
    _get("status.components", STATUS_SERVICE, "components.json"),
    _get("status.unresolved_incidents", STATUS_SERVICE, "incidents/unresolved.json"),
    _get("status.recent_incidents", STATUS_SERVICE, "incidents.json"),
    _get(
        "status.upcoming_scheduled_incidents",
        STATUS_SERVICE,
        "scheduled-maintenances/upcoming.json",
    ),
    _get(
        "status.active_scheduled_incidents",
        STATUS_SERVICE,
        "scheduled-maintenances/active.json",
    ),
    _get("status.recent_scheduled_incidents", STATUS_SERVICE, "scheduled-maintenances.json"),
    _get("health.statuses", HEALTH_SERVICE, "endpoints/statuses"),
    _get("health.by_endpoint", HEALTH_SERVICE, "endpoints/{group}_{endpoint}/statuses"),
)

_DEFAULT_REGISTRY = OperationRegistry(_OPERATIONS, _SERVICES)


def default_registry() -> OperationRegistry:
    """Return the shared registry of built-in operations."""

    return _DEFAULT_REGISTRY


__all__ = [
    "HTTP_METHODS",
    "OperationDescriptor",
    "OperationRegistry",
    "ServiceDescriptor",
    "VersionConstraint",
    "default_registry",
]
