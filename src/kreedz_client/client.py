"""High-level Kreedz REST client."""

from __future__ import annotations

import logging
from collections.abc import Mapping, MutableMapping
from typing import Any

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from .config import ClientConfig, default_host_for
from .exceptions import RequestError
from .hosts import HostResolver
from .http import HttpResponse, QueryParams
from .http import request as http_request
from .operations import OperationRegistry, default_registry
from .pipeline import OutgoingRequest, Pipeline, default_stages
from .services import (
    BansService,
    HealthService,
    JumpstatsService,
    MapImagesService,
    MapsInfoService,
    MapsService,
    ModesService,
    PlayerRanksService,
    PlayersService,
    RecordFiltersService,
    RecordsService,
    ServersService,
    StatusService,
)
from .versions import ApiVersion, parse_version

logger = logging.getLogger(__name__)


class KreedzClient:
    """Route typed operations to the KZ stats, status, health and mirror backends."""

    def __init__(
        self,
        *,
        version: ApiVersion | str | None = None,
        default_host: str | None = None,
        host_overrides: Mapping[str, str] | None = None,
        verify_ssl: bool | str = True,
        timeout: float = 30.0,
        default_headers: Mapping[str, str] | None = None,
        query_defaults: Mapping[str, str] | None = None,
        session: requests.Session | None = None,
        registry: OperationRegistry | None = None,
    ) -> None:
        resolved_version = parse_version(version)
        self.config = ClientConfig(
            default_host=default_host or default_host_for(resolved_version),
            version=resolved_version,
            host_overrides=host_overrides,
            verify_ssl=verify_ssl,
            timeout=timeout,
            default_headers=default_headers,
            query_defaults=query_defaults,
        )
        self._suppress_insecure_warning_if_needed()
        self._session = session or requests.Session()
        self.registry = registry or default_registry()
        self.host_resolver = HostResolver(
            self.config.default_host,
            self.registry,
            overrides=self.config.resolved_overrides(),
        )
        self.pipeline = Pipeline(
            self.registry,
            default_stages(resolved_version, self.host_resolver),
            self._send,
        )
        self.bans = BansService(self)
        self.jumpstats = JumpstatsService(self)
        self.maps = MapsService(self)
        self.map_images = MapImagesService(self)
        self.maps_info = MapsInfoService(self)
        self.modes = ModesService(self)
        self.players = PlayersService(self)
        self.player_ranks = PlayerRanksService(self)
        self.record_filters = RecordFiltersService(self)
        self.records = RecordsService(self)
        self.servers = ServersService(self)
        self.status = StatusService(self)
        self.health = HealthService(self)

    @property
    def version(self) -> ApiVersion:
        return self.config.version

    # Context manager helpers -------------------------------------------------
    def __enter__(self) -> KreedzClient:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # pragma: no cover - passthrough
        self.close()

    # Public API --------------------------------------------------------------
    def call(
        self,
        operation_id: str,
        *,
        params: QueryParams | None = None,
        path_params: Mapping[str, Any] | None = None,
        json_payload: Mapping[str, Any] | None = None,
    ) -> Any:
        """Dispatch a registered operation and return its decoded JSON body."""

        outgoing = self._build_request(
            operation_id,
            params=params,
            path_params=path_params,
            json_payload=json_payload,
        )
        return self.pipeline.dispatch(operation_id, outgoing).data

    def resolve_url(self, operation_id: str, path_params: Mapping[str, Any] | None = None) -> str:
        """Return the final URL an operation would be sent to, without sending it."""

        outgoing = self._build_request(operation_id, path_params=path_params)
        return self.pipeline.prepare(operation_id, outgoing).url

    def close(self) -> None:
        self._session.close()

    # Internal helpers -------------------------------------------------------
    def _build_request(
        self,
        operation_id: str,
        *,
        params: QueryParams | None = None,
        path_params: Mapping[str, Any] | None = None,
        json_payload: Mapping[str, Any] | None = None,
    ) -> OutgoingRequest:
        descriptor = self.registry.lookup(operation_id)
        return OutgoingRequest(
            operation_id=operation_id,
            method=descriptor.method,
            url=descriptor.path_template,
            params=self._prepare_params(params),
            headers=self._prepare_headers(),
            json_payload=json_payload,
            path_params=dict(path_params or {}),
        )

    def _prepare_headers(self) -> MutableMapping[str, str]:
        return self.config.resolved_headers()

    def _prepare_params(self, params: QueryParams | None) -> dict[str, str | list[str]]:
        merged = self.config.resolved_query()
        if params:
            merged.update(params)
        return merged

    def _send(self, outgoing: OutgoingRequest) -> HttpResponse:
        self._log_request(outgoing.method, outgoing.url)
        try:
            return http_request(
                self._session,
                outgoing.method,
                outgoing.url,
                params=outgoing.params,
                headers=dict(outgoing.headers),
                json_payload=outgoing.json_payload,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
            )
        except requests.RequestException as exc:
            reason = str(exc).strip() or exc.__class__.__name__
            raise RequestError(
                f"Failed to communicate with {outgoing.url}: {reason}", details=reason
            ) from exc

    def _log_request(self, method: str, url: str) -> None:
        logger.info(
            "Kreedz request %s %s (api_version=%s)",
            method.upper(),
            url,
            self.config.version.api_name,
        )

    def _suppress_insecure_warning_if_needed(self) -> None:
        if isinstance(self.config.verify_ssl, bool) and not self.config.verify_ssl:
            urllib3.disable_warnings(InsecureRequestWarning)
