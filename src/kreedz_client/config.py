"""Configuration helpers for the Kreedz client."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from .versions import LATEST, ApiVersion

DEFAULT_HOST_TEMPLATE = "kztimerglobal.com/api/{api_name}"


def default_host_for(version: ApiVersion) -> str:
    return DEFAULT_HOST_TEMPLATE.format(api_name=version.api_name)


@dataclass(slots=True)
class ClientConfig:
    """Typed configuration for `KreedzClient`."""

    default_host: str
    version: ApiVersion = LATEST
    host_overrides: Mapping[str, str] | None = None
    verify_ssl: bool | str = True
    timeout: float = 30.0
    default_headers: Mapping[str, str] | None = None
    query_defaults: Mapping[str, str] | None = None

    def resolved_headers(self) -> dict[str, str]:
        headers: dict[str, str] = {"Accept": "application/json"}
        if self.default_headers:
            headers.update(self.default_headers)
        return headers

    def resolved_query(self) -> dict[str, str | list[str]]:
        return dict(self.query_defaults or {})

    def resolved_overrides(self) -> dict[str, str]:
        return dict(self.host_overrides or {})
