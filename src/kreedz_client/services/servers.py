"""Game server listings."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from .base import ServiceBase


class ServersService(ServiceBase):
    def list(
        self,
        *,
        ids: Iterable[int] | None = None,
        port: int | None = None,
        ip: str | None = None,
        name: str | None = None,
        owner_steamid64: int | None = None,
        approval_status: int | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "servers.list",
            ids=ids,
            port=port,
            ip=ip,
            name=name,
            owner_steamid64=owner_steamid64,
            approval_status=approval_status,
            offset=offset,
            limit=limit,
        )

    def get(self, server_id: int) -> dict[str, Any]:
        return self._call("servers.by_id", path_params={"id": server_id})
