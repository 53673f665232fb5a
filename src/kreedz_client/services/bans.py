"""Ban lookups."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from .base import ServiceBase


class BansService(ServiceBase):
    """Query the ban list of the KZ stats API."""

    def list(
        self,
        *,
        ban_types: Iterable[str] | None = None,
        steamid64: int | None = None,
        is_expired: bool | None = None,
        notes_contains: str | None = None,
        stats_contains: str | None = None,
        server_id: int | None = None,
        created_since: datetime | None = None,
        updated_since: datetime | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "bans.list",
            ban_types_list=ban_types,
            steamid64=steamid64,
            is_expired=is_expired,
            notes_contains=notes_contains,
            stats_contains=stats_contains,
            server_id=server_id,
            created_since=created_since,
            updated_since=updated_since,
            offset=offset,
            limit=limit,
        )
