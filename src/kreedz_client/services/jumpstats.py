"""Jumpstat queries."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from ..enums import JumpType
from .base import ServiceBase, to_query_value


class JumpstatsService(ServiceBase):
    """List jumpstats and per-jump-type leaderboards."""

    def list(
        self,
        *,
        jump_type: JumpType | None = None,
        **filters: Any,
    ) -> list[dict[str, Any]]:
        return self._call("jumpstats.list", jumptype=jump_type, **self._filters(**filters))

    def top(self, jump_type: JumpType | str, **filters: Any) -> list[dict[str, Any]]:
        return self._call(
            "jumpstats.top",
            path_params={"jump_type": to_query_value(jump_type)},
            **self._filters(**filters),
        )

    @staticmethod
    def _filters(
        *,
        jumpstat_id: int | None = None,
        server_id: int | None = None,
        steamid64s: Iterable[int] | None = None,
        distance_greater_than: float | None = None,
        distance_less_than: float | None = None,
        is_msl: bool | None = None,
        is_crouch_bind: bool | None = None,
        is_forward_bind: bool | None = None,
        is_crouch_boost: bool | None = None,
        updated_by_id: int | None = None,
        created_since: datetime | None = None,
        updated_since: datetime | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> dict[str, Any]:
        return {
            "id": jumpstat_id,
            "server_id": server_id,
            "steamid64_list": steamid64s,
            "greater_than_distance": distance_greater_than,
            "less_than_distance": distance_less_than,
            "is_msl": is_msl,
            "is_crouch_bind": is_crouch_bind,
            "is_forward_bind": is_forward_bind,
            "is_crouch_boost": is_crouch_boost,
            "updated_by_id": updated_by_id,
            "created_since": created_since,
            "updated_since": updated_since,
            "offset": offset,
            "limit": limit,
        }
