"""Player and player rank queries."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..enums import Mode, RunType, Tickrate
from .base import ServiceBase


class PlayersService(ServiceBase):
    """Search players known to the KZ stats API."""

    def list(
        self,
        *,
        name: str | None = None,
        is_banned: bool | None = None,
        total_records: int | None = None,
        steamid64s: Iterable[int] | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "players.list",
            name=name,
            is_banned=is_banned,
            total_records=total_records,
            steamid64_list=steamid64s,
            offset=offset,
            limit=limit,
        )

    def get_by_steamid64(self, steamid64: int) -> dict[str, Any] | None:
        players = self.list(steamid64s=[steamid64], limit=1)
        return players[0] if players else None


class PlayerRanksService(ServiceBase):
    """Leaderboard of players by points, average, rating or finishes."""

    def list(
        self,
        *,
        points_greater_than: int | None = None,
        average_greater_than: int | None = None,
        rating_greater_than: int | None = None,
        finishes_greater_than: int | None = None,
        steamid64s: Iterable[int] | None = None,
        record_filter_ids: Iterable[int] | None = None,
        map_ids: Iterable[int] | None = None,
        stages: Iterable[int] | None = None,
        modes: Iterable[Mode] | None = None,
        tickrates: Iterable[Tickrate] | None = None,
        run_type: RunType | None = None,
        map_tag: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "player_ranks.list",
            points_greater_than=points_greater_than,
            average_greater_than=average_greater_than,
            rating_greater_than=rating_greater_than,
            finishes_greater_than=finishes_greater_than,
            steamid64s=steamid64s,
            record_filter_ids=record_filter_ids,
            map_ids=map_ids,
            stages=stages,
            mode_ids=modes,
            tickrates=tickrates,
            has_teleports=run_type,
            mapTag=map_tag,
            offset=offset,
            limit=limit,
        )
