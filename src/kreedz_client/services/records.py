"""Record queries: leaderboards, recent runs, world record counts and places."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from ..enums import Mode, RunType, Tickrate
from .base import ServiceBase


def default_overall(run_type: RunType | None) -> bool:
    """Value sent as ``overall`` by `RecordsService.top`.

    Only an unfiltered or NUB query is an "overall" leaderboard.
    """

    return run_type is None or run_type is RunType.NUB


class RecordsService(ServiceBase):
    """Work with runs submitted to the KZ stats API."""

    def get(self, record_id: int) -> dict[str, Any]:
        """Fetch a single record. Requires API v2.0."""

        return self._call("records.by_id", path_params={"id": record_id})

    def place(self, record_id: int) -> int:
        return self._call("records.place", path_params={"id": record_id})

    def top(
        self,
        *,
        server_id: int | None = None,
        steamid64: int | None = None,
        map_id: int | None = None,
        map_name: str | None = None,
        tickrate: Tickrate | None = None,
        stage: int | None = None,
        mode: Mode | None = None,
        run_type: RunType | None = None,
        player_name: str | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "records.top",
            server_id=server_id,
            steamid64=steamid64,
            map_id=map_id,
            map_name=map_name,
            tickrate=tickrate,
            overall=default_overall(run_type),
            stage=stage,
            modes_list=mode.api_name if mode else None,
            has_teleports=run_type,
            player_name=player_name,
            offset=offset,
            limit=limit,
        )

    def world_records_top(
        self,
        *,
        ids: Iterable[int] | None = None,
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
            "records.world_records",
            ids=ids,
            map_ids=map_ids,
            stages=stages,
            modes_ids=modes,
            tickrates=tickrates,
            has_teleports=run_type,
            mapTag=map_tag,
            offset=offset,
            limit=limit,
        )

    def recent(
        self,
        *,
        steamid64: int | None = None,
        map_id: int | None = None,
        map_name: str | None = None,
        run_type: RunType | None = None,
        tickrate: Tickrate | None = None,
        stage: int | None = None,
        mode: Mode | None = None,
        place_top_at_least: int | None = None,
        place_top_overall_at_least: int | None = None,
        created_since: datetime | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "records.recent",
            steamid64=steamid64,
            map_id=map_id,
            map_name=map_name,
            has_teleports=run_type,
            tickrate=tickrate,
            stage=stage,
            modes_list=mode.api_name if mode else None,
            place_top_at_least=place_top_at_least,
            place_top_overall_at_least=place_top_overall_at_least,
            created_since=created_since,
            offset=offset,
            limit=limit,
        )


class RecordFiltersService(ServiceBase):
    """Record filters (map/mode/stage/tickrate combinations) and their time distributions."""

    def list(self, **filters: Any) -> list[dict[str, Any]]:
        return self._call("record_filters.list", **self._filters(**filters))

    def distributions(self, **filters: Any) -> list[dict[str, Any]]:
        return self._call("record_filters.distributions", **self._filters(**filters))

    @staticmethod
    def _filters(
        *,
        ids: Iterable[int] | None = None,
        map_ids: Iterable[int] | None = None,
        stages: Iterable[int] | None = None,
        modes: Iterable[Mode] | None = None,
        tickrates: Iterable[Tickrate] | None = None,
        run_type: RunType | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> dict[str, Any]:
        return {
            "ids": ids,
            "map_ids": map_ids,
            "stages": stages,
            "mode_ids": modes,
            "tickrates": tickrates,
            "has_teleports": run_type,
            "offset": offset,
            "limit": limit,
        }
