"""Map catalogue, map image index and static map info mirrors."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from typing import Any

from .base import ServiceBase


class MapsService(ServiceBase):
    """Work with maps registered on the KZ stats API."""

    def list(
        self,
        *,
        ids: Iterable[int] | None = None,
        name: str | None = None,
        filesize_larger_than: int | None = None,
        filesize_smaller_than: int | None = None,
        is_validated: bool | None = None,
        difficulty: int | None = None,
        created_since: datetime | None = None,
        updated_since: datetime | None = None,
        offset: int | None = None,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return self._call(
            "maps.list",
            id=ids,
            name=name,
            larger_than_filesize=filesize_larger_than,
            smaller_than_filesize=filesize_smaller_than,
            is_validated=is_validated,
            difficulty=difficulty,
            created_since=created_since,
            updated_since=updated_since,
            offset=offset,
            limit=limit,
        )

    def get(self, map_id: int) -> dict[str, Any]:
        return self._call("maps.by_id", path_params={"id": map_id})

    def get_by_name(self, map_name: str) -> dict[str, Any]:
        return self._call("maps.by_name", path_params={"map_name": map_name})


class MapImagesService(ServiceBase):
    """Index of map screenshots hosted in the map-images repository."""

    def list(self) -> list[dict[str, Any]]:
        return self._call("map_images.list")

    def get_by_name(self, map_name: str) -> dict[str, Any] | None:
        for entry in self.list():
            if entry.get("name") == map_name:
                return entry
        return None


class MapsInfoService(ServiceBase):
    """Static map info mirrors (fixed external URLs)."""

    def list(self) -> list[dict[str, Any]]:
        return self._call("maps_info.all")

    def global_maps(self) -> list[dict[str, Any]]:
        return self._call("maps_info.global")

    def non_global_maps(self) -> list[dict[str, Any]]:
        return self._call("maps_info.non_global")

    def uncompleted_maps(self) -> list[dict[str, Any]]:
        return self._call("maps_info.uncompleted")
