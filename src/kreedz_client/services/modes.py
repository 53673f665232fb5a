"""Game mode lookups."""

from __future__ import annotations

from typing import Any

from ..enums import Mode
from .base import ServiceBase


class ModesService(ServiceBase):
    def list(self) -> list[dict[str, Any]]:
        return self._call("modes.list")

    def get(self, mode: Mode | int) -> dict[str, Any]:
        mode_id = mode.mode_id if isinstance(mode, Mode) else mode
        return self._call("modes.by_id", path_params={"id": mode_id})

    def get_by_name(self, mode: Mode | str) -> dict[str, Any]:
        mode_name = mode.api_name if isinstance(mode, Mode) else mode
        return self._call("modes.by_name", path_params={"mode_name": mode_name})
