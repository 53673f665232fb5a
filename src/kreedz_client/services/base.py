"""Common helpers for service wrappers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..enums import Mode

if TYPE_CHECKING:  # pragma: no cover - import-time guard
    from ..client import KreedzClient


def to_query_value(value: Any) -> str:
    """Render a single filter value the way the Kreedz APIs expect it."""

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Mode):
        return str(value.mode_id)
    if isinstance(value, Enum):
        return to_query_value(value.value)
    if isinstance(value, datetime):
        return value.isoformat()
    return str(value)


def build_query(filters: Mapping[str, Any]) -> dict[str, str | list[str]]:
    """Turn keyword filters into a query bag, dropping unset values.

    Collections become repeated parameters; empty collections are dropped.
    """

    query: dict[str, str | list[str]] = {}
    for key, value in filters.items():
        if value is None or (isinstance(value, Enum) and value.value is None):
            continue
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            items = sorted(to_query_value(item) for item in value if item is not None)
            if items:
                query[key] = items
            continue
        query[key] = to_query_value(value)
    return query


class ServiceBase:
    """Provide shared helpers for service modules."""

    def __init__(self, client: KreedzClient) -> None:
        self._client = client

    def _call(
        self,
        operation_id: str,
        *,
        path_params: Mapping[str, Any] | None = None,
        **filters: Any,
    ) -> Any:
        return self._client.call(
            operation_id,
            params=build_query(filters),
            path_params=path_params,
        )
