"""Schema describing important fields for CLI table rendering."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

Row = Mapping[str, Any]
ValueExtractor = Callable[[Row], Any]
ValueFormatter = Callable[[Any], str]
SortKey = Callable[[Row], Any]


@dataclass(frozen=True)
class Column:
    """Describe how to pull and format a column for Rich tables."""

    header: str
    keys: tuple[str, ...] = ()
    extractor: ValueExtractor | None = None
    formatter: ValueFormatter | None = None
    justify: str = "left"

    def render(self, row: Row) -> str:
        value: Any | None = None
        if self.keys:
            for key in self.keys:
                if key in row:
                    value = row.get(key)
                    if value is not None:
                        break
        if value is None and self.extractor:
            value = self.extractor(row)
        if value is None:
            return ""
        if self.formatter:
            formatted = self.formatter(value)
            return "" if formatted is None else str(formatted)
        return str(value)


@dataclass(frozen=True)
class TableView:
    """Describe a Rich table for a CLI command."""

    title: str
    columns: tuple[Column, ...]
    sort_key: SortKey | None = None


def _bool_formatter(value: Any) -> str:
    return "Yes" if bool(value) else "No"


def _run_time_formatter(value: Any) -> str:
    """Render seconds as ``[h:]mm:ss.fff``."""

    try:
        total = float(value)
    except (TypeError, ValueError):
        return str(value)
    minutes, seconds = divmod(total, 60)
    hours, minutes = divmod(int(minutes), 60)
    if hours:
        return f"{hours}:{minutes:02d}:{seconds:06.3f}"
    return f"{minutes:02d}:{seconds:06.3f}"


def _date_formatter(value: Any) -> str:
    # API timestamps look like 2021-06-01T12:34:56
    return str(value).replace("T", " ")[:19]


def _health_success_rate(row: Row) -> str | None:
    results = row.get("results")
    if not isinstance(results, (list, tuple)) or not results:
        return None
    succeeded = sum(1 for item in results if isinstance(item, Mapping) and item.get("success"))
    return f"{succeeded}/{len(results)}"


CLI_TABLE_VIEWS: dict[str, TableView] = {
    "bans.list": TableView(
        title="Bans",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("SteamID64", keys=("steamid64",)),
            Column("Type", keys=("ban_type",)),
            Column("Expires", keys=("expires_on",), formatter=_date_formatter),
            Column("Server", keys=("server_id",), justify="right"),
            Column("Notes", keys=("notes",)),
        ),
        sort_key=lambda row: row.get("id") or 0,
    ),
    "maps.list": TableView(
        title="Maps",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Tier", keys=("difficulty",), justify="right"),
            Column("Validated", keys=("validated",), formatter=_bool_formatter, justify="center"),
            Column("Updated", keys=("updated_on",), formatter=_date_formatter),
        ),
        sort_key=lambda row: str(row.get("name") or "").lower(),
    ),
    "modes.list": TableView(
        title="Modes",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Description", keys=("description",)),
        ),
        sort_key=lambda row: row.get("id") or 0,
    ),
    "servers.list": TableView(
        title="Servers",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Name", keys=("name",)),
            Column("Address", extractor=lambda r: f"{r.get('ip')}:{r.get('port')}"),
            Column("Owner", keys=("owner_steamid64",)),
            Column("Approval", keys=("approval_status",), justify="right"),
        ),
        sort_key=lambda row: str(row.get("name") or "").lower(),
    ),
    "records.list": TableView(
        title="Records",
        columns=(
            Column("ID", keys=("id",), justify="right"),
            Column("Player", keys=("player_name",)),
            Column("Map", keys=("map_name",)),
            Column("Mode", keys=("mode",)),
            Column("Time", keys=("time",), formatter=_run_time_formatter, justify="right"),
            Column("TPs", keys=("teleports",), justify="right"),
            Column("Points", keys=("points",), justify="right"),
            Column("Date", keys=("created_on",), formatter=_date_formatter),
        ),
    ),
    "health.statuses": TableView(
        title="Health Checks",
        columns=(
            Column("Name", keys=("name",)),
            Column("Key", keys=("key",)),
            Column("Recent Checks OK", extractor=_health_success_rate, justify="right"),
        ),
        sort_key=lambda row: str(row.get("name") or "").lower(),
    ),
}
