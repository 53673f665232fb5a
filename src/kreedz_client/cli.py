"""Command-line interface for querying the KZ global API and its companion services."""
from __future__ import annotations

import json
import os
from collections.abc import Mapping, Sequence
from typing import Any

import typer

try:  # pragma: no cover - exercised in runtime environments
    from rich import box
    from rich.console import Console
    from rich.table import Table
except ImportError as exc:  # pragma: no cover - optional dependency guard
    raise RuntimeError(
        "The CLI requires Rich for table rendering. Install the CLI extras via "
        "'pip install kreedz-python[cli]' to enable this command."
    ) from exc

from . import KreedzClient
from .cli_schema import CLI_TABLE_VIEWS, TableView
from .enums import Mode, RunType
from .exceptions import (
    HostConfigurationError,
    KreedzError,
    RequestError,
    UnknownOperationError,
    VersionMismatchError,
)

app = typer.Typer(help="KZ global API command-line client.", no_args_is_help=True)

status_app = typer.Typer(help="Status page operations.")
health_app = typer.Typer(help="Health check operations.")
bans_app = typer.Typer(help="Ban operations.")
maps_app = typer.Typer(help="Map operations.")
modes_app = typer.Typer(help="Mode operations.")
servers_app = typer.Typer(help="Server operations.")
records_app = typer.Typer(help="Record operations.")
app.add_typer(status_app, name="status")
app.add_typer(health_app, name="health")
app.add_typer(bans_app, name="bans")
app.add_typer(maps_app, name="maps")
app.add_typer(modes_app, name="modes")
app.add_typer(servers_app, name="servers")
app.add_typer(records_app, name="records")


def _build_client(
    api_version: str | None,
    host: str | None,
    verify_ssl: bool,
    timeout: float,
) -> KreedzClient:
    try:
        return KreedzClient(
            version=api_version,
            default_host=host,
            verify_ssl=verify_ssl,
            timeout=timeout,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--api-version") from exc
    except HostConfigurationError as exc:
        raise typer.BadParameter(str(exc), param_hint="--host") from exc


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2))


console = Console(force_terminal=False, color_system=None)


def _render_rich_table(view: TableView, rows: Sequence[Mapping[str, Any]]) -> None:
    table = Table(
        title=view.title,
        box=box.SIMPLE,
        show_lines=False,
        header_style="bold cyan",
    )
    for column in view.columns:
        table.add_column(column.header, justify=column.justify)
    ordered_rows = list(rows)
    if view.sort_key:
        ordered_rows.sort(key=view.sort_key)
    for row in ordered_rows:
        table.add_row(*(column.render(row) for column in view.columns))
    console.print(table)


def _present_output(payload: Any, *, view_id: str | None, json_output: bool) -> None:
    if json_output or view_id is None:
        _echo_json(payload)
        return
    view = CLI_TABLE_VIEWS.get(view_id)
    if not view:
        _echo_json(payload)
        return
    if not isinstance(payload, Sequence) or isinstance(payload, (str, bytes)):
        _echo_json(payload)
        return
    rows = [item for item in payload if isinstance(item, Mapping)]
    if not rows:
        _echo_json(payload)
        return
    _render_rich_table(view, rows)


def _handle_error(exc: KreedzError) -> None:
    if isinstance(exc, RequestError) and exc.status_code is not None:
        message = f"Request failed (status {exc.status_code}): {exc}"
    else:
        message = f"Request failed: {exc}"
    if isinstance(exc, RequestError) and exc.details and exc.details not in message:
        message += f"\nDetails: {exc.details}"
    typer.secho(message, err=True, fg=typer.colors.RED)
    raise typer.Exit(code=1)


def _shared_options() -> dict[str, Any]:  # pragma: no cover - helper indirection
    # Accept common truthy/falsey representations (1/0, true/false, yes/no).
    env_verify = os.getenv("KREEDZ_VERIFY_SSL")
    default_verify = env_verify is None or env_verify.strip().lower() not in {
        "0",
        "false",
        "no",
        "off",
    }

    return {
        "api_version": typer.Option(
            None,
            "--api-version",
            envvar="KREEDZ_API_VERSION",
            help="KZ API version to target (e.g. v1.0, v2.0). Defaults to the latest.",
        ),
        "host": typer.Option(
            None,
            "--host",
            envvar="KREEDZ_HOST",
            help="Override the default KZ API host (e.g. kztimerglobal.com/api/v2.0).",
        ),
        "verify_ssl": typer.Option(
            default_verify,
            "--verify/--no-verify",
            envvar="KREEDZ_VERIFY_SSL",
            help="Enable or disable TLS certificate verification.",
            show_default=True,
        ),
        "timeout": typer.Option(30.0, help="Request timeout (seconds).", show_default=True),
        "output_json": typer.Option(
            False,
            "--json",
            "-j",
            help="Return raw JSON instead of rendering a table.",
        ),
    }


_SHARED_OPTIONS = _shared_options()


def _run(
    action,
    *,
    api_version: str | None,
    host: str | None,
    verify_ssl: bool,
    timeout: float,
) -> Any:
    with _build_client(api_version, host, verify_ssl, timeout) as client:
        try:
            return action(client)
        except KreedzError as exc:
            _handle_error(exc)
            return None


def _parse_mode(value: str | None) -> Mode | None:
    if value is None:
        return None
    try:
        return Mode.from_value(int(value) if value.isdigit() else value)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--mode") from exc


def _parse_run_type(value: str | None) -> RunType | None:
    if value is None:
        return None
    try:
        return RunType[value.strip().upper()]
    except KeyError as exc:
        raise typer.BadParameter(
            "--run-type must be one of pro, tp or nub.", param_hint="--run-type"
        ) from exc


@app.command("url")
def resolve_url(
    operation_id: str = typer.Argument(..., help="Operation identifier, e.g. records.top."),
    path_param: list[str] = typer.Option(
        [],
        "--path-param",
        "-P",
        help="Path parameter in name=value form (repeatable).",
        show_default=False,
    ),
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
) -> None:
    """Print the URL an operation resolves to, without calling it."""

    path_params: dict[str, str] = {}
    for item in path_param:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"Invalid --path-param '{item}', expected name=value.")
        path_params[name.strip()] = value.strip()

    with _build_client(api_version, host, True, 30.0) as client:
        try:
            url = client.resolve_url(operation_id, path_params)
        except (UnknownOperationError, VersionMismatchError, HostConfigurationError) as exc:
            _handle_error(exc)
            return
        except ValueError as exc:
            raise typer.BadParameter(str(exc), param_hint="--path-param") from exc
    typer.echo(url)


@status_app.command("summary")
def status_summary(
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Show the status page summary."""

    summary = _run(
        lambda client: client.status.summary(),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    status = summary.get("status", {}) if isinstance(summary, Mapping) else {}
    if status.get("description"):
        typer.echo(f"Overall: {status['description']} ({status.get('indicator', 'unknown')})")
    _echo_json(summary)


@health_app.command("statuses")
def health_statuses(
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List health checks of every monitored endpoint."""

    statuses = _run(
        lambda client: client.health.statuses(),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _present_output(statuses, view_id="health.statuses", json_output=output_json)


@bans_app.command("list")
def bans_list(
    steamid64: int | None = typer.Option(None, "--steamid64", help="Filter by SteamID64."),
    limit: int = typer.Option(20, "--limit", help="Maximum number of bans."),
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List bans."""

    bans = _run(
        lambda client: client.bans.list(steamid64=steamid64, limit=limit),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _present_output(bans, view_id="bans.list", json_output=output_json)


@maps_app.command("list")
def maps_list(
    name: str | None = typer.Option(None, "--name", help="Filter by map name."),
    validated: bool | None = typer.Option(
        None, "--validated/--not-validated", help="Filter by validation state."
    ),
    limit: int = typer.Option(50, "--limit", help="Maximum number of maps."),
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List maps."""

    maps = _run(
        lambda client: client.maps.list(name=name, is_validated=validated, limit=limit),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _present_output(maps, view_id="maps.list", json_output=output_json)


@modes_app.command("list")
def modes_list(
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List game modes."""

    modes = _run(
        lambda client: client.modes.list(),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _present_output(modes, view_id="modes.list", json_output=output_json)


@servers_app.command("list")
def servers_list(
    name: str | None = typer.Option(None, "--name", help="Filter by server name."),
    limit: int = typer.Option(50, "--limit", help="Maximum number of servers."),
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """List game servers."""

    servers = _run(
        lambda client: client.servers.list(name=name, limit=limit),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _present_output(servers, view_id="servers.list", json_output=output_json)


@records_app.command("top")
def records_top(
    map_name: str | None = typer.Option(None, "--map", help="Map name."),
    mode: str | None = typer.Option(None, "--mode", help="Mode (kzt, skz, vnl or id)."),
    run_type: str | None = typer.Option(None, "--run-type", help="pro, tp or nub."),
    stage: int = typer.Option(0, "--stage", help="Map stage (0 is the main course)."),
    limit: int = typer.Option(20, "--limit", help="Maximum number of records."),
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Show the leaderboard for a map."""

    parsed_mode = _parse_mode(mode)
    parsed_run_type = _parse_run_type(run_type)
    records = _run(
        lambda client: client.records.top(
            map_name=map_name,
            mode=parsed_mode,
            run_type=parsed_run_type,
            stage=stage,
            limit=limit,
        ),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _present_output(records, view_id="records.list", json_output=output_json)


@records_app.command("recent")
def records_recent(
    steamid64: int | None = typer.Option(None, "--steamid64", help="Filter by SteamID64."),
    mode: str | None = typer.Option(None, "--mode", help="Mode (kzt, skz, vnl or id)."),
    limit: int = typer.Option(20, "--limit", help="Maximum number of records."),
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
    output_json: bool = _SHARED_OPTIONS["output_json"],
) -> None:
    """Show recently set records."""

    parsed_mode = _parse_mode(mode)
    records = _run(
        lambda client: client.records.recent(steamid64=steamid64, mode=parsed_mode, limit=limit),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _present_output(records, view_id="records.list", json_output=output_json)


@records_app.command("get")
def records_get(
    record_id: int = typer.Argument(..., help="Record identifier."),
    api_version: str | None = _SHARED_OPTIONS["api_version"],
    host: str | None = _SHARED_OPTIONS["host"],
    verify_ssl: bool = _SHARED_OPTIONS["verify_ssl"],
    timeout: float = _SHARED_OPTIONS["timeout"],
) -> None:
    """Fetch a single record (API v2.0 only)."""

    record = _run(
        lambda client: client.records.get(record_id),
        api_version=api_version,
        host=host,
        verify_ssl=verify_ssl,
        timeout=timeout,
    )
    _echo_json(record)


def main() -> None:  # pragma: no cover - console entrypoint
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
