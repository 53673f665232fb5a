"""HTTP utilities for Kreedz API access."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from dataclasses import dataclass
from typing import Any

from requests import Response, Session

from .exceptions import RequestError, UnexpectedResponseError

QueryParams = Mapping[str, str | list[str]]


@dataclass(slots=True)
class HttpResponse:
    """Typed response wrapper with helper accessors."""

    status_code: int
    data: Any
    headers: Mapping[str, str]


def ensure_success(response: Response) -> None:
    """Raise `RequestError` if the response signals a failure."""

    if 200 <= response.status_code < 300:
        return
    message = f"Kreedz API error {response.status_code} for {response.url}: {response.text[:200]}"
    raise RequestError(message, status_code=response.status_code, details=response.text)


def parse_json(response: Response) -> Any:
    """Parse JSON with helpful error context."""

    try:
        return response.json()
    except ValueError as exc:
        raise UnexpectedResponseError(
            f"Response from {response.url} did not contain valid JSON",
            status_code=response.status_code,
            details=response.text[:200],
        ) from exc


def request(
    session: Session,
    method: str,
    url: str,
    *,
    params: QueryParams | None = None,
    headers: MutableMapping[str, str] | None = None,
    json_payload: Mapping[str, Any] | None = None,
    timeout: float | tuple[float, float] | None = None,
    verify: bool | str = True,
) -> HttpResponse:
    """Make a request and return a parsed response envelope."""

    response = session.request(
        method=method,
        url=url,
        params=params,
        headers=headers,
        json=json_payload,
        timeout=timeout,
        verify=verify,
    )
    ensure_success(response)

    data: Any = None
    if response.content:
        data = parse_json(response)

    return HttpResponse(status_code=response.status_code, data=data, headers=response.headers)
