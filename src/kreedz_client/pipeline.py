"""Ordered middleware chain applied to every outgoing operation call.

Stages run in a fixed order before the transport is touched:

1. `VersionGateStage` rejects operations the configured API version may not call.
2. `HostResolveStage` fills path placeholders and prefixes the relative path
   with the service's host.
3. `UrlNormalizeStage` turns the joined value into a canonical ``https://`` URL.

Each stage receives the operation descriptor and the request produced by the
previous stage, and either returns a (possibly rewritten) request or raises a
`KreedzError`. A raised error ends the call; the transport is never invoked.
Operations whose path template is already an absolute URL bypass host
resolution and normalization entirely.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field, replace
from typing import Any, Protocol

from .exceptions import VersionMismatchError
from .hosts import HostResolver
from .http import HttpResponse, QueryParams
from .operations import OperationDescriptor, OperationRegistry
from .urls import expand_path, is_absolute_url, merge
from .versions import ApiVersion

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OutgoingRequest:
    """Request state handed from stage to stage; stages only rewrite ``url``.

    ``url`` starts out as the operation's path template; ``path_params`` fill its
    placeholders once the version gate has passed.
    """

    operation_id: str
    method: str
    url: str
    params: QueryParams = field(default_factory=dict)
    headers: Mapping[str, str] = field(default_factory=dict)
    json_payload: Mapping[str, Any] | None = None
    path_params: Mapping[str, Any] = field(default_factory=dict)


class Stage(Protocol):
    def __call__(
        self, descriptor: OperationDescriptor, request: OutgoingRequest
    ) -> OutgoingRequest: ...


Transport = Callable[[OutgoingRequest], HttpResponse]


class VersionGateStage:
    """Reject calls whose operation constraint the client version does not satisfy."""

    def __init__(self, client_version: ApiVersion) -> None:
        self.client_version = client_version

    def __call__(
        self, descriptor: OperationDescriptor, request: OutgoingRequest
    ) -> OutgoingRequest:
        constraint = descriptor.constraint
        if constraint is None or constraint.allows(self.client_version):
            return request
        logger.warning(
            "Rejecting %s: requires [%s] %s, client is %s",
            descriptor.operation_id,
            constraint.operator,
            constraint.version,
            self.client_version,
        )
        raise VersionMismatchError(
            descriptor.operation_id,
            constraint.operator,
            constraint.version.api_name,
            self.client_version.api_name,
        )


class HostResolveStage:
    """Expand the path and prefix it with the host serving the operation's service."""

    def __init__(self, resolver: HostResolver) -> None:
        self.resolver = resolver

    def __call__(
        self, descriptor: OperationDescriptor, request: OutgoingRequest
    ) -> OutgoingRequest:
        path = expand_path(request.url, request.path_params)
        if is_absolute_url(descriptor.path_template):
            return replace(request, url=path)
        host = self.resolver.resolve(descriptor.service)
        return replace(request, url=f"{host}/{path}")


class UrlNormalizeStage:
    """Collapse slashes and force the ``https`` scheme on host-relative URLs."""

    def __call__(
        self, descriptor: OperationDescriptor, request: OutgoingRequest
    ) -> OutgoingRequest:
        if is_absolute_url(descriptor.path_template):
            return request
        return replace(request, url=merge(request.url, ""))


def default_stages(client_version: ApiVersion, resolver: HostResolver) -> tuple[Stage, ...]:
    return (VersionGateStage(client_version), HostResolveStage(resolver), UrlNormalizeStage())


class Pipeline:
    """Run the stage chain for an operation and hand the result to the transport."""

    def __init__(
        self,
        registry: OperationRegistry,
        stages: Sequence[Stage],
        transport: Transport,
    ) -> None:
        self.registry = registry
        self.stages: tuple[Stage, ...] = tuple(stages)
        self.transport = transport

    def prepare(self, operation_id: str, request: OutgoingRequest) -> OutgoingRequest:
        """Run every pre-transport stage and return the request ready to send."""

        descriptor = self.registry.lookup(operation_id)
        for stage in self.stages:
            request = stage(descriptor, request)
            logger.debug(
                "%s after %s: %s", operation_id, type(stage).__name__, request.url
            )
        return request

    def dispatch(self, operation_id: str, request: OutgoingRequest) -> HttpResponse:
        return self.transport(self.prepare(operation_id, request))


__all__ = [
    "HostResolveStage",
    "OutgoingRequest",
    "Pipeline",
    "Stage",
    "Transport",
    "UrlNormalizeStage",
    "VersionGateStage",
    "default_stages",
]
