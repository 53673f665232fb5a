"""Custom exception hierarchy for the Kreedz client."""
from __future__ import annotations

from typing import Any


class KreedzError(RuntimeError):
    """Base error for Kreedz client failures."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        details: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.details = details


class RequestError(KreedzError):
    """Raised when an HTTP request cannot be fulfilled."""


class UnexpectedResponseError(KreedzError):
    """Raised when the API returns an unexpected payload structure."""


class UnknownOperationError(KreedzError):
    """Raised when no operation is registered under the requested identifier."""

    def __init__(self, operation_id: str) -> None:
        super().__init__(f"Unknown operation '{operation_id}'", details=operation_id)
        self.operation_id = operation_id


class HostConfigurationError(KreedzError):
    """Raised when a service declares a base host that normalizes to nothing."""

    def __init__(self, service: str, host: str | None) -> None:
        super().__init__(
            f"Base host for service '{service}' mustn't be empty (got {host!r})",
            details=host,
        )
        self.service = service


class VersionMismatchError(KreedzError):
    """Raised before dispatch when the client API version fails an operation's constraint."""

    def __init__(self, operation_id: str, operator: str, required: str, actual: str) -> None:
        super().__init__(
            f"{operation_id}: [{operator}] Method supported API version - [{required}]"
            f" / Current client API version - [{actual}]",
            details={"operator": operator, "required": required, "actual": actual},
        )
        self.operation_id = operation_id
        self.operator = operator
        self.required = required
        self.actual = actual
