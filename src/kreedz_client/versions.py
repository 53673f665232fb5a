"""API version descriptors understood by the Kreedz client."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

VersionTuple = tuple[int, int]

_VERSION_PATTERN = re.compile(r"^[vV]?(\d+)(?:[._](\d+))?$")


@dataclass(frozen=True, slots=True, order=True)
class ApiVersion:
    """A ``(major, minor)`` API version, ordered lexicographically."""

    major: int
    minor: int = 0
    api_name: str = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0:
            raise ValueError(f"Version components mustn't be negative: {self.major}.{self.minor}")
        object.__setattr__(self, "api_name", f"v{self.major}.{self.minor}")

    @property
    def is_latest(self) -> bool:
        return self == LATEST

    def as_tuple(self) -> VersionTuple:
        return (self.major, self.minor)

    def __str__(self) -> str:
        return self.api_name


V1_0 = ApiVersion(1, 0)
V2_0 = ApiVersion(2, 0)
LATEST = V2_0

KNOWN_VERSIONS: tuple[ApiVersion, ...] = (V1_0, V2_0)

_BY_API_NAME = {version.api_name: version for version in KNOWN_VERSIONS}


def compare(v1: ApiVersion | None, v2: ApiVersion | None) -> int:
    """Return -1, 0 or 1; an absent version sorts before any concrete one."""

    if v1 is None and v2 is None:
        return 0
    if v1 is None:
        return -1
    if v2 is None:
        return 1
    left, right = v1.as_tuple(), v2.as_tuple()
    return (left > right) - (left < right)


def from_api_name(name: str | None) -> ApiVersion | None:
    """Look up one of the known versions by its ``vX.Y`` name."""

    if not name:
        return None
    return _BY_API_NAME.get(name.strip().lower())


def parse_version(value: str | ApiVersion | None) -> ApiVersion:
    """Coerce user input (``"v2.0"``, ``"2"``, ``"V1_0"``) into an `ApiVersion`.

    ``None`` selects `LATEST`.
    """

    if value is None:
        return LATEST
    if isinstance(value, ApiVersion):
        return value
    match = _VERSION_PATTERN.match(value.strip())
    if not match:
        raise ValueError(f"Unrecognised API version: {value!r}")
    major, minor = match.groups()
    return ApiVersion(int(major), int(minor or 0))


__all__ = [
    "ApiVersion",
    "KNOWN_VERSIONS",
    "LATEST",
    "V1_0",
    "V2_0",
    "compare",
    "from_api_name",
    "parse_version",
]
