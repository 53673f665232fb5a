"""Helpers that merge hosts and relative paths into absolute request URLs."""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any
from urllib.parse import quote

_SCHEME_PREFIX = re.compile(r"^https?://", re.IGNORECASE)
_SLASH_RUN = re.compile(r"/{2,}")
_PLACEHOLDER = re.compile(r"\{([A-Za-z_][A-Za-z0-9_]*)\}")

SCHEME = "https://"


def is_absolute_url(value: str) -> bool:
    return bool(_SCHEME_PREFIX.match(value.strip()))


def strip_scheme(value: str) -> str:
    return _SCHEME_PREFIX.sub("", value.strip(), count=1)


def normalize_fragment(value: str) -> str:
    """Trim, collapse repeated slashes and drop leading/trailing slashes."""

    return _SLASH_RUN.sub("/", value.strip()).strip("/")


def merge(host: str, path: str) -> str:
    """Join ``host`` and ``path`` into a single ``https://`` URL.

    An absolute ``path`` is returned untouched.
    """

    if is_absolute_url(path):
        return path
    base = normalize_fragment(strip_scheme(host))
    relative = normalize_fragment(path)
    if not relative:
        return f"{SCHEME}{base}"
    return f"{SCHEME}{base}/{relative}"


def expand_path(template: str, path_params: Mapping[str, Any] | None = None) -> str:
    """Substitute ``{name}`` placeholders with URL-quoted values."""

    params = path_params or {}

    def _substitute(match: re.Match[str]) -> str:
        name = match.group(1)
        if name not in params or params[name] is None:
            raise ValueError(f"Missing path parameter '{name}' for template '{template}'")
        return quote(str(params[name]), safe="")

    return _PLACEHOLDER.sub(_substitute, template)


__all__ = ["expand_path", "is_absolute_url", "merge", "normalize_fragment", "strip_scheme"]
