"""Lookup values used when building query parameters."""

from __future__ import annotations

from enum import Enum


class Mode(Enum):
    KZT = (200, "kz_timer", "KZTimer")
    SKZ = (201, "kz_simple", "SimpleKZ")
    VNL = (202, "kz_vanilla", "VanillaKZ")

    def __init__(self, mode_id: int, api_name: str, full_name: str) -> None:
        self.mode_id = mode_id
        self.api_name = api_name
        self.full_name = full_name

    @classmethod
    def from_value(cls, value: str | int) -> Mode:
        """Accept a mode id, API name, full name or short name (case-insensitive)."""

        for mode in cls:
            if isinstance(value, int):
                if mode.mode_id == value:
                    return mode
                continue
            lowered = value.strip().lower()
            if lowered in {mode.name.lower(), mode.api_name, mode.full_name.lower()}:
                return mode
        raise ValueError(f"Unknown mode: {value!r}")


class RunType(Enum):
    """``has_teleports`` filter; NUB means "no filter"."""

    PRO = False
    TP = True
    NUB = None

    @property
    def has_teleports(self) -> bool | None:
        return self.value


class Tickrate(Enum):
    T128 = 128
    T102 = 102
    T64 = 64


class JumpType(Enum):
    LONGJUMP = "longjump"
    BHOP = "bhop"
    MULTIBHOP = "multibhop"
    WEIRDJUMP = "weirdjump"
    DROPBHOP = "dropbhop"
    COUNTJUMP = "countjump"
    LADDERJUMP = "ladderjump"


class HealthEndpoint(Enum):
    GLOBAL_API = ("GlobalAPI", "", "globalapi")

    def __init__(self, display_name: str, group: str, endpoint: str) -> None:
        self.display_name = display_name
        self.group = group
        self.endpoint = endpoint

    @property
    def key(self) -> str:
        return f"{self.group}_{self.endpoint}"


MAP_IMAGE_URL_FMT = "https://raw.githubusercontent.com/KZGlobalTeam/map-images/{branch}/{path}/{map_name}.{ext}"


class MapImageFormat(Enum):
    SOURCE = ("master", "images", "jpg")
    JPG_HIGH = ("public", "images", "jpg")
    JPG_MEDIUM = ("public", "mediums", "jpg")
    JPG_LOW = ("public", "thumbnails", "jpg")
    WEBP_HIGH = ("public", "webp", "webp")
    WEBP_MEDIUM = ("public", "webp/mediums", "webp")
    WEBP_LOW = ("public", "webp/thumbs", "webp")

    def __init__(self, branch: str, path: str, extension: str) -> None:
        self.branch = branch
        self.path = path
        self.extension = extension


def map_image_url(map_name: str | None, image_format: MapImageFormat) -> str | None:
    """Build the raw image URL for a map, or ``None`` without a map name."""

    if not map_name:
        return None
    return MAP_IMAGE_URL_FMT.format(
        branch=image_format.branch,
        path=image_format.path,
        map_name=map_name,
        ext=image_format.extension,
    )
