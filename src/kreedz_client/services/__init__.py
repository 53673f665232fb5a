"""Per-service convenience wrappers."""
from .bans import BansService
from .jumpstats import JumpstatsService
from .maps import MapImagesService, MapsInfoService, MapsService
from .modes import ModesService
from .players import PlayerRanksService, PlayersService
from .records import RecordFiltersService, RecordsService
from .servers import ServersService
from .status import HealthService, StatusService

__all__ = [
    "BansService",
    "HealthService",
    "JumpstatsService",
    "MapImagesService",
    "MapsInfoService",
    "MapsService",
    "ModesService",
    "PlayerRanksService",
    "PlayersService",
    "RecordFiltersService",
    "RecordsService",
    "ServersService",
    "StatusService",
]
