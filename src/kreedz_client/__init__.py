"""High-level Kreedz client entrypoints."""
from .client import KreedzClient
from .config import ClientConfig
from .exceptions import KreedzError, VersionMismatchError
from .versions import LATEST, ApiVersion

__all__ = ["KreedzClient", "ClientConfig", "KreedzError", "VersionMismatchError", "ApiVersion", "LATEST"]
