"""Identity functionality: zone keys and the id generator contract."""

from zonetree.core.identity.models import ROOT_ZONE, ZONE_SEPARATOR, ZoneKey
from zonetree.core.identity.protocol import IdGenerator

__all__ = [
    "ROOT_ZONE",
    "ZONE_SEPARATOR",
    "ZoneKey",
    "IdGenerator",
]
