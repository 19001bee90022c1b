from .mission import MissionRead
from .territory import TerritoryRead

__all__ = [
    "MissionRead",
    "TerritoryRead",
]
