"""Territory registry: the fixed, ordered map of a game session."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from conquest.domain.errors import AllocationFailure, InvalidIndex
from conquest.domain.models import Territory
from conquest.domain.rules_config import DEFAULT_SEED_TABLE, SeedTable
from conquest.schemas import TerritoryRead

logger = logging.getLogger(__name__)


class Registry:
    """Fixed-length, ordered collection of territories.

    Positions are the only identity a territory has. Player-facing indices are
    1-based; :meth:`pair` converts and validates them. The registry itself
    never changes troop counts or owners; the combat rules mutate the records
    it hands out.
    """

    __slots__ = ("_territories",)

    def __init__(self, territories: list[Territory]) -> None:
        self._territories = list(territories)

    def __len__(self) -> int:
        return len(self._territories)

    def __iter__(self) -> Iterator[Territory]:
        return iter(self._territories)

    def __getitem__(self, position: int) -> Territory:
        return self._territories[position]

    def select(self, index: int) -> Territory:
        """Return the territory at a 1-based ``index``."""

        if not 1 <= index <= len(self._territories):
            raise InvalidIndex(
                f"territory index {index} out of range (1 - {len(self._territories)})"
            )
        return self._territories[index - 1]

    def pair(self, attacker_index: int, defender_index: int) -> tuple[Territory, Territory]:
        """Validate an attacker/defender selection and return both records."""

        if attacker_index == defender_index:
            raise InvalidIndex(f"territory {attacker_index} cannot attack itself")
        return self.select(attacker_index), self.select(defender_index)

    def territories_owned_by(self, color: str) -> list[Territory]:
        return [territory for territory in self._territories if territory.owner_color == color]

    def troops_of(self, color: str) -> int:
        """Total troops across every territory held by ``color``."""

        return sum(territory.troops for territory in self.territories_owned_by(color))


def initialize_registry(count: int, seed_table: SeedTable = DEFAULT_SEED_TABLE) -> Registry:
    """Build a registry from the first ``count`` rows of ``seed_table``."""

    if count <= 0:
        raise AllocationFailure(f"territory count must be positive, got {count}")
    if count > len(seed_table):
        raise AllocationFailure(
            f"requested {count} territories but the seed table only defines {len(seed_table)}"
        )

    territories = [
        Territory(name=name, owner_color=color, troops=troops)
        for name, color, troops in seed_table.rows()[:count]
    ]
    logger.debug("Initialized registry with %d territories", len(territories))
    return Registry(territories)


def list_territories(registry: Registry) -> list[TerritoryRead]:
    """Read-only view of the registry in display order."""

    return [
        TerritoryRead(
            index=position,
            name=territory.name,
            owner_color=territory.owner_color,
            troops=territory.troops,
        )
        for position, territory in enumerate(registry, start=1)
    ]
