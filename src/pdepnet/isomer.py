"""Isomers (wells) of a pressure-dependent reaction network."""

import collections
import dataclasses
from collections.abc import Sequence

from .data import reac
from .data.spc import Species


@dataclasses.dataclass(frozen=True, eq=False)
class Isomer:
    """A well: one species, or a set of associating/dissociating species.

    The species order is kept for display only; equality compares the species
    multiset.

    :param species: The species in the well
    """

    species: tuple[Species, ...]

    def __post_init__(self):
        """Initialize attributes."""
        species = tuple(map(reac.species_from_data, self.species))
        assert species, "An isomer must contain at least one species"
        object.__setattr__(self, "species", species)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Isomer):
            return NotImplemented
        return collections.Counter(self.species) == collections.Counter(other.species)

    def __hash__(self) -> int:
        return hash(frozenset(collections.Counter(self.species).items()))

    def __iter__(self):
        return iter(self.species)

    def __len__(self) -> int:
        return len(self.species)

    def __str__(self) -> str:
        return " + ".join(species_names(self))

    def is_unimolecular(self) -> bool:
        return len(self.species) == 1

    def is_multimolecular(self) -> bool:
        return len(self.species) > 1


# constructors
def from_data(species: "Isomer | Sequence[Species | str] | Species | str") -> Isomer:
    """Build an isomer from data.

    :param species: An isomer, a species, or a sequence of species or names
    :return: The isomer
    """
    if isinstance(species, Isomer):
        return species

    if isinstance(species, Species | str):
        species = [species]

    return Isomer(species=species)


# properties
def species_count(isom: Isomer) -> int:
    """Get the number of species in an isomer.

    :param isom: An isomer
    :return: The number of species
    """
    return len(isom)


def species_names(isom: Isomer) -> tuple[str, ...]:
    """Get the names of the species in an isomer.

    :param isom: An isomer
    :return: The names
    """
    return tuple(s.name for s in isom.species)
