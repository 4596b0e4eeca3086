"""System state: thermodynamic snapshots and the core/edge species partition."""

import dataclasses
from collections.abc import Iterable, Mapping
from typing import Protocol

from pydantic import BaseModel, ConfigDict, PositiveFloat, field_validator

from .data import spc as spc_
from .data import thermo as thm_
from .data.spc import Species

SpeciesKey = Species | str


class SystemSnapshot(BaseModel):
    """The state of a reacting system at an instant.

    Temperature and pressure may be given with units, e.g. "1 atm".

    :param temperature: The temperature [K]
    :param pressure: The pressure [Pa]
    :param concentrations: Concentrations [mol/m^3] of the species in the model, by
        name
    """

    model_config = ConfigDict(frozen=True)

    temperature: PositiveFloat
    pressure: PositiveFloat
    concentrations: dict[str, float] = {}

    @field_validator("temperature", mode="before")
    @classmethod
    def _convert_temperature(cls, val):
        return thm_.to_si(val, "K", "K")

    @field_validator("pressure", mode="before")
    @classmethod
    def _convert_pressure(cls, val):
        return thm_.to_si(val, "Pa", "Pa")

    @field_validator("concentrations", mode="before")
    @classmethod
    def _name_keys(cls, val):
        return {spc_.name(k): v for k, v in dict(val).items()}

    def concentration(self, spc: SpeciesKey) -> float | None:
        """Get the concentration of a species.

        :param spc: A species object or name
        :return: The concentration, or `None` if the species is not in the snapshot
        """
        return self.concentrations.get(spc_.name(spc))


# snapshot constructors
def snapshot(
    temperature: float | str,
    pressure: float | str,
    concentrations: Mapping[SpeciesKey, float] | None = None,
) -> SystemSnapshot:
    """Build a system snapshot.

    :param temperature: The temperature, in K or as a string with units
    :param pressure: The pressure, in Pa or as a string with units
    :param concentrations: Concentrations [mol/m^3] by species or name
    :return: The snapshot
    """
    concentrations = {} if concentrations is None else concentrations
    return SystemSnapshot(
        temperature=temperature, pressure=pressure, concentrations=concentrations
    )


class NetworkPartition(Protocol):
    """Species-membership queries against the current core/edge partition."""

    def contains_as_reacted_species(self, spc: SpeciesKey) -> bool:
        """Whether the species is in the core (fully resolved)."""
        ...

    def contains_as_unreacted_species(self, spc: SpeciesKey) -> bool:
        """Whether the species is on the edge (exploratory)."""
        ...


@dataclasses.dataclass
class CoreEdgeModel:
    """The species partition of a mechanism under construction.

    :param core: Names of the reacted (core) species
    :param edge: Names of the unreacted (edge) species
    """

    core: set[str] = dataclasses.field(default_factory=set)
    edge: set[str] = dataclasses.field(default_factory=set)

    def __post_init__(self):
        """Initialize attributes."""
        self.core = set(map(spc_.name, self.core))
        self.edge = set(map(spc_.name, self.edge))
        overlap = self.core & self.edge
        assert not overlap, f"Species in both core and edge: {overlap}"

    def contains_as_reacted_species(self, spc: SpeciesKey) -> bool:
        return spc_.name(spc) in self.core

    def contains_as_unreacted_species(self, spc: SpeciesKey) -> bool:
        return spc_.name(spc) in self.edge

    def add_unreacted_species(self, spc: SpeciesKey):
        """Add a species to the edge, unless it is already in the core.

        :param spc: A species object or name
        """
        name = spc_.name(spc)
        if name not in self.core:
            self.edge.add(name)

    def add_reacted_species(self, spc: SpeciesKey):
        """Add a species to the core, moving it off the edge if needed.

        :param spc: A species object or name
        """
        name = spc_.name(spc)
        self.edge.discard(name)
        self.core.add(name)


def core_edge_model(
    core: Iterable[SpeciesKey] = (), edge: Iterable[SpeciesKey] = ()
) -> CoreEdgeModel:
    """Build a core/edge species partition.

    :param core: The core species or names
    :param edge: The edge species or names
    :return: The partition
    """
    return CoreEdgeModel(core=set(core), edge=set(edge))
