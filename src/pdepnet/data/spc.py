"""Species dataclasses."""

import dataclasses

from .thermo import Thermo


@dataclasses.dataclass(frozen=True)
class Species:
    """A chemical species.

    :param name: The CHEMKIN name of the species
    :param thermo: Optionally, the species thermochemistry (ignored by equality)
    """

    name: str
    thermo: Thermo | None = dataclasses.field(default=None, compare=False)

    def __post_init__(self):
        """Initialize attributes."""
        object.__setattr__(self, "name", str(self.name))

    def __str__(self) -> str:
        return self.name


def name(spc: "Species | str") -> str:
    """Get the name of a species.

    Species are identified by name in snapshots and core/edge models, so a bare name
    is accepted as well.

    :param spc: A species object or name
    :return: The name
    """
    return spc if isinstance(spc, str) else spc.name


def thermo(spc: Species) -> Thermo | None:
    """Get the thermochemistry of a species.

    :param spc: A species object
    :return: The thermo object, if any
    """
    return spc.thermo
