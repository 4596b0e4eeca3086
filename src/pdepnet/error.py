"""Exceptions."""

from collections.abc import Sequence


class PDepError(Exception):
    """Base class for errors raised by pressure-dependent network objects."""


class NegativeConcentrationError(PDepError, ValueError):
    """A snapshot reported a negative concentration.

    :param species: The name of the offending species
    :param value: The concentration
    """

    def __init__(self, species: str, value: float):
        self.species = species
        self.value = value
        super().__init__(f"{species}: {value}")


class MissingThermoError(PDepError, ValueError):
    """Thermochemistry is needed but missing for some species.

    :param equation: The reaction equation
    :param species: The names of the species without thermo
    """

    def __init__(self, equation: str, species: Sequence[str]):
        self.equation = equation
        self.species = tuple(species)
        super().__init__(f"Missing thermo for {', '.join(self.species)} in {equation}")
