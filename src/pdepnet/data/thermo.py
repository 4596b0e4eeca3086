"""Thermochemistry dataclasses."""

import dataclasses

import pint

U = pint.UnitRegistry()

H_UNIT = "J/mol"
S_UNIT = "J/mol/K"


@dataclasses.dataclass(frozen=True)
class Thermo:
    """Standard-state thermochemistry, treated as temperature-independent.

    :param h: The standard enthalpy of formation [J/mol]
    :param s: The standard entropy [J/mol/K]
    """

    h: float = 0.0
    s: float = 0.0

    def __post_init__(self):
        """Initialize attributes."""
        object.__setattr__(self, "h", float(self.h))
        object.__setattr__(self, "s", float(self.s))


# constructors
def from_data(
    h: float | str,
    s: float | str,
    h_unit: str = H_UNIT,
    s_unit: str = S_UNIT,
) -> Thermo:
    """Build a thermo object from data.

    Values may be given as numbers in the stated units, or as strings with their own
    units, e.g. "-20 kcal/mol".

    :param h: The standard enthalpy of formation
    :param s: The standard entropy
    :param h_unit: The enthalpy unit for numeric values
    :param s_unit: The entropy unit for numeric values
    :return: The thermo object
    """
    return Thermo(h=to_si(h, h_unit, H_UNIT), s=to_si(s, s_unit, S_UNIT))


# getters
def enthalpy(thm: Thermo) -> float:
    """Get the standard enthalpy of formation.

    :param thm: A thermo object
    :return: The enthalpy [J/mol]
    """
    return thm.h


def entropy(thm: Thermo) -> float:
    """Get the standard entropy.

    :param thm: A thermo object
    :return: The entropy [J/mol/K]
    """
    return thm.s


# helpers
def to_si(val: float | str, unit0: str, unit: str) -> float:
    """Convert a value to the given unit.

    :param val: A number in `unit0`, or a string carrying its own unit
    :param unit0: The unit of a bare number
    :param unit: The desired unit
    :return: The converted value
    """
    qty = U.Quantity(val) if isinstance(val, str) else U.Quantity(val, unit0)
    return float(qty.m_as(unit))
