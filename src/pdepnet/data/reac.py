"""Reaction dataclasses."""

import dataclasses
from collections.abc import Sequence

import more_itertools as mit
import pyparsing as pp

from ..error import MissingThermoError
from . import rate as rt_
from . import thermo as thm_
from .rate import Rate
from .spc import Species

ARROW = pp.Literal("=") ^ pp.Literal("=>") ^ pp.Literal("<=>")
EQUATION = pp.SkipTo(ARROW)("side1") + ARROW("arrow") + pp.SkipTo(pp.StringEnd())("side2")


@dataclasses.dataclass
class Reaction:
    """A reaction.

    :param reactants: The reactant species
    :param products: The product species
    :param rate: The reaction rate
    :param multiplicity: The stoichiometric multiplicity (reaction path degeneracy)
    """

    reactants: tuple[Species, ...]
    products: tuple[Species, ...]
    rate: Rate | None = None
    multiplicity: int = 1

    def __post_init__(self):
        """Initialize attributes."""
        self.reactants = tuple(map(species_from_data, self.reactants))
        self.products = tuple(map(species_from_data, self.products))
        self.multiplicity = int(self.multiplicity)
        assert self.reactants and self.products, f"Empty reaction side: {self}"
        assert self.multiplicity > 0, f"Invalid multiplicity: {self.multiplicity}"


# constructors
def from_data(
    rcts: Sequence[Species | str],
    prds: Sequence[Species | str],
    rate_: Rate | dict | None = None,
    mult: int = 1,
) -> Reaction:
    """Construct a reaction object from data.

    :param rcts: The reactants, as species objects or names
    :param prds: The products, as species objects or names
    :param rate_: The reaction rate
    :param mult: The stoichiometric multiplicity
    :return: The reaction object
    """
    rate_ = rt_.from_data(**rate_) if isinstance(rate_, dict) else rate_
    return Reaction(reactants=rcts, products=prds, rate=rate_, multiplicity=mult)


def species_from_data(spc: Species | str) -> Species:
    """Get a species object from a species object or a bare name.

    :param spc: A species object or name
    :return: The species object
    """
    return spc if isinstance(spc, Species) else Species(name=spc)


# getters
def reactants(rxn: Reaction) -> tuple[Species, ...]:
    """Get the list of reactants.

    :param rxn: A reaction object
    :return: The reactant species
    """
    return rxn.reactants


def products(rxn: Reaction) -> tuple[Species, ...]:
    """Get the list of products.

    :param rxn: A reaction object
    :return: The product species
    """
    return rxn.products


def rate(rxn: Reaction) -> Rate | None:
    """Get the rate constant.

    :param rxn: A reaction object
    :return: The rate object
    """
    return rxn.rate


def multiplicity(rxn: Reaction) -> int:
    """Get the stoichiometric multiplicity.

    :param rxn: A reaction object
    :return: The multiplicity
    """
    return rxn.multiplicity


# setters
def set_rate(rxn: Reaction, rate_: Rate | None) -> Reaction:
    """Set the rate constant.

    :param rxn: A reaction object
    :param rate_: The rate object
    :return: The new reaction object
    """
    return from_data(
        rcts=reactants(rxn), prds=products(rxn), rate_=rate_, mult=multiplicity(rxn)
    )


# properties
def reactant_names(rxn: Reaction) -> tuple[str, ...]:
    """Get the CHEMKIN names of the reactants.

    :param rxn: A reaction object
    :return: The names
    """
    return tuple(s.name for s in reactants(rxn))


def product_names(rxn: Reaction) -> tuple[str, ...]:
    """Get the CHEMKIN names of the products.

    :param rxn: A reaction object
    :return: The names
    """
    return tuple(s.name for s in products(rxn))


def species(rxn: Reaction) -> tuple[Species, ...]:
    """Get the species that are involved in the reaction.

    :param rxn: A reaction object
    :return: The list of species
    """
    return tuple(mit.unique_everseen(reactants(rxn) + products(rxn)))


def mole_change(rxn: Reaction) -> int:
    """Get the change in the number of moles, products minus reactants.

    :param rxn: A reaction object
    :return: The change in moles
    """
    return len(products(rxn)) - len(reactants(rxn))


def enthalpy_change(rxn: Reaction) -> float:
    """Get the reaction enthalpy.

    :param rxn: A reaction object
    :return: The reaction enthalpy [J/mol]
    """
    return _thermo_change(rxn, thm_.enthalpy)


def entropy_change(rxn: Reaction) -> float:
    """Get the reaction entropy.

    :param rxn: A reaction object
    :return: The reaction entropy [J/mol/K]
    """
    return _thermo_change(rxn, thm_.entropy)


def _thermo_change(rxn: Reaction, prop_) -> float:
    missing = [s.name for s in species(rxn) if s.thermo is None]
    if missing:
        raise MissingThermoError(equation(rxn), missing)

    return sum(prop_(s.thermo) for s in products(rxn)) - sum(
        prop_(s.thermo) for s in reactants(rxn)
    )


def equation(rxn: Reaction, compact: bool = False) -> str:
    """Get the CHEMKIN equation of a reaction.

    :param rxn: A reaction object
    :param compact: Write without spaces, e.g. "A+B=C"?
    :return: The reaction CHEMKIN equation
    """
    return write_chemkin_equation(
        reactant_names(rxn), product_names(rxn), compact=compact
    )


def chemkin_equation(rxn: Reaction, compact: bool = False) -> str:
    """Get the CHEMKIN equation of a reaction, with the arrow set by reversibility.

    :param rxn: A reaction object
    :param compact: Write without spaces, e.g. "A+B=C"?
    :return: The reaction CHEMKIN equation
    """
    rate_ = rate(rxn)
    is_rev = True if rate_ is None else rt_.is_reversible(rate_)
    arrow = "=" if is_rev else "=>"
    return write_chemkin_equation(
        reactant_names(rxn), product_names(rxn), arrow=arrow, compact=compact
    )


# transformations
def reverse(rxn: Reaction) -> Reaction:
    """Get the reverse reaction, with its rate derived from the thermochemistry.

    :param rxn: A reaction object
    :return: The reverse reaction object
    """
    rate_ = rate(rxn)
    if rate_ is not None:
        if rt_.is_chebyshev(rate_):
            raise NotImplementedError(
                f"Reverse of a Chebyshev rate is not derived here: {equation(rxn)}"
            )

        k_r = rt_.reverse_arrhenius_function(
            rt_.arrhenius_function(rate_),
            dh=enthalpy_change(rxn),
            ds=entropy_change(rxn),
            dn=mole_change(rxn),
        )
        rate_ = rt_.SimpleRate(k=k_r, is_rev=rt_.is_reversible(rate_))

    return from_data(
        rcts=products(rxn), prds=reactants(rxn), rate_=rate_, mult=multiplicity(rxn)
    )


# I/O
def chemkin_string(
    rxn: Reaction, temperature: float | None = None, eq_width: int = 55
) -> str:
    """Write a Reaction object to a CHEMKIN string.

    :param rxn: A reaction object
    :param temperature: Optionally, annotate the rate coefficient at this temperature
    :param eq_width: The column width for the reaction equation
    :return: The CHEMKIN reaction string
    """
    rate_ = rate(rxn)
    if rate_ is None:
        return ""

    eq = chemkin_equation(rxn)
    rate_str = rt_.chemkin_string(rate_, eq_width=eq_width)
    rxn_str = f"{eq:<{eq_width}} {rate_str}"

    if temperature is not None and not rt_.is_chebyshev(rate_):
        k_val = rt_.rate_constant(rate_, temperature)
        rxn_str += f"\n    ! k({temperature:g} K) = {k_val:.4E}"

    return rxn_str


def write_chemkin_equation(
    rcts: Sequence[str],
    prds: Sequence[str],
    arrow: str = "=",
    compact: bool = False,
) -> str:
    """Write the CHEMKIN equation of a reaction to a string.

    :param rcts: The reactant names
    :param prds: The product names
    :param arrow: The arrow
    :param compact: Write without spaces, e.g. "A+B=C"?
    :return: The reaction CHEMKIN equation
    """
    plus = "+" if compact else " + "
    arrow = arrow if compact else f" {arrow} "
    return arrow.join([plus.join(rcts), plus.join(prds)])


def split_chemkin_equation(eq: str) -> tuple[str, str, str]:
    """Split a CHEMKIN equation at its arrow.

    :param eq: The reaction CHEMKIN equation
    :return: The reactant side, the arrow, and the product side
    """
    res = EQUATION.parseString(eq)
    return res.get("side1"), res.get("arrow"), res.get("side2")
