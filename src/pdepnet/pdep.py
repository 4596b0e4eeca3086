"""Pressure-dependent reactions.

A pressure-dependent reaction connects a reactant isomer to a product isomer. A *path*
reaction connects the two directly and carries high-pressure Arrhenius kinetics; a
*net* reaction carries a Chebyshev fit to k(T,P) and may stand in for a whole
pressure-dependent sub-network. Net reactions are treated as core or edge reactions
according to the status of the species in the isomers they connect.
"""

import dataclasses
import enum
import logging

from . import isomer as isom_
from .data import rate as rt_
from .data import reac
from .data.rate import ArrheniusFunction, ChebRate, Rate, SimpleRate
from .data.reac import Reaction
from .error import NegativeConcentrationError
from .isomer import Isomer
from .state import NetworkPartition, SystemSnapshot

logger = logging.getLogger(__name__)

PDEP_MARKER = "(+m)"
PLACEHOLDER_RATE = "1.0E0 0.0 0.0"


class PDepType(str, enum.Enum):
    """The topology of a pressure-dependent reaction.

    NONE          - The type could not be assessed
    ISOMERIZATION - A1 --> A2
    ASSOCIATION   - B + C [+ ...] --> A
    DISSOCIATION  - A --> B + C [+ ...]
    OTHER         - A + B [+ ...] --> P + Q [+ ...]
    """

    NONE = "None"
    ISOMERIZATION = "Isomerization"
    ASSOCIATION = "Association"
    DISSOCIATION = "Dissociation"
    OTHER = "Other"


@dataclasses.dataclass(eq=False)
class PDepReaction:
    """A pressure-dependent path or net reaction.

    :param reactant: The reactant isomer
    :param product: The product isomer
    :param rate: The rate: a simple rate (path), a Chebyshev fit (net), or `None`
    :param structure: The underlying reaction, used for CHEMKIN output
    """

    reactant: Isomer | None
    product: Isomer | None
    rate: Rate | None = None
    structure: Reaction | None = None
    _reverse: "PDepReaction | None" = dataclasses.field(
        default=None, init=False, repr=False
    )

    def __post_init__(self):
        """Initialize attributes."""
        self.reactant = None if self.reactant is None else isom_.from_data(self.reactant)
        self.product = None if self.product is None else isom_.from_data(self.product)
        if self.structure is None and None not in (self.reactant, self.product):
            self.structure = reac.from_data(
                rcts=self.reactant.species, prds=self.product.species, rate_=self.rate
            )

    def __eq__(self, other: object) -> bool:
        """Whether the reactions connect the same isomers, in either direction."""
        if not isinstance(other, PDepReaction):
            return NotImplemented
        return (self.reactant, self.product) in (
            (other.reactant, other.product),
            (other.product, other.reactant),
        )

    __hash__ = None

    def __str__(self) -> str:
        if self.reactant is None or self.product is None:
            return ""
        return f"{self.reactant} --> {self.product}"


# constructors
def from_reaction(
    reac_: Isomer | list, prod: Isomer | list, rxn: Reaction
) -> PDepReaction:
    """Build a path reaction from the high-pressure kinetics of a reaction.

    :param reac_: The reactant isomer
    :param prod: The product isomer
    :param rxn: A reaction carrying the high-pressure kinetics
    :return: The pressure-dependent reaction
    """
    return PDepReaction(
        reactant=reac_, product=prod, rate=reac.rate(rxn), structure=rxn
    )


def from_kinetics(
    reac_: Isomer | list, prod: Isomer | list, k: ArrheniusFunction | SimpleRate
) -> PDepReaction:
    """Build a path reaction from high-pressure kinetics.

    :param reac_: The reactant isomer
    :param prod: The product isomer
    :param k: The high-pressure kinetics for the forward reaction
    :return: The pressure-dependent reaction
    """
    rate_ = k if isinstance(k, SimpleRate) else SimpleRate(k=k)
    return PDepReaction(reactant=reac_, product=prod, rate=rate_)


def from_chebyshev(
    reac_: Isomer | list, prod: Isomer | list, cheb: ChebRate
) -> PDepReaction:
    """Build a net reaction from a Chebyshev fit to k(T,P).

    :param reac_: The reactant isomer
    :param prod: The product isomer
    :param cheb: The Chebyshev fit
    :return: The pressure-dependent reaction
    """
    assert isinstance(cheb, ChebRate), f"Not a Chebyshev rate: {cheb}"
    return PDepReaction(reactant=reac_, product=prod, rate=cheb)


# getters
def reactant(rxn: PDepReaction) -> Isomer | None:
    """Get the reactant isomer.

    :param rxn: A pressure-dependent reaction
    :return: The reactant isomer
    """
    return rxn.reactant


def product(rxn: PDepReaction) -> Isomer | None:
    """Get the product isomer.

    :param rxn: A pressure-dependent reaction
    :return: The product isomer
    """
    return rxn.product


def rate(rxn: PDepReaction) -> Rate | None:
    """Get the rate.

    :param rxn: A pressure-dependent reaction
    :return: The rate object
    """
    return rxn.rate


def high_p_kinetics(rxn: PDepReaction) -> ArrheniusFunction | None:
    """Get the high-pressure Arrhenius kinetics, if any.

    :param rxn: A pressure-dependent reaction
    :return: The Arrhenius function
    """
    return None if rxn.rate is None else rt_.arrhenius_function(rxn.rate)


def chebyshev_fit(rxn: PDepReaction) -> ChebRate | None:
    """Get the Chebyshev fit to k(T,P), if any.

    :param rxn: A pressure-dependent reaction
    :return: The Chebyshev rate
    """
    return rxn.rate if rt_.is_chebyshev(rxn.rate) else None


def reverse(rxn: PDepReaction) -> PDepReaction | None:
    """Get the reverse reaction.

    :param rxn: A pressure-dependent reaction
    :return: The reverse reaction, if it has been set
    """
    return rxn._reverse


def has_reverse(rxn: PDepReaction) -> bool:
    """Whether the reverse reaction has been set.

    :param rxn: A pressure-dependent reaction
    :return: `True` if it has, `False` if it hasn't
    """
    return rxn._reverse is not None


# setters
def set_reverse(rxn: PDepReaction, rev: PDepReaction):
    """Pair a reaction with its reverse, on both sides.

    :param rxn: A pressure-dependent reaction
    :param rev: Its pressure-dependent reverse
    """
    assert isinstance(rev, PDepReaction), f"Reverse must be pressure-dependent: {rev}"
    rxn._reverse = rev
    rev._reverse = rxn


# properties
def classify(reac_: Isomer | None, prod: Isomer | None) -> PDepType:
    """Determine the topology of a reaction from the molecularity of its isomers.

    :param reac_: The reactant isomer
    :param prod: The product isomer
    :return: The reaction type
    """
    if reac_ is None or prod is None:
        return PDepType.NONE

    if reac_.is_unimolecular() and prod.is_unimolecular():
        return PDepType.ISOMERIZATION

    if reac_.is_multimolecular() and prod.is_unimolecular():
        return PDepType.ASSOCIATION

    if reac_.is_unimolecular() and prod.is_multimolecular():
        return PDepType.DISSOCIATION

    return PDepType.OTHER


def type_(rxn: PDepReaction) -> PDepType:
    """Get the reaction type.

    :param rxn: A pressure-dependent reaction
    :return: The reaction type
    """
    return classify(rxn.reactant, rxn.product)


def is_net_reaction(rxn: PDepReaction) -> bool:
    """Whether this is a net reaction, i.e. it has a Chebyshev fit to k(T,P).

    :param rxn: A pressure-dependent reaction
    :return: `True` if it is, `False` if it isn't
    """
    return rt_.is_chebyshev(rxn.rate)


def is_core_reaction(rxn: PDepReaction, model: NetworkPartition) -> bool:
    """Whether all species on both sides are in the model core.

    :param rxn: A pressure-dependent reaction
    :param model: The current core/edge partition
    :return: `True` if it is a core reaction, `False` if it isn't
    """
    return all(
        model.contains_as_reacted_species(s)
        for s in (*rxn.reactant.species, *rxn.product.species)
    )


def is_edge_reaction(rxn: PDepReaction, model: NetworkPartition) -> bool:
    """Whether all reactant species are in the core and some product is on the edge.

    :param rxn: A pressure-dependent reaction
    :param model: The current core/edge partition
    :return: `True` if it is an edge reaction, `False` if it isn't
    """
    if not all(model.contains_as_reacted_species(s) for s in rxn.reactant.species):
        return False

    return any(model.contains_as_unreacted_species(s) for s in rxn.product.species)


# rates and fluxes
def rate_constant(rxn: PDepReaction, t: float, p: float) -> float:
    """Calculate the forward rate coefficient.

    The Chebyshev fit is used if present, then the high-pressure kinetics if
    present; otherwise the rate coefficient is zero.

    :param rxn: A pressure-dependent reaction
    :param t: The temperature [K]
    :param p: The pressure [Pa]
    :return: The rate coefficient
    """
    return rt_.rate_constant(rxn.rate, t, p)


def forward_flux(rxn: PDepReaction, snap: SystemSnapshot) -> float:
    """Calculate the forward flux at a system snapshot.

    Species missing from the snapshot are not in the model, so their concentration
    counts as zero.

    :param rxn: A pressure-dependent reaction
    :param snap: The system snapshot
    :return: The forward flux
    """
    flux = rate_constant(rxn, snap.temperature, snap.pressure)
    for spc in rxn.reactant.species:
        conc = snap.concentration(spc)
        conc = 0.0 if conc is None else conc
        if conc < 0:
            raise NegativeConcentrationError(spc.name, conc)
        flux *= conc
    return flux


def reverse_flux(rxn: PDepReaction, snap: SystemSnapshot) -> float:
    """Calculate the reverse flux at a system snapshot.

    :param rxn: A pressure-dependent reaction, already paired with its reverse
    :param snap: The system snapshot
    :return: The reverse flux
    """
    assert has_reverse(rxn), f"No reverse reaction set for {rxn}"
    return forward_flux(reverse(rxn), snap)


def net_flux(rxn: PDepReaction, snap: SystemSnapshot) -> float:
    """Calculate the net flux at a system snapshot.

    Positive values mean net progress from the reactant to the product isomer.

    :param rxn: A pressure-dependent reaction, already paired with its reverse
    :param snap: The system snapshot
    :return: The net flux
    """
    return forward_flux(rxn, snap) - reverse_flux(rxn, snap)


# transformations
def ensure_reverse(rxn: PDepReaction) -> PDepReaction:
    """Generate the reverse reaction and pair it, unless already done.

    A net reaction's reverse swaps the isomers over the same Chebyshev fit. A path
    reaction's reverse gets kinetics derived from the thermochemistry of the
    underlying reaction.

    :param rxn: A pressure-dependent reaction
    :return: The reverse reaction
    """
    if has_reverse(rxn):
        return reverse(rxn)

    if is_net_reaction(rxn):
        rev = from_chebyshev(rxn.product, rxn.reactant, rxn.rate)
    else:
        rxn_ = reac.set_rate(rxn.structure, rxn.rate)
        rev = from_reaction(rxn.product, rxn.reactant, reac.reverse(rxn_))

    logger.debug(f"Generated reverse reaction {rev} for {rxn}")
    set_reverse(rxn, rev)
    return rev


# I/O
def pdep_equation(eq: str) -> str:
    """Mark both sides of a CHEMKIN equation as pressure-dependent.

    :param eq: A CHEMKIN equation, e.g. "A+B=C"
    :return: The marked equation, e.g. "A+B(+m)=C(+m)"
    """
    side1, _, side2 = reac.split_chemkin_equation(eq)
    return f"{side1}{PDEP_MARKER}={side2}{PDEP_MARKER}"


def chemkin_string(rxn: PDepReaction, t: float) -> str:
    """Write a pressure-dependent reaction to a CHEMKIN string.

    :param rxn: A pressure-dependent reaction
    :param t: The temperature at which to annotate path reaction rates [K]
    :return: The CHEMKIN string, empty if the reaction has no rate
    """
    if rxn.rate is not None:
        assert rxn.structure is not None, f"Unset isomer: {rxn!r}"

    if is_net_reaction(rxn):
        eq = pdep_equation(reac.chemkin_equation(rxn.structure, compact=True))
        cheb_str = rt_.chebyshev_chemkin_string(rxn.rate)
        return f"{eq}\t{PLACEHOLDER_RATE}\n{cheb_str}\n"

    if rxn.rate is not None:
        return reac.chemkin_string(reac.set_rate(rxn.structure, rxn.rate), temperature=t)

    return ""
