"""Kinetics dataclasses.

Two kinds of rate are supported: an analytic high-pressure Arrhenius law and a
Chebyshev fit to k(T,P), as written in CHEMKIN files.
"""

import abc
import dataclasses
import enum
import logging
from collections.abc import Sequence

import more_itertools as mit
import numpy
from numpy.polynomial import chebyshev

from .thermo import U

logger = logging.getLogger(__name__)

MatrixLike = Sequence[Sequence[float]] | numpy.ndarray

R_GAS = U.Quantity(1, "molar_gas_constant").m_as("J/mol/K")
PA_PER_ATM = U.Quantity(1, "atm").m_as("Pa")
P_STANDARD = U.Quantity(1, "bar").m_as("Pa")

DEFAULT_CHEB_T_LIMITS = (300.0, 2500.0)
DEFAULT_CHEB_P_LIMITS = (0.001, 100.0)


class RateType(str, enum.Enum):
    """The type of reaction rate (type of pressure dependence)."""

    CONSTANT = "Constant"
    CHEB = "Chebyshev"


@dataclasses.dataclass
class ArrheniusFunction:
    """A modified Arrhenius function, k(T) = A T^b exp(-E/RT).

    :param A: The pre-exponential factor [(m^3/mol)**o/s]
    :param b: The temperature exponent
    :param E: The activation energy E [J/mol]
    """

    A: float = 1.0
    b: float = 0.0
    E: float = 0.0

    def __post_init__(self):
        """Initialize attributes."""
        self.A = float(self.A)
        self.b = float(self.b)
        self.E = float(self.E)


def arrhenius_function_from_data(
    data: Sequence[float] | dict[str, float] | ArrheniusFunction,
) -> ArrheniusFunction:
    """Build an Arrhenius function object from data.

    :param data: The Arrhenius parameters (A, b, E)
    :return: The Arrhenius function object
    """
    if isinstance(data, ArrheniusFunction):
        return ArrheniusFunction(*arrhenius_params(data))

    if isinstance(data, dict):
        return ArrheniusFunction(**data)

    return ArrheniusFunction(*data)


def arrhenius_params(k: ArrheniusFunction) -> tuple[float, float, float]:
    """Get the parameters for an Arrhenius function.

    :param k: The Arrhenius function object
    :return: The parameters A, b, E
    """
    return (k.A, k.b, k.E)


def arrhenius_string(k: ArrheniusFunction, digits: int = 4) -> str:
    """Write the parameters for an Arrhenius function to a string.

    :param k: The Arrhenius function object
    :param digits: How many digits to include
    :return: The string
    """
    nums = arrhenius_params(k)
    always_sci = [True, False, False]  # use scientific notation for A
    return write_numbers(nums=nums, always_sci=always_sci, digits=digits)


def arrhenius_rate_constant(k: ArrheniusFunction, t: float) -> float:
    """Evaluate an Arrhenius function.

    :param k: The Arrhenius function object
    :param t: The temperature [K]
    :return: The rate coefficient
    """
    assert t > 0, f"Invalid temperature: {t}"
    return float(k.A * t**k.b * numpy.exp(-k.E / (R_GAS * t)))


def reverse_arrhenius_function(
    k: ArrheniusFunction, dh: float, ds: float, dn: int = 0
) -> ArrheniusFunction:
    """Derive the reverse Arrhenius function from the reaction thermochemistry.

    With a temperature-independent reaction enthalpy and entropy, the equilibrium
    constant in concentration units (mol/m^3) is

        Kc(T) = exp(dS/R - dH/RT) (P°/RT)^dn

    so k_r = k / Kc is itself a modified Arrhenius function:

        A_r = A exp(-dS/R) (R/P°)^dn,   b_r = b + dn,   E_r = E - dH

    :param k: The forward Arrhenius function
    :param dh: The reaction enthalpy [J/mol]
    :param ds: The reaction entropy [J/mol/K]
    :param dn: The change in moles (products minus reactants)
    :return: The reverse Arrhenius function
    """
    a_r = k.A * numpy.exp(-ds / R_GAS) * (R_GAS / P_STANDARD) ** dn
    return ArrheniusFunction(A=a_r, b=k.b + dn, E=k.E - dh)


class Rate(abc.ABC):
    """Base class for reaction rates.

    :param is_rev: Whether this rate describes a reversible reaction
    :param type_: The type of reaction
    """

    @property
    @abc.abstractmethod
    def type_(self):
        """The type of reaction."""
        pass

    @property
    @abc.abstractmethod
    def is_rev(self):
        """Whether this rate describes a reversible reaction."""
        pass


@dataclasses.dataclass
class SimpleRate(Rate):
    """Analytic high-pressure reaction rate, k(T).

    :param k: The high-pressure limiting Arrhenius function for the reaction
    :param is_rev: Is this a reversible reaction?
    :param type_: The type of reaction
    """

    k: ArrheniusFunction = dataclasses.field(default_factory=ArrheniusFunction)
    is_rev: bool = True
    type_: RateType = RateType.CONSTANT

    def __post_init__(self):
        """Initialize attributes."""
        self.k = arrhenius_function_from_data(self.k)
        self.type_ = RateType.CONSTANT if self.type_ is None else RateType(self.type_)
        assert self.type_ == RateType.CONSTANT


@dataclasses.dataclass
class ChebRate(Rate):
    """Chebyshev reaction rate, k(T,P) parametrization (see cantera.ReactionRate).

    :param t_limits: The min/max temperature limits [K] for the Chebyshev fit
    :param p_limits: The min/max pressure limits [atm] for the Chebyshev fit
    :param coeffs: The Chebyshev expansion coefficients, temperature by pressure
    :param k: Optional high-pressure rate
    :param is_rev: Is this a reversible reaction?
    """

    t_limits: tuple[float, float]
    p_limits: tuple[float, float]
    coeffs: numpy.ndarray
    k: ArrheniusFunction | None = None
    is_rev: bool = True
    type_: RateType = RateType.CHEB

    def __post_init__(self):
        """Initialize attributes."""
        self.t_limits = tuple(map(float, self.t_limits))
        self.p_limits = tuple(map(float, self.p_limits))
        assert len(self.t_limits) == 2, f"Invalid limits: {self.t_limits}"
        assert len(self.p_limits) == 2, f"Invalid limits: {self.p_limits}"
        (t_min, t_max), (p_min, p_max) = self.t_limits, self.p_limits
        assert 0 < t_min < t_max, f"Invalid limits: {self.t_limits}"
        assert 0 < p_min < p_max, f"Invalid limits: {self.p_limits}"
        self.coeffs = numpy.array(self.coeffs, dtype=float)
        assert numpy.ndim(self.coeffs) == 2, f"Must be 2-dimensional: {self.coeffs}"
        self.k = None if self.k is None else arrhenius_function_from_data(self.k)
        self.type_ = RateType.CHEB if self.type_ is None else RateType(self.type_)
        assert self.type_ == RateType.CHEB


# constructors
def from_data(
    k: Sequence[float] | ArrheniusFunction | None = None,
    t_limits: Sequence[float] | None = None,
    p_limits: Sequence[float] | None = None,
    coeffs: MatrixLike | None = None,
    type_: str | RateType | None = None,
    is_rev: bool = True,
) -> Rate:
    """Build a rate object from data.

    :param k: The (high-pressure limiting) Arrhenius function for the reaction
    :param t_limits: The min/max temperature limits [K] for the Chebyshev fit
    :param p_limits: The min/max pressure limits [atm] for the Chebyshev fit
    :param coeffs: The Chebyshev expansion coefficients
    :param type_: The type of reaction: "Constant", "Chebyshev"
    :param is_rev: Is this a reversible reaction?
    :return: The rate object
    """
    type_ = None if type_ is None else RateType(type_)

    cheb_args = (t_limits, p_limits, coeffs)
    if any(arg is not None for arg in cheb_args) or type_ == RateType.CHEB:
        assert coeffs is not None, "Chebyshev rate requires coefficients"
        return ChebRate(
            t_limits=DEFAULT_CHEB_T_LIMITS if t_limits is None else t_limits,
            p_limits=DEFAULT_CHEB_P_LIMITS if p_limits is None else p_limits,
            coeffs=coeffs,
            k=k,
            is_rev=is_rev,
            type_=type_,
        )

    assert k is not None, "Simple rate requires an Arrhenius function"
    return SimpleRate(k=k, is_rev=is_rev, type_=type_)


# getters
def arrhenius_function(rate: Rate) -> ArrheniusFunction | None:
    """Get the primary Arrhenius function for the reaction.

    :param rate: The rate object
    :return: The primary Arrhenius function
    """
    return rate.k


def type_(rate: Rate) -> RateType:
    """Get the type of reaction.

    :param rate: The rate object
    :return: The type of reaction
    """
    return rate.type_


def is_reversible(rate: Rate) -> bool:
    """Whether this rate describes a reversible reaction.

    :param rate: The rate object
    :return: `True` if it does, `False` if it doesn't
    """
    return rate.is_rev


def chebyshev_temperature_limits(rate: Rate) -> tuple[float, float] | None:
    """Temperature limits for a Chebyshev reaction rate.

    :param rate: The rate object
    :return: The minimum and maximum temperature
    """
    if not isinstance(rate, ChebRate):
        return None

    return rate.t_limits


def chebyshev_pressure_limits(rate: Rate) -> tuple[float, float] | None:
    """Pressure limits for a Chebyshev reaction rate.

    :param rate: The rate object
    :return: The minimum and maximum pressure
    """
    if not isinstance(rate, ChebRate):
        return None

    return rate.p_limits


def chebyshev_coefficients(rate: Rate) -> numpy.ndarray | None:
    """Coefficients for a Chebyshev reaction rate.

    :param rate: The rate object
    :return: The Chebyshev coefficients
    """
    if not isinstance(rate, ChebRate):
        return None

    return rate.coeffs


# properties
def is_chebyshev(rate: Rate | None) -> bool:
    """Whether this is a Chebyshev k(T,P) fit.

    :param rate: The rate object
    :return: `True` if it is, `False` if it isn't
    """
    return isinstance(rate, ChebRate)


def rate_constant(rate: Rate | None, t: float, p: float | None = None) -> float:
    """Evaluate the rate coefficient.

    A Chebyshev fit always takes precedence, even if it carries a high-pressure
    Arrhenius function. A simple rate ignores the pressure. A missing rate evaluates
    to zero.

    :param rate: The rate object, or `None`
    :param t: The temperature [K]
    :param p: The pressure [Pa]
    :return: The rate coefficient
    """
    if isinstance(rate, ChebRate):
        assert p is not None, f"Chebyshev rate requires a pressure: {rate}"
        return chebyshev_rate_constant(rate, t, p)

    if isinstance(rate, SimpleRate):
        return arrhenius_rate_constant(rate.k, t)

    assert rate is None, f"Unknown rate type: {rate}"
    return 0.0


def chebyshev_rate_constant(rate: ChebRate, t: float, p: float) -> float:
    """Evaluate a Chebyshev k(T,P) fit.

    :param rate: The Chebyshev rate object
    :param t: The temperature [K]
    :param p: The pressure [Pa]
    :return: The rate coefficient
    """
    assert t > 0 and p > 0, f"Invalid conditions: T={t}, P={p}"
    t_min, t_max = rate.t_limits
    p_min, p_max = rate.p_limits
    p_atm = p / PA_PER_ATM

    if not (t_min <= t <= t_max and p_min <= p_atm <= p_max):
        logger.debug(
            f"Extrapolating Chebyshev fit to T={t} K, P={p_atm} atm "
            f"(limits {rate.t_limits} K, {rate.p_limits} atm)"
        )

    t_red = (2 / t - 1 / t_min - 1 / t_max) / (1 / t_max - 1 / t_min)
    lp, lp_min, lp_max = numpy.log10([p_atm, p_min, p_max])
    p_red = (2 * lp - lp_min - lp_max) / (lp_max - lp_min)
    log_k = chebyshev.chebval2d(t_red, p_red, rate.coeffs)
    return float(10.0**log_k)


# I/O
def chemkin_string(rate: Rate, eq_width: int = 0) -> str:
    """Write the CHEMKIN rate to a string.

    :param rate: The reaction rate object
    :param eq_width: The width of the equation, for alignment purposes
    :return: CHEMKIN rate string
    """
    top_k = arrhenius_function(rate)
    top_k = ArrheniusFunction() if top_k is None else top_k
    top_line = arrhenius_string(top_k)
    lines = [top_line]

    if type_(rate) == RateType.CHEB:
        top_width = eq_width + len(top_line) + 1
        lines.append(chebyshev_chemkin_string(rate, top_width=top_width))

    return "\n".join(lines)


def chebyshev_chemkin_string(rate: ChebRate, top_width: int = 55) -> str:
    """Write the auxiliary CHEMKIN lines for a Chebyshev rate.

    :param rate: The Chebyshev rate object
    :param top_width: The width of the top line, for alignment purposes
    :return: The TCHEB, PCHEB, and CHEB lines
    """
    t_limits = chebyshev_temperature_limits(rate)
    p_limits = chebyshev_pressure_limits(rate)
    coeffs = chebyshev_coefficients(rate)
    shape = numpy.shape(coeffs)
    lines = [
        chemkin_aux_line("TCHEB", write_numbers(t_limits), top_width=top_width),
        chemkin_aux_line("PCHEB", write_numbers(p_limits), top_width=top_width),
        chemkin_aux_line("CHEB", write_numbers(shape, as_int=True), top_width=top_width),
    ] + [
        chemkin_aux_line("CHEB", write_numbers(cs), top_width=top_width)
        for cs in mit.chunked(numpy.ravel(coeffs), 4)
    ]
    return "\n".join(lines)


# Helpers
def chemkin_aux_line(
    key: str,
    val: str | Sequence[str],
    top_width: int = 55,
    key_width: int = 5,
    indent: int = 4,
) -> str:
    """Format a line of auxiliary CHEMKIN reaction data.

    :param key: The key, e.g. 'CHEB'
    :param val: The value(s), e.g. '5.000  8500' or ['5.000', '8500']
    :param top_width: The width of the top line, for alignment purposes
    :param key_width: The key column width, defaults to 5
    :param indent: The indentation, defaults to 4
    :return: The line
    """
    val_width = top_width - indent - key_width - 2
    val = val if isinstance(val, str) else " ".join(val)
    return " " * indent + f"{key:<{key_width}} /{val:>{val_width}}/"


def write_numbers(
    nums: Sequence[float],
    digits: int = 4,
    always_sci: Sequence[bool] | bool = False,
    as_int: bool = False,
) -> str:
    """Write a sequence of numbers to a formatted string.

    :param nums: The numbers
    :param digits: How many digits to include, defaults to 4
    :param always_sci: Whether to always use scientific notation; if given as a list,
        this can be used to set scientific notation for individual numbers
    :param as_int: Whether to write intgeger values
    :return: The formatted number sequence string
    """
    always_sci = (
        [always_sci] * len(nums) if isinstance(always_sci, bool) else always_sci
    )
    assert len(nums) <= len(always_sci), f"Mismatched lengths:\n{nums}\n{always_sci}"
    num_strs = [
        write_number(n, always_sci=a, digits=digits, as_int=as_int)
        for n, a in zip(nums, always_sci, strict=False)
    ]
    return " ".join(num_strs)


def write_number(
    num: float | int, digits: int = 4, always_sci: bool = False, as_int: bool = False
) -> str:
    """Write a number to a formatted string.

    :param num: The number
    :param digits: How many digitst to include, defaults to 4
    :param always_sci: Whether to always use scientific notation
    :param as_int: Whether to write integer values
    :return: The formatted number string
    """
    # Exact width of scientific notation with 2-digit exponent:
    max_width = digits + 6

    if as_int:
        num = int(num)
        return f"{num:>{max_width}d}"

    exp = int(numpy.floor(numpy.log10(numpy.abs(num)))) if num else 0
    float_width = max(exp + 1, digits + 1) if exp > 0 else numpy.abs(exp) + 1 + digits

    if always_sci or float_width > max_width:
        decimals = digits - 1
        return f"{num:>{max_width}.{decimals}E}"

    decimals = max(0, digits - exp - 1)
    return f"{num:>{max_width}.{decimals}f}"
