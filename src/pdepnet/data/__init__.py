"""Dataclasses for storing kinetic, thermodynamic, and species information."""

from . import rate, reac, spc, thermo
from .rate import (
    ArrheniusFunction,
    ChebRate,
    Rate,
    RateType,
    SimpleRate,
)
from .reac import Reaction
from .spc import Species
from .thermo import Thermo

__all__ = [
    "rate",
    "reac",
    "spc",
    "thermo",
    "ArrheniusFunction",
    "ChebRate",
    "Rate",
    "RateType",
    "SimpleRate",
    "Reaction",
    "Species",
    "Thermo",
]
