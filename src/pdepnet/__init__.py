"""Pressure-dependent reactions for core/edge reaction network generation."""

from . import data, error, io, isomer, net, pdep, state
from .error import MissingThermoError, NegativeConcentrationError, PDepError
from .isomer import Isomer
from .pdep import (
    PDepReaction,
    PDepType,
    chemkin_string,
    classify,
    ensure_reverse,
    forward_flux,
    from_chebyshev,
    from_kinetics,
    from_reaction,
    has_reverse,
    is_core_reaction,
    is_edge_reaction,
    is_net_reaction,
    net_flux,
    rate_constant,
    reverse,
    reverse_flux,
    set_reverse,
    type_,
)
from .state import CoreEdgeModel, NetworkPartition, SystemSnapshot

__all__ = [
    # types
    "Isomer",
    "PDepReaction",
    "PDepType",
    "SystemSnapshot",
    "CoreEdgeModel",
    "NetworkPartition",
    # errors
    "PDepError",
    "NegativeConcentrationError",
    "MissingThermoError",
    # constructors
    "from_reaction",
    "from_kinetics",
    "from_chebyshev",
    # getters
    "reverse",
    "has_reverse",
    # setters
    "set_reverse",
    # properties
    "classify",
    "type_",
    "is_net_reaction",
    "is_core_reaction",
    "is_edge_reaction",
    # rates and fluxes
    "rate_constant",
    "forward_flux",
    "reverse_flux",
    "net_flux",
    # transformations
    "ensure_reverse",
    # I/O
    "chemkin_string",
    # modules
    "data",
    "error",
    "io",
    "isomer",
    "net",
    "pdep",
    "state",
]
