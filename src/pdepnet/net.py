"""Networks of pressure-dependent reactions."""

from collections.abc import Sequence

import networkx

from . import isomer as isom_
from . import pdep
from .pdep import PDepReaction
from .state import NetworkPartition, SystemSnapshot


class Key:
    # Nodes:
    unimolecular = "unimolecular"
    # Edges:
    reaction = "reaction"
    type_ = "type_"
    is_net = "is_net"


# type aliases
Network = networkx.MultiDiGraph
Node = tuple[str, ...]


# constructors
def network(rxns: Sequence[PDepReaction]) -> Network:
    """Build a network of isomers connected by pressure-dependent reactions.

    :param rxns: The reactions
    :return: The network
    """
    net = Network()
    for rxn in rxns:
        rct, prd = rxn.reactant, rxn.product
        for isom in (rct, prd):
            net.add_node(node(isom), **{Key.unimolecular: isom.is_unimolecular()})

        net.add_edge(
            node(rct),
            node(prd),
            **{
                Key.reaction: rxn,
                Key.type_: pdep.type_(rxn),
                Key.is_net: pdep.is_net_reaction(rxn),
            },
        )
    return net


def node(isom: isom_.Isomer) -> Node:
    """Get the network node for an isomer.

    :param isom: An isomer
    :return: The node, as a sorted tuple of species names
    """
    return tuple(sorted(isom_.species_names(isom)))


# getters
def reactions(net: Network) -> list[PDepReaction]:
    """Get the reactions in a network.

    :param net: A network
    :return: The reactions
    """
    return [d[Key.reaction] for *_, d in net.edges.data()]


def isomer_nodes(net: Network, unimolecular: bool | None = None) -> list[Node]:
    """Get the isomer nodes of a network.

    :param net: A network
    :param unimolecular: Optionally, select only uni- or multimolecular isomers
    :return: The nodes
    """
    return [
        n
        for n, d in net.nodes.data()
        if unimolecular is None or d[Key.unimolecular] == unimolecular
    ]


# selections
def unique_reactions(rxns: Sequence[PDepReaction]) -> list[PDepReaction]:
    """Drop reactions that connect the same isomers as an earlier reaction.

    :param rxns: The reactions
    :return: The unique reactions
    """
    uniq_rxns = []
    for rxn in rxns:
        if rxn not in uniq_rxns:
            uniq_rxns.append(rxn)
    return uniq_rxns


def core_reactions(
    rxns: Sequence[PDepReaction], model: NetworkPartition
) -> list[PDepReaction]:
    """Select the core reactions.

    :param rxns: The reactions
    :param model: The current core/edge partition
    :return: The core reactions
    """
    return [r for r in rxns if pdep.is_core_reaction(r, model)]


def edge_reactions(
    rxns: Sequence[PDepReaction], model: NetworkPartition
) -> list[PDepReaction]:
    """Select the edge reactions.

    :param rxns: The reactions
    :param model: The current core/edge partition
    :return: The edge reactions
    """
    return [r for r in rxns if pdep.is_edge_reaction(r, model)]


# transformations
def ensure_reverses(rxns: Sequence[PDepReaction]) -> list[PDepReaction]:
    """Pair every reaction with its reverse.

    :param rxns: The reactions
    :return: The reverse reactions, in the same order
    """
    return [pdep.ensure_reverse(r) for r in rxns]


# fluxes
def max_edge_flux(
    rxns: Sequence[PDepReaction], model: NetworkPartition, snap: SystemSnapshot
) -> tuple[PDepReaction | None, float]:
    """Find the edge reaction with the largest forward flux.

    :param rxns: The reactions
    :param model: The current core/edge partition
    :param snap: The system snapshot
    :return: The edge reaction and its flux, or `None` and 0.0 if there are no edge
        reactions
    """
    fluxes = [(r, pdep.forward_flux(r, snap)) for r in edge_reactions(rxns, model)]
    return max(fluxes, key=lambda x: x[1], default=(None, 0.0))
