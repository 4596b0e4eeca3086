"""Functions for writing CHEMKIN-formatted files."""

from collections.abc import Sequence
from pathlib import Path

from ... import pdep
from ...pdep import PDepReaction


class KeyWord:
    # Blocks
    REACTIONS = "REACTIONS"
    END = "END"
    # Units
    JOULES_MOLE = "JOULES/MOLE"
    MOLES = "MOLES"


def reactions_block(
    rxns: Sequence[PDepReaction],
    temperature: float,
    out: str | Path | None = None,
    frame: bool = True,
) -> str:
    """Write pressure-dependent reactions to a CHEMKIN reactions block.

    Reactions without a rate are skipped.

    :param rxns: The reactions
    :param temperature: The temperature for annotating path reaction rates [K]
    :param out: Optionally, write the output to this file path
    :param frame: Whether to frame the block with its header and footer
    :return: The reactions block string
    """
    rxn_strs = [pdep.chemkin_string(r, temperature) for r in rxns]
    rxn_strs = [s.rstrip("\n") for s in rxn_strs if s]
    header = f"   {KeyWord.JOULES_MOLE}   {KeyWord.MOLES}"
    block_str = block(KeyWord.REACTIONS, rxn_strs, header=header, frame=frame)
    if out is not None:
        out: Path = Path(out)
        out.write_text(block_str)

    return block_str


def block(key, val, header: str | None = None, frame: bool = True) -> str:
    """Write a block to a string.

    :param key: The starting key for the block
    :param val: The block value(s)
    :param header: A header for the block
    :param frame: Whether to frame the block with its header and footer
    :return: The block
    """
    start = key if header is None else f"{key} {header}"
    val = val if isinstance(val, str) else "\n".join(val)
    if not frame:
        return val
    return "\n\n".join([start, val, KeyWord.END])
