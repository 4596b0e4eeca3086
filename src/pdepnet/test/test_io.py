"""Test pdepnet.io functions."""

from pathlib import Path

import pdepnet
from pdepnet import pdep
from pdepnet.data.rate import ArrheniusFunction, ChebRate

RXNS = [
    pdep.from_kinetics(["C3H7"], ["C3H6", "H"], ArrheniusFunction(1e13, 0.0, 1.5e5)),
    pdep.from_chebyshev(
        ["CH3", "C2H4"],
        ["C3H7"],
        ChebRate(
            t_limits=(300, 2000),
            p_limits=(0.01, 100),
            coeffs=[[8.0, 0.5, -0.1], [-1.2, 0.3, 0.05]],
        ),
    ),
    pdepnet.PDepReaction(reactant=["C3H7"], product=["iC3H7"]),
]


def test__chemkin(tmp_path: Path):
    """Test pdepnet.io.chemkin.write.reactions_block."""
    out = tmp_path / "pdep.inp"
    block_str = pdepnet.io.chemkin.write.reactions_block(RXNS, 1000.0, out=out)
    print(block_str)
    lines = block_str.splitlines()
    assert lines[0] == "REACTIONS    JOULES/MOLE   MOLES"
    assert lines[-1] == "END"
    assert "CH3+C2H4(+m)=C3H7(+m)\t1.0E0 0.0 0.0" in lines
    assert sum(line.strip().startswith("CHEB") for line in lines) == 3
    assert any(line.startswith("C3H7 = C3H6 + H") for line in lines)
    assert "iC3H7" not in block_str
    assert out.read_text() == block_str

    body = pdepnet.io.chemkin.write.reactions_block(RXNS, 1000.0, frame=False)
    assert "REACTIONS" not in body and "END" not in body
