"""Test pdepnet.isomer functions."""

import pytest

from pdepnet import isomer
from pdepnet.data.spc import Species
from pdepnet.data.thermo import Thermo
from pdepnet.isomer import Isomer


@pytest.mark.parametrize(
    "names, uni, multi, ref_str",
    [
        (["C3H7"], True, False, "C3H7"),
        (["C3H6", "H"], False, True, "C3H6 + H"),
        (["CH3", "CH3"], False, True, "CH3 + CH3"),
    ],
)
def test__molecularity(names, uni, multi, ref_str):
    """Test pdepnet.isomer.Isomer molecularity."""
    isom = Isomer(names)
    assert isom.is_unimolecular() == uni
    assert isom.is_multimolecular() == multi
    assert isomer.species_count(isom) == len(names)
    assert isomer.species_names(isom) == tuple(names)
    assert str(isom) == ref_str


def test__eq():
    """Test pdepnet.isomer.Isomer equality."""
    assert Isomer(["A", "B"]) == Isomer(["B", "A"])
    assert hash(Isomer(["A", "B"])) == hash(Isomer(["B", "A"]))
    assert Isomer(["A", "A"]) != Isomer(["A"])
    assert Isomer(["A"]) == Isomer([Species("A")])
    assert len({Isomer(["A", "B"]), Isomer(["B", "A"]), Isomer(["C"])}) == 2

    # Species are identified by name, whether or not they carry thermo
    spc_a = Species("A", Thermo(h=0.0, s=1.0))
    assert Isomer([spc_a, "B"]) == Isomer(["B", "A"])
    assert hash(Isomer([spc_a, "B"])) == hash(Isomer(["B", "A"]))


def test__from_data():
    """Test pdepnet.isomer.from_data."""
    isom = Isomer(["A"])
    assert isomer.from_data(isom) is isom
    assert isomer.from_data("A") == isom
    assert isomer.from_data(Species("A")) == isom

    with pytest.raises(AssertionError):
        Isomer([])
