"""Test pdepnet.state functions."""

import pydantic
import pytest

from pdepnet import state
from pdepnet.data.spc import Species


def test__snapshot():
    """Test pdepnet.state.snapshot."""
    snap = state.snapshot(
        temperature="1000 K",
        pressure="1 atm",
        concentrations={Species("A"): 1.5, "B": 0.0},
    )
    assert snap.temperature == pytest.approx(1000.0)
    assert snap.pressure == pytest.approx(101325.0)
    assert snap.concentration("A") == 1.5
    assert snap.concentration(Species("B")) == 0.0
    assert snap.concentration("C") is None


@pytest.mark.parametrize(
    "temperature, pressure",
    [
        (-300.0, 1e5),
        (300.0, 0.0),
    ],
)
def test__snapshot__invalid(temperature, pressure):
    """Test pdepnet.state.snapshot with invalid conditions."""
    with pytest.raises(pydantic.ValidationError):
        state.snapshot(temperature=temperature, pressure=pressure)


def test__core_edge_model():
    """Test pdepnet.state.CoreEdgeModel."""
    model = state.core_edge_model(core=[Species("A")], edge=["B"])
    assert model.contains_as_reacted_species("A")
    assert not model.contains_as_unreacted_species("A")
    assert model.contains_as_unreacted_species(Species("B"))

    model.add_unreacted_species("C")
    model.add_unreacted_species("A")
    assert model.edge == {"B", "C"}

    model.add_reacted_species("B")
    assert model.core == {"A", "B"}
    assert model.edge == {"C"}

    with pytest.raises(AssertionError):
        state.core_edge_model(core=["A"], edge=["A"])
