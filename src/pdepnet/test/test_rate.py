"""Test pdepnet.data.rate functions."""

import numpy
import pytest

from pdepnet.data import rate as rt_
from pdepnet.data.rate import ArrheniusFunction, ChebRate, SimpleRate

T_LIMITS = (300.0, 2000.0)
P_LIMITS = (0.01, 100.0)
CHEB_CONST = ChebRate(t_limits=T_LIMITS, p_limits=P_LIMITS, coeffs=[[2.0]])
CHEB_2X2 = ChebRate(
    t_limits=T_LIMITS, p_limits=P_LIMITS, coeffs=[[1.0, 0.25], [0.5, 0.0]]
)


@pytest.mark.parametrize(
    "k, t, ref_val",
    [
        (ArrheniusFunction(A=2.0, b=1.0, E=0.0), 300.0, 600.0),
        (ArrheniusFunction(A=1e10, b=0.0, E=rt_.R_GAS * 1000.0), 1000.0, 1e10 / numpy.e),
        (ArrheniusFunction(A=5.0, b=-1.0, E=0.0), 500.0, 0.01),
    ],
)
def test__arrhenius_rate_constant(k, t, ref_val):
    """Test pdepnet.data.rate.arrhenius_rate_constant."""
    val = rt_.arrhenius_rate_constant(k, t)
    assert val == pytest.approx(ref_val), f"{val} != {ref_val}"


@pytest.mark.parametrize(
    "rate, t, p_atm, ref_log_k",
    [
        (CHEB_CONST, 300.0, 0.01, 2.0),
        (CHEB_CONST, 1000.0, 1.0, 2.0),
        (CHEB_2X2, 2000.0, 100.0, 1.75),
        (CHEB_2X2, 2000.0, 0.01, 1.25),
        (CHEB_2X2, 300.0, 100.0, 0.75),
    ],
)
def test__chebyshev_rate_constant(rate, t, p_atm, ref_log_k):
    """Test pdepnet.data.rate.chebyshev_rate_constant."""
    val = rt_.chebyshev_rate_constant(rate, t, p_atm * rt_.PA_PER_ATM)
    assert numpy.log10(val) == pytest.approx(ref_log_k), f"{val}"


def test__rate_constant():
    """Test pdepnet.data.rate.rate_constant."""
    k = ArrheniusFunction(A=7.0, b=0.0, E=0.0)
    cheb = ChebRate(t_limits=T_LIMITS, p_limits=P_LIMITS, coeffs=[[2.0]], k=k)

    # A Chebyshev fit takes precedence over its high-pressure rate
    for t, p in [(500.0, 1e3), (1500.0, 1e6)]:
        assert rt_.rate_constant(cheb, t, p) == pytest.approx(100.0)

    # A simple rate ignores the pressure
    simple = SimpleRate(k=k)
    assert rt_.rate_constant(simple, 500.0, 1e3) == rt_.rate_constant(simple, 500.0)

    # A missing rate is zero
    assert rt_.rate_constant(None, 500.0, 1e3) == 0.0


@pytest.mark.parametrize(
    "dh, ds, dn",
    [
        (-1.0e5, -50.0, -1),
        (2.5e4, 10.0, 0),
        (3.0e5, 120.0, 1),
    ],
)
def test__reverse_arrhenius_function(dh, ds, dn):
    """Test pdepnet.data.rate.reverse_arrhenius_function."""
    k = ArrheniusFunction(A=1e8, b=0.5, E=4.0e4)
    k_r = rt_.reverse_arrhenius_function(k, dh=dh, ds=ds, dn=dn)
    for t in (300.0, 1000.0, 2000.0):
        kc = numpy.exp(ds / rt_.R_GAS - dh / (rt_.R_GAS * t))
        kc *= (rt_.P_STANDARD / (rt_.R_GAS * t)) ** dn
        ratio = rt_.arrhenius_rate_constant(k, t) / rt_.arrhenius_rate_constant(k_r, t)
        assert ratio == pytest.approx(kc, rel=1e-9), f"{ratio} != {kc}"


@pytest.mark.parametrize(
    "t_limits, p_limits",
    [
        ((300.0, 300.0), (0.01, 100.0)),
        ((300.0, 2000.0), (1.0, 1.0)),
        ((2000.0, 300.0), (0.01, 100.0)),
        ((300.0, 2000.0), (100.0, 0.01)),
        ((0.0, 2000.0), (0.01, 100.0)),
        ((300.0, 2000.0), (0.0, 100.0)),
    ],
)
def test__chebyshev_limits(t_limits, p_limits):
    """Test pdepnet.data.rate.ChebRate with degenerate or reversed limits."""
    with pytest.raises(AssertionError):
        ChebRate(t_limits=t_limits, p_limits=p_limits, coeffs=[[2.0]])


def test__from_data():
    """Test pdepnet.data.rate.from_data."""
    simple = rt_.from_data(k=(1, 0, 0))
    assert isinstance(simple, SimpleRate)
    assert rt_.arrhenius_params(simple.k) == (1.0, 0.0, 0.0)
    assert rt_.is_reversible(simple)
    assert rt_.type_(simple) == rt_.RateType.CONSTANT

    cheb = rt_.from_data(coeffs=[[1.0, 0.0], [0.0, 0.0]])
    assert isinstance(cheb, ChebRate)
    assert cheb.t_limits == rt_.DEFAULT_CHEB_T_LIMITS
    assert cheb.p_limits == rt_.DEFAULT_CHEB_P_LIMITS

    with pytest.raises(AssertionError):
        rt_.from_data(t_limits=T_LIMITS, coeffs=[1.0, 2.0])


def test__chemkin_string():
    """Test pdepnet.data.rate.chemkin_string."""
    rate_str = rt_.chemkin_string(CHEB_2X2)
    print(rate_str)
    lines = rate_str.splitlines()
    keys = [line.split()[0] for line in lines[1:]]
    assert keys == ["TCHEB", "PCHEB", "CHEB", "CHEB"]
    assert lines[3].split("/")[1].split() == ["2", "2"]

    rate_str = rt_.chemkin_string(SimpleRate(k=(1.5e13, 0.0, 1000.0)))
    assert rate_str.split() == ["1.500E+13", "0.000", "1000"]
