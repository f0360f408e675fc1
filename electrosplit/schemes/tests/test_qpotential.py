from numpy import isclose

from ...utilities.exceptions import InvalidParameterError
from ..qpotential import QPotential

from pytest import mark, raises


@mark.parametrize(
    "q,expected",
    [
        (0.5, (0.3076171875, -1.453125, 1.9140625, 17.25)),
        (1.0, (0.0, 0.0, 0.0, 0.0)),
        (0.0, (1.0, -1.0, -2.0, 0.0)),
    ],
    ids=["q-0.5", "q-1", "q-0"],
)
def test_qpotential_splitting(q, expected):
    """Test the q-potential splitting function of order 4 and its derivatives."""
    pot = QPotential(cutoff=29.0, order=4)

    assert isclose(pot.splitting_function(q), expected).all()


def test_qpotential_order_zero():
    """Test that order zero gives no truncation inside the cut-off."""
    pot = QPotential(cutoff=29.0, order=0)

    assert pot.splitting_function(0.5) == (1.0, 0.0, 0.0, 0.0)


def test_qpotential_attributes():
    pot = QPotential(cutoff=29.0, order=4)

    assert pot.shape_parameters() == {"order": 4}
    assert (pot.self_energy_prefactor == [-1.0, -1.0]).all()
    assert isclose(pot.T0, 1.0)
    assert "doi" not in pot.to_dict()


@mark.parametrize("order", [-1, 2.5])
def test_qpotential_invalid_order(order):
    with raises(InvalidParameterError):
        QPotential(cutoff=29.0, order=order)
