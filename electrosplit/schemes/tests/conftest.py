from numpy import array
from pytest import fixture


@fixture
def charges():
    """Charges of particle A and B."""
    return 2.0, 3.0


@fixture
def dipoles():
    """Dipole moments of particle A and B."""
    return array([19.0, 7.0, 11.0]), array([13.0, 17.0, 5.0])


@fixture
def r_vec():
    """Distance-vector inside the cut-off of 29."""
    return array([23.0, 0.0, 0.0])


@fixture
def r_out():
    """Distance-vector outside the cut-off of 29."""
    return array([30.0, 0.0, 0.0])
