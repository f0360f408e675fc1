from numpy import array, isclose, linspace

from ..fanourgakis import Fanourgakis
from ..poisson import Poisson

from pytest import mark


def test_fanourgakis_splitting():
    pot = Fanourgakis(cutoff=29.0)

    assert isclose(pot.splitting_function(0.5), (0.19921875, -1.1484375, 3.28125, 6.5625)).all()
    assert isclose(pot.splitting_function(1.0), (0.0, 0.0, 0.0, 0.0)).all()
    assert isclose(pot.splitting_function(0.0), (1.0, -1.75, 0.0, 0.0)).all()


@mark.parametrize("q", linspace(0.0, 1.0, 11))
def test_fanourgakis_equals_poisson(q):
    """Test that Fanourgakis is the Poisson scheme with C = 4 and D = 3."""
    pot = Fanourgakis(cutoff=29.0)
    ref = Poisson(cutoff=29.0, C=4, D=3)

    assert isclose(pot.splitting_function(q), ref.splitting_function(q), atol=1e-12).all()


def test_fanourgakis_observables(charges, dipoles, r_vec):
    pot = Fanourgakis(cutoff=29.0)
    zA, zB = charges
    muA, muB = dipoles

    assert isclose(pot.ion_potential(zA, 23.0), 0.0009430652121)
    assert isclose(pot.dipole_potential(muA, r_vec), 0.005750206554)
    assert isclose(pot.ion_dipole_energy(zA, muB, r_vec), -0.007868703705)
    assert isclose(pot.dipole_dipole_energy(muA, muB, r_vec), -0.03284312288)
    assert isclose(
        pot.dipole_dipole_force(muA, muB, r_vec), array([0.009216400961, -0.002797126801, -0.001608010094])
    ).all()


def test_fanourgakis_attributes():
    pot = Fanourgakis(cutoff=29.0)

    assert pot.scheme_type == "fanourgakis"
    assert pot.to_dict() == {"type": "fanourgakis", "name": "fanourgakis", "doi": "10.1063/1.3216520", "cutoff": 29.0}
    assert isclose(pot.T0, 1.0)
