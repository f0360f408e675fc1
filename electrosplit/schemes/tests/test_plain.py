from numpy import array, dot, isclose, linalg, sqrt, zeros

from ..plain import Plain, plain_splitting

from pytest import mark


def test_plain_splitting():
    """Test that the plain splitting function is one everywhere."""
    for q in [0.0, 0.5, 1.0, 3.0]:
        assert plain_splitting(q, array([0.0])) == (1.0, 0.0, 0.0, 0.0)


def test_plain_attributes():
    pot = Plain()

    assert pot.scheme_type == "plain"
    assert pot.inv_cutoff == 0.0
    assert pot.kappa == 0.0
    assert pot.debye_length is None
    assert pot.T0 == 0.0
    assert pot.self_energy([4.0, 9.0]) == 0.0


def test_plain_potentials(charges, dipoles, r_vec, r_out):
    """Test the potentials and fields of the plain Coulomb interaction."""
    pot = Plain()
    zA, _ = charges
    muA, _ = dipoles

    assert isclose(pot.ion_potential(zA, 30.0), 0.06666666667)
    assert isclose(pot.ion_potential(zA, 23.0), 0.08695652174)
    assert isclose(pot.dipole_potential(muA, r_out), 0.02111111111)
    assert isclose(pot.dipole_potential(muA, r_vec), 0.03591682420)

    assert isclose(linalg.norm(pot.ion_field(zA, r_out)), 0.002222222222)
    assert isclose(pot.ion_field(zA, r_vec)[0], 0.003780718336)
    assert isclose(linalg.norm(pot.dipole_field(muA, r_out)), 0.001487948846)
    assert isclose(pot.dipole_field(muA, r_vec), array([0.003123202104, -0.0005753267034, -0.0009040848196])).all()


def test_plain_energies(charges, dipoles, r_vec, r_out):
    pot = Plain()
    zA, zB = charges
    muA, muB = dipoles

    assert isclose(pot.ion_ion_energy(zA, zB, 30.0), 0.2)
    assert isclose(pot.ion_ion_energy(zA, zB, 23.0), 0.2608695652)
    assert isclose(pot.ion_dipole_energy(zA, muB, r_out), -0.02888888889)
    assert isclose(pot.ion_dipole_energy(zA, muB, r_vec), -0.04914933837)
    assert isclose(pot.dipole_dipole_energy(muA, muB, r_out), -0.01185185185)
    assert isclose(pot.dipole_dipole_energy(muA, muB, r_vec), -0.02630064930)


def test_plain_forces(charges, dipoles, r_vec, r_out):
    pot = Plain()
    zA, zB = charges
    muA, muB = dipoles

    assert isclose(linalg.norm(pot.ion_ion_force(zA, zB, r_out)), 0.006666666667)
    assert isclose(pot.ion_ion_force(zA, zB, r_vec)[0], 0.01134215501)
    assert isclose(linalg.norm(pot.ion_dipole_force(zB, muA, r_out)), 0.004463846540)
    assert isclose(
        pot.ion_dipole_force(zB, muA, r_vec), array([0.009369606312, -0.001725980110, -0.002712254459])
    ).all()
    assert isclose(linalg.norm(pot.dipole_dipole_force(muA, muB, r_out)), 0.002129033733)
    assert isclose(
        pot.dipole_dipole_force(muA, muB, r_vec), array([0.003430519474, -0.004438234569, -0.002551448858])
    ).all()


def test_plain_two_charges_dipole(dipoles, r_vec):
    """Test that two close opposite charges reproduce the potential and field of a dipole."""
    pot = Plain()
    muA, _ = dipoles
    d = 1e-3
    shift = 0.5 * d * muA
    z = 1.0 / d

    phi = pot.ion_potential(z, linalg.norm(r_vec - shift)) + pot.ion_potential(-z, linalg.norm(r_vec + shift))
    field = pot.ion_field(z, r_vec - shift) + pot.ion_field(-z, r_vec + shift)

    assert isclose(phi, pot.dipole_potential(muA, r_vec), rtol=1e-5)
    assert isclose(field, pot.dipole_field(muA, r_vec), rtol=1e-4).all()


def test_plain_four_charges_dipole_dipole(dipoles, r_vec):
    """Test that two pairs of close opposite charges reproduce the dipole-dipole energy."""
    pot = Plain()
    muA, muB = dipoles
    d = 1e-3
    z = 1.0 / d
    # Charges and positions of dipole A at the origin and dipole B at r_vec
    charges_A = [(z, 0.5 * d * muA), (-z, -0.5 * d * muA)]
    charges_B = [(z, r_vec + 0.5 * d * muB), (-z, r_vec - 0.5 * d * muB)]

    energy = 0.0
    for zA, posA in charges_A:
        for zB, posB in charges_B:
            energy += pot.ion_ion_energy(zA, zB, sqrt(dot(posB - posA, posB - posA)))

    assert isclose(energy, pot.dipole_dipole_energy(muA, muB, r_vec), rtol=1e-4)


def test_plain_yukawa(charges, dipoles, r_vec, r_out):
    """Test the plain scheme with a Debye length, i.e. the Yukawa interaction."""
    pot = Plain(debye_length=23.0)
    zA, _ = charges
    muA, muB = dipoles

    assert isclose(pot.kappa, 1.0 / 23.0)
    assert isclose(pot.ion_potential(zA, 30.0), 0.01808996296)
    assert isclose(pot.ion_potential(zA, 23.0), 0.03198951663)
    assert isclose(pot.dipole_potential(muA, r_out), 0.01320042949)
    assert isclose(pot.dipole_potential(muA, r_vec), 0.02642612243)

    assert isclose(linalg.norm(pot.ion_field(zA, r_out)), 0.001389518894)
    assert isclose(linalg.norm(pot.ion_field(zA, r_vec)), 0.002781697098)
    assert isclose(linalg.norm(pot.dipole_field(muA, r_out)), 0.001242154748)
    assert isclose(pot.dipole_field(muA, r_vec), array([0.002872404612, -0.0004233017324, -0.0006651884364])).all()

    assert isclose(linalg.norm(pot.dipole_dipole_force(muA, muB, r_out)), 0.001859094075)
    assert isclose(
        pot.dipole_dipole_force(muA, muB, r_vec), array([0.003594120919, -0.003809715590, -0.002190126354])
    ).all()


@mark.parametrize("debye_length", [None, float("inf")], ids=["none", "inf"])
def test_plain_no_screening(debye_length):
    """Test that an infinite Debye length means no screening."""
    pot = Plain(debye_length=debye_length)

    assert pot.debye_length is None
    assert pot.kappa == 0.0
    assert "debye_length" not in pot.to_dict()

def test_plain_four_charges_dipole_dipole_force(dipoles, r_vec):
    """Test that two pairs of close opposite charges reproduce the dipole-dipole force."""
    pot = Plain()
    muA, muB = dipoles
    d = 1e-3
    z = 1.0 / d
    charges_A = [(z, 0.5 * d * muA), (-z, -0.5 * d * muA)]
    charges_B = [(z, r_vec + 0.5 * d * muB), (-z, r_vec - 0.5 * d * muB)]

    # Force on dipole B
    force = zeros(3)
    for zA, posA in charges_A:
        for zB, posB in charges_B:
            force += pot.ion_ion_force(zA, zB, posB - posA)

    # dipole_dipole_force is the force on dipole A
    assert isclose(force, -pot.dipole_dipole_force(muA, muB, r_vec), rtol=1e-4).all()
