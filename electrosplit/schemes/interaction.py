r"""
Module implementing the interactions common to all the splitting schemes.

Every scheme truncates the bare Coulomb interaction through a short-range splitting function :math:`s(q)` of the
reduced distance :math:`q = r/R_c`, with :math:`s(0) = 1`. Optionally the interaction is screened by
:math:`e^{-\kappa r}` where :math:`\kappa` is the inverse Debye length. All the interactions are exactly zero for
:math:`r \geq R_c`.

A scheme only has to provide a numba kernel with the signature

.. code-block:: python

    kernel(q: float64, split_params: float64[:]) -> (s, ds, dds, ddds)

returning the splitting function and its first three derivatives, and the array of parameters it needs.
"""
from numpy import array, asarray, cross, dot, exp, float64, isinf, sqrt, zeros

from ..utilities.exceptions import DimensionMismatchError, InvalidParameterError
from .core import SchemeBase


class PairInteraction(SchemeBase):
    """
    Generic implementation of the potentials, fields, energies, and forces of a splitting scheme.

    Parameters
    ----------
    scheme_type : str
        Tag of the scheme.

    cutoff : float
        Cut-off distance. `numpy.inf` for no truncation.

    debye_length : float, optional
        Debye length. `None` (default) or `numpy.inf` for no screening.

    Attributes
    ----------
    inv_cutoff : float
        Inverse cut-off distance. Zero when there is no truncation.

    kernel : numba.core.registry.CPUDispatcher
        Numba'd function returning the splitting function and its first three derivatives.

    split_params : numpy.ndarray
        Parameters passed to :attr:`kernel`.

    """

    def __init__(self, scheme_type: str, cutoff: float, debye_length: float = None):

        if cutoff is None or not cutoff > 0.0:
            raise InvalidParameterError(f"The cut-off distance must be positive. cutoff = {cutoff}")

        if debye_length is not None:
            if not debye_length > 0.0:
                raise InvalidParameterError(f"The Debye length must be positive. debye_length = {debye_length}")
            if isinf(debye_length):
                debye_length = None

        self.scheme_type = scheme_type
        self.cutoff = float(cutoff)
        self.cutoff2 = self.cutoff * self.cutoff
        self.inv_cutoff = 0.0 if isinf(self.cutoff) else 1.0 / self.cutoff
        self.debye_length = debye_length
        self.kappa = 0.0 if debye_length is None else 1.0 / debye_length

        self.kernel = None
        self.split_params = array([0.0])
        self.self_energy_prefactor = zeros(2)
        self.T0 = 0.0

    def calc_T0(self):
        """
        Calculate the spatial Fourier transformed modified interaction tensor at :math:`k = 0`

        .. math::
            T_0 = s^{\\prime}(1) - s(1) + s(0).

        """
        s1, ds1, _, _ = self.splitting_function(1.0)
        s0 = self.splitting_function(0.0)[0]

        return ds1 - s1 + s0

    def splitting_function(self, q):
        """
        Splitting function and its first three derivatives.

        Parameters
        ----------
        q : float
            Reduced distance, :math:`q = r/R_c`.

        Returns
        -------
        _ : tuple
            :math:`s(q), s^{\\prime}(q), s^{\\prime\\prime}(q), s^{\\prime\\prime\\prime}(q)`.

        Raises
        ------
        InvalidParameterError
            If no splitting kernel has been assigned, e.g. for a bare :class:`PairInteraction`.

        """
        if self.kernel is None:
            raise InvalidParameterError(f"The '{self.scheme_type}' interaction has no splitting kernel.")

        return self.kernel(float(q), self.split_params)

    def short_range_function(self, q):
        """Splitting function :math:`s(q)`."""
        return self.splitting_function(q)[0]

    def short_range_function_derivative(self, q):
        """First derivative of the splitting function."""
        return self.splitting_function(q)[1]

    def short_range_function_second_derivative(self, q):
        """Second derivative of the splitting function."""
        return self.splitting_function(q)[2]

    def short_range_function_third_derivative(self, q):
        """Third derivative of the splitting function."""
        return self.splitting_function(q)[3]

    def ion_potential(self, z, r):
        r"""
        Potential from a charge.

        .. math::
            \Phi(z,r) = \frac{z}{r}s(q) e^{-\kappa r}

        Parameters
        ----------
        z : float
            Charge.

        r : float
            Distance from the charge.

        Returns
        -------
        _ : float
            Potential.

        """
        if r < self.cutoff:
            q = r * self.inv_cutoff
            srf = self.splitting_function(q)[0]
            return z / r * srf * exp(-self.kappa * r)
        else:
            return 0.0

    def dipole_potential(self, mu, r_vec):
        r"""
        Potential from a dipole.

        .. math::
            \Phi(\boldsymbol{\mu}, {\bf r}) = \frac{\boldsymbol{\mu} \cdot \hat{{\bf r}} }{|{\bf r}|^2}
            \left [ s(q)(1 + \kappa r) - qs^{\prime}(q) \right ] e^{-\kappa r}

        Parameters
        ----------
        mu : numpy.ndarray
            Dipole moment.

        r_vec : numpy.ndarray
            Distance-vector from the dipole.

        Returns
        -------
        _ : float
            Potential.

        """
        r_vec = asarray(r_vec, dtype=float64)
        r2 = dot(r_vec, r_vec)
        if r2 < self.cutoff2:
            r1 = sqrt(r2)
            q = r1 * self.inv_cutoff
            srf, dsrf, _, _ = self.splitting_function(q)
            return dot(mu, r_vec) / r2 / r1 * (srf * (1.0 + self.kappa * r1) - q * dsrf) * exp(-self.kappa * r1)
        else:
            return 0.0

    def ion_field(self, z, r_vec):
        r"""
        Field from a charge.

        .. math::
            {\bf E}(z, {\bf r}) = \frac{z \hat{{\bf r}} }{|{\bf r}|^2}
            \left [ s(q)(1 + \kappa r) - qs^{\prime}(q) \right ] e^{-\kappa r}

        Parameters
        ----------
        z : float
            Charge.

        r_vec : numpy.ndarray
            Distance-vector from the charge.

        Returns
        -------
        _ : numpy.ndarray
            Field.

        """
        r_vec = asarray(r_vec, dtype=float64)
        r2 = dot(r_vec, r_vec)
        if r2 < self.cutoff2:
            r1 = sqrt(r2)
            q = r1 * self.inv_cutoff
            srf, dsrf, _, _ = self.splitting_function(q)
            return z * r_vec / r2 / r1 * (srf * (1.0 + self.kappa * r1) - q * dsrf) * exp(-self.kappa * r1)
        else:
            return zeros(3)

    def dipole_field(self, mu, r_vec):
        r"""
        Field from a dipole.

        .. math::
            {\bf E}(\boldsymbol{\mu}, {\bf r}) = \left \{ \frac{3 ( \boldsymbol{\mu} \cdot \hat{{\bf r}} )
            \hat{{\bf r}} - \boldsymbol{\mu} }{|{\bf r}|^3} \left [ s(q) \left ( 1 + \kappa r + \frac{\kappa^2 r^2}{3}
            \right ) - qs^{\prime}(q) \left ( 1 + \frac{2}{3} \kappa r \right ) + \frac{q^2}{3}s^{\prime\prime}(q)
            \right ] + \frac{\boldsymbol{\mu}}{|{\bf r}|^3} \frac{ s(q) \kappa^2 r^2 - 2 \kappa r q s^{\prime}(q)
            + q^2 s^{\prime\prime}(q)}{3} \right \} e^{-\kappa r}

        Parameters
        ----------
        mu : numpy.ndarray
            Dipole moment.

        r_vec : numpy.ndarray
            Distance-vector from the dipole.

        Returns
        -------
        _ : numpy.ndarray
            Field.

        """
        mu = asarray(mu, dtype=float64)
        r_vec = asarray(r_vec, dtype=float64)
        r2 = dot(r_vec, r_vec)
        if r2 < self.cutoff2:
            r1 = sqrt(r2)
            r3 = r1 * r2
            q = r1 * self.inv_cutoff
            kappa = self.kappa
            srf, dsrf, ddsrf, _ = self.splitting_function(q)

            field_d = (3.0 * dot(mu, r_vec) * r_vec / r2 - mu) / r3
            field_d *= (
                srf * (1.0 + kappa * r1 + kappa * kappa * r2 / 3.0)
                - q * dsrf * (1.0 + 2.0 / 3.0 * kappa * r1)
                + q * q / 3.0 * ddsrf
            )
            field_i = mu / r3
            field_i *= (srf * kappa * kappa * r2 - 2.0 * kappa * r1 * q * dsrf + ddsrf * q * q) / 3.0

            return (field_d + field_i) * exp(-kappa * r1)
        else:
            return zeros(3)

    def ion_ion_energy(self, zA, zB, r):
        r"""
        Interaction energy between two charges

        .. math::
            u(z_A, z_B, r) = z_B \Phi(z_A,r).

        Parameters
        ----------
        zA : float
            Charge of particle A.

        zB : float
            Charge of particle B.

        r : float
            Distance between the charges.

        """
        return zB * self.ion_potential(zA, r)

    def ion_dipole_energy(self, z, mu, r_vec):
        r"""
        Interaction energy between a charge and a dipole

        .. math::
            u(z, \boldsymbol{\mu}, {\bf r}) = z \Phi(\boldsymbol{\mu}, -{\bf r})

        which equals :math:`-\boldsymbol{\mu} \cdot {\bf E}(z, {\bf r})`.

        Parameters
        ----------
        z : float
            Charge.

        mu : numpy.ndarray
            Dipole moment.

        r_vec : numpy.ndarray
            Distance-vector between dipole and charge, :math:`{\bf r} = {\bf r}_{\mu} - {\bf r}_z`.

        """
        return z * self.dipole_potential(mu, -asarray(r_vec, dtype=float64))

    def dipole_dipole_energy(self, muA, muB, r_vec):
        r"""
        Interaction energy between two dipoles

        .. math::
            u(\boldsymbol{\mu}_A, \boldsymbol{\mu}_B, {\bf r}) = -\boldsymbol{\mu}_A\cdot
            {\bf E}(\boldsymbol{\mu}_B, {\bf r})

        Parameters
        ----------
        muA : numpy.ndarray
            Dipole moment of particle A.

        muB : numpy.ndarray
            Dipole moment of particle B.

        r_vec : numpy.ndarray
            Distance-vector between the dipoles, :math:`{\bf r} = {\bf r}_{\mu_B} - {\bf r}_{\mu_A}`.

        """
        return -dot(muA, self.dipole_field(muB, r_vec))

    def ion_ion_force(self, zA, zB, r_vec):
        r"""
        Force between two charges, :math:`{\bf F} = z_B {\bf E}(z_A, {\bf r})`,
        with :math:`{\bf r} = {\bf r}_{z_B} - {\bf r}_{z_A}`.
        """
        return zB * self.ion_field(zA, r_vec)

    def ion_dipole_force(self, z, mu, r_vec):
        r"""
        Force between a charge and a dipole, :math:`{\bf F} = z {\bf E}(\boldsymbol{\mu}, {\bf r})`,
        with :math:`{\bf r} = {\bf r}_{\mu} - {\bf r}_z`.
        """
        return z * self.dipole_field(mu, r_vec)

    def dipole_dipole_force(self, muA, muB, r_vec):
        r"""
        Force between two dipoles.

        The force is split into a direct (D) and an indirect (I) contribution

        .. math::
            {\bf F}_D = 3\frac{ [5 (\boldsymbol{\mu}_A \cdot \hat{{\bf r}}) (\boldsymbol{\mu}_B \cdot \hat{{\bf r}})
            - \boldsymbol{\mu}_A \cdot \boldsymbol{\mu}_B ] \hat{{\bf r}}
            - (\boldsymbol{\mu}_B \cdot \hat{{\bf r}})\boldsymbol{\mu}_A
            - (\boldsymbol{\mu}_A \cdot \hat{{\bf r}})\boldsymbol{\mu}_B }{|{\bf r}|^4}, \quad
            {\bf F}_I = \frac{ (\boldsymbol{\mu}_A \cdot \hat{{\bf r}}) (\boldsymbol{\mu}_B \cdot \hat{{\bf r}})
            \hat{{\bf r}}}{|{\bf r}|^4}

        scaled by the same bracket of the dipole field and by

        .. math::
            s(q)(1 + \kappa r)\kappa^2 r^2 - q s^{\prime}(q)(3 \kappa r + 2)\kappa r
            + s^{\prime\prime}(q)(1 + 3\kappa r) q^2 - q^3 s^{\prime\prime\prime}(q)

        respectively.

        Parameters
        ----------
        muA : numpy.ndarray
            Dipole moment of particle A.

        muB : numpy.ndarray
            Dipole moment of particle B.

        r_vec : numpy.ndarray
            Distance-vector between the dipoles, :math:`{\bf r} = {\bf r}_{\mu_B} - {\bf r}_{\mu_A}`.

        Returns
        -------
        _ : numpy.ndarray
            Force on dipole A.

        """
        muA = asarray(muA, dtype=float64)
        muB = asarray(muB, dtype=float64)
        r_vec = asarray(r_vec, dtype=float64)
        r2 = dot(r_vec, r_vec)
        if r2 < self.cutoff2:
            r1 = sqrt(r2)
            rh = r_vec / r1
            q = r1 * self.inv_cutoff
            q2 = q * q
            r4 = r2 * r2
            kappa = self.kappa
            muA_dot_rh = dot(muA, rh)
            muB_dot_rh = dot(muB, rh)
            srf, dsrf, ddsrf, dddsrf = self.splitting_function(q)

            force_d = 3.0 * ((5.0 * muA_dot_rh * muB_dot_rh - dot(muA, muB)) * rh - muB_dot_rh * muA - muA_dot_rh * muB)
            force_d /= r4
            force_d *= (
                srf * (1.0 + kappa * r1 + kappa * kappa * r2 / 3.0)
                - q * dsrf * (1.0 + 2.0 / 3.0 * kappa * r1)
                + q2 / 3.0 * ddsrf
            )
            force_i = muA_dot_rh * muB_dot_rh * rh / r4
            force_i *= (
                srf * (1.0 + kappa * r1) * kappa * kappa * r2
                - q * dsrf * (3.0 * kappa * r1 + 2.0) * kappa * r1
                + ddsrf * (1.0 + 3.0 * kappa * r1) * q2
                - q2 * q * dddsrf
            )

            return (force_d + force_i) * exp(-kappa * r1)
        else:
            return zeros(3)

    @staticmethod
    def dipole_torque(mu, E):
        r"""Torque exerted on a dipole in a field, :math:`\boldsymbol{\tau} = \boldsymbol{\mu} \times {\bf E}`."""
        return cross(mu, E)

    def self_energy(self, moments):
        r"""
        Self-energy of a particle

        .. math::
            u_{\rm self} = p_0 \frac{z^2}{R_c} + p_1 \frac{|\boldsymbol{\mu}|^2}{R_c^3}

        where :math:`p_i` are the :attr:`self_energy_prefactor`.

        Parameters
        ----------
        moments : list, numpy.ndarray
            Squared moments, i.e. charge squared and dipole moment squared.

        Returns
        -------
        e_self : float
            Self-energy.

        Raises
        ------
        DimensionMismatchError
            If the length of `moments` differs from the length of :attr:`self_energy_prefactor`.

        """
        if len(moments) != len(self.self_energy_prefactor):
            raise DimensionMismatchError(
                f"Vectors of self energy prefactors (len = {len(self.self_energy_prefactor)}) "
                f"and squared moments (len = {len(moments)}) are not equal in size."
            )

        e_self = 0.0
        for i, (prefactor, m2) in enumerate(zip(self.self_energy_prefactor, moments)):
            e_self += prefactor * m2 * self.inv_cutoff ** (2 * i + 1)

        return e_self
