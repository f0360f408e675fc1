r"""
Module for handling the Poisson family of schemes.

Splitting function
******************

The Poisson scheme cancels :math:`C` derivatives at the origin (starting from the second derivative) and :math:`D`
derivatives at the cut-off (starting from the zeroth derivative)

.. math::
   s(q) = (1 - q)^{D + 1} \sum_{c = 0}^{C - 1} \binom{D - 1 + c}{c} \frac{C - c}{C} q^c.

For a finite Debye length the exact Yukawa screening is recovered, while keeping the cancellation at :math:`q = 1`,
by replacing :math:`q` with

.. math::
   \tilde q(q) = \frac{1 - e^{2 \tilde \kappa q}}{1 - e^{2 \tilde \kappa}}

where :math:`\tilde \kappa = R_c / \lambda_D`. The derivatives with respect to :math:`q` then follow from the
chain rule up to third order.

Depending on :math:`C` and :math:`D` the scheme reproduces several known pair-potentials (infinite Debye length)

=============== ===== ===== ===================================================
Type             `C`   `D`   Reference / Comment
=============== ===== ===== ===================================================
`plain`          1     -1    Plain Coulomb
`wolf`           1     0     Undamped Wolf, DOI: 10.1063/1.478738
`fennell`        1     1     Levitt / undamped Fennell, DOI: 10.1063/1.2206581
`kale`           1     2     Kale, DOI: 10.1021/ct200392u
`mccann`         1     3     McCann, DOI: 10.1021/ct300961
`fukuda`         2     1     Undamped Fukuda, DOI: 10.1063/1.3582791
`markland`       2     2     Markland, DOI: 10.1016/j.cplett.2008.09.019
`stenqvist`      3     3     Stenqvist, DOI: 10.1088/1367-2630/ab1ec1
`fanourgakis`    4     3     Fanourgakis, DOI: 10.1063/1.3216520
=============== ===== ===== ===================================================

Scheme Attributes
*****************

The elements of :attr:`split_params` are:

.. code-block::

    split_params[0] : C
    split_params[1] : D
    split_params[2] : reduced inverse Debye length cutoff / debye_length
    split_params[3] : 1 / (1 - exp(2 * split_params[2]))
    split_params[4] : 1.0 if the Yukawa substitution is on, 0.0 otherwise
    split_params[5:5 + C] : polynomial coefficients binom(D - 1 + c, c) * (C - c) / C

"""
from numba import jit
from numba.core.types import float64, UniTuple
from numpy import array, exp, fabs

from ..utilities.exceptions import InvalidParameterError
from ..utilities.maths import binomial
from .interaction import PairInteraction


@jit(UniTuple(float64, 4)(float64, float64[:]), nopython=True)
def poisson_splitting(q, split_params):
    """
    Numba'd function to calculate the Poisson splitting function and its first three derivatives.

    Parameters
    ----------
    q : float
        Reduced distance.

    split_params : numpy.ndarray
        See module documentation.

    Returns
    -------
    _ : tuple
        Splitting function and its first three derivatives.

    Examples
    --------
    >>> import numpy as np
    >>> split_params = np.array([3.0, 3.0, 0.0, 0.0, 0.0, 1.0, 2.0, 2.0])
    >>> poisson_splitting(0.5, split_params)
    (0.15625, -1.0, 3.75, 0.0)

    """
    C = int(split_params[0])
    D = int(split_params[1])
    kappa_red = split_params[2]
    yukawa_denom = split_params[3]

    # Derivatives of the substituted distance
    qp = q
    dqp = 1.0
    d2qp = 0.0
    d3qp = 0.0
    if split_params[4] > 0.5:
        exp2kq = exp(2.0 * kappa_red * q)
        qp = (1.0 - exp2kq) * yukawa_denom
        dqp = -2.0 * kappa_red * exp2kq * yukawa_denom
        d2qp = 2.0 * kappa_red * dqp
        d3qp = 2.0 * kappa_red * d2qp

    # Polynomial sum and its derivatives
    pol = 0.0
    pol1 = 0.0
    pol2 = 0.0
    pol3 = 0.0
    for c in range(C):
        coeff = split_params[5 + c]
        pol += coeff * qp**c
        if c >= 1:
            pol1 += coeff * c * qp ** (c - 1)
        if c >= 2:
            pol2 += coeff * c * (c - 1) * qp ** (c - 2)
        if c >= 3:
            pol3 += coeff * c * (c - 1) * (c - 2) * qp ** (c - 3)

    # (1 - qp)^(D + 1) and its derivatives
    m = D + 1
    one_minus_qp = 1.0 - qp
    t0 = one_minus_qp**m
    t1 = 0.0
    t2 = 0.0
    t3 = 0.0
    if m >= 1:
        t1 = -m * one_minus_qp ** (m - 1)
    if m >= 2:
        t2 = m * (m - 1) * one_minus_qp ** (m - 2)
    if m >= 3:
        t3 = -m * (m - 1) * (m - 2) * one_minus_qp ** (m - 3)

    # Derivatives with respect to qp
    s0 = t0 * pol
    s1 = t1 * pol + t0 * pol1
    s2 = t2 * pol + 2.0 * t1 * pol1 + t0 * pol2
    s3 = t3 * pol + 3.0 * t2 * pol1 + 3.0 * t1 * pol2 + t0 * pol3

    # Chain rule
    srf = s0
    dsrf = s1 * dqp
    ddsrf = s2 * dqp * dqp + s1 * d2qp
    dddsrf = s3 * dqp * dqp * dqp + 3.0 * s2 * dqp * d2qp + s1 * d3qp

    return srf, dsrf, ddsrf, dddsrf


class Poisson(PairInteraction):
    """
    Poisson scheme, also valid for Yukawa interactions.

    Parameters
    ----------
    cutoff : float
        Cut-off distance.

    C : int
        Number of cancelled derivatives at the origin, starting from the second derivative. `C >= 1`.

    D : int
        Number of cancelled derivatives at the cut-off, starting from the zeroth derivative. `D >= -1`.

    debye_length : float, optional
        Debye length. Default = `None`, i.e. no screening.

    Raises
    ------
    InvalidParameterError
        If `C < 1` or `D < -1`.

    """

    def __init__(self, cutoff: float, C: int, D: int, debye_length: float = None):
        super().__init__("poisson", cutoff, debye_length)

        if int(C) != C or int(D) != D:
            raise InvalidParameterError(f"`C` and `D` must be integers. C = {C}, D = {D}")
        if C < 1 or D < -1:
            raise InvalidParameterError(
                f"`C` must be larger than zero and `D` must be larger or equal to negative one. C = {C}, D = {D}"
            )

        self.name = "poisson"
        self.doi = "10.1088/1367-2630/ab1ec1"
        self.C = int(C)
        self.D = int(D)

        a1 = -(self.C + self.D) / self.C
        kappa_red = self.cutoff * self.kappa
        yukawa = fabs(kappa_red) > 1e-6
        yukawa_denom = 0.0
        if yukawa:
            yukawa_denom = 1.0 / (1.0 - exp(2.0 * kappa_red))
            a1 *= -2.0 * kappa_red * yukawa_denom

        coeffs = [binomial(self.D - 1 + c, c) * (self.C - c) / self.C for c in range(self.C)]
        self.split_params = array([self.C, self.D, kappa_red, yukawa_denom, float(yukawa)] + coeffs, dtype=float)
        self.kernel = poisson_splitting
        self.self_energy_prefactor = array([a1, a1])
        # TODO: check whether T0 = s'(1) - s(1) + s(0) still holds with the Yukawa substitution.
        self.T0 = self.calc_T0()

    def shape_parameters(self) -> dict:
        return {"C": self.C, "D": self.D}


class PoissonSimple(Poisson):
    """
    Poisson scheme without screening.

    Parameters
    ----------
    cutoff : float
        Cut-off distance.

    C : int
        Number of cancelled derivatives at the origin, starting from the second derivative. `C >= 1`.

    D : int
        Number of cancelled derivatives at the cut-off, starting from the zeroth derivative. `D >= -1`.

    """

    def __init__(self, cutoff: float, C: int, D: int):
        super().__init__(cutoff, C, D)
        self.scheme_type = "poisson_simple"
        self.name = "poisson simple"
