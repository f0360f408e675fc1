r"""
Module for handling the real-space part of the Ewald summation.

Splitting function
******************

The real-space Ewald splitting function, generalized to Yukawa screening, is

.. math::
   s(q) = \frac{1}{2} \left [ {\rm erfc}(\tilde \alpha q + \beta) e^{4 \tilde \alpha \beta q}
   + {\rm erfc}(\tilde \alpha q - \beta) \right ]

where :math:`\tilde \alpha = \alpha R_c` is the reduced damping parameter and :math:`\beta = \kappa / (2 \alpha)`.
Multiplied by :math:`e^{-\kappa r}/r` it gives the real-space Ewald potential of a screened charge. It reduces to
:math:`{\rm erfc}(\tilde \alpha q)` for :math:`\kappa = 0`.

The self-energy prefactors are

.. math::
   p_0 = -\frac{\tilde \alpha}{\sqrt{\pi}} \left ( e^{-\beta^2} + \sqrt{\pi} \beta \, {\rm erf}(\beta) \right ),
   \quad
   p_1 = -\frac{2 \tilde \alpha^3}{3 \sqrt{\pi}} \left ( 2 \sqrt{\pi} \beta^3 {\rm erfc}(\beta)
   + (1 - 2 \beta^2) e^{-\beta^2} \right ).

Scheme Attributes
*****************

The elements of :attr:`split_params` are:

.. code-block::

    split_params[0] : reduced damping parameter alpha * cutoff
    split_params[1] : beta = kappa / (2 alpha)

"""
from math import erfc
from numba import jit
from numba.core.types import float64, UniTuple
from numpy import array, exp, inf, isinf, pi, sqrt
from scipy.special import erf
from scipy.special import erfc as sp_erfc
from warnings import warn

from ..utilities.exceptions import InvalidParameterError, PhysicsWarning
from .interaction import PairInteraction


@jit(UniTuple(float64, 4)(float64, float64[:]), nopython=True)
def ewald_splitting(q, split_params):
    """
    Numba'd function to calculate the real-space Ewald splitting function and its first three derivatives.

    Parameters
    ----------
    q : float
        Reduced distance.

    split_params : numpy.ndarray
        Reduced damping parameter and :math:`\\beta`.

    Returns
    -------
    srf : float
        Splitting function.

    dsrf : float
        First derivative.

    ddsrf : float
        Second derivative.

    dddsrf : float
        Third derivative.

    Examples
    --------
    >>> import numpy as np
    >>> split_params = np.array([2.9, 0.0])
    >>> tuple(round(x, 6) for x in ewald_splitting(0.5, split_params))
    (0.040305, -0.399714, 3.361591, -21.5478)

    """
    a_red = split_params[0]
    beta = split_params[1]

    exp_c = exp(-((a_red * q - beta) ** 2))
    erfc_c = erfc(a_red * q + beta)
    exp_yuk = exp(4.0 * a_red * beta * q)

    srf = 0.5 * (erfc_c * exp_yuk + erfc(a_red * q - beta))
    dsrf = -2.0 * a_red / sqrt(pi) * exp_c + 2.0 * a_red * beta * erfc_c * exp_yuk
    ddsrf = 4.0 * a_red**2 / sqrt(pi) * (a_red * q - 2.0 * beta) * exp_c
    ddsrf += 8.0 * a_red**2 * beta**2 * erfc_c * exp_yuk
    dddsrf = (
        4.0
        * a_red**3
        / sqrt(pi)
        * (1.0 - 2.0 * (a_red * q - 2.0 * beta) * (a_red * q - beta) - 4.0 * beta**2)
        * exp_c
    )
    dddsrf += 32.0 * a_red**3 * beta**3 * erfc_c * exp_yuk

    return srf, dsrf, ddsrf, dddsrf


class Ewald(PairInteraction):
    """
    Ewald real-space scheme.

    Parameters
    ----------
    cutoff : float
        Cut-off distance.

    alpha : float
        Damping parameter.

    eps_sur : float, optional
        Dielectric constant of the surrounding medium. Default = `None`, i.e. conducting boundary (infinity).

    debye_length : float, optional
        Debye length. Default = `None`, i.e. no screening.

    """

    def __init__(self, cutoff: float, alpha: float, eps_sur: float = None, debye_length: float = None):
        super().__init__("ewald", cutoff, debye_length)

        if not alpha > 0.0:
            raise InvalidParameterError(f"The damping parameter must be positive. alpha = {alpha}")

        if eps_sur is None:
            eps_sur = inf
        elif eps_sur < 1.0:
            warn(
                f"\nThe dielectric constant of the surrounding medium eps_sur = {eps_sur} is smaller than one. "
                f"I will use a conducting boundary (eps_sur = inf).",
                category=PhysicsWarning,
            )
            eps_sur = inf

        self.name = "Ewald real-space"
        self.doi = "10.1002/andp.19213690304"
        self.alpha = alpha
        self.eps_sur = eps_sur

        a_red = alpha * self.cutoff
        beta = self.kappa / (2.0 * alpha)
        self.split_params = array([a_red, beta])
        self.kernel = ewald_splitting

        self.self_energy_prefactor = array(
            [
                -a_red / sqrt(pi) * (exp(-(beta**2)) + sqrt(pi) * beta * erf(beta)),
                -(a_red**3)
                * 2.0
                / 3.0
                / sqrt(pi)
                * (2.0 * sqrt(pi) * beta**3 * sp_erfc(beta) + (1.0 - 2.0 * beta**2) * exp(-(beta**2))),
            ]
        )
        self.T0 = 1.0 if isinf(eps_sur) else 2.0 * (eps_sur - 1.0) / (2.0 * eps_sur + 1.0)

    def shape_parameters(self) -> dict:
        out = {"alpha": self.alpha}
        if not isinf(self.eps_sur):
            out["eps_sur"] = self.eps_sur

        return out
