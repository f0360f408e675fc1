r"""
Module for handling the Wolf scheme.

Splitting function
******************

The damped, shifted-force Wolf splitting function is

.. math::
   s(q) = {\rm erfc}(\tilde \alpha q) - q \, {\rm erfc}(\tilde \alpha)

where :math:`\tilde \alpha = \alpha R_c`. It vanishes at :math:`q = 1`.

Scheme Attributes
*****************

The elements of :attr:`split_params` are:

.. code-block::

    split_params[0] : reduced damping parameter alpha * cutoff
    split_params[1] : erfc(alpha * cutoff)

"""
from math import erfc
from numba import jit
from numba.core.types import float64, UniTuple
from numpy import array, exp, pi, sqrt
from scipy.special import erfc as sp_erfc

from ..utilities.exceptions import InvalidParameterError
from .interaction import PairInteraction


@jit(UniTuple(float64, 4)(float64, float64[:]), nopython=True)
def wolf_splitting(q, split_params):
    """
    Numba'd function to calculate the Wolf splitting function and its first three derivatives.

    Parameters
    ----------
    q : float
        Reduced distance.

    split_params : numpy.ndarray
        Reduced damping parameter and its complementary error function.

    Returns
    -------
    _ : tuple
        Splitting function and its first three derivatives.

    Examples
    --------
    >>> import numpy as np
    >>> from math import erfc
    >>> wolf_splitting(1.0, np.array([2.9, erfc(2.9)]))[0]
    0.0

    """
    a_red = split_params[0]
    erfc_a_red = split_params[1]
    a_red2 = a_red * a_red
    exp_a = exp(-a_red2 * q * q)

    srf = erfc(a_red * q) - q * erfc_a_red
    dsrf = -2.0 * exp_a * a_red / sqrt(pi) - erfc_a_red
    ddsrf = 4.0 * exp_a * a_red2 * a_red * q / sqrt(pi)
    dddsrf = -8.0 * exp_a * a_red2 * a_red * (a_red2 * q * q - 0.5) / sqrt(pi)

    return srf, dsrf, ddsrf, dddsrf


class Wolf(PairInteraction):
    """
    Wolf scheme.

    Parameters
    ----------
    cutoff : float
        Cut-off distance.

    alpha : float
        Damping parameter.

    """

    def __init__(self, cutoff: float, alpha: float):
        super().__init__("wolf", cutoff)

        if not alpha > 0.0:
            raise InvalidParameterError(f"The damping parameter must be positive. alpha = {alpha}")

        self.name = "Wolf"
        self.doi = "10.1063/1.478738"
        self.alpha = alpha

        a_red = alpha * self.cutoff
        self.split_params = array([a_red, sp_erfc(a_red)])
        self.kernel = wolf_splitting
        self.self_energy_prefactor = array([-a_red / sqrt(pi), -(a_red**3) * 2.0 / 3.0 / sqrt(pi)])
        self.T0 = self.calc_T0()

    def shape_parameters(self) -> dict:
        return {"alpha": self.alpha}
