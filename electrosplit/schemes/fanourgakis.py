r"""
Module for handling the Fanourgakis scheme.

Splitting function
******************

.. math::
   s(q) = (1 - q)^4 \left ( 1 + \frac{9}{4} q + 3 q^2 + \frac{5}{2} q^3 \right )

This is the Poisson scheme with :math:`C = 4` and :math:`D = 3`, see :mod:`electrosplit.schemes.poisson`.

Scheme Attributes
*****************

The Fanourgakis scheme needs no parameters. :attr:`split_params` is a dummy array.

"""
from numba import jit
from numba.core.types import float64, UniTuple
from numpy import array

from .interaction import PairInteraction


@jit(UniTuple(float64, 4)(float64, float64[:]), nopython=True)
def fanourgakis_splitting(q, split_params):
    """
    Numba'd function to calculate the Fanourgakis splitting function and its first three derivatives.

    Parameters
    ----------
    q : float
        Reduced distance.

    split_params : numpy.ndarray
        Not used.

    Returns
    -------
    _ : tuple
        Splitting function and its first three derivatives.

    Examples
    --------
    >>> import numpy as np
    >>> tuple(round(x, 8) for x in fanourgakis_splitting(0.5, np.array([0.0])))
    (0.19921875, -1.1484375, 3.28125, 6.5625)

    """
    srf = (1.0 - q) ** 4 * (1.0 + 2.25 * q + 3.0 * q * q + 2.5 * q * q * q)
    dsrf = -1.75 + 26.25 * q**4 - 42.0 * q**5 + 17.5 * q**6
    ddsrf = 105.0 * q**3 * (q - 1.0) ** 2
    dddsrf = 525.0 * q**2 * (q - 0.6) * (q - 1.0)

    return srf, dsrf, ddsrf, dddsrf


class Fanourgakis(PairInteraction):
    """
    Fanourgakis scheme.

    Parameters
    ----------
    cutoff : float
        Cut-off distance.

    """

    def __init__(self, cutoff: float):
        super().__init__("fanourgakis", cutoff)
        self.name = "fanourgakis"
        self.doi = "10.1063/1.3216520"
        self.split_params = array([0.0])
        self.kernel = fanourgakis_splitting
        self.self_energy_prefactor = array([-1.0, -1.0])
        self.T0 = self.calc_T0()
