r"""
Module for handling the q-potential scheme.

Splitting function
******************

The q-potential cancels the first :math:`P` electrostatic moments of the truncation sphere by means of the
q-Pochhammer symbol

.. math::
   s(q) = (q;q)_P = \prod_{n=1}^P \left (1 - q^n \right )

so that :math:`s(q)` and its derivatives vanish at :math:`q = 1`. See :mod:`electrosplit.utilities.maths`.

Scheme Attributes
*****************

The elements of :attr:`split_params` are:

.. code-block::

    split_params[0] : order, number of moments to cancel

"""
from numba import jit
from numba.core.types import float64, UniTuple
from numpy import array

from ..utilities.exceptions import InvalidParameterError
from ..utilities.maths import qpochhammer_derivatives
from .interaction import PairInteraction


@jit(UniTuple(float64, 4)(float64, float64[:]), nopython=True)
def qpotential_splitting(q, split_params):
    """
    Numba'd function to calculate the q-potential splitting function and its first three derivatives.

    Parameters
    ----------
    q : float
        Reduced distance.

    split_params : numpy.ndarray
        Number of moments to cancel.

    Returns
    -------
    _ : tuple
        Splitting function and its first three derivatives.

    Examples
    --------
    >>> import numpy as np
    >>> tuple(round(x, 10) for x in qpotential_splitting(0.5, np.array([4.0])))
    (0.3076171875, -1.453125, 1.9140625, 17.25)

    """
    order = int(split_params[0])

    return qpochhammer_derivatives(q, 0, order)


class QPotential(PairInteraction):
    """
    q-potential scheme.

    Parameters
    ----------
    cutoff : float
        Cut-off distance.

    order : int
        Number of moments to cancel.

    """

    def __init__(self, cutoff: float, order: int):
        super().__init__("qpotential", cutoff)

        if int(order) != order or order < 0:
            raise InvalidParameterError(f"The order must be a non-negative integer. order = {order}")

        self.name = "qpotential"
        self.order = int(order)
        self.split_params = array([float(self.order)])
        self.kernel = qpotential_splitting
        self.self_energy_prefactor = array([-1.0, -1.0])
        self.T0 = self.calc_T0()

    def shape_parameters(self) -> dict:
        return {"order": self.order}
