r"""
Module for handling the plain Coulomb interaction.

Splitting function
******************

No truncation, the cut-off is infinite and

.. math::
   s(q) = 1.

With a finite Debye length the plain scheme gives the Yukawa interaction :math:`z e^{-\kappa r}/r`.

Scheme Attributes
*****************

The plain scheme needs no parameters. :attr:`split_params` is a dummy array.

"""
from numba import jit
from numba.core.types import float64, UniTuple
from numpy import array, inf

from .interaction import PairInteraction


@jit(UniTuple(float64, 4)(float64, float64[:]), nopython=True)
def plain_splitting(q, split_params):
    """
    Numba'd function to calculate the plain splitting function and its derivatives.

    Parameters
    ----------
    q : float
        Reduced distance.

    split_params : numpy.ndarray
        Not used.

    Returns
    -------
    _ : tuple
        (1.0, 0.0, 0.0, 0.0)

    """
    return 1.0, 0.0, 0.0, 0.0


class Plain(PairInteraction):
    """
    No truncation scheme, cutoff = infinity.

    Parameters
    ----------
    debye_length : float, optional
        Debye length. Default = `None`, i.e. no screening.

    """

    def __init__(self, debye_length: float = None):
        super().__init__("plain", inf, debye_length)
        self.name = "plain"
        self.doi = "Premier mémoire sur l'électricité et le magnétisme by Charles-Augustin de Coulomb"
        self.kernel = plain_splitting
        self.split_params = array([0.0])
        self.self_energy_prefactor = array([0.0, 0.0])
        self.T0 = self.calc_T0()
