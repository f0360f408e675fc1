r"""
Module of mathematical functions shared by the splitting schemes.

q-Pochhammer symbol
*******************

The q-potential scheme is built on the q-Pochhammer symbol

.. math::
    (a;q)_P = \prod_{n=1}^P \left (1 - a q^{n-1} \right ),

evaluated at :math:`a = q^{l + 1}`. Here :math:`l` is the type of base interaction (:math:`l = 0` ion-ion,
:math:`l = 1` ion-dipole, :math:`l = 2` dipole-dipole, ...) and :math:`P` is the number of higher order moments to
cancel. The implementation uses the factorization

.. math::
    \prod_{n=1}^P \left ( 1 - q^{n + l} \right ) = (1-q)^P \prod_{n=1}^P \sum_{k=1}^{n+l} q^{k-1}

which gives simpler expressions for the derivatives. More information at
http://mathworld.wolfram.com/q-PochhammerSymbol.html

"""
from numba import njit


@njit
def _add_power(q, j, g, g1, g2, g3):
    """Add :math:`q^j` and its first three derivatives to the running geometric sum."""
    g += q**j
    if j >= 1:
        g1 += j * q ** (j - 1)
    if j >= 2:
        g2 += j * (j - 1) * q ** (j - 2)
    if j >= 3:
        g3 += j * (j - 1) * (j - 2) * q ** (j - 3)

    return g, g1, g2, g3


@njit
def qpochhammer_derivatives(q, l=0, P=300):
    r"""
    Numba'd function to calculate the q-Pochhammer symbol and its first three derivatives in a single pass.

    The running product :math:`C_t = \prod_n g_n`, with :math:`g_n = \sum_{k=1}^{n+l} q^{k-1}`, is accumulated
    together with the sum of logarithmic derivatives :math:`DS = \sum_n g_n^{\prime}/g_n` and its first two
    derivatives. The derivatives of :math:`C_t` then follow from

    .. math::
        C_t^{\prime} = C_t DS, \quad C_t^{\prime\prime} = C_t \left ( DS^2 + DS^{\prime} \right ), \quad
        C_t^{\prime\prime\prime} = C_t \left ( DS^3 + 3 DS DS^{\prime} + DS^{\prime\prime} \right )

    and are combined with the derivatives of :math:`(1-q)^P` through the Leibniz rule. All but the last three
    factors of :math:`(1-q)` are folded into the running product so that it stays bounded for large :math:`P`.

    Parameters
    ----------
    q : float
        Normalized distance, :math:`q = r / R_c`.

    l : int
        Type of base interaction.

    P : int
        Number of higher order moments to cancel. :math:`P = 0` gives no cancellation.

    Returns
    -------
    value : float
        q-Pochhammer symbol.

    d1 : float
        First derivative with respect to `q`.

    d2 : float
        Second derivative with respect to `q`.

    d3 : float
        Third derivative with respect to `q`.

    Examples
    --------
    >>> qpochhammer_derivatives(0.75, 0, 2)
    (0.109375, -0.8125, 2.5, 6.0)

    """
    one_minus_q = 1.0 - q
    n_folded = max(P - 3, 0)
    rest = P - n_folded

    g = 0.0
    g1 = 0.0
    g2 = 0.0
    g3 = 0.0
    for j in range(l + 1):
        g, g1, g2, g3 = _add_power(q, j, g, g1, g2, g3)

    ct = 1.0
    ds = 0.0
    dds = 0.0
    ddds = 0.0
    for n in range(1, P + 1):
        if n > 1:
            g, g1, g2, g3 = _add_power(q, n + l - 1, g, g1, g2, g3)
        ct *= g
        if n <= n_folded:
            ct *= one_minus_q
        ds += g1 / g
        dds += (g2 * g - g1 * g1) / (g * g)
        ddds += (g3 * g * g - 3.0 * g1 * g2 * g + 2.0 * g1 * g1 * g1) / (g * g * g)

    # C_t derivatives divided by C_t
    x1 = ds
    x2 = ds * ds + dds
    x3 = ds * ds * ds + 3.0 * ds * dds + ddds

    # Derivatives of the remaining (1 - q)^rest, times (-1)^i P! / (P - i)!
    w0 = one_minus_q**rest
    w1 = 0.0
    w2 = 0.0
    w3 = 0.0
    if P > 0:
        w1 = -P * one_minus_q ** (rest - 1)
    if P > 1:
        w2 = P * (P - 1) * one_minus_q ** (rest - 2)
    if P > 2:
        w3 = -P * (P - 1) * (P - 2) * one_minus_q ** (rest - 3)

    value = ct * w0
    d1 = ct * (x1 * w0 + w1)
    d2 = ct * (x2 * w0 + 2.0 * x1 * w1 + w2)
    d3 = ct * (x3 * w0 + 3.0 * x2 * w1 + 3.0 * x1 * w2 + w3)

    return value, d1, d2, d3


@njit
def qpochhammer(q, l=0, P=300):
    """
    q-Pochhammer symbol. See :func:`qpochhammer_derivatives`.

    Examples
    --------
    >>> qpochhammer(0.125, 1, 1)
    0.984375

    """
    return qpochhammer_derivatives(q, l, P)[0]


@njit
def qpochhammer_derivative(q, l=0, P=300):
    """First derivative of the q-Pochhammer symbol."""
    return qpochhammer_derivatives(q, l, P)[1]


@njit
def qpochhammer_second_derivative(q, l=0, P=300):
    """Second derivative of the q-Pochhammer symbol."""
    return qpochhammer_derivatives(q, l, P)[2]


@njit
def qpochhammer_third_derivative(q, l=0, P=300):
    """Third derivative of the q-Pochhammer symbol."""
    return qpochhammer_derivatives(q, l, P)[3]


def binomial(n: int, k: int) -> int:
    r"""
    Generalized binomial coefficient

    .. math::
        \binom{n}{k} = \frac{n (n-1) \cdots (n - k + 1)}{k!}

    valid for negative `n` as well, e.g. :math:`\binom{-2}{0} = 1`, :math:`\binom{-1}{1} = -1`.

    Parameters
    ----------
    n : int
        Upper index.

    k : int
        Lower index.

    Returns
    -------
    coeff : int
        Binomial coefficient. Zero for negative `k`.

    Examples
    --------
    >>> binomial(8, 3)
    56
    >>> binomial(0, 1)
    0

    """
    if k < 0:
        return 0

    coeff = 1
    for i in range(k):
        coeff = coeff * (n - i) // (i + 1)

    return coeff
