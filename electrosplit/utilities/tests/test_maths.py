from numpy import isclose

from ..maths import (
    binomial,
    qpochhammer,
    qpochhammer_derivative,
    qpochhammer_derivatives,
    qpochhammer_second_derivative,
    qpochhammer_third_derivative,
)

from pytest import mark


@mark.parametrize(
    "q,l,P,expected",
    [(0.75, 0, 2, 0.109375), (2.0 / 3.0, 2, 5, 0.4211104676), (0.125, 1, 1, 0.984375)],
)
def test_qpochhammer(q, l, P, expected):
    """Test the q-Pochhammer symbol."""
    assert isclose(qpochhammer(q, l, P), expected)


@mark.parametrize(
    "q,l,P,expected",
    [(0.75, 0, 2, -0.8125), (2.0 / 3.0, 2, 5, -2.538458169), (0.125, 1, 1, -0.25)],
)
def test_qpochhammer_derivative(q, l, P, expected):
    assert isclose(qpochhammer_derivative(q, l, P), expected)


@mark.parametrize(
    "q,l,P,expected",
    [(0.75, 0, 2, 2.5), (2.0 / 3.0, 2, 5, -1.444601767), (0.125, 1, 1, -2.0)],
)
def test_qpochhammer_second_derivative(q, l, P, expected):
    assert isclose(qpochhammer_second_derivative(q, l, P), expected)


@mark.parametrize(
    "q,l,P,expected",
    [(0.75, 0, 2, 6.0), (2.0 / 3.0, 2, 5, 92.48631425), (0.125, 1, 1, 0.0), (0.4, 3, 7, -32.80472205)],
)
def test_qpochhammer_third_derivative(q, l, P, expected):
    assert isclose(qpochhammer_third_derivative(q, l, P), expected)


def test_qpochhammer_no_cancellation():
    """Test that zero moments to cancel gives one."""
    assert qpochhammer_derivatives(0.5, 0, 0) == (1.0, 0.0, 0.0, 0.0)


def test_qpochhammer_large_order():
    """Test that a large number of cancelled moments neither overflows nor underflows inside the sphere."""
    value, d1, d2, d3 = qpochhammer_derivatives(0.3, 0, 300)
    reference = 1.0
    for n in range(1, 301):
        reference *= 1.0 - 0.3**n

    assert isclose(value, reference)
    assert d1 < 0.0


@mark.parametrize(
    "n,k,expected",
    [(8, 3, 56), (5, 0, 1), (0, 1, 0), (-2, 0, 1), (-1, 1, -1), (-2, 2, 3), (4, -1, 0), (2, 3, 0)],
)
def test_binomial(n, k, expected):
    assert binomial(n, k) == expected
