"""
A subpackage containing the short-range splitting schemes for charges and dipoles.
"""

__all__ = [
    "SchemeBase",
    "PairInteraction",
    "Plain",
    "Ewald",
    "Wolf",
    "Poisson",
    "PoissonSimple",
    "QPotential",
    "Fanourgakis",
    "create_scheme",
    "scheme_from_dict",
]

from .core import create_scheme, scheme_from_dict, SchemeBase
from .ewald import Ewald
from .fanourgakis import Fanourgakis
from .interaction import PairInteraction
from .plain import Plain
from .poisson import Poisson, PoissonSimple
from .qpotential import QPotential
from .wolf import Wolf
