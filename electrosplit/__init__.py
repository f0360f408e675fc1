"""Welcome to electrosplit: short-range truncated electrostatic interactions of charges and dipoles."""

__all__ = [
    "SchemeBase",
    "Plain",
    "Ewald",
    "Wolf",
    "Poisson",
    "PoissonSimple",
    "QPotential",
    "Fanourgakis",
    "create_scheme",
    "scheme_from_dict",
    "read_scheme",
    "write_scheme",
    "__version__",
]

__all__.sort()

# Enforce Python version check during package import.
# This is the same check as the one at the top of setup.py
import sys

if sys.version_info < (3, 8):
    raise Exception("electrosplit does not support Python < 3.8")

# Packages may add whatever they like to this file, but
# should keep this content at the top.
# ----------------------------------------------------------------------------
from importlib.metadata import PackageNotFoundError, version

from .schemes import (
    create_scheme,
    Ewald,
    Fanourgakis,
    Plain,
    Poisson,
    PoissonSimple,
    QPotential,
    scheme_from_dict,
    SchemeBase,
    Wolf,
)
from .utilities.io import read_scheme, write_scheme

# define version
try:
    #: electrosplit version string
    __version__ = version("electrosplit")
except PackageNotFoundError:
    # package is not installed
    __version__ = "unknown"

    from warnings import warn

    warn(
        "electrosplit.__version__ not generated (set to 'unknown'), electrosplit is not an installed package.",
        RuntimeWarning,
    )

    del warn

del version, PackageNotFoundError, sys
