"""
Subpackage containing electrosplit utilities modules. Contains exceptions, mathematical functions, and Input-Output.
"""

__all__ = ["read_scheme", "write_scheme", "print_to_logger"]

from .io import print_to_logger, read_scheme, write_scheme
