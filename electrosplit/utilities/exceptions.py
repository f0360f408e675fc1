"""Module of Exceptions and warnings specific to electrosplit."""

# ------------------------------------------------------------------------------
#   Exceptions
# ------------------------------------------------------------------------------


class ElectrosplitError(Exception):
    """
    Base class of electrosplit custom errors.
    All custom exceptions raised by electrosplit should inherit from this
    class and be defined in this module.
    """


# ^^^^^^^^^^^^ Base Exceptions should be defined above this comment ^^^^^^^^^^^^


class InvalidParameterError(ElectrosplitError):
    """Raised when a scheme is constructed with parameters outside of their domain."""


class DimensionMismatchError(ElectrosplitError):
    """Raised when the moments passed to a self-energy do not match the scheme's prefactors."""


# ------------------------------------------------------------------------------
#   Warnings
# ------------------------------------------------------------------------------


class ElectrosplitWarning(Warning):
    """
    Base class of electrosplit custom warnings.
    All electrosplit custom warnings should inherit from this class and be
    defined in this module.
    Warnings should be issued using `warnings.warn`, which will not break
    execution if unhandled.
    """

    pass


class PhysicsWarning(Warning):
    """The base warning for warnings related to non-physical situations."""


# ^^^^^^^^^^^^^ Base Warnings should be defined above this comment ^^^^^^^^^^^^^


class AlgorithmWarning(ElectrosplitWarning):
    """The base warning for warnings related to the chosen scheme and its parameters."""
