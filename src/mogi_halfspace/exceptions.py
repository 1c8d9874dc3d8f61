"""
Exception and warning types raised by the Mogi deformation routines.
"""

from __future__ import annotations


class MogiError(Exception):
    """Base class for errors raised by mogi_halfspace."""


class InvalidArgumentError(MogiError, ValueError):
    """A physical input is out of range (negative length, nu outside [0, 1])."""


class MissingArgumentError(MogiError, TypeError):
    """A required input was not supplied (e.g. neither modulus given)."""


class AccuracyWarning(UserWarning):
    """Inputs are valid but violate an assumption of the point-source model."""
