"""
Calculation errors

Every failure mode of the engine is a distinct, typed exception.
Pure functions raise them; calculator facades turn them into result
objects with ok=False so the UI never receives NaN/Inf or a crash.

Taxonomy:
- InvalidInput     — non-numeric or out-of-domain input
- UnknownUnit      — unit identifier not in the registered set
- UndefinedResult  — mathematically undefined output
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Discriminator for calculation failures."""

    INVALID_INPUT = "invalid_input"
    UNKNOWN_UNIT = "unknown_unit"
    UNDEFINED_RESULT = "undefined_result"


class CalculationError(Exception):
    """Base class for all engine failures."""

    kind: ErrorKind


class InvalidInput(CalculationError, ValueError):
    """Input is not a finite number or lies outside the operation's domain."""

    kind = ErrorKind.INVALID_INPUT


class UnknownUnit(CalculationError, LookupError):
    """
    Unit is not registered for the quantity.

    Unit selection is restricted to the registered set at the UI boundary,
    so this signals an integration bug rather than a user mistake.
    """

    kind = ErrorKind.UNKNOWN_UNIT


class UndefinedResult(CalculationError, ArithmeticError):
    """Result is mathematically undefined (e.g. return rate on zero principal)."""

    kind = ErrorKind.UNDEFINED_RESULT
