"""Exceptions raised by the unit of measure package.

Classes:
    UnitOfMeasureError: Root of every package-specific exception.
    UnsupportedOperationError: Cross-kind operation with no rule for the
        operand's measurement system.
    UnitParseError: Text could not be turned into a quantity.

Type mismatches between quantity kinds are reported with the builtin
``TypeError``, the same way the unit family check does.
"""

from __future__ import annotations

from enum import Enum


class UnitOfMeasureError(Exception):
    """Base class for all unit of measure errors."""


class UnsupportedOperationError(UnitOfMeasureError, ArithmeticError):
    """Raised when an operation is undefined for a measurement system.

    Attributes:
        operation (str): Human readable operation, e.g. ``"Volume / Length"``.
        system (Enum): System tag of the operand that selected the rule.
    """

    def __init__(self, operation: str, system: Enum):
        self.operation = operation
        self.system = system
        super().__init__(
            f"Unsupported operation {operation} for measurement system {system.name}"
        )


class UnitParseError(UnitOfMeasureError, ValueError):
    """Raised when text cannot be parsed into a quantity.

    Attributes:
        text (str): The full input text.
        unit_text (str): The unit part that was looked up, empty if the
            failure happened before the unit was reached.
    """

    def __init__(self, text: str, unit_text: str = "", reason: str = ""):
        self.text = text
        self.unit_text = unit_text
        msg = reason or f"Unknown unit ({unit_text})"
        super().__init__(f"{msg} in {text!r}")
