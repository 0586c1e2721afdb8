"""Error types raised by qpragma operations and the symbolic evaluator.

All errors derive from ValueError so that callers catching ValueError for
malformed input keep working.
"""

from __future__ import annotations

from typing import Iterable


class OperationError(ValueError):
    """Base class for failures of a single operation-level call."""


class QubitMappingError(OperationError):
    """
    A qubit mapping does not cover a qubit the operation depends on.

    Attributes
    ----------
    qubit:
        The qubit index that is missing from the mapping.
    """

    def __init__(self, qubit: int) -> None:
        self.qubit = int(qubit)
        super().__init__(f"Qubit {self.qubit} is not part of the qubit mapping.")


class NumericConversionError(OperationError):
    """A concrete float was required but the parameter is still symbolic."""

    def __init__(self, expression: str) -> None:
        self.expression = expression
        super().__init__(
            f"Symbolic value {expression!r} cannot be converted to float."
        )


class CalculatorError(ValueError):
    """Base class for failures of the symbolic evaluator."""


class UnknownVariableError(CalculatorError):
    """An expression references symbols that are not set in the calculator."""

    def __init__(self, names: Iterable[str]) -> None:
        self.names = tuple(sorted(names))
        super().__init__(
            f"Variables {list(self.names)} are not set in the calculator."
        )


__all__ = [
    "OperationError",
    "QubitMappingError",
    "NumericConversionError",
    "CalculatorError",
    "UnknownVariableError",
]
