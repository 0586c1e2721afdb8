"""PRAGMA operation executing a sub-circuit under a classical condition."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Mapping

from qpragma.operations.base import (
    CircuitLike,
    InvolvedQubits,
    OperatePragma,
    Operation,
    check_qubit,
)
from qpragma.symbolic import Calculator


@dataclass(frozen=True, eq=False)
class PragmaConditional(OperatePragma, Operation):
    """
    Executes ``circuit`` if a bit in a classical register is set.

    The operation owns its circuit: the circuit passed in is copied on
    construction, and copying or transforming the operation produces a new
    circuit rather than sharing the original.

    Attributes
    ----------
    condition_register:
        Name of the bit register holding the condition.
    condition_index:
        Index of the condition bit in that register.
    circuit:
        The circuit executed when the condition bit is true.
    """

    condition_register: str
    condition_index: int
    circuit: CircuitLike

    def __post_init__(self) -> None:
        object.__setattr__(self, "condition_register", str(self.condition_register))
        object.__setattr__(
            self, "condition_index", check_qubit(self.condition_index, "condition_index")
        )
        if not isinstance(self.circuit, CircuitLike):
            raise TypeError(
                f"circuit must provide the circuit interface, got {type(self.circuit).__name__}"
            )
        object.__setattr__(self, "circuit", self.circuit.copy())

    def involved_qubits(self) -> InvolvedQubits:
        """Return the qubits involved in the embedded circuit."""
        return self.circuit.involved_qubits()

    def remap_qubits(self, mapping: Mapping[int, int]) -> "PragmaConditional":
        """
        Remap the qubits of the embedded circuit.

        Errors from the circuit propagate unchanged.
        """
        return dataclasses.replace(self, circuit=self.circuit.remap_qubits(mapping))

    def substitute_parameters(self, calculator: Calculator) -> "PragmaConditional":
        """
        Substitute symbolic parameters in the embedded circuit.

        Errors from the circuit propagate unchanged.
        """
        return dataclasses.replace(
            self, circuit=self.circuit.substitute_parameters(calculator)
        )

    def is_parametrized(self) -> bool:
        return self.circuit.is_parametrized()

    def __copy__(self) -> "PragmaConditional":
        return dataclasses.replace(self)

    def __deepcopy__(self, memo) -> "PragmaConditional":
        return dataclasses.replace(self)


__all__ = ["PragmaConditional"]
