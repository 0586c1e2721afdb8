"""Circuit container holding an ordered sequence of operations."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from qpragma.logging import get_logger
from qpragma.operations.base import InvolvedQubits, Operation
from qpragma.symbolic import Calculator

logger = get_logger(__name__)


class Circuit:
    """
    Ordered list of operations.

    Operations are immutable, so copies of a circuit share operation
    instances but never the list holding them. Remapping and substitution
    return new circuits and leave this one untouched.
    """

    def __init__(self, operations: Optional[Iterable[Operation]] = None) -> None:
        """Initialize a Circuit, optionally from an iterable of operations."""
        self._ops: List[Operation] = []
        for op in operations or ():
            self.add(op)

    @property
    def ops(self) -> Tuple[Operation, ...]:
        """Return a read-only tuple of all operations."""
        return tuple(self._ops)

    def add(self, operation: Operation) -> None:
        """
        Append an operation to the circuit.

        Raises
        ------
        TypeError
            If ``operation`` is not an Operation.
        """
        if not isinstance(operation, Operation):
            raise TypeError(
                f"Circuit can only hold operations, got {type(operation).__name__}"
            )
        self._ops.append(operation)

    def __iadd__(self, other: Operation | "Circuit") -> "Circuit":
        if isinstance(other, Circuit):
            for op in other:
                self.add(op)
        else:
            self.add(other)
        return self

    def copy(self) -> "Circuit":
        """Return a copy of this circuit."""
        return Circuit(self._ops)

    def __len__(self) -> int:
        """Return the number of operations in this circuit."""
        return len(self._ops)

    def __iter__(self) -> Iterator[Operation]:
        return iter(tuple(self._ops))

    def __getitem__(self, index: int) -> Operation:
        return self._ops[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Circuit):
            return NotImplemented
        return len(self) == len(other) and all(
            a == b for a, b in zip(self._ops, other._ops)
        )

    __hash__ = None

    def __repr__(self) -> str:
        names = ", ".join(op.hqslang for op in self._ops)
        return f"Circuit([{names}])"

    def involved_qubits(self) -> InvolvedQubits:
        """
        Return the qubits involved in any operation of the circuit.

        An operation involving all qubits makes the whole circuit involve all
        qubits; operations involving none are ignored.
        """
        involved = InvolvedQubits.none()
        for op in self._ops:
            involved = involved.union(op.involved_qubits())
            if involved.is_all:
                break
        return involved

    def remap_qubits(self, mapping: Mapping[int, int]) -> "Circuit":
        """
        Return a new circuit with every operation remapped through ``mapping``.

        Raises
        ------
        QubitMappingError
            If an operation depends on a qubit missing from ``mapping``.
        """
        logger.debug("Remapping %d operations with %r", len(self._ops), dict(mapping))
        try:
            return Circuit(op.remap_qubits(mapping) for op in self._ops)
        except ValueError as err:
            logger.debug("Qubit remapping failed: %s", err)
            raise

    def substitute_parameters(self, calculator: Calculator) -> "Circuit":
        """
        Return a new circuit with symbolic parameters resolved by ``calculator``.

        Errors raised by the calculator propagate unchanged.
        """
        logger.debug("Substituting parameters of %d operations", len(self._ops))
        try:
            return Circuit(op.substitute_parameters(calculator) for op in self._ops)
        except ValueError as err:
            logger.debug("Parameter substitution failed: %s", err)
            raise

    def is_parametrized(self) -> bool:
        """Return True if any operation still has a symbolic parameter."""
        return any(op.is_parametrized() for op in self._ops)

    def operation_counts(self) -> Dict[str, int]:
        """Return a dictionary mapping operation names to their counts."""
        counts: Dict[str, int] = {}
        for op in self._ops:
            counts[op.hqslang] = counts.get(op.hqslang, 0) + 1
        return counts

    def count_occurrences(self, tags: Sequence[str]) -> int:
        """Return the number of operations carrying at least one of ``tags``."""
        wanted = set(tags)
        return sum(1 for op in self._ops if wanted.intersection(op.tags))

    def filter_by_tag(self, tag: str) -> "Circuit":
        """Return a circuit with only the operations carrying ``tag``."""
        return Circuit(op for op in self._ops if tag in op.tags)
