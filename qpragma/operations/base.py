"""Capability interfaces shared by all operation variants.

Every variant is a frozen dataclass that composes a subset of the mixins
below:

- Operate: name, tags, equality and parametrization checks.
- InvolveQubits: which qubits the operation touches.
- Substitute: qubit remapping and symbolic parameter substitution.
- OperateSingleQubit / OperateMultiQubit: the shape of the qubit payload.
- OperatePragma / OperatePragmaNoise: PRAGMA markers and noise channels.

The default Substitute implementation works on dataclass fields by name:
``qubit`` and ``qubits`` are remapped, CalculatorFloat fields are resolved
through the calculator, all other fields are copied.
"""

from __future__ import annotations

import dataclasses
import operator
from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, FrozenSet, Iterable, Mapping, Optional, Protocol, Tuple, runtime_checkable

import torch

from qpragma.errors import QubitMappingError
from qpragma.operations.tags import tags_for
from qpragma.symbolic import Calculator, CalculatorFloat, CalculatorLike


class InvolvedKind(Enum):
    """The three possible answers to "which qubits does this touch"."""

    NONE = "none"
    ALL = "all"
    SET = "set"


@dataclasses.dataclass(frozen=True)
class InvolvedQubits:
    """
    Qubits involved in an operation or circuit.

    Attributes
    ----------
    kind:
        NONE when no qubit is structurally tied to the operation, ALL when it
        acts on the whole register, SET when it acts on ``qubits``.
    qubits:
        The explicit qubit indices; empty unless ``kind`` is SET.
    """

    kind: InvolvedKind
    qubits: FrozenSet[int] = frozenset()

    @classmethod
    def none(cls) -> "InvolvedQubits":
        return cls(InvolvedKind.NONE)

    @classmethod
    def all(cls) -> "InvolvedQubits":
        return cls(InvolvedKind.ALL)

    @classmethod
    def of(cls, qubits: Iterable[int]) -> "InvolvedQubits":
        return cls(InvolvedKind.SET, frozenset(int(q) for q in qubits))

    @property
    def is_none(self) -> bool:
        return self.kind is InvolvedKind.NONE

    @property
    def is_all(self) -> bool:
        return self.kind is InvolvedKind.ALL

    def union(self, other: "InvolvedQubits") -> "InvolvedQubits":
        """Combine two results: ALL absorbs, NONE is neutral, sets unite."""
        if self.is_all or other.is_all:
            return InvolvedQubits.all()
        if self.is_none:
            return other
        if other.is_none:
            return self
        return InvolvedQubits.of(self.qubits | other.qubits)


@runtime_checkable
class CircuitLike(Protocol):
    """Entry points of a circuit container that nested operations rely on."""

    def involved_qubits(self) -> InvolvedQubits:
        ...

    def remap_qubits(self, mapping: Mapping[int, int]) -> "CircuitLike":
        ...

    def substitute_parameters(self, calculator: Calculator) -> "CircuitLike":
        ...

    def is_parametrized(self) -> bool:
        ...

    def copy(self) -> "CircuitLike":
        ...


def remap_qubit(qubit: int, mapping: Mapping[int, int]) -> int:
    """
    Look up ``qubit`` in ``mapping``.

    Raises
    ------
    QubitMappingError
        If the qubit is not a key of the mapping.
    """
    try:
        return int(mapping[qubit])
    except KeyError:
        raise QubitMappingError(qubit) from None


def _values_equal(left: Any, right: Any) -> bool:
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        return dict(left) == dict(right)
    if isinstance(left, torch.Tensor) or isinstance(right, torch.Tensor):
        return (
            isinstance(left, torch.Tensor)
            and isinstance(right, torch.Tensor)
            and left.shape == right.shape
            and torch.equal(left, right.to(dtype=left.dtype, device=left.device))
        )
    return left == right


def _is_hashable_field(value: Any) -> bool:
    return isinstance(value, (int, float, str, tuple, CalculatorFloat))


class Operate(ABC):
    """Name, tags, equality and parametrization of an operation."""

    @property
    def hqslang(self) -> str:
        """Return the variant name of the operation."""
        return type(self).__name__

    @property
    def tags(self) -> Tuple[str, ...]:
        """Return the static capability tags of the variant."""
        return tags_for(self.hqslang)

    def is_parametrized(self) -> bool:
        """Return True if any parameter of the operation is still symbolic."""
        return any(
            isinstance(value, CalculatorFloat) and not value.is_float
            for value in self._field_values()
        )

    def _field_values(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, f.name) for f in dataclasses.fields(self))

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return all(
            _values_equal(a, b)
            for a, b in zip(self._field_values(), other._field_values())
        )

    def __hash__(self) -> int:
        # Only hashable payload participates; equal operations still hash equal.
        return hash(
            (self.hqslang,)
            + tuple(v for v in self._field_values() if _is_hashable_field(v))
        )


class InvolveQubits(ABC):
    """Report the qubits an operation touches."""

    @abstractmethod
    def involved_qubits(self) -> InvolvedQubits:
        """Return the qubits involved in the operation."""


class Substitute(ABC):
    """Copy-on-write qubit remapping and parameter substitution."""

    def remap_qubits(self, mapping: Mapping[int, int]) -> "Substitute":
        """
        Return a copy with every qubit index replaced through ``mapping``.

        Raises
        ------
        QubitMappingError
            If a qubit the operation depends on is missing from ``mapping``.
        """
        changes = {}
        names = {f.name for f in dataclasses.fields(self)}
        if "qubit" in names:
            changes["qubit"] = remap_qubit(self.qubit, mapping)
        if "qubits" in names:
            changes["qubits"] = tuple(remap_qubit(q, mapping) for q in self.qubits)
        return dataclasses.replace(self, **changes)

    def substitute_parameters(self, calculator: Calculator) -> "Substitute":
        """
        Return a copy with all symbolic parameters resolved by ``calculator``.

        Errors raised by the calculator propagate unchanged.
        """
        changes = {}
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, CalculatorFloat):
                changes[f.name] = CalculatorFloat(calculator.parse_get(value))
        return dataclasses.replace(self, **changes)


class Operation(Operate, InvolveQubits, Substitute):
    """Full interface every operation variant provides."""


class OperateSingleQubit(ABC):
    """Operation acting on exactly one stored qubit."""

    qubit: int

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.of([self.qubit])


class OperateMultiQubit(ABC):
    """Operation acting on a stored, ordered list of qubits."""

    qubits: Tuple[int, ...]

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.of(self.qubits)


class OperatePragma(ABC):
    """Marker for operations that annotate rather than apply a unitary."""


class OperatePragmaNoise(OperatePragma):
    """PRAGMA operation describing a single-qubit noise channel."""

    @abstractmethod
    def superoperator(self, device: Optional[torch.device] = None) -> torch.Tensor:
        """Return the 4x4 real superoperator of the channel."""

    @abstractmethod
    def probability(self) -> CalculatorFloat:
        """Return the probability that the channel affects the qubit."""

    @abstractmethod
    def powercf(self, power: CalculatorLike) -> "OperatePragmaNoise":
        """Return a copy acting for ``power`` times the gate time."""


def check_qubit(qubit: int, what: str = "qubit") -> int:
    """Validate and return a non-negative qubit index."""
    if isinstance(qubit, bool):
        raise TypeError(f"{what} must be an int, got bool")
    try:
        qubit = operator.index(qubit)
    except TypeError:
        raise TypeError(f"{what} must be an int, got {type(qubit).__name__}") from None
    if qubit < 0:
        raise ValueError(f"{what} must be non-negative, got {qubit}")
    return qubit


def check_qubits(qubits: Iterable[int]) -> Tuple[int, ...]:
    """Validate a qubit list and return it as a tuple."""
    return tuple(check_qubit(q, "qubits entry") for q in qubits)


__all__ = [
    "InvolvedKind",
    "InvolvedQubits",
    "CircuitLike",
    "remap_qubit",
    "Operate",
    "InvolveQubits",
    "Substitute",
    "Operation",
    "OperateSingleQubit",
    "OperateMultiQubit",
    "OperatePragma",
    "OperatePragmaNoise",
    "check_qubit",
    "check_qubits",
]
