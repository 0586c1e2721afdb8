"""PRAGMA operations that set up, time or frame parts of a circuit."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

import torch

from qpragma.config import COMPLEX_DTYPE
from qpragma.operations.base import (
    InvolvedQubits,
    OperateMultiQubit,
    OperatePragma,
    OperateSingleQubit,
    Operation,
    check_qubit,
    check_qubits,
    remap_qubit,
)
from qpragma.symbolic import CalculatorFloat


def _is_power_of_two(n: int) -> bool:
    return n >= 2 and (n & (n - 1)) == 0


@dataclass(frozen=True, eq=False)
class PragmaSetNumberOfMeasurements(OperatePragma, Operation):
    """
    Sets the number of measurements of the circuit.

    Used by backends that allow setting the number of shots. It does not give
    access to the underlying wavefunction or density matrix.

    Attributes
    ----------
    number_measurements:
        The number of measurements.
    readout:
        The register used for the readout.
    """

    number_measurements: int
    readout: str

    def __post_init__(self) -> None:
        if isinstance(self.number_measurements, bool) or not isinstance(
            self.number_measurements, int
        ):
            raise TypeError("number_measurements must be an int")
        if self.number_measurements < 0:
            raise ValueError(
                f"number_measurements must be non-negative, got {self.number_measurements}"
            )
        object.__setattr__(self, "readout", str(self.readout))

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.none()


@dataclass(frozen=True, eq=False)
class PragmaSetStateVector(OperatePragma, Operation):
    """
    Sets the statevector of the whole quantum register.

    Attributes
    ----------
    statevector:
        Complex vector of length 2**n_qubits. Stored as a complex128 copy.
    """

    statevector: torch.Tensor

    def __post_init__(self) -> None:
        vec = torch.as_tensor(self.statevector, dtype=COMPLEX_DTYPE).clone()
        if vec.dim() != 1:
            raise ValueError(f"statevector must be 1D, got {vec.dim()} dimensions")
        if not _is_power_of_two(vec.shape[0]):
            raise ValueError(
                f"statevector length must be a power of two >= 2, got {vec.shape[0]}"
            )
        object.__setattr__(self, "statevector", vec)

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.all()


@dataclass(frozen=True, eq=False)
class PragmaSetDensityMatrix(OperatePragma, Operation):
    """
    Sets the density matrix of the whole quantum register.

    Attributes
    ----------
    density_matrix:
        Complex square matrix of dimension 2**n_qubits. Stored as a
        complex128 copy.
    """

    density_matrix: torch.Tensor

    def __post_init__(self) -> None:
        rho = torch.as_tensor(self.density_matrix, dtype=COMPLEX_DTYPE).clone()
        if rho.dim() != 2:
            raise ValueError(
                f"density_matrix must be 2D, got {rho.dim()} dimensions"
            )
        if rho.shape[0] != rho.shape[1]:
            raise ValueError(f"density_matrix must be square, got shape {tuple(rho.shape)}")
        if not _is_power_of_two(rho.shape[0]):
            raise ValueError(
                f"density_matrix dimension must be a power of two >= 2, got {rho.shape[0]}"
            )
        object.__setattr__(self, "density_matrix", rho)

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.all()


@dataclass(frozen=True, eq=False)
class PragmaRepeatGate(OperatePragma, Operation):
    """
    Repeats the next gate in the circuit to boost its error rate.

    The pragma frames whatever instruction follows it, so it reports all
    qubits as involved; callers combine this with the framed instruction.
    """

    repetition_coefficient: int

    def __post_init__(self) -> None:
        if isinstance(self.repetition_coefficient, bool) or not isinstance(
            self.repetition_coefficient, int
        ):
            raise TypeError("repetition_coefficient must be an int")
        if self.repetition_coefficient < 1:
            raise ValueError(
                f"repetition_coefficient must be >= 1, got {self.repetition_coefficient}"
            )

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.all()


@dataclass(frozen=True, eq=False)
class PragmaOverrotation(OperateMultiQubit, OperatePragma, Operation):
    """
    Statistical overrotation of the next matching rotation gate.

    A random number drawn from a normal distribution with mean 0 and standard
    deviation ``variance``, multiplied by ``amplitude``, is added to the
    rotation angle of the next gate named ``gate_hqslang`` acting on
    ``qubits``.
    """

    gate_hqslang: str
    qubits: Tuple[int, ...]
    amplitude: float
    variance: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "gate_hqslang", str(self.gate_hqslang))
        object.__setattr__(self, "qubits", check_qubits(self.qubits))
        object.__setattr__(self, "amplitude", float(self.amplitude))
        object.__setattr__(self, "variance", float(self.variance))


@dataclass(frozen=True, eq=False)
class PragmaBoostNoise(OperatePragma, Operation):
    """Boosts noise and overrotations by multiplying gate times."""

    noise_coefficient: CalculatorFloat

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "noise_coefficient", CalculatorFloat(self.noise_coefficient)
        )

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.none()


@dataclass(frozen=True, eq=False)
class PragmaStopParallelBlock(OperateMultiQubit, OperatePragma, Operation):
    """Marks the end of a parallel execution block on ``qubits``."""

    qubits: Tuple[int, ...]
    execution_time: CalculatorFloat

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubits", check_qubits(self.qubits))
        object.__setattr__(self, "execution_time", CalculatorFloat(self.execution_time))


@dataclass(frozen=True, eq=False)
class PragmaGlobalPhase(OperatePragma, Operation):
    """Records a global phase picked up by the quantum register."""

    phase: CalculatorFloat

    def __post_init__(self) -> None:
        object.__setattr__(self, "phase", CalculatorFloat(self.phase))

    def involved_qubits(self) -> InvolvedQubits:
        return InvolvedQubits.none()


@dataclass(frozen=True, eq=False)
class PragmaSleep(OperateMultiQubit, OperatePragma, Operation):
    """
    Makes the hardware idle on ``qubits`` for ``sleep_time`` seconds.

    Typically used for error mitigation, since idling increases the noise.
    """

    qubits: Tuple[int, ...]
    sleep_time: CalculatorFloat

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubits", check_qubits(self.qubits))
        object.__setattr__(self, "sleep_time", CalculatorFloat(self.sleep_time))


@dataclass(frozen=True, eq=False)
class PragmaActiveReset(OperateSingleQubit, OperatePragma, Operation):
    """Resets ``qubit`` to the zero state."""

    qubit: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubit", check_qubit(self.qubit))


@dataclass(frozen=True, eq=False)
class PragmaStartDecompositionBlock(OperateMultiQubit, OperatePragma, Operation):
    """
    Marks the start of a decomposition block.

    Attributes
    ----------
    qubits:
        The qubits involved in the block.
    reordering_dictionary:
        Read-only mapping from old to new qubit index inside the block.
    """

    qubits: Tuple[int, ...]
    reordering_dictionary: Mapping[int, int]

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubits", check_qubits(self.qubits))
        reordering = {
            check_qubit(old, "reordering key"): check_qubit(new, "reordering value")
            for old, new in dict(self.reordering_dictionary).items()
        }
        object.__setattr__(self, "reordering_dictionary", MappingProxyType(reordering))

    def remap_qubits(
        self, mapping: Mapping[int, int]
    ) -> "PragmaStartDecompositionBlock":
        """
        Remap the block's qubits and both sides of its reordering dictionary.

        Raises
        ------
        QubitMappingError
            If any qubit, reordering key or reordering value is unmapped.
        """
        new_qubits = [remap_qubit(q, mapping) for q in self.qubits]
        new_reordering = {}
        for old_qubit, new_qubit in self.reordering_dictionary.items():
            new_reordering[remap_qubit(old_qubit, mapping)] = remap_qubit(
                new_qubit, mapping
            )
        return PragmaStartDecompositionBlock(new_qubits, new_reordering)


@dataclass(frozen=True, eq=False)
class PragmaStopDecompositionBlock(OperateMultiQubit, OperatePragma, Operation):
    """Marks the end of a decomposition block on ``qubits``."""

    qubits: Tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubits", check_qubits(self.qubits))


__all__ = [
    "PragmaSetNumberOfMeasurements",
    "PragmaSetStateVector",
    "PragmaSetDensityMatrix",
    "PragmaRepeatGate",
    "PragmaOverrotation",
    "PragmaBoostNoise",
    "PragmaStopParallelBlock",
    "PragmaGlobalPhase",
    "PragmaSleep",
    "PragmaActiveReset",
    "PragmaStartDecompositionBlock",
    "PragmaStopDecompositionBlock",
]
