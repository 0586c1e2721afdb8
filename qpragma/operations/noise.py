"""PRAGMA noise operations on a single qubit.

Damping, depolarising, dephasing and random noise describe channels with a
closed-form superoperator in terms of ``gate_time * rate``. The general
noise pragma only carries its 3x3 Lindblad coefficient matrix.
"""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass
from typing import List, Optional

import torch

from qpragma.config import COMPLEX_DTYPE, REAL_DTYPE, default_device, is_debug_enabled
from qpragma.diagnostics import assert_trace_preserving
from qpragma.logging import get_logger
from qpragma.operations.base import (
    OperatePragma,
    OperatePragmaNoise,
    OperateSingleQubit,
    Operation,
    check_qubit,
)
from qpragma.symbolic import CalculatorFloat, CalculatorLike

logger = get_logger(__name__)


def _build_superoperator(
    rows: List[List[float]], name: str, device: Optional[torch.device]
) -> torch.Tensor:
    if device is None:
        device = default_device()
    superop = torch.tensor(rows, dtype=REAL_DTYPE, device=device)
    if is_debug_enabled():
        logger.debug("Validating superoperator of %s", name)
        assert_trace_preserving(superop)
    return superop


def _dephasing_rows(gate_time: float, rate: float) -> List[List[float]]:
    prob = 0.5 * (1.0 - math.exp(-2.0 * gate_time * rate))
    return [
        [1.0, 0.0, 0.0, 0.0],
        [0.0, 1.0 - 2.0 * prob, 0.0, 0.0],
        [0.0, 0.0, 1.0 - 2.0 * prob, 0.0],
        [0.0, 0.0, 0.0, 1.0],
    ]


class _SingleQubitNoise(OperateSingleQubit, OperatePragmaNoise, Operation):
    """Shared payload handling of the closed-form noise pragmas."""

    qubit: int
    gate_time: CalculatorFloat

    def _normalise_fields(self, *parameters: str) -> None:
        object.__setattr__(self, "qubit", check_qubit(self.qubit))
        for name in ("gate_time",) + parameters:
            object.__setattr__(self, name, CalculatorFloat(getattr(self, name)))

    def powercf(self, power: CalculatorLike) -> "_SingleQubitNoise":
        """
        Return the same channel acting for ``power`` times the gate time.

        The gate time is multiplied symbolically; nothing is evaluated.
        """
        return dataclasses.replace(
            self, gate_time=CalculatorFloat(power) * self.gate_time
        )


@dataclass(frozen=True, eq=False)
class PragmaDamping(_SingleQubitNoise):
    """
    Pure amplitude damping, as caused by a zero-temperature environment.

    Attributes
    ----------
    qubit:
        The qubit the damping acts on.
    gate_time:
        Duration of the operation in seconds.
    rate:
        Damping rate in 1/second.
    """

    qubit: int
    gate_time: CalculatorFloat
    rate: CalculatorFloat

    def __post_init__(self) -> None:
        self._normalise_fields("rate")

    def superoperator(self, device: Optional[torch.device] = None) -> torch.Tensor:
        """
        Return the damping superoperator.

        Raises
        ------
        NumericConversionError
            If ``gate_time`` or ``rate`` is symbolic.
        """
        gate_time = self.gate_time.float_value()
        rate = self.rate.float_value()

        prob = 1.0 - math.exp(-1.0 * gate_time * rate)
        sqrt = math.sqrt(1.0 - prob)

        return _build_superoperator(
            [
                [1.0, 0.0, 0.0, prob],
                [0.0, sqrt, 0.0, 0.0],
                [0.0, 0.0, sqrt, 0.0],
                [0.0, 0.0, 0.0, 1.0 - prob],
            ],
            self.hqslang,
            device,
        )

    def probability(self) -> CalculatorFloat:
        """Return 0.5 * (1 - exp(-2 * gate_time * rate))."""
        return ((self.gate_time * self.rate * (-2.0)).exp() * (-1.0) + 1.0) * 0.5


@dataclass(frozen=True, eq=False)
class PragmaDepolarising(_SingleQubitNoise):
    """
    Depolarising noise, as caused by an infinite-temperature environment.

    Attributes
    ----------
    qubit:
        The qubit the depolarisation acts on.
    gate_time:
        Duration of the operation in seconds.
    rate:
        Depolarisation rate in 1/second.
    """

    qubit: int
    gate_time: CalculatorFloat
    rate: CalculatorFloat

    def __post_init__(self) -> None:
        self._normalise_fields("rate")

    def superoperator(self, device: Optional[torch.device] = None) -> torch.Tensor:
        """
        Return the depolarising superoperator.

        Raises
        ------
        NumericConversionError
            If ``gate_time`` or ``rate`` is symbolic.
        """
        gate_time = self.gate_time.float_value()
        rate = self.rate.float_value()

        prob = 0.75 * (1.0 - math.exp(-1.0 * gate_time * rate))
        proba1 = 1.0 - (2.0 / 3.0) * prob
        proba2 = 1.0 - (4.0 / 3.0) * prob
        proba3 = (2.0 / 3.0) * prob

        return _build_superoperator(
            [
                [proba1, 0.0, 0.0, proba3],
                [0.0, proba2, 0.0, 0.0],
                [0.0, 0.0, proba2, 0.0],
                [proba3, 0.0, 0.0, proba1],
            ],
            self.hqslang,
            device,
        )

    def probability(self) -> CalculatorFloat:
        """Return 0.75 * (1 - exp(-gate_time * rate))."""
        return ((self.gate_time * self.rate * (-1.0)).exp() * (-1.0) + 1.0) * 0.75


@dataclass(frozen=True, eq=False)
class PragmaDephasing(_SingleQubitNoise):
    """
    Pure dephasing noise.

    Attributes
    ----------
    qubit:
        The qubit the dephasing acts on.
    gate_time:
        Duration of the operation in seconds.
    rate:
        Dephasing rate in 1/second.
    """

    qubit: int
    gate_time: CalculatorFloat
    rate: CalculatorFloat

    def __post_init__(self) -> None:
        self._normalise_fields("rate")

    def superoperator(self, device: Optional[torch.device] = None) -> torch.Tensor:
        """
        Return the dephasing superoperator.

        Raises
        ------
        NumericConversionError
            If ``gate_time`` or ``rate`` is symbolic.
        """
        gate_time = self.gate_time.float_value()
        rate = self.rate.float_value()
        return _build_superoperator(
            _dephasing_rows(gate_time, rate), self.hqslang, device
        )

    def probability(self) -> CalculatorFloat:
        """Return 0.5 * (1 - exp(-2 * gate_time * rate))."""
        return ((self.gate_time * self.rate * (-2.0)).exp() * (-1.0) + 1.0) * 0.5


@dataclass(frozen=True, eq=False)
class PragmaRandomNoise(_SingleQubitNoise):
    """
    Stochastically unravelled combination of dephasing and depolarisation.

    Averaged over many trajectories the channel reduces to pure dephasing, so
    the superoperator only uses ``dephasing_rate``. The probability is a
    first-order estimate that is linear in the gate time.
    """

    qubit: int
    gate_time: CalculatorFloat
    depolarising_rate: CalculatorFloat
    dephasing_rate: CalculatorFloat

    def __post_init__(self) -> None:
        self._normalise_fields("depolarising_rate", "dephasing_rate")

    def superoperator(self, device: Optional[torch.device] = None) -> torch.Tensor:
        """
        Return the trajectory-averaged (dephasing) superoperator.

        Raises
        ------
        NumericConversionError
            If ``gate_time`` or ``dephasing_rate`` is symbolic.
        """
        gate_time = self.gate_time.float_value()
        rate = self.dephasing_rate.float_value()
        return _build_superoperator(
            _dephasing_rows(gate_time, rate), self.hqslang, device
        )

    def probability(self) -> CalculatorFloat:
        """Return the summed Pauli-X, Y and Z rates times the gate time."""
        rates = [
            self.depolarising_rate / 4.0,
            self.depolarising_rate / 4.0,
            (self.depolarising_rate / 4.0) + self.dephasing_rate,
        ]
        return (rates[0] + rates[1] + rates[2]) * self.gate_time


@dataclass(frozen=True, eq=False)
class PragmaGeneralNoise(OperateSingleQubit, OperatePragma, Operation):
    """
    Noise given by the non-coherent part of a Lindblad equation.

    ``operators`` is a 3x3 complex matrix M whose entry M[i, j] weights the
    term sigma_i rho sigma_j, with (sigma_0, sigma_1, sigma_2) = (X, Y, Z).
    The identity matrix therefore describes X rho X + Y rho Y + Z rho Z.

    Attributes
    ----------
    qubit:
        The qubit the noise acts on.
    gate_time:
        Duration of the operation in seconds.
    rate:
        Error rate in 1/second.
    operators:
        Complex128 tensor of shape (3, 3).
    """

    qubit: int
    gate_time: CalculatorFloat
    rate: CalculatorFloat
    operators: torch.Tensor

    def __post_init__(self) -> None:
        object.__setattr__(self, "qubit", check_qubit(self.qubit))
        object.__setattr__(self, "gate_time", CalculatorFloat(self.gate_time))
        object.__setattr__(self, "rate", CalculatorFloat(self.rate))
        operators = torch.as_tensor(self.operators, dtype=COMPLEX_DTYPE).clone()
        if operators.shape != (3, 3):
            raise ValueError(
                f"operators must have shape (3, 3), got {tuple(operators.shape)}"
            )
        object.__setattr__(self, "operators", operators)


__all__ = [
    "PragmaDamping",
    "PragmaDepolarising",
    "PragmaDephasing",
    "PragmaRandomNoise",
    "PragmaGeneralNoise",
]
