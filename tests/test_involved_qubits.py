"""Tests for the qubits reported by every operation variant."""

import pytest
import torch

from qpragma.circuit import Circuit
from qpragma.operations import (
    InvolvedKind,
    InvolvedQubits,
    PragmaActiveReset,
    PragmaBoostNoise,
    PragmaConditional,
    PragmaDamping,
    PragmaDephasing,
    PragmaDepolarising,
    PragmaGeneralNoise,
    PragmaGlobalPhase,
    PragmaOverrotation,
    PragmaRandomNoise,
    PragmaRepeatGate,
    PragmaSetDensityMatrix,
    PragmaSetNumberOfMeasurements,
    PragmaSetStateVector,
    PragmaSleep,
    PragmaStartDecompositionBlock,
    PragmaStopDecompositionBlock,
    PragmaStopParallelBlock,
)


class TestInvolvedQubitsValue:
    """Test the InvolvedQubits value type."""

    def test_constructors(self):
        assert InvolvedQubits.none().kind is InvolvedKind.NONE
        assert InvolvedQubits.all().is_all
        assert InvolvedQubits.of([2, 0, 2]).qubits == frozenset({0, 2})

    def test_union_rules(self):
        none = InvolvedQubits.none()
        all_ = InvolvedQubits.all()
        some = InvolvedQubits.of([1])
        assert none.union(some) == some
        assert some.union(none) == some
        assert some.union(all_).is_all
        assert none.union(none).is_none
        assert some.union(InvolvedQubits.of([3])) == InvolvedQubits.of([1, 3])


@pytest.mark.parametrize(
    "operation",
    [
        PragmaSetNumberOfMeasurements(100, "ro"),
        PragmaBoostNoise(1.5),
        PragmaGlobalPhase("phi"),
    ],
)
def test_operations_involving_no_qubits(operation):
    assert operation.involved_qubits() == InvolvedQubits.none()


@pytest.mark.parametrize(
    "operation",
    [
        PragmaSetStateVector(torch.tensor([1.0, 0.0, 0.0, 0.0])),
        PragmaSetDensityMatrix(torch.eye(2) / 2),
        PragmaRepeatGate(3),
    ],
)
def test_operations_involving_all_qubits(operation):
    assert operation.involved_qubits() == InvolvedQubits.all()


@pytest.mark.parametrize(
    "operation, expected",
    [
        (PragmaActiveReset(4), {4}),
        (PragmaDamping(1, 0.01, 2.0), {1}),
        (PragmaDepolarising(2, 0.01, 2.0), {2}),
        (PragmaDephasing(3, 0.01, 2.0), {3}),
        (PragmaRandomNoise(0, 0.01, 1.0, 2.0), {0}),
        (PragmaGeneralNoise(5, 0.01, 1.0, torch.eye(3)), {5}),
        (PragmaOverrotation("RotateX", [0, 1], 0.1, 0.2), {0, 1}),
        (PragmaStopParallelBlock([2, 1, 2], 1e-6), {1, 2}),
        (PragmaSleep([0, 3], "t_sleep"), {0, 3}),
        (PragmaStartDecompositionBlock([0, 1], {0: 1, 1: 0}), {0, 1}),
        (PragmaStopDecompositionBlock([6]), {6}),
    ],
)
def test_operations_involving_explicit_qubits(operation, expected):
    involved = operation.involved_qubits()
    assert involved.kind is InvolvedKind.SET
    assert involved.qubits == frozenset(expected)


def test_involved_qubits_is_deterministic():
    """Repeated calls on the same value give the same answer."""
    op = PragmaSleep([3, 1], 0.5)
    assert op.involved_qubits() == op.involved_qubits()


def test_conditional_reports_circuit_qubits(circuit_on_0_and_2):
    op = PragmaConditional("ro", 0, circuit_on_0_and_2)
    assert op.involved_qubits() == InvolvedQubits.of([0, 2])


def test_conditional_with_whole_register_operation():
    circuit = Circuit([PragmaActiveReset(1), PragmaRepeatGate(2)])
    assert PragmaConditional("ro", 1, circuit).involved_qubits().is_all


def test_conditional_with_empty_circuit():
    assert PragmaConditional("ro", 0, Circuit()).involved_qubits().is_none
