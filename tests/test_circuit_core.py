"""Tests for the Circuit container."""

from __future__ import annotations

import pytest

from qpragma.circuit import Circuit
from qpragma.errors import QubitMappingError
from qpragma.operations import (
    InvolvedQubits,
    PragmaActiveReset,
    PragmaConditional,
    PragmaDamping,
    PragmaDephasing,
    PragmaGlobalPhase,
    PragmaRepeatGate,
    PragmaSetNumberOfMeasurements,
    PragmaSleep,
)
from qpragma.symbolic import Calculator


def test_add_and_sequence_protocol() -> None:
    """Test appending operations and reading them back."""
    circuit = Circuit()
    circuit.add(PragmaActiveReset(0))
    circuit += PragmaGlobalPhase(0.1)
    assert len(circuit) == 2
    assert circuit[0] == PragmaActiveReset(0)
    assert [op.hqslang for op in circuit] == ["PragmaActiveReset", "PragmaGlobalPhase"]
    assert circuit.ops == (PragmaActiveReset(0), PragmaGlobalPhase(0.1))


def test_iadd_circuit() -> None:
    first = Circuit([PragmaActiveReset(0)])
    first += Circuit([PragmaActiveReset(1), PragmaActiveReset(2)])
    assert len(first) == 3


def test_add_rejects_non_operations() -> None:
    with pytest.raises(TypeError, match="operations"):
        Circuit().add("PragmaActiveReset")


def test_copy_is_independent() -> None:
    circuit = Circuit([PragmaActiveReset(0)])
    clone = circuit.copy()
    clone.add(PragmaActiveReset(1))
    assert len(circuit) == 1
    assert clone != circuit


def test_circuits_are_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Circuit())


class TestInvolvedQubits:
    """Test the union of involved qubits over a circuit."""

    def test_empty_circuit(self) -> None:
        assert Circuit().involved_qubits().is_none

    def test_union_ignores_qubit_free_operations(self, circuit_on_0_and_2) -> None:
        assert circuit_on_0_and_2.involved_qubits() == InvolvedQubits.of([0, 2])

    def test_whole_register_operation_dominates(self) -> None:
        circuit = Circuit([PragmaActiveReset(0), PragmaRepeatGate(2), PragmaSleep([5], 0.1)])
        assert circuit.involved_qubits().is_all

    def test_only_qubit_free_operations(self) -> None:
        circuit = Circuit([PragmaGlobalPhase(0.1), PragmaSetNumberOfMeasurements(10, "ro")])
        assert circuit.involved_qubits().is_none


class TestTransformations:
    """Remapping and substitution return new circuits."""

    def test_remap(self, circuit_on_0_and_2) -> None:
        remapped = circuit_on_0_and_2.remap_qubits({0: 1, 2: 0})
        assert remapped.involved_qubits() == InvolvedQubits.of([0, 1])
        assert circuit_on_0_and_2.involved_qubits() == InvolvedQubits.of([0, 2])

    def test_remap_failure(self, circuit_on_0_and_2) -> None:
        with pytest.raises(QubitMappingError):
            circuit_on_0_and_2.remap_qubits({0: 1})

    def test_substitute(self, circuit_on_0_and_2) -> None:
        assert circuit_on_0_and_2.is_parametrized()
        resolved = circuit_on_0_and_2.substitute_parameters(Calculator({"gate_time": 0.5}))
        assert not resolved.is_parametrized()
        assert resolved[1].gate_time == 0.5
        assert circuit_on_0_and_2.is_parametrized()

    def test_nested_conditional(self, circuit_on_0_and_2) -> None:
        outer = Circuit([PragmaConditional("ro", 0, circuit_on_0_and_2), PragmaActiveReset(1)])
        remapped = outer.remap_qubits({0: 3, 1: 4, 2: 5})
        assert remapped.involved_qubits() == InvolvedQubits.of([3, 4, 5])


class TestTagQueries:
    """Test tag based counting and filtering."""

    @pytest.fixture
    def noisy_circuit(self) -> Circuit:
        return Circuit(
            [
                PragmaActiveReset(0),
                PragmaDamping(0, 0.1, 0.2),
                PragmaDephasing(1, 0.1, 0.2),
                PragmaDamping(1, 0.1, 0.2),
                PragmaSleep([0, 1], 0.1),
            ]
        )

    def test_operation_counts(self, noisy_circuit) -> None:
        assert noisy_circuit.operation_counts() == {
            "PragmaActiveReset": 1,
            "PragmaDamping": 2,
            "PragmaDephasing": 1,
            "PragmaSleep": 1,
        }

    def test_count_occurrences(self, noisy_circuit) -> None:
        assert noisy_circuit.count_occurrences(["PragmaNoiseOperation"]) == 3
        assert noisy_circuit.count_occurrences(["PragmaSleep", "PragmaActiveReset"]) == 2
        assert noisy_circuit.count_occurrences(["PragmaOperation"]) == 5

    def test_filter_by_tag(self, noisy_circuit) -> None:
        noise = noisy_circuit.filter_by_tag("PragmaNoiseOperation")
        assert [op.hqslang for op in noise] == [
            "PragmaDamping",
            "PragmaDephasing",
            "PragmaDamping",
        ]
        assert len(noisy_circuit) == 5


def test_repr_lists_operation_names() -> None:
    circuit = Circuit([PragmaActiveReset(0), PragmaGlobalPhase(0.0)])
    assert repr(circuit) == "Circuit([PragmaActiveReset, PragmaGlobalPhase])"
