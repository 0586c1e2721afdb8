"""Tests for superoperator diagnostics."""

import pytest
import torch

from qpragma.diagnostics import (
    assert_trace_preserving,
    is_trace_preserving,
    superoperator_from_kraus,
)


def test_identity_is_trace_preserving() -> None:
    superop = torch.eye(4, dtype=torch.float64)
    assert is_trace_preserving(superop)
    assert_trace_preserving(superop)


def test_scaled_identity_is_not_trace_preserving() -> None:
    superop = 0.9 * torch.eye(4, dtype=torch.float64)
    assert not is_trace_preserving(superop)
    with pytest.raises(ValueError, match="not trace preserving"):
        assert_trace_preserving(superop)


def test_tolerance() -> None:
    superop = torch.eye(4, dtype=torch.float64)
    superop[0, 0] += 1e-6
    assert not is_trace_preserving(superop)
    assert is_trace_preserving(superop, atol=1e-5)


def test_wrong_shape_rejected() -> None:
    with pytest.raises(ValueError, match="shape"):
        is_trace_preserving(torch.eye(2))


class TestSuperoperatorFromKraus:
    """Test building superoperators from Kraus operators."""

    def test_unitary_bit_flip(self) -> None:
        pauli_x = torch.tensor([[0.0, 1.0], [1.0, 0.0]], dtype=torch.float64)
        superop = superoperator_from_kraus([pauli_x])
        assert superop.dtype == torch.float64
        expected = torch.flip(torch.eye(4, dtype=torch.float64), dims=[1])
        assert torch.allclose(superop, expected)
        assert is_trace_preserving(superop)

    def test_complex_result_kept_complex(self) -> None:
        phase = torch.tensor([[1.0, 0.0], [0.0, 1j]], dtype=torch.complex128)
        superop = superoperator_from_kraus([phase])
        assert superop.dtype == torch.complex128
        assert superop[1, 1] == -1j

    def test_random_kraus_pair_trace_preserving(self, torch_rng) -> None:
        """A Kraus pair from an isometry gives a trace preserving channel."""
        matrix = torch.randn(4, 2, dtype=torch.float64, generator=torch_rng)
        isometry, _ = torch.linalg.qr(matrix)
        superop = superoperator_from_kraus([isometry[:2], isometry[2:]])
        assert is_trace_preserving(superop, atol=1e-10)

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError, match="at least one"):
            superoperator_from_kraus([])

    def test_wrong_shape_rejected(self) -> None:
        with pytest.raises(ValueError, match="Kraus operator 1"):
            superoperator_from_kraus([torch.eye(2), torch.eye(3)])
