"""Checks for single-qubit superoperators.

Superoperators act on the row-major vectorised density matrix
(rho_00, rho_01, rho_10, rho_11), so a channel built from Kraus operators
{K_k} has the matrix sum_k K_k (x) conj(K_k).
"""

from __future__ import annotations

from typing import Optional, Sequence

import torch

from qpragma.config import COMPLEX_DTYPE, REAL_DTYPE


def _check_superoperator_shape(superoperator: torch.Tensor) -> None:
    if superoperator.shape != (4, 4):
        raise ValueError(
            f"superoperator must have shape (4, 4), got {tuple(superoperator.shape)}"
        )


def is_trace_preserving(superoperator: torch.Tensor, atol: float = 1e-9) -> bool:
    """
    Check whether a single-qubit superoperator preserves the trace.

    The trace of the output is rho_00 + rho_11, so rows 0 and 3 must add up
    to the vectorised identity [1, 0, 0, 1].

    Parameters
    ----------
    superoperator:
        Real or complex tensor of shape (4, 4).
    atol:
        Absolute tolerance.
    """
    _check_superoperator_shape(superoperator)
    trace_row = superoperator[0] + superoperator[3]
    expected = torch.tensor(
        [1.0, 0.0, 0.0, 1.0], dtype=trace_row.dtype, device=trace_row.device
    )
    return bool(torch.allclose(trace_row, expected, atol=atol, rtol=0.0))


def assert_trace_preserving(superoperator: torch.Tensor, atol: float = 1e-9) -> None:
    """
    Raise if a single-qubit superoperator does not preserve the trace.

    Raises
    ------
    ValueError
        If the trace-preserving condition is violated beyond ``atol``.
    """
    if not is_trace_preserving(superoperator, atol=atol):
        trace_row = (superoperator[0] + superoperator[3]).detach().cpu().tolist()
        raise ValueError(
            "Superoperator is not trace preserving: rows 0 and 3 sum to "
            f"{trace_row}, expected [1, 0, 0, 1] (atol={atol:.1e})"
        )


def superoperator_from_kraus(
    kraus_ops: Sequence[torch.Tensor],
    device: Optional[torch.device] = None,
) -> torch.Tensor:
    """
    Build the superoperator of a single-qubit channel from Kraus operators.

    Parameters
    ----------
    kraus_ops:
        Non-empty sequence of 2x2 tensors.
    device:
        Device of the result. Defaults to the device of the first operator.

    Returns
    -------
    torch.Tensor
        Float64 tensor of shape (4, 4) if the result is real, otherwise a
        complex128 tensor.

    Raises
    ------
    ValueError
        If no operators are given or an operator is not 2x2.
    """
    if len(kraus_ops) == 0:
        raise ValueError("kraus_ops must contain at least one operator")

    if device is None:
        device = kraus_ops[0].device

    superop = torch.zeros((4, 4), dtype=COMPLEX_DTYPE, device=device)
    for i, kraus_op in enumerate(kraus_ops):
        if kraus_op.shape != (2, 2):
            raise ValueError(
                f"Kraus operator {i} must have shape (2, 2), got {tuple(kraus_op.shape)}"
            )
        k = kraus_op.to(dtype=COMPLEX_DTYPE, device=device)
        superop = superop + torch.kron(k, k.conj())

    if torch.allclose(superop.imag, torch.zeros_like(superop.imag), atol=1e-12):
        return superop.real.to(dtype=REAL_DTYPE)
    return superop
