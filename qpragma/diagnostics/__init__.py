"""Diagnostics for noise-channel superoperators."""

from .core import (
    assert_trace_preserving,
    is_trace_preserving,
    superoperator_from_kraus,
)

__all__ = [
    "is_trace_preserving",
    "assert_trace_preserving",
    "superoperator_from_kraus",
]
