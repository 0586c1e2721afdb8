"""Process-wide configuration for qpragma.

Settings are read from the environment at import time and can be changed at
runtime:

- ``QPRAGMA_DEBUG``: enables debug mode (``1``, ``true``, ``yes``, ``on``).
  In debug mode computed noise superoperators are checked for trace
  preservation.
- ``QPRAGMA_DEVICE``: torch device for produced tensors (``cpu`` or
  ``cuda``, default ``cpu``).
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

import torch

REAL_DTYPE = torch.float64
COMPLEX_DTYPE = torch.complex128

_DEBUG_ENV_VAR = "QPRAGMA_DEBUG"
_DEVICE_ENV_VAR = "QPRAGMA_DEVICE"
_SUPPORTED_DEVICES = ("cpu", "cuda")

_debug_enabled: bool = os.getenv(_DEBUG_ENV_VAR, "0").lower() in (
    "1",
    "true",
    "yes",
    "on",
)


def is_debug_enabled() -> bool:
    """Return whether qpragma debug mode is currently enabled."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable qpragma debug mode.

    Parameters
    ----------
    enabled:
        Whether to enable debug mode.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Context manager to temporarily enable or disable debug mode.

    Example
    -------
    >>> with debug_context(True):
    ...     # superoperators are validated inside this block
    ...     pass
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev


def default_device() -> torch.device:
    """
    Return the torch device used for tensors produced by qpragma.

    The device is taken from ``QPRAGMA_DEVICE`` on every call.

    Raises
    ------
    RuntimeError
        If ``cuda`` is requested but CUDA is not available.
    ValueError
        If the device name is not supported.
    """
    name = os.getenv(_DEVICE_ENV_VAR, "cpu").lower()
    if name == "cpu":
        return torch.device("cpu")
    if name == "cuda":
        if not torch.cuda.is_available():
            raise RuntimeError(
                "CUDA device requested but torch.cuda.is_available() is False"
            )
        return torch.device("cuda")
    raise ValueError(
        f"Unsupported device name: {name!r}. "
        f"Supported devices: {list(_SUPPORTED_DEVICES)}"
    )


__all__ = [
    "REAL_DTYPE",
    "COMPLEX_DTYPE",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "default_device",
]
