"""Pytest configuration and shared fixtures for qpragma tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- Reset of the global debug mode between tests
- A small reference circuit touching qubits 0 and 2
"""

import os

import numpy as np
import pytest
import torch

from qpragma.circuit import Circuit
from qpragma.config import set_debug_enabled
from qpragma.operations import PragmaActiveReset, PragmaDamping, PragmaGlobalPhase


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function")
def torch_rng() -> torch.Generator:
    """Provide a deterministic CPU torch RNG for tests."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    generator = torch.Generator(device="cpu")
    generator.manual_seed(seed)
    return generator


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(scope="function", autouse=True)
def reset_debug_mode():
    """Run every test with debug mode off unless the test enables it."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


@pytest.fixture
def circuit_on_0_and_2() -> Circuit:
    """Circuit whose operations touch exactly qubits 0 and 2."""
    return Circuit(
        [
            PragmaActiveReset(0),
            PragmaDamping(2, "gate_time", 0.01),
            PragmaGlobalPhase(0.5),
        ]
    )
