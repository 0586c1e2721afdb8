"""Closed set of operation variants, keyed by name."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Type

from qpragma.operations.base import Operation
from qpragma.operations.conditional import PragmaConditional
from qpragma.operations.noise import (
    PragmaDamping,
    PragmaDephasing,
    PragmaDepolarising,
    PragmaGeneralNoise,
    PragmaRandomNoise,
)
from qpragma.operations.pragma import (
    PragmaActiveReset,
    PragmaBoostNoise,
    PragmaGlobalPhase,
    PragmaOverrotation,
    PragmaRepeatGate,
    PragmaSetDensityMatrix,
    PragmaSetNumberOfMeasurements,
    PragmaSetStateVector,
    PragmaSleep,
    PragmaStartDecompositionBlock,
    PragmaStopDecompositionBlock,
    PragmaStopParallelBlock,
)
from qpragma.operations.tags import OPERATION_TAGS

OPERATION_VARIANTS: Mapping[str, Type[Operation]] = MappingProxyType(
    {
        cls.__name__: cls
        for cls in (
            PragmaSetNumberOfMeasurements,
            PragmaSetStateVector,
            PragmaSetDensityMatrix,
            PragmaRepeatGate,
            PragmaOverrotation,
            PragmaBoostNoise,
            PragmaStopParallelBlock,
            PragmaGlobalPhase,
            PragmaSleep,
            PragmaActiveReset,
            PragmaStartDecompositionBlock,
            PragmaStopDecompositionBlock,
            PragmaDamping,
            PragmaDepolarising,
            PragmaDephasing,
            PragmaRandomNoise,
            PragmaGeneralNoise,
            PragmaConditional,
        )
    }
)

if set(OPERATION_VARIANTS) != set(OPERATION_TAGS):
    raise ImportError(
        "Operation variants and tag table disagree: "
        f"{sorted(set(OPERATION_VARIANTS) ^ set(OPERATION_TAGS))}"
    )


def variant_class(name: str) -> Type[Operation]:
    """
    Return the class of the variant called ``name``.

    Raises
    ------
    KeyError
        If no variant of that name exists.
    """
    try:
        return OPERATION_VARIANTS[name]
    except KeyError:
        raise KeyError(f"Unknown operation variant {name!r}.") from None


__all__ = ["OPERATION_VARIANTS", "variant_class"]
