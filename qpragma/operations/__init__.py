"""PRAGMA operations and the capability interfaces they implement."""

from .base import (
    CircuitLike,
    InvolvedKind,
    InvolvedQubits,
    InvolveQubits,
    Operate,
    OperateMultiQubit,
    OperatePragma,
    OperatePragmaNoise,
    OperateSingleQubit,
    Operation,
    Substitute,
)
from .conditional import PragmaConditional
from .noise import (
    PragmaDamping,
    PragmaDephasing,
    PragmaDepolarising,
    PragmaGeneralNoise,
    PragmaRandomNoise,
)
from .pragma import (
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
from .registry import OPERATION_VARIANTS, variant_class
from .tags import OPERATION_TAGS, has_tag, tags_for, variants_with_tag

__all__ = [
    # Interfaces
    "CircuitLike",
    "InvolvedKind",
    "InvolvedQubits",
    "InvolveQubits",
    "Operate",
    "OperateMultiQubit",
    "OperatePragma",
    "OperatePragmaNoise",
    "OperateSingleQubit",
    "Operation",
    "Substitute",
    # Pragmas
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
    # Noise pragmas
    "PragmaDamping",
    "PragmaDepolarising",
    "PragmaDephasing",
    "PragmaRandomNoise",
    "PragmaGeneralNoise",
    "PragmaConditional",
    # Registry and tags
    "OPERATION_TAGS",
    "OPERATION_VARIANTS",
    "tags_for",
    "has_tag",
    "variants_with_tag",
    "variant_class",
]
