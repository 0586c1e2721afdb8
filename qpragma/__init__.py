"""qpragma - PRAGMA operations for a quantum circuit intermediate representation."""

__version__ = "0.1.0"

# Circuit container
from .circuit import Circuit

# Configuration
from .config import (
    debug_context,
    default_device,
    is_debug_enabled,
    set_debug_enabled,
)

# Diagnostics
from .diagnostics import (
    assert_trace_preserving,
    is_trace_preserving,
    superoperator_from_kraus,
)

# Errors
from .errors import (
    CalculatorError,
    NumericConversionError,
    OperationError,
    QubitMappingError,
    UnknownVariableError,
)

# Operations
from .operations import (
    OPERATION_TAGS,
    OPERATION_VARIANTS,
    InvolvedKind,
    InvolvedQubits,
    Operation,
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
    has_tag,
    tags_for,
    variant_class,
    variants_with_tag,
)

# Symbolic parameters
from .symbolic import Calculator, CalculatorFloat

__all__ = [
    # Version
    "__version__",
    # Symbolic parameters
    "Calculator",
    "CalculatorFloat",
    # Errors
    "OperationError",
    "QubitMappingError",
    "NumericConversionError",
    "CalculatorError",
    "UnknownVariableError",
    # Operations
    "Operation",
    "InvolvedKind",
    "InvolvedQubits",
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
    # Circuit container
    "Circuit",
    # Configuration
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "default_device",
    # Diagnostics
    "is_trace_preserving",
    "assert_trace_preserving",
    "superoperator_from_kraus",
]
