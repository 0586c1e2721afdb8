"""Static capability tags of every operation variant.

Each variant maps to an ordered tuple of tags that starts with "Operation"
and ends with the variant name. Generic circuit code can ask whether an
operation carries a capability without importing the concrete classes.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple, Union

OPERATION_TAGS: Mapping[str, Tuple[str, ...]] = MappingProxyType(
    {
        "PragmaSetNumberOfMeasurements": (
            "Operation",
            "PragmaOperation",
            "PragmaSetNumberOfMeasurements",
        ),
        "PragmaSetStateVector": (
            "Operation",
            "PragmaOperation",
            "PragmaSetStateVector",
        ),
        "PragmaSetDensityMatrix": (
            "Operation",
            "PragmaOperation",
            "PragmaSetDensityMatrix",
        ),
        "PragmaRepeatGate": ("Operation", "PragmaOperation", "PragmaRepeatGate"),
        "PragmaOverrotation": (
            "Operation",
            "MultiQubitOperation",
            "PragmaOperation",
            "PragmaOverrotation",
        ),
        "PragmaBoostNoise": ("Operation", "PragmaOperation", "PragmaBoostNoise"),
        "PragmaStopParallelBlock": (
            "Operation",
            "MultiQubitOperation",
            "PragmaOperation",
            "PragmaStopParallelBlock",
        ),
        "PragmaGlobalPhase": ("Operation", "PragmaOperation", "PragmaGlobalPhase"),
        "PragmaSleep": (
            "Operation",
            "MultiQubitOperation",
            "PragmaOperation",
            "PragmaSleep",
        ),
        "PragmaActiveReset": (
            "Operation",
            "SingleQubitOperation",
            "PragmaOperation",
            "PragmaActiveReset",
        ),
        "PragmaStartDecompositionBlock": (
            "Operation",
            "MultiQubitOperation",
            "PragmaOperation",
            "PragmaStartDecompositionBlock",
        ),
        "PragmaStopDecompositionBlock": (
            "Operation",
            "MultiQubitOperation",
            "PragmaOperation",
            "PragmaStopDecompositionBlock",
        ),
        "PragmaDamping": (
            "Operation",
            "SingleQubitOperation",
            "PragmaOperation",
            "PragmaNoiseOperation",
            "PragmaDamping",
        ),
        "PragmaDepolarising": (
            "Operation",
            "SingleQubitOperation",
            "PragmaOperation",
            "PragmaNoiseOperation",
            "PragmaDepolarising",
        ),
        "PragmaDephasing": (
            "Operation",
            "SingleQubitOperation",
            "PragmaOperation",
            "PragmaNoiseOperation",
            "PragmaDephasing",
        ),
        "PragmaRandomNoise": (
            "Operation",
            "SingleQubitOperation",
            "PragmaOperation",
            "PragmaNoiseOperation",
            "PragmaRandomNoise",
        ),
        # No closed-form channel, so not a PragmaNoiseOperation.
        "PragmaGeneralNoise": (
            "Operation",
            "SingleQubitOperation",
            "PragmaOperation",
            "PragmaGeneralNoise",
        ),
        "PragmaConditional": (
            "Operation",
            "SingleQubitOperation",
            "PragmaOperation",
            "PragmaConditional",
        ),
    }
)


def tags_for(name: str) -> Tuple[str, ...]:
    """
    Return the tags of the variant called ``name``.

    Raises
    ------
    KeyError
        If no variant of that name exists.
    """
    try:
        return OPERATION_TAGS[name]
    except KeyError:
        raise KeyError(f"Unknown operation variant {name!r}.") from None


def has_tag(operation: Union[str, object], tag: str) -> bool:
    """
    Return True if an operation (or a variant name) carries ``tag``.

    Parameters
    ----------
    operation:
        An operation instance exposing ``hqslang``, or a variant name.
    tag:
        Capability tag, e.g. "PragmaNoiseOperation".
    """
    name = operation if isinstance(operation, str) else operation.hqslang
    return tag in tags_for(name)


def variants_with_tag(tag: str) -> Tuple[str, ...]:
    """Return the names of all variants carrying ``tag``, in table order."""
    return tuple(name for name, tags in OPERATION_TAGS.items() if tag in tags)


__all__ = ["OPERATION_TAGS", "tags_for", "has_tag", "variants_with_tag"]
