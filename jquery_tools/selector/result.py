"""
Script result variants and their conversions.

The browser hands back one of four shapes. ``ScriptResult`` tags the value
with its shape so callers convert it with ``as_scalar`` or ``as_references``
instead of inspecting Python types.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from .errors import ScriptResultError


class ResultKind(str, Enum):
    """Shape of a value returned by an executed script."""

    SCALAR = "scalar"
    ELEMENT = "element"
    SEQUENCE = "sequence"
    COLLECTION = "collection"


@dataclass(frozen=True)
class ScriptResult:
    """
    Value returned by the script executor.

    Attributes:
        kind: Shape of the value
        value: Scalar, element reference, list of references, or a mapping
            with a numeric "length" and index keys "0".."length-1"
    """
    kind: ResultKind
    value: Any = None

    @classmethod
    def scalar(cls, value: Any) -> "ScriptResult":
        return cls(ResultKind.SCALAR, value)

    @classmethod
    def element(cls, reference: Any) -> "ScriptResult":
        return cls(ResultKind.ELEMENT, reference)

    @classmethod
    def sequence(cls, references: List[Any]) -> "ScriptResult":
        return cls(ResultKind.SEQUENCE, list(references))

    @classmethod
    def collection(cls, mapping: dict) -> "ScriptResult":
        return cls(ResultKind.COLLECTION, dict(mapping))


def as_scalar(result: ScriptResult) -> Any:
    """Return the primitive carried by a scalar result."""
    if result.kind is not ResultKind.SCALAR:
        raise ScriptResultError(f"Expected a scalar result, got {result.kind.value}")
    return result.value


def as_references(result: ScriptResult) -> List[Any]:
    """
    Normalize an element-bearing result into an ordered list of references.

    Args:
        result: Collection, sequence or single element result

    Returns:
        Element references in result order

    Raises:
        ScriptResultError: If the result carries no elements
    """
    if result.kind is ResultKind.SEQUENCE:
        return list(result.value)

    if result.kind is ResultKind.ELEMENT:
        return [result.value]

    if result.kind is ResultKind.COLLECTION:
        mapping = result.value
        try:
            length = int(mapping["length"])
            return [mapping[str(i)] for i in range(length)]
        except (KeyError, TypeError, ValueError) as e:
            raise ScriptResultError(
                f"Malformed collection result: {mapping!r}"
            ) from e

    raise ScriptResultError(
        f"Expected elements, got scalar result: {result.value!r}"
    )


__all__ = [
    "ResultKind",
    "ScriptResult",
    "as_scalar",
    "as_references",
]
