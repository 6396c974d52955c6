"""Structural delta entry variants"""

from __future__ import annotations

from typing import Any, Literal, Union

from pydantic import BaseModel

# Array-shaped deltas carry this key; it is never a change
ARRAY_MARKER = "_t"
ARRAY_TYPE = "a"
# Deleted array elements are keyed "_<index>" when an addition may share the index
DELETED_INDEX_PREFIX = "_"


class Addition(BaseModel):
    """[new]"""

    kind: Literal["addition"] = "addition"
    new: Any


class Deletion(BaseModel):
    """[old, 0, 0]"""

    kind: Literal["deletion"] = "deletion"
    old: Any


class Modification(BaseModel):
    """[old, new]"""

    kind: Literal["modification"] = "modification"
    old: Any
    new: Any


class NestedDelta(BaseModel):
    """A nested object or array delta"""

    kind: Literal["nested"] = "nested"
    delta: dict[str, Any]

    @property
    def is_array(self) -> bool:
        return self.delta.get(ARRAY_MARKER) == ARRAY_TYPE


DeltaEntry = Union[Addition, Deletion, Modification, NestedDelta]


def classify_delta_entry(value: Any) -> DeltaEntry | None:
    """Decide the variant of a raw delta entry by its shape.

    Returns None for shapes that match no variant.
    """
    if isinstance(value, dict):
        return NestedDelta(delta=value)
    if not isinstance(value, list):
        return None
    if len(value) == 1:
        return Addition(new=value[0])
    if len(value) == 2:
        return Modification(old=value[0], new=value[1])
    if len(value) == 3 and value[1] == 0 and value[2] == 0:
        return Deletion(old=value[0])
    return None
