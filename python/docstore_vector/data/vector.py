# Copyright (c) Microsoft. All rights reserved.

import builtins
import logging
import math
import re
from collections.abc import Iterable, Iterator
from decimal import Decimal
from typing import Any, TypedDict, overload

from pydantic import ConfigDict, field_validator

from docstore_vector.const import VECTOR_MEANING
from docstore_vector.exceptions import VectorComparisonError
from docstore_vector.kernel_pydantic import KernelBaseModel

logger: logging.Logger = logging.getLogger(__name__)


class DoubleValueDict(TypedDict):
    double_value: float


class ArrayValueDict(TypedDict):
    values: list[DoubleValueDict]


class VectorDict(TypedDict):
    """The wire representation of a Vector."""

    array_value: ArrayValueDict
    meaning: int
    exclude_from_indexes: bool


def _is_negative(element: Any) -> bool:
    try:
        return bool(element < 0)
    except TypeError:
        return False


def _to_float(element: Any) -> float:
    try:
        return float(element)
    except OverflowError:
        logger.debug(f"{element!r} is out of the float range, storing infinity instead.")
        return -math.inf if _is_negative(element) else math.inf
    except (TypeError, ValueError, ArithmeticError):
        logger.debug(f"Could not convert {element!r} to a float, storing nan instead.")
        return math.nan


def _format_float(value: float) -> str:
    """Format the value the way the database's JavaScript tooling prints numbers."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "-Infinity" if value < 0 else "Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    if 1e-6 <= abs(value) < 1e-4:
        # repr switches to exponent notation earlier than JavaScript does
        return format(Decimal(repr(value)), "f")
    return re.sub(r"e([+-])0*(\d)", r"e\1\2", repr(value))


class Vector(KernelBaseModel):
    """A vector for use in a nearest-neighbor query.

    The vector is converted to an array value with the vector meaning when it is sent to the
    database. Elements are converted with `float()`; integers beyond the float range are stored
    as signed infinity and any other element that cannot be converted is stored as `nan`, so
    construction never fails on element content.

    Args:
        value: The elements of the vector, in order.
    """

    model_config = ConfigDict(frozen=True)

    value: tuple[float, ...] = ()

    def __init__(self, value: Iterable[Any] = (), **kwargs: Any) -> None:
        """Create a vector from a sequence of numbers."""
        super().__init__(value=value, **kwargs)

    @field_validator("value", mode="before")
    @classmethod
    def convert_elements(cls, value: Any) -> Any:
        """Convert every element to a float, copying the values of another vector."""
        if isinstance(value, Vector):
            return value.value
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return tuple(_to_float(element) for element in value)
        return value

    @property
    def length(self) -> int:
        """The number of elements in the vector."""
        return len(self.value)

    def get(self, index: int) -> float | None:
        """Return the element at index, or None when the index is out of range.

        Negative indexes count from the end, as with any Python sequence.
        """
        try:
            return self.value[index]
        except IndexError:
            return None

    def slice(self, start: int | None = None, end: int | None = None) -> "Vector":
        """Return a new vector over the elements in [start, end)."""
        return Vector(self.value[start:end])

    def equals(self, other: "Vector") -> bool:
        """Compare the elements of two vectors, position by position.

        Raises:
            VectorComparisonError: If other is not a Vector.
        """
        if not isinstance(other, Vector):
            raise VectorComparisonError("Cannot compare Vector to a non-Vector object.")
        if self is other:
            return True
        return len(self.value) == len(other.value) and all(
            left == right for left, right in zip(self.value, other.value)
        )

    def to_dict(self) -> VectorDict:
        """Return the wire representation of the vector."""
        return {
            "array_value": {"values": [{"double_value": element} for element in self.value]},
            "meaning": VECTOR_MEANING,
            "exclude_from_indexes": True,
        }

    def __len__(self) -> int:
        return len(self.value)

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.value)

    @overload
    def __getitem__(self, index: int) -> float: ...

    @overload
    def __getitem__(self, index: builtins.slice) -> "Vector": ...

    def __getitem__(self, index: int | builtins.slice) -> "float | Vector":
        if isinstance(index, slice):
            return Vector(self.value[index])
        return self.value[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Vector):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.value)

    def __str__(self) -> str:
        return f"Vector<{', '.join(_format_float(element) for element in self.value)}>"
