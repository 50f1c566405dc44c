# Copyright (c) Microsoft. All rights reserved.

from enum import Enum, IntEnum
from typing import Any

from docstore_vector.exceptions import VectorQueryValidationError


class ThresholdComparison(str, Enum):
    """How a document's distance is compared to the distance threshold."""

    LESS_THAN_OR_EQUAL = "le"
    GREATER_THAN_OR_EQUAL = "ge"


class DistanceMeasure(IntEnum):
    """The distance measure used to compare a stored vector with the query vector.

    The values match the `FindNearest.DistanceMeasure` enumeration of the query protocol.
    """

    EUCLIDEAN = 1
    COSINE = 2
    DOT_PRODUCT = 3

    @property
    def threshold_comparison(self) -> ThresholdComparison:
        """The direction in which `distance_threshold` filters documents for this measure.

        EUCLIDEAN and COSINE keep documents with `distance <= threshold`, DOT_PRODUCT keeps
        documents with `distance >= threshold`.
        """
        if self is DistanceMeasure.DOT_PRODUCT:
            return ThresholdComparison.GREATER_THAN_OR_EQUAL
        return ThresholdComparison.LESS_THAN_OR_EQUAL

    @classmethod
    def parse(cls, value: Any) -> "DistanceMeasure":
        """Resolve a member, its integer value or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError as exc:
                raise VectorQueryValidationError(f"Unknown distance measure: {value!r}") from exc
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError as exc:
                raise VectorQueryValidationError(f"Unknown distance measure: {value!r}") from exc
        raise VectorQueryValidationError(f"Unknown distance measure: {value!r}")
