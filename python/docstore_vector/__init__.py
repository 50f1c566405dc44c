# Copyright (c) Microsoft. All rights reserved.

from docstore_vector.data import (
    DistanceMeasure,
    FindNearest,
    ThresholdComparison,
    Vector,
    VectorQueryOptions,
    VectorQuerySettings,
)

__version__ = "0.1.0"

__all__ = [
    "DistanceMeasure",
    "FindNearest",
    "ThresholdComparison",
    "Vector",
    "VectorQueryOptions",
    "VectorQuerySettings",
    "__version__",
]
