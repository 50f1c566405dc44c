# Copyright (c) Microsoft. All rights reserved.

from docstore_vector.data.distance_measure import DistanceMeasure, ThresholdComparison
from docstore_vector.data.find_nearest import FindNearest
from docstore_vector.data.vector import Vector, VectorDict
from docstore_vector.data.vector_query_options import VectorQueryOptions
from docstore_vector.data.vector_query_settings import VectorQuerySettings

__all__ = [
    "DistanceMeasure",
    "FindNearest",
    "ThresholdComparison",
    "Vector",
    "VectorDict",
    "VectorQueryOptions",
    "VectorQuerySettings",
]
