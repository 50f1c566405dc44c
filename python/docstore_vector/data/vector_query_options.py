# Copyright (c) Microsoft. All rights reserved.

from typing import Annotated, Any

from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from docstore_vector.data.distance_measure import DistanceMeasure
from docstore_vector.data.vector import Vector
from docstore_vector.kernel_pydantic import KernelBaseModel


class VectorQueryOptions(KernelBaseModel):
    """Options for a nearest-neighbor vector query.

    Fields can be set by name or by their camelCase alias, for instance `vector_field` or `vectorField`.
    Range contracts are checked when the query is built, see `FindNearest.from_options`.

    Args:
        vector_field: The name of the vector field to search on.
        query_vector: The value used to measure the distance from `vector_field` values in the documents.
        limit: The upper bound of documents to return, a positive integer with a maximum value of 1000.
        distance_measure: The type of distance calculated when performing the query.
        distance_result_field: Optionally, the name of a field that will be set on each returned document
            and contain the computed distance for that document.
        distance_threshold: Optionally, a threshold beyond which less similar documents are not returned.
            For EUCLIDEAN and COSINE documents with `distance <= distance_threshold` are returned,
            for DOT_PRODUCT documents with `distance >= distance_threshold`.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    vector_field: str
    query_vector: Vector | list[float]
    limit: Annotated[int, Field(strict=True)]
    distance_measure: DistanceMeasure
    distance_result_field: str | None = None
    distance_threshold: float | None = None

    @field_validator("distance_measure", mode="before")
    @classmethod
    def parse_distance_measure(cls, value: Any) -> DistanceMeasure:
        """Accept the distance measure by name as well as by value."""
        return DistanceMeasure.parse(value)
