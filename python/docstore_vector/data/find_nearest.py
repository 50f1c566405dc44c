# Copyright (c) Microsoft. All rights reserved.

import logging
import math
from typing import Annotated, Any

from pydantic import Field, ValidationError

from docstore_vector.const import MAX_NEAREST_NEIGHBOR_LIMIT
from docstore_vector.data.distance_measure import DistanceMeasure
from docstore_vector.data.vector import Vector
from docstore_vector.data.vector_query_options import VectorQueryOptions
from docstore_vector.data.vector_query_settings import VectorQuerySettings
from docstore_vector.exceptions import VectorQueryValidationError
from docstore_vector.kernel_pydantic import KernelBaseModel
from docstore_vector.utils.lifecycle_decorators import experimental

logger: logging.Logger = logging.getLogger(__name__)


@experimental
class FindNearest(KernelBaseModel):
    """A validated nearest-neighbor query, ready to be sent to the database."""

    vector_field: Annotated[str, Field(min_length=1)]
    query_vector: Vector
    limit: Annotated[int, Field(gt=0, le=MAX_NEAREST_NEIGHBOR_LIMIT, strict=True)]
    distance_measure: DistanceMeasure
    distance_result_field: str | None = None
    distance_threshold: float | None = None

    @classmethod
    def from_options(
        cls,
        options: VectorQueryOptions,
        settings: VectorQuerySettings | None = None,
    ) -> "FindNearest":
        """Validate the options and build the query.

        Args:
            options: The options of the query.
            settings: The settings to validate against, loaded from the environment when not supplied.

        Returns:
            FindNearest: The validated query.

        Raises:
            VectorQueryValidationError: If the settings or the options are invalid.
        """
        if settings is None:
            try:
                settings = VectorQuerySettings.create()
            except ValidationError as exc:
                logger.error(f"Failed to load the VectorQuerySettings with message: {exc!s}")
                raise VectorQueryValidationError(f"Invalid settings: {exc}") from exc

        if options.limit > settings.max_limit:
            raise VectorQueryValidationError(
                f"The limit must be at most {settings.max_limit}, got {options.limit}."
            )

        query_vector = options.query_vector
        if not isinstance(query_vector, Vector):
            query_vector = Vector(query_vector)
        if not settings.allow_nan and any(math.isnan(element) for element in query_vector):
            raise VectorQueryValidationError("The query vector contains nan elements.")

        try:
            query = cls(
                vector_field=options.vector_field,
                query_vector=query_vector,
                limit=options.limit,
                distance_measure=options.distance_measure,
                distance_result_field=options.distance_result_field,
                distance_threshold=options.distance_threshold,
            )
        except ValidationError as exc:
            raise VectorQueryValidationError(f"Invalid vector query options: {exc}") from exc

        logger.debug(
            f"Built a {query.distance_measure.name} nearest-neighbor query on '{query.vector_field}' "
            f"with limit {query.limit} and {query.query_vector.length} dimensions."
        )
        return query

    def to_dict(self) -> dict[str, Any]:
        """Return the wire representation of the query."""
        find_nearest: dict[str, Any] = {
            "vector_property": {"name": self.vector_field},
            "query_vector": self.query_vector.to_dict(),
            "distance_measure": self.distance_measure.name,
            "limit": {"value": self.limit},
        }
        if self.distance_result_field is not None:
            find_nearest["distance_result_property"] = self.distance_result_field
        if self.distance_threshold is not None:
            find_nearest["distance_threshold"] = {"value": self.distance_threshold}
        return {"find_nearest": find_nearest}
