# Copyright (c) Microsoft. All rights reserved.
import json
import logging

from docstore_vector import DistanceMeasure, FindNearest, Vector, VectorQueryOptions


def main():
    logging.basicConfig(level=logging.DEBUG)

    query_vector = Vector([0.12, -0.5, 0.33, 1])
    print(f"Query vector: {query_vector}, {query_vector.length} dimensions")
    print(json.dumps(query_vector.to_dict(), indent=2))

    options = VectorQueryOptions(
        vector_field="embedding",
        query_vector=query_vector,
        limit=5,
        distance_measure=DistanceMeasure.COSINE,
        distance_result_field="vector_distance",
        distance_threshold=0.25,
    )
    print(f"Documents with distance {options.distance_measure.threshold_comparison.value} 0.25 are returned")

    query = FindNearest.from_options(options)
    print("Find nearest request")
    print(json.dumps(query.to_dict(), indent=2))


if __name__ == "__main__":
    main()
