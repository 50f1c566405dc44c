# Copyright (c) Microsoft. All rights reserved.

from pytest import fixture

from docstore_vector.data import DistanceMeasure, Vector, VectorQueryOptions, VectorQuerySettings


@fixture(autouse=True)
def clear_vector_settings_env(monkeypatch):
    for name in ("DOCSTORE_VECTOR_MAX_LIMIT", "DOCSTORE_VECTOR_ALLOW_NAN"):
        monkeypatch.delenv(name, raising=False)


@fixture
def vector() -> Vector:
    return Vector([1, 2, 3])


@fixture
def query_options(vector) -> VectorQueryOptions:
    return VectorQueryOptions(
        vector_field="embedding",
        query_vector=vector,
        limit=10,
        distance_measure=DistanceMeasure.COSINE,
    )


@fixture
def settings(tmp_path) -> VectorQuerySettings:
    return VectorQuerySettings.create(env_file_path=str(tmp_path / "missing.env"))
