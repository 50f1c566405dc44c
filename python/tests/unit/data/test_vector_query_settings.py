# Copyright (c) Microsoft. All rights reserved.

import pytest
from pydantic import ValidationError

from docstore_vector.data import VectorQuerySettings


def test_defaults(settings):
    assert settings.max_limit == 1000
    assert settings.allow_nan is True


def test_from_environment(monkeypatch):
    monkeypatch.setenv("DOCSTORE_VECTOR_MAX_LIMIT", "20")
    monkeypatch.setenv("DOCSTORE_VECTOR_ALLOW_NAN", "false")
    settings = VectorQuerySettings.create()
    assert settings.max_limit == 20
    assert settings.allow_nan is False


def test_from_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DOCSTORE_VECTOR_MAX_LIMIT=7\n", encoding="utf-8")
    settings = VectorQuerySettings.create(env_file_path=str(env_file))
    assert settings.max_limit == 7


def test_explicit_values_take_precedence(monkeypatch):
    monkeypatch.setenv("DOCSTORE_VECTOR_MAX_LIMIT", "20")
    assert VectorQuerySettings.create(max_limit=30).max_limit == 30


@pytest.mark.parametrize("max_limit", [0, 1001])
def test_max_limit_range(max_limit):
    with pytest.raises(ValidationError):
        VectorQuerySettings(max_limit=max_limit)


def test_env_file_does_not_leak_between_instances(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("DOCSTORE_VECTOR_MAX_LIMIT=7\n", encoding="utf-8")
    config_before = dict(VectorQuerySettings.model_config)
    assert VectorQuerySettings.create(env_file_path=str(env_file)).max_limit == 7
    assert VectorQuerySettings.create().max_limit == 1000
    assert dict(VectorQuerySettings.model_config) == config_before
