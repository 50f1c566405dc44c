# Copyright (c) Microsoft. All rights reserved.

from typing import Annotated, ClassVar

from pydantic import Field

from docstore_vector.const import MAX_NEAREST_NEIGHBOR_LIMIT, SETTINGS_ENV_PREFIX
from docstore_vector.kernel_pydantic import KernelBaseSettings


class VectorQuerySettings(KernelBaseSettings):
    """Vector query settings.

    The settings are first loaded from environment variables with the prefix 'DOCSTORE_VECTOR_'. If the
    environment variables are not found, the settings can be loaded from a .env file with the
    encoding 'utf-8'. If the settings are not found in the .env file, the defaults are used.

    Args:
        max_limit: The largest result limit a query may request, at most 1000.
            (Env var DOCSTORE_VECTOR_MAX_LIMIT)
        allow_nan: Whether a query vector may contain nan elements.
            (Env var DOCSTORE_VECTOR_ALLOW_NAN)
        env_file_path: if provided, the .env settings are read from this file path location
    """

    env_prefix: ClassVar[str] = SETTINGS_ENV_PREFIX

    max_limit: Annotated[int, Field(gt=0, le=MAX_NEAREST_NEIGHBOR_LIMIT)] = MAX_NEAREST_NEIGHBOR_LIMIT
    allow_nan: bool = True
