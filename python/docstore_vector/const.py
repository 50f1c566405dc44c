# Copyright (c) Microsoft. All rights reserved.

from typing import Final

VECTOR_MEANING: Final[int] = 31
MAX_NEAREST_NEIGHBOR_LIMIT: Final[int] = 1000
SETTINGS_ENV_PREFIX: Final[str] = "DOCSTORE_VECTOR_"
