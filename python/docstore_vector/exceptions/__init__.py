# Copyright (c) Microsoft. All rights reserved.

from docstore_vector.exceptions.base_exceptions import *  # noqa: F403
from docstore_vector.exceptions.vector_exceptions import *  # noqa: F403
