# Copyright (c) Microsoft. All rights reserved.

from docstore_vector.exceptions.base_exceptions import DocstoreVectorException


class VectorException(DocstoreVectorException):
    """Base class for all Vector value errors."""

    pass


class VectorComparisonError(VectorException, TypeError):
    """Raised when a Vector is compared to an object that is not a Vector."""

    pass


class VectorQueryException(DocstoreVectorException):
    """Base class for all vector query errors."""

    pass


class VectorQueryValidationError(VectorQueryException, ValueError):
    """Raised when a nearest-neighbor query cannot be built from the supplied options."""

    pass


__all__ = [
    "VectorComparisonError",
    "VectorException",
    "VectorQueryException",
    "VectorQueryValidationError",
]
