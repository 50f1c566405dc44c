# Copyright (c) Microsoft. All rights reserved.


class DocstoreVectorException(Exception):
    """The base class for all docstore_vector exceptions."""

    pass


__all__ = ["DocstoreVectorException"]
