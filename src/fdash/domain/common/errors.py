from __future__ import annotations


class NotFoundError(Exception):
    pass


class InvalidInputError(ValueError):
    pass


class InconsistentReferenceError(Exception):
    pass


class StorageFailureError(Exception):
    pass
