"""Exceptions raised by the catalog and registry in strict mode."""


class LibraryError(Exception):
    """Base class for library errors."""


class InvalidRecordError(LibraryError, ValueError):
    """A None record was passed to add or register."""


class DuplicateRecordError(LibraryError, ValueError):
    """A record with the same key is already stored."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} with key {key!r} already exists")
