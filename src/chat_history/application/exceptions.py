from __future__ import annotations


class AppError(Exception):
    """Base application error."""

    def __init__(self, detail: str = "") -> None:
        self.detail = detail
        super().__init__(detail)


class ValidationError(AppError):
    pass


class InvalidReadMarkerError(ValidationError, ValueError):
    """Text is not a millisecond-precision RFC 3339 timestamp."""


class StorageError(AppError):
    """Base for failures that propagate out of save/update."""


class DirectoryResolutionError(StorageError):
    pass


class SerializationError(StorageError):
    pass


class IoWriteError(StorageError):
    pass
