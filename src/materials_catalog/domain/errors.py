"""Catalog error taxonomy."""


class CatalogError(Exception):
    """Base class for catalog failures."""


class ValidationError(CatalogError):
    """Missing or malformed input."""


class UploadRejected(ValidationError):
    """An uploaded file failed validation."""


class InvalidType(UploadRejected):
    """Uploaded file has a content type outside the allow-list."""


class TooLarge(UploadRejected):
    """Uploaded file exceeds the size ceiling."""


class Unauthorized(CatalogError):
    """Request carries no valid session."""


class InvalidCredentials(Unauthorized):
    """Email or password did not match a stored user."""


class NotFound(CatalogError):
    """Requested id has no matching row."""


class CategoryInUse(CatalogError):
    """Category still has products referencing it."""


class StoreError(CatalogError):
    """Relational store failure."""


class StorageUnavailable(CatalogError):
    """Object store misconfigured or unreachable."""
