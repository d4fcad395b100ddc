"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class NotFoundError(DomainException):
    """A requested entity does not exist (or has been soft-deleted)."""


class StorageError(DomainException):
    """The image store failed to read or write a blob."""
