"""Domain-level exceptions.

Business rule violations raised by the catalog, cart and pricing code are
subclasses of DomainException so the CLI layer can catch them uniformly.
Customer-facing hook paths never raise: they report through notices.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
