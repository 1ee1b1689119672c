"""Domain-level exceptions.

Every violated precondition in the procurement domain is expressed as a
subclass of DomainException so the CLI layer can catch them uniformly and
display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule, invariant or state transition was violated."""


class EntityNotFoundError(DomainException):
    """A requested supplier or purchase order does not exist."""
