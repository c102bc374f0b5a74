"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or business rule was invalid."""


class DuplicateProductError(ValidationError):
    """A product was added to a purchase order that already has a line for it."""


class AlreadyPlacedError(DomainException):
    """The purchase order has already been placed."""


class EmptyOrderError(DomainException):
    """A purchase order without lines cannot be placed."""


class LineNotFoundError(DomainException):
    """The purchase order has no line for the requested product."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
