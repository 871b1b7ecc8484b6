"""Domain-level exceptions.

All failures the storefront reports to a user are subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class CollaboratorError(DomainException):
    """A hosted collaborator (database, auth, storage, functions) failed."""


class AuthenticationError(CollaboratorError):
    """The identity provider rejected or failed a request."""


class CheckoutError(CollaboratorError):
    """The order submission service did not accept the order."""
