class LingoCardsException(Exception):
    """Base exception for the application."""


class ValidationError(LingoCardsException):
    """Missing or malformed input; correctable by the caller."""


class InvalidTransitionError(ValidationError):
    """A study deck action that is not allowed in the deck's current state."""


class NotFoundError(LingoCardsException):
    """A referenced record does not exist."""


class PersistenceError(LingoCardsException):
    """A database transaction failed and was rolled back."""


class WebhookError(LingoCardsException):
    """Base class for analysis webhook failures. Never surfaced to API callers."""


class TransportError(WebhookError):
    """Webhook unreachable, timed out, answered non-2xx or with a non-JSON body."""


class UnrecognizedResponseError(WebhookError):
    """Webhook answered, but the body matches none of the known shapes."""
