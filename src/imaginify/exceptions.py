"""Exception hierarchy for Imaginify.

All application exceptions inherit from ImaginifyError so callers can catch
every application error with a single base class while keeping specific
types for individual failures.
"""

from typing import Any


class ImaginifyError(Exception):
    """Base exception for all Imaginify errors.

    Carries an error_code for structured logging and an optional context
    dictionary with the values that caused the failure.
    """

    error_code: str = "IMAGINIFY_ERROR"

    def __init__(
        self,
        message: str,
        *,
        error_code: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if error_code:
            self.error_code = error_code
        self.context = context or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logs and notifications."""
        return {
            "error": self.error_code,
            "message": self.message,
            "context": self.context,
        }


# =============================================================================
# Design System Errors
# =============================================================================


class DesignSystemError(ImaginifyError):
    """Base exception for design-system errors."""

    error_code = "DESIGN_SYSTEM_ERROR"


class TokenError(DesignSystemError):
    """Base exception for token lookup and definition errors."""

    error_code = "TOKEN_ERROR"


class UnknownTokenError(TokenError):
    """Raised by a strict lookup when a token key is not defined."""

    error_code = "UNKNOWN_TOKEN"

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(
            f"Unknown {kind} token: {key!r}",
            context={"kind": kind, "key": key},
        )
        self.kind = kind
        self.key = key


class TokenDefinitionError(TokenError):
    """Raised at import time when a token table is malformed."""

    error_code = "TOKEN_DEFINITION_ERROR"

    def __init__(self, kind: str, key: str, reason: str) -> None:
        super().__init__(
            f"Invalid {kind} token {key!r}: {reason}",
            context={"kind": kind, "key": key, "reason": reason},
        )


class InvalidColorError(DesignSystemError):
    """Raised when a string cannot be parsed as a hex or rgb(a) color."""

    error_code = "INVALID_COLOR"

    def __init__(self, value: str) -> None:
        super().__init__(
            f"Invalid color value: {value!r}",
            context={"value": value},
        )


class ThemeContextError(DesignSystemError):
    """Raised when the theme context is read outside a provider."""

    error_code = "THEME_CONTEXT_ERROR"

    def __init__(self, message: str = "use_theme() must be called within a theme_provider()") -> None:
        super().__init__(message)


class PresenceTransitionError(DesignSystemError):
    """Raised when an overlay presence receives an event it cannot handle."""

    error_code = "PRESENCE_TRANSITION_ERROR"

    def __init__(self, state: str, event: str) -> None:
        super().__init__(
            f"Cannot {event} from presence state {state!r}",
            context={"state": state, "event": event},
        )


# =============================================================================
# Integration Errors
# =============================================================================


class IntegrationError(ImaginifyError):
    """Base exception for failures reported by external collaborators."""

    error_code = "INTEGRATION_ERROR"


class UploadError(IntegrationError):
    """Raised when an image upload fails."""

    error_code = "UPLOAD_ERROR"


class SaveError(IntegrationError):
    """Raised when persisting an image record fails."""

    error_code = "SAVE_ERROR"


class InsufficientCreditsError(IntegrationError):
    """Raised when a user's credit balance cannot cover a transformation."""

    error_code = "INSUFFICIENT_CREDITS"

    def __init__(self, required: int, available: int) -> None:
        super().__init__(
            f"Insufficient credits: required {required}, available {available}",
            context={"required": required, "available": available},
        )
        self.required = required
        self.available = available
