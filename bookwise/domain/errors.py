"""Error types raised across the recommendation and identity flows."""


class InvalidQueryError(ValueError):
    """The request did not carry a usable ``query``."""

    def __init__(self, message: str = "Query is required") -> None:
        super().__init__(message)


class RecommendationError(Exception):
    """Base exception for failures of the generative recommendation path."""

    def __init__(self, message: str, provider: str | None = None) -> None:
        self.provider = provider
        super().__init__(message)


class BackendUnavailableError(RecommendationError):
    """The generative backend could not be reached or refused the request."""


class MalformedModelOutputError(RecommendationError):
    """The backend answered, but the answer holds no usable recommendations."""


class IdentityError(Exception):
    """Raised by identity adapters with a message suitable for end users."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.code = code
        super().__init__(message)


class NotAuthorizedError(IdentityError):
    """Bad credentials or an expired / revoked token."""
