"""Exception hierarchy for brandmark.

Only the external-call boundary raises these. The prompt-construction core
resolves bad input through fallback constants instead.
"""

from __future__ import annotations


class BrandmarkError(Exception):
    """Base exception for all brandmark errors."""

    def __init__(self, message: str, details: str | None = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}\n  Details: {self.details}"
        return self.message


class ConfigurationError(BrandmarkError):
    """Raised when an API key or setting needed by a collaborator is missing."""


class GenerationError(BrandmarkError):
    """Raised when the image-generation service fails or returns nothing usable."""


class SuggestionError(BrandmarkError):
    """Raised when the text-suggestion service fails."""


class StorageError(BrandmarkError):
    """Raised when an asset cannot be stored."""


class AuthenticationRequired(BrandmarkError):
    """Raised when persistence is required but no user is authenticated."""


class InsufficientTokens(BrandmarkError):
    """Raised when the token gate refuses a paid generation call."""
