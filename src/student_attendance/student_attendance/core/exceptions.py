from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthenticationError(DomainError):
    """Raised when credentials or bearer tokens are invalid."""


class NotFoundError(DomainError):
    """Raised when a requested row does not exist for the user."""


class AccountDeletionError(DomainError):
    """Raised when one step of the account deletion sequence fails.

    Steps completed before the failing one are not rolled back.
    """

    def __init__(self, message: str, *, step: str):
        super().__init__(message)
        self.step = step
