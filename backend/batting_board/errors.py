from __future__ import annotations


class DomainError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(DomainError):
    status_code = 400


class ForbiddenError(DomainError):
    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class StoreError(DomainError):
    """The key-value store failed, timed out, or holds data we cannot decode."""
    status_code = 500
