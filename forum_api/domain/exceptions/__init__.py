"""
DOMAIN EXCEPTIONS - Business rule violations

These exceptions are raised by domain logic and caught by presentation layer.
Presentation layer maps them to HTTP status codes.
"""

from forum_api.domain.exceptions.entity_not_found import EntityNotFoundError
from forum_api.domain.exceptions.access_denied import AccessDeniedError
from forum_api.domain.exceptions.authentication import AuthenticationError
from forum_api.domain.exceptions.conflict import ConflictError
from forum_api.domain.exceptions.validation_error import (
    DomainValidationError,
    InvalidDataTypeError,
    MissingPropertyError,
)

__all__ = [
    "EntityNotFoundError",
    "AccessDeniedError",
    "AuthenticationError",
    "ConflictError",
    "DomainValidationError",
    "InvalidDataTypeError",
    "MissingPropertyError",
]
