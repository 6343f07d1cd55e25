"""
DomainValidationError - Raised when a payload or business rule is violated.
Maps to: HTTP 400 Bad Request

Payload errors carry a code of the form ``<ENTITY>.<REASON>``, for example
``ADD_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY``.
"""

from typing import Optional

NOT_CONTAIN_NEEDED_PROPERTY = "NOT_CONTAIN_NEEDED_PROPERTY"
NOT_MEET_DATA_TYPE_SPECIFICATION = "NOT_MEET_DATA_TYPE_SPECIFICATION"


class DomainValidationError(Exception):
    """Exception raised for domain validation errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.code = code or message


class MissingPropertyError(DomainValidationError):
    """A required payload field is absent."""

    def __init__(self, entity: str):
        code = f"{entity}.{NOT_CONTAIN_NEEDED_PROPERTY}"
        super().__init__(code, code)
        self.entity = entity


class InvalidDataTypeError(DomainValidationError):
    """A payload field has the wrong primitive type."""

    def __init__(self, entity: str):
        code = f"{entity}.{NOT_MEET_DATA_TYPE_SPECIFICATION}"
        super().__init__(code, code)
        self.entity = entity
