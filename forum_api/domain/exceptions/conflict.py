"""
ConflictError - Raised when a unique value (e.g. username) is already taken.
Maps to: HTTP 400 Bad Request
"""


class ConflictError(Exception):
    def __init__(self, message: str = "Resource already exists"):
        super().__init__(message)
