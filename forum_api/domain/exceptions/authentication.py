"""
AuthenticationError - Raised when credentials do not match.
Maps to: HTTP 401 Unauthorized
"""


class AuthenticationError(Exception):
    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)
