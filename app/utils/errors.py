"""Error types raised by services and routers.

Every error carries the HTTP status it maps to; ``main.py`` renders them as
``{"message": ...}`` bodies.
"""
from fastapi import status

class AppError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

class ValidationError(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Invalid data"

class InvalidOperation(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Operation not allowed"

class DuplicateIdentifier(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Identifier already exists"

class PasswordMismatch(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Passwords do not match"

class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid username or password"

class Unauthorized(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Unauthorized"

class Forbidden(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    message = "Forbidden"

class NotFound(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Not found"
