"""Application exceptions mapped to HTTP error responses."""


class AppException(Exception):
    """Base application exception carrying its HTTP status code."""

    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None):
        """Initialize exception, falling back to the class default message."""
        self.message = message or self.default_message
        super().__init__(self.message)


class BadRequestException(AppException):
    """Malformed or incomplete input."""

    status_code = 400
    default_message = "Bad request"


class UnauthorizedException(AppException):
    """Missing or wrong credentials."""

    status_code = 401
    default_message = "Unauthorized"


class ForbiddenException(AppException):
    """Authenticated but not allowed."""

    status_code = 403
    default_message = "Forbidden"


class NotFoundException(AppException):
    """Resource not found."""

    status_code = 404
    default_message = "Resource not found"


class ProfileNotFoundException(NotFoundException):
    """No profile matches the given public code or external id."""

    default_message = "Profile not found"


class InvalidCredentialsException(UnauthorizedException):
    """Admin email/password or owner id/PIN did not match."""

    default_message = "Invalid credentials"


class ProfileBannedException(ForbiddenException):
    """Profile is banned and its owner may not sign in."""

    default_message = "Account is banned"


class InvalidUploadException(BadRequestException):
    """Uploaded file refused before anything was stored."""

    default_message = "Invalid upload"
