"""
Exceptions raised by the service layer.

Repository signals are translated into these at the service boundary; the
HTTP layer maps each of them to a status code.
"""


class ServiceException(Exception):
    """Base exception for service operation errors."""
    pass


class ResourceNotFoundException(ServiceException):
    """Raised when a requested resource is not found."""
    pass


class DatabaseException(ServiceException):
    """Raised when a write is refused because other data still references the target."""
    pass


class UnauthorizedException(ServiceException):
    """Raised when the current caller cannot be resolved to a user."""
    pass
