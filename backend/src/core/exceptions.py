"""
Custom Exception Hierarchy
Domain and application-level exceptions
"""


class DomainException(Exception):
    """Base exception for all domain errors"""

    code = "error"


class AuthenticationException(DomainException):
    """Authentication failed"""

    code = "unauthenticated"


class AuthorizationException(DomainException):
    """User not authorized for this operation

    The reason is kept for logs only; callers see a generic message.
    """

    code = "forbidden"

    def __init__(self, reason: str = "insufficient permissions"):
        self.reason = reason
        super().__init__("Access denied")


class ValidationException(DomainException):
    """Data validation failed"""

    code = "validation_error"

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class InvalidStatusException(ValidationException):
    """Status value is outside the application status enumeration"""

    code = "invalid_status"

    def __init__(self, value: object, message: str = "unknown application status"):
        self.value = value
        super().__init__("status", f"{message}: {value!r}")


class TerminalStateException(DomainException):
    """Transition attempted from a terminal application status"""

    code = "terminal_state"

    def __init__(self, application_id, status: str):
        self.application_id = application_id
        self.status = status
        super().__init__(
            f"Application {application_id} is in terminal status '{status}' and cannot change"
        )


class RepositoryException(DomainException):
    """Database operation failed"""

    code = "storage_error"


class ResourceNotFoundException(DomainException):
    """Requested resource not found"""

    code = "not_found"

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")


class DuplicateResourceException(DomainException):
    """Resource already exists"""

    code = "conflict"

    def __init__(self, resource_type: str, field: str, value: str):
        self.resource_type = resource_type
        self.field = field
        self.value = value
        super().__init__(f"{resource_type} with {field}='{value}' already exists")
