"""Domain layer errors.

Every domain error carries a stable ``code`` that the interface layer
exposes in the error envelope.
"""


class DomainError(Exception):
    """Base domain error."""

    code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, code: str | None = None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code


class ValidationError(DomainError):
    """Domain validation error (a field value breaks a rule)."""

    def __init__(self, code: str, message: str):
        super().__init__(message, code=code)


class BusinessRuleViolationError(DomainError):
    """The target exists but a business rule forbids the operation."""

    pass


class ContentDeletedException(BusinessRuleViolationError):
    """Raised when attempting to edit deleted content."""

    def __init__(self, resource: str, resource_id: int):
        super().__init__(
            f"Cannot edit deleted {resource} {resource_id}",
            code=f"{resource.upper()}_DELETED",
        )


class EditWindowExpiredError(BusinessRuleViolationError):
    """Raised when a post is edited after its edit window closed."""

    code = "EDIT_WINDOW_EXPIRED"

    def __init__(self, post_id: int):
        super().__init__(f"The edit window for post {post_id} has expired.")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: int):
        self.resource = resource
        self.identifier = identifier
        super().__init__(
            f"{resource.capitalize()} not found: {identifier}",
            code=f"{resource.upper()}_NOT_FOUND",
        )
