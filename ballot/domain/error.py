"""Domain errors.

Routes map these onto HTTP status codes in ``ballot.interface.api.errors``.
"""


class DomainError(Exception):
    """Base for every error a service or use case raises on purpose."""


class InvalidInputError(DomainError):
    """Caller-supplied data breaks a domain rule (400)."""


class NotAuthorizedError(DomainError):
    """Role or ownership does not allow the action (403)."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class ContentDeletedException(InvalidInputError):
    """Edit of soft-deleted content (400)."""

    def __init__(self, resource: str, resource_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"Cannot edit deleted {resource} {resource_id}")


class InactivePollError(DomainError):
    """Comment on a poll that is closed (403)."""

    def __init__(self, poll_id: str):
        self.poll_id = poll_id
        super().__init__(f"Poll is not active: {poll_id}")


class NotFoundError(DomainError):
    """Missing resource (404)."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
