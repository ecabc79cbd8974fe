"""Domain exceptions."""


class CollabGateError(Exception):
    """Base exception for collabgate. Recoverable by the caller."""

    pass


class Unauthenticated(CollabGateError):
    """No actor could be resolved for the request."""

    pass


class PermissionDenied(CollabGateError):
    """Actor standing is insufficient for the requested action."""

    pass


class MembershipIneligible(PermissionDenied):
    """Target user cannot collaborate on the collection (different team)."""

    pass


class NotFound(CollabGateError):
    """Requested resource was not found."""

    def __init__(self, resource: str, identifier: str) -> None:
        super().__init__(f"{resource} not found: {identifier}")
        self.resource = resource
        self.identifier = identifier


class InvalidOperation(CollabGateError):
    """Action is structurally disallowed for valid, authorized input."""

    pass


class ValidationError(CollabGateError):
    """Validation failed for input data."""

    pass


class Conflict(CollabGateError):
    """Concurrent mutation invalidated an assumption."""

    pass


class StorageUnavailable(CollabGateError):
    """Transient storage failure. The caller may retry."""

    retryable = True


class InvariantViolation(RuntimeError):
    """Programming invariant broken (unknown level, dangling reference).

    Not a CollabGateError: it is not recoverable by the caller.
    """

    pass
