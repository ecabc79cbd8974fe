"""Unit tests for domain exceptions."""

import pytest

from collabgate.domain.exceptions import (
    CollabGateError,
    Conflict,
    InvalidOperation,
    InvariantViolation,
    MembershipIneligible,
    NotFound,
    PermissionDenied,
    StorageUnavailable,
    Unauthenticated,
    ValidationError,
)


@pytest.mark.parametrize(
    "error_type",
    [
        Unauthenticated,
        PermissionDenied,
        NotFound,
        InvalidOperation,
        ValidationError,
        Conflict,
        StorageUnavailable,
    ],
)
def test_recoverable_errors_inherit_base(error_type) -> None:
    assert issubclass(error_type, CollabGateError)


def test_membership_ineligible_is_permission_denied() -> None:
    """Cross-team targets share the Forbidden classification."""
    with pytest.raises(PermissionDenied):
        raise MembershipIneligible("other team")


def test_invariant_violation_is_not_recoverable_error() -> None:
    """Programming errors must not be caught as domain errors."""
    assert not issubclass(InvariantViolation, CollabGateError)


def test_not_found_message_names_resource() -> None:
    with pytest.raises(NotFound, match="Collection not found: 123") as info:
        raise NotFound("Collection", "123")
    assert info.value.resource == "Collection"
    assert info.value.identifier == "123"


def test_storage_unavailable_is_retryable() -> None:
    assert StorageUnavailable("db down").retryable is True
