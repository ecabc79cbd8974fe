"""Permission levels for collection memberships."""

from enum import StrEnum

from collabgate.domain.exceptions import InvariantViolation, ValidationError


class PermissionLevel(StrEnum):
    """Ordered grant on a collection: read < read_write < maintainer."""

    READ = "read"
    READ_WRITE = "read_write"
    MAINTAINER = "maintainer"

    @classmethod
    def parse(cls, value: str) -> "PermissionLevel":
        """Parse external input, e.g. a request body or query parameter."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown permission level: {value!r}") from None


_RANKS = {
    PermissionLevel.READ: 0,
    PermissionLevel.READ_WRITE: 1,
    PermissionLevel.MAINTAINER: 2,
}


def rank(level: PermissionLevel) -> int:
    """Position of level in the total order."""
    try:
        return _RANKS[level]
    except KeyError:
        raise InvariantViolation(f"Unrecognized permission level: {level!r}") from None


def at_least(level: PermissionLevel, required: PermissionLevel) -> bool:
    """True iff level grants at least as much as required."""
    return rank(level) >= rank(required)
