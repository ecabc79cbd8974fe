"""Unit tests for membership filters."""

from collabgate.domain.value_objects import MembershipFilter, PermissionLevel


def test_empty_filter_matches_all() -> None:
    assert MembershipFilter().matches("Anyone", PermissionLevel.READ)


def test_query_is_case_insensitive_substring() -> None:
    f = MembershipFilter(query="JEN")
    assert f.matches("Jenny Doe", PermissionLevel.READ)
    assert f.matches("Mary Jensen", PermissionLevel.READ)
    assert not f.matches("Won't find", PermissionLevel.READ)


def test_permission_is_exact() -> None:
    f = MembershipFilter(permission=PermissionLevel.READ_WRITE)
    assert f.matches("Jenny", PermissionLevel.READ_WRITE)
    assert not f.matches("Jenny", PermissionLevel.MAINTAINER)


def test_filters_compose_with_and() -> None:
    f = MembershipFilter(query="jen", permission=PermissionLevel.MAINTAINER)
    assert f.matches("Jenny", PermissionLevel.MAINTAINER)
    assert not f.matches("Jenny", PermissionLevel.READ)
    assert not f.matches("Sam", PermissionLevel.MAINTAINER)
