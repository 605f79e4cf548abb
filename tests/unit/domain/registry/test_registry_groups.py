"""Unit tests for Registry group management."""

import pytest

from acr.domain.registry.model.bootstrap import Bootstrap
from acr.domain.registry.service.registry import Registry
from acr.domain.shared.error import NotFoundError, NotMemberError


def _make_registry() -> Registry:
    return Registry.from_bootstrap(Bootstrap())


class TestCreateGroup:
    def test_generates_sequential_names(self):
        registry = _make_registry()

        assert registry.create_group() == "group1"
        assert registry.create_group() == "group2"

    def test_new_group_has_no_rights(self):
        registry = _make_registry()
        group = registry.create_group()

        assert registry.group_rights(group) == []

    def test_group_counter_is_independent_of_right_counter(self):
        registry = _make_registry()
        registry.create_right()
        registry.create_right()

        assert registry.create_group() == "group1"

    def test_names_are_not_reused_after_delete(self):
        registry = _make_registry()
        registry.delete_group(registry.create_group())

        assert registry.create_group() == "group2"

    def test_groups_lists_in_insertion_order(self):
        registry = _make_registry()
        group = registry.create_group()

        assert registry.groups() == ["admin", "manager", "basic", group]


class TestDeleteGroup:
    def test_unknown_group_raises_not_found(self):
        registry = _make_registry()

        with pytest.raises(NotFoundError) as exc_info:
            registry.delete_group("nobody")
        assert exc_info.value.code == "group_not_found"

    def test_removes_group(self):
        registry = _make_registry()
        registry.delete_group("manager")

        assert "manager" not in registry.groups()
        with pytest.raises(NotFoundError):
            registry.group_rights("manager")

    def test_cascades_to_user_memberships(self):
        registry = _make_registry()
        group = registry.create_group()
        registry.add_user_to_group("patriot007", group)

        registry.delete_group(group)

        assert group not in registry.user_groups("patriot007")

    def test_cascade_covers_all_users(self):
        registry = _make_registry()
        registry.delete_group("manager")

        assert registry.user_groups("admin") == ["admin", "basic"]
        assert registry.user_groups("sobakajozhec") == ["basic"]
        assert registry.user_groups("patriot007") == ["basic"]

    def test_default_group_can_be_deleted(self):
        registry = _make_registry()
        registry.delete_group("basic")

        assert "basic" not in registry.groups()
        for user in registry.users():
            assert set(registry.user_groups(user)) <= set(registry.groups())


class TestGroupRights:
    def test_returns_bootstrap_rights(self):
        registry = _make_registry()

        assert registry.group_rights("basic") == ["play games", "view site"]

    def test_unknown_group_raises_not_found(self):
        with pytest.raises(NotFoundError):
            _make_registry().group_rights("ghosts")

    def test_returned_list_is_a_copy(self):
        registry = _make_registry()
        registry.group_rights("admin").append("play games")

        assert registry.group_rights("admin") == ["delete users"]


class TestAddRightToGroup:
    def test_appends_right(self):
        registry = _make_registry()
        registry.add_right_to_group("play games", "admin")

        assert registry.group_rights("admin") == ["delete users", "play games"]

    def test_unknown_group_raises_not_found(self):
        registry = _make_registry()

        with pytest.raises(NotFoundError) as exc_info:
            registry.add_right_to_group("play games", "ghosts")
        assert exc_info.value.code == "group_not_found"

    def test_unknown_right_raises_not_found(self):
        registry = _make_registry()

        with pytest.raises(NotFoundError) as exc_info:
            registry.add_right_to_group("fly", "admin")
        assert exc_info.value.code == "right_not_found"
        assert registry.group_rights("admin") == ["delete users"]

    def test_group_is_checked_before_right(self):
        registry = _make_registry()

        with pytest.raises(NotFoundError) as exc_info:
            registry.add_right_to_group("fly", "ghosts")
        assert exc_info.value.code == "group_not_found"

    def test_duplicate_grant_is_kept(self):
        registry = _make_registry()
        registry.add_right_to_group("delete users", "admin")

        assert registry.group_rights("admin") == ["delete users", "delete users"]


class TestRemoveRightFromGroup:
    def test_removes_right(self):
        registry = _make_registry()
        registry.remove_right_from_group("play games", "basic")

        assert registry.group_rights("basic") == ["view site"]

    def test_removes_only_first_occurrence(self):
        registry = _make_registry()
        registry.add_right_to_group("play games", "basic")

        registry.remove_right_from_group("play games", "basic")

        assert registry.group_rights("basic") == ["view site", "play games"]

    def test_unknown_group_raises_not_found(self):
        with pytest.raises(NotFoundError):
            _make_registry().remove_right_from_group("play games", "ghosts")

    def test_right_not_in_group_raises_not_member(self):
        registry = _make_registry()

        with pytest.raises(NotMemberError) as exc_info:
            registry.remove_right_from_group("delete users", "basic")
        assert exc_info.value.code == "right_not_in_group"

    def test_second_removal_raises_not_member(self):
        registry = _make_registry()
        registry.remove_right_from_group("delete users", "admin")

        with pytest.raises(NotMemberError):
            registry.remove_right_from_group("delete users", "admin")
