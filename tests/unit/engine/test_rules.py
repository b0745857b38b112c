"""Unit tests for rule registration — allow / deny and wildcard fan-out."""

from __future__ import annotations

import pytest

from mp_acl import Decision, MemoryAcl
from mp_acl.engine import Registry, RuleTable
from mp_acl.errors import (
    ConfigurationError,
    InvalidAccessError,
    UnknownAccessError,
    UnknownResourceError,
    UnknownRoleError,
)
from mp_acl.model import Resource, Role, RuleKey


def _table() -> tuple[Registry, RuleTable]:
    registry = Registry()
    registry.add_role(Role("guests"))
    registry.add_resource(Resource("invoices"))
    registry.add_access("invoices", ["index", "profile"])
    return registry, RuleTable(registry)


# ---------------------------------------------------------------------------
# RuleTable.set_rule
# ---------------------------------------------------------------------------


class TestSetRule:
    def test_single_access_written(self) -> None:
        _, table = _table()
        keys = table.set_rule("guests", "invoices", "index", Decision.ALLOW)
        assert keys == [RuleKey("guests", "invoices", "index")]
        rule = table.get(RuleKey("guests", "invoices", "index"))
        assert rule is not None and rule.decision is Decision.ALLOW

    def test_access_list_written(self) -> None:
        _, table = _table()
        table.set_rule("guests", "invoices", ["index", "profile"], Decision.DENY)
        assert len(table) == 2

    def test_wildcard_access_needs_no_declaration(self) -> None:
        _, table = _table()
        table.set_rule("guests", "invoices", "*", Decision.ALLOW)
        assert RuleKey("guests", "invoices", "*") in table

    def test_catch_all_rule(self) -> None:
        _, table = _table()
        table.set_rule("guests", "*", "*", Decision.DENY)
        assert RuleKey("guests", "*", "*") in table

    def test_later_write_overwrites(self) -> None:
        _, table = _table()
        table.set_rule("guests", "invoices", "index", Decision.ALLOW)
        table.set_rule("guests", "invoices", "index", Decision.DENY)
        rule = table.get(RuleKey("guests", "invoices", "index"))
        assert rule is not None and rule.decision is Decision.DENY

    def test_unknown_role(self) -> None:
        _, table = _table()
        with pytest.raises(UnknownRoleError):
            table.set_rule("ghost", "invoices", "index", Decision.ALLOW)
        assert len(table) == 0

    def test_unknown_resource(self) -> None:
        _, table = _table()
        with pytest.raises(UnknownResourceError):
            table.set_rule("guests", "ghost", "index", Decision.ALLOW)
        assert len(table) == 0

    def test_unknown_access_names_first_offender(self) -> None:
        _, table = _table()
        with pytest.raises(UnknownAccessError) as exc_info:
            table.set_rule("guests", "invoices", ["index", "edit", "drop"], Decision.ALLOW)
        assert exc_info.value.access == "edit"
        assert "Access 'edit' does not exist in resource 'invoices'" in exc_info.value.message
        assert len(table) == 0

    def test_malformed_access(self) -> None:
        _, table = _table()
        with pytest.raises(InvalidAccessError):
            table.set_rule("guests", "invoices", 7, Decision.ALLOW)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# MemoryAcl.allow / deny
# ---------------------------------------------------------------------------


class TestAllowDeny:
    def _acl(self) -> MemoryAcl:
        acl = MemoryAcl(default_action=Decision.DENY)
        acl.add_role("guests")
        acl.add_role("users")
        acl.add_resource("invoices", ["index", "profile"])
        return acl

    def test_allow_then_check(self) -> None:
        acl = self._acl()
        acl.allow("guests", "invoices", "index")
        assert acl.is_allowed("guests", "invoices", "index") is True

    def test_deny_then_check(self) -> None:
        acl = MemoryAcl(default_action=Decision.ALLOW)
        acl.add_role("guests")
        acl.add_resource("invoices", "index")
        acl.deny("guests", "invoices", "index")
        assert acl.is_allowed("guests", "invoices", "index") is False

    def test_registration_errors_are_configuration_errors(self) -> None:
        acl = self._acl()
        for call in (
            lambda: acl.allow("ghost", "invoices", "index"),
            lambda: acl.deny("guests", "ghost", "index"),
            lambda: acl.allow("guests", "invoices", "delete"),
        ):
            with pytest.raises(ConfigurationError):
                call()
        assert acl.is_allowed("guests", "invoices", "index") is False

    def test_wildcard_role_fans_out_to_registered_roles(self) -> None:
        acl = self._acl()
        acl.deny("*", "invoices", "profile")
        acl.default_action = Decision.ALLOW
        assert acl.is_allowed("guests", "invoices", "profile") is False
        assert acl.is_allowed("users", "invoices", "profile") is False

    def test_wildcard_role_is_a_snapshot(self) -> None:
        """Roles registered after a ``"*"`` rule do not receive it."""
        acl = self._acl()
        acl.allow("*", "invoices", "index")
        acl.add_role("latecomers")
        assert acl.is_allowed("users", "invoices", "index") is True
        assert acl.is_allowed("latecomers", "invoices", "index") is False

    def test_wildcard_role_with_no_roles_is_noop(self) -> None:
        acl = MemoryAcl(default_action=Decision.DENY)
        acl.add_resource("invoices", "index")
        acl.allow("*", "invoices", "index")
        assert acl.is_allowed("anyone", "invoices", "index") is False

    def test_role_and_resource_objects(self) -> None:
        acl = self._acl()
        acl.allow(Role("guests"), Resource("invoices"), ["index", "profile"])
        assert acl.is_allowed("guests", "invoices", "profile") is True
