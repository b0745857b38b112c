"""Config settings – AclSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from mp_acl.errors import InvalidSettingValueError
from mp_acl.model import Decision


@dataclasses.dataclass
class AclSettings:
    """Engine-wide defaults, read from ``ACL_*`` environment variables.

    ``ACL_DEFAULT_ACTION``
        Decision when no rule matches (``allow`` / ``deny``).
    ``ACL_NO_ARGUMENTS_DEFAULT_ACTION``
        Decision when a matched rule's predicate needs arguments and the
        caller supplied none.
    ``ACL_FREEZE_AFTER_BUILD``
        Freeze the engine once :meth:`MemoryAcl.build` has run.

    Values are checked on construction, so a bad default action fails when
    the settings are loaded rather than on the first access check.
    """

    _prefix: ClassVar[str] = "ACL"

    default_action: str = "allow"
    no_arguments_default_action: str = "allow"
    freeze_after_build: bool = False

    def __post_init__(self) -> None:
        for name in ("default_action", "no_arguments_default_action"):
            value = getattr(self, name)
            try:
                Decision.of(value)
            except ValueError as exc:
                raise InvalidSettingValueError(
                    name, value, "expected 'allow' or 'deny'", cause=exc
                ) from exc

    @property
    def default_decision(self) -> Decision:
        return Decision.of(self.default_action)

    @property
    def no_arguments_decision(self) -> Decision:
        return Decision.of(self.no_arguments_default_action)


__all__ = ["AclSettings"]
