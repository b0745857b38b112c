"""ACL error hierarchy — public re-export surface.

Hierarchy::

    AclError
    └── ConfigurationError
        ├── UnknownRoleError
        ├── UnknownResourceError
        ├── UnknownAccessError
        ├── InvalidAccessError
        ├── InvalidComponentError        (also a TypeError)
        ├── PredicateArgumentTypeError   (also a TypeError)
        ├── MissingPredicateArgumentsError
        ├── FrozenAclError
        └── SettingsError
            ├── MissingRequiredSettingError
            └── InvalidSettingValueError

Recoverable problems are reported with :mod:`warnings` using
:class:`AclWarning` subclasses.
"""

from mp_acl.errors.acl import (
    AclError,
    AclWarning,
    ConfigurationError,
    ExcessPredicateArgumentsWarning,
    FrozenAclError,
    InvalidAccessError,
    InvalidComponentError,
    InvalidSettingValueError,
    MissingPredicateArgumentsError,
    MissingPredicateArgumentsWarning,
    MissingRequiredSettingError,
    PredicateArgumentTypeError,
    SettingsError,
    UnknownAccessError,
    UnknownResourceError,
    UnknownRoleError,
)

__all__ = [
    "AclError",
    "AclWarning",
    "ConfigurationError",
    "ExcessPredicateArgumentsWarning",
    "FrozenAclError",
    "InvalidAccessError",
    "InvalidComponentError",
    "InvalidSettingValueError",
    "MissingPredicateArgumentsError",
    "MissingPredicateArgumentsWarning",
    "MissingRequiredSettingError",
    "PredicateArgumentTypeError",
    "SettingsError",
    "UnknownAccessError",
    "UnknownResourceError",
    "UnknownRoleError",
]
