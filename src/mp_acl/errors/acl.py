"""ACL errors — invalid registration, evaluation and settings input."""

from __future__ import annotations

import json
from typing import Any


class AclError(Exception):
    """Root of every error raised by the ACL engine.

    Each subclass carries a ``default_code`` slug and puts the names it is
    about (role, resource, access, setting, ...) in ``detail`` so that the
    error can be logged as structured data with :meth:`to_dict`.
    ``str(err)`` is the same payload as one line of JSON.
    """

    default_code: str = "acl_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload


class ConfigurationError(AclError):
    """The ACL was configured or queried with invalid input."""

    default_code = "configuration_error"


class UnknownRoleError(ConfigurationError):
    """A role name is referenced before it was registered."""

    default_code = "unknown_role"

    def __init__(self, role: str, message: str | None = None, **kwargs: Any) -> None:
        super().__init__(
            message or f"Role '{role}' does not exist in ACL",
            detail={"role": role},
            **kwargs,
        )
        self.role = role


class UnknownResourceError(ConfigurationError):
    """A resource name is referenced before it was registered."""

    default_code = "unknown_resource"

    def __init__(self, resource: str, **kwargs: Any) -> None:
        super().__init__(
            f"Resource '{resource}' does not exist in ACL",
            detail={"resource": resource},
            **kwargs,
        )
        self.resource = resource


class UnknownAccessError(ConfigurationError):
    """An access name was not declared on the resource."""

    default_code = "unknown_access"

    def __init__(self, resource: str, access: str, **kwargs: Any) -> None:
        super().__init__(
            f"Access '{access}' does not exist in resource '{resource}'",
            detail={"resource": resource, "access": access},
            **kwargs,
        )
        self.resource = resource
        self.access = access


class InvalidAccessError(ConfigurationError):
    """The access argument is neither a string nor a list of strings."""

    default_code = "invalid_access"

    def __init__(self, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Access must be a string or a list of strings, got {type(value).__name__}",
            detail={"type": type(value).__name__},
            **kwargs,
        )
        self.value = value


class InvalidComponentError(ConfigurationError, TypeError):
    """A role or resource argument has no retrievable name."""

    default_code = "invalid_component"

    def __init__(self, kind: str, value: object, **kwargs: Any) -> None:
        super().__init__(
            f"Object passed as {kind} must be a string or expose a {kind} name, "
            f"got {type(value).__name__}",
            detail={"kind": kind, "type": type(value).__name__},
            **kwargs,
        )
        self.kind = kind
        self.value = value


class PredicateArgumentTypeError(ConfigurationError, TypeError):
    """A caller-supplied predicate argument has the wrong type."""

    default_code = "predicate_argument_type"

    def __init__(
        self,
        check: str,
        parameter: str,
        expected: type,
        actual: type,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Parameter '{parameter}' passed when checking {check} is "
            f"{actual.__qualname__}, predicate expects {expected.__qualname__}",
            detail={
                "parameter": parameter,
                "expected": expected.__qualname__,
                "actual": actual.__qualname__,
            },
            **kwargs,
        )
        self.parameter = parameter
        self.expected = expected
        self.actual = actual


class MissingPredicateArgumentsError(ConfigurationError):
    """Some, but not all, required predicate arguments could be bound."""

    default_code = "missing_predicate_arguments"

    def __init__(self, check: str, missing: list[str], **kwargs: Any) -> None:
        super().__init__(
            f"Not all required predicate parameters were provided when checking "
            f"{check}: missing {', '.join(missing)}",
            detail={"missing": list(missing)},
            **kwargs,
        )
        self.missing = list(missing)


class FrozenAclError(ConfigurationError):
    """The ACL was frozen and no longer accepts configuration changes."""

    default_code = "acl_frozen"

    def __init__(self, operation: str, **kwargs: Any) -> None:
        super().__init__(
            f"ACL is frozen, '{operation}' is not allowed",
            detail={"operation": operation},
            **kwargs,
        )
        self.operation = operation


class SettingsError(ConfigurationError):
    """Engine settings could not be loaded."""

    default_code = "settings_error"


class MissingRequiredSettingError(SettingsError):
    """A setting without a default is absent from the environment."""

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str, **kwargs: Any) -> None:
        super().__init__(
            f"Required ACL setting '{setting_name}' is missing",
            detail={"setting": setting_name},
            **kwargs,
        )
        self.setting_name = setting_name


class InvalidSettingValueError(SettingsError):
    """A setting is present but unusable, such as an unknown default action."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str, **kwargs: Any) -> None:
        super().__init__(
            f"ACL setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
            **kwargs,
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


class AclWarning(UserWarning):
    """Base category for recoverable ACL evaluation problems."""


class ExcessPredicateArgumentsWarning(AclWarning):
    """More parameters were supplied than the predicate accepts."""


class MissingPredicateArgumentsWarning(AclWarning):
    """The predicate needs arguments but none were supplied."""


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
