"""Predicates – declared parameter descriptors for rule predicates.

A predicate's parameters are described once, when the rule is registered, as
an ordered tuple of :class:`Param`.  Evaluation binds each parameter against
a fixed set of sources (the role object, the resource object, the caller's
named parameters) without inspecting the callable again.

Two ways to build a :class:`Predicate`::

    # explicit descriptor
    Predicate.declare(check_owner, Param("user", User), Param("doc", Document))

    # derived from the signature, once, at registration time
    Predicate.from_callable(lambda user, quota=10: user.quota < quota)
"""
from __future__ import annotations

import builtins
import dataclasses
import inspect
import typing
from typing import Any, Callable

from mp_acl.errors import ConfigurationError, MissingPredicateArgumentsError
from mp_acl.observability.logging import get_logger

_log = get_logger(__name__)

_POSITIONAL_ONLY = inspect.Parameter.POSITIONAL_ONLY
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


@dataclasses.dataclass(frozen=True)
class Param:
    """One declared predicate parameter.

    ``expected`` is the class a bound value must be an instance of; ``None``
    accepts anything.  ``positional`` marks positional-only parameters, which
    are passed positionally instead of by keyword.
    """

    name: str
    expected: type | None = None
    required: bool = True
    positional: bool = False


@dataclasses.dataclass(frozen=True)
class Predicate:
    """A callable gating a rule, together with its declared parameters."""

    func: Callable[..., Any]
    params: tuple[Param, ...] = ()

    @classmethod
    def declare(cls, func: Callable[..., Any], *params: Param | str) -> Predicate:
        """Build a predicate from an explicit parameter list.

        Plain strings are shorthand for an untyped, required parameter.
        """
        if not callable(func):
            raise ConfigurationError(
                f"Predicate must be callable, got {type(func).__name__}"
            )
        return cls(func, tuple(p if isinstance(p, Param) else Param(p) for p in params))

    @classmethod
    def from_callable(cls, func: Callable[..., Any]) -> Predicate:
        """Derive the parameter list from *func*'s signature.

        Only annotations that resolve to a class are kept as the expected
        type; ``*args`` / ``**kwargs`` are ignored.
        """
        if not callable(func):
            raise ConfigurationError(
                f"Predicate must be callable, got {type(func).__name__}"
            )
        try:
            signature = inspect.signature(func)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(
                f"Cannot read the signature of predicate {func!r}", cause=exc
            ) from exc
        hints = _type_hints(func)
        params: list[Param] = []
        for parameter in signature.parameters.values():
            if parameter.kind in _VARIADIC:
                continue
            expected = hints.get(parameter.name, parameter.annotation)
            if expected is inspect.Parameter.empty:
                expected = None
            params.append(
                Param(
                    name=parameter.name,
                    expected=expected if isinstance(expected, type) else None,
                    required=parameter.default is inspect.Parameter.empty,
                    positional=parameter.kind is _POSITIONAL_ONLY,
                )
            )
        return cls(func, tuple(params))

    @property
    def required_count(self) -> int:
        return sum(1 for p in self.params if p.required)

    @property
    def name(self) -> str:
        return getattr(self.func, "__qualname__", None) or repr(self.func)

    def __call__(self, arguments: dict[str, Any] | None = None) -> Any:
        """Invoke the predicate with already-bound *arguments* (by name).

        Positional-only parameters are filled left to right.  Once one of
        them is left to its default, later positional-only values cannot be
        placed and are dropped, so the callable sees its own defaults.
        """
        arguments = arguments or {}
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        gap: str | None = None
        for param in self.params:
            bound = param.name in arguments
            if not param.positional:
                if bound:
                    kwargs[param.name] = arguments[param.name]
                continue
            if not bound:
                if param.required:
                    raise MissingPredicateArgumentsError(f"predicate {self.name}", [param.name])
                gap = gap or param.name
                continue
            if gap is not None:
                _log.warning(
                    "acl.predicate_argument_dropped",
                    predicate=self.name,
                    parameter=param.name,
                    unbound=gap,
                )
                continue
            args.append(arguments[param.name])
        return self.func(*args, **kwargs)


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    """Resolved annotations of *func*.

    When one annotation cannot be resolved the rest are still returned:
    plain names are looked up in the function's module, anything else is
    left out.
    """
    target = func if inspect.isfunction(func) or inspect.ismethod(func) else type(func).__call__
    try:
        return typing.get_type_hints(target)
    except (NameError, TypeError) as exc:
        _log.warning(
            "acl.predicate_type_hints_unresolved",
            predicate=getattr(func, "__qualname__", repr(func)),
            error=str(exc),
        )
    namespace = getattr(inspect.unwrap(target), "__globals__", {})
    hints: dict[str, Any] = {}
    for name, annotation in getattr(target, "__annotations__", {}).items():
        if isinstance(annotation, str):
            annotation = annotation.strip()
            annotation = namespace.get(annotation, getattr(builtins, annotation, None))
        if annotation is not None:
            hints[name] = annotation
    return hints


def as_predicate(value: Predicate | Callable[..., Any] | None) -> Predicate | None:
    """Normalise the ``predicate`` argument of ``allow`` / ``deny``."""
    if value is None or isinstance(value, Predicate):
        return value
    return Predicate.from_callable(value)


__all__ = ["Param", "Predicate", "as_predicate"]
