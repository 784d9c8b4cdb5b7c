# Copyright 2026-present Kensho Technologies, LLC.
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List

from .exceptions import InvalidConstructionError


# Opaque metadata attached to types, fields, arguments and enum values. Never printed to SDL.
Extensions = Dict[str, Any]

# Argument values of an applied directive, keyed by argument name.
DirectiveArgs = Dict[str, Any]


@dataclass
class AppliedDirective:
    """A directive applied to a type, field, argument or enum value, e.g. @key(fields: "id")."""

    name: str
    args: DirectiveArgs = field(default_factory=dict)

    def copy(self) -> "AppliedDirective":
        """Return a copy of this directive whose argument values can be mutated independently."""
        return AppliedDirective(name=self.name, args=deepcopy(self.args))


# Ordered list of applied directives. Duplicates by name are allowed.
DirectiveList = List[AppliedDirective]


class TypeComposerKind(Enum):
    """Tag identifying every kind of node in a type-composition graph.

    The first six values are the declarable (named) kinds, the last three the structural
    wrappers. Every type composer class carries its tag in a `kind` class attribute, which is
    what kind dispatch throughout the package switches on.
    """

    OBJECT = "OBJECT"
    INPUT_OBJECT = "INPUT_OBJECT"
    INTERFACE = "INTERFACE"
    UNION = "UNION"
    ENUM = "ENUM"
    SCALAR = "SCALAR"
    LIST = "LIST"
    NON_NULL = "NON_NULL"
    THUNK = "THUNK"


NAMED_TYPE_KINDS = frozenset(
    {
        TypeComposerKind.OBJECT,
        TypeComposerKind.INPUT_OBJECT,
        TypeComposerKind.INTERFACE,
        TypeComposerKind.UNION,
        TypeComposerKind.ENUM,
        TypeComposerKind.SCALAR,
    }
)
OUTPUT_TYPE_KINDS = frozenset(
    {
        TypeComposerKind.OBJECT,
        TypeComposerKind.INTERFACE,
        TypeComposerKind.UNION,
        TypeComposerKind.ENUM,
        TypeComposerKind.SCALAR,
    }
)
INPUT_TYPE_KINDS = frozenset(
    {TypeComposerKind.INPUT_OBJECT, TypeComposerKind.ENUM, TypeComposerKind.SCALAR}
)

# Root operation types are stored in the registry under these keys, whatever their type names.
QUERY_TYPE_KEY = "Query"
MUTATION_TYPE_KEY = "Mutation"
SUBSCRIPTION_TYPE_KEY = "Subscription"
ROOT_TYPE_KEYS = (QUERY_TYPE_KEY, MUTATION_TYPE_KEY, SUBSCRIPTION_TYPE_KEY)


def to_applied_directive(value: Any) -> AppliedDirective:
    """Convert an AppliedDirective or a {"name": ..., "args": ...} dict to an AppliedDirective."""
    if isinstance(value, AppliedDirective):
        return value
    if isinstance(value, dict) and isinstance(value.get("name"), str):
        return AppliedDirective(name=value["name"], args=dict(value.get("args") or {}))
    raise InvalidConstructionError(
        f"Directive should be an AppliedDirective or a dict with name and args, got {value!r}"
    )
