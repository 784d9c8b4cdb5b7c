# Copyright 2026-present Kensho Technologies, LLC.
"""Kind tests, name-string predicates and small graph helpers shared by all composers.

Kind dispatch is done on the `kind` tag every composer class carries (see TypeComposerKind),
so this module never needs to import the composer classes themselves.
"""
import re
from typing import Any, Dict, Optional

from .exceptions import InvalidConstructionError
from .typedefs import INPUT_TYPE_KINDS, NAMED_TYPE_KINDS, OUTPUT_TYPE_KINDS, TypeComposerKind


TYPE_NAME_RE = re.compile(r"^[_a-zA-Z][_a-zA-Z0-9]*$")

# A named type optionally wrapped in list brackets and non-null markers, e.g. "[String!]!".
WRAPPED_TYPE_NAME_RE = re.compile(r"^[\s\[]*[_a-zA-Z][_a-zA-Z0-9]*[\s\]!]*$")

# The leading keyword of an SDL type definition, after an optional description and comments.
TYPE_DEFINITION_RE = re.compile(
    r'^\s*(?:#[^\n]*\n\s*)*(?:(?:"""[\s\S]*?"""|"[^"\n]*")\s*)?'
    r"(?:extend\s+)?(type|input|interface|union|enum|scalar)\s+[_a-zA-Z]"
)

_DEFINITION_KEYWORD_TO_KIND = {
    "type": TypeComposerKind.OBJECT,
    "input": TypeComposerKind.INPUT_OBJECT,
    "interface": TypeComposerKind.INTERFACE,
    "union": TypeComposerKind.UNION,
    "enum": TypeComposerKind.ENUM,
    "scalar": TypeComposerKind.SCALAR,
}


def is_type_name_string(value: Any) -> bool:
    """Return True if the value is a plain GraphQL type name, e.g. "User"."""
    return isinstance(value, str) and TYPE_NAME_RE.match(value) is not None


def is_wrapped_type_name_string(value: Any) -> bool:
    """Return True if the value is a type name with optional list/non-null wrapping."""
    return isinstance(value, str) and WRAPPED_TYPE_NAME_RE.match(value) is not None


def get_type_definition_string_kind(value: Any) -> Optional[TypeComposerKind]:
    """Return the kind of the SDL type definition in the string, or None if it is not one."""
    if not isinstance(value, str):
        return None
    match = TYPE_DEFINITION_RE.match(value)
    if match is None:
        return None
    return _DEFINITION_KEYWORD_TO_KIND[match.group(1)]


def validate_type_name(name: Any) -> str:
    """Return the name unchanged if it is a legal, non-reserved GraphQL type name.

    Raises:
        InvalidConstructionError if the name is not a string, does not match the GraphQL name
        grammar, or starts with the "__" prefix reserved for introspection types
    """
    if not is_type_name_string(name):
        raise InvalidConstructionError(f"Type name must be a valid GraphQL name, got {name!r}.")
    if name.startswith("__"):
        raise InvalidConstructionError(
            f'Type name "{name}" is not allowed: the "__" prefix is reserved for '
            f"introspection types."
        )
    return name


def get_composer_kind(value: Any) -> Optional[TypeComposerKind]:
    """Return the composer kind tag of the value, or None if it is not a type composer."""
    kind = getattr(value, "kind", None)
    if isinstance(kind, TypeComposerKind):
        return kind
    return None


def is_type_composer(value: Any) -> bool:
    return get_composer_kind(value) is not None


def is_named_type_composer(value: Any) -> bool:
    return get_composer_kind(value) in NAMED_TYPE_KINDS


def _peel_structural_wrappers(value: Any) -> Any:
    """Strip List and NonNull layers, leaving deferred references untouched."""
    current = value
    while get_composer_kind(current) in (TypeComposerKind.LIST, TypeComposerKind.NON_NULL):
        current = current.of_type
    return current


def is_some_output_type_composer(value: Any) -> bool:
    """Return True if the value may be used as the type of an output field.

    Deferred references that have not been evaluated yet are accepted without evaluating them.
    """
    inner = _peel_structural_wrappers(value)
    kind = get_composer_kind(inner)
    if kind == TypeComposerKind.THUNK:
        return not inner.evaluated or is_some_output_type_composer(inner.of_type)
    return kind in OUTPUT_TYPE_KINDS


def is_some_input_type_composer(value: Any) -> bool:
    """Return True if the value may be used as the type of an argument or input field.

    Deferred references that have not been evaluated yet are accepted without evaluating them.
    """
    inner = _peel_structural_wrappers(value)
    kind = get_composer_kind(inner)
    if kind == TypeComposerKind.THUNK:
        return not inner.evaluated or is_some_input_type_composer(inner.of_type)
    return kind in INPUT_TYPE_KINDS


def clone_type_to(type_: Any, target: Any, identity_map: Dict[Any, Any]) -> Any:
    """Clone a field or argument type into the target SchemaComposer.

    Values that are not type composers (e.g. raw GraphQL types) are returned unchanged.
    """
    if is_type_composer(type_):
        return type_.clone_to(target, identity_map)
    return type_
