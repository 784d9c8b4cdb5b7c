# Copyright 2026-present Kensho Technologies, LLC.
"""Records describing fields, arguments, input fields and enum values of named types.

Unlike their graphql-core counterparts, these records reference type composers rather than
GraphQL types, so that they can be mutated, cloned and merged before a schema is built.
"""
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

from graphql import (
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    GraphQLArgument,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    InputValueDefinitionNode,
    ValueNode,
    value_from_ast,
)
from graphql.pyutils import Undefined

from ..type_helpers import clone_type_to
from ..typedefs import DirectiveList, Extensions


def _copy_directives(directives: DirectiveList) -> DirectiveList:
    return [directive.copy() for directive in directives]


@dataclass
class ArgumentConfig:
    """An argument of an output field.

    A default value given in SDL whose type could not be resolved yet is kept as the
    default_value_node and turned into a Python value on first use (see resolve_default_value).
    """

    type: Any
    default_value: Any = Undefined
    description: Optional[str] = None
    deprecation_reason: Optional[str] = None
    extensions: Extensions = field(default_factory=dict)
    directives: DirectiveList = field(default_factory=list)
    ast_node: Optional[InputValueDefinitionNode] = None
    default_value_node: Optional[ValueNode] = None

    def copy(self, **changes: Any) -> "ArgumentConfig":
        """Return a copy whose extensions and directives can be mutated independently."""
        changes.setdefault("extensions", dict(self.extensions))
        changes.setdefault("directives", _copy_directives(self.directives))
        return replace(self, **changes)

    def has_default_value(self) -> bool:
        return self.default_value is not Undefined or self.default_value_node is not None

    def resolve_default_value(self) -> Any:
        """Return the default value, coercing a pending SDL default value against the type."""
        if self.default_value is Undefined and self.default_value_node is not None:
            self.default_value = value_from_ast(self.default_value_node, self.type.get_type())
            self.default_value_node = None
        return self.default_value

    def get_graphql_argument(self) -> GraphQLArgument:
        return GraphQLArgument(
            self.type.get_type(),
            default_value=self.resolve_default_value(),
            description=self.description,
            deprecation_reason=self.deprecation_reason,
            extensions=dict(self.extensions),
            ast_node=self.ast_node,
        )

    def clone_to(self, target: Any, identity_map: Dict[Any, Any]) -> "ArgumentConfig":
        return self.copy(type=clone_type_to(self.type, target, identity_map))


@dataclass
class InputFieldConfig(ArgumentConfig):
    """A field of an input object type. Shares its shape with output field arguments."""

    def get_graphql_input_field(self) -> GraphQLInputField:
        return GraphQLInputField(
            self.type.get_type(),
            default_value=self.resolve_default_value(),
            description=self.description,
            deprecation_reason=self.deprecation_reason,
            extensions=dict(self.extensions),
            ast_node=self.ast_node,
        )

    def clone_to(self, target: Any, identity_map: Dict[Any, Any]) -> "InputFieldConfig":
        return self.copy(type=clone_type_to(self.type, target, identity_map))


@dataclass
class FieldConfig:
    """A field of an object or interface type, with its arguments in declaration order."""

    type: Any
    args: Dict[str, ArgumentConfig] = field(default_factory=dict)
    resolve: Optional[Callable[..., Any]] = None
    subscribe: Optional[Callable[..., Any]] = None
    description: Optional[str] = None
    deprecation_reason: Optional[str] = None
    extensions: Extensions = field(default_factory=dict)
    directives: DirectiveList = field(default_factory=list)
    ast_node: Optional[FieldDefinitionNode] = None

    def copy(self, **changes: Any) -> "FieldConfig":
        """Return a copy whose args, extensions and directives can be mutated independently."""
        changes.setdefault(
            "args", {arg_name: arg.copy() for arg_name, arg in self.args.items()}
        )
        changes.setdefault("extensions", dict(self.extensions))
        changes.setdefault("directives", _copy_directives(self.directives))
        return replace(self, **changes)

    def get_graphql_field(self) -> GraphQLField:
        return GraphQLField(
            self.type.get_type(),
            args={
                arg_name: arg.get_graphql_argument() for arg_name, arg in self.args.items()
            },
            resolve=self.resolve,
            subscribe=self.subscribe,
            description=self.description,
            deprecation_reason=self.deprecation_reason,
            extensions=dict(self.extensions),
            ast_node=self.ast_node,
        )

    def clone_to(self, target: Any, identity_map: Dict[Any, Any]) -> "FieldConfig":
        return self.copy(
            type=clone_type_to(self.type, target, identity_map),
            args={
                arg_name: arg.clone_to(target, identity_map)
                for arg_name, arg in self.args.items()
            },
        )


@dataclass
class EnumValueConfig:
    """A value of an enum type. The internal value defaults to the value's name."""

    value: Any = None
    description: Optional[str] = None
    deprecation_reason: Optional[str] = None
    extensions: Extensions = field(default_factory=dict)
    directives: DirectiveList = field(default_factory=list)
    ast_node: Optional[EnumValueDefinitionNode] = None

    def copy(self, **changes: Any) -> "EnumValueConfig":
        changes.setdefault("extensions", dict(self.extensions))
        changes.setdefault("directives", _copy_directives(self.directives))
        return replace(self, **changes)

    def get_graphql_enum_value(self) -> GraphQLEnumValue:
        return GraphQLEnumValue(
            self.value,
            description=self.description,
            deprecation_reason=self.deprecation_reason,
            extensions=dict(self.extensions),
            ast_node=self.ast_node,
        )
