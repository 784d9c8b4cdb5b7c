# Copyright 2026-present Kensho Technologies, LLC.
"""Conversion of named type composers to graphql-core AST definition nodes.

The nodes are built from the composers themselves, not from the graphql-core types they wrap, so
that applied directives and default values that are still pending in SDL form are printed too.
"""
from typing import Any, Dict, Iterable, List, Optional

from graphql import (
    ArgumentNode,
    BooleanValueNode,
    DirectiveNode,
    EnumTypeDefinitionNode,
    EnumValueDefinitionNode,
    FieldDefinitionNode,
    FloatValueNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    IntValueNode,
    ListValueNode,
    NamedTypeNode,
    NameNode,
    NullValueNode,
    ObjectFieldNode,
    ObjectTypeDefinitionNode,
    ObjectValueNode,
    ScalarTypeDefinitionNode,
    StringValueNode,
    TypeDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    ValueNode,
    ast_from_value,
    parse_type,
)
from graphql.pyutils import Undefined

from .exceptions import InvalidConstructionError
from .type_helpers import get_composer_kind
from .typedefs import AppliedDirective, TypeComposerKind


def get_name_node(name: str) -> NameNode:
    return NameNode(value=name)


def get_description_node(description: Optional[str]) -> Optional[StringValueNode]:
    """Return the description as a string node, in block form if it is long or multiline."""
    if description is None:
        return None
    block = len(description) > 70 or "\n" in description
    return StringValueNode(value=description, block=block)


def get_type_node(type_composer: Any) -> TypeNode:
    """Return the type reference node for a (possibly wrapped or deferred) type composer."""
    return parse_type(type_composer.get_type_name())


def get_untyped_value_node(value: Any) -> ValueNode:
    """Convert a plain Python value to an AST value node without type information.

    Raises:
        InvalidConstructionError if the value has no GraphQL literal representation
    """
    if value is None:
        return NullValueNode()
    if isinstance(value, bool):
        return BooleanValueNode(value=value)
    if isinstance(value, int):
        return IntValueNode(value=str(value))
    if isinstance(value, float):
        return FloatValueNode(value=repr(value))
    if isinstance(value, str):
        return StringValueNode(value=value)
    if isinstance(value, (list, tuple)):
        return ListValueNode(values=[get_untyped_value_node(item) for item in value])
    if isinstance(value, dict):
        return ObjectValueNode(
            fields=[
                ObjectFieldNode(name=get_name_node(key), value=get_untyped_value_node(item))
                for key, item in value.items()
            ]
        )
    raise InvalidConstructionError(f"Cannot convert value {value!r} to a GraphQL literal.")


def _get_typed_value_node(value: Any, graphql_type: Any) -> ValueNode:
    value_node = ast_from_value(value, graphql_type)
    if value_node is None:
        return get_untyped_value_node(value)
    return value_node


def get_directive_nodes(
    directives: Iterable[AppliedDirective], schema_composer: Any
) -> List[DirectiveNode]:
    """Convert applied directives to AST nodes.

    Arguments of directives declared in the SchemaComposer are converted using their declared
    types, and left out when equal to the declared default value.
    """
    result = []
    for directive in directives:
        directive_def = schema_composer.get_directive(directive.name)
        argument_nodes = []
        for arg_name, arg_value in directive.args.items():
            arg_def = directive_def.args.get(arg_name) if directive_def is not None else None
            if arg_def is None:
                value_node = get_untyped_value_node(arg_value)
            else:
                if arg_def.default_value is not Undefined and arg_def.default_value == arg_value:
                    continue
                value_node = _get_typed_value_node(arg_value, arg_def.type)
            argument_nodes.append(ArgumentNode(name=get_name_node(arg_name), value=value_node))
        result.append(
            DirectiveNode(name=get_name_node(directive.name), arguments=argument_nodes)
        )
    return result


def _sorted_items(mapping: Dict[str, Any], sort: bool) -> List[Any]:
    items = list(mapping.items())
    if sort:
        items.sort(key=lambda item: item[0])
    return items


class DefinitionNodeBuilder:
    """Builds the AST definition node of a named type composer.

    Args:
        omit_descriptions: leave descriptions out of all nodes
        sort_fields: order fields and input fields by name
        sort_args: order field arguments by name
        sort_interfaces: order implemented interfaces by name
        sort_unions: order union members by name
        sort_enums: order enum values by name
    """

    def __init__(
        self,
        omit_descriptions: bool = False,
        sort_fields: bool = False,
        sort_args: bool = False,
        sort_interfaces: bool = False,
        sort_unions: bool = False,
        sort_enums: bool = False,
    ) -> None:
        self.omit_descriptions = omit_descriptions
        self.sort_fields = sort_fields
        self.sort_args = sort_args
        self.sort_interfaces = sort_interfaces
        self.sort_unions = sort_unions
        self.sort_enums = sort_enums

    def _description(self, description: Optional[str]) -> Optional[StringValueNode]:
        if self.omit_descriptions:
            return None
        return get_description_node(description)

    def get_definition_node(self, type_composer: Any) -> TypeDefinitionNode:
        """Return the AST definition node of a named type composer.

        Raises:
            InvalidConstructionError if the value is not a named type composer
        """
        handlers = {
            TypeComposerKind.OBJECT: self.get_object_type_definition_node,
            TypeComposerKind.INTERFACE: self.get_interface_type_definition_node,
            TypeComposerKind.INPUT_OBJECT: self.get_input_object_type_definition_node,
            TypeComposerKind.UNION: self.get_union_type_definition_node,
            TypeComposerKind.ENUM: self.get_enum_type_definition_node,
            TypeComposerKind.SCALAR: self.get_scalar_type_definition_node,
        }
        handler = handlers.get(get_composer_kind(type_composer))
        if handler is None:
            raise InvalidConstructionError(
                f"Cannot build a definition node for {type_composer!r}: it is not a named type "
                f"composer."
            )
        return handler(type_composer)

    def get_object_type_definition_node(self, type_composer: Any) -> ObjectTypeDefinitionNode:
        return ObjectTypeDefinitionNode(
            name=get_name_node(type_composer.get_type_name()),
            description=self._description(type_composer.get_description()),
            interfaces=self._get_interface_nodes(type_composer),
            directives=get_directive_nodes(
                type_composer.get_directives(), type_composer.schema_composer
            ),
            fields=self._get_field_nodes(type_composer),
        )

    def get_interface_type_definition_node(
        self, type_composer: Any
    ) -> InterfaceTypeDefinitionNode:
        return InterfaceTypeDefinitionNode(
            name=get_name_node(type_composer.get_type_name()),
            description=self._description(type_composer.get_description()),
            interfaces=self._get_interface_nodes(type_composer),
            directives=get_directive_nodes(
                type_composer.get_directives(), type_composer.schema_composer
            ),
            fields=self._get_field_nodes(type_composer),
        )

    def get_input_object_type_definition_node(
        self, type_composer: Any
    ) -> InputObjectTypeDefinitionNode:
        return InputObjectTypeDefinitionNode(
            name=get_name_node(type_composer.get_type_name()),
            description=self._description(type_composer.get_description()),
            directives=get_directive_nodes(
                type_composer.get_directives(), type_composer.schema_composer
            ),
            fields=self._get_input_value_nodes(
                type_composer.get_fields(), type_composer.schema_composer, self.sort_fields
            ),
        )

    def get_union_type_definition_node(self, type_composer: Any) -> UnionTypeDefinitionNode:
        type_names = type_composer.get_type_names()
        if self.sort_unions:
            type_names = sorted(type_names)
        return UnionTypeDefinitionNode(
            name=get_name_node(type_composer.get_type_name()),
            description=self._description(type_composer.get_description()),
            directives=get_directive_nodes(
                type_composer.get_directives(), type_composer.schema_composer
            ),
            types=[NamedTypeNode(name=get_name_node(type_name)) for type_name in type_names],
        )

    def get_enum_type_definition_node(self, type_composer: Any) -> EnumTypeDefinitionNode:
        schema_composer = type_composer.schema_composer
        return EnumTypeDefinitionNode(
            name=get_name_node(type_composer.get_type_name()),
            description=self._description(type_composer.get_description()),
            directives=get_directive_nodes(type_composer.get_directives(), schema_composer),
            values=[
                EnumValueDefinitionNode(
                    name=get_name_node(value_name),
                    description=self._description(value_config.description),
                    directives=get_directive_nodes(value_config.directives, schema_composer),
                )
                for value_name, value_config in _sorted_items(
                    type_composer.get_fields(), self.sort_enums
                )
            ],
        )

    def get_scalar_type_definition_node(self, type_composer: Any) -> ScalarTypeDefinitionNode:
        directives = list(type_composer.get_directives())
        specified_by_url = type_composer.get_specified_by_url()
        if specified_by_url and "specifiedBy" not in type_composer.get_directive_names():
            directives.append(AppliedDirective(name="specifiedBy", args={"url": specified_by_url}))
        return ScalarTypeDefinitionNode(
            name=get_name_node(type_composer.get_type_name()),
            description=self._description(type_composer.get_description()),
            directives=get_directive_nodes(directives, type_composer.schema_composer),
        )

    def _get_interface_nodes(self, type_composer: Any) -> List[NamedTypeNode]:
        interface_names = [
            interface.get_type_name() for interface in type_composer.get_interfaces()
        ]
        if self.sort_interfaces:
            interface_names = sorted(interface_names)
        return [NamedTypeNode(name=get_name_node(name)) for name in interface_names]

    def _get_field_nodes(self, type_composer: Any) -> List[FieldDefinitionNode]:
        schema_composer = type_composer.schema_composer
        return [
            FieldDefinitionNode(
                name=get_name_node(field_name),
                description=self._description(field_config.description),
                arguments=self._get_input_value_nodes(
                    field_config.args, schema_composer, self.sort_args
                ),
                type=get_type_node(field_config.type),
                directives=get_directive_nodes(field_config.directives, schema_composer),
            )
            for field_name, field_config in _sorted_items(
                type_composer.get_fields(), self.sort_fields
            )
        ]

    def _get_input_value_nodes(
        self, values: Dict[str, Any], schema_composer: Any, sort: bool
    ) -> List[InputValueDefinitionNode]:
        return [
            InputValueDefinitionNode(
                name=get_name_node(value_name),
                description=self._description(value_config.description),
                type=get_type_node(value_config.type),
                default_value=get_default_value_node(value_config),
                directives=get_directive_nodes(value_config.directives, schema_composer),
            )
            for value_name, value_config in _sorted_items(values, sort)
        ]


def get_default_value_node(value_config: Any) -> Optional[ValueNode]:
    """Return the default value of an argument or input field as an AST node, if it has one.

    A default value still pending in SDL form is printed as it was written.
    """
    if value_config.default_value is Undefined:
        return value_config.default_value_node
    return _get_typed_value_node(value_config.default_value, value_config.type.get_type())
