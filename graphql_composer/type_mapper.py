# Copyright 2026-present Kensho Technologies, LLC.
"""Conversion of user-supplied definitions into type composers.

Definitions may be type-name strings ("String", "[User!]!"), SDL definitions of a single named
type, graphql-core types, type composers, single-element lists (meaning "list of"),
zero-argument callables (deferred references) and, for fields and arguments, config dicts. SDL
documents are converted definition by definition; type names that are not registered yet become
deferred references, resolved by name in the SchemaComposer when first needed.
"""
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Type, Union

from funcy import first
from graphql import (
    DEFAULT_DEPRECATION_REASON,
    DirectiveDefinitionNode,
    DirectiveLocation,
    DirectiveNode,
    DocumentNode,
    EnumTypeDefinitionNode,
    EnumTypeExtensionNode,
    GraphQLArgument,
    GraphQLDeprecatedDirective,
    GraphQLDirective,
    GraphQLEnumType,
    GraphQLEnumValue,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLUnionType,
    InputObjectTypeDefinitionNode,
    InputObjectTypeExtensionNode,
    InputValueDefinitionNode,
    InterfaceTypeDefinitionNode,
    InterfaceTypeExtensionNode,
    ListTypeNode,
    NamedTypeNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    ScalarTypeDefinitionNode,
    ScalarTypeExtensionNode,
    SchemaDefinitionNode,
    TypeNode,
    UnionTypeDefinitionNode,
    UnionTypeExtensionNode,
    parse,
    parse_type,
    value_from_ast,
    value_from_ast_untyped,
)
from graphql.execution.values import get_argument_values, get_directive_values
from graphql.language import DefinitionNode
from graphql.pyutils import Undefined

from .composers.enum_type import EnumTypeComposer
from .composers.fields import ArgumentConfig, EnumValueConfig, FieldConfig, InputFieldConfig
from .composers.input_type import InputTypeComposer
from .composers.interface_type import InterfaceTypeComposer
from .composers.object_type import ObjectTypeComposer
from .composers.scalar_type import ScalarTypeComposer
from .composers.union_type import UnionTypeComposer
from .exceptions import GraphQLComposeError, InvalidConstructionError, SchemaStructureError
from .scalars import BUILT_IN_SCALAR_TYPES
from .type_helpers import (
    get_composer_kind,
    get_type_definition_string_kind,
    is_some_input_type_composer,
    is_some_output_type_composer,
    is_type_composer,
    is_type_name_string,
    is_wrapped_type_name_string,
)
from .typedefs import (
    INPUT_TYPE_KINDS,
    OUTPUT_TYPE_KINDS,
    AppliedDirective,
    DirectiveList,
    TypeComposerKind,
    to_applied_directive,
)
from .wrappers import ListComposer, NonNullComposer, ThunkComposer, unwrap_type_composer


GRAPHQL_TYPE_TO_COMPOSER_CLASS: Tuple[Tuple[Type[GraphQLNamedType], Type[Any]], ...] = (
    (GraphQLObjectType, ObjectTypeComposer),
    (GraphQLInputObjectType, InputTypeComposer),
    (GraphQLInterfaceType, InterfaceTypeComposer),
    (GraphQLUnionType, UnionTypeComposer),
    (GraphQLEnumType, EnumTypeComposer),
    (GraphQLScalarType, ScalarTypeComposer),
)

_SCHEMA_DEFINITION_ROOT_NAMES = {
    "query": "Query",
    "mutation": "Mutation",
    "subscription": "Subscription",
}

InputValueConfigClass = Union[Type[ArgumentConfig], Type[InputFieldConfig]]


def get_description(node: Any) -> Optional[str]:
    """Return the description string of an AST definition node, if any."""
    description = getattr(node, "description", None)
    return description.value if description is not None else None


def get_composer_class_for_graphql_type(graphql_type: GraphQLNamedType) -> Type[Any]:
    """Return the type composer class wrapping the given kind of graphql-core named type."""
    for graphql_type_class, composer_class in GRAPHQL_TYPE_TO_COMPOSER_CLASS:
        if isinstance(graphql_type, graphql_type_class):
            return composer_class
    raise InvalidConstructionError(f"Unsupported GraphQL type {graphql_type!r}.")


def _get_deprecation_reason(node: Any) -> Optional[str]:
    if node is None:
        return None
    deprecated_args = get_directive_values(GraphQLDeprecatedDirective, node)
    if deprecated_args is None:
        return None
    return deprecated_args.get("reason")


def _sync_deprecation(config: Any) -> None:
    """Keep the deprecation reason and the @deprecated directive of a field in agreement."""
    deprecated = first(
        directive for directive in config.directives if directive.name == "deprecated"
    )
    if config.deprecation_reason:
        if deprecated is not None:
            deprecated.args = {"reason": config.deprecation_reason}
        else:
            config.directives.append(
                AppliedDirective(name="deprecated", args={"reason": config.deprecation_reason})
            )
    elif deprecated is not None:
        config.deprecation_reason = deprecated.args.get("reason", DEFAULT_DEPRECATION_REASON)


def _prefix_error(
    error: GraphQLComposeError, type_name: str, field_name: str
) -> GraphQLComposeError:
    return type(error)(f"{type_name}.{field_name}: {error}")


class TypeMapper:
    """Converts definitions into type composers owned by one SchemaComposer."""

    def __init__(self, schema_composer: Any) -> None:
        self.schema_composer = schema_composer

    # -----------------------------------------------
    # Type definitions
    # -----------------------------------------------

    def get_built_in_type(self, type_name: str) -> Optional[ScalarTypeComposer]:
        """Return the composer of a specified or bundled scalar, creating it if needed."""
        scalar_type = BUILT_IN_SCALAR_TYPES.get(type_name)
        if scalar_type is None:
            return None
        return ScalarTypeComposer.create(scalar_type, self.schema_composer)

    def convert_graphql_type_to_composer(self, graphql_type: Any) -> Any:
        """Convert a graphql-core type, possibly wrapped in lists and non-nulls, to a composer."""
        if isinstance(graphql_type, GraphQLNonNull):
            return NonNullComposer(self.convert_graphql_type_to_composer(graphql_type.of_type))
        if isinstance(graphql_type, GraphQLList):
            return ListComposer(self.convert_graphql_type_to_composer(graphql_type.of_type))
        if isinstance(graphql_type, GraphQLNamedType):
            if self.schema_composer.has(graphql_type):
                return self.schema_composer.get(graphql_type)
            if BUILT_IN_SCALAR_TYPES.get(graphql_type.name) is graphql_type:
                return self.get_built_in_type(graphql_type.name)
            return self.schema_composer.create_temp_tc(graphql_type)
        raise InvalidConstructionError(f"Cannot convert {graphql_type!r} to a type composer.")

    def convert_output_type_definition(self, type_def: Any) -> Any:
        """Convert a definition to a type composer usable as the type of an output field.

        Raises:
            InvalidConstructionError if the definition is not convertible or is an input type
        """
        return self._convert_type_definition(type_def, is_input=False)

    def convert_input_type_definition(self, type_def: Any) -> Any:
        """Convert a definition to a type composer usable as an argument or input field type.

        Raises:
            InvalidConstructionError if the definition is not convertible or is an output type
        """
        return self._convert_type_definition(type_def, is_input=True)

    def _convert_type_definition(self, type_def: Any, is_input: bool) -> Any:
        position = "input" if is_input else "output"
        allowed_kinds = INPUT_TYPE_KINDS if is_input else OUTPUT_TYPE_KINDS
        check_composer = is_some_input_type_composer if is_input else is_some_output_type_composer

        if is_type_composer(type_def):
            result = type_def
        elif isinstance(type_def, str):
            definition_kind = get_type_definition_string_kind(type_def)
            if definition_kind is not None:
                if definition_kind not in allowed_kinds:
                    raise InvalidConstructionError(
                        f"Provided SDL defines a type of kind {definition_kind.value}, which "
                        f"cannot be used as {position} type: {type_def!r}"
                    )
                result = self.convert_sdl_type_definition(type_def)
            elif is_wrapped_type_name_string(type_def):
                result = self.type_from_ast(parse_type(type_def))
            else:
                raise InvalidConstructionError(
                    f"Cannot convert to {position} type the following string: {type_def!r}"
                )
        elif isinstance(type_def, list):
            if len(type_def) != 1:
                raise InvalidConstructionError(
                    f"Array must have exactly one type definition, but has {len(type_def)}: "
                    f"{type_def!r}"
                )
            result = ListComposer(self._convert_type_definition(type_def[0], is_input))
        elif isinstance(type_def, (GraphQLList, GraphQLNonNull, GraphQLNamedType)):
            result = self.convert_graphql_type_to_composer(type_def)
        elif callable(type_def) and not isinstance(type_def, type):
            return ThunkComposer(
                lambda: self._convert_type_definition(type_def(), is_input)
            )
        else:
            raise InvalidConstructionError(
                f"Cannot convert to {position} type the following value: {type_def!r}"
            )

        if not check_composer(result):
            raise InvalidConstructionError(
                f"Should be {position} type, but provided {result!r}"
            )
        return result

    def convert_interface_type_definition(self, type_def: Any) -> Any:
        """Convert a definition to an interface composer or a deferred reference to one."""
        return self._convert_named_type_reference(
            type_def, InterfaceTypeComposer, GraphQLInterfaceType, TypeComposerKind.INTERFACE
        )

    def convert_object_type_definition(self, type_def: Any) -> Any:
        """Convert a definition to an object composer or a deferred reference to one."""
        return self._convert_named_type_reference(
            type_def, ObjectTypeComposer, GraphQLObjectType, TypeComposerKind.OBJECT
        )

    def _convert_named_type_reference(
        self,
        type_def: Any,
        composer_class: Type[Any],
        graphql_type_class: Type[GraphQLNamedType],
        kind: TypeComposerKind,
    ) -> Any:
        schema_composer = self.schema_composer
        if schema_composer.has_instance(type_def, composer_class):
            return schema_composer.get(type_def)
        if isinstance(type_def, str):
            if get_type_definition_string_kind(type_def) == kind:
                return self.convert_sdl_type_definition(type_def)
            if is_type_name_string(type_def):
                return ThunkComposer(
                    lambda: self._get_registered_of_kind(type_def, kind), type_def
                )
        elif isinstance(type_def, graphql_type_class):
            return schema_composer.create_temp_tc(type_def)
        elif get_composer_kind(type_def) in (kind, TypeComposerKind.THUNK):
            return type_def
        elif callable(type_def) and not isinstance(type_def, type):
            return ThunkComposer(
                lambda: self._convert_named_type_reference(
                    type_def(), composer_class, graphql_type_class, kind
                )
            )
        raise InvalidConstructionError(
            f"Cannot convert to {composer_class.__name__} the following definition: "
            f"{type_def!r}"
        )

    def _get_registered_of_kind(self, type_name: str, kind: TypeComposerKind) -> Any:
        type_composer = self.schema_composer.get(type_name)
        if get_composer_kind(type_composer) != kind:
            raise InvalidConstructionError(
                f"Type {type_name} is referenced as {kind.value}, but it is {type_composer!r}."
            )
        return type_composer

    # -----------------------------------------------
    # Field, argument and enum value configs
    # -----------------------------------------------

    def convert_output_field_config(
        self, field_config: Any, field_name: str = "", type_name: str = ""
    ) -> FieldConfig:
        """Convert a field definition to a FieldConfig.

        Accepts a FieldConfig, a graphql-core GraphQLField, a dict with a "type" key and any of
        the other FieldConfig attributes, or any type definition.

        Raises:
            GraphQLComposeError subclass, prefixed with "TypeName.fieldName", if the definition
            cannot be converted
        """
        try:
            return self._convert_output_field_config(field_config, field_name, type_name)
        except GraphQLComposeError as e:
            raise _prefix_error(e, type_name, field_name) from e

    def _convert_output_field_config(
        self, field_config: Any, field_name: str, type_name: str
    ) -> FieldConfig:
        if field_config is None:
            raise InvalidConstructionError("You provide empty field definition.")

        if isinstance(field_config, FieldConfig):
            result = field_config.copy(
                type=self.convert_output_type_definition(field_config.type),
                args=self.convert_argument_config_map(field_config.args, field_name, type_name),
            )
        elif isinstance(field_config, GraphQLField):
            result = FieldConfig(
                type=self.convert_graphql_type_to_composer(field_config.type),
                args=self.convert_argument_config_map(field_config.args, field_name, type_name),
                resolve=field_config.resolve,
                subscribe=field_config.subscribe,
                description=field_config.description,
                deprecation_reason=field_config.deprecation_reason,
                extensions=dict(field_config.extensions or {}),
                directives=self.parse_directives(
                    getattr(field_config.ast_node, "directives", None)
                ),
                ast_node=field_config.ast_node,
            )
        elif isinstance(field_config, dict):
            options = dict(field_config)
            if "type" not in options:
                raise InvalidConstructionError(
                    f"Definition object should contain 'type' property: {field_config!r}"
                )
            field_type = self.convert_output_type_definition(options.pop("type"))
            args = self.convert_argument_config_map(
                options.pop("args", None) or {}, field_name, type_name
            )
            directives = [to_applied_directive(d) for d in options.pop("directives", None) or []]
            extensions = dict(options.pop("extensions", None) or {})
            try:
                result = FieldConfig(
                    type=field_type,
                    args=args,
                    directives=directives,
                    extensions=extensions,
                    **options,
                )
            except TypeError as e:
                raise InvalidConstructionError(
                    f"Unknown field config options {sorted(options)}."
                ) from e
        else:
            result = FieldConfig(type=self.convert_output_type_definition(field_config))

        _sync_deprecation(result)
        return result

    def convert_argument_config_map(
        self, args: Dict[str, Any], field_name: str = "", type_name: str = ""
    ) -> Dict[str, ArgumentConfig]:
        return {
            arg_name: self.convert_argument_config(arg_config, arg_name, field_name, type_name)
            for arg_name, arg_config in args.items()
        }

    def convert_argument_config(
        self, arg_config: Any, arg_name: str = "", field_name: str = "", type_name: str = ""
    ) -> ArgumentConfig:
        """Convert an argument definition to an ArgumentConfig.

        Raises:
            GraphQLComposeError subclass, prefixed with "TypeName.fieldName@argName", if the
            definition cannot be converted
        """
        try:
            return self._convert_input_value_config(arg_config, ArgumentConfig)
        except GraphQLComposeError as e:
            raise _prefix_error(e, type_name, f"{field_name}@{arg_name}") from e

    def convert_input_field_config(
        self, field_config: Any, field_name: str = "", type_name: str = ""
    ) -> InputFieldConfig:
        """Convert an input field definition to an InputFieldConfig.

        Raises:
            GraphQLComposeError subclass, prefixed with "TypeName.fieldName", if the definition
            cannot be converted
        """
        try:
            return self._convert_input_value_config(field_config, InputFieldConfig)
        except GraphQLComposeError as e:
            raise _prefix_error(e, type_name, field_name) from e

    def _convert_input_value_config(
        self, value_config: Any, config_class: InputValueConfigClass
    ) -> Any:
        if value_config is None:
            raise InvalidConstructionError("You provide empty argument definition.")

        if isinstance(value_config, ArgumentConfig):
            result = config_class(
                type=self.convert_input_type_definition(value_config.type),
                default_value=value_config.default_value,
                description=value_config.description,
                deprecation_reason=value_config.deprecation_reason,
                extensions=dict(value_config.extensions),
                directives=[directive.copy() for directive in value_config.directives],
                ast_node=value_config.ast_node,
                default_value_node=value_config.default_value_node,
            )
        elif isinstance(value_config, (GraphQLArgument, GraphQLInputField)):
            result = config_class(
                type=self.convert_graphql_type_to_composer(value_config.type),
                default_value=value_config.default_value,
                description=value_config.description,
                deprecation_reason=value_config.deprecation_reason,
                extensions=dict(value_config.extensions or {}),
                directives=self.parse_directives(
                    getattr(value_config.ast_node, "directives", None)
                ),
                ast_node=value_config.ast_node,
            )
        elif isinstance(value_config, dict):
            options = dict(value_config)
            if "type" not in options:
                raise InvalidConstructionError(
                    f"Definition object should contain 'type' property: {value_config!r}"
                )
            value_type = self.convert_input_type_definition(options.pop("type"))
            directives = [to_applied_directive(d) for d in options.pop("directives", None) or []]
            extensions = dict(options.pop("extensions", None) or {})
            try:
                result = config_class(
                    type=value_type, directives=directives, extensions=extensions, **options
                )
            except TypeError as e:
                raise InvalidConstructionError(
                    f"Unknown argument config options {sorted(options)}."
                ) from e
        else:
            result = config_class(type=self.convert_input_type_definition(value_config))

        _sync_deprecation(result)
        return result

    def convert_enum_value_config(self, value_config: Any, value_name: str) -> EnumValueConfig:
        """Convert an enum value definition to an EnumValueConfig.

        The internal value defaults to the value's name.
        """
        if isinstance(value_config, EnumValueConfig):
            result = value_config.copy()
        elif isinstance(value_config, GraphQLEnumValue):
            result = EnumValueConfig(
                value=value_config.value,
                description=value_config.description,
                deprecation_reason=value_config.deprecation_reason,
                extensions=dict(value_config.extensions or {}),
                directives=self.parse_directives(
                    getattr(value_config.ast_node, "directives", None)
                ),
                ast_node=value_config.ast_node,
            )
        elif isinstance(value_config, dict) or value_config is None:
            options = dict(value_config or {})
            directives = [to_applied_directive(d) for d in options.pop("directives", None) or []]
            extensions = dict(options.pop("extensions", None) or {})
            try:
                result = EnumValueConfig(directives=directives, extensions=extensions, **options)
            except TypeError as e:
                raise InvalidConstructionError(
                    f"Unknown options {sorted(options)} of enum value {value_name}."
                ) from e
        else:
            raise InvalidConstructionError(
                f"Cannot convert enum value {value_name} from {value_config!r}."
            )

        if result.value is None:
            result.value = value_name
        _sync_deprecation(result)
        return result

    # -----------------------------------------------
    # Directives
    # -----------------------------------------------

    def parse_directives(self, directive_nodes: Optional[Sequence[DirectiveNode]]) -> DirectiveList:
        """Convert applied directive AST nodes to AppliedDirective records.

        Arguments of directives declared in the SchemaComposer are coerced against their
        declaration, arguments of unknown directives are converted without type information.
        """
        result: DirectiveList = []
        for directive_node in directive_nodes or []:
            directive_name = directive_node.name.value
            directive_def = self.schema_composer.get_directive(directive_name)
            if directive_def is not None:
                args = get_argument_values(directive_def, directive_node)
            else:
                args = {
                    argument.name.value: value_from_ast_untyped(argument.value)
                    for argument in directive_node.arguments or []
                }
            result.append(AppliedDirective(name=directive_name, args=args))
        return result

    def make_directive_def(self, definition: DirectiveDefinitionNode) -> GraphQLDirective:
        """Build a graphql-core directive declaration from its SDL definition."""
        args = {}
        for arg_node in definition.arguments or []:
            arg_type = self.type_from_ast(arg_node.type)
            if not is_some_input_type_composer(arg_type):
                raise InvalidConstructionError(
                    f"Non-input type as an argument of directive @{definition.name.value}."
                )
            graphql_arg_type = arg_type.get_type()
            default_value = Undefined
            if arg_node.default_value is not None:
                default_value = value_from_ast(arg_node.default_value, graphql_arg_type)
            args[arg_node.name.value] = GraphQLArgument(
                graphql_arg_type,
                default_value=default_value,
                description=get_description(arg_node),
                ast_node=arg_node,
            )

        return GraphQLDirective(
            name=definition.name.value,
            locations=[DirectiveLocation[location.value] for location in definition.locations],
            args=args,
            is_repeatable=definition.repeatable,
            description=get_description(definition),
            ast_node=definition,
        )

    # -----------------------------------------------
    # SDL
    # -----------------------------------------------

    def convert_sdl_type_definition(self, sdl: str) -> Any:
        """Create the composer for an SDL document holding exactly one named type definition.

        Raises:
            InvalidConstructionError if the SDL does not define exactly one named type
        """
        document = parse(sdl)
        types = self.parse_types(document)
        if len(document.definitions) != 1 or len(types) != 1:
            raise InvalidConstructionError(
                f"You should provide SDL with exactly one type definition, got {sdl!r}"
            )
        return types[0]

    def parse_types(self, document: DocumentNode) -> List[Any]:
        types = []
        for definition in document.definitions:
            type_composer = self.make_schema_def(definition)
            if type_composer is not None:
                types.append(type_composer)
        return types

    def make_schema_def(self, definition: DefinitionNode) -> Any:
        """Create or extend the composer for one SDL definition.

        Directive definitions are registered in the SchemaComposer and produce no composer;
        neither does a schema definition, which is only checked.

        Raises:
            SchemaStructureError if the definition is of an unsupported kind, or is a schema
            definition naming non-standard root types
        """
        handlers: Tuple[Tuple[Type[DefinitionNode], Callable[[Any], Any]], ...] = (
            (ObjectTypeDefinitionNode, self._make_type_def),
            (InterfaceTypeDefinitionNode, self._make_interface_def),
            (EnumTypeDefinitionNode, self._make_enum_def),
            (UnionTypeDefinitionNode, self._make_union_def),
            (ScalarTypeDefinitionNode, self._make_scalar_def),
            (InputObjectTypeDefinitionNode, self._make_input_object_def),
            (ObjectTypeExtensionNode, self._make_extend_type_def),
            (InterfaceTypeExtensionNode, self._make_extend_interface_def),
            (EnumTypeExtensionNode, self._make_extend_enum_def),
            (UnionTypeExtensionNode, self._make_extend_union_def),
            (ScalarTypeExtensionNode, self._make_extend_scalar_def),
            (InputObjectTypeExtensionNode, self._make_extend_input_object_def),
        )
        if isinstance(definition, SchemaDefinitionNode):
            self._check_schema_def(definition)
            return None
        if isinstance(definition, DirectiveDefinitionNode):
            self.schema_composer.add_directive(self.make_directive_def(definition))
            return None
        for node_class, handler in handlers:
            if isinstance(definition, node_class):
                return handler(definition)
        raise SchemaStructureError(f'Type kind "{definition.kind}" not supported.')

    def type_from_ast(self, type_node: TypeNode) -> Any:
        """Convert a type reference from SDL, deferring names that are not registered yet."""
        if isinstance(type_node, ListTypeNode):
            return ListComposer(self.type_from_ast(type_node.type))
        if isinstance(type_node, NonNullTypeNode):
            return NonNullComposer(self.type_from_ast(type_node.type))
        if not isinstance(type_node, NamedTypeNode):
            raise InvalidConstructionError(f"Must be a named type for {type_node!r}.")

        type_name = type_node.name.value
        if self.schema_composer.has(type_name):
            return self.schema_composer.get(type_name)
        built_in_type = self.get_built_in_type(type_name)
        if built_in_type is not None:
            return built_in_type
        return ThunkComposer(lambda: self.schema_composer.get(type_name), type_name)

    def type_from_ast_output(self, type_node: TypeNode) -> Any:
        type_composer = self.type_from_ast(type_node)
        if not is_some_output_type_composer(type_composer):
            raise InvalidConstructionError(
                f"TypeAST should be for Output types. But received {type_composer!r}"
            )
        return type_composer

    def type_from_ast_input(self, type_node: TypeNode) -> Any:
        type_composer = self.type_from_ast(type_node)
        if not is_some_input_type_composer(type_composer):
            raise InvalidConstructionError(
                f"TypeAST should be for Input types. But received {type_composer!r}"
            )
        return type_composer

    def _check_schema_def(self, definition: SchemaDefinitionNode) -> None:
        for operation_type in definition.operation_types:
            operation = operation_type.operation.value
            valid_type_name = _SCHEMA_DEFINITION_ROOT_NAMES[operation]
            actual_type_name = operation_type.type.name.value
            if actual_type_name != valid_type_name:
                raise SchemaStructureError(
                    f"Incorrect type name '{actual_type_name}' for '{operation}'. The valid "
                    f'definition is "schema {{ {operation}: {valid_type_name} }}"'
                )

    def _make_input_value_configs(
        self,
        value_nodes: Optional[Sequence[InputValueDefinitionNode]],
        config_class: InputValueConfigClass,
    ) -> Dict[str, Any]:
        result = {}
        for value_node in value_nodes or []:
            value_type = self.type_from_ast_input(value_node.type)
            config = config_class(
                type=value_type,
                description=get_description(value_node),
                deprecation_reason=_get_deprecation_reason(value_node),
                directives=self.parse_directives(value_node.directives),
                ast_node=value_node,
            )
            if value_node.default_value is not None:
                # Defaults of scalars and enums are coerced right away, other defaults once the
                # types they reference are all defined.
                named_type = unwrap_type_composer(value_type) if _is_resolved(value_type) else None
                if get_composer_kind(named_type) in (
                    TypeComposerKind.SCALAR,
                    TypeComposerKind.ENUM,
                ):
                    config.default_value = value_from_ast(
                        value_node.default_value, value_type.get_type()
                    )
                else:
                    config.default_value_node = value_node.default_value
            result[value_node.name.value] = config
        return result

    def _make_field_def_map(self, definition: Any) -> Dict[str, FieldConfig]:
        result = {}
        for field_node in definition.fields or []:
            result[field_node.name.value] = FieldConfig(
                type=self.type_from_ast_output(field_node.type),
                args=self._make_input_value_configs(field_node.arguments, ArgumentConfig),
                description=get_description(field_node),
                deprecation_reason=_get_deprecation_reason(field_node),
                directives=self.parse_directives(field_node.directives),
                ast_node=field_node,
            )
        return result

    def _make_enum_values_def(self, definition: Any) -> Dict[str, EnumValueConfig]:
        return {
            value_node.name.value: EnumValueConfig(
                value=value_node.name.value,
                description=get_description(value_node),
                deprecation_reason=_get_deprecation_reason(value_node),
                directives=self.parse_directives(value_node.directives),
                ast_node=value_node,
            )
            for value_node in definition.values or []
        }

    def _make_implemented_interfaces(self, definition: Any) -> List[Any]:
        return [
            self.convert_interface_type_definition(interface_node.name.value)
            for interface_node in definition.interfaces or []
        ]

    def _make_type_def(self, definition: ObjectTypeDefinitionNode) -> ObjectTypeComposer:
        return self.schema_composer.create_object_tc(
            {
                "name": definition.name.value,
                "description": get_description(definition),
                "fields": self._make_field_def_map(definition),
                "interfaces": self._make_implemented_interfaces(definition),
                "ast_node": definition,
                "directives": self.parse_directives(definition.directives),
            }
        )

    def _make_interface_def(self, definition: InterfaceTypeDefinitionNode) -> Any:
        return self.schema_composer.create_interface_tc(
            {
                "name": definition.name.value,
                "description": get_description(definition),
                "fields": self._make_field_def_map(definition),
                "interfaces": self._make_implemented_interfaces(definition),
                "ast_node": definition,
                "directives": self.parse_directives(definition.directives),
            }
        )

    def _make_enum_def(self, definition: EnumTypeDefinitionNode) -> EnumTypeComposer:
        return self.schema_composer.create_enum_tc(
            {
                "name": definition.name.value,
                "description": get_description(definition),
                "values": self._make_enum_values_def(definition),
                "ast_node": definition,
                "directives": self.parse_directives(definition.directives),
            }
        )

    def _make_union_def(self, definition: UnionTypeDefinitionNode) -> UnionTypeComposer:
        return self.schema_composer.create_union_tc(
            {
                "name": definition.name.value,
                "description": get_description(definition),
                "types": [type_node.name.value for type_node in definition.types or []],
                "ast_node": definition,
                "directives": self.parse_directives(definition.directives),
            }
        )

    def _make_scalar_def(self, definition: ScalarTypeDefinitionNode) -> ScalarTypeComposer:
        built_in_type = self.get_built_in_type(definition.name.value)
        if built_in_type is not None:
            if definition.directives:
                built_in_type.set_directives(self.parse_directives(definition.directives))
            return built_in_type
        return self.schema_composer.create_scalar_tc(
            {
                "name": definition.name.value,
                "description": get_description(definition),
                "ast_node": definition,
                "directives": self.parse_directives(definition.directives),
            }
        )

    def _make_input_object_def(self, definition: InputObjectTypeDefinitionNode) -> Any:
        return self.schema_composer.create_input_tc(
            {
                "name": definition.name.value,
                "description": get_description(definition),
                "fields": self._make_input_value_configs(definition.fields, InputFieldConfig),
                "ast_node": definition,
                "directives": self.parse_directives(definition.directives),
            }
        )

    def _make_extend_type_def(self, definition: ObjectTypeExtensionNode) -> ObjectTypeComposer:
        type_composer = self.schema_composer.get_or_create_otc(definition.name.value)
        type_composer.add_interfaces(self._make_implemented_interfaces(definition))
        type_composer.add_fields(self._make_field_def_map(definition))
        self._extend_directives(type_composer, definition)
        return type_composer

    def _make_extend_interface_def(self, definition: InterfaceTypeExtensionNode) -> Any:
        type_composer = self.schema_composer.get_or_create_iftc(definition.name.value)
        type_composer.add_interfaces(self._make_implemented_interfaces(definition))
        type_composer.add_fields(self._make_field_def_map(definition))
        self._extend_directives(type_composer, definition)
        return type_composer

    def _make_extend_enum_def(self, definition: EnumTypeExtensionNode) -> EnumTypeComposer:
        type_composer = self.schema_composer.get_or_create_etc(definition.name.value)
        type_composer.add_fields(self._make_enum_values_def(definition))
        self._extend_directives(type_composer, definition)
        return type_composer

    def _make_extend_union_def(self, definition: UnionTypeExtensionNode) -> UnionTypeComposer:
        type_composer = self.schema_composer.get_or_create_utc(definition.name.value)
        type_composer.add_types([type_node.name.value for type_node in definition.types or []])
        self._extend_directives(type_composer, definition)
        return type_composer

    def _make_extend_scalar_def(self, definition: ScalarTypeExtensionNode) -> ScalarTypeComposer:
        type_composer = self.schema_composer.get_stc(definition.name.value)
        self._extend_directives(type_composer, definition)
        return type_composer

    def _make_extend_input_object_def(self, definition: InputObjectTypeExtensionNode) -> Any:
        type_composer = self.schema_composer.get_or_create_itc(definition.name.value)
        type_composer.add_fields(
            self._make_input_value_configs(definition.fields, InputFieldConfig)
        )
        self._extend_directives(type_composer, definition)
        return type_composer

    def _extend_directives(self, type_composer: Any, definition: Any) -> None:
        if definition.directives:
            type_composer.set_directives(
                type_composer.get_directives() + self.parse_directives(definition.directives)
            )


def _is_resolved(type_composer: Any) -> bool:
    """Return True if no deferred reference between the wrappers and the named type is pending."""
    current = type_composer
    while get_composer_kind(current) in (
        TypeComposerKind.LIST,
        TypeComposerKind.NON_NULL,
        TypeComposerKind.THUNK,
    ):
        if get_composer_kind(current) == TypeComposerKind.THUNK and not current.evaluated:
            return False
        current = current.of_type
    return True
