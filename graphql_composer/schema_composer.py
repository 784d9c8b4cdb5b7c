# Copyright 2026-present Kensho Technologies, LLC.
"""The SchemaComposer: a registry of type composers that builds a GraphQLSchema.

Every type composer belongs to exactly one SchemaComposer, which owns the registry (type name or
graphql-core type -> composer), the directive declarations and the three root types. Root types
are stored under the fixed keys "Query", "Mutation" and "Subscription", whatever their names.
"""
from dataclasses import dataclass, field
import logging
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Type, Union

from graphql import (
    GraphQLDirective,
    GraphQLList,
    GraphQLNamedType,
    GraphQLNonNull,
    GraphQLSchema,
    SchemaDefinitionNode,
    SchemaExtensionNode,
    parse,
    specified_directives,
)

from .composers.enum_type import EnumTypeComposer
from .composers.input_type import InputTypeComposer
from .composers.interface_type import InterfaceTypeComposer
from .composers.object_type import ObjectTypeComposer
from .composers.scalar_type import ScalarTypeComposer
from .composers.union_type import UnionTypeComposer
from .exceptions import InvalidConstructionError, SchemaStructureError, TypeNotFoundError
from .schema_printer import SchemaPrinterOptions, print_schema_composer
from .type_helpers import (
    clone_type_to,
    get_composer_kind,
    get_type_definition_string_kind,
    is_named_type_composer,
    is_type_composer,
)
from .type_mapper import TypeMapper, get_composer_class_for_graphql_type
from .type_storage import TypeStorage
from .typedefs import (
    MUTATION_TYPE_KEY,
    QUERY_TYPE_KEY,
    ROOT_TYPE_KEYS,
    SUBSCRIPTION_TYPE_KEY,
    Extensions,
    TypeComposerKind,
)


logger = logging.getLogger(__name__)

# Kinds whose merge re-resolves the referenced output types by name.
_NAME_REFERENCING_KINDS = (
    TypeComposerKind.OBJECT,
    TypeComposerKind.INTERFACE,
    TypeComposerKind.UNION,
)

NamedComposerClass = Union[
    Type[ObjectTypeComposer],
    Type[InputTypeComposer],
    Type[InterfaceTypeComposer],
    Type[UnionTypeComposer],
    Type[EnumTypeComposer],
    Type[ScalarTypeComposer],
]


@dataclass
class SchemaBuildOptions:
    """Options of SchemaComposer.build_schema().

    Args:
        description: schema description, replacing the SchemaComposer's own description
        types: extra types to include, as type composers or graphql-core named types
        directives: extra directive declarations
        extensions: schema extensions
        ast_node: schema definition AST node
        extension_ast_nodes: schema extension AST nodes
        keep_unused_types: include every registered type, whether it is reachable from the root
            types or not
    """

    description: Optional[str] = None
    types: List[Any] = field(default_factory=list)
    directives: List[GraphQLDirective] = field(default_factory=list)
    extensions: Extensions = field(default_factory=dict)
    ast_node: Optional[SchemaDefinitionNode] = None
    extension_ast_nodes: List[SchemaExtensionNode] = field(default_factory=list)
    keep_unused_types: bool = False


class SchemaComposer(TypeStorage[Any]):
    """Registry of type composers, with clone, merge and schema building operations.

    SchemaComposers are fully independent of each other: types are only ever shared between
    them by clone() and merge(), which copy the types they need.
    """

    def __init__(self, schema_or_sdl: Union[None, str, GraphQLSchema] = None) -> None:
        """Create an empty SchemaComposer, or import the types of SDL or of a GraphQLSchema.

        Args:
            schema_or_sdl: optional SDL document or graphql-core schema to import

        Raises:
            InvalidConstructionError if schema_or_sdl is of any other type
        """
        super().__init__()
        self.type_mapper = TypeMapper(self)
        self._directives: List[GraphQLDirective] = list(specified_directives)
        self._schema_must_have_types: List[Any] = []
        self._description: Optional[str] = None

        if isinstance(schema_or_sdl, str):
            self.add_type_defs(schema_or_sdl)
        elif isinstance(schema_or_sdl, GraphQLSchema):
            self._import_graphql_schema(schema_or_sdl)
        elif schema_or_sdl is not None:
            raise InvalidConstructionError(
                f"SchemaComposer accepts SDL or a GraphQLSchema, got {schema_or_sdl!r}"
            )

    def __repr__(self) -> str:
        return f"SchemaComposer({len(self)} keys)"

    def _import_graphql_schema(self, schema: GraphQLSchema) -> None:
        # Directives first, so that directives applied in AST nodes are parsed with their types.
        for directive in schema.directives:
            self.add_directive(directive)

        root_types = (
            (QUERY_TYPE_KEY, schema.query_type),
            (MUTATION_TYPE_KEY, schema.mutation_type),
            (SUBSCRIPTION_TYPE_KEY, schema.subscription_type),
        )
        for root_key, root_type in root_types:
            if root_type is not None:
                self.set(root_key, self.type_mapper.convert_graphql_type_to_composer(root_type))

        for type_name, graphql_type in schema.type_map.items():
            if not type_name.startswith("__"):
                self.type_mapper.convert_graphql_type_to_composer(graphql_type)
        self._description = schema.description

    # -----------------------------------------------
    # Root types
    # -----------------------------------------------

    @property
    def query(self) -> ObjectTypeComposer:
        return self.get_or_create_otc(QUERY_TYPE_KEY)

    @property
    def mutation(self) -> ObjectTypeComposer:
        return self.get_or_create_otc(MUTATION_TYPE_KEY)

    @property
    def subscription(self) -> ObjectTypeComposer:
        return self.get_or_create_otc(SUBSCRIPTION_TYPE_KEY)

    def _get_root_types(self) -> Dict[str, ObjectTypeComposer]:
        return {
            root_key: self.get_otc(root_key) for root_key in ROOT_TYPE_KEYS if self.has(root_key)
        }

    # -----------------------------------------------
    # Type creation
    # -----------------------------------------------

    def create_temp_tc(self, type_or_sdl: Any) -> Any:
        """Create a type composer of the matching kind, without registering it by name.

        A composer is returned as is. The new composer is still registered under its graphql-core
        type instance, and named types other than roots under their name, by their constructor.

        Args:
            type_or_sdl: graphql-core type, SDL definition of a single type, or type composer

        Raises:
            InvalidConstructionError if the value cannot be converted to a type composer
        """
        if is_type_composer(type_or_sdl):
            return type_or_sdl
        if isinstance(type_or_sdl, (GraphQLList, GraphQLNonNull)):
            return self.type_mapper.convert_graphql_type_to_composer(type_or_sdl)
        if isinstance(type_or_sdl, GraphQLNamedType):
            composer_class = get_composer_class_for_graphql_type(type_or_sdl)
            return composer_class.create_temp(type_or_sdl, self)
        if get_type_definition_string_kind(type_or_sdl) is not None:
            return self.type_mapper.convert_sdl_type_definition(type_or_sdl)
        raise InvalidConstructionError(
            f"Cannot create a type composer from {type_or_sdl!r}. Provide a GraphQL type, an SDL "
            f"type definition or a type composer."
        )

    def create_tc(self, type_or_sdl: Any) -> Any:
        """Return the registered composer of the type, or create and register a new one."""
        if self.has(type_or_sdl) and is_named_type_composer(self.get(type_or_sdl)):
            return self.get(type_or_sdl)
        type_composer = self.create_temp_tc(type_or_sdl)
        if is_named_type_composer(type_composer):
            return type(type_composer).create(type_composer, self)
        return type_composer

    def create_object_tc(self, type_def: Any) -> ObjectTypeComposer:
        return ObjectTypeComposer.create(type_def, self)

    def create_input_tc(self, type_def: Any) -> InputTypeComposer:
        return InputTypeComposer.create(type_def, self)

    def create_enum_tc(self, type_def: Any) -> EnumTypeComposer:
        return EnumTypeComposer.create(type_def, self)

    def create_interface_tc(self, type_def: Any) -> InterfaceTypeComposer:
        return InterfaceTypeComposer.create(type_def, self)

    def create_union_tc(self, type_def: Any) -> UnionTypeComposer:
        return UnionTypeComposer.create(type_def, self)

    def create_scalar_tc(self, type_def: Any) -> ScalarTypeComposer:
        return ScalarTypeComposer.create(type_def, self)

    def add_type_defs(self, sdl: str) -> TypeStorage:
        """Register the types, type extensions and directives of an SDL document.

        Definitions of the Query, Mutation and Subscription types add their fields and
        interfaces to the root types, in document order with extensions of the root types.

        Returns:
            TypeStorage of the composers created or extended by the document, by type name
        """
        parsed_types: TypeStorage = TypeStorage()
        for definition in parse(sdl).definitions:
            type_composer = self.type_mapper.make_schema_def(definition)
            if type_composer is None:
                continue
            type_name = type_composer.get_type_name()
            if type_name in ROOT_TYPE_KEYS:
                type_composer = self._extend_root_type(type_name, type_composer)
            parsed_types.set(type_name, type_composer)
        return parsed_types

    def _extend_root_type(self, root_key: str, type_composer: Any) -> ObjectTypeComposer:
        if get_composer_kind(type_composer) != TypeComposerKind.OBJECT:
            raise SchemaStructureError(
                f"Root type {root_key} must be an object type, got {type_composer!r}."
            )
        root = self.get_or_create_otc(root_key)
        if type_composer is root:
            return root
        root.add_fields(
            {
                field_name: field_config.copy()
                for field_name, field_config in type_composer.get_fields().items()
            }
        )
        root.add_interfaces(type_composer.get_interfaces())
        if root.get_description() is None:
            root.set_description(type_composer.get_description())
        return root

    # -----------------------------------------------
    # Type lookup
    # -----------------------------------------------

    def _get_or_create(
        self,
        composer_class: NamedComposerClass,
        type_name: str,
        on_create: Optional[Callable[[Any], Any]],
    ) -> Any:
        if self.has(type_name):
            return self._get_of_class(type_name, composer_class)
        type_composer = composer_class.create_temp(type_name, self)
        self.set(type_name, type_composer)
        if on_create is not None:
            on_create(type_composer)
        return type_composer

    def get_or_create_otc(
        self, type_name: str, on_create: Optional[Callable[[Any], Any]] = None
    ) -> ObjectTypeComposer:
        """Return the object type registered under the name, creating an empty one if absent.

        Args:
            type_name: registry key, usually the type name
            on_create: called with the new composer, only if one was created

        Raises:
            TypeNotFoundError if a type of another kind is registered under the name
        """
        return self._get_or_create(ObjectTypeComposer, type_name, on_create)

    def get_or_create_itc(
        self, type_name: str, on_create: Optional[Callable[[Any], Any]] = None
    ) -> InputTypeComposer:
        return self._get_or_create(InputTypeComposer, type_name, on_create)

    def get_or_create_etc(
        self, type_name: str, on_create: Optional[Callable[[Any], Any]] = None
    ) -> EnumTypeComposer:
        return self._get_or_create(EnumTypeComposer, type_name, on_create)

    def get_or_create_iftc(
        self, type_name: str, on_create: Optional[Callable[[Any], Any]] = None
    ) -> InterfaceTypeComposer:
        return self._get_or_create(InterfaceTypeComposer, type_name, on_create)

    def get_or_create_utc(
        self, type_name: str, on_create: Optional[Callable[[Any], Any]] = None
    ) -> UnionTypeComposer:
        return self._get_or_create(UnionTypeComposer, type_name, on_create)

    def get_or_create_stc(
        self, type_name: str, on_create: Optional[Callable[[Any], Any]] = None
    ) -> ScalarTypeComposer:
        return self._get_or_create(ScalarTypeComposer, type_name, on_create)

    def _get_of_class(self, key: Any, composer_class: NamedComposerClass) -> Any:
        if not self.has(key):
            raise TypeNotFoundError(
                f"Cannot find {composer_class.__name__} with name {key!r}: no type is "
                f"registered under it."
            )
        type_composer = self.get(key)
        if not isinstance(type_composer, composer_class):
            raise TypeNotFoundError(
                f"Cannot find {composer_class.__name__} with name {key!r}: the registered type "
                f"is {type_composer!r}."
            )
        return type_composer

    def get_otc(self, key: Any) -> ObjectTypeComposer:
        """Return the object type registered under the key.

        Raises:
            TypeNotFoundError if nothing, or a type of another kind, is registered under the key
        """
        return self._get_of_class(key, ObjectTypeComposer)

    def get_itc(self, key: Any) -> InputTypeComposer:
        return self._get_of_class(key, InputTypeComposer)

    def get_etc(self, key: Any) -> EnumTypeComposer:
        return self._get_of_class(key, EnumTypeComposer)

    def get_iftc(self, key: Any) -> InterfaceTypeComposer:
        return self._get_of_class(key, InterfaceTypeComposer)

    def get_utc(self, key: Any) -> UnionTypeComposer:
        return self._get_of_class(key, UnionTypeComposer)

    def get_stc(self, key: Any) -> ScalarTypeComposer:
        return self._get_of_class(key, ScalarTypeComposer)

    def get_any_tc(self, type_or_name: Any) -> Any:
        """Return the named type composer for a key, a graphql-core type or an SDL definition.

        Unregistered graphql-core types and SDL definitions are converted to new composers.

        Raises:
            TypeNotFoundError if a key is not registered
        """
        if self.has(type_or_name):
            type_composer = self.get(type_or_name)
        elif isinstance(type_or_name, GraphQLNamedType) or get_type_definition_string_kind(
            type_or_name
        ):
            type_composer = self.create_temp_tc(type_or_name)
        else:
            raise TypeNotFoundError(f"Type with name {type_or_name!r} does not exist.")
        if not is_named_type_composer(type_composer):
            raise TypeNotFoundError(
                f"Type {type_or_name!r} is not a named type composer: {type_composer!r}"
            )
        return type_composer

    def _is_type_of_kind(self, type_or_name: Any, kind: TypeComposerKind) -> bool:
        if is_type_composer(type_or_name):
            return get_composer_kind(type_or_name) == kind
        if isinstance(type_or_name, GraphQLNamedType):
            return get_composer_class_for_graphql_type(type_or_name).kind == kind
        definition_kind = get_type_definition_string_kind(type_or_name)
        if definition_kind is not None:
            return definition_kind == kind
        return self.has(type_or_name) and get_composer_kind(self.get(type_or_name)) == kind

    def is_object_type(self, type_or_name: Any) -> bool:
        return self._is_type_of_kind(type_or_name, TypeComposerKind.OBJECT)

    def is_input_object_type(self, type_or_name: Any) -> bool:
        return self._is_type_of_kind(type_or_name, TypeComposerKind.INPUT_OBJECT)

    def is_interface_type(self, type_or_name: Any) -> bool:
        return self._is_type_of_kind(type_or_name, TypeComposerKind.INTERFACE)

    def is_union_type(self, type_or_name: Any) -> bool:
        return self._is_type_of_kind(type_or_name, TypeComposerKind.UNION)

    def is_enum_type(self, type_or_name: Any) -> bool:
        return self._is_type_of_kind(type_or_name, TypeComposerKind.ENUM)

    def is_scalar_type(self, type_or_name: Any) -> bool:
        return self._is_type_of_kind(type_or_name, TypeComposerKind.SCALAR)

    # -----------------------------------------------
    # Directives
    # -----------------------------------------------

    def get_directives(self) -> List[GraphQLDirective]:
        return list(self._directives)

    def get_directive(self, directive_name: str) -> Optional[GraphQLDirective]:
        for directive in self._directives:
            if directive.name == directive_name:
                return directive
        return None

    def has_directive(self, directive_or_name: Union[str, GraphQLDirective]) -> bool:
        """Return True if the directive, given by name or declaration, is declared."""
        if isinstance(directive_or_name, GraphQLDirective):
            return any(
                directive is directive_or_name or directive.name == directive_or_name.name
                for directive in self._directives
            )
        return self.get_directive(directive_or_name) is not None

    def add_directive(self, directive: GraphQLDirective) -> "SchemaComposer":
        """Declare a directive, unless a directive with the same name is already declared.

        Raises:
            InvalidConstructionError if the value is not a GraphQLDirective
        """
        if not isinstance(directive, GraphQLDirective):
            raise InvalidConstructionError(
                f"You should provide GraphQLDirective to SchemaComposer.add_directive(), "
                f"got {directive!r}"
            )
        if not self.has_directive(directive):
            self._directives.append(directive)
        return self

    def remove_directive(self, directive_or_name: Union[str, GraphQLDirective]) -> "SchemaComposer":
        """Remove a directive declaration, given by name or by reference."""
        if isinstance(directive_or_name, GraphQLDirective):
            self._directives = [
                directive for directive in self._directives if directive is not directive_or_name
            ]
        else:
            self._directives = [
                directive for directive in self._directives if directive.name != directive_or_name
            ]
        return self

    # -----------------------------------------------
    # Registry maintenance
    # -----------------------------------------------

    def clear(self) -> None:
        """Remove all types and custom directive declarations."""
        super().clear()
        self._directives = list(specified_directives)
        self._schema_must_have_types = []

    def get_description(self) -> Optional[str]:
        return self._description

    def set_description(self, description: Optional[str]) -> "SchemaComposer":
        self._description = description
        return self

    def add_schema_must_have_type(self, type_or_definition: Any) -> "SchemaComposer":
        """Make build_schema() include a type even if it is not reachable from the roots."""
        type_composer = self.create_tc(type_or_definition)
        if type_composer not in self._schema_must_have_types:
            self._schema_must_have_types.append(type_composer)
        return self

    def remove_empty_types(
        self, type_composer: ObjectTypeComposer, passed_types: Optional[Set[str]] = None
    ) -> None:
        """Remove fields whose object type has no fields, following nested object types.

        A field is removed once its object type is found empty after its own empty fields were
        removed. Every type name is descended into at most once, so cyclic types terminate.
        """
        if passed_types is None:
            passed_types = {type_composer.get_type_name()}

        for field_name in type_composer.get_field_names():
            field_tc = type_composer.get_field_tc(field_name)
            if get_composer_kind(field_tc) != TypeComposerKind.OBJECT:
                continue

            field_type_name = field_tc.get_type_name()
            if field_type_name not in passed_types:
                passed_types.add(field_type_name)
                self.remove_empty_types(field_tc, passed_types)

            if not field_tc.get_field_names():
                logger.warning(
                    "Delete field '%(type_name)s.%(field_name)s' with type '%(field_type_name)s', "
                    "cause it does not have fields.",
                    {
                        "type_name": type_composer.get_type_name(),
                        "field_name": field_name,
                        "field_type_name": field_type_name,
                    },
                )
                type_composer.remove_field(field_name)

    # -----------------------------------------------
    # Clone, merge and build
    # -----------------------------------------------

    def clone(self) -> "SchemaComposer":
        """Return a new SchemaComposer holding a clone of every registered type.

        One identity map is used for the whole operation, so that types referencing each other
        keep referencing each other's clones. Directive declarations are shared.
        """
        cloned_schema = type(self)()
        identity_map: Dict[Any, Any] = {}
        for key, type_composer in self.items():
            if isinstance(key, str):
                cloned_schema.set(key, clone_type_to(type_composer, cloned_schema, identity_map))

        cloned_schema._directives = list(self._directives)
        cloned_schema._schema_must_have_types = [
            clone_type_to(type_composer, cloned_schema, identity_map)
            for type_composer in self._schema_must_have_types
        ]
        cloned_schema._description = self._description
        logger.debug("Cloned %s types into a new SchemaComposer.", len(identity_map))
        return cloned_schema

    def merge(self, schema: Union["SchemaComposer", GraphQLSchema]) -> "SchemaComposer":
        """Merge the types and directives of a SchemaComposer or a GraphQLSchema into this one.

        Root types are merged by role, whatever their names, and references to the other root
        type names are redirected to the roots of this SchemaComposer. Every other type is merged
        into the type registered here under the same key or name, or else cloned into this
        SchemaComposer. Directives are added unless one with the same name is declared already.

        Raises:
            InvalidConstructionError if schema is of another type, or two types with the same name
            are of incompatible kinds
        """
        if isinstance(schema, GraphQLSchema):
            other = type(self)(schema)
        elif isinstance(schema, SchemaComposer):
            other = schema
        else:
            raise InvalidConstructionError(
                f"SchemaComposer.merge() accepts only SchemaComposer or GraphQLSchema instances, "
                f"got {schema!r}"
            )

        identity_map: Dict[Any, Any] = {}
        other_roots = other._get_root_types()
        other_root_tcs = list(other_roots.values())
        roots = {root_key: self.get_or_create_otc(root_key) for root_key in other_roots}
        renamed_roots = {
            other_root.get_type_name(): roots[root_key].get_type_name()
            for root_key, other_root in other_roots.items()
        }
        for root_key, other_root in other_roots.items():
            roots[root_key].merge(other_root, renamed_roots)
            identity_map[other_root] = roots[root_key]

        merged_types = []
        for key, type_composer in other.items():
            if not isinstance(key, str) or key.startswith("__"):
                continue
            if key in ROOT_TYPE_KEYS or type_composer in identity_map:
                continue
            existing = self._get_merge_target(key, type_composer)
            if existing is not None:
                if get_composer_kind(existing) == get_composer_kind(type_composer):
                    identity_map[type_composer] = existing
                merged_types.append((existing, type_composer))

        for existing, type_composer in merged_types:
            if get_composer_kind(existing) in _NAME_REFERENCING_KINDS:
                existing.merge(type_composer, renamed_roots)
            else:
                existing.merge(type_composer)

        cloned_count = 0
        for key, type_composer in other.items():
            if not isinstance(key, str) or key.startswith("__") or key in ROOT_TYPE_KEYS:
                continue
            if type_composer in other_root_tcs:
                continue
            if type_composer in identity_map:
                if not self.has(key):
                    self.set(key, identity_map[type_composer])
                continue
            cloned = clone_type_to(type_composer, self, identity_map)
            self.set(key, cloned)
            self.add(cloned)
            cloned_count += 1

        for directive in other.get_directives():
            self.add_directive(directive)

        logger.debug(
            "Merged %s types into existing types and cloned %s types.",
            len(merged_types),
            cloned_count,
        )
        return self

    def _get_merge_target(self, key: str, type_composer: Any) -> Any:
        if self.has(key):
            return self.get(key)
        type_name = type_composer.get_type_name()
        if self.has(type_name):
            return self.get(type_name)
        return None

    def build_schema(self, options: Optional[SchemaBuildOptions] = None) -> GraphQLSchema:
        """Build the graphql-core schema from the root types.

        Fields whose object types end up without fields are removed first; Mutation and
        Subscription are only included if they have fields left.

        Raises:
            SchemaStructureError if there is no Query type with at least one field
        """
        if options is None:
            options = SchemaBuildOptions()

        self._sync_registered_types()
        root_types = {}
        for root_key, root in self._get_root_types().items():
            self.remove_empty_types(root)
            if root.get_field_names():
                root_types[root_key] = root.get_type()

        if QUERY_TYPE_KEY not in root_types:
            raise SchemaStructureError("Must be initialized Query type with at least one field.")

        types = [type_composer.get_type() for type_composer in self._schema_must_have_types]
        types.extend(
            type_.get_type() if is_type_composer(type_) else type_ for type_ in options.types
        )
        if options.keep_unused_types:
            types.extend(self._get_registered_graphql_types(exclude=types))

        directives = list(self._directives)
        directives.extend(
            directive for directive in options.directives if not self.has_directive(directive)
        )

        description = options.description
        if description is None:
            description = self._description

        return GraphQLSchema(
            query=root_types[QUERY_TYPE_KEY],
            mutation=root_types.get(MUTATION_TYPE_KEY),
            subscription=root_types.get(SUBSCRIPTION_TYPE_KEY),
            types=types or None,
            directives=directives,
            description=description,
            extensions=options.extensions or None,
            ast_node=options.ast_node,
            extension_ast_nodes=options.extension_ast_nodes or None,
        )

    def _sync_registered_types(self) -> None:
        """Re-synthesize the graphql-core types of all modified composers.

        A type only re-synthesizes the types it references when it is modified itself, so a
        change to a type deep in the graph would otherwise go unnoticed.
        """
        for type_composer in list(self.values()):
            if is_named_type_composer(type_composer):
                type_composer.get_type()

    def _get_registered_graphql_types(self, exclude: Iterable[Any]) -> List[GraphQLNamedType]:
        excluded_types = list(exclude)
        result = []
        for key, type_composer in self.items():
            if not isinstance(key, str) or key in ROOT_TYPE_KEYS or key.startswith("__"):
                continue
            if not is_named_type_composer(type_composer):
                continue
            graphql_type = type_composer.get_type()
            if graphql_type not in excluded_types and graphql_type not in result:
                result.append(graphql_type)
        return result

    # -----------------------------------------------
    # Printing
    # -----------------------------------------------

    def get_type_sdl(
        self,
        type_name: str,
        deep: bool = False,
        exclude: Optional[Iterable[str]] = None,
        options: Optional[SchemaPrinterOptions] = None,
    ) -> str:
        """Print the SDL of one registered type, and of the types it references if deep is set."""
        return self.get_any_tc(type_name).to_sdl(deep=deep, exclude=exclude, options=options)

    def to_sdl(self, options: Optional[SchemaPrinterOptions] = None) -> str:
        """Print the SDL of all registered types and custom directive declarations."""
        return print_schema_composer(self, options)
