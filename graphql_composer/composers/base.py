# Copyright 2026-present Kensho Technologies, LLC.
"""Behaviour shared by the six named type composers.

A named type composer wraps exactly one graphql-core named type instance. The instance is
created once and handed out by get_type(); when the composer is modified, the instance is
re-synthesized in place on the next call to get_type(), so that types already referencing it
observe the change.
"""
from typing import Any, Dict, Iterable, List, Optional, Set, Tuple, Type

from graphql import GraphQLNamedType

from ..exceptions import CloneTargetMissingError, InvalidConstructionError
from ..scalars import SPECIFIED_SCALAR_TYPES
from ..schema_printer import print_named_type_composer, print_named_type_composers
from ..type_helpers import (
    get_composer_kind,
    get_type_definition_string_kind,
    is_type_name_string,
    validate_type_name,
)
from ..type_storage import TypeStorage
from ..typedefs import (
    ROOT_TYPE_KEYS,
    AppliedDirective,
    DirectiveArgs,
    DirectiveList,
    Extensions,
    TypeComposerKind,
    to_applied_directive,
)
from ..wrappers import ListComposer, NonNullComposer, unwrap_type_composer


def check_schema_composer(schema_composer: Any, owner_name: str) -> None:
    """Ensure the value looks like a SchemaComposer before a type composer is attached to it.

    Raises:
        InvalidConstructionError if the value is not a SchemaComposer
    """
    if not isinstance(schema_composer, TypeStorage) or not hasattr(schema_composer, "type_mapper"):
        raise InvalidConstructionError(
            f"You must provide SchemaComposer instance as a second argument for "
            f"{owner_name}, got {schema_composer!r}"
        )


class NamedTypeComposer:
    """Base class of ObjectTypeComposer, InputTypeComposer, InterfaceTypeComposer,
    UnionTypeComposer, EnumTypeComposer and ScalarTypeComposer.

    Subclasses define kind and graphql_type_class, read their content from the wrapped
    graphql-core type in __init__ (after calling this constructor, which registers the composer)
    and write it back in _sync_graphql_type().
    """

    kind: TypeComposerKind
    graphql_type_class: Type[GraphQLNamedType] = GraphQLNamedType

    def __init__(self, graphql_type: GraphQLNamedType, schema_composer: Any) -> None:
        """Wrap a graphql-core type and register the new composer in the SchemaComposer.

        The composer is registered under the graphql-core instance and under its type name
        before any of its content is converted, so that types referencing themselves resolve to
        this very composer.

        Args:
            graphql_type: graphql-core type of the kind matching this composer class
            schema_composer: SchemaComposer that owns the new type composer

        Raises:
            InvalidConstructionError if schema_composer is not a SchemaComposer, or graphql_type
            is of the wrong kind
        """
        check_schema_composer(schema_composer, type(self).__name__)
        if not isinstance(graphql_type, self.graphql_type_class):
            raise InvalidConstructionError(
                f"{type(self).__name__} accepts only {self.graphql_type_class.__name__} "
                f"instance, got {graphql_type!r}"
            )

        self.schema_composer = schema_composer
        self._gql_type = graphql_type
        self._gql_extensions: Extensions = dict(graphql_type.extensions or {})
        self._gql_directives: DirectiveList = schema_composer.type_mapper.parse_directives(
            getattr(graphql_type.ast_node, "directives", None)
        )
        self._modified = True

        schema_composer.set(graphql_type, self)
        if self._is_registered_by_name():
            schema_composer.set(self.get_type_name(), self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.get_type_name()})"

    def _is_registered_by_name(self) -> bool:
        return True

    # -----------------------------------------------
    # Creation
    # -----------------------------------------------

    @classmethod
    def create(cls, type_def: Any, schema_composer: Any) -> Any:
        """Return the composer registered for the definition, or create and register a new one.

        Args:
            type_def: type name, SDL definition, graphql-core type, composer or config dict
            schema_composer: SchemaComposer to look the definition up in and to register in

        Returns:
            composer of this class
        """
        check_schema_composer(schema_composer, f"{cls.__name__}.create(type_def, sc)")
        if schema_composer.has_instance(type_def, cls):
            return schema_composer.get(type_def)

        type_composer = cls.create_temp(type_def, schema_composer)
        if type_composer._is_registered_by_name():
            schema_composer.add(type_composer)
        return type_composer

    @classmethod
    def create_temp(cls, type_def: Any, schema_composer: Any) -> Any:
        """Create a composer of this class from a definition without looking it up first.

        Args:
            type_def: type name, SDL definition, graphql-core type, composer or config dict
            schema_composer: SchemaComposer the new composer belongs to

        Returns:
            composer of this class

        Raises:
            InvalidConstructionError if the definition cannot be converted to this kind
        """
        check_schema_composer(schema_composer, f"{cls.__name__}.create_temp(type_def, sc)")

        if isinstance(type_def, cls):
            return type_def
        if isinstance(type_def, cls.graphql_type_class):
            return cls(type_def, schema_composer)
        if isinstance(type_def, str):
            if get_type_definition_string_kind(type_def) is not None:
                type_composer = schema_composer.type_mapper.convert_sdl_type_definition(type_def)
                if not isinstance(type_composer, cls):
                    raise InvalidConstructionError(
                        f"You should provide correct {cls.graphql_type_class.__name__} type "
                        f"definition. Eg. {cls._get_example_definition()}"
                    )
                return type_composer
            if is_type_name_string(type_def):
                return cls._create_empty(type_def, schema_composer)
        if isinstance(type_def, dict):
            return cls._create_from_config(dict(type_def), schema_composer)

        raise InvalidConstructionError(
            f"You should provide {cls.graphql_type_class.__name__} instance, "
            f"{cls.__name__} instance, type name, SDL definition or config dict to "
            f"{cls.__name__}.create_temp(), got {type_def!r}"
        )

    @classmethod
    def _create_empty(cls, type_name: str, schema_composer: Any) -> Any:
        """Create a composer with the given name and no content."""
        return cls._create_from_config({"name": type_name}, schema_composer)

    @classmethod
    def _create_from_config(cls, config: Dict[str, Any], schema_composer: Any) -> Any:
        raise NotImplementedError()

    @classmethod
    def _get_example_definition(cls) -> str:
        return "type MyType { name: String }"

    @classmethod
    def _pop_common_config(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """Remove and validate the options shared by all kinds from a config dict."""
        name = validate_type_name(config.pop("name", None))
        return {
            "name": name,
            "description": config.pop("description", None),
            "extensions": dict(config.pop("extensions", None) or {}),
            "directives": [
                to_applied_directive(directive)
                for directive in (config.pop("directives", None) or [])
            ],
            "ast_node": config.pop("ast_node", None),
        }

    @classmethod
    def _check_no_unknown_config(cls, config: Dict[str, Any]) -> None:
        if config:
            raise InvalidConstructionError(
                f"Unknown options for {cls.__name__}: {sorted(config)}"
            )

    def _apply_common_config(self, common_config: Dict[str, Any]) -> None:
        self._gql_extensions = common_config["extensions"]
        if common_config["directives"]:
            self._gql_directives = common_config["directives"]

    # -----------------------------------------------
    # Type methods
    # -----------------------------------------------

    def get_type(self) -> GraphQLNamedType:
        """Return the graphql-core type, re-synthesizing it if this composer was modified."""
        if self._modified:
            self._sync_graphql_type()
            self._modified = False
        return self._gql_type

    def _sync_graphql_type(self) -> None:
        self._gql_type.extensions = dict(self._gql_extensions)

    def mark_modified(self) -> None:
        """Make the next get_type() call rebuild the graphql-core type from this composer."""
        self._modified = True

    def get_type_name(self) -> str:
        return self._gql_type.name

    def set_type_name(self, name: str) -> "NamedTypeComposer":
        """Rename the type, keeping the SchemaComposer registry consistent.

        Raises:
            InvalidConstructionError if the name is not a valid type name, or another type is
            already registered under it
        """
        validate_type_name(name)
        old_name = self.get_type_name()
        if name == old_name:
            return self

        schema_composer = self.schema_composer
        if schema_composer.has(name) and schema_composer.get(name) is not self:
            raise InvalidConstructionError(
                f"Cannot rename type {old_name} to {name}: a different type with that name "
                f"is already registered."
            )

        self._gql_type.name = name
        if schema_composer.has(old_name) and schema_composer.get(old_name) is self:
            if old_name not in ROOT_TYPE_KEYS:
                schema_composer.delete(old_name)
        schema_composer.add(self)
        return self

    def get_description(self) -> Optional[str]:
        return self._gql_type.description

    def set_description(self, description: Optional[str]) -> "NamedTypeComposer":
        self._gql_type.description = description
        return self

    def get_type_plural(self) -> ListComposer:
        return ListComposer(self)

    def get_type_non_null(self) -> NonNullComposer:
        return NonNullComposer(self)

    @property
    def List(self) -> ListComposer:  # pylint: disable=invalid-name
        return ListComposer(self)

    @property
    def NonNull(self) -> NonNullComposer:  # pylint: disable=invalid-name
        return NonNullComposer(self)

    def get_unwrapped_tc(self) -> "NamedTypeComposer":
        return self

    def get_nested_tcs(
        self,
        exclude: Optional[Iterable[str]] = None,
        passed_types: Optional[Set["NamedTypeComposer"]] = None,
    ) -> Set["NamedTypeComposer"]:
        """Return all named types reachable from this type, excluding the given type names."""
        return set() if passed_types is None else passed_types

    # -----------------------------------------------
    # Clone and merge
    # -----------------------------------------------

    def clone(self, new_type_or_name: Any) -> "NamedTypeComposer":
        """Copy this type inside the same SchemaComposer under a new name.

        Field and member types are shared with the original, while the field records
        themselves are copied so that either type can be changed independently.

        Raises:
            InvalidConstructionError if no new name or type composer is provided
        """
        if not new_type_or_name:
            raise InvalidConstructionError(
                "You should provide new type name or instance for clone() method."
            )
        if isinstance(new_type_or_name, str):
            cloned = type(self).create_temp(new_type_or_name, self.schema_composer)
        elif isinstance(new_type_or_name, type(self)):
            cloned = new_type_or_name
        else:
            raise InvalidConstructionError(
                f"You should provide new type name or {type(self).__name__} instance for "
                f"clone() method, got {new_type_or_name!r}"
            )
        self._copy_content_to(cloned, None)
        cloned.mark_modified()
        return cloned

    def clone_to(
        self, target: Any, identity_map: Optional[Dict[Any, Any]] = None
    ) -> "NamedTypeComposer":
        """Clone this type, and every type it references, into another SchemaComposer.

        Within one identity map, every source composer is cloned at most once: a second visit
        returns the composer created by the first one, which is what lets cyclic type graphs
        terminate. A composer of the same kind already registered in target under the type name
        is reused, and its content is replaced.

        Args:
            target: SchemaComposer to create the clones in
            identity_map: source composer -> cloned composer, shared by one clone operation

        Returns:
            composer of the same kind and name, owned by target

        Raises:
            CloneTargetMissingError if no target SchemaComposer is provided
        """
        if target is None:
            raise CloneTargetMissingError(
                f"You should provide SchemaComposer for {type(self).__name__}.clone_to()"
            )
        if identity_map is None:
            identity_map = {}
        if self in identity_map:
            return identity_map[self]

        cloned = type(self).create(self.get_type_name(), target)
        identity_map[self] = cloned
        self._copy_content_to(cloned, target, identity_map)
        cloned.mark_modified()
        return cloned

    def _copy_content_to(
        self,
        cloned: "NamedTypeComposer",
        target: Any,
        identity_map: Optional[Dict[Any, Any]] = None,
    ) -> None:
        """Copy description, metadata and kind-specific content to another composer.

        When target is None the content is copied without cloning the referenced types.
        """
        cloned.set_description(self.get_description())
        cloned._gql_extensions = dict(self._gql_extensions)
        cloned._gql_directives = [directive.copy() for directive in self._gql_directives]

    def merge(self, type_: Any) -> "NamedTypeComposer":
        raise NotImplementedError()

    def _get_composer_for_merge(
        self, type_: Any, graphql_classes: Tuple[type, ...], kinds: Iterable[TypeComposerKind]
    ) -> "NamedTypeComposer":
        """Return the composer to merge into this one, or raise if its kind is incompatible.

        A graphql-core type is wrapped in a composer owned by a fresh SchemaComposer, so that
        the registry of this composer's SchemaComposer is left untouched.
        """
        if get_composer_kind(type_) in kinds:
            return type_
        if isinstance(type_, graphql_classes):
            return type(self.schema_composer)().create_temp_tc(type_)
        raise InvalidConstructionError(
            f"Cannot merge {type_!r} with {type(self).__name__}({self.get_type_name()}). "
            f"Provided type should be of a compatible kind."
        )

    # -----------------------------------------------
    # Extensions methods
    # -----------------------------------------------

    def get_extensions(self) -> Extensions:
        return dict(self._gql_extensions)

    def set_extensions(self, extensions: Optional[Extensions]) -> "NamedTypeComposer":
        self._gql_extensions = dict(extensions or {})
        self._modified = True
        return self

    def extend_extensions(self, extensions: Extensions) -> "NamedTypeComposer":
        current = self.get_extensions()
        current.update(extensions)
        return self.set_extensions(current)

    def clear_extensions(self) -> "NamedTypeComposer":
        return self.set_extensions({})

    def get_extension(self, extension_name: str) -> Any:
        return self._gql_extensions.get(extension_name)

    def has_extension(self, extension_name: str) -> bool:
        return extension_name in self._gql_extensions

    def set_extension(self, extension_name: str, value: Any) -> "NamedTypeComposer":
        return self.extend_extensions({extension_name: value})

    def remove_extension(self, extension_name: str) -> "NamedTypeComposer":
        current = self.get_extensions()
        current.pop(extension_name, None)
        return self.set_extensions(current)

    # -----------------------------------------------
    # Directive methods
    # -----------------------------------------------

    def get_directives(self) -> DirectiveList:
        return self._gql_directives

    def set_directives(self, directives: Iterable[Any]) -> "NamedTypeComposer":
        self._gql_directives = [to_applied_directive(directive) for directive in directives]
        self._modified = True
        return self

    def get_directive_names(self) -> "List[str]":
        return [directive.name for directive in self._gql_directives]

    def get_directive_by_name(self, directive_name: str) -> Optional[DirectiveArgs]:
        """Return the arguments of the first applied directive with the name, if any."""
        for directive in self._gql_directives:
            if directive.name == directive_name:
                return directive.args
        return None

    def get_directive_by_id(self, directive_id: int) -> Optional[DirectiveArgs]:
        if 0 <= directive_id < len(self._gql_directives):
            return self._gql_directives[directive_id].args
        return None

    def add_directive(
        self, directive_name: str, args: Optional[DirectiveArgs] = None
    ) -> "NamedTypeComposer":
        self._gql_directives.append(AppliedDirective(name=directive_name, args=dict(args or {})))
        self._modified = True
        return self

    # -----------------------------------------------
    # Printing
    # -----------------------------------------------

    def to_sdl(
        self,
        deep: bool = False,
        exclude: Optional[Iterable[str]] = None,
        options: Any = None,
    ) -> str:
        """Print this type as SDL, followed by every type it references when deep is set.

        The referenced specified scalars (String, Int, ...) are left out.
        """
        if not deep:
            return print_named_type_composer(self, options)
        exclude_names = set(exclude or []) | set(SPECIFIED_SCALAR_TYPES)
        nested = self.get_nested_tcs(exclude=exclude_names)
        nested.discard(self)
        return print_named_type_composers([self] + sorted(nested, key=_type_name_key), options)


def _type_name_key(type_composer: Any) -> str:
    return type_composer.get_type_name()


def collect_nested_tc(
    type_: Any, exclude_names: Set[str], passed_types: Set[NamedTypeComposer]
) -> None:
    """Add the named type behind type_, and everything reachable from it, to passed_types."""
    named = unwrap_type_composer(type_)
    if named in passed_types or named.get_type_name() in exclude_names:
        return
    passed_types.add(named)
    named.get_nested_tcs(exclude=exclude_names, passed_types=passed_types)


class FieldMetadataMixin:
    """Extensions and applied directives of individual fields (or enum values).

    Expects the class to provide get_field(name) returning a record with extensions and
    directives attributes, and a _modified flag.
    """

    def get_field_extensions(self, field_name: str) -> Extensions:
        return dict(self.get_field(field_name).extensions)

    def set_field_extensions(self, field_name: str, extensions: Optional[Extensions]) -> Any:
        self.get_field(field_name).extensions = dict(extensions or {})
        self._modified = True
        return self

    def extend_field_extensions(self, field_name: str, extensions: Extensions) -> Any:
        current = self.get_field_extensions(field_name)
        current.update(extensions)
        return self.set_field_extensions(field_name, current)

    def clear_field_extensions(self, field_name: str) -> Any:
        return self.set_field_extensions(field_name, {})

    def get_field_extension(self, field_name: str, extension_name: str) -> Any:
        return self.get_field(field_name).extensions.get(extension_name)

    def has_field_extension(self, field_name: str, extension_name: str) -> bool:
        return extension_name in self.get_field(field_name).extensions

    def set_field_extension(self, field_name: str, extension_name: str, value: Any) -> Any:
        return self.extend_field_extensions(field_name, {extension_name: value})

    def remove_field_extension(self, field_name: str, extension_name: str) -> Any:
        current = self.get_field_extensions(field_name)
        current.pop(extension_name, None)
        return self.set_field_extensions(field_name, current)

    def get_field_directives(self, field_name: str) -> DirectiveList:
        return self.get_field(field_name).directives

    def set_field_directives(self, field_name: str, directives: Iterable[Any]) -> Any:
        self.get_field(field_name).directives = [
            to_applied_directive(directive) for directive in directives
        ]
        self._modified = True
        return self

    def get_field_directive_names(self, field_name: str) -> List[str]:
        return [directive.name for directive in self.get_field_directives(field_name)]

    def get_field_directive_by_name(
        self, field_name: str, directive_name: str
    ) -> Optional[DirectiveArgs]:
        for directive in self.get_field_directives(field_name):
            if directive.name == directive_name:
                return directive.args
        return None

    def get_field_directive_by_id(
        self, field_name: str, directive_id: int
    ) -> Optional[DirectiveArgs]:
        directives = self.get_field_directives(field_name)
        if 0 <= directive_id < len(directives):
            return directives[directive_id].args
        return None

    def add_field_directive(
        self, field_name: str, directive_name: str, args: Optional[DirectiveArgs] = None
    ) -> Any:
        self.get_field(field_name).directives.append(
            AppliedDirective(name=directive_name, args=dict(args or {}))
        )
        self._modified = True
        return self
