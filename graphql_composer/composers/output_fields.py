# Copyright 2026-present Kensho Technologies, LLC.
"""Fields, arguments and implemented interfaces, shared by object and interface composers."""
from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Union

from funcy import lsplit

from ..exceptions import InvalidConstructionError, TypeNotFoundError
from ..type_helpers import get_composer_kind
from ..typedefs import AppliedDirective, TypeComposerKind
from ..wrappers import (
    ListComposer,
    NonNullComposer,
    get_renamed_type_name,
    unwrap_type_composer,
)
from .base import FieldMetadataMixin, NamedTypeComposer, collect_nested_tc
from .fields import ArgumentConfig, FieldConfig


OUTPUT_FIELDS_KINDS = (TypeComposerKind.OBJECT, TypeComposerKind.INTERFACE)

NamesArg = Union[str, Iterable[str]]


def _to_name_list(names: NamesArg) -> List[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


def _upper_first(value: str) -> str:
    return value[:1].upper() + value[1:]


def _nested_field_resolver(*_: Any, **__: Any) -> Dict[str, Any]:
    return {}


class OutputFieldsComposer(FieldMetadataMixin, NamedTypeComposer):
    """Base class of ObjectTypeComposer and InterfaceTypeComposer."""

    def _init_output_fields(self) -> None:
        """Convert the fields and interfaces of the wrapped graphql-core type."""
        type_mapper = self.schema_composer.type_mapper
        type_name = self.get_type_name()
        self._gql_fields: Dict[str, FieldConfig] = {
            field_name: type_mapper.convert_output_field_config(
                graphql_field, field_name, type_name
            )
            for field_name, graphql_field in self._gql_type.fields.items()
        }
        self._gql_interfaces: List[Any] = [
            type_mapper.convert_interface_type_definition(interface)
            for interface in self._gql_type.interfaces
        ]

    def _sync_graphql_type(self) -> None:
        super()._sync_graphql_type()
        graphql_type = self._gql_type
        graphql_type._fields = self._get_graphql_fields
        graphql_type._interfaces = self.get_interfaces_types
        # Drop the memoized values so that graphql-core resolves the new thunks.
        graphql_type.__dict__.pop("fields", None)
        graphql_type.__dict__.pop("interfaces", None)

    def _get_graphql_fields(self) -> Dict[str, Any]:
        return {
            field_name: field_config.get_graphql_field()
            for field_name, field_config in self._gql_fields.items()
        }

    # -----------------------------------------------
    # Field methods
    # -----------------------------------------------

    def get_fields(self) -> Dict[str, FieldConfig]:
        return self._gql_fields

    def get_field_names(self) -> List[str]:
        return list(self._gql_fields)

    def get_field(self, field_name: str) -> FieldConfig:
        """Return the field with the given name.

        Raises:
            TypeNotFoundError if the type has no such field
        """
        field_config = self._gql_fields.get(field_name)
        if field_config is None:
            raise TypeNotFoundError(
                f"Cannot get field '{field_name}' from type '{self.get_type_name()}'. "
                f"Field does not exist."
            )
        return field_config

    def has_field(self, field_name: str) -> bool:
        return field_name in self._gql_fields

    def set_fields(self, fields: Dict[str, Any]) -> "OutputFieldsComposer":
        """Replace all fields. Values may be anything convert_output_field_config accepts."""
        self._gql_fields = {}
        return self.add_fields(fields)

    def set_field(self, field_name: str, field_config: Any) -> "OutputFieldsComposer":
        type_mapper = self.schema_composer.type_mapper
        self._gql_fields[field_name] = type_mapper.convert_output_field_config(
            field_config, field_name, self.get_type_name()
        )
        self._modified = True
        return self

    def add_fields(self, new_fields: Dict[str, Any]) -> "OutputFieldsComposer":
        """Add new fields, replacing existing fields with the same name."""
        for field_name, field_config in new_fields.items():
            self.set_field(field_name, field_config)
        return self

    def add_nested_fields(self, new_fields: Dict[str, Any]) -> "OutputFieldsComposer":
        """Add fields whose names may be dotted paths, creating intermediate object types.

        For example, "me.profile.name" on type "Viewer" creates the field "me" of the new type
        "ViewerMe", which gets the field "profile" of type "ViewerMeProfile", which gets "name".
        """
        for field_path, field_config in new_fields.items():
            field_name, _, rest = field_path.partition(".")
            if not rest:
                self.set_field(field_name, field_config)
                continue

            if self.has_field(field_name):
                child_tc = self.get_field_otc(field_name)
            else:
                child_tc = self.schema_composer.create_object_tc(
                    f"{self.get_type_name()}{_upper_first(field_name)}"
                )
                self.set_field(
                    field_name, {"type": child_tc, "resolve": _nested_field_resolver}
                )
            child_tc.add_nested_fields({rest: field_config})
        return self

    def remove_field(self, field_name_or_list: NamesArg) -> "OutputFieldsComposer":
        """Remove fields. A dotted path removes a field of a nested object or enum type."""
        for field_name in _to_name_list(field_name_or_list):
            head, _, rest = field_name.partition(".")
            if rest:
                if self.has_field(head):
                    sub_tc = self.get_field_tc(head)
                    if get_composer_kind(sub_tc) in (
                        TypeComposerKind.OBJECT,
                        TypeComposerKind.ENUM,
                    ):
                        sub_tc.remove_field(rest)
            else:
                self._gql_fields.pop(field_name, None)
        self._modified = True
        return self

    def remove_other_fields(self, field_name_or_list: NamesArg) -> "OutputFieldsComposer":
        kept_names = set(_to_name_list(field_name_or_list))
        for field_name in self.get_field_names():
            if field_name not in kept_names:
                del self._gql_fields[field_name]
        self._modified = True
        return self

    def reorder_fields(self, names: Iterable[str]) -> "OutputFieldsComposer":
        """Move the named fields to the front, in the given order, keeping the rest after them."""
        ordered_names = [name for name in names if name in self._gql_fields]
        ordered_names += [name for name in self._gql_fields if name not in ordered_names]
        self._gql_fields = {name: self._gql_fields[name] for name in ordered_names}
        self._modified = True
        return self

    def extend_field(
        self, field_name: str, partial_field_config: Dict[str, Any]
    ) -> "OutputFieldsComposer":
        """Update some properties of a field, creating the field if it does not exist.

        Extensions of the existing field are extended and directives appended, instead of being
        replaced.
        """
        if not self.has_field(field_name):
            return self.set_field(field_name, partial_field_config)

        previous = self.get_field(field_name)
        changes = dict(partial_field_config)
        extensions = dict(previous.extensions)
        extensions.update(changes.pop("extensions", None) or {})
        directives = [directive.copy() for directive in previous.directives]
        directives += changes.pop("directives", None) or []
        args = dict(previous.args)
        args.update(changes.pop("args", None) or {})
        config = {
            "type": previous.type,
            "resolve": previous.resolve,
            "subscribe": previous.subscribe,
            "description": previous.description,
            "deprecation_reason": previous.deprecation_reason,
            "ast_node": previous.ast_node,
        }
        config.update(changes)
        config.update({"extensions": extensions, "directives": directives, "args": args})
        return self.set_field(field_name, config)

    def get_field_type(self, field_name: str) -> Any:
        return self.get_field(field_name).type.get_type()

    def get_field_type_name(self, field_name: str) -> str:
        return self.get_field(field_name).type.get_type_name()

    def get_field_tc(self, field_name: str) -> NamedTypeComposer:
        """Return the named type behind the field's list and non-null wrappers."""
        return unwrap_type_composer(self.get_field(field_name).type)

    def get_field_otc(self, field_name: str) -> Any:
        """Return the object type behind the field's wrappers.

        Raises:
            InvalidConstructionError if the field's named type is not an object type
        """
        type_composer = self.get_field_tc(field_name)
        if get_composer_kind(type_composer) != TypeComposerKind.OBJECT:
            raise InvalidConstructionError(
                f"{self.get_type_name()}.get_field_otc('{field_name}') must be "
                f"ObjectTypeComposer, but received {type_composer!r}. Maybe you need to use "
                f"'get_field_tc()' method which returns any type composer?"
            )
        return type_composer

    def is_field_non_null(self, field_name: str) -> bool:
        return get_composer_kind(self.get_field(field_name).type) == TypeComposerKind.NON_NULL

    def make_field_non_null(self, field_name_or_list: NamesArg) -> "OutputFieldsComposer":
        for field_name in _to_name_list(field_name_or_list):
            if self.has_field(field_name) and not self.is_field_non_null(field_name):
                field_config = self.get_field(field_name)
                field_config.type = NonNullComposer(field_config.type)
        self._modified = True
        return self

    def make_field_nullable(self, field_name_or_list: NamesArg) -> "OutputFieldsComposer":
        for field_name in _to_name_list(field_name_or_list):
            if self.has_field(field_name) and self.is_field_non_null(field_name):
                field_config = self.get_field(field_name)
                field_config.type = field_config.type.of_type
        self._modified = True
        return self

    def is_field_plural(self, field_name: str) -> bool:
        field_type = self.get_field(field_name).type
        if get_composer_kind(field_type) == TypeComposerKind.NON_NULL:
            field_type = field_type.of_type
        return get_composer_kind(field_type) == TypeComposerKind.LIST

    def make_field_plural(self, field_name_or_list: NamesArg) -> "OutputFieldsComposer":
        for field_name in _to_name_list(field_name_or_list):
            if self.has_field(field_name):
                field_config = self.get_field(field_name)
                field_config.type = ListComposer(field_config.type)
        self._modified = True
        return self

    def make_field_non_plural(self, field_name_or_list: NamesArg) -> "OutputFieldsComposer":
        """Strip the outermost list wrapper (and a non-null wrapper around it) of the fields."""
        for field_name in _to_name_list(field_name_or_list):
            if self.has_field(field_name) and self.is_field_plural(field_name):
                field_config = self.get_field(field_name)
                field_type = field_config.type
                if get_composer_kind(field_type) == TypeComposerKind.NON_NULL:
                    field_type = field_type.of_type
                field_config.type = field_type.of_type
        self._modified = True
        return self

    def deprecate_fields(
        self, fields: Union[str, Iterable[str], Dict[str, str]]
    ) -> "OutputFieldsComposer":
        """Mark fields as deprecated, with reason "deprecated" unless reasons are given.

        Raises:
            InvalidConstructionError if one of the fields does not exist
        """
        apply_field_deprecations(self, fields)
        return self

    # -----------------------------------------------
    # Argument methods
    # -----------------------------------------------

    def get_field_args(self, field_name: str) -> Dict[str, ArgumentConfig]:
        return self.get_field(field_name).args

    def get_field_arg_names(self, field_name: str) -> List[str]:
        return list(self.get_field_args(field_name))

    def has_field_arg(self, field_name: str, arg_name: str) -> bool:
        return self.has_field(field_name) and arg_name in self.get_field_args(field_name)

    def get_field_arg(self, field_name: str, arg_name: str) -> ArgumentConfig:
        """Return the argument of the field.

        Raises:
            TypeNotFoundError if the field or the argument does not exist
        """
        arg_config = self.get_field_args(field_name).get(arg_name)
        if arg_config is None:
            raise TypeNotFoundError(
                f"Cannot get arg '{arg_name}' for field '{self.get_type_name()}.{field_name}'. "
                f"Argument does not exist."
            )
        return arg_config

    def get_field_arg_type(self, field_name: str, arg_name: str) -> Any:
        return self.get_field_arg(field_name, arg_name).type.get_type()

    def get_field_arg_type_name(self, field_name: str, arg_name: str) -> str:
        return self.get_field_arg(field_name, arg_name).type.get_type_name()

    def get_field_arg_tc(self, field_name: str, arg_name: str) -> NamedTypeComposer:
        return unwrap_type_composer(self.get_field_arg(field_name, arg_name).type)

    def set_field_args(self, field_name: str, args: Dict[str, Any]) -> "OutputFieldsComposer":
        field_config = self.get_field(field_name)
        field_config.args = self.schema_composer.type_mapper.convert_argument_config_map(
            args, field_name, self.get_type_name()
        )
        self._modified = True
        return self

    def add_field_args(self, field_name: str, new_args: Dict[str, Any]) -> "OutputFieldsComposer":
        field_config = self.get_field(field_name)
        field_config.args.update(
            self.schema_composer.type_mapper.convert_argument_config_map(
                new_args, field_name, self.get_type_name()
            )
        )
        self._modified = True
        return self

    def remove_field_arg(
        self, field_name: str, arg_name_or_list: NamesArg
    ) -> "OutputFieldsComposer":
        args = self.get_field_args(field_name)
        for arg_name in _to_name_list(arg_name_or_list):
            args.pop(arg_name, None)
        self._modified = True
        return self

    def make_field_arg_non_null(
        self, field_name: str, arg_name_or_list: NamesArg
    ) -> "OutputFieldsComposer":
        args = self.get_field_args(field_name)
        for arg_name in _to_name_list(arg_name_or_list):
            arg_config = args.get(arg_name)
            if arg_config is not None and (
                get_composer_kind(arg_config.type) != TypeComposerKind.NON_NULL
            ):
                arg_config.type = NonNullComposer(arg_config.type)
        self._modified = True
        return self

    def make_field_arg_nullable(
        self, field_name: str, arg_name_or_list: NamesArg
    ) -> "OutputFieldsComposer":
        args = self.get_field_args(field_name)
        for arg_name in _to_name_list(arg_name_or_list):
            arg_config = args.get(arg_name)
            if arg_config is not None and (
                get_composer_kind(arg_config.type) == TypeComposerKind.NON_NULL
            ):
                arg_config.type = arg_config.type.of_type
        self._modified = True
        return self

    # -----------------------------------------------
    # Field argument extensions and directives
    # -----------------------------------------------

    def get_field_arg_extensions(self, field_name: str, arg_name: str) -> Dict[str, Any]:
        return dict(self.get_field_arg(field_name, arg_name).extensions)

    def set_field_arg_extensions(
        self, field_name: str, arg_name: str, extensions: Optional[Dict[str, Any]]
    ) -> "OutputFieldsComposer":
        self.get_field_arg(field_name, arg_name).extensions = dict(extensions or {})
        self._modified = True
        return self

    def extend_field_arg_extensions(
        self, field_name: str, arg_name: str, extensions: Dict[str, Any]
    ) -> "OutputFieldsComposer":
        current = self.get_field_arg_extensions(field_name, arg_name)
        current.update(extensions)
        return self.set_field_arg_extensions(field_name, arg_name, current)

    def get_field_arg_directives(self, field_name: str, arg_name: str) -> List[AppliedDirective]:
        return self.get_field_arg(field_name, arg_name).directives

    def add_field_arg_directive(
        self,
        field_name: str,
        arg_name: str,
        directive_name: str,
        args: Optional[Dict[str, Any]] = None,
    ) -> "OutputFieldsComposer":
        self.get_field_arg(field_name, arg_name).directives.append(
            AppliedDirective(name=directive_name, args=dict(args or {}))
        )
        self._modified = True
        return self

    # -----------------------------------------------
    # Interface methods
    # -----------------------------------------------

    def get_interfaces(self) -> List[Any]:
        return self._gql_interfaces

    def get_interfaces_types(self) -> List[Any]:
        return [interface.get_type() for interface in self._gql_interfaces]

    def set_interfaces(self, interfaces: Iterable[Any]) -> "OutputFieldsComposer":
        type_mapper = self.schema_composer.type_mapper
        self._gql_interfaces = [
            type_mapper.convert_interface_type_definition(interface) for interface in interfaces
        ]
        self._modified = True
        return self

    def has_interface(self, interface: Any) -> bool:
        """Return True if the type implements the interface, given by name or composer."""
        interface_name = _get_interface_name(interface)
        return any(
            existing.get_type_name() == interface_name for existing in self._gql_interfaces
        )

    def add_interface(self, interface: Any) -> "OutputFieldsComposer":
        if not self.has_interface(interface):
            self._gql_interfaces.append(
                self.schema_composer.type_mapper.convert_interface_type_definition(interface)
            )
            self._modified = True
        return self

    def add_interfaces(self, interfaces: Iterable[Any]) -> "OutputFieldsComposer":
        for interface in interfaces:
            self.add_interface(interface)
        return self

    def remove_interface(self, interface: Any) -> "OutputFieldsComposer":
        interface_name = _get_interface_name(interface)
        self._gql_interfaces = [
            existing
            for existing in self._gql_interfaces
            if existing.get_type_name() != interface_name
        ]
        self._modified = True
        return self

    # -----------------------------------------------
    # Graph traversal, clone and merge
    # -----------------------------------------------

    def get_nested_tcs(
        self,
        exclude: Optional[Iterable[str]] = None,
        passed_types: Optional[Set[NamedTypeComposer]] = None,
    ) -> Set[NamedTypeComposer]:
        exclude_names = set(exclude or [])
        result: Set[NamedTypeComposer] = set() if passed_types is None else passed_types
        for field_config in self._gql_fields.values():
            collect_nested_tc(field_config.type, exclude_names, result)
            for arg_config in field_config.args.values():
                collect_nested_tc(arg_config.type, exclude_names, result)
        for interface in self._gql_interfaces:
            collect_nested_tc(interface, exclude_names, result)
        return result

    def _copy_content_to(
        self,
        cloned: NamedTypeComposer,
        target: Any,
        identity_map: Optional[Dict[Any, Any]] = None,
    ) -> None:
        super()._copy_content_to(cloned, target, identity_map)
        if target is None:
            cloned._gql_fields = {
                field_name: field_config.copy()
                for field_name, field_config in self._gql_fields.items()
            }
            cloned._gql_interfaces = list(self._gql_interfaces)
        else:
            cloned._gql_fields = {
                field_name: field_config.clone_to(target, identity_map)
                for field_name, field_config in self._gql_fields.items()
            }
            cloned._gql_interfaces = [
                interface.clone_to(target, identity_map) for interface in self._gql_interfaces
            ]

    def _merge_output_fields(
        self, other: "OutputFieldsComposer", renamed_types: Optional[Dict[str, str]] = None
    ) -> None:
        """Add the fields and interfaces of another object or interface composer.

        Types are re-expressed as type names, so that they resolve to the types of this
        composer's SchemaComposer rather than pointing into the other one. Names found in
        renamed_types are replaced by the name they map to.
        """
        fields = {}
        for field_name, field_config in other.get_fields().items():
            fields[field_name] = field_config.copy(
                type=get_renamed_type_name(field_config.type, renamed_types),
                args={
                    arg_name: arg_config.copy(
                        type=get_renamed_type_name(arg_config.type, renamed_types)
                    )
                    for arg_name, arg_config in field_config.args.items()
                },
            )
        self.add_fields(fields)
        self.add_interfaces(
            [
                get_renamed_type_name(interface, renamed_types)
                for interface in other.get_interfaces()
            ]
        )


def _get_interface_name(interface: Any) -> str:
    if isinstance(interface, str):
        return interface
    get_type_name: Optional[Callable[[], str]] = getattr(interface, "get_type_name", None)
    if get_type_name is not None:
        return get_type_name()
    return interface.name


def apply_field_deprecations(
    type_composer: Any, fields: Union[str, Iterable[str], Dict[str, str]]
) -> None:
    """Set the deprecation reason, and the matching @deprecated directive, of fields."""
    if isinstance(fields, dict):
        reasons = dict(fields)
    else:
        reasons = {field_name: "deprecated" for field_name in _to_name_list(fields)}

    missing_names, _ = lsplit(lambda name: not type_composer.has_field(name), reasons)
    if missing_names:
        raise InvalidConstructionError(
            f"Cannot deprecate non-existent fields {missing_names} "
            f"of type {type_composer.get_type_name()}."
        )

    for field_name, reason in reasons.items():
        field_config = type_composer.get_field(field_name)
        field_config.deprecation_reason = reason
        field_config.directives = [
            directive for directive in field_config.directives if directive.name != "deprecated"
        ]
        field_config.directives.append(AppliedDirective(name="deprecated", args={"reason": reason}))
    type_composer.mark_modified()
