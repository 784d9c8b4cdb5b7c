# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Dict, Iterable, List, Optional, Set, Union

from graphql import GraphQLInputObjectType

from ..exceptions import InvalidConstructionError, TypeNotFoundError
from ..type_helpers import get_composer_kind
from ..typedefs import TypeComposerKind
from ..wrappers import ListComposer, NonNullComposer, unwrap_type_composer
from .base import FieldMetadataMixin, NamedTypeComposer, collect_nested_tc
from .fields import InputFieldConfig


NamesArg = Union[str, Iterable[str]]


def _to_name_list(names: NamesArg) -> List[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


class InputTypeComposer(FieldMetadataMixin, NamedTypeComposer):
    """Composer of a GraphQL input object type."""

    kind = TypeComposerKind.INPUT_OBJECT
    graphql_type_class = GraphQLInputObjectType

    def __init__(self, graphql_type: GraphQLInputObjectType, schema_composer: Any) -> None:
        super().__init__(graphql_type, schema_composer)
        type_mapper = schema_composer.type_mapper
        type_name = self.get_type_name()
        self._gql_fields: Dict[str, InputFieldConfig] = {
            field_name: type_mapper.convert_input_field_config(
                graphql_input_field, field_name, type_name
            )
            for field_name, graphql_input_field in graphql_type.fields.items()
        }

    @classmethod
    def _create_from_config(cls, config: Dict[str, Any], schema_composer: Any) -> Any:
        common_config = cls._pop_common_config(config)
        fields = config.pop("fields", None) or {}
        cls._check_no_unknown_config(config)

        type_composer = cls(
            GraphQLInputObjectType(
                common_config["name"],
                fields={},
                description=common_config["description"],
                ast_node=common_config["ast_node"],
            ),
            schema_composer,
        )
        type_composer._apply_common_config(common_config)
        if callable(fields):
            fields = fields()
        type_composer.add_fields(fields)
        return type_composer

    @classmethod
    def _get_example_definition(cls) -> str:
        return "input MyInputType { name: String }"

    def _sync_graphql_type(self) -> None:
        super()._sync_graphql_type()
        self._gql_type._fields = self._get_graphql_fields
        # Drop the memoized value so that graphql-core resolves the new thunk.
        self._gql_type.__dict__.pop("fields", None)

    def _get_graphql_fields(self) -> Dict[str, Any]:
        return {
            field_name: field_config.get_graphql_input_field()
            for field_name, field_config in self._gql_fields.items()
        }

    # -----------------------------------------------
    # Field methods
    # -----------------------------------------------

    def get_fields(self) -> Dict[str, InputFieldConfig]:
        return self._gql_fields

    def get_field_names(self) -> List[str]:
        return list(self._gql_fields)

    def get_field(self, field_name: str) -> InputFieldConfig:
        """Return the input field with the given name.

        Raises:
            TypeNotFoundError if the type has no such field
        """
        field_config = self._gql_fields.get(field_name)
        if field_config is None:
            raise TypeNotFoundError(
                f"Cannot get field '{field_name}' from input type '{self.get_type_name()}'. "
                f"Field does not exist."
            )
        return field_config

    def has_field(self, field_name: str) -> bool:
        return field_name in self._gql_fields

    def set_fields(self, fields: Dict[str, Any]) -> "InputTypeComposer":
        self._gql_fields = {}
        return self.add_fields(fields)

    def set_field(self, field_name: str, field_config: Any) -> "InputTypeComposer":
        type_mapper = self.schema_composer.type_mapper
        self._gql_fields[field_name] = type_mapper.convert_input_field_config(
            field_config, field_name, self.get_type_name()
        )
        self._modified = True
        return self

    def add_fields(self, new_fields: Dict[str, Any]) -> "InputTypeComposer":
        for field_name, field_config in new_fields.items():
            self.set_field(field_name, field_config)
        return self

    def add_nested_fields(self, new_fields: Dict[str, Any]) -> "InputTypeComposer":
        """Add fields whose names may be dotted paths, creating intermediate input types."""
        for field_path, field_config in new_fields.items():
            field_name, _, rest = field_path.partition(".")
            if not rest:
                self.set_field(field_name, field_config)
                continue

            if self.has_field(field_name):
                child_tc = self.get_field_tc(field_name)
                if get_composer_kind(child_tc) != TypeComposerKind.INPUT_OBJECT:
                    raise InvalidConstructionError(
                        f"Cannot add nested field '{field_path}' to input type "
                        f"'{self.get_type_name()}': field '{field_name}' is not of an input "
                        f"object type."
                    )
            else:
                child_name = f"{self.get_type_name()}{field_name[:1].upper()}{field_name[1:]}"
                child_tc = self.schema_composer.create_input_tc(child_name)
                self.set_field(field_name, child_tc)
            child_tc.add_nested_fields({rest: field_config})
        return self

    def remove_field(self, field_name_or_list: NamesArg) -> "InputTypeComposer":
        """Remove fields. A dotted path removes a field of a nested input type."""
        for field_name in _to_name_list(field_name_or_list):
            head, _, rest = field_name.partition(".")
            if rest:
                if self.has_field(head):
                    sub_tc = self.get_field_tc(head)
                    if get_composer_kind(sub_tc) == TypeComposerKind.INPUT_OBJECT:
                        sub_tc.remove_field(rest)
            else:
                self._gql_fields.pop(field_name, None)
        self._modified = True
        return self

    def remove_other_fields(self, field_name_or_list: NamesArg) -> "InputTypeComposer":
        kept_names = set(_to_name_list(field_name_or_list))
        for field_name in self.get_field_names():
            if field_name not in kept_names:
                del self._gql_fields[field_name]
        self._modified = True
        return self

    def reorder_fields(self, names: Iterable[str]) -> "InputTypeComposer":
        ordered_names = [name for name in names if name in self._gql_fields]
        ordered_names += [name for name in self._gql_fields if name not in ordered_names]
        self._gql_fields = {name: self._gql_fields[name] for name in ordered_names}
        self._modified = True
        return self

    def extend_field(
        self, field_name: str, partial_field_config: Dict[str, Any]
    ) -> "InputTypeComposer":
        """Update some properties of an input field, creating the field if it does not exist."""
        if not self.has_field(field_name):
            return self.set_field(field_name, partial_field_config)

        previous = self.get_field(field_name)
        changes = dict(partial_field_config)
        extensions = dict(previous.extensions)
        extensions.update(changes.pop("extensions", None) or {})
        directives = [directive.copy() for directive in previous.directives]
        directives += changes.pop("directives", None) or []
        config = {
            "type": previous.type,
            "default_value": previous.default_value,
            "description": previous.description,
            "deprecation_reason": previous.deprecation_reason,
            "ast_node": previous.ast_node,
        }
        config.update(changes)
        config.update({"extensions": extensions, "directives": directives})
        return self.set_field(field_name, config)

    def get_field_type(self, field_name: str) -> Any:
        return self.get_field(field_name).type.get_type()

    def get_field_type_name(self, field_name: str) -> str:
        return self.get_field(field_name).type.get_type_name()

    def get_field_tc(self, field_name: str) -> NamedTypeComposer:
        return unwrap_type_composer(self.get_field(field_name).type)

    def get_field_itc(self, field_name: str) -> "InputTypeComposer":
        """Return the input object type behind the field's wrappers.

        Raises:
            InvalidConstructionError if the field's named type is not an input object type
        """
        type_composer = self.get_field_tc(field_name)
        if get_composer_kind(type_composer) != TypeComposerKind.INPUT_OBJECT:
            raise InvalidConstructionError(
                f"{self.get_type_name()}.get_field_itc('{field_name}') must be "
                f"InputTypeComposer, but received {type_composer!r}."
            )
        return type_composer

    def is_field_non_null(self, field_name: str) -> bool:
        return get_composer_kind(self.get_field(field_name).type) == TypeComposerKind.NON_NULL

    def make_field_non_null(self, field_name_or_list: NamesArg) -> "InputTypeComposer":
        for field_name in _to_name_list(field_name_or_list):
            if self.has_field(field_name) and not self.is_field_non_null(field_name):
                field_config = self.get_field(field_name)
                field_config.type = NonNullComposer(field_config.type)
        self._modified = True
        return self

    def make_field_nullable(self, field_name_or_list: NamesArg) -> "InputTypeComposer":
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

    def make_field_plural(self, field_name_or_list: NamesArg) -> "InputTypeComposer":
        for field_name in _to_name_list(field_name_or_list):
            if self.has_field(field_name):
                field_config = self.get_field(field_name)
                field_config.type = ListComposer(field_config.type)
        self._modified = True
        return self

    def make_field_non_plural(self, field_name_or_list: NamesArg) -> "InputTypeComposer":
        for field_name in _to_name_list(field_name_or_list):
            if self.has_field(field_name) and self.is_field_plural(field_name):
                field_config = self.get_field(field_name)
                field_type = field_config.type
                if get_composer_kind(field_type) == TypeComposerKind.NON_NULL:
                    field_type = field_type.of_type
                field_config.type = field_type.of_type
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
        return result

    def _copy_content_to(
        self,
        cloned: Any,
        target: Any,
        identity_map: Optional[Dict[Any, Any]] = None,
    ) -> None:
        super()._copy_content_to(cloned, target, identity_map)
        if target is None:
            cloned._gql_fields = {
                field_name: field_config.copy()
                for field_name, field_config in self._gql_fields.items()
            }
        else:
            cloned._gql_fields = {
                field_name: field_config.clone_to(target, identity_map)
                for field_name, field_config in self._gql_fields.items()
            }

    def merge(self, type_: Any) -> "InputTypeComposer":
        """Add the fields of another input type, re-resolving their types by name.

        Raises:
            InvalidConstructionError if the type is not an input object type
        """
        other = self._get_composer_for_merge(
            type_, (GraphQLInputObjectType,), (TypeComposerKind.INPUT_OBJECT,)
        )
        self.add_fields(
            {
                field_name: field_config.copy(type=field_config.type.get_type_name())
                for field_name, field_config in other.get_fields().items()
            }
        )
        return self
