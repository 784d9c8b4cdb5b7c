# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Dict, Iterable, List, Optional, Union

from graphql import GraphQLEnumType

from ..exceptions import TypeNotFoundError
from ..typedefs import TypeComposerKind
from .base import FieldMetadataMixin, NamedTypeComposer
from .fields import EnumValueConfig
from .output_fields import apply_field_deprecations


NamesArg = Union[str, Iterable[str]]


def _to_name_list(names: NamesArg) -> List[str]:
    if isinstance(names, str):
        return [names]
    return list(names)


class EnumTypeComposer(FieldMetadataMixin, NamedTypeComposer):
    """Composer of a GraphQL enum type.

    Enum values are called fields throughout this class, so that the field-level extension and
    directive helpers work the same way as for object types.
    """

    kind = TypeComposerKind.ENUM
    graphql_type_class = GraphQLEnumType

    def __init__(self, graphql_type: GraphQLEnumType, schema_composer: Any) -> None:
        super().__init__(graphql_type, schema_composer)
        type_mapper = schema_composer.type_mapper
        self._gql_values: Dict[str, EnumValueConfig] = {
            value_name: type_mapper.convert_enum_value_config(enum_value, value_name)
            for value_name, enum_value in graphql_type.values.items()
        }

    @classmethod
    def _create_from_config(cls, config: Dict[str, Any], schema_composer: Any) -> Any:
        common_config = cls._pop_common_config(config)
        values = config.pop("values", None) or {}
        cls._check_no_unknown_config(config)

        type_composer = cls(
            GraphQLEnumType(
                common_config["name"],
                values={},
                description=common_config["description"],
                ast_node=common_config["ast_node"],
            ),
            schema_composer,
        )
        type_composer._apply_common_config(common_config)
        if isinstance(values, dict):
            type_composer.add_fields(values)
        else:
            type_composer.add_fields({value_name: {} for value_name in values})
        return type_composer

    @classmethod
    def _get_example_definition(cls) -> str:
        return "enum MyEnum { AAA BBB }"

    def _sync_graphql_type(self) -> None:
        super()._sync_graphql_type()
        self._gql_type.values = {
            value_name: value_config.get_graphql_enum_value()
            for value_name, value_config in self._gql_values.items()
        }
        # Drop the memoized lookup table built from the previous values.
        self._gql_type.__dict__.pop("_value_lookup", None)

    # -----------------------------------------------
    # Value methods
    # -----------------------------------------------

    def get_fields(self) -> Dict[str, EnumValueConfig]:
        return self._gql_values

    def get_field_names(self) -> List[str]:
        return list(self._gql_values)

    def get_field(self, value_name: str) -> EnumValueConfig:
        """Return the enum value with the given name.

        Raises:
            TypeNotFoundError if the enum has no such value
        """
        value_config = self._gql_values.get(value_name)
        if value_config is None:
            raise TypeNotFoundError(
                f"Cannot get value '{value_name}' from enum type '{self.get_type_name()}'. "
                f"Value with such name does not exist."
            )
        return value_config

    def has_field(self, value_name: str) -> bool:
        return value_name in self._gql_values

    def set_fields(self, values: Dict[str, Any]) -> "EnumTypeComposer":
        self._gql_values = {}
        return self.add_fields(values)

    def set_field(self, value_name: str, value_config: Any) -> "EnumTypeComposer":
        type_mapper = self.schema_composer.type_mapper
        self._gql_values[value_name] = type_mapper.convert_enum_value_config(
            value_config, value_name
        )
        self._modified = True
        return self

    def add_fields(self, new_values: Dict[str, Any]) -> "EnumTypeComposer":
        for value_name, value_config in new_values.items():
            self.set_field(value_name, value_config)
        return self

    def remove_field(self, value_name_or_list: NamesArg) -> "EnumTypeComposer":
        for value_name in _to_name_list(value_name_or_list):
            self._gql_values.pop(value_name, None)
        self._modified = True
        return self

    def remove_other_fields(self, value_name_or_list: NamesArg) -> "EnumTypeComposer":
        kept_names = set(_to_name_list(value_name_or_list))
        for value_name in self.get_field_names():
            if value_name not in kept_names:
                del self._gql_values[value_name]
        self._modified = True
        return self

    def reorder_fields(self, names: Iterable[str]) -> "EnumTypeComposer":
        ordered_names = [name for name in names if name in self._gql_values]
        ordered_names += [name for name in self._gql_values if name not in ordered_names]
        self._gql_values = {name: self._gql_values[name] for name in ordered_names}
        self._modified = True
        return self

    def extend_field(
        self, value_name: str, partial_value_config: Dict[str, Any]
    ) -> "EnumTypeComposer":
        """Update some properties of an enum value, creating the value if it does not exist."""
        if not self.has_field(value_name):
            return self.set_field(value_name, partial_value_config)

        previous = self.get_field(value_name)
        changes = dict(partial_value_config)
        extensions = dict(previous.extensions)
        extensions.update(changes.pop("extensions", None) or {})
        directives = [directive.copy() for directive in previous.directives]
        directives += changes.pop("directives", None) or []
        config = {
            "value": previous.value,
            "description": previous.description,
            "deprecation_reason": previous.deprecation_reason,
            "ast_node": previous.ast_node,
        }
        config.update(changes)
        config.update({"extensions": extensions, "directives": directives})
        return self.set_field(value_name, config)

    def deprecate_fields(
        self, values: Union[str, Iterable[str], Dict[str, str]]
    ) -> "EnumTypeComposer":
        """Mark enum values as deprecated, with reason "deprecated" unless reasons are given.

        Raises:
            InvalidConstructionError if one of the values does not exist
        """
        apply_field_deprecations(self, values)
        return self

    # -----------------------------------------------
    # Clone and merge
    # -----------------------------------------------

    def _copy_content_to(
        self,
        cloned: Any,
        target: Any,
        identity_map: Optional[Dict[Any, Any]] = None,
    ) -> None:
        super()._copy_content_to(cloned, target, identity_map)
        cloned._gql_values = {
            value_name: value_config.copy()
            for value_name, value_config in self._gql_values.items()
        }

    def merge(self, type_: Any) -> "EnumTypeComposer":
        """Add the values of another enum type, replacing values with the same name.

        Raises:
            InvalidConstructionError if the type is not an enum type
        """
        other = self._get_composer_for_merge(type_, (GraphQLEnumType,), (TypeComposerKind.ENUM,))
        self.add_fields(
            {
                value_name: value_config.copy()
                for value_name, value_config in other.get_fields().items()
            }
        )
        return self
