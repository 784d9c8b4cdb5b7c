# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Callable, Dict, Optional

from graphql import GraphQLInterfaceType, GraphQLObjectType

from ..typedefs import ROOT_TYPE_KEYS, TypeComposerKind
from .output_fields import OUTPUT_FIELDS_KINDS, OutputFieldsComposer


class ObjectTypeComposer(OutputFieldsComposer):
    """Composer of a GraphQL object type, including the Query, Mutation and Subscription roots.

    Root types are not registered under their type name: the SchemaComposer keeps them under
    the fixed keys "Query", "Mutation" and "Subscription" instead.
    """

    kind = TypeComposerKind.OBJECT
    graphql_type_class = GraphQLObjectType

    def __init__(self, graphql_type: GraphQLObjectType, schema_composer: Any) -> None:
        """Wrap a GraphQLObjectType, registering the composer before converting its fields."""
        super().__init__(graphql_type, schema_composer)
        self._init_output_fields()

    def _is_registered_by_name(self) -> bool:
        return self.get_type_name() not in ROOT_TYPE_KEYS

    @classmethod
    def _create_from_config(cls, config: Dict[str, Any], schema_composer: Any) -> Any:
        common_config = cls._pop_common_config(config)
        fields = config.pop("fields", None) or {}
        interfaces = config.pop("interfaces", None) or []
        is_type_of = config.pop("is_type_of", None)
        cls._check_no_unknown_config(config)

        type_composer = cls(
            GraphQLObjectType(
                common_config["name"],
                fields={},
                is_type_of=is_type_of,
                description=common_config["description"],
                ast_node=common_config["ast_node"],
            ),
            schema_composer,
        )
        type_composer._apply_common_config(common_config)
        if callable(fields):
            fields = fields()
        type_composer.add_fields(fields)
        if callable(interfaces):
            interfaces = interfaces()
        type_composer.set_interfaces(interfaces)
        return type_composer

    # -----------------------------------------------
    # IsTypeOf methods
    # -----------------------------------------------

    def get_is_type_of(self) -> Optional[Callable[..., Any]]:
        return self._gql_type.is_type_of

    def set_is_type_of(self, is_type_of: Optional[Callable[..., Any]]) -> "ObjectTypeComposer":
        self._gql_type.is_type_of = is_type_of
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
        cloned.set_is_type_of(self.get_is_type_of())

    def merge(
        self, type_: Any, renamed_types: Optional[Dict[str, str]] = None
    ) -> "ObjectTypeComposer":
        """Add the fields and interfaces of another object or interface type to this type.

        Fields present in both types take the definition of the other type.

        Args:
            type_: ObjectTypeComposer, InterfaceTypeComposer, GraphQLObjectType or
                   GraphQLInterfaceType
            renamed_types: type name -> name to reference instead, for the types of type_

        Returns:
            this composer

        Raises:
            InvalidConstructionError if the type is of any other kind
        """
        other = self._get_composer_for_merge(
            type_, (GraphQLObjectType, GraphQLInterfaceType), OUTPUT_FIELDS_KINDS
        )
        self._merge_output_fields(other, renamed_types)
        return self
