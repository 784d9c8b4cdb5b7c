# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Callable, Dict, Optional

from graphql import GraphQLInterfaceType, GraphQLObjectType

from ..typedefs import TypeComposerKind
from .output_fields import OUTPUT_FIELDS_KINDS, OutputFieldsComposer


class InterfaceTypeComposer(OutputFieldsComposer):
    """Composer of a GraphQL interface type."""

    kind = TypeComposerKind.INTERFACE
    graphql_type_class = GraphQLInterfaceType

    def __init__(self, graphql_type: GraphQLInterfaceType, schema_composer: Any) -> None:
        super().__init__(graphql_type, schema_composer)
        self._init_output_fields()

    @classmethod
    def _create_from_config(cls, config: Dict[str, Any], schema_composer: Any) -> Any:
        common_config = cls._pop_common_config(config)
        fields = config.pop("fields", None) or {}
        interfaces = config.pop("interfaces", None) or []
        resolve_type = config.pop("resolve_type", None)
        cls._check_no_unknown_config(config)

        type_composer = cls(
            GraphQLInterfaceType(
                common_config["name"],
                fields={},
                resolve_type=resolve_type,
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

    @classmethod
    def _get_example_definition(cls) -> str:
        return "interface MyInterface { name: String }"

    # -----------------------------------------------
    # ResolveType methods
    # -----------------------------------------------

    def get_resolve_type(self) -> Optional[Callable[..., Any]]:
        return self._gql_type.resolve_type

    def set_resolve_type(
        self, resolve_type: Optional[Callable[..., Any]]
    ) -> "InterfaceTypeComposer":
        self._gql_type.resolve_type = resolve_type
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
        cloned.set_resolve_type(self.get_resolve_type())

    def merge(
        self, type_: Any, renamed_types: Optional[Dict[str, str]] = None
    ) -> "InterfaceTypeComposer":
        """Add the fields and interfaces of another interface or object type to this type.

        Raises:
            InvalidConstructionError if the type is not an interface or object type
        """
        other = self._get_composer_for_merge(
            type_, (GraphQLInterfaceType, GraphQLObjectType), OUTPUT_FIELDS_KINDS
        )
        self._merge_output_fields(other, renamed_types)
        return self
