# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Callable, Dict, Iterable, List, Optional, Set

from graphql import GraphQLUnionType

from ..typedefs import TypeComposerKind
from ..wrappers import get_renamed_type_name
from .base import NamedTypeComposer, collect_nested_tc


def _get_member_name(type_: Any) -> str:
    if isinstance(type_, str):
        return type_
    if hasattr(type_, "get_type_name"):
        return type_.get_type_name()
    return type_.name


class UnionTypeComposer(NamedTypeComposer):
    """Composer of a GraphQL union type.

    Members are object type composers, or deferred references to object types that are not
    defined yet.
    """

    kind = TypeComposerKind.UNION
    graphql_type_class = GraphQLUnionType

    def __init__(self, graphql_type: GraphQLUnionType, schema_composer: Any) -> None:
        super().__init__(graphql_type, schema_composer)
        type_mapper = schema_composer.type_mapper
        self._gql_types: List[Any] = [
            type_mapper.convert_object_type_definition(member) for member in graphql_type.types
        ]

    @classmethod
    def _create_from_config(cls, config: Dict[str, Any], schema_composer: Any) -> Any:
        common_config = cls._pop_common_config(config)
        types = config.pop("types", None) or []
        resolve_type = config.pop("resolve_type", None)
        cls._check_no_unknown_config(config)

        type_composer = cls(
            GraphQLUnionType(
                common_config["name"],
                types=[],
                resolve_type=resolve_type,
                description=common_config["description"],
                ast_node=common_config["ast_node"],
            ),
            schema_composer,
        )
        type_composer._apply_common_config(common_config)
        if callable(types):
            types = types()
        type_composer.set_types(types)
        return type_composer

    @classmethod
    def _get_example_definition(cls) -> str:
        return "union MyUnion = TypeA | TypeB"

    def _sync_graphql_type(self) -> None:
        super()._sync_graphql_type()
        self._gql_type._types = self.get_types_types
        # Drop the memoized value so that graphql-core resolves the new thunk.
        self._gql_type.__dict__.pop("types", None)

    # -----------------------------------------------
    # Member type methods
    # -----------------------------------------------

    def get_types(self) -> List[Any]:
        return self._gql_types

    def get_types_types(self) -> List[Any]:
        return [member.get_type() for member in self._gql_types]

    def get_type_names(self) -> List[str]:
        return [member.get_type_name() for member in self._gql_types]

    def has_type(self, type_: Any) -> bool:
        """Return True if the union contains the object type, given by name or composer."""
        return _get_member_name(type_) in self.get_type_names()

    def set_types(self, types: Iterable[Any]) -> "UnionTypeComposer":
        type_mapper = self.schema_composer.type_mapper
        self._gql_types = [type_mapper.convert_object_type_definition(member) for member in types]
        self._modified = True
        return self

    def add_type(self, type_: Any) -> "UnionTypeComposer":
        if not self.has_type(type_):
            self._gql_types.append(
                self.schema_composer.type_mapper.convert_object_type_definition(type_)
            )
            self._modified = True
        return self

    def add_types(self, types: Iterable[Any]) -> "UnionTypeComposer":
        for type_ in types:
            self.add_type(type_)
        return self

    def remove_type(self, type_or_list: Any) -> "UnionTypeComposer":
        if isinstance(type_or_list, (list, tuple, set)):
            removed_names = {_get_member_name(type_) for type_ in type_or_list}
        else:
            removed_names = {_get_member_name(type_or_list)}
        self._gql_types = [
            member for member in self._gql_types if member.get_type_name() not in removed_names
        ]
        self._modified = True
        return self

    def remove_other_types(self, type_or_list: Any) -> "UnionTypeComposer":
        if isinstance(type_or_list, (list, tuple, set)):
            kept_names = {_get_member_name(type_) for type_ in type_or_list}
        else:
            kept_names = {_get_member_name(type_or_list)}
        self._gql_types = [
            member for member in self._gql_types if member.get_type_name() in kept_names
        ]
        self._modified = True
        return self

    def clear_types(self) -> "UnionTypeComposer":
        self._gql_types = []
        self._modified = True
        return self

    # -----------------------------------------------
    # ResolveType methods
    # -----------------------------------------------

    def get_resolve_type(self) -> Optional[Callable[..., Any]]:
        return self._gql_type.resolve_type

    def set_resolve_type(self, resolve_type: Optional[Callable[..., Any]]) -> "UnionTypeComposer":
        self._gql_type.resolve_type = resolve_type
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
        for member in self._gql_types:
            collect_nested_tc(member, exclude_names, result)
        return result

    def _copy_content_to(
        self,
        cloned: Any,
        target: Any,
        identity_map: Optional[Dict[Any, Any]] = None,
    ) -> None:
        super()._copy_content_to(cloned, target, identity_map)
        if target is None:
            cloned._gql_types = list(self._gql_types)
        else:
            cloned._gql_types = [
                member.clone_to(target, identity_map) for member in self._gql_types
            ]
        cloned.set_resolve_type(self.get_resolve_type())

    def merge(
        self, type_: Any, renamed_types: Optional[Dict[str, str]] = None
    ) -> "UnionTypeComposer":
        """Add the member types of another union, re-resolving them by name.

        Raises:
            InvalidConstructionError if the type is not a union type
        """
        other = self._get_composer_for_merge(
            type_, (GraphQLUnionType,), (TypeComposerKind.UNION,)
        )
        self.add_types(
            [get_renamed_type_name(member, renamed_types) for member in other.get_types()]
        )
        return self
