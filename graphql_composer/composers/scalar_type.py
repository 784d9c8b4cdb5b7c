# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Callable, Dict, Optional

from graphql import GraphQLScalarType

from ..exceptions import CloneTargetMissingError, InvalidConstructionError
from ..scalars import BUILT_IN_SCALAR_TYPES, is_built_in_scalar_type
from ..typedefs import TypeComposerKind
from .base import NamedTypeComposer


class ScalarTypeComposer(NamedTypeComposer):
    """Composer of a GraphQL scalar type.

    Scalars are treated as shared primitives: cloning one into another SchemaComposer returns
    the very same composer. The built-in scalar instances (String, Int, Date, JSON, ...) are
    shared by all SchemaComposers, so their composers never write back to them.
    """

    kind = TypeComposerKind.SCALAR
    graphql_type_class = GraphQLScalarType

    def __init__(self, graphql_type: GraphQLScalarType, schema_composer: Any) -> None:
        super().__init__(graphql_type, schema_composer)
        self._serialize = graphql_type.serialize
        self._parse_value = graphql_type.parse_value
        self._parse_literal = graphql_type.parse_literal
        self._specified_by_url = graphql_type.specified_by_url

    @classmethod
    def _create_empty(cls, type_name: str, schema_composer: Any) -> Any:
        if type_name in BUILT_IN_SCALAR_TYPES:
            return cls(BUILT_IN_SCALAR_TYPES[type_name], schema_composer)
        return super()._create_empty(type_name, schema_composer)

    @classmethod
    def _create_from_config(cls, config: Dict[str, Any], schema_composer: Any) -> Any:
        common_config = cls._pop_common_config(config)
        serialize = config.pop("serialize", None)
        parse_value = config.pop("parse_value", None)
        parse_literal = config.pop("parse_literal", None)
        specified_by_url = config.pop("specified_by_url", None)
        cls._check_no_unknown_config(config)

        type_composer = cls(
            GraphQLScalarType(
                common_config["name"],
                serialize=serialize,
                parse_value=parse_value,
                parse_literal=parse_literal,
                specified_by_url=specified_by_url,
                description=common_config["description"],
                ast_node=common_config["ast_node"],
            ),
            schema_composer,
        )
        type_composer._apply_common_config(common_config)
        return type_composer

    @classmethod
    def _get_example_definition(cls) -> str:
        return "scalar UInt"

    def is_built_in(self) -> bool:
        return is_built_in_scalar_type(self._gql_type)

    def _sync_graphql_type(self) -> None:
        if self.is_built_in():
            return
        super()._sync_graphql_type()
        graphql_type = self._gql_type
        graphql_type.serialize = self._serialize
        graphql_type.parse_value = self._parse_value
        graphql_type.parse_literal = self._parse_literal
        graphql_type.specified_by_url = self._specified_by_url

    def set_type_name(self, name: str) -> "ScalarTypeComposer":
        """Rename the scalar.

        Raises:
            InvalidConstructionError if the scalar is built in, or the name is invalid or taken
        """
        if self.is_built_in() and name != self.get_type_name():
            raise InvalidConstructionError(
                f"Built-in scalar {self.get_type_name()} cannot be renamed. Use "
                f"clone('{name}') to create a new scalar type instead."
            )
        super().set_type_name(name)
        return self

    def set_description(self, description: Optional[str]) -> "ScalarTypeComposer":
        if self.is_built_in():
            raise InvalidConstructionError(
                f"Description of built-in scalar {self.get_type_name()} cannot be changed."
            )
        super().set_description(description)
        return self

    # -----------------------------------------------
    # Serialize and parse methods
    # -----------------------------------------------

    def get_serialize(self) -> Callable[[Any], Any]:
        return self._serialize

    def set_serialize(self, serialize: Callable[[Any], Any]) -> "ScalarTypeComposer":
        self._serialize = serialize
        self._modified = True
        return self

    def get_parse_value(self) -> Callable[..., Any]:
        return self._parse_value

    def set_parse_value(self, parse_value: Callable[..., Any]) -> "ScalarTypeComposer":
        self._parse_value = parse_value
        self._modified = True
        return self

    def get_parse_literal(self) -> Callable[..., Any]:
        return self._parse_literal

    def set_parse_literal(self, parse_literal: Callable[..., Any]) -> "ScalarTypeComposer":
        self._parse_literal = parse_literal
        self._modified = True
        return self

    def get_specified_by_url(self) -> Optional[str]:
        return self._specified_by_url

    def set_specified_by_url(self, specified_by_url: Optional[str]) -> "ScalarTypeComposer":
        self._specified_by_url = specified_by_url
        self._modified = True
        return self

    # -----------------------------------------------
    # Clone and merge
    # -----------------------------------------------

    def clone(self, new_type_or_name: Any) -> "ScalarTypeComposer":
        """Create a new scalar type with the same functions under a new name."""
        cloned = super().clone(new_type_or_name)
        cloned.set_serialize(self.get_serialize())
        cloned.set_parse_value(self.get_parse_value())
        cloned.set_parse_literal(self.get_parse_literal())
        cloned.set_specified_by_url(self.get_specified_by_url())
        return cloned

    def _copy_content_to(
        self,
        cloned: Any,
        target: Any,
        identity_map: Optional[Dict[Any, Any]] = None,
    ) -> None:
        if not cloned.is_built_in():
            cloned.set_description(self.get_description())
        cloned._gql_extensions = dict(self._gql_extensions)
        cloned._gql_directives = [directive.copy() for directive in self._gql_directives]

    def clone_to(
        self, target: Any, identity_map: Optional[Dict[Any, Any]] = None
    ) -> "ScalarTypeComposer":
        """Share this scalar with another SchemaComposer instead of copying it.

        The scalar is registered in the target under its name unless the name is already taken,
        and is mapped to itself in the identity map.

        Raises:
            CloneTargetMissingError if no target SchemaComposer is provided
        """
        if target is None:
            raise CloneTargetMissingError(
                "You should provide SchemaComposer for ScalarTypeComposer.clone_to()"
            )
        if identity_map is not None:
            identity_map[self] = self
        if not target.has(self.get_type_name()):
            target.add(self)
        return self

    def merge(self, type_: Any) -> "ScalarTypeComposer":
        """Adopt the serialize and parse functions of another scalar type.

        Raises:
            InvalidConstructionError if the type is not a scalar type
        """
        other = self._get_composer_for_merge(
            type_, (GraphQLScalarType,), (TypeComposerKind.SCALAR,)
        )
        self.set_serialize(other.get_serialize())
        self.set_parse_value(other.get_parse_value())
        self.set_parse_literal(other.get_parse_literal())
        return self
