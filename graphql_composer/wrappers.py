# Copyright 2026-present Kensho Technologies, LLC.
"""Structural wrapper nodes: List, NonNull and deferred (thunked) type references.

Wrappers never carry a name of their own. Everything identity-related (type name, the named
type behind them) is computed by delegating to the wrapped node.
"""
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional

from graphql import GraphQLList, GraphQLNonNull, GraphQLType

from .exceptions import CloneTargetMissingError, InvalidConstructionError, TypeNotFoundError
from .typedefs import TypeComposerKind


if TYPE_CHECKING:
    from .schema_composer import SchemaComposer  # noqa


class ListComposer:
    """Wraps a type composer to express "list of" the wrapped type."""

    kind = TypeComposerKind.LIST

    def __init__(self, of_type: Any) -> None:
        """Wrap the given type composer. Lists may be nested arbitrarily."""
        self.of_type = of_type

    def __repr__(self) -> str:
        return f"ListComposer({self.of_type!r})"

    def get_type(self) -> GraphQLList:
        return GraphQLList(self.of_type.get_type())

    def get_type_name(self) -> str:
        return f"[{self.of_type.get_type_name()}]"

    def get_unwrapped_tc(self) -> Any:
        return unwrap_type_composer(self)

    def get_type_plural(self) -> "ListComposer":
        return ListComposer(self)

    def get_type_non_null(self) -> "NonNullComposer":
        return NonNullComposer(self)

    @property
    def List(self) -> "ListComposer":  # pylint: disable=invalid-name
        return ListComposer(self)

    @property
    def NonNull(self) -> "NonNullComposer":  # pylint: disable=invalid-name
        return NonNullComposer(self)

    def clone_to(
        self, target: "SchemaComposer", identity_map: Optional[Dict[Any, Any]] = None
    ) -> "ListComposer":
        """Clone the wrapped type into the target SchemaComposer and re-wrap it in a list."""
        if target is None:
            raise CloneTargetMissingError("You should provide SchemaComposer for ListComposer.")
        if identity_map is None:
            identity_map = {}
        return ListComposer(self.of_type.clone_to(target, identity_map))


class NonNullComposer:
    """Wraps a type composer to express that its values are never null."""

    kind = TypeComposerKind.NON_NULL

    def __init__(self, of_type: Any) -> None:
        """Wrap the given type composer.

        Raises:
            InvalidConstructionError if the wrapped type is itself a NonNullComposer
        """
        if isinstance(of_type, NonNullComposer):
            raise InvalidConstructionError(
                "You provide NonNull value to NonNullComposer constructor. "
                "Nesting NonNull is not allowed."
            )
        self.of_type = of_type

    def __repr__(self) -> str:
        return f"NonNullComposer({self.of_type!r})"

    def get_type(self) -> GraphQLNonNull:
        return GraphQLNonNull(self.of_type.get_type())

    def get_type_name(self) -> str:
        return f"{self.of_type.get_type_name()}!"

    def get_unwrapped_tc(self) -> Any:
        return unwrap_type_composer(self)

    def get_type_plural(self) -> ListComposer:
        return ListComposer(self)

    def get_type_non_null(self) -> "NonNullComposer":
        return self

    @property
    def List(self) -> ListComposer:  # pylint: disable=invalid-name
        return ListComposer(self)

    @property
    def NonNull(self) -> "NonNullComposer":  # pylint: disable=invalid-name
        return self

    def clone_to(
        self, target: "SchemaComposer", identity_map: Optional[Dict[Any, Any]] = None
    ) -> "NonNullComposer":
        """Clone the wrapped type into the target SchemaComposer and re-wrap it as non-null."""
        if target is None:
            raise CloneTargetMissingError(
                "You should provide SchemaComposer for NonNullComposer.clone_to()"
            )
        if identity_map is None:
            identity_map = {}
        return NonNullComposer(self.of_type.clone_to(target, identity_map))


class ThunkComposer:
    """Deferred reference to a type composer that may not exist yet.

    The thunk is a zero-argument function. It is evaluated at most once, on first access to
    of_type, and its result is memoized. Until then, the optional type name hint stands in for
    the type name so that forward references can be printed and compared by name.
    """

    kind = TypeComposerKind.THUNK

    def __init__(self, thunk: Callable[[], Any], type_name: Optional[str] = None) -> None:
        """Create a deferred reference from a zero-argument function and an optional name hint."""
        if not callable(thunk):
            raise InvalidConstructionError(
                f"ThunkComposer expects a zero-argument function, but got {thunk!r}"
            )
        self._thunk = thunk
        self._type_name = type_name if isinstance(type_name, str) and type_name else None
        self._evaluated = False
        self._type_from_thunk: Any = None

    def __repr__(self) -> str:
        if self._evaluated:
            return f"ThunkComposer({self._type_from_thunk!r})"
        return f"ThunkComposer(<pending {self._type_name or '?'}>)"

    @property
    def evaluated(self) -> bool:
        return self._evaluated

    @property
    def of_type(self) -> Any:
        """Return the referenced type composer, evaluating the thunk on first access.

        Raises:
            TypeNotFoundError if the thunk produces no value
        """
        if not self._evaluated:
            type_from_thunk = self._thunk()
            if type_from_thunk is None:
                raise TypeNotFoundError(
                    f"ThunkComposer({self._type_name or ''}) returns empty value: "
                    f"{type_from_thunk!r}"
                )
            self._type_from_thunk = type_from_thunk
            self._evaluated = True
        return self._type_from_thunk

    def get_unwrapped_tc(self) -> Any:
        return unwrap_type_composer(self.of_type)

    def get_type(self) -> GraphQLType:
        return self.of_type.get_type()

    def get_type_name(self) -> str:
        if self._evaluated:
            return self._type_from_thunk.get_type_name()
        if self._type_name:
            return self._type_name
        return self.of_type.get_type_name()

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

    def clone_to(
        self, target: "SchemaComposer", identity_map: Optional[Dict[Any, Any]] = None
    ) -> "ThunkComposer":
        """Clone the referenced type into the target SchemaComposer.

        The reference is resolved while cloning: the returned ThunkComposer always yields the
        already-cloned type, it does not look anything up lazily in the target schema.
        """
        if target is None:
            raise CloneTargetMissingError(
                "You should provide SchemaComposer for ThunkComposer.clone_to()"
            )
        if identity_map is None:
            identity_map = {}
        cloned = self.of_type.clone_to(target, identity_map)
        return ThunkComposer(lambda: cloned, self._type_name)


WRAPPER_COMPOSER_CLASSES = (ListComposer, NonNullComposer, ThunkComposer)


def unwrap_type_composer(type_composer: Any) -> Any:
    """Strip all wrapper layers, evaluating deferred references, until a named type is reached."""
    current = type_composer
    while isinstance(current, WRAPPER_COMPOSER_CLASSES):
        current = current.of_type
    return current


def get_renamed_type_name(type_composer: Any, renamed_types: Optional[Dict[str, str]]) -> str:
    """Return the type name, with wrappers, after replacing the named types found in the map."""
    if isinstance(type_composer, ListComposer):
        return f"[{get_renamed_type_name(type_composer.of_type, renamed_types)}]"
    if isinstance(type_composer, NonNullComposer):
        return f"{get_renamed_type_name(type_composer.of_type, renamed_types)}!"
    if isinstance(type_composer, ThunkComposer) and type_composer.evaluated:
        return get_renamed_type_name(type_composer.of_type, renamed_types)
    type_name = type_composer.get_type_name()
    if not renamed_types:
        return type_name
    return renamed_types.get(type_name, type_name)
