# Copyright 2026-present Kensho Technologies, LLC.
from typing import Any, Callable, Dict, Generic, ItemsView, Iterator, KeysView, Optional, Type
from typing import TypeVar, Union, ValuesView

from .exceptions import TypeNotFoundError


V = TypeVar("V")


class TypeStorage(Generic[V]):
    """Insertion-ordered store mapping keys to types.

    Keys are usually type names, but may be any hashable object, e.g. the graphql-core type
    instance a type composer was created from. No uniqueness check is performed: setting an
    existing key silently replaces its value. Keeping keys consistent is the caller's job.
    """

    def __init__(self) -> None:
        """Create an empty storage."""
        self.types: Dict[Any, V] = {}

    def __len__(self) -> int:
        """Return the number of stored keys."""
        return len(self.types)

    def __contains__(self, key: Any) -> bool:
        """Return True if the key is present."""
        return self.has(key)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the stored keys in insertion order."""
        return iter(self.types)

    @property
    def size(self) -> int:
        return len(self.types)

    def clear(self) -> None:
        self.types.clear()

    def delete(self, key: Any) -> bool:
        """Remove the key, returning True if it was present."""
        if key in self.types:
            del self.types[key]
            return True
        return False

    def keys(self) -> KeysView[Any]:
        return self.types.keys()

    def values(self) -> ValuesView[V]:
        return self.types.values()

    def items(self) -> ItemsView[Any, V]:
        return self.types.items()

    def get(self, key: Any) -> V:
        """Return the value stored under the key.

        Raises:
            TypeNotFoundError if nothing is stored under the key
        """
        value = self.types.get(key) if _is_hashable(key) else None
        if value is None:
            raise TypeNotFoundError(f"Type with name {key!r} does not exist.")
        return value

    def has(self, key: Any) -> bool:
        if not _is_hashable(key):
            return False
        return key in self.types

    def set(self, key: Any, value: V) -> "TypeStorage[V]":
        self.types[key] = value
        return self

    def add(self, value: Any) -> Optional[str]:
        """Store the value under its own type name and return that name.

        The name is taken from get_type_name() when the value provides it, otherwise from its
        name attribute. Values without a name are not stored and None is returned.
        """
        if value is None:
            return None

        type_name: Optional[str] = None
        get_type_name = getattr(value, "get_type_name", None)
        if callable(get_type_name):
            type_name = get_type_name()
        elif isinstance(getattr(value, "name", None), str):
            type_name = value.name

        if type_name:
            self.set(type_name, value)
            return type_name
        return None

    def has_instance(self, key: Any, cls: Union[Type, tuple]) -> bool:
        """Return True if a value of the given class is stored under the key."""
        if not self.has(key):
            return False
        return isinstance(self.types[key], cls)

    def get_or_set(self, key: Any, type_or_thunk: Union[V, Callable[["TypeStorage[V]"], V]]) -> V:
        """Return the value under the key, storing the provided one first if the key is absent.

        A callable is invoked with this storage to produce the value.
        """
        existing = self.types.get(key)
        if existing is not None:
            return existing

        value = type_or_thunk(self) if callable(type_or_thunk) else type_or_thunk
        if value is not None:
            self.set(key, value)
        return value


def _is_hashable(key: Any) -> bool:
    """Return True if the key can be used for a dict lookup."""
    try:
        hash(key)
    except TypeError:
        return False
    return True
