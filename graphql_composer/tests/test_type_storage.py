# Copyright 2026-present Kensho Technologies, LLC.
import unittest

from graphql import GraphQLString

from ..exceptions import TypeNotFoundError
from ..type_storage import TypeStorage


class TypeStorageTests(unittest.TestCase):
    def test_set_get_and_replace(self) -> None:
        storage: TypeStorage[str] = TypeStorage()
        storage.set("User", "first")
        self.assertEqual("first", storage.get("User"))

        storage.set("User", "second")
        self.assertEqual("second", storage.get("User"))
        self.assertEqual(1, storage.size)
        self.assertEqual(1, len(storage))

    def test_get_missing_key_raises(self) -> None:
        storage: TypeStorage[str] = TypeStorage()
        with self.assertRaises(TypeNotFoundError):
            storage.get("Missing")

    def test_unhashable_keys_are_never_present(self) -> None:
        storage: TypeStorage[str] = TypeStorage()
        self.assertFalse(storage.has({"name": "User"}))
        with self.assertRaises(TypeNotFoundError):
            storage.get(["User"])

    def test_keys_preserve_insertion_order(self) -> None:
        storage: TypeStorage[int] = TypeStorage()
        for index, key in enumerate(["Query", "User", "Article", GraphQLString]):
            storage.set(key, index)
        self.assertEqual(["Query", "User", "Article", GraphQLString], list(storage.keys()))
        self.assertEqual([0, 1, 2, 3], list(storage.values()))
        self.assertEqual(["Query", "User", "Article", GraphQLString], list(storage))

    def test_delete(self) -> None:
        storage: TypeStorage[str] = TypeStorage()
        storage.set("User", "value")
        self.assertTrue(storage.delete("User"))
        self.assertFalse(storage.delete("User"))
        self.assertFalse("User" in storage)

    def test_clear(self) -> None:
        storage: TypeStorage[str] = TypeStorage()
        storage.set("A", "a")
        storage.set("B", "b")
        storage.clear()
        self.assertEqual(0, storage.size)

    def test_add_uses_type_name(self) -> None:
        storage: TypeStorage[object] = TypeStorage()
        self.assertEqual("String", storage.add(GraphQLString))
        self.assertIs(GraphQLString, storage.get("String"))
        self.assertIsNone(storage.add(None))
        self.assertIsNone(storage.add(object()))
        self.assertEqual(1, storage.size)

    def test_get_or_set(self) -> None:
        storage: TypeStorage[str] = TypeStorage()
        self.assertEqual("created", storage.get_or_set("User", "created"))
        self.assertEqual("created", storage.get_or_set("User", "ignored"))

        calls = []

        def make_value(store: TypeStorage[str]) -> str:
            calls.append(store)
            return "from thunk"

        self.assertEqual("from thunk", storage.get_or_set("Article", make_value))
        self.assertEqual("from thunk", storage.get_or_set("Article", make_value))
        self.assertEqual([storage], calls)

    def test_has_instance(self) -> None:
        storage: TypeStorage[object] = TypeStorage()
        storage.set("User", "a string")
        self.assertTrue(storage.has_instance("User", str))
        self.assertFalse(storage.has_instance("User", int))
        self.assertFalse(storage.has_instance("Missing", str))
