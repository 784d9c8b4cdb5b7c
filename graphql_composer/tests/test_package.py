# Copyright 2026-present Kensho Technologies, LLC.
import importlib
import unittest

from .. import (
    GraphQLComposeError,
    ListComposer,
    ObjectTypeComposer,
    SchemaComposer,
    TypeNotFoundError,
    __package_name__,
    __version__,
)


class PackageTests(unittest.TestCase):
    def test_package_imports(self) -> None:
        package = importlib.import_module("graphql_composer")
        self.assertEqual("graphql-composer", __package_name__)
        self.assertEqual(__version__, package.__version__)
        self.assertTrue(issubclass(TypeNotFoundError, GraphQLComposeError))

    def test_named_composer_wrappers(self) -> None:
        user_tc = SchemaComposer().create_object_tc("type User { id: ID! }")
        self.assertIsInstance(user_tc, ObjectTypeComposer)
        self.assertIsInstance(user_tc.List, ListComposer)
        self.assertEqual("[User!]", user_tc.NonNull.List.get_type_name())
        self.assertEqual(["id"], user_tc.get_field_names())
        self.assertEqual([], user_tc.get_directive_names())
