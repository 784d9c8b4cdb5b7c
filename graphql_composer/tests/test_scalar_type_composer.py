# Copyright 2026-present Kensho Technologies, LLC.
import unittest

from graphql import GraphQLString

from ..composers import ScalarTypeComposer
from ..exceptions import CloneTargetMissingError, InvalidConstructionError
from ..scalars import GraphQLDate
from ..schema_composer import SchemaComposer


def _serialize_upper(value: object) -> str:
    return str(value).upper()


class ScalarTypeComposerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer()
        self.uint_tc = self.schema_composer.create_scalar_tc("scalar UInt")

    def test_create_from_sdl(self) -> None:
        self.assertIsInstance(self.uint_tc, ScalarTypeComposer)
        self.assertEqual("UInt", self.uint_tc.get_type_name())
        self.assertFalse(self.uint_tc.is_built_in())
        self.assertIs(self.uint_tc, self.schema_composer.get_stc("UInt"))

    def test_functions_reach_graphql_type(self) -> None:
        graphql_type = self.uint_tc.get_type()
        self.uint_tc.set_serialize(_serialize_upper)
        self.assertIs(graphql_type, self.uint_tc.get_type())
        self.assertEqual("ABC", graphql_type.serialize("abc"))
        self.assertIs(_serialize_upper, self.uint_tc.get_serialize())

    def test_built_in_scalars_are_shared(self) -> None:
        string_tc = self.schema_composer.create_scalar_tc("String")
        self.assertTrue(string_tc.is_built_in())
        self.assertIs(GraphQLString, string_tc.get_type())

        user_tc = self.schema_composer.create_object_tc("type Event { on: Date }")
        self.assertIs(GraphQLDate, user_tc.get_field_type("on"))
        self.assertIs(GraphQLDate, SchemaComposer().create_scalar_tc("Date").get_type())

    def test_built_in_scalars_are_never_modified(self) -> None:
        string_tc = self.schema_composer.create_scalar_tc("String")
        with self.assertRaises(InvalidConstructionError):
            string_tc.set_type_name("Text")
        with self.assertRaises(InvalidConstructionError):
            string_tc.set_description("Changed")

        string_tc.set_serialize(_serialize_upper)
        self.assertIsNot(_serialize_upper, string_tc.get_type().serialize)
        self.assertEqual("abc", GraphQLString.serialize("abc"))

    def test_clone(self) -> None:
        self.uint_tc.set_serialize(_serialize_upper)
        cloned_tc = self.uint_tc.clone("UInt64")
        self.assertEqual("UInt64", cloned_tc.get_type_name())
        self.assertIs(_serialize_upper, cloned_tc.get_type().serialize)
        self.assertIsNot(self.uint_tc.get_type(), cloned_tc.get_type())

        text_tc = self.schema_composer.create_scalar_tc("String").clone("Text")
        self.assertFalse(text_tc.is_built_in())
        self.assertEqual("Text", text_tc.get_type_name())

    def test_clone_to_shares_scalar(self) -> None:
        target = SchemaComposer()
        self.assertIs(self.uint_tc, self.uint_tc.clone_to(target))
        self.assertIs(self.uint_tc, target.get("UInt"))

        with self.assertRaises(CloneTargetMissingError):
            self.uint_tc.clone_to(None)

    def test_merge_adopts_functions(self) -> None:
        other_tc = SchemaComposer().create_scalar_tc("scalar UInt")
        other_tc.set_serialize(_serialize_upper)
        self.uint_tc.merge(other_tc)
        self.assertIs(_serialize_upper, self.uint_tc.get_serialize())

        with self.assertRaises(InvalidConstructionError):
            self.uint_tc.merge(self.schema_composer.create_enum_tc("enum Color { RED }"))

    def test_to_sdl(self) -> None:
        self.assertEqual("scalar UInt", self.uint_tc.to_sdl())

        uuid_tc = self.schema_composer.create_scalar_tc(
            {
                "name": "UUID",
                "description": "Universally unique identifier",
                "specified_by_url": "https://tools.ietf.org/html/rfc4122",
            }
        )
        self.assertEqual(
            '"Universally unique identifier"\n'
            'scalar UUID @specifiedBy(url: "https://tools.ietf.org/html/rfc4122")',
            uuid_tc.to_sdl(),
        )
