# Copyright 2026-present Kensho Technologies, LLC.
from textwrap import dedent
import unittest

from graphql import GraphQLEnumType

from ..composers import EnumTypeComposer
from ..exceptions import InvalidConstructionError, TypeNotFoundError
from ..schema_composer import SchemaComposer


class EnumTypeComposerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer()
        self.color_tc = self.schema_composer.create_enum_tc(
            'enum Color { RED GREEN BLUE @deprecated(reason: "Use NAVY") }'
        )

    def test_create_from_sdl(self) -> None:
        self.assertIsInstance(self.color_tc, EnumTypeComposer)
        self.assertEqual(["RED", "GREEN", "BLUE"], self.color_tc.get_field_names())
        self.assertEqual("RED", self.color_tc.get_field("RED").value)
        self.assertEqual("Use NAVY", self.color_tc.get_field("BLUE").deprecation_reason)
        self.assertIs(self.color_tc, self.schema_composer.get_etc("Color"))

    def test_create_from_config(self) -> None:
        sort_tc = self.schema_composer.create_enum_tc(
            {"name": "Sort", "values": {"ASC": {"value": 1}, "DESC": {"value": -1}}}
        )
        graphql_type = sort_tc.get_type()
        self.assertEqual(1, graphql_type.values["ASC"].value)
        self.assertEqual("DESC", graphql_type.serialize(-1))

        size_tc = self.schema_composer.create_enum_tc({"name": "Size", "values": ["S", "M"]})
        self.assertEqual("M", size_tc.get_field("M").value)

    def test_create_from_graphql_type(self) -> None:
        graphql_type = GraphQLEnumType("Episode", {"NEWHOPE": 4, "EMPIRE": 5})
        episode_tc = self.schema_composer.create_enum_tc(graphql_type)
        self.assertEqual(["NEWHOPE", "EMPIRE"], episode_tc.get_field_names())
        self.assertEqual(5, episode_tc.get_field("EMPIRE").value)

    def test_value_changes_reach_graphql_type(self) -> None:
        graphql_type = self.color_tc.get_type()
        self.assertEqual("RED", graphql_type.serialize("RED"))

        self.color_tc.set_field("RED", {"value": "#f00"})
        self.assertIs(graphql_type, self.color_tc.get_type())
        self.assertEqual("RED", graphql_type.serialize("#f00"))

    def test_value_crud(self) -> None:
        self.color_tc.add_fields({"NAVY": {"description": "Dark blue"}})
        self.assertEqual("Dark blue", self.color_tc.get_field("NAVY").description)

        self.color_tc.remove_field(["GREEN", "missing"])
        self.assertEqual(["RED", "BLUE", "NAVY"], self.color_tc.get_field_names())

        self.color_tc.reorder_fields(["NAVY"])
        self.assertEqual(["NAVY", "RED", "BLUE"], self.color_tc.get_field_names())

        self.color_tc.remove_other_fields(["RED"])
        self.assertEqual(["RED"], list(self.color_tc.get_type().values))

        with self.assertRaises(TypeNotFoundError):
            self.color_tc.get_field("GREEN")

    def test_extend_field(self) -> None:
        self.color_tc.extend_field("RED", {"description": "Warm", "extensions": {"hex": "f00"}})
        red = self.color_tc.get_field("RED")
        self.assertEqual("Warm", red.description)
        self.assertEqual("RED", red.value)
        self.assertEqual({"hex": "f00"}, self.color_tc.get_field_extensions("RED"))

    def test_deprecate_fields(self) -> None:
        self.color_tc.deprecate_fields({"GREEN": "Use LIME"})
        self.assertEqual("Use LIME", self.color_tc.get_type().values["GREEN"].deprecation_reason)
        with self.assertRaises(InvalidConstructionError):
            self.color_tc.deprecate_fields("PURPLE")

    def test_to_sdl(self) -> None:
        expected_sdl = dedent(
            """\
            enum Color {
              RED
              GREEN
              BLUE @deprecated(reason: "Use NAVY")
            }"""
        )
        self.assertEqual(expected_sdl, self.color_tc.to_sdl())

    def test_clone(self) -> None:
        shade_tc = self.color_tc.clone("Shade")
        shade_tc.remove_field("RED")
        self.assertEqual(["GREEN", "BLUE"], shade_tc.get_field_names())
        self.assertEqual(["RED", "GREEN", "BLUE"], self.color_tc.get_field_names())
        self.assertIs(shade_tc, self.schema_composer.get_etc("Shade"))

    def test_clone_to_other_schema(self) -> None:
        target = SchemaComposer()
        cloned_tc = self.color_tc.clone_to(target)
        self.assertIsNot(self.color_tc, cloned_tc)
        self.assertIs(target, cloned_tc.schema_composer)
        self.assertEqual(["RED", "GREEN", "BLUE"], cloned_tc.get_field_names())

    def test_merge(self) -> None:
        other_tc = SchemaComposer().create_enum_tc("enum Color { RED PURPLE }")
        self.color_tc.merge(other_tc)
        self.assertEqual(["RED", "GREEN", "BLUE", "PURPLE"], self.color_tc.get_field_names())

        with self.assertRaises(InvalidConstructionError):
            self.color_tc.merge(self.schema_composer.create_object_tc("type User { id: ID }"))
