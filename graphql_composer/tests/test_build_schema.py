# Copyright 2026-present Kensho Technologies, LLC.
from textwrap import dedent
import unittest

from graphql import GraphQLObjectType, graphql_sync

from ..exceptions import SchemaStructureError
from ..schema_composer import SchemaBuildOptions, SchemaComposer


def _greet(_root: object, _info: object, name: str) -> str:
    return f"Hello, {name}!"


class BuildSchemaTests(unittest.TestCase):
    def test_execute_built_schema(self) -> None:
        schema_composer = SchemaComposer(
            dedent(
                """\
                type Query {
                  hello: String
                  greet(name: String = "world"): String
                }
                """
            )
        )
        schema_composer.query.extend_field("hello", {"resolve": lambda *_: "world"})
        schema_composer.query.extend_field("greet", {"resolve": _greet})
        schema = schema_composer.build_schema()

        result = graphql_sync(schema, "{ hello greet }")
        self.assertIsNone(result.errors)
        self.assertEqual({"hello": "world", "greet": "Hello, world!"}, result.data)

        result = graphql_sync(schema, '{ greet(name: "Ada") }')
        self.assertEqual({"greet": "Hello, Ada!"}, result.data)

    def test_query_is_required(self) -> None:
        with self.assertRaises(SchemaStructureError):
            SchemaComposer().build_schema()

        schema_composer = SchemaComposer()
        schema_composer.query.set_description("Nothing yet")
        with self.assertRaises(SchemaStructureError):
            schema_composer.build_schema()

    def test_empty_roots_are_left_out(self) -> None:
        schema_composer = SchemaComposer("type Query { ok: Boolean }")
        self.assertEqual([], schema_composer.mutation.get_field_names())

        schema = schema_composer.build_schema()
        self.assertIsNone(schema.mutation_type)
        self.assertIsNone(schema.subscription_type)
        self.assertIs(schema_composer.query.get_type(), schema.query_type)

    def test_empty_types_are_removed(self) -> None:
        schema_composer = SchemaComposer(
            dedent(
                """\
                type Query {
                  ok: Boolean
                  viewer: Viewer
                }

                type Viewer {
                  settings: Settings
                }
                """
            )
        )
        schema_composer.create_object_tc("Settings")

        with self.assertLogs("graphql_composer.schema_composer", level="WARNING") as logs:
            schema = schema_composer.build_schema()

        self.assertEqual(["ok"], schema_composer.query.get_field_names())
        self.assertEqual([], schema_composer.get_otc("Viewer").get_field_names())
        self.assertEqual(["ok"], list(schema.query_type.fields))
        self.assertEqual(
            [
                "WARNING:graphql_composer.schema_composer:Delete field 'Viewer.settings' with "
                "type 'Settings', cause it does not have fields.",
                "WARNING:graphql_composer.schema_composer:Delete field 'Query.viewer' with "
                "type 'Viewer', cause it does not have fields.",
            ],
            logs.output,
        )

    def test_cyclic_types_are_kept(self) -> None:
        schema_composer = SchemaComposer(
            dedent(
                """\
                type Query {
                  node: Node
                }

                type Node {
                  id: ID
                  parent: Node
                  children: [Node!]!
                }
                """
            )
        )
        schema = schema_composer.build_schema()
        self.assertEqual(["id", "parent", "children"], list(schema.get_type("Node").fields))

    def test_nested_changes_reach_built_schema(self) -> None:
        schema_composer = SchemaComposer(
            dedent(
                """\
                type Query {
                  user: User
                }

                type User {
                  address: Address
                }

                type Address {
                  city: String
                }
                """
            )
        )
        schema_composer.build_schema()
        schema_composer.get_otc("Address").add_fields({"zip": "String"})

        schema = schema_composer.build_schema()
        address_type = schema.get_type("Address")
        self.assertIsInstance(address_type, GraphQLObjectType)
        self.assertEqual(["city", "zip"], list(address_type.fields))

    def test_unused_types(self) -> None:
        schema_composer = SchemaComposer(
            dedent(
                """\
                type Query {
                  ok: Boolean
                }

                type Orphan {
                  id: ID
                }
                """
            )
        )
        self.assertIsNone(schema_composer.build_schema().get_type("Orphan"))

        schema = schema_composer.build_schema(SchemaBuildOptions(keep_unused_types=True))
        self.assertIs(schema_composer.get_otc("Orphan").get_type(), schema.get_type("Orphan"))

        extra_tc = schema_composer.create_object_tc("type Extra { id: ID }")
        self.assertIsNone(schema_composer.build_schema().get_type("Extra"))
        schema = schema_composer.build_schema(SchemaBuildOptions(types=[extra_tc]))
        self.assertIs(extra_tc.get_type(), schema.get_type("Extra"))

    def test_schema_must_have_types(self) -> None:
        schema_composer = SchemaComposer("type Query { ok: Boolean }")
        schema_composer.add_schema_must_have_type("type Extra { id: ID }")
        schema_composer.add_schema_must_have_type("Extra")

        schema = schema_composer.build_schema()
        self.assertIs(schema_composer.get_otc("Extra").get_type(), schema.get_type("Extra"))

    def test_description_and_directives(self) -> None:
        schema_composer = SchemaComposer(
            dedent(
                """\
                directive @cost(weight: Int = 1) on FIELD_DEFINITION

                type Query {
                  ok: Boolean @cost(weight: 3)
                }
                """
            )
        )
        schema_composer.set_description("Inventory API")

        schema = schema_composer.build_schema()
        self.assertEqual("Inventory API", schema.description)
        self.assertIs(schema_composer.get_directive("cost"), schema.get_directive("cost"))
        self.assertIsNotNone(schema.get_directive("skip"))

        schema = schema_composer.build_schema(SchemaBuildOptions(description="Overridden"))
        self.assertEqual("Overridden", schema.description)
