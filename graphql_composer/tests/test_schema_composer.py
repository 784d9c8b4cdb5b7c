# Copyright 2026-present Kensho Technologies, LLC.
from textwrap import dedent
import unittest

from graphql import (
    DirectiveLocation,
    GraphQLDirective,
    GraphQLField,
    GraphQLList,
    GraphQLObjectType,
    GraphQLString,
    build_schema,
)

from ..composers import EnumTypeComposer, ObjectTypeComposer
from ..exceptions import InvalidConstructionError, TypeNotFoundError
from ..schema_composer import SchemaComposer
from ..wrappers import ListComposer


class SchemaComposerRegistryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer(
            dedent(
                """\
                type Query {
                  me: User
                }

                type User {
                  id: ID!
                  role: Role
                }

                enum Role {
                  ADMIN
                  MEMBER
                }
                """
            )
        )

    def test_root_types(self) -> None:
        query_tc = self.schema_composer.query
        self.assertEqual("Query", query_tc.get_type_name())
        self.assertIs(query_tc, self.schema_composer.get("Query"))
        self.assertIs(query_tc, self.schema_composer.get_otc("Query"))

        self.assertFalse(self.schema_composer.has("Mutation"))
        mutation_tc = self.schema_composer.mutation
        self.assertIs(mutation_tc, self.schema_composer.mutation)
        self.assertEqual("Mutation", mutation_tc.get_type_name())

    def test_get_or_create(self) -> None:
        created = []
        post_tc = self.schema_composer.get_or_create_otc("Post", created.append)
        self.assertIsInstance(post_tc, ObjectTypeComposer)
        self.assertEqual([post_tc], created)

        self.assertIs(post_tc, self.schema_composer.get_or_create_otc("Post", created.append))
        self.assertEqual([post_tc], created)

        status_tc = self.schema_composer.get_or_create_etc("Status")
        self.assertIsInstance(status_tc, EnumTypeComposer)
        self.assertIs(status_tc, self.schema_composer.get_etc("Status"))

        with self.assertRaises(TypeNotFoundError):
            self.schema_composer.get_or_create_otc("Role")

    def test_get_by_kind(self) -> None:
        self.assertIsInstance(self.schema_composer.get_etc("Role"), EnumTypeComposer)
        with self.assertRaises(TypeNotFoundError):
            self.schema_composer.get_otc("Role")
        with self.assertRaises(TypeNotFoundError):
            self.schema_composer.get_itc("User")
        with self.assertRaises(TypeNotFoundError):
            self.schema_composer.get_otc("Missing")

    def test_get_any_tc(self) -> None:
        self.assertIs(self.schema_composer.get_otc("User"), self.schema_composer.get_any_tc("User"))
        self.assertIs(GraphQLString, self.schema_composer.get_any_tc(GraphQLString).get_type())

        post_tc = self.schema_composer.get_any_tc("type Post { title: String }")
        self.assertIs(post_tc, self.schema_composer.get_otc("Post"))

        with self.assertRaises(TypeNotFoundError):
            self.schema_composer.get_any_tc("Missing")

    def test_is_type_of_kind(self) -> None:
        self.assertTrue(self.schema_composer.is_object_type("User"))
        self.assertTrue(self.schema_composer.is_enum_type("Role"))
        self.assertTrue(self.schema_composer.is_enum_type("enum Size { S M }"))
        self.assertTrue(self.schema_composer.is_scalar_type(GraphQLString))
        self.assertTrue(
            self.schema_composer.is_object_type(self.schema_composer.get_otc("User"))
        )
        self.assertFalse(self.schema_composer.is_input_object_type("User"))
        self.assertFalse(self.schema_composer.is_object_type("Missing"))
        self.assertFalse(self.schema_composer.has("Size"))

    def test_create_tc(self) -> None:
        user_tc = self.schema_composer.get_otc("User")
        self.assertIs(user_tc, self.schema_composer.create_tc("User"))
        self.assertIs(user_tc, self.schema_composer.create_tc(user_tc))

        list_tc = self.schema_composer.create_temp_tc(GraphQLList(GraphQLString))
        self.assertIsInstance(list_tc, ListComposer)
        self.assertEqual("[String]", list_tc.get_type_name())

        graphql_type = GraphQLObjectType("Comment", {"body": GraphQLField(GraphQLString)})
        comment_tc = self.schema_composer.create_tc(graphql_type)
        self.assertIs(comment_tc, self.schema_composer.get_otc("Comment"))
        self.assertIs(comment_tc, self.schema_composer.get_otc(graphql_type))
        self.assertIs(graphql_type, comment_tc.get_type())

        with self.assertRaises(InvalidConstructionError):
            self.schema_composer.create_temp_tc("not a type definition")

    def test_directives(self) -> None:
        self.assertIsNotNone(self.schema_composer.get_directive("skip"))
        self.assertIsNotNone(self.schema_composer.get_directive("deprecated"))

        cached = GraphQLDirective("cached", [DirectiveLocation.FIELD_DEFINITION])
        directive_count = len(self.schema_composer.get_directives())
        self.schema_composer.add_directive(cached)
        self.schema_composer.add_directive(
            GraphQLDirective("cached", [DirectiveLocation.FIELD_DEFINITION])
        )
        self.assertEqual(directive_count + 1, len(self.schema_composer.get_directives()))
        self.assertTrue(self.schema_composer.has_directive("cached"))
        self.assertTrue(self.schema_composer.has_directive(cached))
        self.assertIs(cached, self.schema_composer.get_directive("cached"))

        self.schema_composer.remove_directive("cached")
        self.assertFalse(self.schema_composer.has_directive("cached"))

        with self.assertRaises(InvalidConstructionError):
            self.schema_composer.add_directive("cached")  # type: ignore

    def test_clear(self) -> None:
        self.schema_composer.add_type_defs("directive @cached on FIELD_DEFINITION")
        self.schema_composer.clear()

        self.assertEqual(0, len(self.schema_composer))
        self.assertFalse(self.schema_composer.has("User"))
        self.assertFalse(self.schema_composer.has_directive("cached"))
        self.assertTrue(self.schema_composer.has_directive("include"))

    def test_remove_empty_types(self) -> None:
        self.schema_composer.get_otc("User").add_fields({"profile": "type Profile"})
        self.schema_composer.remove_empty_types(self.schema_composer.query)
        self.assertEqual(["id", "role"], self.schema_composer.get_otc("User").get_field_names())
        self.assertEqual(["me"], self.schema_composer.query.get_field_names())

    def test_invalid_construction(self) -> None:
        with self.assertRaises(InvalidConstructionError):
            SchemaComposer(42)  # type: ignore


class SchemaComposerFromGraphQLSchemaTests(unittest.TestCase):
    def setUp(self) -> None:
        self.graphql_schema = build_schema(
            dedent(
                """\
                directive @cached(ttl: Int) on FIELD_DEFINITION

                schema {
                  query: RootQuery
                  mutation: RootMutation
                }

                type RootQuery {
                  posts: [Post] @cached(ttl: 60)
                }

                type RootMutation {
                  publish(title: String!): Post
                }

                type Post {
                  title: String
                }
                """
            )
        )
        self.schema_composer = SchemaComposer(self.graphql_schema)

    def test_import(self) -> None:
        self.assertEqual("RootQuery", self.schema_composer.query.get_type_name())
        self.assertEqual("RootMutation", self.schema_composer.mutation.get_type_name())
        self.assertEqual(["title"], self.schema_composer.get_otc("Post").get_field_names())
        self.assertTrue(self.schema_composer.has_directive("cached"))
        self.assertEqual(
            {"ttl": 60},
            self.schema_composer.query.get_field_directive_by_name("posts", "cached"),
        )

    def test_to_sdl_prints_schema_definition(self) -> None:
        sdl = self.schema_composer.to_sdl()
        self.assertIn("schema {\n  query: RootQuery\n  mutation: RootMutation\n}", sdl)
        self.assertEqual(1, sdl.count("type RootQuery {"))

    def test_build_schema(self) -> None:
        schema = self.schema_composer.build_schema()
        self.assertEqual("RootQuery", schema.query_type.name)
        self.assertEqual("RootMutation", schema.mutation_type.name)
        self.assertIsNotNone(schema.get_type("Post"))
