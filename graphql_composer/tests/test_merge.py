# Copyright 2026-present Kensho Technologies, LLC.
from textwrap import dedent
import unittest

from graphql import GraphQLField, GraphQLInt, GraphQLObjectType, GraphQLSchema, build_schema

from ..exceptions import InvalidConstructionError
from ..schema_composer import SchemaComposer


class SchemaComposerMergeTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer(
            dedent(
                """\
                type Query {
                  x: Int
                  y: Int
                  user: User
                }

                type User {
                  id: ID!
                }
                """
            )
        )

    def test_root_fields_are_merged(self) -> None:
        other = SchemaComposer(
            dedent(
                """\
                type Query {
                  y: String
                  z: Boolean
                }
                """
            )
        )
        query_tc = self.schema_composer.query
        self.schema_composer.merge(other)

        self.assertIs(query_tc, self.schema_composer.query)
        self.assertEqual(["x", "y", "user", "z"], query_tc.get_field_names())
        self.assertEqual("String", query_tc.get_field_type("y").name)

    def test_existing_types_are_merged_and_new_types_cloned(self) -> None:
        other = SchemaComposer(
            dedent(
                """\
                type User {
                  name: String
                }

                type Post {
                  author: User
                }
                """
            )
        )
        user_tc = self.schema_composer.get_otc("User")
        self.schema_composer.merge(other)

        self.assertIs(user_tc, self.schema_composer.get_otc("User"))
        self.assertEqual(["id", "name"], user_tc.get_field_names())

        post_tc = self.schema_composer.get_otc("Post")
        self.assertIsNot(other.get_otc("Post"), post_tc)
        self.assertIs(self.schema_composer, post_tc.schema_composer)
        self.assertIs(user_tc, post_tc.get_field_tc("author"))

        self.assertEqual(["name"], other.get_otc("User").get_field_names())

    def test_cyclic_types_merged_into_existing_type(self) -> None:
        other = SchemaComposer(
            dedent(
                """\
                type Query {
                  users: [User]
                }

                type User {
                  id: ID!
                  friends: [User]
                  posts: [Post]
                }

                type Post {
                  author: User
                  replies: [Post]
                }
                """
            )
        )
        user_tc = self.schema_composer.get_otc("User")
        self.schema_composer.merge(other)

        post_tc = self.schema_composer.get_otc("Post")
        self.assertIsNot(other.get_otc("Post"), post_tc)
        self.assertEqual(["id", "friends", "posts"], user_tc.get_field_names())
        self.assertIs(user_tc, user_tc.get_field_tc("friends"))
        self.assertIs(post_tc, user_tc.get_field_tc("posts"))
        self.assertIs(user_tc, post_tc.get_field_tc("author"))
        self.assertIs(post_tc, post_tc.get_field_tc("replies"))
        self.assertIs(user_tc, self.schema_composer.query.get_field_tc("users"))

        schema = self.schema_composer.build_schema()
        self.assertIs(user_tc.get_type(), schema.get_type("User"))
        self.assertIs(post_tc.get_type(), schema.get_type("Post"))

    def test_references_to_custom_root_names(self) -> None:
        other_schema = build_schema(
            dedent(
                """\
                schema {
                  query: RootQuery
                }

                type RootQuery {
                  viewer: RootQuery
                  n: Int
                }

                type User {
                  id: ID!
                  home: RootQuery
                }
                """
            )
        )
        self.schema_composer.merge(other_schema)

        query_tc = self.schema_composer.query
        self.assertEqual(["x", "y", "user", "viewer", "n"], query_tc.get_field_names())
        self.assertIs(query_tc, query_tc.get_field_tc("viewer"))
        self.assertIs(query_tc, self.schema_composer.get_otc("User").get_field_tc("home"))
        self.assertFalse(self.schema_composer.has("RootQuery"))

        schema = self.schema_composer.build_schema()
        self.assertIs(schema.query_type, schema.query_type.fields["viewer"].type)
        self.assertIs(schema.query_type, schema.get_type("User").fields["home"].type)

    def test_roots_are_merged_by_role(self) -> None:
        root_query = GraphQLObjectType("RootQuery", {"total": GraphQLField(GraphQLInt)})
        self.schema_composer.merge(GraphQLSchema(query=root_query))

        self.assertEqual(["x", "y", "user", "total"], self.schema_composer.query.get_field_names())
        self.assertEqual("Query", self.schema_composer.query.get_type_name())
        self.assertFalse(self.schema_composer.has("RootQuery"))

    def test_merge_graphql_schema(self) -> None:
        other_schema = build_schema(
            dedent(
                """\
                directive @cached(ttl: Int) on FIELD_DEFINITION

                type Query {
                  posts: [Post] @cached(ttl: 60)
                }

                type Post {
                  title: String
                }
                """
            )
        )
        self.schema_composer.merge(other_schema)

        self.assertTrue(self.schema_composer.has_directive("cached"))
        post_tc = self.schema_composer.get_otc("Post")
        self.assertIs(post_tc, self.schema_composer.query.get_field_tc("posts"))
        self.assertEqual(["title"], post_tc.get_field_names())

        schema = self.schema_composer.build_schema()
        self.assertEqual(["x", "y", "user", "posts"], list(schema.query_type.fields))

    def test_incompatible_kinds(self) -> None:
        other = SchemaComposer("enum User { ADMIN }")
        with self.assertRaises(InvalidConstructionError):
            self.schema_composer.merge(other)

    def test_invalid_argument(self) -> None:
        with self.assertRaises(InvalidConstructionError):
            self.schema_composer.merge("type Query { a: Int }")  # type: ignore
