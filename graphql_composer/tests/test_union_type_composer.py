# Copyright 2026-present Kensho Technologies, LLC.
from textwrap import dedent
import unittest

from ..composers import UnionTypeComposer
from ..exceptions import InvalidConstructionError
from ..schema_composer import SchemaComposer


class UnionTypeComposerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer(
            dedent(
                """\
                union SearchResult = User | Post

                type User {
                  name: String
                }

                type Post {
                  title: String
                }
                """
            )
        )
        self.union_tc = self.schema_composer.get_utc("SearchResult")

    def test_members_defined_after_union(self) -> None:
        self.assertIsInstance(self.union_tc, UnionTypeComposer)
        self.assertEqual(["User", "Post"], self.union_tc.get_type_names())
        self.assertEqual(
            [
                self.schema_composer.get_otc("User").get_type(),
                self.schema_composer.get_otc("Post").get_type(),
            ],
            list(self.union_tc.get_type().types),
        )

    def test_member_crud(self) -> None:
        comment_tc = self.schema_composer.create_object_tc("type Comment { body: String }")
        self.union_tc.add_type(comment_tc)
        self.union_tc.add_type("Comment")
        self.assertEqual(["User", "Post", "Comment"], self.union_tc.get_type_names())
        self.assertTrue(self.union_tc.has_type(comment_tc))

        self.union_tc.remove_type("Post")
        self.assertFalse(self.union_tc.has_type("Post"))

        self.union_tc.remove_other_types(["Comment"])
        self.assertEqual(["Comment"], self.union_tc.get_type_names())
        self.assertEqual([comment_tc.get_type()], list(self.union_tc.get_type().types))

        self.union_tc.clear_types()
        self.assertEqual([], self.union_tc.get_types())

    def test_non_object_member_is_rejected(self) -> None:
        enum_tc = self.schema_composer.create_enum_tc("enum Color { RED }")
        with self.assertRaises(InvalidConstructionError):
            self.union_tc.add_type(enum_tc)

    def test_create_from_config(self) -> None:
        def resolve_type(value: object, _info: object, _type: object) -> str:
            return "User"

        media_tc = self.schema_composer.create_union_tc(
            {"name": "Media", "types": ["User", "Post"], "resolve_type": resolve_type}
        )
        self.assertEqual(["User", "Post"], media_tc.get_type_names())
        self.assertIs(resolve_type, media_tc.get_type().resolve_type)

    def test_nested_tcs(self) -> None:
        nested = self.union_tc.get_nested_tcs(exclude=["String"])
        self.assertEqual({"User", "Post"}, {tc.get_type_name() for tc in nested})

    def test_to_sdl(self) -> None:
        self.assertEqual("union SearchResult = User | Post", self.union_tc.to_sdl())

    def test_clone_to_other_schema(self) -> None:
        target = SchemaComposer()
        cloned_tc = self.union_tc.clone_to(target)
        self.assertEqual(["User", "Post"], cloned_tc.get_type_names())
        cloned_user_tc = cloned_tc.get_types()[0].get_unwrapped_tc()
        self.assertIs(target.get_otc("User"), cloned_user_tc)
        self.assertIsNot(self.schema_composer.get_otc("User"), cloned_user_tc)

    def test_merge(self) -> None:
        other_tc = SchemaComposer().create_union_tc("union SearchResult = Post | Comment")
        self.union_tc.merge(other_tc)
        self.assertEqual(["User", "Post", "Comment"], self.union_tc.get_type_names())

        with self.assertRaises(InvalidConstructionError):
            self.union_tc.merge(self.schema_composer.get_otc("User"))


class InterfaceTypeComposerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer()
        self.node_tc = self.schema_composer.create_interface_tc("interface Node { id: ID! }")

    def test_interface_fields_and_interfaces(self) -> None:
        entity_tc = self.schema_composer.create_interface_tc(
            "interface Entity implements Node { id: ID! created: String }"
        )
        self.assertEqual(["id", "created"], entity_tc.get_field_names())
        self.assertTrue(entity_tc.has_interface("Node"))
        self.assertEqual([self.node_tc.get_type()], list(entity_tc.get_type().interfaces))

    def test_resolve_type(self) -> None:
        def resolve_type(value: object, _info: object, _type: object) -> str:
            return "User"

        self.node_tc.set_resolve_type(resolve_type)
        self.assertIs(resolve_type, self.node_tc.get_resolve_type())
        self.assertIs(resolve_type, self.node_tc.get_type().resolve_type)

    def test_merge_object_type(self) -> None:
        user_tc = self.schema_composer.create_object_tc("type User { id: ID! name: String }")
        self.node_tc.merge(user_tc)
        self.assertEqual(["id", "name"], self.node_tc.get_field_names())

    def test_clone(self) -> None:
        cloned_tc = self.node_tc.clone("Identifiable")
        self.assertIs(cloned_tc, self.schema_composer.get_iftc("Identifiable"))
        self.assertEqual(["id"], cloned_tc.get_field_names())

    def test_to_sdl(self) -> None:
        expected_sdl = dedent(
            """\
            interface Node {
              id: ID!
            }"""
        )
        self.assertEqual(expected_sdl, self.node_tc.to_sdl())
