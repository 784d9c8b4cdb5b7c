# Copyright 2026-present Kensho Technologies, LLC.
from textwrap import dedent
from typing import Any, Dict
import unittest

from ..schema_composer import SchemaComposer


SCHEMA_SDL = dedent(
    """\
    directive @auth(requires: String = "ADMIN") on FIELD_DEFINITION

    type Query {
      me: User @auth
    }

    type User {
      name: String
      role: Role
      friends: [User]
      karma: UInt
    }

    enum Role {
      ADMIN
      MEMBER
    }

    scalar UInt
    """
)


class SchemaComposerCloneTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer(SCHEMA_SDL)
        self.cloned = self.schema_composer.clone()

    def test_types_are_cloned(self) -> None:
        for type_name in ("User", "Role"):
            self.assertTrue(self.cloned.has(type_name))
            self.assertIsNot(self.schema_composer.get(type_name), self.cloned.get(type_name))
            self.assertIs(self.cloned, self.cloned.get(type_name).schema_composer)

        self.assertIsNot(self.schema_composer.query, self.cloned.query)
        self.assertEqual(["me"], self.cloned.query.get_field_names())

    def test_references_point_to_clones(self) -> None:
        cloned_user_tc = self.cloned.get_otc("User")
        self.assertIs(cloned_user_tc, self.cloned.query.get_field_tc("me"))
        self.assertIs(cloned_user_tc, cloned_user_tc.get_field_tc("friends"))
        self.assertIs(self.cloned.get_etc("Role"), cloned_user_tc.get_field_tc("role"))

    def test_scalars_and_directives_are_shared(self) -> None:
        self.assertIs(self.schema_composer.get_stc("UInt"), self.cloned.get_stc("UInt"))
        self.assertIs(self.schema_composer.get_stc("String"), self.cloned.get_stc("String"))
        self.assertIs(
            self.schema_composer.get_directive("auth"), self.cloned.get_directive("auth")
        )

    def test_changes_are_independent(self) -> None:
        self.cloned.get_otc("User").add_fields({"email": "String"})
        self.cloned.get_etc("Role").remove_field("MEMBER")
        self.cloned.query.remove_field("me")

        self.assertFalse(self.schema_composer.get_otc("User").has_field("email"))
        role_tc = self.schema_composer.get_etc("Role")
        self.assertEqual(["ADMIN", "MEMBER"], role_tc.get_field_names())
        self.assertEqual(["me"], self.schema_composer.query.get_field_names())

    def test_description_and_must_have_types(self) -> None:
        self.schema_composer.set_description("Social graph")
        self.schema_composer.add_schema_must_have_type("type Orphan { id: ID }")
        cloned = self.schema_composer.clone()

        self.assertEqual("Social graph", cloned.get_description())
        cloned_orphan_tc = cloned.get_otc("Orphan")
        self.assertIsNot(self.schema_composer.get_otc("Orphan"), cloned_orphan_tc)

        schema = cloned.build_schema()
        self.assertIs(cloned_orphan_tc.get_type(), schema.get_type("Orphan"))

    def test_cloned_schema_builds(self) -> None:
        schema = self.cloned.build_schema()
        self.assertIs(self.cloned.get_otc("User").get_type(), schema.get_type("User"))
        self.assertIsNot(self.schema_composer.get_otc("User").get_type(), schema.get_type("User"))
        self.assertIsNotNone(schema.get_directive("auth"))


class TypeComposerCloneToTests(unittest.TestCase):
    def setUp(self) -> None:
        self.source = SchemaComposer(
            dedent(
                """\
                type Author {
                  name: String
                  posts: [Post]
                }

                type Post {
                  title: String
                  author: Author!
                }
                """
            )
        )

    def test_identity_map_returns_the_first_clone(self) -> None:
        target = SchemaComposer()
        identity_map: Dict[Any, Any] = {}
        author_tc = self.source.get_otc("Author")

        cloned_author_tc = author_tc.clone_to(target, identity_map)
        self.assertIs(cloned_author_tc, identity_map[author_tc])
        self.assertIs(cloned_author_tc, author_tc.clone_to(target, identity_map))
        self.assertIs(cloned_author_tc, target.get_otc("Author"))

    def test_mutually_cyclic_types(self) -> None:
        target = SchemaComposer()
        cloned_author_tc = self.source.get_otc("Author").clone_to(target)

        cloned_post_tc = target.get_otc("Post")
        self.assertIsNot(self.source.get_otc("Post"), cloned_post_tc)
        self.assertIs(cloned_post_tc, cloned_author_tc.get_field_tc("posts"))
        self.assertIs(cloned_author_tc, cloned_post_tc.get_field_tc("author"))
        self.assertEqual("Author!", cloned_post_tc.get_field_type_name("author"))

    def test_self_referencing_type(self) -> None:
        user_tc = SchemaComposer(SCHEMA_SDL).get_otc("User")
        target = SchemaComposer()
        cloned_user_tc = user_tc.clone_to(target)

        self.assertIsNot(user_tc, cloned_user_tc)
        self.assertIs(cloned_user_tc, cloned_user_tc.get_field_tc("friends"))
        self.assertIs(target.get_etc("Role"), cloned_user_tc.get_field_tc("role"))

    def test_target_types_with_the_same_name_are_reused(self) -> None:
        target = SchemaComposer(
            dedent(
                """\
                type Query {
                  me: Author
                }

                type Author {
                  id: ID
                }
                """
            )
        )
        target_author_tc = target.get_otc("Author")
        cloned_post_tc = self.source.get_otc("Post").clone_to(target)

        self.assertIs(target_author_tc, target.get_otc("Author"))
        self.assertIs(target_author_tc, cloned_post_tc.get_field_tc("author"))
        self.assertIs(target_author_tc, target.query.get_field_tc("me"))
        self.assertEqual(["name", "posts"], target_author_tc.get_field_names())
        self.assertIs(cloned_post_tc, target_author_tc.get_field_tc("posts"))

        self.assertIs(target_author_tc, self.source.get_otc("Author").clone_to(target))

        target.query.add_fields({"post": cloned_post_tc})
        schema = target.build_schema()
        self.assertIs(target_author_tc.get_type(), schema.get_type("Author"))
        self.assertIs(cloned_post_tc.get_type(), schema.get_type("Post"))
