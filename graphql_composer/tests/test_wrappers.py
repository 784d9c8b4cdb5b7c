# Copyright 2026-present Kensho Technologies, LLC.
import unittest

from graphql import GraphQLList, GraphQLNonNull, GraphQLString

from ..exceptions import CloneTargetMissingError, InvalidConstructionError, TypeNotFoundError
from ..schema_composer import SchemaComposer
from ..wrappers import ListComposer, NonNullComposer, ThunkComposer, unwrap_type_composer


class ListAndNonNullComposerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer()
        self.user_tc = self.schema_composer.create_object_tc("type User { id: ID }")

    def test_type_names(self) -> None:
        self.assertEqual("[User]", ListComposer(self.user_tc).get_type_name())
        self.assertEqual("User!", NonNullComposer(self.user_tc).get_type_name())
        self.assertEqual("[User!]!", self.user_tc.NonNull.List.NonNull.get_type_name())
        self.assertEqual("[[User]]", self.user_tc.List.List.get_type_name())

    def test_get_type_wraps_graphql_types(self) -> None:
        graphql_type = NonNullComposer(ListComposer(self.user_tc)).get_type()
        self.assertIsInstance(graphql_type, GraphQLNonNull)
        self.assertIsInstance(graphql_type.of_type, GraphQLList)
        self.assertIs(self.user_tc.get_type(), graphql_type.of_type.of_type)

    def test_nested_non_null_is_rejected(self) -> None:
        with self.assertRaises(InvalidConstructionError):
            NonNullComposer(NonNullComposer(self.user_tc))

    def test_non_null_of_non_null_is_itself(self) -> None:
        non_null = self.user_tc.NonNull
        self.assertIs(non_null, non_null.NonNull)
        self.assertIs(non_null, non_null.get_type_non_null())

    def test_unwrap(self) -> None:
        wrapped = self.user_tc.List.NonNull.List
        self.assertIs(self.user_tc, wrapped.get_unwrapped_tc())
        self.assertIs(self.user_tc, unwrap_type_composer(wrapped))

    def test_clone_to_requires_target(self) -> None:
        with self.assertRaises(CloneTargetMissingError):
            ListComposer(self.user_tc).clone_to(None)
        with self.assertRaises(CloneTargetMissingError):
            NonNullComposer(self.user_tc).clone_to(None)

    def test_clone_to_rewraps_cloned_type(self) -> None:
        target = SchemaComposer()
        cloned = self.user_tc.List.NonNull.clone_to(target)
        self.assertEqual("[User]!", cloned.get_type_name())
        cloned_user_tc = cloned.get_unwrapped_tc()
        self.assertIsNot(self.user_tc, cloned_user_tc)
        self.assertIs(cloned_user_tc, target.get_otc("User"))


class ThunkComposerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.schema_composer = SchemaComposer()

    def test_name_hint_is_used_before_evaluation(self) -> None:
        calls = []

        def thunk() -> object:
            calls.append(True)
            return self.schema_composer.get_otc("Article")

        thunk_composer = ThunkComposer(thunk, "Article")
        self.assertEqual("Article", thunk_composer.get_type_name())
        self.assertEqual("[Article]", thunk_composer.List.get_type_name())
        self.assertFalse(thunk_composer.evaluated)
        self.assertEqual([], calls)

    def test_thunk_is_evaluated_once(self) -> None:
        calls = []
        article_tc = self.schema_composer.create_object_tc("type Article { title: String }")

        def thunk() -> object:
            calls.append(True)
            return article_tc

        thunk_composer = ThunkComposer(thunk)
        self.assertIs(article_tc, thunk_composer.of_type)
        self.assertIs(article_tc, thunk_composer.of_type)
        self.assertIs(article_tc.get_type(), thunk_composer.get_type())
        self.assertEqual("Article", thunk_composer.get_type_name())
        self.assertEqual(1, len(calls))

    def test_empty_thunk_raises(self) -> None:
        thunk_composer = ThunkComposer(lambda: None, "Missing")
        with self.assertRaises(TypeNotFoundError):
            thunk_composer.get_type()

    def test_non_callable_is_rejected(self) -> None:
        with self.assertRaises(InvalidConstructionError):
            ThunkComposer(GraphQLString)  # type: ignore

    def test_clone_to_resolves_eagerly(self) -> None:
        article_tc = self.schema_composer.create_object_tc("type Article { title: String }")
        thunk_composer = ThunkComposer(lambda: article_tc, "Article")
        target = SchemaComposer()

        cloned = thunk_composer.clone_to(target)
        self.assertIsInstance(cloned, ThunkComposer)
        self.assertEqual("Article", cloned.get_type_name())
        self.assertIs(target.get_otc("Article"), cloned.of_type)

    def test_clone_to_requires_target(self) -> None:
        thunk_composer = ThunkComposer(lambda: None, "Missing")
        with self.assertRaises(CloneTargetMissingError):
            thunk_composer.clone_to(None)

    def test_unwrap_through_thunk(self) -> None:
        article_tc = self.schema_composer.create_object_tc("type Article { title: String }")
        wrapped = ListComposer(ThunkComposer(lambda: article_tc.NonNull))
        self.assertEqual("[Article!]", wrapped.get_type_name())
        self.assertIs(article_tc, wrapped.get_unwrapped_tc())
