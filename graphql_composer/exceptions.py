# Copyright 2026-present Kensho Technologies, LLC.
class GraphQLComposeError(Exception):
    """Generic error when composing a GraphQL schema."""


class TypeNotFoundError(GraphQLComposeError):
    """Exception raised when a type cannot be found in the type registry.

    This could be due to many reasons, such as:
    - no type was ever registered under the requested name or key;
    - a type is registered under the requested name, but it is of a different kind than expected,
      e.g. an enum type was requested as an object type;
    - a deferred type reference was evaluated and did not produce a type.
    """


class InvalidConstructionError(GraphQLComposeError):
    """Exception raised when a type composer would violate a structural invariant.

    For example:
    - a NonNull wrapper is wrapped in another NonNull wrapper;
    - two type composers of incompatible kinds are merged;
    - a type or field is given a name that is not a valid GraphQL name;
    - a definition cannot be converted into a type composer of the requested kind.
    """


class CloneTargetMissingError(GraphQLComposeError):
    """Exception raised when cloning a type composer without a destination SchemaComposer."""


class SchemaStructureError(GraphQLComposeError):
    """Exception raised when a schema's structure is illegal.

    This may happen if the type registry cannot be turned into a GraphQLSchema because there is
    no usable Query type, or if SDL input contains disallowed components such as a schema
    definition naming non-standard root types.
    """
