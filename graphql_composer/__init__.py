# Copyright 2026-present Kensho Technologies, LLC.
"""Commonly-used classes and functions from this package."""
from .composers import (  # noqa
    ArgumentConfig,
    EnumTypeComposer,
    EnumValueConfig,
    FieldConfig,
    InputFieldConfig,
    InputTypeComposer,
    InterfaceTypeComposer,
    NamedTypeComposer,
    ObjectTypeComposer,
    ScalarTypeComposer,
    UnionTypeComposer,
)
from .exceptions import (  # noqa
    CloneTargetMissingError,
    GraphQLComposeError,
    InvalidConstructionError,
    SchemaStructureError,
    TypeNotFoundError,
)
from .scalars import GraphQLDate, GraphQLDateTime, GraphQLDecimal, GraphQLJSON  # noqa
from .schema_composer import SchemaBuildOptions, SchemaComposer  # noqa
from .schema_printer import SchemaPrinterOptions  # noqa
from .type_storage import TypeStorage  # noqa
from .typedefs import AppliedDirective, TypeComposerKind  # noqa
from .wrappers import ListComposer, NonNullComposer, ThunkComposer  # noqa


__package_name__ = "graphql-composer"
__version__ = "1.0.0"
