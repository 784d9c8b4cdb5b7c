# Copyright 2026-present Kensho Technologies, LLC.
"""SDL printing of type composers and of whole SchemaComposers."""
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Set, Union

from graphql import print_ast, specified_directives
from graphql.utilities.print_schema import print_directive

from .definition_node import DefinitionNodeBuilder, get_description_node
from .scalars import SPECIFIED_SCALAR_TYPES
from .type_helpers import get_composer_kind, is_named_type_composer
from .typedefs import ROOT_TYPE_KEYS, TypeComposerKind


ALPHABETIC_SORT = "ALPHABETIC"
GROUP_BY_TYPE_SORT = "GROUP_BY_TYPE"

# Order of the kinds when printing with GROUP_BY_TYPE, after the root types.
GROUP_BY_TYPE_ORDER = (
    TypeComposerKind.SCALAR,
    TypeComposerKind.ENUM,
    TypeComposerKind.UNION,
    TypeComposerKind.INTERFACE,
    TypeComposerKind.OBJECT,
    TypeComposerKind.INPUT_OBJECT,
)

_SPECIFIED_DIRECTIVE_NAMES = frozenset(directive.name for directive in specified_directives)


@dataclass
class SchemaPrinterOptions:
    """Options of SchemaComposer.to_sdl() and NamedTypeComposer.to_sdl().

    Args:
        omit_descriptions: print no descriptions
        omit_scalars: print no scalar definitions
        omit_directive_definitions: print no directive definitions
        include: only print the types with these names, and the types they reference
        exclude: never print the types with these names
        sort_all: sort types alphabetically, and everything inside types by name
        sort_types: False keeps registration order, True or "ALPHABETIC" sorts by name,
            "GROUP_BY_TYPE" prints root types, then scalars, enums, unions, interfaces, objects
            and input objects, each group sorted by name
        sort_fields: sort fields and input fields by name
        sort_args: sort field arguments by name
        sort_interfaces: sort implemented interfaces by name
        sort_unions: sort union members by name
        sort_enums: sort enum values by name
    """

    omit_descriptions: bool = False
    omit_scalars: bool = False
    omit_directive_definitions: bool = False
    include: List[str] = field(default_factory=list)
    exclude: List[str] = field(default_factory=list)
    sort_all: bool = False
    sort_types: Union[bool, str] = GROUP_BY_TYPE_SORT
    sort_fields: bool = False
    sort_args: bool = False
    sort_interfaces: bool = False
    sort_unions: bool = False
    sort_enums: bool = False


def _get_definition_node_builder(options: Optional[SchemaPrinterOptions]) -> DefinitionNodeBuilder:
    if options is None:
        return DefinitionNodeBuilder()
    sort_all = options.sort_all
    return DefinitionNodeBuilder(
        omit_descriptions=options.omit_descriptions,
        sort_fields=sort_all or options.sort_fields,
        sort_args=sort_all or options.sort_args,
        sort_interfaces=sort_all or options.sort_interfaces,
        sort_unions=sort_all or options.sort_unions,
        sort_enums=sort_all or options.sort_enums,
    )


def print_named_type_composer(
    type_composer: Any, options: Optional[SchemaPrinterOptions] = None
) -> str:
    """Print the SDL definition of one named type composer."""
    builder = _get_definition_node_builder(options)
    return print_ast(builder.get_definition_node(type_composer))


def print_named_type_composers(
    type_composers: Iterable[Any], options: Optional[SchemaPrinterOptions] = None
) -> str:
    """Print the SDL definitions of several named type composers, separated by blank lines."""
    builder = _get_definition_node_builder(options)
    return "\n\n".join(
        print_ast(builder.get_definition_node(type_composer)) for type_composer in type_composers
    )


def _type_name_key(type_composer: Any) -> str:
    return type_composer.get_type_name()


def sort_type_composers(
    type_composers: List[Any], sort_types: Union[bool, str], root_types: List[Any]
) -> List[Any]:
    """Order type composers for printing, according to the sort_types printer option."""
    if not sort_types:
        return list(type_composers)
    if sort_types is True or sort_types == ALPHABETIC_SORT:
        return sorted(type_composers, key=_type_name_key)
    if sort_types != GROUP_BY_TYPE_SORT:
        raise ValueError(f"Unknown sort_types printer option {sort_types!r}.")

    roots = [root for root in root_types if root in type_composers]
    result = list(roots)
    for kind in GROUP_BY_TYPE_ORDER:
        result.extend(
            sorted(
                (
                    type_composer
                    for type_composer in type_composers
                    if get_composer_kind(type_composer) == kind and type_composer not in roots
                ),
                key=_type_name_key,
            )
        )
    return result


def _get_printed_types(
    schema_composer: Any, options: SchemaPrinterOptions, root_types: List[Any]
) -> List[Any]:
    exclude_names = set(options.exclude)
    if options.include:
        type_composers: Set[Any] = set()
        for type_name in options.include:
            type_composer = schema_composer.get(type_name)
            if type_name not in exclude_names:
                type_composers.add(type_composer)
            type_composer.get_nested_tcs(exclude=exclude_names, passed_types=type_composers)
        candidates = list(type_composers)
    else:
        candidates = []
        for key, type_composer in schema_composer.items():
            if not isinstance(key, str) or key.startswith("__"):
                continue
            if not is_named_type_composer(type_composer) or type_composer in candidates:
                continue
            candidates.append(type_composer)

    result = []
    for type_composer in candidates:
        type_name = type_composer.get_type_name()
        if type_name in exclude_names:
            continue
        if get_composer_kind(type_composer) == TypeComposerKind.SCALAR:
            if options.omit_scalars or type_name in SPECIFIED_SCALAR_TYPES:
                continue
        result.append(type_composer)

    sort_types = ALPHABETIC_SORT if options.sort_all else options.sort_types
    return sort_type_composers(result, sort_types, root_types)


def _print_schema_definition(schema_composer: Any, root_types: List[Any]) -> Optional[str]:
    """Print the schema definition, if root type names or a description make it necessary."""
    operation_lines = []
    has_custom_root_names = False
    for root_key, root_type in zip(ROOT_TYPE_KEYS, root_types):
        if root_type is None:
            continue
        operation_lines.append(f"  {root_key.lower()}: {root_type.get_type_name()}")
        if root_type.get_type_name() != root_key:
            has_custom_root_names = True

    description = schema_composer.get_description()
    if not has_custom_root_names and description is None:
        return None

    schema_definition = "schema {\n" + "\n".join(operation_lines) + "\n}"
    if description is not None:
        schema_definition = print_ast(get_description_node(description)) + "\n" + schema_definition
    return schema_definition


def print_schema_composer(
    schema_composer: Any, options: Optional[SchemaPrinterOptions] = None
) -> str:
    """Print the SDL of all types and custom directives registered in a SchemaComposer.

    Specified scalars (String, Int, ...) and specified directives (@skip, @include, ...) are never
    printed.
    """
    if options is None:
        options = SchemaPrinterOptions()

    root_types = [
        schema_composer.get(root_key) if schema_composer.has(root_key) else None
        for root_key in ROOT_TYPE_KEYS
    ]
    existing_roots = [root_type for root_type in root_types if root_type is not None]

    parts = []
    if not options.omit_directive_definitions:
        parts.extend(
            print_directive(directive)
            for directive in schema_composer.get_directives()
            if directive.name not in _SPECIFIED_DIRECTIVE_NAMES
        )
    if not options.include:
        schema_definition = _print_schema_definition(schema_composer, root_types)
        if schema_definition is not None:
            parts.append(schema_definition)

    type_composers = _get_printed_types(schema_composer, options, existing_roots)
    if type_composers:
        parts.append(print_named_type_composers(type_composers, options))
    return "\n\n".join(parts)
