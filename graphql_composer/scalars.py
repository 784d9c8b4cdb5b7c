# Copyright 2026-present Kensho Technologies, LLC.
"""Scalars known to type-name resolution besides the five scalars specified by GraphQL.

Naming one of these in a type expression, e.g. "Date!", creates (or reuses) the corresponding
ScalarTypeComposer in the current SchemaComposer. The scalar instances are shared between all
SchemaComposers and are never modified by them.
"""
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

# C-based module confuses pylint, which is why we disable the check below.
from ciso8601 import parse_datetime  # pylint: disable=no-name-in-module
from graphql import (
    FloatValueNode,
    GraphQLBoolean,
    GraphQLFloat,
    GraphQLID,
    GraphQLInt,
    GraphQLScalarType,
    GraphQLString,
    IntValueNode,
    StringValueNode,
    ValueNode,
    value_from_ast_untyped,
)


def _parse_naive_datetime(value: str, scalar_name: str) -> datetime:
    """Parse an ISO-8601 string with ciso8601, rejecting timezone-aware values."""
    parsed = parse_datetime(value)
    if parsed.tzinfo is not None:
        raise ValueError(f"{scalar_name} values must be timezone-naive, got {value!r}.")
    return parsed


def _serialize_date(value: Any) -> str:
    # datetime subclasses date, so only the exact type is accepted.
    if type(value) is not date:
        raise ValueError(f"Expected a date object, got {value!r}.")
    return value.isoformat()


def _parse_date_value(value: Any) -> date:
    if type(value) is date:
        return value
    if not isinstance(value, str):
        raise ValueError(f"Expected a date object or a 'YYYY-MM-DD' string, got {value!r}.")
    parsed = _parse_naive_datetime(value, "Date")
    if parsed.time() != time():
        raise ValueError(f"Date strings must not have a time component, got {value!r}.")
    return parsed.date()


def _serialize_datetime(value: Any) -> str:
    if not isinstance(value, datetime) or value.tzinfo is not None:
        raise ValueError(f"Expected a timezone-naive datetime object, got {value!r}.")
    return value.isoformat()


def _parse_datetime_value(value: Any) -> datetime:
    if isinstance(value, datetime) and value.tzinfo is None:
        return value
    if isinstance(value, str):
        return _parse_naive_datetime(value, "DateTime")
    if type(value) is date:
        return datetime.combine(value, time())
    raise ValueError(f"Expected a timezone-naive datetime or an ISO-8601 string, got {value!r}.")


def _parse_string_literal(value_node: ValueNode, kind_name: str) -> str:
    if not isinstance(value_node, StringValueNode):
        raise ValueError(f"{kind_name} literals must be strings, got {value_node}.")
    return value_node.value


def _parse_date_literal(
    value_node: ValueNode, _variables: Optional[Dict[str, Any]] = None
) -> date:
    return _parse_date_value(_parse_string_literal(value_node, "Date"))


def _parse_datetime_literal(
    value_node: ValueNode, _variables: Optional[Dict[str, Any]] = None
) -> datetime:
    return _parse_datetime_value(_parse_string_literal(value_node, "DateTime"))


def _parse_decimal_value(value: Any) -> Decimal:
    try:
        return Decimal(value)
    except (InvalidOperation, TypeError) as e:
        raise ValueError(f"Expected a decimal number, got {value!r}.") from e


def _parse_decimal_literal(
    value_node: ValueNode, _variables: Optional[Dict[str, Any]] = None
) -> Decimal:
    if not isinstance(value_node, (StringValueNode, IntValueNode, FloatValueNode)):
        raise ValueError(f"Decimal literals must be strings or numbers, got {value_node}.")
    return _parse_decimal_value(value_node.value)


def _identity(value: Any) -> Any:
    return value


def _parse_json_literal(
    value_node: ValueNode, variables: Optional[Dict[str, Any]] = None
) -> Any:
    return value_from_ast_untyped(value_node, variables)


GraphQLDate = GraphQLScalarType(
    name="Date",
    description=(
        "The `Date` scalar type represents day-accuracy date objects. "
        "Values are serialized following the ISO-8601 datetime format specification, "
        'for example "2017-03-21".'
    ),
    serialize=_serialize_date,
    parse_value=_parse_date_value,
    parse_literal=_parse_date_literal,
)


GraphQLDateTime = GraphQLScalarType(
    name="DateTime",
    description=(
        "The `DateTime` scalar type represents timezone-naive timestamps with up to microsecond "
        "accuracy. Values are serialized following the ISO-8601 datetime format specification, "
        'for example "2017-03-21T12:34:56.012345" or "2017-03-21T12:34:56".'
    ),
    serialize=_serialize_datetime,
    parse_value=_parse_datetime_value,
    parse_literal=_parse_datetime_literal,
)


GraphQLDecimal = GraphQLScalarType(
    name="Decimal",
    description=(
        "The `Decimal` scalar type is an arbitrary-precision decimal number object "
        "useful for representing values that should never be rounded, such as "
        "currency amounts. Values are serialized as strings in decimal format, without "
        'thousands separators and using a "." as the decimal separator: for example, '
        '"12345678.012345".'
    ),
    serialize=str,
    parse_value=_parse_decimal_value,
    parse_literal=_parse_decimal_literal,
)


GraphQLJSON = GraphQLScalarType(
    name="JSON",
    description=(
        "The `JSON` scalar type represents JSON values as specified by "
        "[ECMA-404](http://www.ecma-international.org/publications/files/ECMA-ST/ECMA-404.pdf)."
    ),
    serialize=_identity,
    parse_value=_identity,
    parse_literal=_parse_json_literal,
)


SPECIFIED_SCALAR_TYPES: Dict[str, GraphQLScalarType] = {
    scalar_type.name: scalar_type
    for scalar_type in (GraphQLString, GraphQLInt, GraphQLFloat, GraphQLBoolean, GraphQLID)
}
BUNDLED_SCALAR_TYPES: Dict[str, GraphQLScalarType] = {
    scalar_type.name: scalar_type
    for scalar_type in (GraphQLDate, GraphQLDateTime, GraphQLDecimal, GraphQLJSON)
}
BUILT_IN_SCALAR_TYPES: Dict[str, GraphQLScalarType] = dict(
    SPECIFIED_SCALAR_TYPES, **BUNDLED_SCALAR_TYPES
)


def is_built_in_scalar_type(scalar_type: Any) -> bool:
    """Return True if the scalar is one of the shared instances above, compared by identity."""
    return any(scalar_type is built_in for built_in in BUILT_IN_SCALAR_TYPES.values())
