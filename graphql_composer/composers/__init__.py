# Copyright 2026-present Kensho Technologies, LLC.
"""The six named type composers and the field records they hold."""
from .base import NamedTypeComposer  # noqa
from .enum_type import EnumTypeComposer  # noqa
from .fields import ArgumentConfig, EnumValueConfig, FieldConfig, InputFieldConfig  # noqa
from .input_type import InputTypeComposer  # noqa
from .interface_type import InterfaceTypeComposer  # noqa
from .object_type import ObjectTypeComposer  # noqa
from .scalar_type import ScalarTypeComposer  # noqa
from .union_type import UnionTypeComposer  # noqa
