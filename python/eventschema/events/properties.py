# Copyright Rand Arete @ Ananke 2025
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
# ==============================================================================
"""Mapping of event payload properties to codegen type annotations.

The supported set is closed:

    boolean                      -> BooleanTypeAnnotation
    string                       -> StringTypeAnnotation
    Int32 / Double / Float       -> Int32 / Double / Float TypeAnnotation
    Readonly<T>                  -> T
    { ... }                      -> ObjectTypeAnnotation
    T | null | undefined         -> T, forced optional
    'a' | 'b' | 'c'              -> StringEnumTypeAnnotation

Anything else (``number`` included) raises UnsupportedEventPropertyTypeError.
"""

from __future__ import annotations

import logging
from typing import Dict, Tuple

from eventschema.config import DEFAULT_CONFIG, ExtractionConfig
from eventschema.events.errors import UnsupportedEventPropertyTypeError
from eventschema.parsing.nodes import (
    KeywordKind,
    MemberNode,
    TSKeyword,
    TSMethodSignature,
    TSLiteralType,
    TSParenthesizedType,
    TSPropertySignature,
    TSTypeLiteral,
    TSTypeReference,
    TSUnionType,
    TypeNode,
    node_kind,
    split_nullish,
)
from eventschema.schema.annotations import (
    BOOLEAN,
    DOUBLE,
    FLOAT,
    INT32,
    STRING,
    EventTypeAnnotation,
    NamedProperty,
    ObjectTypeAnnotation,
    StringEnumTypeAnnotation,
)

logger = logging.getLogger(__name__)


KEYWORD_ANNOTATIONS: Dict[KeywordKind, EventTypeAnnotation] = {
    KeywordKind.BOOLEAN: BOOLEAN,
    KeywordKind.STRING: STRING,
}

# Codegen number aliases; a bare `number` is ambiguous and rejected
NUMERIC_ANNOTATIONS: Dict[str, EventTypeAnnotation] = {
    "Int32": INT32,
    "Double": DOUBLE,
    "Float": FLOAT,
}


def get_property_type(
    name: str,
    optional: bool,
    type_annotation: TypeNode,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> NamedProperty:
    """Map one payload property to a named codegen annotation.

    Args:
        name: Property key
        optional: Whether the property was declared with ``?``
        type_annotation: Declared type of the property
        config: Extraction configuration

    Returns:
        The property with its resolved annotation

    Raises:
        UnsupportedEventPropertyTypeError: If the type (or a nested member's
            type) is outside the supported set
    """
    if isinstance(type_annotation, TSParenthesizedType):
        return get_property_type(name, optional, type_annotation.type_annotation, config)

    if isinstance(type_annotation, TSKeyword) and type_annotation.kind in KEYWORD_ANNOTATIONS:
        return NamedProperty(name, optional, KEYWORD_ANNOTATIONS[type_annotation.kind])

    if isinstance(type_annotation, TSTypeReference):
        if type_annotation.name in NUMERIC_ANNOTATIONS:
            return NamedProperty(name, optional, NUMERIC_ANNOTATIONS[type_annotation.name])
        if type_annotation.name == "Readonly" and type_annotation.type_parameters:
            return get_property_type(name, optional, type_annotation.type_parameters[0], config)

    if isinstance(type_annotation, TSTypeLiteral):
        return NamedProperty(
            name,
            optional,
            ObjectTypeAnnotation(
                tuple(build_properties_for_event(m, config) for m in type_annotation.members)
            ),
        )

    if isinstance(type_annotation, TSUnionType):
        return _get_union_property_type(name, optional, type_annotation, config)

    raise UnsupportedEventPropertyTypeError(name, node_kind(type_annotation))


def _get_union_property_type(
    name: str,
    optional: bool,
    union: TSUnionType,
    config: ExtractionConfig,
) -> NamedProperty:
    has_nullish, members = split_nullish(union)

    # T | null | undefined, and (T | T2) | null | undefined via the parens
    if has_nullish:
        if not members:
            raise UnsupportedEventPropertyTypeError(name, union.type)
        if len(members) > 1 and config.warn_on_discarded_union_members:
            logger.warning(
                f"Property '{name}': union '{union}' has {len(members)} non-nullish "
                f"members; only '{members[0]}' is mapped"
            )
        return get_property_type(name, True, members[0], config)

    if members and all(isinstance(m, TSLiteralType) and isinstance(m.value, str) for m in members):
        return NamedProperty(
            name,
            optional,
            StringEnumTypeAnnotation(tuple(m.value for m in members)),
        )

    raise UnsupportedEventPropertyTypeError(name, union.type)


def build_properties_for_event(
    member: MemberNode,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> NamedProperty:
    """Map an object member to a named property.

    Raises:
        UnsupportedEventPropertyTypeError: If the member isn't a property
            signature or its type is unsupported
    """
    if not isinstance(member, TSPropertySignature):
        label = member.key if isinstance(member, TSMethodSignature) else node_kind(member)
        raise UnsupportedEventPropertyTypeError(label, member.type)
    return get_property_type(member.key, member.optional, member.type_annotation, config)


def get_event_argument(
    argument_props: Tuple[MemberNode, ...],
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> ObjectTypeAnnotation:
    """Map resolved argument members to the event payload object."""
    return ObjectTypeAnnotation(tuple(build_properties_for_event(p, config) for p in argument_props))
