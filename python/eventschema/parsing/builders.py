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
"""Shorthand constructors for TypeScript nodes.

Front-end adapters and tests build node trees with these helpers instead of
spelling out dataclass constructors:

    >>> prop("onPress", direct(readonly(obj(prop("target", ref("Int32"))))))
    TSPropertySignature(key='onPress', ...)
"""

from __future__ import annotations

from typing import Optional, Union

from eventschema.parsing.nodes import (
    KeywordKind,
    MemberNode,
    TSIndexSignature,
    TSInterfaceDeclaration,
    TSKeyword,
    TSLiteralType,
    TSMethodSignature,
    TSParenthesizedType,
    TSPropertySignature,
    TSTypeAliasDeclaration,
    TSTypeLiteral,
    TSTypeReference,
    TSUnionType,
    TSIntersectionType,
    TypeNode,
)


# =============================================================================
# Keyword Constants
# =============================================================================

TS_BOOLEAN = TSKeyword(KeywordKind.BOOLEAN)
TS_STRING = TSKeyword(KeywordKind.STRING)
TS_NUMBER = TSKeyword(KeywordKind.NUMBER)
TS_NULL = TSKeyword(KeywordKind.NULL)
TS_UNDEFINED = TSKeyword(KeywordKind.UNDEFINED)
TS_VOID = TSKeyword(KeywordKind.VOID)
TS_ANY = TSKeyword(KeywordKind.ANY)
TS_UNKNOWN = TSKeyword(KeywordKind.UNKNOWN)


# =============================================================================
# Type Helpers
# =============================================================================


def ref(name: str, *params: TypeNode) -> TSTypeReference:
    return TSTypeReference(name, tuple(params))


def literal(value: Union[str, int, float, bool]) -> TSLiteralType:
    return TSLiteralType(value)


def union(*types: TypeNode) -> TSUnionType:
    return TSUnionType(tuple(types))


def intersection(*types: TypeNode) -> TSIntersectionType:
    return TSIntersectionType(tuple(types))


def parens(inner: TypeNode) -> TSParenthesizedType:
    return TSParenthesizedType(inner)


def obj(*members: MemberNode) -> TSTypeLiteral:
    return TSTypeLiteral(tuple(members))


def readonly(inner: TypeNode) -> TSTypeReference:
    return ref("Readonly", inner)


def string_enum(*options: str) -> TSUnionType:
    """Union of string literals: 'a' | 'b' | 'c'."""
    return union(*(literal(o) for o in options))


def nullable(inner: TypeNode) -> TSUnionType:
    """T | null | undefined."""
    return union(inner, TS_NULL, TS_UNDEFINED)


def _handler(name: str, payload: TypeNode, legacy_name: Optional[str]) -> TSTypeReference:
    if legacy_name is None:
        return ref(name, payload)
    return ref(name, payload, literal(legacy_name))


def direct(payload: TypeNode, legacy_name: Optional[str] = None) -> TSTypeReference:
    """DirectEventHandler<payload[, 'legacyName']>."""
    return _handler("DirectEventHandler", payload, legacy_name)


def bubbling(payload: TypeNode, legacy_name: Optional[str] = None) -> TSTypeReference:
    """BubblingEventHandler<payload[, 'legacyName']>."""
    return _handler("BubblingEventHandler", payload, legacy_name)


# =============================================================================
# Member and Declaration Helpers
# =============================================================================


def prop(key: str, type_annotation: TypeNode, optional: bool = False) -> TSPropertySignature:
    return TSPropertySignature(key, type_annotation, optional)


def method(key: str) -> TSMethodSignature:
    return TSMethodSignature(key)


def index(key_type: TypeNode, value_type: TypeNode) -> TSIndexSignature:
    return TSIndexSignature(key_type, value_type)


def interface(name: str, *members: MemberNode, extends: tuple = ()) -> TSInterfaceDeclaration:
    heritage = tuple(ref(e) if isinstance(e, str) else e for e in extends)
    return TSInterfaceDeclaration(name, tuple(members), heritage)


def alias(name: str, type_annotation: TypeNode) -> TSTypeAliasDeclaration:
    return TSTypeAliasDeclaration(name, type_annotation)
