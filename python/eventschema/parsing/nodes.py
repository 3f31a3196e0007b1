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
"""TypeScript syntax nodes consumed by event schema extraction.

This module defines the closed set of type nodes that a TypeScript front end
hands to the extractor. Only the shapes needed to describe component event
callbacks are modelled:

- Keyword types: boolean, string, number, null, undefined, ...
- Literal types: 'topChange', 42, true
- Type references: Int32, Readonly<T>, DirectEventHandler<T, 'topFoo'>
- Union/Intersection types: A | B, A & B
- Parenthesized types: (A | B)
- Object literal types: { key: Type }
- Declarations: interface Foo extends Bar { ... }, type Foo = ...
- Members: property, method, index and call signatures, spreads

Every node exposes a ``type`` discriminator matching the front end's node
kind name, so error messages and logs speak the same vocabulary as the
TypeScript AST.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Tuple, Union


# =============================================================================
# Keyword Types
# =============================================================================


class KeywordKind(Enum):
    """Keyword type kinds, valued by their AST node kind."""

    BOOLEAN = "TSBooleanKeyword"
    STRING = "TSStringKeyword"
    NUMBER = "TSNumberKeyword"
    BIGINT = "TSBigIntKeyword"
    SYMBOL = "TSSymbolKeyword"
    NULL = "TSNullKeyword"
    UNDEFINED = "TSUndefinedKeyword"
    VOID = "TSVoidKeyword"
    OBJECT = "TSObjectKeyword"
    ANY = "TSAnyKeyword"
    UNKNOWN = "TSUnknownKeyword"
    NEVER = "TSNeverKeyword"


@dataclass(frozen=True, slots=True)
class TSKeyword:
    """Keyword type: boolean, string, null, ..."""

    kind: KeywordKind

    @property
    def type(self) -> str:
        return self.kind.value

    def __str__(self) -> str:
        return self.kind.value[2:-len("Keyword")].lower()


@dataclass(frozen=True, slots=True)
class TSLiteralType:
    """Literal type: 'hello', 42, true."""

    value: Union[str, int, float, bool]

    @property
    def type(self) -> str:
        return "TSLiteralType"

    def __str__(self) -> str:
        if isinstance(self.value, bool):
            return str(self.value).lower()
        if isinstance(self.value, str):
            return f"'{self.value}'"
        return str(self.value)


# =============================================================================
# Compound Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class TSTypeReference:
    """Named type reference with optional type arguments: Name<A, B>."""

    name: str
    type_parameters: Tuple["TypeNode", ...] = ()

    @property
    def type(self) -> str:
        return "TSTypeReference"

    def __str__(self) -> str:
        if self.type_parameters:
            return f"{self.name}<{', '.join(str(p) for p in self.type_parameters)}>"
        return self.name


@dataclass(frozen=True, slots=True)
class TSUnionType:
    """Union type: A | B | C."""

    types: Tuple["TypeNode", ...]

    @property
    def type(self) -> str:
        return "TSUnionType"

    def __str__(self) -> str:
        return " | ".join(str(t) for t in self.types)


@dataclass(frozen=True, slots=True)
class TSIntersectionType:
    """Intersection type: A & B."""

    types: Tuple["TypeNode", ...]

    @property
    def type(self) -> str:
        return "TSIntersectionType"

    def __str__(self) -> str:
        return " & ".join(str(t) for t in self.types)


@dataclass(frozen=True, slots=True)
class TSParenthesizedType:
    """Parenthesized type: (T)."""

    type_annotation: "TypeNode"

    @property
    def type(self) -> str:
        return "TSParenthesizedType"

    def __str__(self) -> str:
        return f"({self.type_annotation})"


@dataclass(frozen=True, slots=True)
class TSTypeLiteral:
    """Inline object literal type: { key: Type; ... }."""

    members: Tuple["MemberNode", ...] = ()

    @property
    def type(self) -> str:
        return "TSTypeLiteral"

    def __str__(self) -> str:
        if not self.members:
            return "{}"
        return "{ " + "; ".join(str(m) for m in self.members) + " }"


# =============================================================================
# Members
# =============================================================================


@dataclass(frozen=True, slots=True)
class TSPropertySignature:
    """Property member: key?: Type."""

    key: str
    type_annotation: "TypeNode"
    optional: bool = False

    @property
    def type(self) -> str:
        return "TSPropertySignature"

    def __str__(self) -> str:
        opt = "?" if self.optional else ""
        return f"{self.key}{opt}: {self.type_annotation}"


@dataclass(frozen=True, slots=True)
class TSMethodSignature:
    """Method member: key(): void. Only the key is kept."""

    key: str

    @property
    def type(self) -> str:
        return "TSMethodSignature"

    def __str__(self) -> str:
        return f"{self.key}(): unknown"


@dataclass(frozen=True, slots=True)
class TSIndexSignature:
    """Index member: [key: K]: V."""

    key_type: "TypeNode"
    type_annotation: "TypeNode"

    @property
    def type(self) -> str:
        return "TSIndexSignature"

    def __str__(self) -> str:
        return f"[key: {self.key_type}]: {self.type_annotation}"


@dataclass(frozen=True, slots=True)
class TSCallSignatureDeclaration:
    """Call signature member: (): R. Parameters are not modelled."""

    return_type: "TypeNode"

    @property
    def type(self) -> str:
        return "TSCallSignatureDeclaration"

    def __str__(self) -> str:
        return f"(): {self.return_type}"


@dataclass(frozen=True, slots=True)
class TSSpreadMember:
    """Spread of another object type into a member list: ...T."""

    argument: "TypeNode"

    @property
    def type(self) -> str:
        return "TSSpreadMember"

    def __str__(self) -> str:
        return f"...{self.argument}"


# =============================================================================
# Declarations
# =============================================================================


@dataclass(frozen=True, slots=True)
class TSInterfaceDeclaration:
    """Interface declaration: interface Name extends A, B { ... }."""

    name: str
    members: Tuple["MemberNode", ...] = ()
    extends: Tuple[TSTypeReference, ...] = ()

    @property
    def type(self) -> str:
        return "TSInterfaceDeclaration"

    def __str__(self) -> str:
        heritage = ""
        if self.extends:
            heritage = " extends " + ", ".join(str(e) for e in self.extends)
        return f"interface {self.name}{heritage} {TSTypeLiteral(self.members)}"


@dataclass(frozen=True, slots=True)
class TSTypeAliasDeclaration:
    """Type alias declaration: type Name = T."""

    name: str
    type_annotation: "TypeNode"

    @property
    def type(self) -> str:
        return "TSTypeAliasDeclaration"

    def __str__(self) -> str:
        return f"type {self.name} = {self.type_annotation}"


TypeNode = Union[
    TSKeyword,
    TSLiteralType,
    TSTypeReference,
    TSUnionType,
    TSIntersectionType,
    TSParenthesizedType,
    TSTypeLiteral,
    TSInterfaceDeclaration,
    TSTypeAliasDeclaration,
]

MemberNode = Union[
    TSPropertySignature,
    TSMethodSignature,
    TSIndexSignature,
    TSCallSignatureDeclaration,
    TSSpreadMember,
]

# Alias name -> declaration, collected by the front end before extraction.
TypeMap = Mapping[str, Union[TSInterfaceDeclaration, TSTypeAliasDeclaration, TypeNode]]


NULLISH_KINDS = frozenset({KeywordKind.NULL, KeywordKind.UNDEFINED})


def is_nullish(node: TypeNode) -> bool:
    """Check whether a node is the null or undefined keyword."""
    return isinstance(node, TSKeyword) and node.kind in NULLISH_KINDS


def split_nullish(union: TSUnionType) -> Tuple[bool, Tuple[TypeNode, ...]]:
    """Split a union into (has_nullish_arm, non_nullish_members).

    Member order is preserved.
    """
    has_nullish = any(is_nullish(t) for t in union.types)
    return has_nullish, tuple(t for t in union.types if not is_nullish(t))


def node_kind(node: TypeNode) -> str:
    """Describe a node for diagnostics: the reference name or the AST kind."""
    if isinstance(node, TSTypeReference):
        return node.name
    return node.type
