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
"""Resolution of an event handler's payload type.

Given the handler wrapper found by the detector, walk through wrappers and
user aliases until an object shape is reached:

    DirectEventHandler<Readonly<ChangeEvent>, 'topChange'>
      -> Readonly<ChangeEvent>          (dispatch: direct, legacy: topChange)
      -> ChangeEvent                    (symbol table lookup)
      -> { value: string }              (terminal: argument members)

A reference that is neither a wrapper nor a known alias (an imported type,
say) resolves to UNRESOLVED. Whether that is fatal is up to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from eventschema.config import DEFAULT_CONFIG, ExtractionConfig
from eventschema.events.detector import EVENT_HANDLER_TYPES
from eventschema.events.errors import AliasCycleError, EventTypeResolutionError
from eventschema.parsing.nodes import (
    MemberNode,
    TSInterfaceDeclaration,
    TSIntersectionType,
    TSLiteralType,
    TSTypeAliasDeclaration,
    TSTypeLiteral,
    TSTypeReference,
    TypeMap,
    TypeNode,
    is_nullish,
)
from eventschema.schema.annotations import BubblingType

logger = logging.getLogger(__name__)


READONLY = "Readonly"


@dataclass(frozen=True, slots=True)
class ArgumentResolution:
    """Outcome of payload resolution.

    Attributes:
        argument_props: Members of the payload object, or None if unresolved
        bubbling_type: Dispatch kind, or None if unresolved
        paper_top_level_name_deprecated: Legacy event name override, if any
    """

    argument_props: Optional[Tuple[MemberNode, ...]]
    bubbling_type: Optional[BubblingType]
    paper_top_level_name_deprecated: Optional[str] = None

    @property
    def is_resolved(self) -> bool:
        return self.argument_props is not None and self.bubbling_type is not None


UNRESOLVED = ArgumentResolution(argument_props=None, bubbling_type=None)


def find_event_arguments_and_type(
    type_annotation: TypeNode,
    types: TypeMap,
    bubbling_type: Optional[BubblingType] = None,
    paper_name: Optional[str] = None,
    config: ExtractionConfig = DEFAULT_CONFIG,
    _alias_chain: Tuple[str, ...] = (),
) -> ArgumentResolution:
    """Resolve a handler payload to its member list and dispatch kind.

    Args:
        type_annotation: Handler wrapper or payload node
        types: Symbol table of user aliases and interfaces
        bubbling_type: Dispatch kind found so far
        paper_name: Legacy event name found so far
        config: Extraction configuration

    Returns:
        The resolution, or UNRESOLVED for opaque references

    Raises:
        EventTypeResolutionError: If a node can't be walked
        AliasCycleError: If alias resolution loops or nests too deeply
    """
    if isinstance(type_annotation, TSInterfaceDeclaration):
        return ArgumentResolution(
            argument_props=flatten_interface(type_annotation, types, config, _alias_chain),
            bubbling_type=bubbling_type,
            paper_top_level_name_deprecated=paper_name,
        )

    if isinstance(type_annotation, TSTypeLiteral):
        return ArgumentResolution(
            argument_props=type_annotation.members,
            bubbling_type=bubbling_type,
            paper_top_level_name_deprecated=paper_name,
        )

    if not isinstance(type_annotation, TSTypeReference):
        raise EventTypeResolutionError(
            f"typeAnnotation of event doesn't have a name: {type_annotation.type}"
        )

    name = type_annotation.name
    if name == READONLY:
        return find_event_arguments_and_type(
            _first_parameter(type_annotation),
            types,
            bubbling_type,
            paper_name,
            config,
            _alias_chain,
        )

    if name in EVENT_HANDLER_TYPES:
        event_type = EVENT_HANDLER_TYPES[name]
        payload = _first_parameter(type_annotation)
        paper_top_level_name_deprecated = _legacy_name(type_annotation)

        if is_nullish(payload):
            return ArgumentResolution(
                argument_props=(),
                bubbling_type=event_type,
                paper_top_level_name_deprecated=paper_top_level_name_deprecated,
            )
        return find_event_arguments_and_type(
            payload,
            types,
            event_type,
            paper_top_level_name_deprecated,
            config,
            _alias_chain,
        )

    if name in types:
        chain = _enter_alias(name, _alias_chain, config)
        element_type = types[name]
        if isinstance(element_type, TSTypeAliasDeclaration):
            element_type = element_type.type_annotation
        logger.debug(f"Resolved alias '{name}' to {element_type.type}")
        return find_event_arguments_and_type(
            element_type,
            types,
            bubbling_type,
            paper_name,
            config,
            chain,
        )

    logger.debug(f"Event argument type '{name}' is not declared locally")
    return UNRESOLVED


def flatten_interface(
    declaration: TSInterfaceDeclaration,
    types: TypeMap,
    config: ExtractionConfig = DEFAULT_CONFIG,
    _alias_chain: Tuple[str, ...] = (),
) -> Tuple[MemberNode, ...]:
    """Collect an interface's members, inherited ones first.

    Heritage names are looked up in the symbol table and may name another
    interface, an object literal alias (optionally Readonly) or an
    intersection of those.

    Raises:
        EventTypeResolutionError: If a heritage name isn't declared locally
    """
    chain = _alias_chain
    if declaration.name and declaration.name not in chain:
        chain = chain + (declaration.name,)

    members: List[MemberNode] = []
    for heritage in declaration.extends:
        members.extend(_heritage_members(heritage, types, config, chain))
    members.extend(declaration.members)
    return tuple(members)


def _heritage_members(
    node: TypeNode,
    types: TypeMap,
    config: ExtractionConfig,
    chain: Tuple[str, ...],
) -> List[MemberNode]:
    if isinstance(node, TSTypeLiteral):
        return list(node.members)

    if isinstance(node, TSInterfaceDeclaration):
        return list(flatten_interface(node, types, config, chain))

    if isinstance(node, TSIntersectionType):
        members: List[MemberNode] = []
        for part in node.types:
            members.extend(_heritage_members(part, types, config, chain))
        return members

    if isinstance(node, TSTypeReference):
        if node.name == READONLY:
            return _heritage_members(_first_parameter(node), types, config, chain)
        if node.name not in types:
            raise EventTypeResolutionError(f'Failed to find definition for "{node.name}"')
        next_chain = _enter_alias(node.name, chain, config)
        definition = types[node.name]
        if isinstance(definition, TSTypeAliasDeclaration):
            definition = definition.type_annotation
        if isinstance(definition, TSInterfaceDeclaration):
            return list(flatten_interface(definition, types, config, next_chain))
        return _heritage_members(definition, types, config, next_chain)

    raise EventTypeResolutionError(f"Unable to flatten {node.type} into event arguments")


def _enter_alias(
    name: str,
    chain: Tuple[str, ...],
    config: ExtractionConfig,
) -> Tuple[str, ...]:
    """Extend the alias chain, rejecting cycles and runaway nesting."""
    next_chain = chain + (name,)
    if config.detect_alias_cycles and name in chain:
        raise AliasCycleError(next_chain)
    if len(chain) >= config.max_alias_depth:
        raise AliasCycleError(
            next_chain,
            reason=f"alias chain exceeds max depth {config.max_alias_depth}",
        )
    return next_chain


def _first_parameter(reference: TSTypeReference) -> TypeNode:
    if not reference.type_parameters:
        raise EventTypeResolutionError(f"'{reference.name}' requires a type argument")
    return reference.type_parameters[0]


def _legacy_name(reference: TSTypeReference) -> Optional[str]:
    if len(reference.type_parameters) < 2:
        return None
    legacy = reference.type_parameters[1]
    if not isinstance(legacy, TSLiteralType) or not isinstance(legacy.value, str):
        raise EventTypeResolutionError(
            f"Legacy event name of '{reference}' must be a string literal"
        )
    return legacy.value
