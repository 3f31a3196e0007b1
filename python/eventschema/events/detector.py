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
"""Detection of event handler props.

A prop is an event when its declared type, after stripping parentheses and
``| null | undefined``, is a reference to one of the handler wrappers:

    onChange: BubblingEventHandler<ChangeEvent>
    onLoad?: (DirectEventHandler<null> | null | undefined)

Anything else is not an event. That is an ordinary outcome, not an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from eventschema.config import DEFAULT_CONFIG, ExtractionConfig
from eventschema.parsing.nodes import (
    TSParenthesizedType,
    TSTypeReference,
    TSUnionType,
    TypeNode,
    split_nullish,
)
from eventschema.schema.annotations import BubblingType

logger = logging.getLogger(__name__)


BUBBLING_EVENT_HANDLER = "BubblingEventHandler"
DIRECT_EVENT_HANDLER = "DirectEventHandler"

EVENT_HANDLER_TYPES: Dict[str, BubblingType] = {
    BUBBLING_EVENT_HANDLER: BubblingType.BUBBLE,
    DIRECT_EVENT_HANDLER: BubblingType.DIRECT,
}


@dataclass(frozen=True, slots=True)
class EventCandidate:
    """A handler wrapper reference and whether the prop is optional."""

    type_annotation: TSTypeReference
    optional: bool


def find_event(
    type_annotation: TypeNode,
    optional: bool,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> Optional[EventCandidate]:
    """Find the handler wrapper behind a prop type.

    Args:
        type_annotation: Declared type of the prop
        optional: Whether the prop was declared with ``?``
        config: Extraction configuration

    Returns:
        The wrapper reference with the effective optionality, or None if the
        type does not denote an event handler
    """
    if isinstance(type_annotation, TSParenthesizedType):
        return find_event(type_annotation.type_annotation, optional, config)

    if isinstance(type_annotation, TSUnionType):
        # T | null | undefined: only the first non-nullish member is considered
        has_nullish, members = split_nullish(type_annotation)
        if not members:
            return None
        if len(members) > 1 and config.warn_on_discarded_union_members:
            logger.warning(
                f"Union '{type_annotation}' has {len(members)} non-nullish members; "
                f"only '{members[0]}' is considered"
            )
        return find_event(members[0], optional or has_nullish, config)

    if isinstance(type_annotation, TSTypeReference) and type_annotation.name in EVENT_HANDLER_TYPES:
        return EventCandidate(type_annotation, optional)

    return None
