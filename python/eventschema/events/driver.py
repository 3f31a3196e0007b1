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
"""Extraction of all events declared on a component's props."""

from __future__ import annotations

import logging
from typing import List, Sequence, Tuple

from eventschema.config import DEFAULT_CONFIG, ExtractionConfig
from eventschema.events.assembler import build_event_schema
from eventschema.parsing.nodes import MemberNode, TSPropertySignature, TypeMap
from eventschema.schema.annotations import EventShape

logger = logging.getLogger(__name__)


def get_events(
    event_type_ast: Sequence[MemberNode],
    types: TypeMap,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> Tuple[EventShape, ...]:
    """Extract event schemas from a props member list.

    Only property signatures are considered; methods, index signatures and
    spreads are skipped. Props that are not event handlers are dropped.
    Declaration order is preserved.

    Raises:
        EventExtractionError: On the first event whose shape can't be
            determined; no partial result is returned
    """
    events: List[EventShape] = []
    for member in event_type_ast:
        if not isinstance(member, TSPropertySignature):
            logger.debug(f"Skipping {member.type} member")
            continue
        event = build_event_schema(types, member, config)
        if event is not None:
            events.append(event)

    logger.debug(f"Extracted {len(events)} events from {len(event_type_ast)} members")
    return tuple(events)
