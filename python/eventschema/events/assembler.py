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
"""Assembly of one event schema from a prop declaration."""

from __future__ import annotations

import logging
from typing import Optional

from eventschema.config import DEFAULT_CONFIG, ExtractionConfig
from eventschema.events.detector import find_event
from eventschema.events.errors import EventExtractionError, UnresolvedEventArgumentsError
from eventschema.events.properties import get_event_argument
from eventschema.events.resolver import find_event_arguments_and_type
from eventschema.parsing.nodes import TSPropertySignature, TypeMap
from eventschema.schema.annotations import EventShape

logger = logging.getLogger(__name__)


def build_event_schema(
    types: TypeMap,
    property: TSPropertySignature,
    config: ExtractionConfig = DEFAULT_CONFIG,
) -> Optional[EventShape]:
    """Build the schema of one event prop.

    Args:
        types: Symbol table of user aliases and interfaces
        property: The prop declaration
        config: Extraction configuration

    Returns:
        The event schema, or None if the prop is not an event handler

    Raises:
        UnresolvedEventArgumentsError: If the dispatch kind or the payload
            can't be resolved
        EventExtractionError: If the payload contains unsupported types or a
            malformed handler; `event_name` is set to the prop name
    """
    name = property.key
    found_event = find_event(property.type_annotation, property.optional, config)
    if found_event is None:
        logger.debug(f"Prop '{name}' is not an event handler")
        return None

    try:
        resolution = find_event_arguments_and_type(found_event.type_annotation, types, config=config)
        # Both halves are required; a partial resolution is as fatal as none
        if resolution.argument_props is None or resolution.bubbling_type is None:
            raise UnresolvedEventArgumentsError(name)
        argument = get_event_argument(resolution.argument_props, config)
    except EventExtractionError as e:
        if e.event_name is None:
            e.event_name = name
        raise

    return EventShape(
        name=name,
        optional=found_event.optional,
        bubbling_type=resolution.bubbling_type,
        argument=argument,
        paper_top_level_name_deprecated=resolution.paper_top_level_name_deprecated,
    )
