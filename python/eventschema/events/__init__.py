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
"""Event schema extraction.

Pipeline, outermost first:
- driver.get_events: filter prop members, keep events in order
- assembler.build_event_schema: one prop -> EventShape or None
- detector.find_event: is this prop a handler wrapper?
- resolver.find_event_arguments_and_type: wrapper/alias chain -> payload members
- properties.get_property_type: payload member -> type annotation
"""

from eventschema.events.assembler import build_event_schema
from eventschema.events.detector import (
    BUBBLING_EVENT_HANDLER,
    DIRECT_EVENT_HANDLER,
    EVENT_HANDLER_TYPES,
    EventCandidate,
    find_event,
)
from eventschema.events.driver import get_events
from eventschema.events.errors import (
    AliasCycleError,
    EventExtractionError,
    EventTypeResolutionError,
    UnresolvedEventArgumentsError,
    UnsupportedEventPropertyTypeError,
)
from eventschema.events.properties import (
    build_properties_for_event,
    get_event_argument,
    get_property_type,
)
from eventschema.events.resolver import (
    UNRESOLVED,
    ArgumentResolution,
    find_event_arguments_and_type,
    flatten_interface,
)

__all__ = [
    # Driver and assembler
    "get_events",
    "build_event_schema",
    # Detector
    "BUBBLING_EVENT_HANDLER",
    "DIRECT_EVENT_HANDLER",
    "EVENT_HANDLER_TYPES",
    "EventCandidate",
    "find_event",
    # Resolver
    "UNRESOLVED",
    "ArgumentResolution",
    "find_event_arguments_and_type",
    "flatten_interface",
    # Property mapping
    "build_properties_for_event",
    "get_event_argument",
    "get_property_type",
    # Errors
    "AliasCycleError",
    "EventExtractionError",
    "EventTypeResolutionError",
    "UnresolvedEventArgumentsError",
    "UnsupportedEventPropertyTypeError",
]
