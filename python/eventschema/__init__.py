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
"""eventschema: component event schema extraction for native codegen.

Given the props of a component declared in TypeScript, eventschema finds the
event handler props and describes each event's dispatch policy and payload
shape in the codegen schema format consumed by native code generators.

Key Components:
    - parsing: TypeScript syntax nodes handed over by the front end
    - events: Detection, payload resolution and schema assembly
    - schema: Output values and their wire form
    - config: Extraction configuration

Usage:
    >>> from eventschema import get_events
    >>> [event.to_dict() for event in get_events(props.members, types)]
"""

# Use lazy imports so submodules can be imported on their own
# Full imports are done on first access via __getattr__


def __getattr__(name: str):
    """Lazy import of module attributes."""
    # Extraction entry points
    if name in ("get_events", "build_event_schema"):
        from .events import build_event_schema, get_events

        return locals()[name]

    # Errors
    if name in (
        "AliasCycleError",
        "EventExtractionError",
        "EventTypeResolutionError",
        "UnresolvedEventArgumentsError",
        "UnsupportedEventPropertyTypeError",
    ):
        from .events.errors import (
            AliasCycleError,
            EventExtractionError,
            EventTypeResolutionError,
            UnresolvedEventArgumentsError,
            UnsupportedEventPropertyTypeError,
        )

        return locals()[name]

    # Schema values
    if name in ("BubblingType", "EventShape", "NamedProperty", "ObjectTypeAnnotation"):
        from .schema.annotations import (
            BubblingType,
            EventShape,
            NamedProperty,
            ObjectTypeAnnotation,
        )

        return locals()[name]

    # Configuration
    if name in ("DEFAULT_CONFIG", "ExtractionConfig"):
        from .config import DEFAULT_CONFIG, ExtractionConfig

        return locals()[name]

    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Extraction
    "get_events",
    "build_event_schema",
    # Errors
    "AliasCycleError",
    "EventExtractionError",
    "EventTypeResolutionError",
    "UnresolvedEventArgumentsError",
    "UnsupportedEventPropertyTypeError",
    # Schema
    "BubblingType",
    "EventShape",
    "NamedProperty",
    "ObjectTypeAnnotation",
    # Configuration
    "DEFAULT_CONFIG",
    "ExtractionConfig",
]

__version__ = "0.1.0"
