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
"""Codegen schema values describing component events.

These are the values handed to native code generators. Their dictionary form
(``to_dict``) is a stable wire contract: annotation ``type`` tags, the
``bubble``/``direct`` dispatch values and the field names ``name``,
``optional``, ``bubblingType``, ``paperTopLevelNameDeprecated`` and
``typeAnnotation`` must not change.

Hierarchy:
- EventTypeAnnotation (abstract)
  - BooleanTypeAnnotation, StringTypeAnnotation
  - Int32TypeAnnotation, DoubleTypeAnnotation, FloatTypeAnnotation
  - StringEnumTypeAnnotation (ordered, non-empty options)
  - ObjectTypeAnnotation (ordered NamedProperty list)
- NamedProperty
- EventShape
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple


class BubblingType(Enum):
    """How an event is delivered to listeners."""

    BUBBLE = "bubble"  # propagates up the view hierarchy
    DIRECT = "direct"  # only the target's listener

    def __str__(self) -> str:
        return self.value


# =============================================================================
# Payload Type Annotations
# =============================================================================


class EventTypeAnnotation(ABC):
    """Abstract base class for event payload property types."""

    __slots__ = ()

    @property
    @abstractmethod
    def type(self) -> str:
        """Wire tag of this annotation."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {"type": self.type}


@dataclass(frozen=True, slots=True)
class BooleanTypeAnnotation(EventTypeAnnotation):
    @property
    def type(self) -> str:
        return "BooleanTypeAnnotation"


@dataclass(frozen=True, slots=True)
class StringTypeAnnotation(EventTypeAnnotation):
    @property
    def type(self) -> str:
        return "StringTypeAnnotation"


@dataclass(frozen=True, slots=True)
class Int32TypeAnnotation(EventTypeAnnotation):
    @property
    def type(self) -> str:
        return "Int32TypeAnnotation"


@dataclass(frozen=True, slots=True)
class DoubleTypeAnnotation(EventTypeAnnotation):
    @property
    def type(self) -> str:
        return "DoubleTypeAnnotation"


@dataclass(frozen=True, slots=True)
class FloatTypeAnnotation(EventTypeAnnotation):
    @property
    def type(self) -> str:
        return "FloatTypeAnnotation"


@dataclass(frozen=True, slots=True)
class StringEnumTypeAnnotation(EventTypeAnnotation):
    """Union of string literals, options in declaration order."""

    options: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.options:
            raise ValueError("StringEnumTypeAnnotation requires at least one option")

    @property
    def type(self) -> str:
        return "StringEnumTypeAnnotation"

    def to_dict(self) -> Dict[str, Any]:
        return {"type": self.type, "options": list(self.options)}


@dataclass(frozen=True, slots=True)
class ObjectTypeAnnotation(EventTypeAnnotation):
    """Object payload, properties in declaration order."""

    properties: Tuple["NamedProperty", ...] = ()

    @property
    def type(self) -> str:
        return "ObjectTypeAnnotation"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "properties": [p.to_dict() for p in self.properties],
        }


BOOLEAN = BooleanTypeAnnotation()
STRING = StringTypeAnnotation()
INT32 = Int32TypeAnnotation()
DOUBLE = DoubleTypeAnnotation()
FLOAT = FloatTypeAnnotation()


def annotation_from_dict(d: Dict[str, Any]) -> EventTypeAnnotation:
    """Rebuild a payload annotation from its wire form.

    Raises:
        ValueError: If the ``type`` tag is unknown
    """
    tag = d.get("type")
    factory = _ANNOTATION_FACTORIES.get(tag)
    if factory is None:
        raise ValueError(f"Unknown event type annotation: {tag!r}")
    return factory(d)


_ANNOTATION_FACTORIES: Dict[Optional[str], Callable[[Dict[str, Any]], EventTypeAnnotation]] = {
    "BooleanTypeAnnotation": lambda d: BOOLEAN,
    "StringTypeAnnotation": lambda d: STRING,
    "Int32TypeAnnotation": lambda d: INT32,
    "DoubleTypeAnnotation": lambda d: DOUBLE,
    "FloatTypeAnnotation": lambda d: FLOAT,
    "StringEnumTypeAnnotation": lambda d: StringEnumTypeAnnotation(tuple(d["options"])),
    "ObjectTypeAnnotation": lambda d: ObjectTypeAnnotation(
        tuple(NamedProperty.from_dict(p) for p in d.get("properties", ()))
    ),
}


# =============================================================================
# Named Properties and Events
# =============================================================================


@dataclass(frozen=True, slots=True)
class NamedProperty:
    """A named, possibly optional, payload property.

    Attributes:
        name: Property key as declared
        optional: Whether the property may be absent
        type_annotation: The property's payload type
    """

    name: str
    optional: bool
    type_annotation: EventTypeAnnotation

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "optional": self.optional,
            "typeAnnotation": self.type_annotation.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "NamedProperty":
        """Create from dictionary."""
        return cls(
            name=d["name"],
            optional=d.get("optional", False),
            type_annotation=annotation_from_dict(d["typeAnnotation"]),
        )


@dataclass(frozen=True, slots=True)
class EventShape:
    """Fully resolved description of one component event.

    Attributes:
        name: Event property name, e.g. ``onPress``
        optional: Whether the handler prop may be omitted
        bubbling_type: Dispatch policy
        argument: Payload object (possibly with no properties)
        paper_top_level_name_deprecated: Legacy top-level event name, if any
    """

    name: str
    optional: bool
    bubbling_type: BubblingType
    argument: ObjectTypeAnnotation
    paper_top_level_name_deprecated: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        d: Dict[str, Any] = {
            "name": self.name,
            "optional": self.optional,
            "bubblingType": self.bubbling_type.value,
        }
        if self.paper_top_level_name_deprecated is not None:
            d["paperTopLevelNameDeprecated"] = self.paper_top_level_name_deprecated
        d["typeAnnotation"] = {
            "type": "EventTypeAnnotation",
            "argument": self.argument.to_dict(),
        }
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "EventShape":
        """Create from dictionary."""
        type_annotation = d["typeAnnotation"]
        if type_annotation.get("type") != "EventTypeAnnotation":
            raise ValueError(
                f"Expected EventTypeAnnotation for {d.get('name')!r}, "
                f"got {type_annotation.get('type')!r}"
            )
        argument = annotation_from_dict(type_annotation["argument"])
        if not isinstance(argument, ObjectTypeAnnotation):
            raise ValueError(f"Event argument for {d.get('name')!r} must be an object")
        return cls(
            name=d["name"],
            optional=d.get("optional", False),
            bubbling_type=BubblingType(d["bubblingType"]),
            argument=argument,
            paper_top_level_name_deprecated=d.get("paperTopLevelNameDeprecated"),
        )
