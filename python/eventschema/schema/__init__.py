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
"""Codegen schema values for component events."""

from eventschema.schema.annotations import (
    BOOLEAN,
    DOUBLE,
    FLOAT,
    INT32,
    STRING,
    BooleanTypeAnnotation,
    BubblingType,
    DoubleTypeAnnotation,
    EventShape,
    EventTypeAnnotation,
    FloatTypeAnnotation,
    Int32TypeAnnotation,
    NamedProperty,
    ObjectTypeAnnotation,
    StringEnumTypeAnnotation,
    StringTypeAnnotation,
    annotation_from_dict,
)

__all__ = [
    "BOOLEAN",
    "DOUBLE",
    "FLOAT",
    "INT32",
    "STRING",
    "BooleanTypeAnnotation",
    "BubblingType",
    "DoubleTypeAnnotation",
    "EventShape",
    "EventTypeAnnotation",
    "FloatTypeAnnotation",
    "Int32TypeAnnotation",
    "NamedProperty",
    "ObjectTypeAnnotation",
    "StringEnumTypeAnnotation",
    "StringTypeAnnotation",
    "annotation_from_dict",
]
