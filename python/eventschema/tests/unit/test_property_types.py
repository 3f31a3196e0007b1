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
"""Unit tests for payload property type mapping.

Tests for get_property_type and build_properties_for_event including:
- Keyword and numeric alias types
- Readonly and parenthesized unwrapping
- Nested object literals
- Nullable unions and string enums
- Rejection of unsupported types
"""

import logging

import pytest

from eventschema.config import ExtractionConfig
from eventschema.events.errors import UnsupportedEventPropertyTypeError
from eventschema.events.properties import (
    build_properties_for_event,
    get_event_argument,
    get_property_type,
)
from eventschema.parsing.builders import (
    TS_BOOLEAN,
    TS_NULL,
    TS_NUMBER,
    TS_STRING,
    TS_UNDEFINED,
    index,
    literal,
    method,
    nullable,
    obj,
    parens,
    prop,
    readonly,
    ref,
    string_enum,
    union,
)
from eventschema.schema.annotations import (
    BOOLEAN,
    DOUBLE,
    FLOAT,
    INT32,
    STRING,
    NamedProperty,
    ObjectTypeAnnotation,
    StringEnumTypeAnnotation,
)


# ===========================================================================
# Scalar Types
# ===========================================================================


class TestScalarTypes:
    """Tests for keyword and numeric alias types."""

    @pytest.mark.parametrize(
        "node,expected",
        [
            (TS_BOOLEAN, BOOLEAN),
            (TS_STRING, STRING),
            (ref("Int32"), INT32),
            (ref("Double"), DOUBLE),
            (ref("Float"), FLOAT),
        ],
    )
    def test_supported_scalar(self, node, expected):
        assert get_property_type("value", False, node) == NamedProperty("value", False, expected)

    def test_optional_flag_is_kept(self):
        assert get_property_type("value", True, TS_STRING).optional is True

    def test_number_keyword_rejected(self):
        """A bare number is ambiguous for native code and must fail."""
        with pytest.raises(UnsupportedEventPropertyTypeError) as exc_info:
            get_property_type("count", False, TS_NUMBER)
        assert exc_info.value.property_name == "count"
        assert exc_info.value.kind == "TSNumberKeyword"
        assert '"count"' in str(exc_info.value)

    def test_unknown_reference_rejected(self):
        with pytest.raises(UnsupportedEventPropertyTypeError) as exc_info:
            get_property_type("when", False, ref("Date"))
        assert exc_info.value.kind == "Date"


# ===========================================================================
# Wrappers
# ===========================================================================


class TestWrappers:
    """Tests for Readonly and parentheses."""

    def test_readonly_unwrapped(self):
        assert get_property_type("flag", False, readonly(TS_BOOLEAN)).type_annotation == BOOLEAN

    def test_parens_unwrapped(self):
        assert get_property_type("flag", False, parens(parens(TS_STRING))).type_annotation == STRING

    def test_readonly_without_argument_rejected(self):
        with pytest.raises(UnsupportedEventPropertyTypeError):
            get_property_type("flag", False, ref("Readonly"))


# ===========================================================================
# Objects
# ===========================================================================


class TestObjects:
    """Tests for nested object literal payloads."""

    def test_nested_object(self):
        node = obj(
            prop("x", ref("Double")),
            prop("inner", readonly(obj(prop("ok", TS_BOOLEAN, optional=True)))),
        )
        result = get_property_type("layout", False, node)

        assert result.type_annotation == ObjectTypeAnnotation(
            (
                NamedProperty("x", False, DOUBLE),
                NamedProperty(
                    "inner",
                    False,
                    ObjectTypeAnnotation((NamedProperty("ok", True, BOOLEAN),)),
                ),
            )
        )

    def test_empty_object(self):
        assert get_property_type("empty", False, obj()).type_annotation == ObjectTypeAnnotation(())

    def test_nested_failure_names_member(self):
        node = obj(prop("fine", TS_STRING), prop("broken", TS_NUMBER))
        with pytest.raises(UnsupportedEventPropertyTypeError) as exc_info:
            get_property_type("outer", False, node)
        assert exc_info.value.property_name == "broken"

    def test_method_member_rejected(self):
        with pytest.raises(UnsupportedEventPropertyTypeError) as exc_info:
            get_property_type("outer", False, obj(method("measure")))
        assert exc_info.value.property_name == "measure"
        assert exc_info.value.kind == "TSMethodSignature"


# ===========================================================================
# Unions
# ===========================================================================


class TestUnions:
    """Tests for nullable unions and string enums."""

    def test_nullable_forces_optional(self):
        result = get_property_type("value", False, nullable(ref("Int32")))
        assert result == NamedProperty("value", True, INT32)

    def test_null_only_arm(self):
        result = get_property_type("value", False, union(TS_STRING, TS_NULL))
        assert result.optional is True
        assert result.type_annotation == STRING

    def test_nullable_parenthesized_enum(self):
        node = union(parens(string_enum("on", "off")), TS_UNDEFINED)
        result = get_property_type("state", False, node)
        assert result == NamedProperty("state", True, StringEnumTypeAnnotation(("on", "off")))

    def test_string_enum_keeps_order(self):
        result = get_property_type("mode", False, string_enum("a", "b", "c"))
        assert result.type_annotation == StringEnumTypeAnnotation(("a", "b", "c"))
        assert result.optional is False

    def test_first_non_nullish_member_wins(self, caplog):
        node = union(TS_STRING, TS_BOOLEAN, TS_NULL)
        with caplog.at_level(logging.WARNING, logger="eventschema.events.properties"):
            result = get_property_type("value", False, node)
        assert result.type_annotation == STRING
        assert "only 'string' is mapped" in caplog.text

    def test_discard_warning_can_be_disabled(self, caplog):
        config = ExtractionConfig(warn_on_discarded_union_members=False)
        with caplog.at_level(logging.WARNING, logger="eventschema.events.properties"):
            get_property_type("value", False, union(TS_STRING, TS_BOOLEAN, TS_NULL), config)
        assert caplog.text == ""

    def test_only_nullish_rejected(self):
        with pytest.raises(UnsupportedEventPropertyTypeError):
            get_property_type("value", False, union(TS_NULL, TS_UNDEFINED))

    def test_mixed_union_rejected(self):
        with pytest.raises(UnsupportedEventPropertyTypeError) as exc_info:
            get_property_type("value", False, union(literal("a"), TS_STRING))
        assert exc_info.value.kind == "TSUnionType"

    def test_numeric_literal_union_rejected(self):
        with pytest.raises(UnsupportedEventPropertyTypeError):
            get_property_type("value", False, union(literal(1), literal(2)))


# ===========================================================================
# Members and Arguments
# ===========================================================================


class TestBuildProperties:
    """Tests for member and argument mapping."""

    def test_property_signature(self):
        result = build_properties_for_event(prop("target", ref("Int32"), optional=True))
        assert result == NamedProperty("target", True, INT32)

    def test_index_signature_rejected(self):
        with pytest.raises(UnsupportedEventPropertyTypeError) as exc_info:
            build_properties_for_event(index(TS_STRING, TS_STRING))
        assert exc_info.value.kind == "TSIndexSignature"
        assert exc_info.value.property_name == "TSIndexSignature"
        assert str(exc_info.value) == (
            'Unable to determine event type for "TSIndexSignature": TSIndexSignature'
        )

    def test_event_argument_preserves_order(self):
        argument = get_event_argument(
            (prop("b", TS_STRING), prop("a", TS_BOOLEAN), prop("c", ref("Float")))
        )
        assert [p.name for p in argument.properties] == ["b", "a", "c"]

    def test_empty_event_argument(self):
        assert get_event_argument(()) == ObjectTypeAnnotation(())
