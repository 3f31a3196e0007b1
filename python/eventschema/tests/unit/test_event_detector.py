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
"""Unit tests for event handler detection."""

import logging

import pytest

from eventschema.events.detector import EventCandidate, find_event
from eventschema.parsing.builders import (
    TS_BOOLEAN,
    TS_NULL,
    TS_STRING,
    TS_UNDEFINED,
    bubbling,
    direct,
    literal,
    nullable,
    obj,
    parens,
    ref,
    union,
)


class TestFindEvent:
    """Tests for find_event."""

    def test_direct_handler(self):
        handler = direct(TS_NULL)
        assert find_event(handler, False) == EventCandidate(handler, False)

    def test_bubbling_handler(self):
        handler = bubbling(ref("ChangeEvent"))
        assert find_event(handler, True) == EventCandidate(handler, True)

    def test_parenthesized_handler(self):
        handler = direct(TS_NULL)
        assert find_event(parens(parens(handler)), False) == EventCandidate(handler, False)

    def test_nullable_handler_is_optional(self):
        handler = direct(TS_NULL)
        assert find_event(nullable(handler), False) == EventCandidate(handler, True)

    def test_undefined_only_arm_is_optional(self):
        handler = bubbling(TS_NULL)
        result = find_event(union(TS_UNDEFINED, handler), False)
        assert result == EventCandidate(handler, True)

    def test_parenthesized_nullable_handler(self):
        handler = direct(TS_NULL)
        assert find_event(parens(nullable(handler)), False).optional is True

    def test_declared_optional_survives_union(self):
        handler = direct(TS_NULL)
        # no nullish arm; declared optionality must not be reset
        result = find_event(union(handler, ref("Other")), True)
        assert result == EventCandidate(handler, True)

    def test_first_non_nullish_member_wins(self, caplog):
        with caplog.at_level(logging.WARNING, logger="eventschema.events.detector"):
            result = find_event(union(ref("Other"), direct(TS_NULL), TS_NULL), False)
        assert result is None
        assert "only 'Other' is considered" in caplog.text

    @pytest.mark.parametrize(
        "node",
        [
            TS_STRING,
            TS_BOOLEAN,
            literal("onPress"),
            ref("EventHandler"),
            ref("ViewProps"),
            obj(),
            union(TS_NULL, TS_UNDEFINED),
            nullable(ref("Int32")),
        ],
    )
    def test_not_an_event(self, node):
        assert find_event(node, False) is None
