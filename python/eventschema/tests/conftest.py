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
"""Pytest configuration for eventschema tests.

Shared symbol tables modelled on a typical component spec file:

    type ChangeEvent = Readonly<{ value: string; selected?: boolean }>;
    interface BaseEvent { target: Int32 }
    interface PressEvent extends BaseEvent { x: Double; y: Double }
    type PressAlias = PressEvent;
"""

import pytest

from eventschema.parsing.builders import (
    TS_BOOLEAN,
    TS_STRING,
    alias,
    interface,
    obj,
    prop,
    readonly,
    ref,
)


@pytest.fixture
def empty_types():
    """Symbol table with no user declarations."""
    return {}


@pytest.fixture
def component_types():
    """Symbol table with aliases and interfaces used by event payloads."""
    return {
        "ChangeEvent": alias(
            "ChangeEvent",
            readonly(obj(prop("value", TS_STRING), prop("selected", TS_BOOLEAN, optional=True))),
        ),
        "BaseEvent": interface("BaseEvent", prop("target", ref("Int32"))),
        "PressEvent": interface(
            "PressEvent",
            prop("x", ref("Double")),
            prop("y", ref("Double")),
            extends=("BaseEvent",),
        ),
        "PressAlias": alias("PressAlias", ref("PressEvent")),
    }
