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
"""Errors raised when an event is recognized but its shape can't be extracted.

Declarations that are simply not events never raise; they are reported as
``None`` and filtered out. Everything here fails the whole extraction batch.
"""

from __future__ import annotations

from typing import Optional, Sequence


class EventExtractionError(Exception):
    """Base error for event schema extraction.

    Attributes:
        message: Description of the failure
        event_name: Name of the event prop being extracted, filled in by the
            assembler when the failure is raised below it
    """

    def __init__(self, message: str, event_name: Optional[str] = None):
        self.message = message
        self.event_name = event_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.event_name is None or f'"{self.event_name}"' in self.message:
            return self.message
        return f'{self.message} (in event "{self.event_name}")'


class UnsupportedEventPropertyTypeError(EventExtractionError):
    """A payload property has a type outside the supported set."""

    def __init__(self, property_name: str, kind: str):
        self.property_name = property_name
        self.kind = kind
        super().__init__(f'Unable to determine event type for "{property_name}": {kind}')


class UnresolvedEventArgumentsError(EventExtractionError):
    """The dispatch kind or the argument list of an event could not be resolved."""

    def __init__(self, event_name: str):
        super().__init__(
            f'Unable to determine event arguments for "{event_name}"',
            event_name=event_name,
        )


class EventTypeResolutionError(EventExtractionError):
    """A handler or payload node has a shape the resolver can't walk."""


class AliasCycleError(EventTypeResolutionError):
    """Alias resolution looped back on itself or nested too deeply."""

    def __init__(self, chain: Sequence[str], reason: str = "cyclic type alias"):
        self.chain = tuple(chain)
        super().__init__(f"{reason}: {' -> '.join(self.chain)}")
