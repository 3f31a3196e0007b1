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
"""Configuration for event schema extraction."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ExtractionConfig:
    """Knobs for alias resolution during extraction.

    Attributes:
        max_alias_depth: Maximum number of alias dereferences while resolving
            one event argument. Exceeding it raises AliasCycleError.

        detect_alias_cycles: Track visited alias names and reject an alias
            chain as soon as it revisits a name.

        warn_on_discarded_union_members: Log a warning when optional-union
            unwrapping keeps the first non-nullish member and drops others.

    Example:
        >>> config = ExtractionConfig(max_alias_depth=16)
        >>> get_events(members, types, config)
    """

    max_alias_depth: int = 64
    detect_alias_cycles: bool = True
    warn_on_discarded_union_members: bool = True

    def __post_init__(self) -> None:
        if self.max_alias_depth < 1:
            raise ValueError(f"max_alias_depth must be positive, got {self.max_alias_depth}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "max_alias_depth": self.max_alias_depth,
            "detect_alias_cycles": self.detect_alias_cycles,
            "warn_on_discarded_union_members": self.warn_on_discarded_union_members,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "ExtractionConfig":
        """Create from dictionary."""
        return cls(
            max_alias_depth=d.get("max_alias_depth", 64),
            detect_alias_cycles=d.get("detect_alias_cycles", True),
            warn_on_discarded_union_members=d.get("warn_on_discarded_union_members", True),
        )


# Default configuration singleton
DEFAULT_CONFIG = ExtractionConfig()
