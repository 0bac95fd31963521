"""Per-session record of names already emitted, by entity type."""

from collections import defaultdict
from typing import DefaultDict, Set

from .models import EntityType


class DuplicateTracker:
    """Tracks emitted names separately for each entity type."""

    def __init__(self):
        self._names: DefaultDict[EntityType, Set[str]] = defaultdict(set)

    def is_unique(self, entity_type: EntityType, name: str) -> bool:
        """Return True if ``name`` has not been tracked for ``entity_type``."""
        return name not in self._names.get(entity_type, ())

    def track(self, entity_type: EntityType, name: str) -> None:
        """Record ``name`` for ``entity_type``; tracking twice is a no-op."""
        self._names[entity_type].add(name)

    def clear(self) -> None:
        self._names.clear()

    def tracked_count(self, entity_type: EntityType) -> int:
        return len(self._names.get(entity_type, ()))
