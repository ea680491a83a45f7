"""TypeRegistry: one instance per type key.

Backs both the Architecture's system/model/utility lookups and the editor
view container. Keys are class objects, so each concrete class (or the
base it was registered as) maps to exactly one stored reference.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class TypeRegistry:
    """Type-keyed store of shared instances. Last write wins."""

    def __init__(self) -> None:
        self._instances: dict[type, Any] = {}

    def register(self, instance: Any, as_type: Optional[type] = None) -> None:
        """Store ``instance`` under ``as_type`` (default: its own class).

        Re-registering a key replaces the previous reference.
        """
        key = as_type if as_type is not None else type(instance)
        if key in self._instances:
            logger.debug("Replacing registration for %s", key.__qualname__)
        self._instances[key] = instance

    def get(self, key: type[T]) -> Optional[T]:
        """Return the instance registered for ``key``, or None."""
        return self._instances.get(key)

    def keys(self) -> list[type]:
        return list(self._instances)

    def items(self) -> list[tuple[type, Any]]:
        return list(self._instances.items())

    def __contains__(self, key: object) -> bool:
        return key in self._instances

    def __len__(self) -> int:
        return len(self._instances)
