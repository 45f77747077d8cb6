"""Per-object cache of GPU bind groups keyed by object version."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterable, Optional, TypeVar

B = TypeVar("B")


@dataclass(frozen=True)
class ObjectId:
    """One version of one rendered object."""

    id: int
    version: int


@dataclass(frozen=True)
class CacheStats:
    bind_groups_count: int
    objects_count: int


@dataclass
class SceneCache(Generic[B]):
    """Keeps at most the current bind group of each object."""

    _bind_groups: dict[ObjectId, B] = field(default_factory=dict)
    _object_versions: dict[int, int] = field(default_factory=dict)

    def is_dirty(self, object_id: int, version: int) -> bool:
        """True when the object is unknown or cached at another version."""
        cached = self._object_versions.get(object_id)
        return cached is None or cached != version

    def cache_bind_group(self, object_id: int, version: int, bind_group: B) -> None:
        """Store a bind group, dropping the one for the object's previous version."""
        old_version = self._object_versions.get(object_id)
        if old_version is not None:
            self._bind_groups.pop(ObjectId(object_id, old_version), None)
        self._bind_groups[ObjectId(object_id, version)] = bind_group
        self._object_versions[object_id] = version

    def get_bind_group(self, object_id: int, version: int) -> Optional[B]:
        return self._bind_groups.get(ObjectId(object_id, version))

    def cleanup_old_entries(self, active_objects: Iterable[tuple[int, int]]) -> None:
        """Keep only entries matching the given (object id, version) pairs."""
        active: dict[int, int] = dict(active_objects)
        self._bind_groups = {
            key: group
            for key, group in self._bind_groups.items()
            if active.get(key.id) == key.version
        }
        self._object_versions = active

    def stats(self) -> CacheStats:
        return CacheStats(len(self._bind_groups), len(self._object_versions))