"""
Bone Tag Registry

Maps bone name tokens to tags and parses raw bone names.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, Mapping, Optional

from .bone_tag import BUILTIN_TAGS, BoneTag

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BoneName:
    """
    Parsed bone identifier.

    Identity is ``(name, raw_name)``; the tag set does not take part in
    equality or hashing.
    """

    tags: FrozenSet[BoneTag] = field(compare=False)
    name: str
    raw_name: str

    @classmethod
    def untagged(cls, raw_name: str) -> "BoneName":
        return cls(frozenset(), raw_name, raw_name)

    def has_tag(self, tag: BoneTag) -> bool:
        return tag in self.tags

    def __str__(self):
        return self.raw_name


class BoneTagRegistry:
    """
    Registry of bone tags.

    Readers work on an immutable snapshot and never take a lock; writers
    are serialised and publish a fresh snapshot, so concurrent parses do
    not block each other.
    """

    def __init__(self, tags: Iterable[BoneTag] = ()):
        self._write_lock = threading.Lock()
        self._tags: Mapping[str, BoneTag] = MappingProxyType({})
        self._lookup: Mapping[str, BoneTag] = MappingProxyType({})
        for tag in tags:
            self.register(tag)

    def register(self, tag: BoneTag):
        """Insert or overwrite a tag by its canonical name."""
        with self._write_lock:
            tags = dict(self._tags)
            if tag.name in tags:
                logger.debug("Overwriting bone tag %s", tag.name)
            tags[tag.name] = tag

            lookup: Dict[str, BoneTag] = {}
            for registered in tags.values():
                for alias in registered.tags:
                    lookup[alias] = registered
            # Canonical names take priority over aliases
            for name, registered in tags.items():
                lookup[name] = registered

            self._tags = MappingProxyType(tags)
            self._lookup = MappingProxyType(lookup)

    def get(self, name: str) -> Optional[BoneTag]:
        """Find a tag by canonical name or alias."""
        return self._lookup.get(name)

    def parse(self, raw_name: str) -> BoneName:
        """
        Split a raw bone name into its tags and base name.

        Leading tokens recognised as tags are consumed; the base name is
        whatever follows the first unrecognised token. A name made only of
        tags keeps the full raw string as its base name.

        Args:
            raw_name: Bone name as written in the model document

        Returns:
            Parsed BoneName
        """
        tokens = raw_name.split("_")
        if len(tokens) < 2:
            return BoneName.untagged(raw_name)

        lookup = self._lookup
        found = set()
        consumed = 0
        for token in tokens:
            tag = lookup.get(token)
            if tag is None:
                return BoneName(frozenset(found), "_".join(tokens[consumed:]), raw_name)
            found.add(tag)
            consumed += 1
        return BoneName(frozenset(found), raw_name, raw_name)

    @property
    def tags(self) -> Mapping[str, BoneTag]:
        return self._tags

    def __len__(self):
        return len(self._tags)

    def __contains__(self, name: str):
        return name in self._lookup

    def __repr__(self):
        return f"BoneTagRegistry(tags={sorted(self._tags)})"


_default_registry: Optional[BoneTagRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> BoneTagRegistry:
    """Registry holding the built-in tags, created on first use."""
    global _default_registry
    if _default_registry is None:
        with _default_lock:
            if _default_registry is None:
                _default_registry = BoneTagRegistry(BUILTIN_TAGS)
    return _default_registry
