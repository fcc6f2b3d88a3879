"""
Bone Tags

Semantic prefix tokens recognised in bone names.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Tuple

# Hook a host uses to attach an item to a tagged bone
BoneItemMapper = Callable[..., object]


@dataclass(frozen=True)
class BoneTag:
    """
    Immutable bone tag constant.

    Attributes:
        name: Canonical tag name (registry key)
        tags: Short aliases accepted in bone names
        item_mapper: Optional hook for host-side item mapping
    """

    name: str
    tags: Tuple[str, ...] = ()
    item_mapper: Optional[BoneItemMapper] = None

    def __repr__(self):
        return f"BoneTag('{self.name}')"


HEAD = BoneTag("head", ("h",))
HEAD_WITH_CHILDREN = BoneTag("head_with_children", ("hi",))
HITBOX = BoneTag("hitbox", ("b", "ob"))
SEAT = BoneTag("seat", ("p",))
SUB_SEAT = BoneTag("sub_seat", ("sp",))

BUILTIN_TAGS = (HEAD, HEAD_WITH_CHILDREN, HITBOX, SEAT, SUB_SEAT)
