"""Item value types (host-free)

The host owns the real item objects. These are the snapshots the host adapter
hands to the rule engine and receives back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

AIR = "air"  # the host's "no item" material


@dataclass
class ItemMeta:
    """Per-item metadata bag. Lore is an ordered list of display lines."""

    display_name: Optional[str] = None
    lore: list[str] = field(default_factory=list)

    def has_lore(self) -> bool:
        return bool(self.lore)


@dataclass
class ItemStack:
    """One inventory slot's worth of an item."""

    material: str  # "diamond_sword", "cobblestone", ...
    amount: int = 1
    max_stack_size: int = 64  # 1 = unique item (armor, weapons, tools)
    meta: Optional[ItemMeta] = None

    @property
    def is_empty(self) -> bool:
        return self.material == AIR or self.amount <= 0

    @property
    def is_stackable(self) -> bool:
        return self.max_stack_size > 1

    def has_meta(self) -> bool:
        return self.meta is not None


def is_empty_slot(item: Optional[ItemStack]) -> bool:
    """None and air both count as an empty slot."""
    return item is None or item.is_empty


@dataclass
class ItemDrop:
    """A player dropped an item; the host spawned it as a world entity."""

    player_id: str
    entity_id: str  # the dropped world entity
    item: ItemStack
