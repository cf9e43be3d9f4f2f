"""Death handling: purge soulbound items from a dying player's belongings

The host's keep-inventory rule decides which collection holds the player's
items at death, so a death arrives as one of two variants:

    KeepInventoryDeath  -> the inventory is kept; bound slots are cleared
    DropInventoryDeath  -> the inventory becomes world drops; bound entries
                           are removed from the drop list

Input snapshots are never mutated; the purge returns fresh lists.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Union

from .models import ItemStack
from .soulbinding import is_soulbound

logger = logging.getLogger(__name__)


@dataclass
class KeepInventoryDeath:
    player_id: str
    inventory: list[Optional[ItemStack]] = field(default_factory=list)


@dataclass
class DropInventoryDeath:
    player_id: str
    drops: list[ItemStack] = field(default_factory=list)


PlayerDeath = Union[KeepInventoryDeath, DropInventoryDeath]


@dataclass(frozen=True)
class DeathPurge:
    """Result of purging one death.

    Exactly one of inventory/drops is set, matching the death variant.
    """

    destroyed: int
    inventory: Optional[list[Optional[ItemStack]]] = None
    drops: Optional[list[ItemStack]] = None
    cleared_slots: tuple[int, ...] = ()


def death_from_host(
    player_id: str,
    keep_inventory: bool,
    inventory: Optional[list[Optional[ItemStack]]] = None,
    drops: Optional[list[ItemStack]] = None,
) -> PlayerDeath:
    """Build the death variant from a host that only exposes a keep-inventory flag."""
    if keep_inventory:
        return KeepInventoryDeath(player_id=player_id, inventory=list(inventory or []))
    return DropInventoryDeath(player_id=player_id, drops=list(drops or []))


def purge_soulbound(death: PlayerDeath) -> DeathPurge:
    if isinstance(death, KeepInventoryDeath):
        return _purge_inventory(death.inventory)
    if isinstance(death, DropInventoryDeath):
        return _purge_drops(death.drops)
    raise TypeError(f"Unknown death variant: {type(death).__name__}")


def _purge_inventory(inventory: list[Optional[ItemStack]]) -> DeathPurge:
    """Clear every bound slot to None. Slot positions are preserved."""
    kept: list[Optional[ItemStack]] = []
    cleared: list[int] = []
    for slot, item in enumerate(inventory):
        if is_soulbound(item):
            kept.append(None)
            cleared.append(slot)
        else:
            kept.append(item)

    return DeathPurge(
        destroyed=len(cleared),
        inventory=kept,
        cleared_slots=tuple(cleared),
    )


def _purge_drops(drops: list[ItemStack]) -> DeathPurge:
    kept = [item for item in drops if not is_soulbound(item)]
    return DeathPurge(destroyed=len(drops) - len(kept), drops=kept)
