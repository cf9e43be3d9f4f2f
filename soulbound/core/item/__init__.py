"""Item rules core — pure Python, host-free"""

from .models import AIR, ItemDrop, ItemMeta, ItemStack, is_empty_slot
from .soulbinding import SOULBOUND_MARKER, is_soulbound, soul_bind
from .death import (
    DeathPurge,
    DropInventoryDeath,
    KeepInventoryDeath,
    PlayerDeath,
    death_from_host,
    purge_soulbound,
)

__all__ = [
    "AIR",
    "ItemDrop",
    "ItemMeta",
    "ItemStack",
    "is_empty_slot",
    "SOULBOUND_MARKER",
    "is_soulbound",
    "soul_bind",
    "DeathPurge",
    "DropInventoryDeath",
    "KeepInventoryDeath",
    "PlayerDeath",
    "death_from_host",
    "purge_soulbound",
]
