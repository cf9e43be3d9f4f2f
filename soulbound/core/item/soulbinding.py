"""Soulbound marker

An item is soulbound when the first line of its lore is exactly
SOULBOUND_MARKER. Existing bound items depend on this encoding, so neither the
text nor the position may change.
"""

from __future__ import annotations

import logging
from typing import Optional

from .models import ItemMeta, ItemStack

logger = logging.getLogger(__name__)

SOULBOUND_MARKER = "Soulbound"
LORE_SEPARATOR = ""


def is_soulbound(item: Optional[ItemStack]) -> bool:
    """True iff lore line 0 equals SOULBOUND_MARKER (case-sensitive, untrimmed).

    Absent item, missing metadata or empty lore -> False.
    """
    if item is None or item.meta is None or not item.meta.has_lore():
        return False
    return item.meta.lore[0] == SOULBOUND_MARKER


def soul_bind(item: ItemStack) -> ItemStack:
    """Mark the item soulbound in place and return it.

    Lore becomes [SOULBOUND_MARKER] when the item had none, otherwise
    [SOULBOUND_MARKER, "", *previous_lore].
    The caller must check is_soulbound() first; binding twice stacks markers.
    """
    meta = item.meta if item.meta is not None else ItemMeta()

    lore = [SOULBOUND_MARKER]
    if meta.has_lore():
        lore.append(LORE_SEPARATOR)
        lore.extend(meta.lore)

    meta.lore = lore
    item.meta = meta
    logger.debug("Soulbound %s (lore=%d lines)", item.material, len(lore))
    return item
