"""Shared test fixtures."""

from unittest.mock import MagicMock

import pytest

from soulbound.core.commands import CommandSender, SenderKind
from soulbound.core.event_bus import EventBus
from soulbound.core.item.models import ItemMeta, ItemStack
from soulbound.services.soulbinding_service import SoulbindingService


def _make_sword(lore=None, material: str = "diamond_sword") -> ItemStack:
    meta = ItemMeta(lore=list(lore)) if lore is not None else None
    return ItemStack(material=material, amount=1, max_stack_size=1, meta=meta)


def _make_player(held_item=None, permissions=("soulbound.cando",), name="steve"):
    return CommandSender(
        name=name,
        kind=SenderKind.PLAYER,
        permissions=frozenset(permissions),
        held_item=held_item,
    )


@pytest.fixture()
def make_sword():
    """Factory for unique (non-stackable) items, optionally with lore."""
    return _make_sword


@pytest.fixture()
def make_player():
    """Factory for player senders holding the binding permission by default."""
    return _make_player


@pytest.fixture()
def bus() -> EventBus:
    return EventBus()


@pytest.fixture()
def service(bus) -> SoulbindingService:
    """Service with colour codes stripped so messages are easy to assert."""
    return SoulbindingService(bus, permission="soulbound.cando", colors=False)


@pytest.fixture()
def host() -> MagicMock:
    """Stand-in for the game host adapter."""
    return MagicMock()
