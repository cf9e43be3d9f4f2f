"""Command senders and bind eligibility (host-free)"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from soulbound.core.item.models import ItemStack, is_empty_slot
from soulbound.core.item.soulbinding import is_soulbound

WILDCARD_PERMISSION = "*"


class SenderKind(str, Enum):
    PLAYER = "player"
    CONSOLE = "console"
    COMMAND_BLOCK = "command_block"


@dataclass
class CommandSender:
    """Whoever ran a command. Only players hold items."""

    name: str
    kind: SenderKind
    permissions: frozenset[str] = frozenset()
    held_item: Optional[ItemStack] = None

    @property
    def is_player(self) -> bool:
        return self.kind == SenderKind.PLAYER

    def has_permission(self, node: str) -> bool:
        return node in self.permissions or WILDCARD_PERMISSION in self.permissions


@dataclass
class CommandSpec:
    """A command declared by a module"""

    name: str  # label typed by the sender, e.g. "soulbound"
    module_name: str
    description: str = ""
    permission: Optional[str] = None
    usage: str = ""


@dataclass
class CommandResult:
    """Outcome of a command. Rejections are results, not exceptions."""

    success: bool
    message: str
    item: Optional[ItemStack] = None
    extra: dict = field(default_factory=dict)


class BindRejection(str, Enum):
    NOT_A_PLAYER = "not_a_player"
    NO_PERMISSION = "no_permission"
    CANNOT_BIND = "cannot_bind"  # nothing held, or a stackable item
    ALREADY_SOULBOUND = "already_soulbound"


def check_bind_eligibility(
    sender: CommandSender, permission: str
) -> Optional[BindRejection]:
    """None if the sender's held item may be bound.

    Checked in order: sender kind, permission, item eligibility, existing marker.
    """
    if not sender.is_player:
        return BindRejection.NOT_A_PLAYER
    if not sender.has_permission(permission):
        return BindRejection.NO_PERMISSION

    item = sender.held_item
    if is_empty_slot(item) or item.is_stackable:
        return BindRejection.CANNOT_BIND
    if is_soulbound(item):
        return BindRejection.ALREADY_SOULBOUND
    return None
