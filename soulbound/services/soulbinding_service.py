"""Soulbinding Service — core rules + EventBus notifications

Takes plain snapshots, returns plain outcomes. Applying an outcome to the host
(removing the entity, rewriting the inventory, sending the message) is the
module's job.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from soulbound.core.commands import (
    BindRejection,
    CommandResult,
    CommandSender,
    check_bind_eligibility,
)
from soulbound.core.event_bus import EventBus, GameEvent
from soulbound.core.event_types import EventTypes
from soulbound.core.item.death import (
    DeathPurge,
    DropInventoryDeath,
    PlayerDeath,
    purge_soulbound,
)
from soulbound.core.item.models import ItemDrop
from soulbound.core.item.soulbinding import is_soulbound, soul_bind
from soulbound.core.logging import get_logger
from soulbound.core.messages import Messages, render

logger = get_logger(__name__)

SOURCE = "soulbinding_service"

_REJECTION_MESSAGES = {
    BindRejection.NOT_A_PLAYER: Messages.NOT_A_PLAYER,
    BindRejection.NO_PERMISSION: Messages.NO_PERMISSION,
    BindRejection.CANNOT_BIND: Messages.CANNOT_BIND,
    BindRejection.ALREADY_SOULBOUND: Messages.ALREADY_SOULBOUND,
}


@dataclass(frozen=True)
class DropOutcome:
    """remove_entity=False means the drop is left alone and nobody is told."""

    remove_entity: bool
    entity_id: str
    player_id: str
    message: Optional[str] = None


@dataclass(frozen=True)
class DeathOutcome:
    player_id: str
    keep_inventory: bool
    purge: DeathPurge
    message: str

    @property
    def destroyed(self) -> int:
        return self.purge.destroyed


class SoulbindingService:
    """Bind command + drop/death enforcement"""

    def __init__(
        self,
        event_bus: EventBus,
        permission: str = "soulbound.cando",
        colors: bool = True,
    ):
        self._bus = event_bus
        self._permission = permission
        self._colors = colors

    @property
    def permission(self) -> str:
        return self._permission

    # === Enforcement ===

    def handle_drop(self, drop: ItemDrop) -> DropOutcome:
        if not is_soulbound(drop.item):
            return DropOutcome(
                remove_entity=False,
                entity_id=drop.entity_id,
                player_id=drop.player_id,
            )

        logger.info(
            "Destroyed dropped soulbound %s (player=%s, entity=%s)",
            drop.item.material,
            drop.player_id,
            drop.entity_id,
        )
        self._emit_destroyed(drop.player_id, 1, cause="drop")
        return DropOutcome(
            remove_entity=True,
            entity_id=drop.entity_id,
            player_id=drop.player_id,
            message=render(Messages.DROP_DESTROYED, self._colors),
        )

    def handle_death(self, death: PlayerDeath) -> DeathOutcome:
        """Purge bound items and build the single summary notice.

        The notice is sent even when nothing was destroyed.
        """
        purge = purge_soulbound(death)
        keep_inventory = not isinstance(death, DropInventoryDeath)

        if purge.destroyed:
            logger.info(
                "Destroyed %d soulbound items on death (player=%s, keep_inventory=%s)",
                purge.destroyed,
                death.player_id,
                keep_inventory,
            )
            self._emit_destroyed(death.player_id, purge.destroyed, cause="death")

        return DeathOutcome(
            player_id=death.player_id,
            keep_inventory=keep_inventory,
            purge=purge,
            message=render(Messages.DEATH_DESTROYED, self._colors, count=purge.destroyed),
        )

    # === Command ===

    def bind_held_item(self, sender: CommandSender) -> CommandResult:
        """Bind the sender's held item, or explain why not."""
        rejection = check_bind_eligibility(sender, self._permission)
        if rejection is not None:
            logger.debug("Bind rejected for %s: %s", sender.name, rejection.value)
            return CommandResult(
                success=False,
                message=render(_REJECTION_MESSAGES[rejection], self._colors),
                item=sender.held_item,
                extra={"rejection": rejection.value},
            )

        item = soul_bind(sender.held_item)
        logger.info("Soulbound %s for %s", item.material, sender.name)
        self._bus.emit(
            GameEvent(
                event_type=EventTypes.ITEM_SOULBOUND,
                data={"player_id": sender.name, "material": item.material},
                source=SOURCE,
            )
        )
        return CommandResult(
            success=True,
            message=render(Messages.SOULBOUND, self._colors),
            item=item,
        )

    def _emit_destroyed(self, player_id: str, count: int, cause: str) -> None:
        self._bus.emit(
            GameEvent(
                event_type=EventTypes.SOULBOUND_ITEMS_DESTROYED,
                data={"player_id": player_id, "count": count, "cause": cause},
                source=SOURCE,
            )
        )
