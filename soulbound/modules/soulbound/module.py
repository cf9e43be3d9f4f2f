"""SoulboundModule — GameModule interface for the soulbinding rules

The host adapter either calls on_drop / on_death / on_command directly, or
emits item_dropped / player_died on the EventBus. Either way the outcome is
applied back through the HostAdapter and also returned.
"""

import logging
from typing import List, Sequence

from soulbound.core.commands import CommandResult, CommandSender, CommandSpec
from soulbound.core.event_bus import EventBus, GameEvent
from soulbound.core.event_types import EventTypes
from soulbound.core.item.death import PlayerDeath
from soulbound.core.item.models import ItemDrop
from soulbound.modules.base import GameModule, HostAdapter
from soulbound.services.soulbinding_service import (
    DeathOutcome,
    DropOutcome,
    SoulbindingService,
)

logger = logging.getLogger(__name__)


class SoulboundModule(GameModule):
    """Soulbound item module

    Handles:
    - destroying bound items dropped into the world
    - purging bound items on player death
    - the bind command

    Dependencies: []
    """

    def __init__(
        self,
        service: SoulbindingService,
        host: HostAdapter,
        event_bus: EventBus,
        command_name: str = "soulbound",
    ) -> None:
        super().__init__()
        self._service = service
        self._host = host
        self._bus = event_bus
        self._command_name = command_name.lower()

    @property
    def name(self) -> str:
        return "soulbound"

    def on_enable(self) -> None:
        self._bus.subscribe(EventTypes.ITEM_DROPPED, self._handle_item_dropped)
        self._bus.subscribe(EventTypes.PLAYER_DIED, self._handle_player_died)

    def on_disable(self) -> None:
        self._bus.unsubscribe(EventTypes.ITEM_DROPPED, self._handle_item_dropped)
        self._bus.unsubscribe(EventTypes.PLAYER_DIED, self._handle_player_died)

    def get_commands(self) -> List[CommandSpec]:
        return [
            CommandSpec(
                name=self._command_name,
                module_name=self.name,
                description="Soul bind the item in your hand",
                permission=self._service.permission,
                usage=f"/{self._command_name}",
            )
        ]

    # === Host-facing interface ===

    def on_drop(self, drop: ItemDrop) -> DropOutcome:
        outcome = self._service.handle_drop(drop)
        if outcome.remove_entity:
            self._host.remove_entity(outcome.entity_id)
            self._host.send_message(outcome.player_id, outcome.message)
        return outcome

    def on_death(self, death: PlayerDeath) -> DeathOutcome:
        outcome = self._service.handle_death(death)
        purge = outcome.purge
        if purge.destroyed:
            if outcome.keep_inventory:
                self._host.replace_inventory(outcome.player_id, purge.inventory)
            else:
                self._host.replace_death_drops(outcome.player_id, purge.drops)
        self._host.send_message(outcome.player_id, outcome.message)
        return outcome

    def on_command(
        self, sender: CommandSender, label: str = "soulbound", args: Sequence[str] = ()
    ) -> CommandResult:
        """The bind command takes no arguments; extras are ignored."""
        if args:
            logger.debug("Ignoring arguments to /%s: %s", label, list(args))
        result = self._service.bind_held_item(sender)
        self._host.send_message(sender.name, result.message)
        return result

    # === EventBus handlers ===

    def _handle_item_dropped(self, event: GameEvent) -> None:
        self.on_drop(event.data["drop"])

    def _handle_player_died(self, event: GameEvent) -> None:
        self.on_death(event.data["death"])
