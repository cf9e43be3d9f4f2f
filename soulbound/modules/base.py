"""Module base interfaces"""

from abc import ABC, abstractmethod
from typing import List, Optional, Protocol, Sequence

from soulbound.core.commands import CommandResult, CommandSender, CommandSpec
from soulbound.core.item.models import ItemStack


class HostAdapter(Protocol):
    """What a module may ask of the game host.

    Implemented by the glue code living inside the real server.
    """

    def send_message(self, recipient: str, message: str) -> None: ...

    def remove_entity(self, entity_id: str) -> None: ...

    def replace_inventory(
        self, player_id: str, contents: List[Optional[ItemStack]]
    ) -> None: ...

    def replace_death_drops(self, player_id: str, drops: List[ItemStack]) -> None: ...


class GameModule(ABC):
    """Base interface for every plugin module

    Rules:
    - Modules never import each other
    - Cross-module traffic goes through the EventBus
    - Module -> Core and Module -> Service are allowed
    """

    _enabled: bool

    def __init__(self) -> None:
        self._enabled = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique module name (e.g. 'soulbound')"""
        ...

    @property
    def dependencies(self) -> List[str]:
        """Names of the modules this one requires. Defaults to none."""
        return []

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        self._enabled = value

    @abstractmethod
    def on_enable(self) -> None:
        """Subscribe handlers, acquire host resources."""
        ...

    @abstractmethod
    def on_disable(self) -> None:
        """Undo on_enable."""
        ...

    def get_commands(self) -> List[CommandSpec]:
        """Commands this module answers. Defaults to none."""
        return []

    def on_command(
        self, sender: CommandSender, label: str, args: Sequence[str]
    ) -> Optional[CommandResult]:
        """Handle one of the commands from get_commands()."""
        return None
