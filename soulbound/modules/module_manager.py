"""Module manager - registration, enable/disable, dependency checks, command routing"""

from typing import Dict, List, Optional, Sequence

from soulbound.core.commands import CommandResult, CommandSender, CommandSpec
from soulbound.core.event_bus import EventBus
from soulbound.core.logging import get_logger
from soulbound.modules.base import GameModule

logger = get_logger(__name__)


class ModuleManager:
    """Module toggles and lifecycle"""

    def __init__(self, event_bus: Optional[EventBus] = None) -> None:
        self._modules: Dict[str, GameModule] = {}
        self._event_bus: EventBus = event_bus if event_bus is not None else EventBus()

    @property
    def event_bus(self) -> EventBus:
        """EventBus shared by the modules and the host adapter"""
        return self._event_bus

    @property
    def modules(self) -> Dict[str, GameModule]:
        """All registered modules (read-only copy)"""
        return dict(self._modules)

    def get_enabled_modules(self) -> List[GameModule]:
        return [m for m in self._modules.values() if m.enabled]

    def register(self, module: GameModule) -> None:
        """Register a module. A duplicate name logs a warning and overwrites."""
        if module.name in self._modules:
            logger.warning(f"Overwriting module: {module.name}")
        self._modules[module.name] = module
        logger.info(f"Module registered: {module.name}")

    def enable(self, name: str) -> bool:
        """Enable a module. Returns False if dependencies are not met.

        1. module must be registered
        2. every dependency must be registered and enabled
        3. on_enable()
        4. enabled = True
        """
        module = self._modules.get(name)
        if not module:
            logger.error(f"Module not registered: {name}")
            return False

        if module.enabled:
            logger.debug(f"Already enabled: {name}")
            return True

        for dep in module.dependencies:
            dep_module = self._modules.get(dep)
            if not dep_module:
                logger.warning(f"Missing dependency: {name} requires {dep}")
                return False
            if not dep_module.enabled:
                logger.warning(f"Dependency disabled: {name} requires {dep} (not enabled)")
                return False

        module.on_enable()
        module.enabled = True
        logger.info(f"Module enabled: {name}")
        return True

    def disable(self, name: str) -> bool:
        """Disable a module, disabling its dependants first (cascade).

        Returns:
            False if the module is not registered, True otherwise
        """
        module = self._modules.get(name)
        if not module:
            logger.error(f"Module not registered: {name}")
            return False

        if not module.enabled:
            logger.debug(f"Already disabled: {name}")
            return True

        for other in self._modules.values():
            if name in other.dependencies and other.enabled:
                logger.info(f"Cascade disable: {other.name} (depends on {name})")
                self.disable(other.name)

        module.on_disable()
        module.enabled = False
        logger.info(f"Module disabled: {name}")
        return True

    def get_all_commands(self) -> List[CommandSpec]:
        """Commands of every enabled module"""
        commands: List[CommandSpec] = []
        for module in self._modules.values():
            if module.enabled:
                commands.extend(module.get_commands())
        return commands

    def dispatch_command(
        self, sender: CommandSender, label: str, args: Sequence[str] = ()
    ) -> Optional[CommandResult]:
        """Route a command label to the enabled module that declared it.

        Returns None when no enabled module knows the label.
        """
        label = label.lower()
        for module in self._modules.values():
            if not module.enabled:
                continue
            if any(spec.name == label for spec in module.get_commands()):
                return module.on_command(sender, label, args)

        logger.debug(f"Unknown command: {label} (sender={sender.name})")
        return None

    def is_enabled(self, name: str) -> bool:
        module = self._modules.get(name)
        return module.enabled if module else False
