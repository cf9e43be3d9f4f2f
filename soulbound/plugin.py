"""Plugin entrypoint: wires the soulbinding rules to a host adapter."""

from typing import Optional

from soulbound.config import Settings, settings as default_settings
from soulbound.core.logging import get_logger, setup_logging
from soulbound.modules.base import HostAdapter
from soulbound.modules.module_manager import ModuleManager
from soulbound.modules.soulbound.module import SoulboundModule
from soulbound.services.soulbinding_service import SoulbindingService

logger = get_logger(__name__)


def create_plugin(
    host: HostAdapter, settings: Optional[Settings] = None
) -> ModuleManager:
    """Build and enable the soulbound module for a host.

    The host adapter then feeds events through manager.event_bus (or the
    module's on_drop/on_death) and commands through manager.dispatch_command.
    """
    if settings is None:
        settings = default_settings
    setup_logging(settings.LOG_LEVEL)

    manager = ModuleManager()
    service = SoulbindingService(
        manager.event_bus,
        permission=settings.SOULBOUND_PERMISSION,
        colors=settings.CHAT_COLORS,
    )
    module = SoulboundModule(
        service,
        host,
        manager.event_bus,
        command_name=settings.SOULBOUND_COMMAND,
    )
    manager.register(module)
    if not manager.enable(module.name):
        raise RuntimeError(f"Failed to enable module: {module.name}")

    logger.info(
        "Soulbound plugin ready (command=/%s, permission=%s)",
        settings.SOULBOUND_COMMAND,
        settings.SOULBOUND_PERMISSION,
    )
    return manager
