"""Plugin module system"""

from soulbound.modules.base import GameModule, HostAdapter
from soulbound.modules.module_manager import ModuleManager

__all__ = ["GameModule", "HostAdapter", "ModuleManager"]
