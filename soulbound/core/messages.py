"""Player-facing message templates

Templates use the host's legacy chat colour codes ("§" + code).
"""

import re


class ChatColor:
    RED = "§c"
    LIGHT_PURPLE = "§d"
    RESET = "§r"


_COLOR_CODE = re.compile(r"§[0-9a-fk-or]", re.IGNORECASE)


class Messages:
    """Message template constants"""

    # command
    SOULBOUND = ChatColor.LIGHT_PURPLE + "Soulbound that item!"
    ALREADY_SOULBOUND = ChatColor.RED + "That item is already soulbound."
    CANNOT_BIND = ChatColor.RED + "Cannot soul bind that item."
    NOT_A_PLAYER = ChatColor.RED + "You must be a player to use this command."
    NO_PERMISSION = ChatColor.RED + "You do not have permission to soul bind items."

    # enforcement
    DROP_DESTROYED = ChatColor.LIGHT_PURPLE + "Destroyed that soulbound item!"
    DEATH_DESTROYED = ChatColor.LIGHT_PURPLE + "Destroyed {count} soulbound items!"


def strip_colors(text: str) -> str:
    return _COLOR_CODE.sub("", text)


def render(template: str, colors: bool = True, **params) -> str:
    """Fill a template. colors=False strips colour codes."""
    text = template.format(**params) if params else template
    return text if colors else strip_colors(text)
