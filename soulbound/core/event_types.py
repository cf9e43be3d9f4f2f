"""Event type constants"""


class EventTypes:
    """Event type string constants"""

    # host adapter -> modules
    ITEM_DROPPED = "item_dropped"
    PLAYER_DIED = "player_died"

    # soulbinding service
    ITEM_SOULBOUND = "item_soulbound"
    SOULBOUND_ITEMS_DESTROYED = "soulbound_items_destroyed"
