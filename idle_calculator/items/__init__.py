"""
Items module for the idle calculator.

This module contains the item models, the panel helpers computed from item
levels and the default content of a new game.
"""

from .defaults import DEFAULT_ITEMS, DEFAULT_MODIFIERS
from .item import (
    Item,
    ItemStats,
    display_chance,
    is_modifier_active,
    modifier_unlock_level,
)

__all__ = [
    "DEFAULT_ITEMS",
    "DEFAULT_MODIFIERS",
    "Item",
    "ItemStats",
    "display_chance",
    "is_modifier_active",
    "modifier_unlock_level",
]
