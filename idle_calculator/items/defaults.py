"""
Default content of a new game: the starting items and the modifier catalog.
"""

from idle_calculator.core.constants import ItemType, UpgradeStrategy
from idle_calculator.items.item import Item, ItemStats

DEFAULT_ITEMS: tuple[Item, ...] = (
    Item(
        item_type=ItemType.SKILL,
        name="Healing",
        description="Heals for {heal_scaled} ({heal} + 1% per level) plus the Heal stat",
        stats=ItemStats(heal=10),
        strategy=UpgradeStrategy.USE,
    ),
    Item(
        item_type=ItemType.SKILL,
        name="Heavy Strike",
        description="Hits for {attack_scaled} ({attack} + 1% per level) plus the Attack stat",
        stats=ItemStats(attack=10),
        strategy=UpgradeStrategy.USE,
    ),
    Item(
        item_type=ItemType.WEAPON,
        name="Staff",
        description="Attack +{attack} (+1% per 100 levels), Healing +{heal} (+1% per 100 levels)",
        stats=ItemStats(attack=10, heal=5),
        strategy=UpgradeStrategy.USE_ANY,
    ),
)

DEFAULT_MODIFIERS: tuple[Item, ...] = (
    Item(
        item_type=ItemType.MODIFIER,
        name="Targets",
        description="Extra target +{target_count} (+1 per 100 levels)",
        stats=ItemStats(target_count=1),
        strategy=UpgradeStrategy.WIN,
    ),
    Item(
        item_type=ItemType.MODIFIER,
        name="Power",
        description="Raises skill power by {power_scaled}% ({power} + 1% per level)",
        stats=ItemStats(power=10),
        strategy=UpgradeStrategy.WIN,
    ),
    Item(
        item_type=ItemType.MODIFIER,
        name="Repeat",
        description="{repeat_chance_scaled}% chance ({repeat_chance} + 1% per level) to use the skill again",
        stats=ItemStats(repeat_chance=10),
        strategy=UpgradeStrategy.WIN,
    ),
)
