"""
Constants and enumerations for the idle calculator.

Defines the item types, upgrade strategies, roll bounds and the other
fixed values shared by the store, the simulator and the terminal panel.
"""

from enum import Enum

# Bounds of a level-up roll, both inclusive (101 equally likely outcomes).
ROLL_MIN = 0
ROLL_MAX = 100

# Rolls at or above this value always level up, whatever the item level.
GUARANTEED_ROLL = 99

# Value stored in last_chance when the level was changed without a roll.
MANUAL_CHANCE = -1

# Levels granted by the manual override button.
MANUAL_LEVEL_BONUS = 25

# Win batches offered by the panel.
WIN_BATCHES = (1, 10, 100, 1000, 5000)

# Seconds between two auto-battle ticks.
AUTO_BATTLE_INTERVAL = 0.05

# Elapsed time switches from hours to days above this many hours.
HOURS_PER_DAY = 24


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().replace("_", " ").capitalize()


class ItemType(NiceEnum):
    """Defines the kind of progressable item."""

    SKILL = "SKILL"
    WEAPON = "WEAPON"
    MODIFIER = "MODIFIER"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this item type."""
        return {
            ItemType.SKILL: "✨",
            ItemType.WEAPON: "🗡️",
            ItemType.MODIFIER: "🔧",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this item type."""
        return {
            ItemType.SKILL: "bold cyan",
            ItemType.WEAPON: "bold yellow",
            ItemType.MODIFIER: "bold magenta",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies item type color formatting to a message."""
        return f"[{self.color}]{message}[/]"


class UpgradeStrategy(NiceEnum):
    """Defines what improves an item. Only shown on the panel."""

    USE = "USE"
    WIN = "WIN"
    USE_ANY = "USE_ANY"

    @property
    def label(self) -> str:
        """Returns the panel text describing when the item improves."""
        return {
            UpgradeStrategy.USE: "on use",
            UpgradeStrategy.WIN: "on win",
            UpgradeStrategy.USE_ANY: "on use and attack",
        }[self]
