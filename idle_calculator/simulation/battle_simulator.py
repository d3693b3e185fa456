"""
Battle simulator of the calculator.

Turns a number of won battles into store mutations. Every win advances the
battle counter and gives each skill and weapon a chance to level up.
"""

import random
from dataclasses import dataclass

from catchery import log_warning

from idle_calculator.core.constants import (
    GUARANTEED_ROLL,
    MANUAL_CHANCE,
    MANUAL_LEVEL_BONUS,
    ROLL_MAX,
    ROLL_MIN,
)
from idle_calculator.core.error_handling import (
    ErrorKind,
    is_valid_index,
    require_non_negative_int,
)
from idle_calculator.core.logging import log_debug
from idle_calculator.store import GameStore


@dataclass(frozen=True)
class LevelUpResult:
    """Outcome of one level-up attempt."""

    roll: int
    success: bool


def level_up_succeeds(roll: int, level: int) -> bool:
    """
    Decides whether a roll levels up an item.

    A roll of 99 or 100 always succeeds. Below that the roll must reach the
    current level, so the chance is (101 - level) / 101 until level 99 and
    stays at 2 / 101 from there on.

    Args:
        roll (int): Roll between 0 and 100.
        level (int): Current level of the item.

    Returns:
        bool: True if the item levels up.

    """
    return roll >= GUARANTEED_ROLL or roll >= level


def format_history_line(
    item_name: str, previous_level: int, delta: int, roll: int, battle_count: int
) -> str:
    """Builds the history entry of a level change."""
    return (
        f"Level {item_name} {previous_level} increased by {delta} "
        f"with chance ({roll}) in battle {battle_count}"
    )


class BattleSimulator:
    """Applies won battles and level-up rolls to a store."""

    def __init__(self, store: GameStore, rng: random.Random | None = None):
        """Initialize the simulator.

        Args:
            store (GameStore): The store to mutate.
            rng (random.Random | None): Source of rolls. A fresh, unseeded
                generator is used when omitted.

        """
        self.store: GameStore = store
        self.rng: random.Random = rng or random.Random()

    def simulate_wins(self, count: int = 1) -> None:
        """
        Simulates `count` won battles.

        For each win the battle counter goes up by one, then every skill and
        weapon rolls for a level-up in list order. Modifiers are not rolled.

        Args:
            count (int): Number of wins. 0 does nothing.

        Raises:
            ValueError: If count is negative or not an integer.

        """
        require_non_negative_int(count, "count", {"context": "simulate_wins"})
        if count == 0:
            return
        with self.store.lock:
            for _ in range(count):
                self.store.increase_battles_count(1)
                for index, item in enumerate(self.store.items):
                    if item.is_leveled_by_wins():
                        self.roll_level_up(index, 1)

    def roll_level_up(self, index: int, levels_to_add: int = 1) -> LevelUpResult | None:
        """
        Rolls for a level-up of the item at index.

        On success the history gets a new line and the item gains
        levels_to_add levels; on failure nothing changes.

        Args:
            index (int): Position of the item in the store.
            levels_to_add (int): Levels gained on success.

        Returns:
            LevelUpResult | None: The roll and its outcome, None if the
            index does not address an item.

        Raises:
            ValueError: If levels_to_add is negative or not an integer.

        """
        require_non_negative_int(
            levels_to_add, "levels_to_add", {"context": "roll_level_up"}
        )
        with self.store.lock:
            items = self.store.items
            if not is_valid_index(index, len(items)):
                log_warning(
                    f"Cannot roll a level-up for invalid item index {index}",
                    {
                        "kind": ErrorKind.INVALID_INDEX.value,
                        "index": index,
                        "context": "roll_level_up",
                    },
                )
                return None
            item = items[index]
            roll = self.rng.randint(ROLL_MIN, ROLL_MAX)
            if not level_up_succeeds(roll, item.level):
                return LevelUpResult(roll=roll, success=False)
            self._level_up(index, levels_to_add, roll)
            log_debug(
                f"{item.name} leveled up",
                {
                    "roll": roll,
                    "level": item.level + levels_to_add,
                    "battle": self.store.battles_count,
                },
            )
            return LevelUpResult(roll=roll, success=True)

    def bump_item_level(self, index: int, levels: int = MANUAL_LEVEL_BONUS) -> None:
        """
        Raises the level of an item without rolling.

        The history records the change with a roll of -1.

        Args:
            index (int): Position of the item in the store.
            levels (int): Levels to add.

        Raises:
            ValueError: If levels is negative or not an integer.

        """
        require_non_negative_int(levels, "levels", {"context": "bump_item_level"})
        with self.store.lock:
            if not is_valid_index(index, len(self.store.items)):
                log_warning(
                    f"Cannot bump invalid item index {index}",
                    {
                        "kind": ErrorKind.INVALID_INDEX.value,
                        "index": index,
                        "context": "bump_item_level",
                    },
                )
                return
            self._level_up(index, levels, MANUAL_CHANCE)

    def _level_up(self, index: int, levels: int, roll: int) -> None:
        item = self.store.items[index]
        self.store.append_history(
            format_history_line(
                item.name, item.level, levels, roll, self.store.battles_count
            )
        )
        self.store.update_item_level(index, levels, roll)
