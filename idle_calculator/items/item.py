"""
Item models for the idle calculator.

An item is a skill, a weapon or a modifier with a level that grows as
battles are won. Items are immutable: every level change produces a copy.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from idle_calculator.core.constants import ItemType, UpgradeStrategy


class ItemStats(BaseModel):
    """Base values used by the description templates of an item."""

    model_config = ConfigDict(frozen=True)

    heal: float = Field(
        default=0,
        description="Base healing done by the item.",
    )
    attack: float = Field(
        default=0,
        description="Base damage done by the item.",
    )
    target_count: float = Field(
        default=0,
        description="Number of additional targets.",
    )
    power: float = Field(
        default=0,
        description="Percentage added to the power of a skill.",
    )
    repeat_chance: float = Field(
        default=0,
        description="Percentage chance to use the skill again.",
    )


class _TemplateValues(dict):
    """Mapping that resolves unknown template names to 0."""

    def __missing__(self, key: str) -> int:
        return 0


class Item(BaseModel):
    """
    Represents a progressable skill, weapon or modifier.

    The description is a template evaluated against the current level and
    the base stats, e.g. "Heals for {heal_scaled} ({heal} + 1% per level)".
    A description without placeholders is shown as is.
    """

    model_config = ConfigDict(frozen=True)

    item_type: ItemType = Field(
        description="Whether the item is a skill, a weapon or a modifier.",
    )
    name: str = Field(
        description="The name of the item.",
    )
    description: str = Field(
        "",
        description="Description template of the item.",
    )
    stats: ItemStats = Field(
        default_factory=ItemStats,
        description="Base values used by the description template.",
    )
    level: int = Field(
        default=0,
        ge=0,
        description="Current level of the item.",
    )
    last_chance: int = Field(
        default=0,
        ge=-1,
        le=100,
        description=(
            "Roll of the latest level-up. "
            "-1 when the level was changed manually."
        ),
    )
    strategy: UpgradeStrategy = Field(
        default=UpgradeStrategy.USE,
        description="What improves the item. Only shown on the panel.",
    )
    uses: int = Field(
        default=0,
        ge=0,
        description="How many times the item was used.",
    )

    @property
    def colored_name(self) -> str:
        """Returns the item name colored by its type."""
        return self.item_type.colorize(self.name)

    def is_leveled_by_wins(self) -> bool:
        """Check if winning a battle can level up this item.

        Returns:
            bool: True for skills and weapons, False for modifiers.

        """
        return self.item_type != ItemType.MODIFIER

    def template_values(self) -> dict[str, Any]:
        """
        Builds the values available to the description template.

        Every stat is exposed by name and as `<stat>_scaled`, which adds 1%
        of the base value per level.

        Returns:
            dict[str, Any]: The template values, unknown names resolve to 0.

        """
        values = _TemplateValues(level=self.level)
        for stat_name, base in self.stats.model_dump().items():
            values[stat_name] = _compact(base)
            values[f"{stat_name}_scaled"] = _compact(
                round(base * (1 + self.level / 100), 1)
            )
        return values

    def describe(self) -> str:
        """Evaluates the description template for the current level.

        A description that is not a valid template, e.g. with a stray brace,
        is returned as is.
        """
        try:
            return self.description.format_map(self.template_values())
        except (ValueError, IndexError, KeyError, AttributeError):
            return self.description

    def with_level(self, level_delta: int, last_chance: int) -> "Item":
        """
        Returns a copy with the level raised by level_delta.

        Args:
            level_delta (int): Levels to add.
            last_chance (int): Roll that produced the change, or -1.

        Returns:
            Item: The updated copy, this item is left untouched.

        Raises:
            ValidationError: If the new level or last_chance is out of range.

        """
        return self.model_validate(
            {
                **self.model_dump(),
                "level": self.level + level_delta,
                "last_chance": last_chance,
            }
        )


def _compact(value: float) -> float | int:
    return int(value) if float(value).is_integer() else value


def display_chance(level: int, effective_max_level: int) -> int:
    """
    Computes the level-up chance shown on the panel.

    The chance drops by one point per level and stops dropping once the
    level reaches effective_max_level - 1.

    Args:
        level (int): Current item level.
        effective_max_level (int): Level at which the chance saturates.

    Returns:
        int: The displayed chance in percent, between 0 and 100.

    """
    cap = max(effective_max_level - 1, 0)
    return max(0, min(100, 100 - min(level, cap)))


def modifier_unlock_level(modifier_index: int, step_level: int) -> int:
    """Returns the item level at which the modifier at modifier_index unlocks."""
    return (modifier_index + 1) * step_level


def is_modifier_active(item_level: int, modifier_index: int, step_level: int) -> bool:
    """
    Check if a modifier works for an item of the given level.

    Modifiers unlock one after the other, every step_level levels.

    Args:
        item_level (int): Level of the item carrying the modifier.
        modifier_index (int): Position of the modifier in the catalog.
        step_level (int): Level spacing between two modifiers.

    Returns:
        bool: True if the modifier is active.

    """
    return item_level + 1 > modifier_unlock_level(modifier_index, step_level)
