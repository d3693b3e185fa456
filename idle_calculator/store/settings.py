"""
Global tunable settings of the calculator.
"""

from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """
    Numeric parameters edited from the settings form.

    All values are non-negative ints. Fields accept both their Python names
    and the camelCase names used by the settings form (e.g.
    `effective_max_level` or `effectiveMaxLevel`).
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    effective_max_level: int = Field(
        default=100,
        ge=0,
        alias="effectiveMaxLevel",
        description="Level at which the displayed level-up chance stops dropping.",
    )
    min_chance: int = Field(
        default=1,
        ge=0,
        alias="minChance",
        description="Reserved minimum level-up chance. Not applied to rolls.",
    )
    modifier_step_level: int = Field(
        default=100,
        ge=0,
        alias="modifierStepLevel",
        description="Level spacing between two modifier unlocks.",
    )
    time: int = Field(
        default=60,
        ge=0,
        description="Seconds attributed to one battle.",
    )

    @classmethod
    def resolve_key(cls, key: str) -> str | None:
        """
        Maps a setting name or its form alias to the field name.

        Args:
            key (str): Field name or alias.

        Returns:
            str | None: The field name, or None if the key is unknown.

        """
        for name, field in cls.model_fields.items():
            if key == name or key == field.alias:
                return name
        return None
