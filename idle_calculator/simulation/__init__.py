"""
Simulation module for the idle calculator.

This module contains the battle simulator, which applies wins and level-up
rolls to the store, and the auto battler that wins one battle per tick.
"""

from .auto_battle import AutoBattler
from .battle_simulator import (
    BattleSimulator,
    LevelUpResult,
    format_history_line,
    level_up_succeeds,
)

__all__ = [
    "AutoBattler",
    "BattleSimulator",
    "LevelUpResult",
    "format_history_line",
    "level_up_succeeds",
]
