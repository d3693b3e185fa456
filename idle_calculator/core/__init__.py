"""
Core system module for the idle calculator.

This module contains the constants, logging setup, error handling helpers and
console utilities shared by the rest of the package.
"""

from .constants import (
    AUTO_BATTLE_INTERVAL,
    MANUAL_CHANCE,
    MANUAL_LEVEL_BONUS,
    WIN_BATCHES,
    ItemType,
    UpgradeStrategy,
)
from .error_handling import ErrorKind, normalize_setting_value
from .utils import ccapture, cprint, crule, format_elapsed_time, make_bar
