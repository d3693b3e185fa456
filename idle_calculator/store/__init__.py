"""
State store module for the idle calculator.

This module contains the settings record and the store that owns every piece
of simulation state.
"""

from .game_store import GameStore, get_store, init_store
from .settings import Settings

__all__ = ["GameStore", "Settings", "get_store", "init_store"]
