"""
User interface module for the idle calculator.

Provides the console control panel used to drive the simulation.
"""

from .cli_interface import ControlPanel

__all__ = ["ControlPanel"]
