"""
Idle Calculator package.

This package contains the modules of the idle game calculator, a simulated
character whose skills and weapons level up by chance as battles are won.
It includes the state store, the battle simulator, the auto-battle timer and
the terminal panel used to drive them.
"""

__version__ = "0.1.0"
