"""
Utilities module for the idle calculator.

Provides console printing with rich formatting and small formatting helpers
shared by the store and the terminal panel.
"""

from typing import Any

from rich.console import Console
from rich.rule import Rule

from idle_calculator.core.constants import HOURS_PER_DAY

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def format_elapsed_time(battles_count: int, seconds_per_battle: int) -> str:
    """
    Formats the in-game time spent on the given number of battles.

    Args:
        battles_count (int): Number of battles fought.
        seconds_per_battle (int): Seconds attributed to one battle.

    Returns:
        str: Hours with one decimal ("2.0 h."), or days once above 24 hours.

    """
    hours = battles_count * seconds_per_battle / 60 / 60
    if hours > HOURS_PER_DAY:
        return f"{hours / HOURS_PER_DAY:.1f} days"
    return f"{hours:.1f} h."


def make_bar(current: int, maximum: int, length: int = 10, color: str = "white") -> str:
    """
    Creates a visual progress bar representation.

    Args:
        current (int): The current value.
        maximum (int): The maximum value.
        length (int): The length of the bar in characters. Defaults to 10.
        color (str): The color for the filled portion. Defaults to "white".

    Returns:
        str: A formatted progress bar string.

    """
    if maximum <= 0:
        filled = 0
    else:
        filled = max(0, min(length, int((current / maximum) * length)))
    empty = length - filled
    bar = f"[{color}]" + "▮" * filled
    if empty > 0:
        bar += "[dim white]" + "▯" * empty + "[/]"
    bar += "[/]"
    return bar
