"""
Module for printing the panel, the items and the history in a formatted way.
"""

from rich.padding import Padding
from rich.table import Table

from idle_calculator.core.utils import cprint, crule, make_bar
from idle_calculator.items import (
    Item,
    display_chance,
    is_modifier_active,
    modifier_unlock_level,
)
from idle_calculator.store import GameStore, Settings


def chance_to_string(chance: int) -> str:
    """Formats a last-chance value, showing manual changes as such."""
    if chance < 0:
        return "[dim]manual[/]"
    return f"{chance}%"


def print_panel_sheet(store: GameStore, auto_running: bool = False) -> None:
    """
    Prints the battle counter, the elapsed time and the auto-battle state.

    Args:
        store (GameStore): The store to display.
        auto_running (bool): Whether the auto battle is on.

    """
    crule("Panel", style="bold green")
    state = "[bold green]running[/]" if auto_running else "[dim]stopped[/]"
    cprint(Padding(f"Battles: [bold]{store.battles_count}[/]", (0, 2)))
    cprint(Padding(f"Time: [bold]{store.elapsed_time}[/]", (0, 2)))
    cprint(Padding(f"Auto battle: {state}", (0, 2)))


def print_settings_sheet(settings: Settings) -> None:
    """Prints the current settings with their form names."""
    table = Table(title="Settings", pad_edge=False)
    table.add_column("Key", style="cyan")
    table.add_column("Form name", style="dim")
    table.add_column("Value", justify="right")
    for name, field in Settings.model_fields.items():
        table.add_row(name, field.alias or name, str(getattr(settings, name)))
    cprint(table)


def print_item_sheet(
    item: Item,
    index: int,
    modifiers: tuple[Item, ...],
    settings: Settings,
    padding: int = 2,
) -> None:
    """
    Prints one item with its chance, description and modifiers.

    Args:
        item (Item): The item to display.
        index (int): Position of the item in the store.
        modifiers (tuple[Item, ...]): The modifier catalog.
        settings (Settings): Current settings.
        padding (int): Left padding for the output. Defaults to 2.

    """
    chance = display_chance(item.level, settings.effective_max_level)
    sheet = f"[cyan]{index + 1}.[/] {item.item_type.emoji} {item.colored_name}, "
    sheet += f"{item.item_type.colored_name}, "
    sheet += f"lvl [bold]{item.level}[/], "
    sheet += f"chance {make_bar(chance, 100, color='green')} {chance}%, "
    sheet += f"previous: {chance_to_string(item.last_chance)}"
    cprint(Padding(sheet, (0, padding)))
    padding += 2
    cprint(Padding(f'[italic]"{item.describe()}"[/]', (0, padding)))
    cprint(
        Padding(
            f"Uses: {item.uses}, improves {item.strategy.label}", (0, padding)
        )
    )
    for modifier_index, modifier in enumerate(modifiers):
        print_modifier_sheet(
            modifier, modifier_index, item.level, settings, padding
        )


def print_modifier_sheet(
    modifier: Item,
    modifier_index: int,
    item_level: int,
    settings: Settings,
    padding: int = 4,
) -> None:
    """Prints a modifier attached to an item, with its unlock state."""
    if is_modifier_active(item_level, modifier_index, settings.modifier_step_level):
        state = "[bold green]active[/]"
    else:
        unlock = modifier_unlock_level(modifier_index, settings.modifier_step_level)
        state = f"[red]requires level {unlock}[/]"
    sheet = f"{modifier.colored_name} lvl {modifier.level} ({state}): "
    sheet += f"[italic]{modifier.describe()}[/], improves {modifier.strategy.label}"
    cprint(Padding(sheet, (0, padding)))


def print_items_sheet(store: GameStore) -> None:
    """Prints every item of the store."""
    crule("Items", style="bold green")
    for index, item in enumerate(store.items):
        print_item_sheet(item, index, store.modifiers, store.settings)


def print_history_sheet(store: GameStore, limit: int = 20) -> None:
    """
    Prints the newest history entries.

    Args:
        store (GameStore): The store to display.
        limit (int): Maximum number of entries. Defaults to 20.

    """
    history = store.history
    crule(f"History ({len(history)})", style="bold green")
    if not history:
        cprint(Padding("[dim]No level-ups yet.[/]", (0, 2)))
        return
    for entry in history[:limit]:
        cprint(Padding(entry, (0, 2)))
