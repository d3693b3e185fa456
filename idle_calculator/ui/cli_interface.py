"""
User interface module for the idle calculator.

Provides the console control panel: a prompt_toolkit command loop whose
commands trigger wins, toggle the auto battle, change settings and print the
state with rich.
"""

from collections.abc import Callable

from prompt_toolkit import ANSI, PromptSession
from prompt_toolkit.completion import WordCompleter

from idle_calculator.core.constants import MANUAL_LEVEL_BONUS, WIN_BATCHES
from idle_calculator.core.sheets import (
    print_history_sheet,
    print_items_sheet,
    print_panel_sheet,
    print_settings_sheet,
)
from idle_calculator.core.utils import ccapture, cprint
from idle_calculator.simulation import AutoBattler, BattleSimulator
from idle_calculator.store import Settings

_BATCHES = ", ".join(str(batch) for batch in WIN_BATCHES)
_SETTING_KEYS = ", ".join(Settings.model_fields)

HELP_TEXT = f"""[bold]Commands[/]
  [cyan]win \\[n][/]            win n battles (default 1, e.g. {_BATCHES})
  [cyan]auto on|off[/]        start or stop winning one battle per tick
  [cyan]reset[/]              set the battle counter back to 0
  [cyan]set <key> <value>[/]  change a setting ({_SETTING_KEYS})
  [cyan]bump <n>[/]           give item n +{MANUAL_LEVEL_BONUS} levels without rolling
  [cyan]show[/]               print the panel and the items
  [cyan]settings[/]           print the settings
  [cyan]history \\[n][/]        print the newest n history entries (default 20)
  [cyan]help[/]               print this help
  [cyan]quit[/]               stop the auto battle and leave"""


class ControlPanel:
    """
    Command-line control panel of the calculator.

    Every command maps to one store read or one simulator call. The command
    dispatch is kept apart from the prompt loop so it can be driven directly.
    """

    def __init__(self, simulator: BattleSimulator, auto_battler: AutoBattler):
        """Initialize the control panel.

        Args:
            simulator (BattleSimulator): Simulator receiving manual wins.
            auto_battler (AutoBattler): Auto battle driven by `auto on|off`.

        """
        self.simulator: BattleSimulator = simulator
        self.auto_battler: AutoBattler = auto_battler
        self.commands: dict[str, Callable[[list[str]], None]] = {
            "win": self._cmd_win,
            "auto": self._cmd_auto,
            "reset": self._cmd_reset,
            "set": self._cmd_set,
            "bump": self._cmd_bump,
            "show": self._cmd_show,
            "settings": self._cmd_settings,
            "history": self._cmd_history,
            "help": self._cmd_help,
        }

    @property
    def store(self):
        return self.simulator.store

    def handle_command(self, line: str) -> bool:
        """
        Executes one command line.

        Args:
            line (str): The text typed by the user.

        Returns:
            bool: False when the user asked to quit, True otherwise.

        """
        words = line.split()
        if not words:
            return True
        name, args = words[0].lower(), words[1:]
        if name in ("quit", "exit", "q"):
            self.auto_battler.stop()
            return False
        command = self.commands.get(name)
        if command is None:
            cprint(f"[red]Unknown command '{name}'.[/] Type [cyan]help[/] for the list.")
            return True
        command(args)
        return True

    def run(self) -> None:
        """Runs the prompt loop until the user quits."""
        session: PromptSession = PromptSession()
        completer = WordCompleter(
            [*self.commands, "quit", "on", "off", *Settings.model_fields],
            ignore_case=True,
        )
        print_panel_sheet(self.store, self.auto_battler.is_running)
        print_items_sheet(self.store)
        cprint(HELP_TEXT)
        try:
            while True:
                prompt = ccapture(f"\n[bold green]{self.store.battles_count}[/] > ")
                try:
                    answer = session.prompt(ANSI(prompt), completer=completer)
                except KeyboardInterrupt:
                    continue
                if not self.handle_command(answer):
                    break
        except EOFError:
            pass
        finally:
            self.auto_battler.stop()

    # ===========================================================================
    # COMMANDS
    # ===========================================================================

    def _cmd_win(self, args: list[str]) -> None:
        count = self._parse_int(args[0]) if args else 1
        if count is None or count < 1:
            cprint("[red]The number of wins must be a positive integer.[/]")
            return
        self.simulator.simulate_wins(count)
        print_panel_sheet(self.store, self.auto_battler.is_running)

    def _cmd_auto(self, args: list[str]) -> None:
        if not args or args[0].lower() not in ("on", "off"):
            cprint("[red]Usage: auto on|off[/]")
            return
        self.auto_battler.toggle(args[0].lower() == "on")
        print_panel_sheet(self.store, self.auto_battler.is_running)

    def _cmd_reset(self, args: list[str]) -> None:
        self.store.reset()
        print_panel_sheet(self.store, self.auto_battler.is_running)

    def _cmd_set(self, args: list[str]) -> None:
        if len(args) < 2:
            cprint("[red]Usage: set <key> <value>[/]")
            return
        self.store.set_setting(args[0], args[1])
        print_settings_sheet(self.store.settings)

    def _cmd_bump(self, args: list[str]) -> None:
        number = self._parse_int(args[0]) if args else None
        if number is None:
            cprint("[red]Usage: bump <item number>[/]")
            return
        # Items are numbered from 1 on the panel.
        self.simulator.bump_item_level(number - 1, MANUAL_LEVEL_BONUS)
        print_items_sheet(self.store)

    def _cmd_show(self, args: list[str]) -> None:
        print_panel_sheet(self.store, self.auto_battler.is_running)
        print_items_sheet(self.store)

    def _cmd_settings(self, args: list[str]) -> None:
        print_settings_sheet(self.store.settings)

    def _cmd_history(self, args: list[str]) -> None:
        limit = self._parse_int(args[0]) if args else 20
        print_history_sheet(self.store, limit if limit and limit > 0 else 20)

    def _cmd_help(self, args: list[str]) -> None:
        cprint(HELP_TEXT)

    @staticmethod
    def _parse_int(text: str) -> int | None:
        try:
            return int(text)
        except ValueError:
            return None
