"""
Tests for the command dispatch of the console control panel.
"""

import random

import pytest

from idle_calculator.simulation import AutoBattler, BattleSimulator
from idle_calculator.store import GameStore
from idle_calculator.ui import ControlPanel


class IdleTimer:
    """Timer that never fires on its own."""

    def __init__(self, interval, function):
        self.daemon = False
        self.cancelled = False

    def start(self):
        pass

    def cancel(self):
        self.cancelled = True


@pytest.fixture
def store():
    return GameStore()


@pytest.fixture
def panel(store):
    simulator = BattleSimulator(store, random.Random(8))
    return ControlPanel(simulator, AutoBattler(simulator, timer_factory=IdleTimer))


def test_empty_line_is_ignored(panel, store):
    assert panel.handle_command("   ") is True
    assert store.battles_count == 0


@pytest.mark.parametrize("line", ["quit", "exit", "Q"])
def test_quit_stops_auto_battle(panel, line):
    """Test that quitting ends the loop and the auto battle."""
    panel.handle_command("auto on")
    assert panel.handle_command(line) is False
    assert not panel.auto_battler.is_running


@pytest.mark.parametrize("line, expected", [("win", 1), ("win 10", 10), ("WIN 5000", 5000)])
def test_win(panel, store, line, expected):
    """Test that win simulates the requested number of battles."""
    panel.handle_command(line)
    assert store.battles_count == expected


@pytest.mark.parametrize("line", ["win 0", "win -3", "win many"])
def test_win_rejects_bad_count(panel, store, line, capsys):
    """Test that invalid counts print a hint and win nothing."""
    assert panel.handle_command(line) is True
    assert store.battles_count == 0
    assert "positive integer" in capsys.readouterr().out


def test_win_calls_simulator(panel, mocker):
    spy = mocker.spy(panel.simulator, "simulate_wins")
    panel.handle_command("win 100")
    spy.assert_called_once_with(100)


def test_auto_on_off(panel):
    panel.handle_command("auto on")
    assert panel.auto_battler.is_running
    panel.handle_command("auto off")
    assert not panel.auto_battler.is_running


def test_auto_requires_state(panel, capsys):
    panel.handle_command("auto")
    assert not panel.auto_battler.is_running
    assert "Usage" in capsys.readouterr().out


def test_reset(panel, store):
    panel.handle_command("win 3")
    panel.handle_command("reset")
    assert store.battles_count == 0
    assert store.history


def test_set(panel, store):
    """Test that set accepts both spellings and normalizes the value."""
    panel.handle_command("set time 30")
    panel.handle_command("set effectiveMaxLevel abc")
    assert store.settings.time == 30
    assert store.settings.effective_max_level == 0


def test_bump_uses_one_based_numbers(panel, store):
    """Test that bump 1 raises the first item by 25 levels."""
    panel.handle_command("bump 1")
    assert store.items[0].level == 25
    assert store.items[0].last_chance == -1


def test_bump_out_of_range(panel, store):
    before = store.items
    panel.handle_command("bump 9")
    panel.handle_command("bump 0")
    assert store.items == before


def test_unknown_command(panel, capsys):
    assert panel.handle_command("fly") is True
    assert "Unknown command" in capsys.readouterr().out


def test_history_prints_newest_entries(panel, capsys):
    panel.handle_command("win 1")
    capsys.readouterr()
    panel.handle_command("history 1")
    out = capsys.readouterr().out
    assert "in battle 1" in out


@pytest.mark.parametrize("line", ["show", "settings", "help", "history"])
def test_read_commands_do_not_mutate(panel, store, line):
    panel.handle_command(line)
    assert store.battles_count == 0
    assert store.history == []
