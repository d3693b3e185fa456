"""
Tests for the battle simulator and its level-up rule.
"""

import random

import pytest

from idle_calculator.core.constants import ItemType, MANUAL_CHANCE
from idle_calculator.items import Item
from idle_calculator.simulation import (
    BattleSimulator,
    format_history_line,
    level_up_succeeds,
)
from idle_calculator.store import GameStore, Settings


class FixedRandom:
    """Stand-in generator returning a fixed sequence of rolls."""

    def __init__(self, rolls):
        self.rolls = list(rolls)

    def randint(self, a, b):
        return self.rolls.pop(0)


@pytest.fixture
def store():
    return GameStore()


@pytest.fixture
def simulator(store):
    return BattleSimulator(store, random.Random(1234))


def success_rate(level, trials, seed):
    rng = random.Random(seed)
    successes = sum(
        level_up_succeeds(rng.randint(0, 100), level) for _ in range(trials)
    )
    return successes / trials


# ===========================================================================
# LEVEL-UP RULE
# ===========================================================================


def test_level_up_rule_exact_counts():
    """Test the number of winning rolls out of the 101 possible ones."""
    assert sum(level_up_succeeds(roll, 0) for roll in range(101)) == 101
    assert sum(level_up_succeeds(roll, 50) for roll in range(101)) == 51
    assert sum(level_up_succeeds(roll, 98) for roll in range(101)) == 3
    assert sum(level_up_succeeds(roll, 99) for roll in range(101)) == 2
    assert sum(level_up_succeeds(roll, 100) for roll in range(101)) == 2
    assert sum(level_up_succeeds(roll, 5000) for roll in range(101)) == 2


def test_top_rolls_always_succeed():
    """Test that 99 and 100 level up an item of any level."""
    assert level_up_succeeds(99, 10_000)
    assert level_up_succeeds(100, 10_000)
    assert not level_up_succeeds(98, 10_000)


def test_success_rate_at_level_50():
    """Test that the empirical rate converges to 51/101."""
    rate = success_rate(50, 100_000, seed=7)
    assert rate == pytest.approx(51 / 101, abs=0.01)


def test_success_rate_saturates_above_99():
    """Test that high levels keep a 2/101 chance instead of dropping to 0."""
    rate = success_rate(250, 100_000, seed=11)
    assert rate == pytest.approx(2 / 101, abs=0.005)
    assert rate > 0


def test_format_history_line():
    """Test that the history line carries every field."""
    line = format_history_line("Staff", 4, 1, 87, 12)
    assert line == "Level Staff 4 increased by 1 with chance (87) in battle 12"


# ===========================================================================
# ROLL LEVEL UP
# ===========================================================================


def test_roll_level_up_success(store):
    """Test that a winning roll levels up and writes history."""
    store.replace_items([Item(item_type=ItemType.SKILL, name="Healing", level=40)])
    store.increase_battles_count(3)
    simulator = BattleSimulator(store, FixedRandom([60]))

    result = simulator.roll_level_up(0)

    assert result.success and result.roll == 60
    assert store.items[0].level == 41
    assert store.items[0].last_chance == 60
    assert store.history == [
        "Level Healing 40 increased by 1 with chance (60) in battle 3"
    ]


def test_roll_level_up_failure(store):
    """Test that a losing roll changes nothing."""
    store.replace_items([Item(item_type=ItemType.SKILL, name="Healing", level=40)])
    simulator = BattleSimulator(store, FixedRandom([39]))
    before = store.items

    result = simulator.roll_level_up(0)

    assert not result.success
    assert store.items == before
    assert store.history == []


def test_roll_level_up_adds_requested_levels(store):
    """Test that levels_to_add is applied on success."""
    simulator = BattleSimulator(store, FixedRandom([100]))
    simulator.roll_level_up(2, levels_to_add=5)
    assert store.items[2].level == 5


@pytest.mark.parametrize("levels", [-1, 1.5, "2"])
def test_roll_level_up_rejects_invalid_levels(store, levels):
    """Test that a bad level count is refused before rolling."""
    simulator = BattleSimulator(store, FixedRandom([100]))
    with pytest.raises(ValueError):
        simulator.roll_level_up(0, levels_to_add=levels)
    assert store.history == []
    assert store.items[0].level == 0


def test_roll_level_up_invalid_index(simulator, store):
    """Test that an invalid index is ignored."""
    before = store.items
    assert simulator.roll_level_up(10) is None
    assert store.items == before


# ===========================================================================
# SIMULATE WINS
# ===========================================================================


def test_simulate_zero_wins_is_noop(simulator, store):
    """Test that zero wins mutate nothing."""
    before = store.items
    simulator.simulate_wins(0)
    assert store.battles_count == 0
    assert store.items is before
    assert store.history == []


@pytest.mark.parametrize("count", [-1, 1.5, "3"])
def test_simulate_wins_rejects_invalid_count(simulator, count):
    """Test that negative or non-integer counts are refused."""
    with pytest.raises(ValueError):
        simulator.simulate_wins(count)


def test_simulate_wins_counts_battles(store):
    """Test that the counter grows by exactly count, whatever the rolls."""
    simulator = BattleSimulator(store, random.Random(99))
    simulator.simulate_wins(5)
    assert store.battles_count == 5


def test_first_win_levels_every_item(simulator, store):
    """Test that level 0 items always level up on their first roll."""
    simulator.simulate_wins(1)
    assert [item.level for item in store.items] == [1, 1, 1]
    assert len(store.history) == 3


def test_simulate_wins_rolls_in_list_order(store):
    """Test that items are rolled in declaration order, newest history first."""
    simulator = BattleSimulator(store, FixedRandom([10, 20, 30]))
    simulator.simulate_wins(1)
    names = [item.name for item in store.items]
    assert store.history == [
        format_history_line(names[2], 0, 1, 30, 1),
        format_history_line(names[1], 0, 1, 20, 1),
        format_history_line(names[0], 0, 1, 10, 1),
    ]


def test_simulate_wins_skips_modifiers(store):
    """Test that modifiers in the item list are never rolled."""
    store.replace_items(
        [
            Item(item_type=ItemType.SKILL, name="Healing"),
            Item(item_type=ItemType.MODIFIER, name="Power"),
        ]
    )
    simulator = BattleSimulator(store, random.Random(5))
    simulator.simulate_wins(50)
    assert store.items[0].level > 0
    assert store.items[1].level == 0


def test_levels_never_decrease(store):
    """Test that levels are monotonic across wins and bumps."""
    simulator = BattleSimulator(store, random.Random(2024))
    previous = [item.level for item in store.items]
    for step in range(200):
        if step % 50 == 0:
            simulator.bump_item_level(step % 3)
        simulator.simulate_wins(3)
        current = [item.level for item in store.items]
        assert all(c >= p >= 0 for c, p in zip(current, previous))
        previous = current


def test_min_chance_has_no_effect():
    """Test that seeded runs are identical whatever min_chance is."""
    low = GameStore(settings=Settings(min_chance=0))
    high = GameStore(settings=Settings(min_chance=100))
    BattleSimulator(low, random.Random(42)).simulate_wins(300)
    BattleSimulator(high, random.Random(42)).simulate_wins(300)
    assert low.items == high.items
    assert low.history == high.history


# ===========================================================================
# MANUAL BUMP
# ===========================================================================


def test_bump_item_level(simulator, store):
    """Test that a manual bump skips the roll and records -1."""
    store.increase_battles_count(7)
    name = store.items[1].name

    simulator.bump_item_level(1)

    assert store.items[1].level == 25
    assert store.items[1].last_chance == MANUAL_CHANCE
    assert store.history == [format_history_line(name, 0, 25, -1, 7)]


def test_bump_item_level_invalid_index(simulator, store):
    """Test that bumping a missing item does nothing."""
    before = store.items
    simulator.bump_item_level(-1)
    simulator.bump_item_level(3)
    assert store.items == before
    assert store.history == []


def test_history_order_after_two_level_ups(store):
    """Test that E2 comes before E1."""
    simulator = BattleSimulator(store, FixedRandom([100, 100]))
    simulator.roll_level_up(0)
    first = store.history[0]
    simulator.roll_level_up(1)
    second = store.history[0]
    assert store.history == [second, first]
