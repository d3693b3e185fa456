"""
State store of the calculator.

The store owns the battle counter, the items, the modifier catalog, the
settings and the history. Every change goes through one of its mutation
methods, which are serialized by a re-entrant lock so the auto-battle timer
and the prompt never interleave.
"""

from collections import deque
from collections.abc import Iterable
from threading import RLock
from typing import Any

from catchery import log_warning
from pydantic import ValidationError

from idle_calculator.core.error_handling import (
    ErrorKind,
    is_valid_index,
    normalize_setting_value,
)
from idle_calculator.core.logging import log_debug
from idle_calculator.core.utils import format_elapsed_time
from idle_calculator.items import DEFAULT_ITEMS, DEFAULT_MODIFIERS, Item
from idle_calculator.store.settings import Settings


class GameStore:
    """Single owner of the simulation state."""

    def __init__(
        self,
        items: Iterable[Item] | None = None,
        modifiers: Iterable[Item] | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the store with the default content unless told otherwise.

        Args:
            items (Iterable[Item] | None): Starting items.
            modifiers (Iterable[Item] | None): Modifier catalog.
            settings (Settings | None): Starting settings.

        """
        # Guards every mutation, re-entrant so batches can nest single updates.
        self.lock = RLock()
        self._battles_count: int = 0
        self._items: tuple[Item, ...] = tuple(DEFAULT_ITEMS if items is None else items)
        self._modifiers: tuple[Item, ...] = tuple(
            DEFAULT_MODIFIERS if modifiers is None else modifiers
        )
        self._settings: Settings = settings if settings is not None else Settings()
        # Newest entry first.
        self._history: deque[str] = deque()

    # ===========================================================================
    # READ ACCESS
    # ===========================================================================

    @property
    def battles_count(self) -> int:
        return self._battles_count

    @property
    def items(self) -> tuple[Item, ...]:
        return self._items

    @property
    def modifiers(self) -> tuple[Item, ...]:
        return self._modifiers

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def history(self) -> list[str]:
        """Returns a snapshot of the history, most recent entry first."""
        with self.lock:
            return list(self._history)

    @property
    def elapsed_time(self) -> str:
        """Returns the in-game time spent in battles, formatted for display."""
        return format_elapsed_time(self._battles_count, self._settings.time)

    # ===========================================================================
    # MUTATIONS
    # ===========================================================================

    def increase_battles_count(self, by: int = 1) -> None:
        """Adds `by` to the battle counter."""
        with self.lock:
            self._battles_count += by

    def reset(self) -> None:
        """Sets the battle counter back to 0. Items, settings and history stay."""
        with self.lock:
            self._battles_count = 0
        log_debug("Battle counter reset", {"context": "store_reset"})

    def replace_items(self, new_items: Iterable[Item]) -> None:
        """Replaces the whole item list."""
        with self.lock:
            self._items = tuple(new_items)

    def update_item_level(self, index: int, level_delta: int, last_chance: int) -> None:
        """
        Raises the level of the item at index and records the roll.

        The item is replaced by an updated copy; every other item is kept as
        the very same object. An index outside the list, a delta that is not
        a non-negative int, or a last_chance outside -1..100 is ignored.

        Args:
            index (int): Position of the item in the list.
            level_delta (int): Levels to add, must not be negative.
            last_chance (int): Roll that produced the change, or -1.

        """
        with self.lock:
            if not is_valid_index(index, len(self._items)):
                log_warning(
                    f"Ignoring level update for invalid item index {index}",
                    {
                        "kind": ErrorKind.INVALID_INDEX.value,
                        "index": index,
                        "items": len(self._items),
                        "context": "update_item_level",
                    },
                )
                return
            if (
                isinstance(level_delta, bool)
                or not isinstance(level_delta, int)
                or level_delta < 0
            ):
                log_warning(
                    f"Ignoring invalid level change {level_delta!r}",
                    {
                        "index": index,
                        "level_delta": level_delta,
                        "type": type(level_delta).__name__,
                        "context": "update_item_level",
                    },
                )
                return
            try:
                updated = self._items[index].with_level(level_delta, last_chance)
            except ValidationError as e:
                log_warning(
                    f"Ignoring level update with invalid chance {last_chance!r}",
                    {
                        "index": index,
                        "last_chance": last_chance,
                        "error": str(e),
                        "context": "update_item_level",
                    },
                )
                return
            self._items = tuple(
                updated if i == index else item for i, item in enumerate(self._items)
            )

    def replace_settings(self, new_settings: Settings) -> None:
        """Replaces the whole settings record."""
        with self.lock:
            self._settings = new_settings

    def set_setting(self, key: str, value: Any) -> None:
        """
        Changes one setting from a form value.

        Values that are not numbers, and negative numbers, fall back to 0.
        Unknown keys are ignored.

        Args:
            key (str): Setting name, in Python or form (camelCase) spelling.
            value (Any): Raw value typed into the form.

        """
        field_name = Settings.resolve_key(key)
        if field_name is None:
            log_warning(
                f"Ignoring unknown setting '{key}'",
                {
                    "kind": ErrorKind.INVALID_SETTING.value,
                    "key": key,
                    "available": list(Settings.model_fields),
                    "context": "set_setting",
                },
            )
            return
        normalized = normalize_setting_value(
            value, field_name, {"context": "set_setting"}
        )
        with self.lock:
            values = self._settings.model_dump()
            try:
                new_settings = Settings.model_validate({**values, field_name: normalized})
            except ValidationError as e:
                log_warning(
                    f"{field_name} must not be negative, got: {normalized}, correcting to 0",
                    {
                        "kind": ErrorKind.INVALID_SETTING.value,
                        "key": field_name,
                        "error": str(e),
                        "context": "set_setting",
                    },
                )
                new_settings = Settings.model_validate({**values, field_name: 0})
            self.replace_settings(new_settings)

    def append_history(self, text: str) -> None:
        """Puts text at the top of the history."""
        with self.lock:
            self._history.appendleft(text)


# One store per process, created explicitly by the entry point.
_STORE: GameStore | None = None


def init_store(
    items: Iterable[Item] | None = None,
    modifiers: Iterable[Item] | None = None,
    settings: Settings | None = None,
) -> GameStore:
    """
    Creates the process-wide store, replacing any previous one.

    Returns:
        GameStore: The new store.

    """
    global _STORE
    _STORE = GameStore(items=items, modifiers=modifiers, settings=settings)
    return _STORE


def get_store() -> GameStore:
    """
    Returns the process-wide store.

    Raises:
        RuntimeError: If init_store() was not called yet.

    """
    if _STORE is None:
        raise RuntimeError("The game store is not initialized, call init_store() first")
    return _STORE
