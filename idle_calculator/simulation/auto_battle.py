"""
Auto-battle loop.

While running, the auto battler wins one battle per tick. It keeps exactly
one pending timer: starting again cancels the previous timer first, and
stopping cancels the pending one before it fires.
"""

import threading
from collections.abc import Callable
from typing import Protocol

from catchery import log_warning

from idle_calculator.core.constants import AUTO_BATTLE_INTERVAL
from idle_calculator.core.logging import log_debug
from idle_calculator.simulation.battle_simulator import BattleSimulator


class TimerHandle(Protocol):
    """The part of threading.Timer the auto battler relies on."""

    daemon: bool

    def start(self) -> None: ...

    def cancel(self) -> None: ...


TimerFactory = Callable[[float, Callable[[], None]], TimerHandle]


class AutoBattler:
    """Drives a simulator with a periodic, cancellable timer."""

    def __init__(
        self,
        simulator: BattleSimulator,
        interval: float = AUTO_BATTLE_INTERVAL,
        timer_factory: TimerFactory = threading.Timer,
    ):
        """Initialize the auto battler, stopped.

        Args:
            simulator (BattleSimulator): Simulator receiving one win per tick.
            interval (float): Seconds between ticks.
            timer_factory (TimerFactory): Builds one-shot timers, called as
                timer_factory(interval, callback).

        Raises:
            ValueError: If interval is not positive.

        """
        if interval <= 0:
            raise ValueError(f"Invalid auto-battle interval: {interval}")
        self.simulator: BattleSimulator = simulator
        self.interval: float = interval
        self._timer_factory: TimerFactory = timer_factory
        self._lock = threading.Lock()
        # The only pending timer, None while stopped.
        self._timer: TimerHandle | None = None
        # Bumped on every start and stop, so ticks from an old run never reschedule.
        self._generation: int = 0

    @property
    def is_running(self) -> bool:
        return self._timer is not None

    def start(self) -> None:
        """Starts ticking, cancelling the current timer if already running."""
        with self._lock:
            self._cancel_pending()
            self._generation += 1
            self._schedule(self._generation)
        log_debug(
            "Auto battle started",
            {"interval": self.interval, "context": "auto_battle"},
        )

    def stop(self) -> None:
        """Stops ticking. Does nothing when already stopped."""
        with self._lock:
            if self._timer is None:
                return
            self._cancel_pending()
            self._generation += 1
        log_debug("Auto battle stopped", {"context": "auto_battle"})

    def toggle(self, on: bool) -> None:
        """Starts or stops the auto battle."""
        if on:
            self.start()
        else:
            self.stop()

    def _cancel_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _schedule(self, generation: int) -> None:
        timer = self._timer_factory(self.interval, lambda: self._tick(generation))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _tick(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
        try:
            self.simulator.simulate_wins(1)
        except Exception as e:
            log_warning(
                f"Auto battle tick failed, stopping: {e}",
                {"context": "auto_battle_tick"},
            )
            with self._lock:
                if generation == self._generation:
                    self._timer = None
                    self._generation += 1
            return
        with self._lock:
            if generation == self._generation:
                self._schedule(generation)
