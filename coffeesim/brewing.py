"""The brewing hardware simulation and the step sequence that drives it."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable

from .signals import Signal

_log = logging.getLogger(__name__)

BREWING_COMPLETED = "✅ Brewing completed!"


class BrewingEngine:
    """Low-level brewing operations, each simulated with a short wait.

    ``step_performed(action)`` fires with the action's text each time an
    operation runs. ``step_delay`` is the pause, in seconds, between the
    ``dot_count`` progress ticks of every operation.
    """

    def __init__(self, step_delay: float = 2.5, dot_count: int = 3) -> None:
        self._step_delay = step_delay
        self._dot_count = dot_count
        self.step_performed = Signal()

    def _simulate(self, action: str) -> None:
        _log.debug("%s", action)
        for _ in range(self._dot_count):
            time.sleep(self._step_delay)
            _log.debug(".")
        self.step_performed.emit(action)

    def grind_beans(self) -> None:
        self._simulate("Grinding beans")

    def heat_water(self) -> None:
        self._simulate("Heating water")

    def pre_infuse(self) -> None:
        self._simulate("💦 Pre-infusing coffee grounds")

    def extract(self) -> None:
        self._simulate("Extracting coffee")

    def dispense(self) -> None:
        self._simulate("Dispensing coffee")

    def clean_up(self) -> None:
        self._simulate("Cleaning up brewing equipment")

    def heat_milk(self) -> None:
        self._simulate("Heating Milk")


@dataclass(frozen=True)
class BrewStep:
    """One step of the brewing sequence: an engine operation and its description."""

    action: Callable[[BrewingEngine], None]
    description: str


_DEFAULT_STEPS = (
    BrewStep(BrewingEngine.grind_beans, "🔄 Grinding Coffee Beans..."),
    BrewStep(BrewingEngine.heat_water, "🔥 Heating Water..."),
    BrewStep(BrewingEngine.heat_milk, "🔥 Heating Milk..."),
    BrewStep(BrewingEngine.pre_infuse, "💦 Pre-infusing Coffee Grounds..."),
    BrewStep(BrewingEngine.extract, "☕ Extracting Coffee..."),
    BrewStep(BrewingEngine.dispense, "🍶 Dispensing Coffee..."),
)


class BrewingModel:
    """Runs the brewing sequence on a :class:`BrewingEngine`.

    Signals: ``brewing_step_changed(description)`` before each step and once
    more with the completion message, then ``brewing_finished()``.
    """

    def __init__(self, engine: BrewingEngine | None = None) -> None:
        self.engine = engine if engine is not None else BrewingEngine()
        self._steps = _DEFAULT_STEPS
        self._step_index = 0
        self.brewing_step_changed = Signal()
        self.brewing_finished = Signal()

    @property
    def steps(self) -> tuple[BrewStep, ...]:
        return self._steps

    def start_brewing(self) -> None:
        """Run every step in order, unless :meth:`stop_brewing` cuts it short."""
        _log.debug("Starting brewing process...")
        self._step_index = 0
        total = len(self._steps)
        while self._step_index < total:
            step = self._steps[self._step_index]
            _log.debug(
                "Brewing step: %d / %d - %s", self._step_index + 1, total, step.description
            )
            self.brewing_step_changed.emit(step.description)
            step.action(self.engine)
            self._step_index += 1
        self.brewing_step_changed.emit(BREWING_COMPLETED)
        self.brewing_finished.emit()

    def stop_brewing(self) -> None:
        """Clean up the equipment and prevent any further steps."""
        _log.debug("Stopping brewing process...")
        self.engine.clean_up()
        self._step_index = len(self._steps)

    def handle_brew_state_change(self) -> None:
        _log.debug("Handling brewing state change...")