"""Maintenance state of the machine."""

from __future__ import annotations

import logging
import time

from .signals import Signal

_log = logging.getLogger(__name__)


class MaintenanceModel:
    """Tracks whether maintenance is due.

    Signals: ``maintenance_required()`` and ``maintenance_completed()``.
    ``step_delay`` is the pause, in seconds, between the steps of the
    simulated maintenance run.
    """

    def __init__(self, step_delay: float = 0.5, steps: int = 3) -> None:
        self._needs_maintenance = False
        self._step_delay = step_delay
        self._steps = steps
        self.maintenance_required = Signal()
        self.maintenance_completed = Signal()

    @property
    def needs_maintenance(self) -> bool:
        return self._needs_maintenance

    def trigger_maintenance(self) -> None:
        """Mark maintenance as due."""
        self._needs_maintenance = True
        self.maintenance_required.emit()
        _log.debug("Maintenance has been triggered.")

    def perform_maintenance(self) -> bool:
        """Carry out maintenance if it is due; return whether it was carried out."""
        if not self._needs_maintenance:
            _log.debug("No maintenance is required at this time.")
            return False
        _log.debug("Performing maintenance")
        for _ in range(self._steps):
            time.sleep(self._step_delay)
            _log.debug(".")
        self._needs_maintenance = False
        self.maintenance_completed.emit()
        _log.debug("Maintenance completed.")
        return True