"""
Dashboard Navigation State
==========================

Holds the selected day / week of a dashboard view and the "current time"
marker shown on today's intraday chart. One DashboardState is created per
mounted view and discarded with it; nothing here is process-wide.
"""

import logging
import threading
from datetime import date, datetime, timedelta
from typing import Callable, Optional

from .config import SimulationConfig
from .demand_forecaster import DemandForecaster, as_date
from .performance_emulator import PerformanceEmulator, PerformanceMetrics

logger = logging.getLogger(__name__)


def week_start_for(day) -> date:
    """Monday of the week containing ``day``."""
    day = as_date(day)
    return day - timedelta(days=day.weekday())


def current_slot_label(now: datetime) -> Optional[str]:
    """Round ``now`` to the nearest half-hour slot label.

    Minutes below 15 round down to :00, below 45 to :30, otherwise up to the
    next hour. Returns None once rounding runs past 23:30.
    """
    hour = now.hour
    if now.minute < 15:
        minute = 0
    elif now.minute < 45:
        minute = 30
    else:
        hour, minute = hour + 1, 0
    if hour > 23:
        return None
    return f"{hour:02d}:{minute:02d}"


class DashboardState:
    """Selected date, week and simulator inputs for one dashboard view.

    Args:
        forecaster: Source of the per-day volume fed to the simulator.
        emulator: What-if simulator evaluated by simulate().
        today: Callable returning the local date; injectable for tests.
    """

    def __init__(
        self,
        forecaster: DemandForecaster = None,
        emulator: PerformanceEmulator = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self.forecaster = forecaster or DemandForecaster()
        self.emulator = emulator or PerformanceEmulator(SimulationConfig())
        self._today = today

        current = as_date(self._today())
        self.week_start = week_start_for(current)
        self.selected_date = current
        self.selected_volume = self.forecaster.volume_for_date(current)
        self.agent_count = self.emulator.config.default_agents

    @property
    def week_end(self) -> date:
        return self.week_start + timedelta(days=6)

    @property
    def is_today(self) -> bool:
        return self.selected_date == as_date(self._today())

    def _select(self, day) -> None:
        day = as_date(day)
        self.selected_date = day
        self.selected_volume = self.forecaster.volume_for_date(day)

    def prev_week(self) -> None:
        self.week_start -= timedelta(days=7)

    def next_week(self) -> None:
        self.week_start += timedelta(days=7)

    def prev_day(self) -> None:
        self._select(self.selected_date - timedelta(days=1))
        if self.selected_date < self.week_start:
            self.prev_week()

    def next_day(self) -> None:
        self._select(self.selected_date + timedelta(days=1))
        if self.selected_date > self.week_end:
            self.next_week()

    def select_date(self, day) -> None:
        """Select a day; the week view follows if the day lies outside it."""
        day = as_date(day)
        self._select(day)
        if not self.week_start <= day <= self.week_end:
            self.week_start = week_start_for(day)

    def jump_to_today(self) -> None:
        current = as_date(self._today())
        self.week_start = week_start_for(current)
        self._select(current)
        logger.info("Jumped to today (%s)", current)

    def reset(self) -> None:
        """Restore simulator defaults and return to today."""
        self.agent_count = self.emulator.config.default_agents
        self.jump_to_today()

    def week(self):
        return self.forecaster.week_forecast(
            self.week_start, selected=self.selected_date, today=self._today()
        )

    def simulate(self, agent_count: int = None) -> PerformanceMetrics:
        """Run the what-if simulator on the selected day's peak-hour volume.

        The volume is used as forecast; only slider input snaps to the step.
        """
        if agent_count is not None:
            self.agent_count = agent_count
        self.agent_count = self.emulator.clamp_agents(self.agent_count)
        return self.emulator.predict_metrics(self.agent_count, self.selected_volume)


class TimeMarkerPoller:
    """Refreshes the current-slot label on a fixed interval.

    start() computes the label immediately and then every ``interval``
    seconds on a daemon thread until stop(). Usable as a context manager
    spanning the lifetime of the view that shows the marker.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = datetime.now,
        interval: float = 60.0,
        on_update: Callable[[Optional[str]], None] = None,
    ) -> None:
        self.clock = clock
        self.interval = interval
        self.on_update = on_update
        self.label: Optional[str] = None
        self._stop = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def refresh(self) -> Optional[str]:
        self.label = current_slot_label(self.clock())
        if self.on_update is not None:
            self.on_update(self.label)
        return self.label

    def _run(self) -> None:
        while not self._stop.wait(self.interval):
            self.refresh()

    def start(self) -> "TimeMarkerPoller":
        if self.running:
            return self
        self._stop.clear()
        self.refresh()
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()
        logger.info("Time marker polling every %ss", self.interval)
        return self

    def stop(self) -> None:
        self._stop.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        self.label = None
        logger.info("Time marker polling stopped")

    def __enter__(self) -> "TimeMarkerPoller":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
