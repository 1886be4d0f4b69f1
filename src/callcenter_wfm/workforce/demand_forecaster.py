"""
Demand Forecaster Module
========================

Generates deterministic call-volume curves from a calendar date.

There is no historical data behind these curves: every value is derived
from a date seed through ``frac(sin(seed) * 10000)``, so re-querying a
date always reproduces the same numbers. Two granularities are offered:

    date -> daily_breakdown() -> 48 half-hour VolumeSamples
    date -> weekly_volume()   -> one daily total
"""

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, timedelta

import numpy as np
import pandas as pd

from .config import ForecastConfig

logger = logging.getLogger(__name__)


@dataclass
class VolumeSample:
    """One point of a volume curve.

    Attributes:
        time: "HH:MM" label of the half-hour slot start.
        calls: Forecasted calls in the slot (never negative).
    """
    time: str
    calls: int


@dataclass
class DailyVolume:
    """A single day of the weekly view."""
    date: date
    label: str
    calls: int
    is_today: bool = False
    is_selected: bool = False


@dataclass
class ForecastResult:
    """Container for demand forecast output.

    Attributes:
        timestamps: Start of each 30-min bucket.
        demand: Predicted number of calls for each bucket.
    """
    timestamps: pd.DatetimeIndex
    demand: np.ndarray

    @property
    def samples(self) -> list[VolumeSample]:
        return [
            VolumeSample(time=ts.strftime("%H:%M"), calls=int(calls))
            for ts, calls in zip(self.timestamps, self.demand)
        ]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(
            {
                "interval_start": self.timestamps,
                "time": self.timestamps.strftime("%H:%M"),
                "calls": self.demand,
            }
        )


def as_date(value) -> date:
    # datetime (and pd.Timestamp) subclass date, so check it first
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Expected a date, got {type(value).__name__}")


def seeded_random(seed: float) -> float:
    """Return a reproducible pseudo-random float in [0, 1) for ``seed``.

    Not a real PRNG: it is the fractional part of ``sin(seed) * 10000``.
    """
    x = math.sin(seed) * 10000
    return x - math.floor(x)


def date_seed(day) -> int:
    """Seed for a calendar day, e.g. 2024-03-05 -> 20240305."""
    day = as_date(day)
    return day.year * 10000 + day.month * 100 + day.day


def slot_label(index: int, slot_minutes: int = 30) -> str:
    minutes = index * slot_minutes
    return f"{minutes // 60:02d}:{minutes % 60:02d}"


def is_weekend(day) -> bool:
    return as_date(day).weekday() >= 5


class DemandForecaster:
    """Produces the intraday and weekly demand curves for a date.

    Stateless apart from its configuration; all methods are pure functions
    of the date passed in.

    Data Flow:
        date -> date_seed() -> seeded_random(seed + i * stride) -> slot noise
        date -> daily_breakdown() / forecast_day() -> 48 half-hour buckets
        date -> weekly_volume() -> daily total (weekday/weekend base + noise)
    """

    def __init__(self, config: ForecastConfig = None) -> None:
        self.config = config or ForecastConfig()

    def _slot_volume(self, index: int, seed_base: int) -> int:
        cfg = self.config
        curve = cfg.base_volume
        for center, amplitude in cfg.peaks:
            curve += amplitude * math.exp(-((index - center) ** 2) / cfg.peak_variance)

        noise = seeded_random(seed_base + index * cfg.noise_stride) * cfg.noise_scale
        return max(0, math.floor(curve + noise))

    def daily_breakdown(self, day) -> list[VolumeSample]:
        """Return the 48 half-hour volume samples for ``day``.

        A flat base plus two Gaussian rush peaks (late morning and mid
        afternoon), with day-specific noise on every slot.

        Args:
            day: date, datetime or pd.Timestamp. Only the calendar date is used.

        Returns:
            List of VolumeSample ordered from 00:00 to 23:30.
        """
        seed_base = date_seed(day)
        samples = [
            VolumeSample(
                time=slot_label(i, self.config.slot_minutes),
                calls=self._slot_volume(i, seed_base),
            )
            for i in range(self.config.slots_per_day)
        ]
        logger.debug("Daily breakdown for %s: %d calls total", as_date(day),
                     sum(s.calls for s in samples))
        return samples

    def forecast_day(self, day) -> ForecastResult:
        """Same curve as daily_breakdown, keyed by timestamps."""
        day = as_date(day)
        timestamps = pd.date_range(
            start=pd.Timestamp(day),
            periods=self.config.slots_per_day,
            freq=f"{self.config.slot_minutes}min",
        )
        demand = np.array(
            [s.calls for s in self.daily_breakdown(day)], dtype=int
        )
        return ForecastResult(timestamps=timestamps, demand=demand)

    def weekly_volume(self, day) -> int:
        """Return the forecasted daily total for ``day``.

        Weekend days start from a lower base. The result never drops below
        ``min_daily_volume``.
        """
        cfg = self.config
        base = cfg.weekend_volume if is_weekend(day) else cfg.weekday_volume
        noise = seeded_random(date_seed(day)) * cfg.daily_noise_span - cfg.daily_noise_span / 2
        return max(cfg.min_daily_volume, math.floor(base + noise))

    def estimated_peak_hourly(self, daily_total: int) -> int:
        """Approximate busiest-hour volume as a fixed share of the daily total."""
        # round half up, not Python's banker's rounding
        return math.floor(daily_total * self.config.peak_hour_share + 0.5)

    def volume_for_date(self, day) -> int:
        return self.estimated_peak_hourly(self.weekly_volume(day))

    def week_forecast(
        self,
        week_start,
        selected=None,
        today=None,
    ) -> list[DailyVolume]:
        """Build the seven-day view starting at ``week_start``.

        Args:
            week_start: First day shown (normally a Monday).
            selected: Day to flag as selected, if any.
            today: Day to flag as today; defaults to the local date.

        Returns:
            Seven DailyVolume entries labelled like "Mon 3/4".
        """
        start = as_date(week_start)
        today = as_date(today) if today is not None else date.today()
        selected = as_date(selected) if selected is not None else None

        days = []
        for offset in range(7):
            day = start + timedelta(days=offset)
            days.append(
                DailyVolume(
                    date=day,
                    label=f"{day.strftime('%a')} {day.month}/{day.day}",
                    calls=self.weekly_volume(day),
                    is_today=day == today,
                    is_selected=day == selected,
                )
            )
        return days

    def week_frame(self, week_start, selected=None, today=None) -> pd.DataFrame:
        return pd.DataFrame(
            [vars(d) for d in self.week_forecast(week_start, selected, today)]
        )


_default = DemandForecaster()


def daily_breakdown(day) -> list[VolumeSample]:
    return _default.daily_breakdown(day)


def weekly_volume(day) -> int:
    return _default.weekly_volume(day)


def volume_for_date(day) -> int:
    return _default.volume_for_date(day)
