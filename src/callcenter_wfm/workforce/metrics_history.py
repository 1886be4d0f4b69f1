"""Daily service-metrics history: generation, sorting and KPI comparison."""

import logging
from dataclasses import dataclass

import numpy as np
import pandas as pd

from .performance_emulator import rate_sla

logger = logging.getLogger(__name__)

SORT_KEYS = ("date", "sla", "wait_time", "calls")
SORT_DIRECTIONS = ("asc", "desc")
PAGE_LIMIT = 500


def round_half_up(values, digits: int = 0):
    """Round halves away from zero for non-negative values (np.round goes to even)."""
    scale = 10 ** digits
    return np.floor(np.asarray(values) * scale + 0.5) / scale


@dataclass
class SortConfig:
    key: str = "date"
    direction: str = "desc"


@dataclass
class KpiCard:
    """One headline metric compared with the previous period."""
    title: str
    value: float
    previous: float
    change: float
    is_positive: bool


def generate_history(
    start: str = "2023-01-01",
    end: str = "2025-12-31",
    seed: int = 42,
) -> pd.DataFrame:
    """Simulate one row of daily metrics per day between start and end.

    Weekends carry fewer calls. SLA hovers around 92% (capped at 100) and
    wait around 40 s.

    Returns:
        DataFrame with columns date, sla, wait_time, calls in date order.
    """
    dates = pd.date_range(start=start, end=end, freq="D")
    rng = np.random.default_rng(seed)
    n = len(dates)

    weekend = dates.dayofweek >= 5
    base_calls = np.where(weekend, 4000, 9000)
    calls = np.floor(base_calls + rng.random(n) * 3000).astype(int)
    sla = round_half_up(np.minimum(100, 92 + (rng.random(n) * 10 - 5)), 1)
    wait = np.floor(40 + (rng.random(n) * 20 - 10)).astype(int)

    logger.debug("Generated %d history rows from %s to %s", n, start, end)
    return pd.DataFrame({"date": dates, "sla": sla, "wait_time": wait, "calls": calls})


def sort_history(df: pd.DataFrame, sort: SortConfig = None) -> pd.DataFrame:
    sort = sort or SortConfig()
    if sort.key not in SORT_KEYS:
        raise ValueError(f"Unknown sort key {sort.key!r}; expected one of {SORT_KEYS}")
    if sort.direction not in SORT_DIRECTIONS:
        raise ValueError(f"Unknown sort direction {sort.direction!r}")

    # stable, so ties keep date order
    return df.sort_values(
        sort.key, ascending=sort.direction == "asc", kind="mergesort"
    ).reset_index(drop=True)


def toggle_sort(current: SortConfig, key: str) -> SortConfig:
    """Clicking the active descending column flips it; anything else sorts descending."""
    if current.key == key and current.direction == "desc":
        return SortConfig(key=key, direction="asc")
    return SortConfig(key=key, direction="desc")


def sla_band(sla: float) -> str:
    """Same thresholds as the simulator's SLA rating."""
    return rate_sla(sla)


def page(df: pd.DataFrame, limit: int = PAGE_LIMIT) -> tuple[pd.DataFrame, int]:
    """First ``limit`` rows plus the total row count."""
    return df.head(limit), len(df)


def kpi_summary(df: pd.DataFrame, as_of, days: int = 7) -> list[KpiCard]:
    """Compare the ``days`` ending at ``as_of`` with the ``days`` before them.

    Higher SLA and call counts are positive; a lower wait is positive.

    Raises:
        ValueError: If either window has no rows.
    """
    as_of = pd.Timestamp(as_of).normalize()
    window = pd.Timedelta(days=days)

    current = df[(df["date"] > as_of - window) & (df["date"] <= as_of)]
    previous = df[(df["date"] > as_of - 2 * window) & (df["date"] <= as_of - window)]
    if current.empty or previous.empty:
        raise ValueError(f"Not enough history before {as_of.date()} for a {days}-day comparison")

    cards = []
    for title, column, agg, higher_is_better in (
        ("Service Level (SLA)", "sla", "mean", True),
        ("Avg. Waiting Time", "wait_time", "mean", False),
        ("Total Calls Processed", "calls", "sum", True),
    ):
        value = float(current[column].agg(agg))
        prev = float(previous[column].agg(agg))
        change = value - prev
        cards.append(
            KpiCard(
                title=title,
                value=value,
                previous=prev,
                change=change,
                is_positive=change >= 0 if higher_is_better else change <= 0,
            )
        )
    return cards
