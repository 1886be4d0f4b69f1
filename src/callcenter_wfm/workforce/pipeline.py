"""
Pipeline Module (The Manager)
=============================

Orchestrates the full workflow: Forecast -> Staff -> Summarize.
Connects the DemandForecaster and SupplyOptimizer for one selected day.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

import pandas as pd

from .demand_forecaster import DemandForecaster, ForecastResult
from .supply_optimizer import StaffingTargets, SupplyOptimizer

logger = logging.getLogger(__name__)


@dataclass
class StaffingSummary:
    """Headline numbers shown next to the staffing chart.

    Attributes:
        current_time_slot: Slot containing ``now``; None unless the day is today.
        current_call_volume: Calls forecast for the current slot (0 if not today).
        current_required_agents: Agents needed in the current slot (0 if not today).
        peak_call_volume: Largest slot volume of the day.
        peak_required_agents: Largest agent requirement of the day.
        is_today: Whether the planned day is the local date.
    """
    current_time_slot: Optional[str]
    current_call_volume: int
    current_required_agents: int
    peak_call_volume: int
    peak_required_agents: int
    is_today: bool


@dataclass
class PipelineResult:
    """Complete result from running the pipeline.

    Attributes:
        forecast: The demand forecast used.
        staffing: DataFrame of time, calls, agents per slot.
        summary: Current and peak figures.
        total_agent_slots: Sum of agents across all slots.
    """
    forecast: ForecastResult
    staffing: pd.DataFrame
    summary: StaffingSummary
    total_agent_slots: int


class Pipeline:
    """Orchestrates forecasting and staffing into one workflow.

    Takes pre-configured Forecaster and Optimizer so the pipeline logic is
    decoupled from their constants.

    Workflow (run method):
        1. forecaster.forecast_day(day) -> ForecastResult
        2. optimizer.optimize_day(samples, targets) -> staffing frame
        3. summarize current and peak slots
    """

    def __init__(
        self,
        forecaster: DemandForecaster = None,
        optimizer: SupplyOptimizer = None,
    ) -> None:
        self.forecaster = forecaster or DemandForecaster()
        self.optimizer = optimizer or SupplyOptimizer()

    def _summarize(self, staffing: pd.DataFrame, day, now: datetime) -> StaffingSummary:
        is_today = pd.Timestamp(day).date() == now.date()

        current_slot = None
        current_calls = current_agents = 0
        if is_today:
            slot_minutes = self.forecaster.config.slot_minutes
            index = (now.hour * 60 + now.minute) // slot_minutes
            row = staffing.iloc[index]
            current_slot = row["time"]
            current_calls = int(row["calls"])
            current_agents = int(row["agents"])

        return StaffingSummary(
            current_time_slot=current_slot,
            current_call_volume=current_calls,
            current_required_agents=current_agents,
            peak_call_volume=int(staffing["calls"].max()),
            peak_required_agents=int(staffing["agents"].max()),
            is_today=is_today,
        )

    def run(
        self,
        day,
        targets: StaffingTargets = None,
        now: datetime = None,
    ) -> PipelineResult:
        """Execute the forecast-to-staffing workflow for one day.

        Args:
            day: The day to plan.
            targets: Service targets; clamped to the optimizer's bounds.
            now: Wall-clock time used to locate the current slot.

        Returns:
            PipelineResult with forecast, per-slot staffing and summary.
        """
        now = now or datetime.now()

        # Step 1: Generate demand forecast
        forecast = self.forecaster.forecast_day(day)

        # Step 2: Staff each half-hour
        staffing = self.optimizer.optimize_day(forecast.samples, targets)

        # Step 3: Aggregate
        summary = self._summarize(staffing, day, now)
        total = int(staffing["agents"].sum())

        logger.info(
            "Planned %s: peak %d calls, peak %d agents, %d agent-slots",
            forecast.timestamps[0].date(), summary.peak_call_volume,
            summary.peak_required_agents, total,
        )
        return PipelineResult(
            forecast=forecast,
            staffing=staffing,
            summary=summary,
            total_agent_slots=total,
        )
