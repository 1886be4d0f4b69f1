"""
Workforce Management Core
=========================

Computational core behind the contact center dashboard:

1. DemandForecaster - Seeded daily and weekly call-volume curves
2. SupplyOptimizer - Required agents per half-hour from service targets
3. PerformanceEmulator - What-if SLA/wait/occupancy for a staffing level
4. Pipeline - Orchestrates forecast -> staffing -> summary for one day
5. DashboardState - Selected day/week and the current-time marker

Data Flow:
    date -> DemandForecaster.daily_breakdown() -> 48 VolumeSamples
                                                    |
                                                    v
    StaffingTargets -> SupplyOptimizer.optimize_day() -> agents per slot
                                                    |
                                                    v
                                   Pipeline.run() -> PipelineResult
"""

from .config import ForecastConfig, SimulationConfig, StaffingConfig
from .demand_forecaster import (
    DailyVolume,
    DemandForecaster,
    ForecastResult,
    VolumeSample,
    daily_breakdown,
    seeded_random,
    volume_for_date,
    weekly_volume,
)
from .supply_optimizer import (
    StaffingSample,
    StaffingTargets,
    SupplyOptimizer,
    TargetBounds,
    required_agents,
)
from .performance_emulator import PerformanceEmulator, PerformanceMetrics
from .pipeline import Pipeline, PipelineResult, StaffingSummary
from .navigation import DashboardState, TimeMarkerPoller, current_slot_label

__all__ = [
    "ForecastConfig",
    "SimulationConfig",
    "StaffingConfig",
    "DailyVolume",
    "DemandForecaster",
    "ForecastResult",
    "VolumeSample",
    "daily_breakdown",
    "seeded_random",
    "volume_for_date",
    "weekly_volume",
    "StaffingSample",
    "StaffingTargets",
    "SupplyOptimizer",
    "TargetBounds",
    "required_agents",
    "PerformanceEmulator",
    "PerformanceMetrics",
    "Pipeline",
    "PipelineResult",
    "StaffingSummary",
    "DashboardState",
    "TimeMarkerPoller",
    "current_slot_label",
]
