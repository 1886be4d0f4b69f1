"""Supply Optimizer - Converts forecasted call volume into required agents."""

import logging
import math
from dataclasses import dataclass

import pandas as pd

from .config import StaffingConfig
from .demand_forecaster import VolumeSample

logger = logging.getLogger(__name__)


@dataclass
class StaffingTargets:
    """Service targets the staffing answer must satisfy.

    Attributes:
        sla: Target service level in percent, default 90
        wait_time: Target wait time in seconds, default 30
        occupancy: Target agent occupancy in percent, default 85
    """
    sla: float = 90.0
    wait_time: float = 30.0
    occupancy: float = 85.0


@dataclass
class TargetBounds:
    """Input ranges a UI keeps the targets within.

    Attributes:
        sla: (min, max) service level percent
        wait_time: (min, max) wait seconds
        occupancy: (min, max) occupancy percent
    """
    sla: tuple = (70.0, 99.0)
    wait_time: tuple = (10.0, 60.0)
    occupancy: tuple = (60.0, 95.0)

    def clamp(self, targets: StaffingTargets) -> StaffingTargets:
        """Return a copy of ``targets`` with every field inside its range."""
        values = {}
        for field in ("sla", "wait_time", "occupancy"):
            low, high = getattr(self, field)
            value = getattr(targets, field)
            clamped = min(high, max(low, value))
            if clamped != value:
                logger.warning("Target %s=%s clamped to %s", field, value, clamped)
            values[field] = clamped
        return StaffingTargets(**values)


@dataclass
class StaffingSample:
    """A volume sample extended with the agents it requires."""
    time: str
    calls: int
    agents: int


def _check_finite(name: str, value: float) -> None:
    if not math.isfinite(value):
        raise ValueError(f"{name} must be a finite number, got {value!r}")


class SupplyOptimizer:
    """Finds the agent count needed for each interval's call volume.

    This is a heuristic, not a queueing model: no Erlang-C inversion is
    performed. Three agent counts are derived independently, one per target,
    and the largest one (the binding target) is taken, plus a safety margin.

    Example:
        >>> optimizer = SupplyOptimizer()
        >>> optimizer.required_agents(60, 90, 30, 80)
        8
    """

    def __init__(
        self,
        config: StaffingConfig = None,
        bounds: TargetBounds = None,
    ) -> None:
        """Initialize the optimizer.

        Args:
            config: Heuristic constants (handle time, baselines, multipliers).
            bounds: Ranges applied by optimize_day() before calculating.
        """
        self.config = config or StaffingConfig()
        self.bounds = bounds or TargetBounds()

    def required_agents(
        self,
        calls_per_half_hour: float,
        target_sla: float,
        target_wait: float,
        target_occupancy: float,
    ) -> int:
        """Agents needed to handle one half-hour of calls.

        Args:
            calls_per_half_hour: Forecasted calls in the interval.
            target_sla: Service level target in percent.
            target_wait: Wait time target in seconds.
            target_occupancy: Occupancy target in percent.

        Returns:
            Required agent count, never below ``min_agents``.

        Raises:
            ValueError: If the volume is negative or any input is not finite.
        """
        _check_finite("calls_per_half_hour", calls_per_half_hour)
        _check_finite("target_sla", target_sla)
        _check_finite("target_wait", target_wait)
        _check_finite("target_occupancy", target_occupancy)
        if calls_per_half_hour < 0:
            raise ValueError(
                f"calls_per_half_hour cannot be negative, got {calls_per_half_hour}"
            )

        cfg = self.config
        calls_per_hour = calls_per_half_hour * 2
        base_agents = calls_per_hour * (cfg.handle_time_minutes / 60)

        sla_agents = base_agents * (target_sla / cfg.baseline_sla) * cfg.sla_multiplier
        wait_agents = (
            base_agents
            * (cfg.baseline_wait / max(target_wait, cfg.min_wait))
            * cfg.wait_multiplier
        )
        occupancy_agents = base_agents * (
            cfg.baseline_occupancy / max(target_occupancy, cfg.min_occupancy)
        )

        binding = max(sla_agents, wait_agents, occupancy_agents)
        required = max(cfg.min_agents, math.ceil(binding * cfg.safety_margin))

        logger.debug(
            "calls=%s sla=%.2f wait=%.2f occ=%.2f -> %d agents",
            calls_per_half_hour, sla_agents, wait_agents, occupancy_agents, required,
        )
        return required

    def staffing_curve(
        self,
        samples: list[VolumeSample],
        targets: StaffingTargets,
    ) -> list[StaffingSample]:
        """Map each volume sample to a staffing sample using ``targets`` as given."""
        return [
            StaffingSample(
                time=s.time,
                calls=s.calls,
                agents=self.required_agents(
                    s.calls, targets.sla, targets.wait_time, targets.occupancy
                ),
            )
            for s in samples
        ]

    def optimize_day(
        self,
        samples: list[VolumeSample],
        targets: StaffingTargets = None,
    ) -> pd.DataFrame:
        """Clamp the targets, then staff a whole day.

        Returns:
            DataFrame with columns time, calls, agents (one row per slot).
        """
        targets = self.bounds.clamp(targets or StaffingTargets())
        curve = self.staffing_curve(samples, targets)
        return pd.DataFrame(
            {
                "time": [s.time for s in curve],
                "calls": [s.calls for s in curve],
                "agents": [s.agents for s in curve],
            }
        )


def required_agents(
    calls_per_half_hour: float,
    target_sla: float,
    target_wait: float,
    target_occupancy: float,
) -> int:
    """Module-level shortcut using the default heuristic constants."""
    return SupplyOptimizer().required_agents(
        calls_per_half_hour, target_sla, target_wait, target_occupancy
    )
