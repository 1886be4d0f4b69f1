"""
Performance Emulator Module
===========================

Predicts service metrics for a what-if staffing scenario:
    (agent_count, calls_per_hour) -> (sla, wait_time, occupancy)

Like the staffing calculator this is a linear heuristic around a fixed
capacity assumption (30 calls per agent-hour), not a queueing model.
Each metric is rated good / warning / critical and, when off target,
paired with a short recommendation for the planner.
"""

import logging
import math
from dataclasses import dataclass

from .config import SimulationConfig

logger = logging.getLogger(__name__)

GOOD = "good"
WARNING = "warning"
CRITICAL = "critical"


def _round_half_up(value: float, digits: int = 0) -> float:
    scale = 10 ** digits
    return math.floor(value * scale + 0.5) / scale


@dataclass
class PerformanceMetrics:
    """Container for predicted system performance.

    Attributes:
        sla: Service level in percent, one decimal.
        wait_time: Average wait in whole seconds.
        occupancy: Agent occupancy in whole percent.
    """
    sla: float
    wait_time: int
    occupancy: int

    def __str__(self):
        return (
            f"SLA: {self.sla:.1f}% | "
            f"Wait: {self.wait_time}s | "
            f"Occupancy: {self.occupancy}%"
        )


def rate_sla(sla: float) -> str:
    if sla >= 90:
        return GOOD
    if sla >= 80:
        return WARNING
    return CRITICAL


def rate_wait_time(wait: float) -> str:
    if wait < 30:
        return GOOD
    if wait <= 60:
        return WARNING
    return CRITICAL


def rate_occupancy(occupancy: float) -> str:
    if 70 <= occupancy <= 85:
        return GOOD
    if 60 <= occupancy < 70 or 85 < occupancy <= 90:
        return WARNING
    return CRITICAL


def recommendations(metrics: PerformanceMetrics) -> dict[str, str]:
    """Advice for every metric that is off target, keyed by metric name."""
    advice = {}
    if metrics.sla < 90:
        advice["sla"] = "Increase agent supply to boost service level."
    if metrics.wait_time > 30:
        advice["wait_time"] = "Reduce call volume or add agents to lower wait times."
    if metrics.occupancy > 85:
        advice["occupancy"] = "Agents are overworked. Consider increasing supply."
    elif metrics.occupancy < 70:
        advice["occupancy"] = "Agents are underutilized. You can reduce supply."
    return advice


class PerformanceEmulator:
    """What-if simulator for agent count vs. hourly call volume.

    Data Flow:
        agent_count + calls_per_hour -> predict_metrics() -> PerformanceMetrics
        PerformanceMetrics -> ratings() / recommendations()
    """

    def __init__(self, config: SimulationConfig = None) -> None:
        self.config = config or SimulationConfig()

    def clamp_agents(self, agent_count: int) -> int:
        low, high = self.config.agent_range
        return int(min(high, max(low, agent_count)))

    def clamp_inputs(self, agent_count: int, calls_per_hour: float) -> tuple[int, int]:
        """Snap slider inputs to their ranges (volume also to its step)."""
        cfg = self.config
        agents = self.clamp_agents(agent_count)

        low, high = cfg.volume_range
        volume = min(high, max(low, calls_per_hour))
        volume = int(low + _round_half_up((volume - low) / cfg.volume_step) * cfg.volume_step)
        return agents, min(volume, high)

    def predict_metrics(
        self,
        agent_count: int = None,
        calls_per_hour: float = None,
    ) -> PerformanceMetrics:
        """Predict SLA, wait and occupancy for a staffing scenario.

        The agent surplus over the base requirement moves SLA and wait
        linearly; occupancy is the base requirement over the agents on hand.

        Args:
            agent_count: Agents on the phones; defaults to ``default_agents``.
            calls_per_hour: Expected hourly call volume; defaults to
                ``default_calls_per_hour``.

        Returns:
            PerformanceMetrics, each value clamped to its display range.

        Raises:
            ValueError: If agent_count is not positive.
        """
        cfg = self.config
        if agent_count is None:
            agent_count = cfg.default_agents
        if calls_per_hour is None:
            calls_per_hour = cfg.default_calls_per_hour
        if agent_count <= 0:
            raise ValueError(f"agent_count must be positive, got {agent_count}")

        base_agents = calls_per_hour / cfg.calls_per_agent_hour
        surplus = agent_count - base_agents

        sla = cfg.sla_baseline + surplus * cfg.sla_per_surplus_agent
        sla = min(cfg.sla_range[1], max(cfg.sla_range[0], sla))

        wait = max(cfg.min_wait, cfg.wait_baseline - surplus * cfg.wait_per_surplus_agent)

        occupancy = 100 * (base_agents / agent_count)
        occupancy = min(cfg.occupancy_range[1], max(cfg.occupancy_range[0], occupancy))

        metrics = PerformanceMetrics(
            sla=_round_half_up(sla, 1),
            wait_time=int(_round_half_up(wait)),
            occupancy=int(_round_half_up(occupancy)),
        )
        logger.debug("agents=%d calls/h=%s -> %s", agent_count, calls_per_hour, metrics)
        return metrics

    def ratings(self, metrics: PerformanceMetrics) -> dict[str, str]:
        return {
            "sla": rate_sla(metrics.sla),
            "wait_time": rate_wait_time(metrics.wait_time),
            "occupancy": rate_occupancy(metrics.occupancy),
        }

    def recommendations(self, metrics: PerformanceMetrics) -> dict[str, str]:
        return recommendations(metrics)
