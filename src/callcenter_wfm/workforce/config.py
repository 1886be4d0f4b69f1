"""Configuration dataclasses for forecasting, staffing and simulation."""

from dataclasses import dataclass


@dataclass
class ForecastConfig:
    """Constants for the seeded demand curves.

    Attributes:
        slots_per_day: Number of intraday buckets (48 half-hours).
        slot_minutes: Length of each bucket in minutes.
        base_volume: Flat floor of the intraday curve.
        peaks: (center_slot, amplitude) pairs for the Gaussian rush peaks.
        peak_variance: Denominator of the Gaussian exponent.
        noise_scale: Maximum noise added per slot.
        noise_stride: Seed offset multiplier per slot index.
        weekday_volume: Base daily total Monday-Friday.
        weekend_volume: Base daily total Saturday/Sunday.
        daily_noise_span: Width of the daily noise band, centred on zero.
        min_daily_volume: Floor applied to daily totals.
        peak_hour_share: Fraction of a daily total expected in the busiest hour.
    """
    slots_per_day: int = 48
    slot_minutes: int = 30
    base_volume: float = 20.0
    peaks: tuple = ((20, 100.0), (30, 80.0))
    peak_variance: float = 50.0
    noise_scale: float = 15.0
    noise_stride: int = 13
    weekday_volume: float = 12500.0
    weekend_volume: float = 6000.0
    daily_noise_span: float = 2000.0
    min_daily_volume: int = 4000
    peak_hour_share: float = 0.12


@dataclass
class StaffingConfig:
    """Constants of the worst-of-three staffing heuristic.

    Attributes:
        handle_time_minutes: Assumed average handle time per call.
        baseline_sla: SLA percent the SLA factor is normalised against.
        baseline_wait: Wait seconds the wait factor is normalised against.
        baseline_occupancy: Occupancy percent the occupancy factor uses.
        sla_multiplier: Uplift applied to the SLA-driven count.
        wait_multiplier: Uplift applied to the wait-driven count.
        safety_margin: Final uplift applied to the binding count.
        min_wait: Lower guard on target wait (avoids divide-by-near-zero).
        min_occupancy: Lower guard on target occupancy.
        min_agents: Floor on any staffing answer.
    """
    handle_time_minutes: float = 3.0
    baseline_sla: float = 90.0
    baseline_wait: float = 30.0
    baseline_occupancy: float = 85.0
    sla_multiplier: float = 1.15
    wait_multiplier: float = 1.1
    safety_margin: float = 1.05
    min_wait: float = 5.0
    min_occupancy: float = 50.0
    min_agents: int = 1


@dataclass
class SimulationConfig:
    """Constants for the what-if performance simulator."""
    calls_per_agent_hour: float = 30.0
    sla_baseline: float = 80.0
    sla_per_surplus_agent: float = 2.5
    sla_range: tuple = (10.0, 99.9)
    wait_baseline: float = 60.0
    wait_per_surplus_agent: float = 8.0
    min_wait: float = 5.0
    occupancy_range: tuple = (40.0, 100.0)
    default_agents: int = 45
    default_calls_per_hour: int = 1200
    agent_range: tuple = (20, 80)
    volume_range: tuple = (500, 2000)
    volume_step: int = 50
