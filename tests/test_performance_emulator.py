import pytest

from callcenter_wfm.workforce import PerformanceEmulator, PerformanceMetrics
from callcenter_wfm.workforce.performance_emulator import (
    CRITICAL,
    GOOD,
    WARNING,
    rate_occupancy,
    rate_sla,
    rate_wait_time,
    recommendations,
)


def test_default_scenario():
    # 1200 calls/h needs 40 agents; 45 on hand is a surplus of 5
    metrics = PerformanceEmulator().predict_metrics(45, 1200)
    assert metrics == PerformanceMetrics(sla=92.5, wait_time=20, occupancy=89)


def test_understaffed_scenario_hits_the_clamps():
    metrics = PerformanceEmulator().predict_metrics(20, 2000)
    assert metrics.sla == 10.0
    assert metrics.occupancy == 100
    assert metrics.wait_time > 60


def test_overstaffed_scenario_hits_the_clamps():
    metrics = PerformanceEmulator().predict_metrics(80, 500)
    assert metrics.sla == 99.9
    assert metrics.wait_time == 5
    assert metrics.occupancy == 40


def test_non_positive_agents_raise():
    with pytest.raises(ValueError):
        PerformanceEmulator().predict_metrics(0, 1200)


def test_clamp_inputs_snaps_to_slider_ranges():
    emulator = PerformanceEmulator()
    assert emulator.clamp_inputs(100, 2130) == (80, 2000)
    assert emulator.clamp_inputs(10, 1440) == (20, 1450)
    assert emulator.clamp_inputs(45, 1425) == (45, 1450)
    assert emulator.clamp_inputs(45, 100) == (45, 500)


@pytest.mark.parametrize(
    "sla, expected", [(95, GOOD), (90, GOOD), (85, WARNING), (80, WARNING), (79.9, CRITICAL)]
)
def test_rate_sla(sla, expected):
    assert rate_sla(sla) == expected


@pytest.mark.parametrize(
    "wait, expected", [(10, GOOD), (29, GOOD), (30, WARNING), (60, WARNING), (61, CRITICAL)]
)
def test_rate_wait_time(wait, expected):
    assert rate_wait_time(wait) == expected


@pytest.mark.parametrize(
    "occupancy, expected",
    [(70, GOOD), (85, GOOD), (65, WARNING), (88, WARNING), (59, CRITICAL), (95, CRITICAL)],
)
def test_rate_occupancy(occupancy, expected):
    assert rate_occupancy(occupancy) == expected


def test_recommendations_only_for_off_target_metrics():
    assert recommendations(PerformanceMetrics(sla=95.0, wait_time=20, occupancy=80)) == {}

    advice = recommendations(PerformanceMetrics(sla=85.0, wait_time=45, occupancy=92))
    assert set(advice) == {"sla", "wait_time", "occupancy"}
    assert "overworked" in advice["occupancy"]

    advice = recommendations(PerformanceMetrics(sla=99.9, wait_time=5, occupancy=40))
    assert list(advice) == ["occupancy"]
    assert "underutilized" in advice["occupancy"]


def test_ratings_for_default_scenario():
    emulator = PerformanceEmulator()
    metrics = emulator.predict_metrics(45, 1200)
    assert emulator.ratings(metrics) == {"sla": GOOD, "wait_time": GOOD, "occupancy": WARNING}
    assert list(emulator.recommendations(metrics)) == ["occupancy"]


def test_metrics_str():
    assert str(PerformanceMetrics(sla=92.5, wait_time=20, occupancy=89)) == (
        "SLA: 92.5% | Wait: 20s | Occupancy: 89%"
    )


def test_defaults_apply_when_inputs_are_omitted():
    emulator = PerformanceEmulator()
    assert emulator.predict_metrics() == emulator.predict_metrics(45, 1200)


def test_clamp_agents_leaves_volume_alone():
    emulator = PerformanceEmulator()
    assert emulator.clamp_agents(5) == 20
    assert emulator.clamp_agents(500) == 80
    assert emulator.clamp_agents(45) == 45
