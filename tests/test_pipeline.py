from datetime import date, datetime

from callcenter_wfm.workforce import Pipeline, StaffingTargets, daily_breakdown


def test_run_for_today_reports_current_slot():
    day = date(2024, 3, 5)
    result = Pipeline().run(day, now=datetime(2024, 3, 5, 10, 40))

    samples = daily_breakdown(day)
    summary = result.summary
    assert summary.is_today
    assert summary.current_time_slot == "10:30"
    assert summary.current_call_volume == samples[21].calls
    assert summary.current_required_agents == result.staffing["agents"].iloc[21]
    assert summary.peak_call_volume == max(s.calls for s in samples)
    assert summary.peak_required_agents == result.staffing["agents"].max()


def test_run_for_other_day_has_no_current_slot():
    result = Pipeline().run(date(2024, 3, 6), now=datetime(2024, 3, 5, 10, 40))
    summary = result.summary
    assert not summary.is_today
    assert summary.current_time_slot is None
    assert summary.current_call_volume == 0
    assert summary.current_required_agents == 0


def test_last_slot_of_the_day():
    result = Pipeline().run(date(2024, 3, 5), now=datetime(2024, 3, 5, 23, 59))
    assert result.summary.current_time_slot == "23:30"


def test_totals_and_forecast_are_consistent():
    result = Pipeline().run(date(2024, 3, 5), StaffingTargets(sla=95, wait_time=20, occupancy=80))
    assert result.total_agent_slots == result.staffing["agents"].sum()
    assert result.forecast.demand.tolist() == result.staffing["calls"].tolist()


def test_stricter_targets_need_more_agents():
    pipeline = Pipeline()
    relaxed = pipeline.run(date(2024, 3, 5), StaffingTargets(sla=70, wait_time=60, occupancy=95))
    strict = pipeline.run(date(2024, 3, 5), StaffingTargets(sla=99, wait_time=10, occupancy=60))
    assert strict.total_agent_slots > relaxed.total_agent_slots
