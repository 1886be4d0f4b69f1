import pandas as pd
import pytest

from callcenter_wfm.workforce.metrics_history import (
    SortConfig,
    generate_history,
    kpi_summary,
    page,
    round_half_up,
    sla_band,
    sort_history,
    toggle_sort,
)


@pytest.fixture(scope="module")
def history():
    return generate_history()


def test_history_covers_three_years(history):
    assert len(history) == 365 + 366 + 365
    assert list(history.columns) == ["date", "sla", "wait_time", "calls"]
    assert history["date"].iloc[0] == pd.Timestamp("2023-01-01")
    assert history["date"].iloc[-1] == pd.Timestamp("2025-12-31")


def test_history_values_stay_in_their_bands(history):
    weekend = history["date"].dt.dayofweek >= 5
    assert history.loc[weekend, "calls"].between(4000, 6999).all()
    assert history.loc[~weekend, "calls"].between(9000, 11999).all()
    assert history["sla"].between(87, 100).all()
    assert history["wait_time"].between(30, 49).all()


def test_history_is_reproducible_per_seed():
    pd.testing.assert_frame_equal(generate_history(seed=7), generate_history(seed=7))
    assert not generate_history(seed=7)["calls"].equals(generate_history(seed=8)["calls"])


def test_default_sort_is_newest_first(history):
    ordered = sort_history(history)
    assert ordered["date"].iloc[0] == pd.Timestamp("2025-12-31")
    assert ordered["date"].is_monotonic_decreasing


def test_sort_by_calls_ascending(history):
    ordered = sort_history(history, SortConfig(key="calls", direction="asc"))
    assert ordered["calls"].is_monotonic_increasing


def test_sort_rejects_unknown_key(history):
    with pytest.raises(ValueError):
        sort_history(history, SortConfig(key="agents"))
    with pytest.raises(ValueError):
        sort_history(history, SortConfig(direction="up"))


def test_toggle_sort():
    current = SortConfig(key="date", direction="desc")
    assert toggle_sort(current, "date") == SortConfig(key="date", direction="asc")
    assert toggle_sort(SortConfig(key="date", direction="asc"), "date") == SortConfig(key="date", direction="desc")
    assert toggle_sort(current, "sla") == SortConfig(key="sla", direction="desc")


@pytest.mark.parametrize("sla, band", [(96.0, "good"), (90.0, "good"), (85.5, "warning"), (79.9, "critical")])
def test_sla_band(sla, band):
    assert sla_band(sla) == band


def test_page_limits_rows(history):
    rows, total = page(history)
    assert len(rows) == 500
    assert total == len(history)


def test_kpi_summary_compares_consecutive_weeks():
    dates = pd.date_range("2024-03-01", periods=14, freq="D")
    frame = pd.DataFrame(
        {
            "date": dates,
            "sla": [90.0] * 7 + [94.0] * 7,
            "wait_time": [40] * 7 + [35] * 7,
            "calls": [1000] * 7 + [1100] * 7,
        }
    )
    sla, wait, calls = kpi_summary(frame, as_of="2024-03-14")

    assert sla.value == pytest.approx(94.0)
    assert sla.change == pytest.approx(4.0)
    assert sla.is_positive

    assert wait.value == pytest.approx(35.0)
    assert wait.change == pytest.approx(-5.0)
    assert wait.is_positive

    assert calls.value == 7700
    assert calls.previous == 7000
    assert calls.is_positive


def test_kpi_summary_needs_two_windows():
    frame = pd.DataFrame(
        {"date": pd.date_range("2024-03-01", periods=3), "sla": 90.0, "wait_time": 40, "calls": 1000}
    )
    with pytest.raises(ValueError):
        kpi_summary(frame, as_of="2024-03-03")


def test_round_half_up_matches_to_fixed():
    # np.round would give 92.2 and 93.2 (half to even)
    assert round_half_up([92.25, 93.25, 87.04], 1).tolist() == [92.3, 93.3, 87.0]
    assert round_half_up(2.5) == 3.0


def test_history_sla_has_one_decimal(history):
    assert (history["sla"] * 10 - (history["sla"] * 10).round()).abs().max() < 1e-9
