import pytest
from datetime import date

from calc_aposentadoria.utils.calendar.month_range import resolve_period_range, PeriodRange

TODAY = date(2024, 3, 15)


def test_12m_resolves_to_current_month_only():
    rng = resolve_period_range("12m", today=TODAY)
    assert rng.period == "12m"
    assert rng.start == "2024-03"
    assert rng.end == "2024-03"


def test_5y_and_10y_go_back_same_month():
    assert resolve_period_range("5y", today=TODAY).start == "2019-03"
    assert resolve_period_range("10y", today=TODAY).start == "2014-03"


@pytest.mark.parametrize("period", [None, "", "3y", "abc"])
def test_unknown_or_missing_period_defaults_to_10y(period):
    rng = resolve_period_range(period, today=TODAY)
    assert rng.period == "10y"
    assert (rng.start, rng.end) == ("2014-03", "2024-03")


def test_custom_start_end_overrides_keyword():
    rng = resolve_period_range("12m", start="2020-01", end="2021-06", today=TODAY)
    assert (rng.start, rng.end) == ("2020-01", "2021-06")


def test_custom_requires_both_bounds():
    # só start: ignora e usa o período
    rng = resolve_period_range("5y", start="2020-01", today=TODAY)
    assert rng.start == "2019-03"


def test_malformed_custom_bound_raises():
    with pytest.raises(ValueError):
        resolve_period_range("10y", start="01/2020", end="2021-06", today=TODAY)


def test_query_bounds_first_and_last_day_of_month():
    rng = PeriodRange(period="10y", start="2014-03", end="2024-02")
    assert rng.start_date_str() == "01/03/2014"
    assert rng.end_date_str() == "29/02/2024"  # bissexto

    rng = PeriodRange(period="10y", start="2023-12", end="2023-04")
    assert rng.end_date_str() == "30/04/2023"
