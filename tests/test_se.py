import calendar
from datetime import date, timedelta

import pytest

from holidaycal import se
from holidaycal.holiday import Holiday

YEARS = range(2015, 2023)

GOOD_FRIDAY = [(4, 3), (3, 25), (4, 14), (3, 30), (4, 19), (4, 10), (4, 2), (4, 15)]
EASTER_MONDAY = [(4, 6), (3, 28), (4, 17), (4, 2), (4, 22), (4, 13), (4, 5), (4, 18)]
ASCENSION = [(5, 14), (5, 5), (5, 25), (5, 10), (5, 30), (5, 21), (5, 13), (5, 26)]


def _cases(holiday, actual, observed=None):
    observed = observed or actual
    return [
        (holiday, year, date(year, *act), date(year, *obs))
        for year, act, obs in zip(YEARS, actual, observed)
    ]


CASES = (
    _cases(se.NYARSDAGEN, [(1, 1)] * 8)
    + _cases(se.TRETTONDEDAG_JUL, [(1, 6)] * 8)
    + _cases(se.LANGFREDAGEN, GOOD_FRIDAY)
    + _cases(se.ANNANDAG_PASK, EASTER_MONDAY)
    + _cases(se.FORSTA_MAJ, [(5, 1)] * 8)
    + _cases(se.KRISTI_HIMMELFARDSDAG, ASCENSION)
    + _cases(se.NATIONALDAGEN, [(6, 6)] * 8)
    + _cases(
        se.MIDSOMMARAFTON,
        [(6, 19), (6, 24), (6, 23), (6, 22), (6, 21), (6, 19), (6, 25), (6, 24)],
    )
    + _cases(
        se.MIDSOMMARDAGEN,
        [(6, 20), (6, 25), (6, 24), (6, 23), (6, 22), (6, 20), (6, 26), (6, 25)],
    )
    + _cases(
        se.ALLA_HELGONS_DAG,
        [(10, 31), (11, 5), (11, 4), (11, 3), (11, 2), (10, 31), (11, 6), (11, 5)],
    )
    + _cases(se.JULAFTON, [(12, 24)] * 8)
    + _cases(se.JULDAGEN, [(12, 25)] * 8)
    + _cases(se.ANNANDAG_JUL, [(12, 26)] * 8)
    + _cases(se.NYARSAFTON, [(12, 31)] * 8)
)


@pytest.mark.parametrize("holiday, year, want_actual, want_observed", CASES)
def test_holidays(holiday, year, want_actual, want_observed):
    assert Holiday.calc(holiday, year) == (want_actual, want_observed)


@pytest.mark.parametrize("year", range(2000, 2041))
def test_midsummer_eve_is_the_friday_before_midsummer_day(year):
    eve, _ = se.MIDSOMMARAFTON.calc(year)
    day, _ = se.MIDSOMMARDAGEN.calc(year)
    assert eve.weekday() == calendar.FRIDAY
    assert day.weekday() == calendar.SATURDAY
    assert day - eve == timedelta(days=1)
    assert date(year, 6, 20) <= day <= date(year, 6, 26)