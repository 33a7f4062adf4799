from datetime import date

import pytest

from holidaycal import pl
from holidaycal.holiday import Holiday

YEARS = range(2015, 2023)

EASTER_MONDAY = [(4, 6), (3, 28), (4, 17), (4, 2), (4, 22), (4, 13), (4, 5), (4, 18)]
CORPUS_CHRISTI = [(6, 4), (5, 26), (6, 15), (5, 31), (6, 20), (6, 11), (6, 3), (6, 16)]


def _cases(holiday, actual, observed=None):
    observed = observed or actual
    return [
        (holiday, year, date(year, *act), date(year, *obs))
        for year, act, obs in zip(YEARS, actual, observed)
    ]


CASES = (
    _cases(pl.NEW_YEAR, [(1, 1)] * 8)
    + _cases(pl.THREE_KINGS, [(1, 6)] * 8)
    + _cases(pl.EASTER_MONDAY, EASTER_MONDAY)
    + _cases(pl.LABOUR_DAY, [(5, 1)] * 8)
    + _cases(pl.CONSTITUTION_DAY, [(5, 3)] * 8)
    + _cases(pl.CORPUS_CHRISTI, CORPUS_CHRISTI)
    + _cases(pl.ASSUMPTION_BLESSED_VIRGIN_MARY, [(8, 15)] * 8)
    + _cases(pl.ALL_SAINTS, [(11, 1)] * 8)
    + _cases(pl.NATIONAL_INDEPENDENCE_DAY, [(11, 11)] * 8)
    + _cases(pl.CHRISTMAS_DAY_ONE, [(12, 25)] * 8)
    + _cases(pl.CHRISTMAS_DAY_TWO, [(12, 26)] * 8)
)


@pytest.mark.parametrize("holiday, year, want_actual, want_observed", CASES)
def test_holidays(holiday, year, want_actual, want_observed):
    assert Holiday.calc(holiday, year) == (want_actual, want_observed)


def test_holidays_are_in_calendar_order():
    days = [Holiday.calc(holiday, 2019)[0] for holiday in pl.HOLIDAYS]
    assert days == sorted(days)