from datetime import date

import pytest

from holidaycal import dk
from holidaycal.holiday import Holiday

YEARS = range(2015, 2023)


def _fixed(holiday, month, day):
    return [(holiday, y, date(y, month, day)) for y in YEARS]


def _listed(holiday, dates):
    return [(holiday, d.year, d) for d in dates]


CASES = (
    _fixed(dk.NYTAARSDAG, 1, 1)
    + _listed(
        dk.SKAERTORSDAG,
        [date(2015, 4, 2), date(2016, 3, 24), date(2017, 4, 13), date(2018, 3, 29),
         date(2019, 4, 18), date(2020, 4, 9), date(2021, 4, 1), date(2022, 4, 14)],
    )
    + _listed(
        dk.LANGFREDAG,
        [date(2015, 4, 3), date(2016, 3, 25), date(2017, 4, 14), date(2018, 3, 30),
         date(2019, 4, 19), date(2020, 4, 10), date(2021, 4, 2), date(2022, 4, 15)],
    )
    + _listed(
        dk.ANDEN_PAASKEDAG,
        [date(2015, 4, 6), date(2016, 3, 28), date(2017, 4, 17), date(2018, 4, 2),
         date(2019, 4, 22), date(2020, 4, 13), date(2021, 4, 5), date(2022, 4, 18)],
    )
    + _listed(
        dk.STORE_BEDEDAG,
        [date(2015, 5, 1), date(2016, 4, 22), date(2017, 5, 12), date(2018, 4, 27),
         date(2019, 5, 17), date(2020, 5, 8), date(2021, 4, 30), date(2022, 5, 13)],
    )
    + _listed(
        dk.KRISTI_HIMMELFARTSDAG,
        [date(2015, 5, 14), date(2016, 5, 5), date(2017, 5, 25), date(2018, 5, 10),
         date(2019, 5, 30), date(2020, 5, 21), date(2021, 5, 13), date(2022, 5, 26)],
    )
    + _listed(
        dk.ANDEN_PINSEDAG,
        [date(2015, 5, 25), date(2016, 5, 16), date(2017, 6, 5), date(2018, 5, 21),
         date(2019, 6, 10), date(2020, 6, 1), date(2021, 5, 24), date(2022, 6, 6)],
    )
    + _fixed(dk.GRUNDLOVSDAG, 6, 5)
    + _fixed(dk.JULEDAG, 12, 25)
    + _fixed(dk.ANDEN_JULEDAG, 12, 26)
)


@pytest.mark.parametrize("holiday, year, want", CASES)
def test_holidays(holiday, year, want):
    assert Holiday.calc(holiday, year) == (want, want)


def test_holiday_list_order():
    assert [h.name for h in dk.HOLIDAYS] == [
        "Nytårsdag",
        "Skærtorsdag",
        "Langfredag",
        "Anden påskedag",
        "Store bededag",
        "Kristi Himmelfartsdag",
        "Anden Pinsedag",
        "Grundlovsdag",
        "Juledag",
        "Anden juledag",
    ]
    days = [Holiday.calc(h, 2020)[0] for h in dk.HOLIDAYS]
    assert days == sorted(days)
    assert days[0] == date(2020, 1, 1)