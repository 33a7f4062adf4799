from datetime import date

import pytest

from holidaycal import si
from holidaycal.holiday import Holiday, ObservanceType


def _fixed(h, month, day):
    return [(h, y, date(y, month, day), date(y, month, day)) for y in range(2015, 2023)]


def _same(h, days):
    return [(h, y, date(y, m, dd), date(y, m, dd)) for y, m, dd in days]


CASES = (
    _fixed(si.NOVO_LETO, 1, 1)
    + _fixed(si.NOVO_LETO_2, 1, 2)
    + _fixed(si.PRESERNOV_DAN, 2, 8)
    + _fixed(si.DAN_UPORA_PROTI_OKUPATORJU, 4, 27)
    + _same(
        si.VELIKA_NOC,
        [
            (2015, 4, 5), (2016, 3, 27), (2017, 4, 16), (2018, 4, 1),
            (2019, 4, 21), (2020, 4, 12), (2021, 4, 4), (2022, 4, 17),
        ],
    )
    + _same(
        si.VELIKONOCNI_PONEDELJEK,
        [
            (2015, 4, 6), (2016, 3, 28), (2017, 4, 17), (2018, 4, 2),
            (2019, 4, 22), (2020, 4, 13), (2021, 4, 5), (2022, 4, 18),
        ],
    )
    + _same(
        si.BINKOSTNA_NEDELJA,
        [
            (2015, 5, 24), (2016, 5, 15), (2017, 6, 4), (2018, 5, 20),
            (2019, 6, 9), (2020, 5, 31), (2021, 5, 23), (2022, 6, 5),
        ],
    )
    + _fixed(si.PRVI_MAJ, 5, 1)
    + _fixed(si.DRUGI_MAJ, 5, 2)
    + _fixed(si.DAN_DRZAVNOSTI, 6, 25)
    + _fixed(si.MARIJINO_VNEBOVZETJE, 8, 15)
    + _fixed(si.DAN_REFORMACIJE, 10, 31)
    + _fixed(si.DAN_SPOMINA_NA_MRTVE, 11, 1)
    + _fixed(si.BOZIC, 12, 25)
    + _fixed(si.DAN_SAMOSTOJNOSTI_IN_ENOTNOSTI, 12, 26)
)


@pytest.mark.parametrize("holiday, year, want_actual, want_observed", CASES)
def test_holidays(holiday, year, want_actual, want_observed):
    assert Holiday.calc(holiday, year) == (want_actual, want_observed)


def test_holiday_list_order():
    assert si.HOLIDAYS[0] is si.NOVO_LETO
    assert si.HOLIDAYS[-1] is si.DAN_SAMOSTOJNOSTI_IN_ENOTNOSTI
    assert len(si.HOLIDAYS) == 15
    assert Holiday.calc(si.HOLIDAYS[0], 2020)[0] == date(2020, 1, 1)
    assert Holiday.calc(si.HOLIDAYS[-1], 2020)[0] == date(2020, 12, 26)


def test_observance_types():
    assert si.VELIKA_NOC.type == ObservanceType.PUBLIC
    assert si.NOVO_LETO_2.type == ObservanceType.UNKNOWN
    assert Holiday.calc(si.NOVO_LETO_2, 2021) == (date(2021, 1, 2), date(2021, 1, 2))