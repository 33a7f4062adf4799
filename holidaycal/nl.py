"""Holiday definitions for the Netherlands."""

import calendar
from functools import partial

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_dag = partial(Holiday, func=calc_day_of_month)
_pasen = partial(Holiday, type=ObservanceType.PUBLIC, func=calc_easter_offset)

NIEUWJAAR = _dag(name="Nieuwjaarsdag", type=ObservanceType.PUBLIC, month=1, day=1)
GOEDE_VRIJDAG = _pasen(name="Goede Vrijdag", offset=-2)
TWEEDE_PAASDAG = _pasen(name="Tweede Paasdag", offset=1)
# King's Day, moved to Saturday when it falls on a Sunday
KONINGSDAG = _dag(
    name="Koningsdag", month=4, day=27, observed=(AltDay(day=calendar.SUNDAY, offset=-1),)
)
BEVRIJDINGSDAG = _dag(name="Bevrijdingsdag", month=5, day=5)  # Liberation Day
HEMELVAART = _pasen(name="Hemelvaartsdag", offset=39)
TWEEDE_PINKSTERDAG = _pasen(name="Tweede Pinksterdag", offset=50)
EERSTE_KERSTDAG = _dag(name="Eerste Kerstdag", type=ObservanceType.PUBLIC, month=12, day=25)
TWEEDE_KERSTDAG = _dag(name="Tweede Kerstdag", type=ObservanceType.PUBLIC, month=12, day=26)

HOLIDAYS = (
    NIEUWJAAR, GOEDE_VRIJDAG, TWEEDE_PAASDAG, KONINGSDAG, BEVRIJDINGSDAG,
    HEMELVAART, TWEEDE_PINKSTERDAG, EERSTE_KERSTDAG, TWEEDE_KERSTDAG,
)