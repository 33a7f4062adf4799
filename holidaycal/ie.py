"""Holiday definitions for the Republic of Ireland."""

import calendar
from functools import partial

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

_dated = partial(Holiday, func=calc_day_of_month)
_first_monday = partial(Holiday, weekday=calendar.MONDAY, offset=1, func=calc_weekday_offset)

NEW_YEAR = _dated(name="New Year's Day", month=1, day=1)
SAINT_PATRICK_DAY = _dated(name="Saint Patrick's Day", month=3, day=17)
EASTER_MONDAY = Holiday(name="Easter Monday", offset=1, func=calc_easter_offset)
FIRST_MONDAY_MAY = _first_monday(name="First Monday in May", month=5)
FIRST_MONDAY_JUNE = _first_monday(name="First Monday in June", month=6)
FIRST_MONDAY_AUGUST = _first_monday(name="First Monday in August", month=8)
LAST_MONDAY_IN_OCTOBER = _first_monday(
    name="Last Monday in October", type=ObservanceType.PUBLIC, month=10, offset=-1
)
CHRISTMAS_DAY = _dated(name="Christmas Day", month=12, day=25)
SAINT_STEPHEN_DAY = _dated(name="Saint Stephen's Day", month=12, day=26)

HOLIDAYS = (
    NEW_YEAR, SAINT_PATRICK_DAY, EASTER_MONDAY, FIRST_MONDAY_MAY, FIRST_MONDAY_JUNE,
    FIRST_MONDAY_AUGUST, LAST_MONDAY_IN_OCTOBER, CHRISTMAS_DAY, SAINT_STEPHEN_DAY,
)