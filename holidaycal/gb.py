"""Holiday definitions for the United Kingdom."""

import calendar
from functools import partial

from holidaycal.holiday import (
    AltDay,
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
    calc_weekday_offset,
)

# Standard weekend substitution: Saturdays and Sundays move to Monday
_WEEKEND_ALT = (
    AltDay(day=calendar.SATURDAY, offset=2),
    AltDay(day=calendar.SUNDAY, offset=1),
)

_bank_date = partial(Holiday, type=ObservanceType.BANK, func=calc_day_of_month)
_bank_easter = partial(Holiday, type=ObservanceType.BANK, func=calc_easter_offset)
_bank_monday = partial(
    Holiday, type=ObservanceType.BANK, weekday=calendar.MONDAY, func=calc_weekday_offset
)

NEW_YEAR = _bank_date(name="New Year's Day", month=1, day=1, observed=_WEEKEND_ALT)
GOOD_FRIDAY = _bank_easter(name="Good Friday", offset=-2)
EASTER_MONDAY = _bank_easter(name="Easter Monday", offset=1)
# First Monday of May, moved for VE Day in 2020
EARLY_MAY = _bank_monday(name="Early May", month=5, offset=1, except_years=(2020,))
# The 75th anniversary of the end of WWII
VE_DAY = _bank_date(name="VE Day", month=5, day=8, start_year=2020, end_year=2020)
SPRING_HOLIDAY = _bank_monday(name="Spring Bank Holiday", month=5, offset=-1)  # last Monday
SUMMER_HOLIDAY_SCOTLAND = _bank_monday(name="Summer Bank Holiday", month=8, offset=1)
SUMMER_HOLIDAY = _bank_monday(name="Summer Bank Holiday", month=8, offset=-1)
CHRISTMAS_DAY = _bank_date(name="Christmas Day", month=12, day=25, observed=_WEEKEND_ALT)
BOXING_DAY = _bank_date(
    name="Boxing Day",
    month=12,
    day=26,
    observed=(
        AltDay(day=calendar.SATURDAY, offset=2),
        AltDay(day=calendar.SUNDAY, offset=2),
        AltDay(day=calendar.MONDAY, offset=1),
    ),
)

HOLIDAYS = (
    NEW_YEAR, GOOD_FRIDAY, EASTER_MONDAY, EARLY_MAY, VE_DAY,
    SPRING_HOLIDAY, SUMMER_HOLIDAY, CHRISTMAS_DAY, BOXING_DAY,
)