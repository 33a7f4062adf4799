"""Holiday definitions for Lithuania."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
NEW_YEAR = Holiday(name="Naujieji metai", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Day of Restoration of the State of Lithuania on 16-Feb
STATE_RESTORATION_DAY = Holiday(
    name="Lietuvos valstybės atkūrimo diena",
    type=_PUBLIC,
    month=2,
    day=16,
    func=calc_day_of_month,
)

# Independence Restoration Day on 11-Mar
INDEPENDENCE_DAY = Holiday(
    name="Lietuvos nepriklausomybės atkūrimo diena",
    type=_PUBLIC,
    month=3,
    day=11,
    func=calc_day_of_month,
)

# Easter Monday on the day after Easter
EASTER_MONDAY = Holiday(
    name="Antroji šv. Velykų diena", type=_PUBLIC, offset=1, func=calc_easter_offset
)

# Labour Day on 1-May
LABOUR_DAY = Holiday(
    name="Tarptautinė darbo diena", type=_PUBLIC, month=5, day=1, func=calc_day_of_month
)

# Saint John's Eve on 24-Jun
SAINT_JOHNS_EVE = Holiday(
    name="Rasos ir Joninių diena", type=_PUBLIC, month=6, day=24, func=calc_day_of_month
)

# Statehood Day on 6-Jul
STATEHOOD_DAY = Holiday(
    name="Valstybės (Lietuvos Karaliaus Mindaugo karūnavimo ir Tautiškos giesmės) diena",
    type=_PUBLIC,
    month=7,
    day=6,
    func=calc_day_of_month,
)

# Assumption of Mary on 15-Aug
ASSUMPTION_DAY = Holiday(
    name="Žolinė (Švč. Mergelės Marijos ėmimo į dangų diena)",
    type=_PUBLIC,
    month=8,
    day=15,
    func=calc_day_of_month,
)

# All Saints' Day on 1-Nov
ALL_SAINTS_DAY = Holiday(
    name="Visų šventųjų diena", type=_PUBLIC, month=11, day=1, func=calc_day_of_month
)

# All Souls' Day on 2-Nov
ALL_SOULS_DAY = Holiday(
    name="Mirusiųjų atminimo (Vėlinių) diena", month=11, day=2, func=calc_day_of_month
)

# Christmas Eve on 24-Dec
CHRISTMAS_EVE = Holiday(name="Šv. Kūčios", month=12, day=24, func=calc_day_of_month)

# Christmas Day on 25-Dec
CHRISTMAS_DAY_ONE = Holiday(name="Šv. Kalėdos", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

# Second day of Christmas on 26-Dec
CHRISTMAS_DAY_TWO = Holiday(
    name="Šv. Kalėdos (antra diena)", type=_PUBLIC, month=12, day=26, func=calc_day_of_month
)

# The standard national holidays
HOLIDAYS = (
    NEW_YEAR,
    STATE_RESTORATION_DAY,
    INDEPENDENCE_DAY,
    EASTER_MONDAY,
    LABOUR_DAY,
    SAINT_JOHNS_EVE,
    STATEHOOD_DAY,
    ASSUMPTION_DAY,
    ALL_SAINTS_DAY,
    ALL_SOULS_DAY,
    CHRISTMAS_EVE,
    CHRISTMAS_DAY_ONE,
    CHRISTMAS_DAY_TWO,
)