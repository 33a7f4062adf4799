# holidaycal

Holiday definitions and calculations for public, bank and religious
holidays. Each holiday knows which day it falls on in a given year, and
which day it is observed on when substitution rules apply (for example,
a holiday that falls on a Saturday and is observed on the following
Monday). All calculations use the Gregorian calendar. Orthodox Easter is
computed from the Julian calendar and converted to a Gregorian date.

There are no dependencies beyond the standard library.

## Installation

```
pip install holidaycal
```

## Computing a holiday

```python
from holidaycal import nz

actual, observed = nz.ANZAC_DAY.calc(2015)
# actual   -> datetime.date(2015, 4, 25)
# observed -> datetime.date(2015, 4, 27)  (Saturday moves to Monday)
```

`Holiday.calc(year)` returns a pair of `datetime.date` values: the day
the holiday falls on and the day it is observed. When no substitution
rule applies, both are the same day. If the holiday does not occur that
year (before its `start_year`, after its `end_year`, in one of its
`except_years`, or when it has no rule function), both values are
`None`.

```python
from holidaycal import gb

gb.EARLY_MAY.calc(2020)   # (None, None): excepted that year
gb.VE_DAY.calc(2020)      # (date(2020, 5, 8), date(2020, 5, 8))
```

## Country modules

Each module holds the holidays of one country as module-level
constants, plus a `HOLIDAYS` tuple of the standard national set.

| Module | Coverage |
| --- | --- |
| `holidaycal.dk` | Denmark |
| `holidaycal.gb` | United Kingdom (also `SUMMER_HOLIDAY_SCOTLAND`, not in `HOLIDAYS`) |
| `holidaycal.ie` | Republic of Ireland |
| `holidaycal.it` | Italy |
| `holidaycal.lt` | Lithuania |
| `holidaycal.nl` | Netherlands |
| `holidaycal.no` | Norway |
| `holidaycal.nz` | New Zealand |
| `holidaycal.pl` | Poland |
| `holidaycal.se` | Sweden |
| `holidaycal.si` | Slovenia |

```python
from holidaycal import gb

for holiday in gb.HOLIDAYS:
    actual, observed = holiday.calc(2022)
    if actual is not None:
        print(holiday.name, actual, observed)
```

## Defining your own holidays

`Holiday` is a frozen dataclass in `holidaycal.holiday`. A holiday is a
rule function plus the fields that rule reads:

```python
import calendar

from holidaycal.holiday import (
    AltDay, Holiday, ObservanceType,
    calc_day_of_month, calc_weekday_offset, calc_weekday_from, calc_easter_offset,
)

founders_day = Holiday(
    name="Founders' Day",
    type=ObservanceType.OTHER,
    month=3,
    day=11,
    func=calc_day_of_month,
    observed=(
        AltDay(day=calendar.SATURDAY, offset=2),
        AltDay(day=calendar.SUNDAY, offset=1),
    ),
)
```

Rule functions, each called as `func(holiday, year)`:

- `calc_day_of_month` — a fixed `month` and `day`.
- `calc_weekday_offset` — the `offset`-th `weekday` of `month`; a
  negative offset counts from the end of the month, so `-1` is the last.
  An offset of `0` gives no date.
- `calc_weekday_from` — the `offset`-th `weekday` on or after the date
  `month`/`day`, or on or before it for a negative offset.
- `calc_easter_offset` — `offset` days from Easter Sunday; Western
  Easter by default, Orthodox Easter when `julian=True`.

Other fields:

- `calc_offset` — days added to the computed date before substitution
  rules are applied.
- `observed` — a tuple of `AltDay(day, offset)`; if the holiday falls on
  weekday `day`, it is observed `offset` days later (or earlier, if
  negative). The first matching entry wins.
- `start_year`, `end_year`, `except_years` — limit the years in which
  the holiday occurs (`0` means no limit).
- `name`, `description`, `type` — descriptive; `type` is an
  `ObservanceType` (`UNKNOWN`, `PUBLIC`, `BANK`, `RELIGIOUS`, `OTHER`).

Weekdays follow Python's numbering, as in the `calendar` module: Monday
is 0 and Sunday is 6.

`Holiday.clone(overrides)` returns a copy of a holiday. When
`overrides` is given, its `name`, `description`, `type`, `start_year`,
`end_year`, `except_years` and `observed` replace the copy's wherever
they are set (non-empty, non-zero, not `UNKNOWN`, not `None`); the rule
fields are always kept from the original.

## What this package does not do

It computes holiday dates year by year and nothing more. It has no
calendar of work days or working hours, no lookup that tells whether an
arbitrary date is a holiday, and no command-line tool. Only the
countries listed above are defined.

## Running the tests

```
pip install "holidaycal[test]"
pytest
```