"""Holiday definitions for Denmark."""

from functools import partial

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_fixed = partial(Holiday, type=ObservanceType.PUBLIC, func=calc_day_of_month)
_easter = partial(Holiday, type=ObservanceType.PUBLIC, func=calc_easter_offset)

NYTAARSDAG = _fixed(name="Nytårsdag", month=1, day=1)  # New Year's Day
SKAERTORSDAG = _easter(name="Skærtorsdag", offset=-3)  # Maundy Thursday
LANGFREDAG = _easter(name="Langfredag", offset=-2)  # Good Friday
ANDEN_PAASKEDAG = _easter(name="Anden påskedag", offset=1)  # Easter Monday
STORE_BEDEDAG = _easter(name="Store bededag", offset=26)  # fourth Friday after Easter
KRISTI_HIMMELFARTSDAG = _easter(name="Kristi Himmelfartsdag", offset=39)  # Ascension
ANDEN_PINSEDAG = _easter(name="Anden Pinsedag", offset=50)  # Pentecost Monday
GRUNDLOVSDAG = _fixed(name="Grundlovsdag", month=6, day=5)  # Constitution Day
JULEDAG = _fixed(name="Juledag", month=12, day=25)  # Christmas Day
ANDEN_JULEDAG = _fixed(name="Anden juledag", month=12, day=26)  # second day of Christmas

HOLIDAYS = (
    NYTAARSDAG, SKAERTORSDAG, LANGFREDAG, ANDEN_PAASKEDAG, STORE_BEDEDAG,
    KRISTI_HIMMELFARTSDAG, ANDEN_PINSEDAG, GRUNDLOVSDAG, JULEDAG, ANDEN_JULEDAG,
)