"""Holiday definitions for Slovenia."""

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_PUBLIC = ObservanceType.PUBLIC

# New Year's Day on 1-Jan
NOVO_LETO = Holiday(name="novo leto", type=_PUBLIC, month=1, day=1, func=calc_day_of_month)

# Second day of New Year on 2-Jan
NOVO_LETO_2 = Holiday(name="novo leto", month=1, day=2, func=calc_day_of_month)

# Prešeren Day on 8-Feb
PRESERNOV_DAN = Holiday(name="Prešernov dan", month=2, day=8, func=calc_day_of_month)

# Day of Uprising Against Occupation on 27-Apr
DAN_UPORA_PROTI_OKUPATORJU = Holiday(
    name="Dan upora proti okupatorju", month=4, day=27, func=calc_day_of_month
)

# Easter Sunday
VELIKA_NOC = Holiday(name="velika noč", type=_PUBLIC, offset=0, func=calc_easter_offset)

# Easter Monday on the day after Easter
VELIKONOCNI_PONEDELJEK = Holiday(
    name="velikonočni ponedeljek", type=_PUBLIC, offset=1, func=calc_easter_offset
)

# Pentecost Sunday, 49 days after Easter
BINKOSTNA_NEDELJA = Holiday(name="binkošti", offset=49, func=calc_easter_offset)

# International Workers' Day on 1-May
PRVI_MAJ = Holiday(name="praznik dela", type=_PUBLIC, month=5, day=1, func=calc_day_of_month)

# Second day of International Workers' Day on 2-May
DRUGI_MAJ = Holiday(name="praznik dela", type=_PUBLIC, month=5, day=2, func=calc_day_of_month)

# Statehood Day on 25-Jun
DAN_DRZAVNOSTI = Holiday(
    name="dan državnosti", type=_PUBLIC, month=6, day=25, func=calc_day_of_month
)

# Assumption of Mary on 15-Aug
MARIJINO_VNEBOVZETJE = Holiday(
    name="Marijino vnebovzetje", type=_PUBLIC, month=8, day=15, func=calc_day_of_month
)

# Reformation Day on 31-Oct
DAN_REFORMACIJE = Holiday(
    name="dan reformacije", type=_PUBLIC, month=10, day=31, func=calc_day_of_month
)

# Remembrance Day on 1-Nov
DAN_SPOMINA_NA_MRTVE = Holiday(
    name="dan spomina na mrtve", type=_PUBLIC, month=11, day=1, func=calc_day_of_month
)

# Christmas Day on 25-Dec
BOZIC = Holiday(name="božič", type=_PUBLIC, month=12, day=25, func=calc_day_of_month)

# Independence and Unity Day on 26-Dec
DAN_SAMOSTOJNOSTI_IN_ENOTNOSTI = Holiday(
    name="dan samostojnosti in enotnosti",
    type=_PUBLIC,
    month=12,
    day=26,
    func=calc_day_of_month,
)

# The standard national holidays
HOLIDAYS = (
    NOVO_LETO,
    NOVO_LETO_2,
    PRESERNOV_DAN,
    DAN_UPORA_PROTI_OKUPATORJU,
    VELIKA_NOC,
    VELIKONOCNI_PONEDELJEK,
    BINKOSTNA_NEDELJA,
    PRVI_MAJ,
    DRUGI_MAJ,
    DAN_DRZAVNOSTI,
    MARIJINO_VNEBOVZETJE,
    DAN_REFORMACIJE,
    DAN_SPOMINA_NA_MRTVE,
    BOZIC,
    DAN_SAMOSTOJNOSTI_IN_ENOTNOSTI,
)