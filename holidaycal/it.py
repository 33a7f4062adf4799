"""Holiday definitions for Italy."""

from functools import partial

from holidaycal.holiday import (
    Holiday,
    ObservanceType,
    calc_day_of_month,
    calc_easter_offset,
)

_giorno = partial(Holiday, type=ObservanceType.PUBLIC, func=calc_day_of_month)

CAPODANNO = _giorno(name="Capodanno", month=1, day=1)
EPIFANIA = _giorno(name="Epifania", month=1, day=6)
# Easter Monday
PASQUETTA = Holiday(name="Pasquetta", type=ObservanceType.PUBLIC, offset=1, func=calc_easter_offset)
FESTA_DELLA_LIBERAZIONE = _giorno(name="Festa della Liberazione", month=4, day=25)
FESTA_DEL_LAVORO = _giorno(name="Festa del Lavoro", month=5, day=1)
FESTA_DELLA_REPUBBLICA = _giorno(name="Festa della Repubblica", month=6, day=2)
ASSUNZIONE = _giorno(name="Assunzione", month=8, day=15)
TUTTI_I_SANTI = _giorno(name="Tutti i santi", month=11, day=1)
IMMACOLATA = _giorno(name="Immacolata Concezione", month=12, day=8)
NATALE = _giorno(name="Natale", month=12, day=25)
SANTO_STEFANO = _giorno(name="Santo Stefano", month=12, day=26)

HOLIDAYS = (
    CAPODANNO, EPIFANIA, PASQUETTA, FESTA_DELLA_LIBERAZIONE, FESTA_DEL_LAVORO,
    FESTA_DELLA_REPUBBLICA, ASSUNZIONE, TUTTI_I_SANTI, IMMACOLATA, NATALE, SANTO_STEFANO,
)