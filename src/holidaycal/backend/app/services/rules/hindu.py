"""Evaluator for Hindu festivals on the amanta lunisolar calendar.

Lunar months run from new moon to new moon and are named after the sidereal
sign (Lahiri ayanamsa) the sun occupies at the opening new moon, so Chaitra
opens with the sun in Mina. When two consecutive new moons find the sun in the
same sign, the first month is an inserted (adhika) month and the festival
belongs to the regular month that follows it.

Sun and moon positions come from truncated ephemeris series; new moons land
within minutes of the published values for historical and near-future years.
A festival is kept on the civil day (Indian Standard Time) whose evening falls
inside the governing lunar day.
"""

from __future__ import annotations

import math
from collections.abc import Callable
from datetime import MAXYEAR, MINYEAR, date, timedelta

from holidaycal.backend.app.models import Holiday
from holidaycal.backend.config.schema import HinduHolidayType, RuleSet

from .utils import date_from_ordinal
from .validity import is_active

HINDU_KEY_PREFIX = "hindu."

# Ordinal moment of J2000.0, 1 January 2000 at 12:00 UT.
J2000 = 730120.5
MEAN_SYNODIC_MONTH = 29.530588853

IST_OFFSET = 5.5 / 24
# 18:00 IST expressed as a fraction of the UT day.
EVENING_UT = 18 / 24 - IST_OFFSET

_AYANAMSA_AT_J2000 = 23.857
_AYANAMSA_PER_YEAR = 0.013965

# Zero-based sidereal signs.
TULA = 6
MINA = 11

# Lunar day boundaries as sun-moon elongation, in degrees.
AMAVASYA_START = 348.0
PURNIMA_START = 168.0
PURNIMA_END = 180.0

# Periodic terms of the lunar longitude: multiples of (D, M, M', F), degrees.
_LUNAR_TERMS = (
    (0, 0, 1, 0, 6.288774),
    (2, 0, -1, 0, 1.274027),
    (2, 0, 0, 0, 0.658314),
    (0, 0, 2, 0, 0.213618),
    (0, 1, 0, 0, -0.185116),
    (0, 0, 0, 2, -0.114332),
    (2, 0, -2, 0, 0.058793),
    (2, -1, -1, 0, 0.057066),
    (2, 0, 1, 0, 0.053322),
    (2, -1, 0, 0, 0.045758),
    (0, 1, -1, 0, -0.040923),
    (1, 0, 0, 0, -0.034720),
    (0, 1, 1, 0, -0.030383),
    (2, 0, 0, -2, 0.015327),
    (0, 0, 1, 2, -0.012528),
    (0, 0, 1, -2, 0.010980),
    (4, 0, -1, 0, 0.010675),
    (0, 0, 3, 0, 0.010034),
    (4, 0, -2, 0, 0.008548),
    (2, 1, -1, 0, -0.007888),
    (2, 1, 0, 0, -0.006766),
    (1, 0, -1, 0, -0.005163),
    (1, 1, 0, 0, 0.004987),
    (2, -1, 1, 0, 0.004036),
    (2, 0, 2, 0, 0.003994),
)

# Bisection stops once the bracket is narrower than about a second.
_TOLERANCE = 1e-5


def _sin(degrees: float) -> float:
    return math.sin(math.radians(degrees))


def _centuries(moment: float) -> float:
    return (moment - J2000) / 36525


def solar_longitude(moment: float) -> float:
    """Return the apparent tropical longitude of the sun at ``moment`` (UT ordinal)."""

    c = _centuries(moment)
    mean_longitude = 280.46646 + 36000.76983 * c
    anomaly = 357.52911 + 35999.05029 * c
    centre = (
        (1.914602 - 0.004817 * c) * _sin(anomaly)
        + (0.019993 - 0.000101 * c) * _sin(2 * anomaly)
        + 0.000289 * _sin(3 * anomaly)
    )
    node = 125.04 - 1934.136 * c
    return (mean_longitude + centre - 0.00569 - 0.00478 * _sin(node)) % 360


def lunar_longitude(moment: float) -> float:
    """Return the tropical longitude of the moon at ``moment`` (UT ordinal)."""

    c = _centuries(moment)
    mean_longitude = 218.3164477 + 481267.88123421 * c
    elongation = 297.8501921 + 445267.1114034 * c
    solar_anomaly = 357.5291092 + 35999.0502909 * c
    lunar_anomaly = 134.9633964 + 477198.8675055 * c
    latitude_argument = 93.2720950 + 483202.0175233 * c
    eccentricity = 1 - 0.002516 * c

    correction = 0.0
    for d, m, m_prime, f, amplitude in _LUNAR_TERMS:
        argument = (
            d * elongation + m * solar_anomaly + m_prime * lunar_anomaly + f * latitude_argument
        )
        correction += amplitude * eccentricity ** abs(m) * _sin(argument)
    return (mean_longitude + correction) % 360


def lunar_phase(moment: float) -> float:
    """Return the sun-moon elongation at ``moment``; 0 is new moon, 180 full moon."""

    return (lunar_longitude(moment) - solar_longitude(moment)) % 360


def sidereal_sign(moment: float) -> int:
    """Return the zero-based sidereal sign of the sun (Mesha is 0)."""

    years = (moment - J2000) / 365.25
    ayanamsa = _AYANAMSA_AT_J2000 + _AYANAMSA_PER_YEAR * years
    return int(((solar_longitude(moment) - ayanamsa) % 360) // 30) % 12


def lunar_phase_at_or_after(phase: float, moment: float) -> float:
    """Return the first moment at or after ``moment`` when the elongation is ``phase``."""

    estimate = moment + (phase - lunar_phase(moment)) % 360 / 360 * MEAN_SYNODIC_MONTH
    low, high = max(moment, estimate - 2), estimate + 2
    while high - low > _TOLERANCE:
        middle = (low + high) / 2
        if (lunar_phase(middle) - phase) % 360 < 180:
            high = middle
        else:
            low = middle
    return high


def lunar_phase_before(phase: float, moment: float) -> float:
    """Return the last moment before ``moment`` when the elongation is ``phase``."""

    crossing = lunar_phase_at_or_after(phase, moment - 35)
    while True:
        following = lunar_phase_at_or_after(phase, crossing + 1)
        if following >= moment:
            return crossing
        crossing = following


def first_new_moon_in_sign(sign: int, moment: float) -> float:
    """Return the first new moon at or after ``moment`` with the sun in ``sign``."""

    new_moon = lunar_phase_at_or_after(0.0, moment)
    while sidereal_sign(new_moon) != sign:
        new_moon = lunar_phase_at_or_after(0.0, new_moon + 1)
    return new_moon


def evening_observance(start: float, end: float) -> date | None:
    """Return the civil day whose evening lies inside the lunar day ``[start, end]``.

    When the lunar day spans two evenings the earlier one wins; when it spans
    none the day on which it ends is used.
    """

    first = math.floor(start + IST_OFFSET)
    for ordinal in (first, first + 1):
        if start <= ordinal + EVENING_UT <= end:
            return date_from_ordinal(ordinal)
    return date_from_ordinal(math.floor(end + IST_OFFSET))


def diwali_date(year: int) -> date | None:
    """Return Lakshmi Puja, the new moon that closes the regular Ashvin."""

    kartika = first_new_moon_in_sign(TULA, date(year, 9, 1).toordinal())
    return evening_observance(lunar_phase_before(AMAVASYA_START, kartika), kartika)


def holi_date(year: int) -> date | None:
    """Return Holi, the day after the bonfire on the full moon of the regular Phalguna."""

    chaitra = first_new_moon_in_sign(MINA, date(year, 2, 1).toordinal())
    full_moon = lunar_phase_before(PURNIMA_END, chaitra)
    bonfire = evening_observance(lunar_phase_before(PURNIMA_START, full_moon), full_moon)
    if bonfire is None or bonfire == date.max:
        return None
    return bonfire + timedelta(days=1)


HINDU_FESTIVALS: dict[HinduHolidayType, Callable[[int], date | None]] = {
    HinduHolidayType.HOLI: holi_date,
    HinduHolidayType.DIWALI: diwali_date,
}


def hindu_dates_in_gregorian_year(kind: HinduHolidayType, year: int) -> list[date]:
    """Return every occurrence of festival ``kind`` that falls inside ``year``."""

    festival = HINDU_FESTIVALS[kind]
    found: set[date] = set()
    for anchor in range(max(MINYEAR, year - 1), min(MAXYEAR, year + 1) + 1):
        converted = festival(anchor)
        if converted is not None and converted.year == year:
            found.add(converted)
    return sorted(found)


def evaluate_hindu_holidays(year: int, rule_set: RuleSet) -> list[Holiday]:
    holidays: list[Holiday] = []
    for rule in rule_set.hindu_holidays:
        if not is_active(rule, year):
            continue
        for converted in hindu_dates_in_gregorian_year(rule.kind, year):
            holidays.append(
                Holiday(converted, HINDU_KEY_PREFIX + rule.kind.value, rule.holiday_type)
            )
    return holidays


__all__ = [
    "HINDU_FESTIVALS",
    "HINDU_KEY_PREFIX",
    "diwali_date",
    "evaluate_hindu_holidays",
    "first_new_moon_in_sign",
    "hindu_dates_in_gregorian_year",
    "holi_date",
    "lunar_phase",
    "lunar_phase_at_or_after",
    "lunar_phase_before",
    "sidereal_sign",
]
