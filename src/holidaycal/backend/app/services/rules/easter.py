"""Easter Sunday under the Julian and Gregorian computus."""

from __future__ import annotations

from datetime import date, timedelta

from holidaycal.backend.config.schema import ChronologyType

# Last year in which the default chronology follows the Julian computus.
JULIAN_CUTOVER_YEAR = 1583


def gregorian_easter_sunday(year: int) -> date:
    """Compute Easter Sunday (Anonymous Gregorian algorithm)."""

    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    el = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * el) // 451
    month, day = divmod(h + el - 7 * m + 114, 31)
    return date(year, month, day + 1)


def julian_easter_sunday(year: int) -> date:
    """Compute Easter Sunday (Meeus Julian algorithm) as a proleptic Gregorian date."""

    a = year % 4
    b = year % 7
    c = year % 19
    d = (19 * c + 15) % 30
    e = (2 * a + 4 * b - d + 34) % 7
    month, day = divmod(d + e + 114, 31)
    # Julian and Gregorian March/April share month lengths, so shifting by the
    # calendar drift of that year converts the date.
    drift = year // 100 - year // 400 - 2
    return date(year, month, day + 1) + timedelta(days=drift)


def easter_sunday(year: int, chronology: ChronologyType | None = None) -> date:
    """Return Easter Sunday for ``year`` in the common Gregorian representation."""

    if chronology is ChronologyType.JULIAN:
        return julian_easter_sunday(year)
    if chronology is ChronologyType.GREGORIAN:
        return gregorian_easter_sunday(year)
    if year <= JULIAN_CUTOVER_YEAR:
        return julian_easter_sunday(year)
    return gregorian_easter_sunday(year)


__all__ = [
    "JULIAN_CUTOVER_YEAR",
    "easter_sunday",
    "gregorian_easter_sunday",
    "julian_easter_sunday",
]
