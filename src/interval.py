"""
Interval helpers: interval-class reduction and parsing of the number-first
interval names used by the chord dictionary ("1P", "3M", "7m", "12d", "9A").
"""
import re
from typing import NamedTuple

from src.constants import _MAJOR_ALT, _NUMBER_TO_SEMI, _PERFECT_ALT, _PERFECTABLE

_INTERVAL_REGEX = re.compile(r"^(\d+)(d{1,4}|m|M|P|A{1,4})$")

# Semitone distance (mod 12) → interval class
_IC: list[int] = [0, 1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1]


class IntervalProps(NamedTuple):
    name: str
    num: int
    q: str
    simple: int
    alt: int
    semitones: int
    chroma: int


def ic(semitones: int) -> int:
    """Fold a semitone distance (any sign, any size) to its interval class 0-6."""
    return _IC[abs(semitones) % 12]


def _alteration(simple: int, quality: str) -> int | None:
    if simple in _PERFECTABLE:
        if quality in ("M", "m"):
            return None
        return _PERFECT_ALT[quality[0]] * len(quality)
    if quality == "P":
        return None
    if quality[0] == "d":
        return -len(quality) - 1
    if quality[0] == "A":
        return len(quality)
    return _MAJOR_ALT[quality]


def props(interval_name: str) -> IntervalProps | None:
    """Parse "3M" / "12d" / "9A" style names; None when the name is not valid."""
    m = _INTERVAL_REGEX.match(interval_name) if isinstance(interval_name, str) else None
    if not m:
        return None
    num = int(m.group(1))
    q = m.group(2)
    if num == 0:
        return None
    simple = (num - 1) % 7 + 1
    alt = _alteration(simple, q)
    if alt is None:
        return None
    semitones = _NUMBER_TO_SEMI[simple] + alt + 12 * ((num - 1) // 7)
    return IntervalProps(
        name=interval_name,
        num=num,
        q=q,
        simple=simple,
        alt=alt,
        semitones=semitones,
        chroma=semitones % 12,
    )


def semitones(interval_name: str) -> int | None:
    p = props(interval_name)
    return p.semitones if p else None


def to_music21(interval_name: str) -> str | None:
    """Quality-first spelling understood by music21.interval ("3M" → "M3")."""
    p = props(interval_name)
    return f"{p.q}{p.num}" if p else None
