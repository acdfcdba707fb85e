"""
Interval analysis of a collection of notes.

density() returns a [p, m, n, s, d, t] vector, following "The Analysis of
Intervals" in Persichetti's *Harmonic Materials of Modern Music*:

    p  perfect fourths or fifths          s  major seconds or minor sevenths
    m  major thirds or minor sixths       d  minor seconds or major sevenths
    n  minor thirds or major sixths       t  tritones

pmn are commonly considered consonant, sdt dissonant: "pmn" describes a
consonant triad, "sd2" a highly dissonant one.
"""
from src.constants import _PMNSDT, _TRITONE
from src.interval import ic
from src.logger_config import get_logger
from src.note import chroma, name

log = get_logger("sonority")


def density(notes) -> list[int]:
    """
    Count the interval classes between every pair of notes.

    Notes may be note-name strings or music21 Pitch / Note objects; anything
    that isn't a note is skipped.

        density(["C", "E", "G", "B"]) → [2, 2, 1, 0, 1, 0]
        density(["c", "d", "gb"])     → [0, 1, 0, 1, 0, 1]
    """
    named = [name(n) for n in notes]
    valid = [n for n in named if n is not None]
    if len(valid) != len(named):
        log.debug("Skipped %d unparsable note(s)", len(named) - len(valid))

    chromas = [chroma(n) for n in valid]
    result = [0, 0, 0, 0, 0, 0]
    for a in range(len(chromas)):
        for b in range(a, len(chromas)):
            i = ic(chromas[b] - chromas[a])
            if i == _TRITONE:
                result[5] += 1
            elif i > 0:
                result[5 - i] += 1
    return result


def density_symbol(vector) -> str:
    """
    Sonority symbol for a pmnsdt vector: each present interval letter followed
    by its count when above one, e.g. [2, 2, 1, 0, 1, 0] → "p2m2nd".
    """
    if len(vector) != len(_PMNSDT):
        raise ValueError(f"Expected a {len(_PMNSDT)}-element vector, got {len(vector)}")
    parts = []
    for letter, count in zip(_PMNSDT, vector):
        if count == 1:
            parts.append(letter)
        elif count > 1:
            parts.append(f"{letter}{count}")
    return "".join(parts)
