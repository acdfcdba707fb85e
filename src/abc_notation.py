"""
Convert single note tokens between ABC notation and scientific pitch notation.

    to_note("c")    → "C5"      to_abc("Db2") → "_D,,"
    to_note("^c")   → "C#5"     to_abc("C#4") → "^C"
    to_note("_D,,") → "Db2"     to_note("bad") → None

ABC token layout:  [accidentals][letter][octave marks]
    accidentals   a run of '_' (flats), a run of '^' (sharps), or one '=' (natural)
    letter        A-G (octave 4) or a-g (octave 5)
    octave marks  any mix of ',' (down an octave) and "'" (up an octave)

Only single tokens are handled: no bar lines, durations, chords or headers.
"""
from src.constants import (
    _ABC_BASE_OCTAVE,
    _ABC_FLAT,
    _ABC_LETTERS,
    _ABC_NATURAL,
    _ABC_OCTAVE_DOWN,
    _ABC_OCTAVE_UP,
    _ABC_SHARP,
)
from src import note

_NO_TOKEN = ("", "", "")
_OCTAVE_MARKS = frozenset(_ABC_OCTAVE_DOWN + _ABC_OCTAVE_UP)


def tokenize(token: str) -> tuple[str, str, str]:
    """
    Split an ABC note token into (accidentals, letter, octave marks).

    Returns ("", "", "") when the token is not a valid note: unknown letter,
    mixed accidentals ("_^C"), stray characters, etc.
    """
    if not isinstance(token, str):
        return _NO_TOKEN
    i, n = 0, len(token)

    # Accidentals: one '=', or a homogeneous run of '_' or '^'
    if n and token[0] == _ABC_NATURAL:
        i = 1
    elif n and token[0] in (_ABC_FLAT, _ABC_SHARP):
        mark = token[0]
        while i < n and token[i] == mark:
            i += 1
    acc = token[:i]

    # Exactly one letter
    if i >= n or token[i] not in _ABC_LETTERS:
        return _NO_TOKEN
    letter = token[i]

    # Octave marks through to the end of the string
    marks = token[i + 1:]
    if any(c not in _OCTAVE_MARKS for c in marks):
        return _NO_TOKEN
    return acc, letter, marks


def to_note(token: str) -> str | None:
    """Convert an ABC note token to scientific pitch notation, or None if invalid."""
    acc, letter, marks = tokenize(token)
    if letter == "":
        return None

    octave = _ABC_BASE_OCTAVE
    for c in marks:
        octave += -1 if c == _ABC_OCTAVE_DOWN else 1

    if acc[:1] == _ABC_FLAT:
        acc = acc.replace(_ABC_FLAT, "b")
    elif acc[:1] == _ABC_SHARP:
        acc = acc.replace(_ABC_SHARP, "#")
    else:
        acc = ""  # '=' or no accidental

    # Lower-case letters sit one octave above upper-case ones
    if ord(letter) > 96:
        return f"{letter.upper()}{acc}{octave + 1}"
    return f"{letter}{acc}{octave}"


def to_abc(note_name: str) -> str | None:
    """
    Convert a scientific-pitch-notation note to an ABC token.

    Returns None when the note doesn't parse or carries no octave, since an
    ABC token always encodes one.
    """
    p = note.props(note_name)
    if p.letter is None or p.oct is None:
        return None
    letter, acc, octave = p.letter, p.acc, p.oct

    if acc[:1] == "b":
        acc = acc.replace("b", _ABC_FLAT)
    else:
        acc = acc.replace("#", _ABC_SHARP)

    if octave > _ABC_BASE_OCTAVE:
        letter = letter.lower()

    if octave == _ABC_BASE_OCTAVE + 1:
        marks = ""
    elif octave > _ABC_BASE_OCTAVE + 1:
        marks = _ABC_OCTAVE_UP * (octave - _ABC_BASE_OCTAVE - 1)
    else:
        marks = _ABC_OCTAVE_DOWN * (_ABC_BASE_OCTAVE - octave)
    return acc + letter + marks
