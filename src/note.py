"""
Scientific-pitch-notation note names: parsing, normalisation and chroma.

A note name is a letter, an optional accidental run and an optional octave:
    "C", "c#", "Gb4", "Bbb-1", "Fx3" (x = double sharp, normalised to ##)

Unparsable input never raises: props() returns NO_NOTE and name()/chroma()
return None, so callers can filter bad entries out of a collection.
"""
import re
from typing import NamedTuple

import music21
import music21.note
import music21.pitch

from src.constants import _STEP_TO_SEMI

_NOTE_REGEX = re.compile(r"^([a-gA-G]?)(#{1,}|b{1,}|x{1,}|)(-?\d+|)\s*(.*)$")


class NoteProps(NamedTuple):
    letter: str | None
    acc: str | None
    oct: int | None
    pc: str | None
    name: str | None
    step: int | None
    alt: int | None
    chroma: int | None


NO_NOTE = NoteProps(None, None, None, None, None, None, None, None)


def tokenize(note_str: str) -> tuple[str, str, str, str]:
    """Split a note name into (LETTER, accidentals, octave string, trailing rest)."""
    m = _NOTE_REGEX.match(note_str)
    if not m:
        return "", "", "", ""
    letter, acc, oct_str, rest = m.groups()
    return letter.upper(), acc.replace("x", "##"), oct_str, rest


def props(note_str) -> NoteProps:
    """Decompose a note name into its properties, or NO_NOTE if it doesn't parse."""
    if not isinstance(note_str, str):
        return NO_NOTE
    letter, acc, oct_str, rest = tokenize(note_str)
    if letter == "" or rest != "":
        return NO_NOTE
    step = (ord(letter) + 3) % 7
    alt = -len(acc) if acc.startswith("b") else len(acc)
    return NoteProps(
        letter=letter,
        acc=acc,
        oct=int(oct_str) if oct_str else None,
        pc=letter + acc,
        name=letter + acc + oct_str,
        step=step,
        alt=alt,
        chroma=(_STEP_TO_SEMI[step] + alt + 120) % 12,
    )


def _from_music21(pitch: music21.pitch.Pitch) -> str:
    # music21 spells flats with '-' ("B-4"); scientific notation uses 'b'.
    pc = pitch.name.replace("-", "b")
    return pc if pitch.octave is None else f"{pc}{pitch.octave}"


def name(value) -> str | None:
    """
    Canonical note name for a string or a music21 Pitch / Note.

        name("c")  → "C"      name("gb") → "Gb"
        name("fx4") → "F##4"  name("h")  → None
    """
    if isinstance(value, music21.note.Note):
        value = value.pitch
    if isinstance(value, music21.pitch.Pitch):
        value = _from_music21(value)
    return props(value).name


def pc(value) -> str | None:
    """Pitch class (name without octave), e.g. "Db4" → "Db"."""
    n = name(value)
    return props(n).pc if n else None


def chroma(value) -> int | None:
    """Pitch class as an integer 0-11 (C=0), or None when the note doesn't parse."""
    n = name(value)
    return props(n).chroma if n else None
