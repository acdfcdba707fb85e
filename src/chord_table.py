"""
Static chord dictionary keyed by interval signature.

    CHORDS.get("1P 3M 5P")        → ChordDefinition(name="major", aliases=("M", ""), ...)
    CHORDS.find_by_alias("maj7")  → the "1P 3M 5P 7M" definition
    CHORDS.chord_notes("C4", "maj7") → ["C4", "E4", "G4", "B4"]

The table is built once at import from src/chord_data.py and exposed read-only.
"""
from types import MappingProxyType
from typing import NamedTuple

import numpy as np
import music21
import music21.interval
import music21.pitch

from src import interval, note
from src.chord_data import CHORD_DATA
from src.logger_config import get_logger

log = get_logger("chord_table")


class ChordDefinition(NamedTuple):
    name: str | None
    aliases: tuple[str, ...]
    intervals: tuple[str, ...]

    @property
    def signature(self) -> str:
        return " ".join(self.intervals)


def _merge(existing: ChordDefinition, name, aliases) -> ChordDefinition:
    merged_aliases = existing.aliases + tuple(a for a in aliases if a not in existing.aliases)
    return existing._replace(name=existing.name or name, aliases=merged_aliases)


def build_table(data) -> dict[str, ChordDefinition]:
    """
    Build {signature: ChordDefinition} from (signature, name, aliases) rows.

    A repeated signature is merged into the first entry: the first non-null
    name wins and aliases are appended in first-seen order.
    """
    table: dict[str, ChordDefinition] = {}
    for signature, full_name, alias_str in data:
        aliases = tuple(alias_str.split(" "))
        if signature in table:
            log.debug("Merging duplicate chord signature %r", signature)
            table[signature] = _merge(table[signature], full_name, aliases)
        else:
            table[signature] = ChordDefinition(full_name, aliases, tuple(signature.split(" ")))
    return table


class ChordTable:
    """Read-only chord lookup by interval signature, full name or alias."""

    def __init__(self, data=CHORD_DATA):
        self._chords = MappingProxyType(build_table(data))

    def __len__(self):
        return len(self._chords)

    def __contains__(self, signature):
        return signature in self._chords

    def __iter__(self):
        return iter(self._chords.values())

    def get(self, signature: str) -> ChordDefinition | None:
        return self._chords.get(signature)

    def find_by_alias(self, alias: str) -> ChordDefinition | None:
        for chord in self._chords.values():
            if alias in chord.aliases:
                return chord
        return None

    def find(self, name_or_alias: str) -> ChordDefinition | None:
        """Look a chord up by full name first, then by alias."""
        for chord in self._chords.values():
            if chord.name is not None and chord.name == name_or_alias:
                return chord
        return self.find_by_alias(name_or_alias)

    def names(self, include_aliases: bool = False) -> list[str]:
        if include_aliases:
            return [a for chord in self._chords.values() for a in chord.aliases]
        return [chord.name for chord in self._chords.values() if chord.name]

    def intervals(self, name_or_alias: str) -> list[str]:
        chord = self.find(name_or_alias)
        return list(chord.intervals) if chord else []

    def chord_notes(self, tonic: str, name_or_alias: str) -> list[str]:
        """
        Notes of a chord built on `tonic`, e.g. ("C4", "maj7") → C4 E4 G4 B4.
        A tonic without octave gives pitch classes. [] when either part is unknown.
        """
        p = note.props(note.name(tonic))
        chord = self.find(name_or_alias)
        if p.letter is None or chord is None:
            return []
        root = music21.pitch.Pitch(p.letter + p.acc.replace("b", "-"))
        root.octave = 4 if p.oct is None else p.oct
        result = []
        for ivl in chord.intervals:
            transposed = root.transpose(music21.interval.Interval(interval.to_music21(ivl)))
            if p.oct is None:
                transposed.octave = None
            result.append(note.name(transposed))
        return result

    def chroma_template(self, name_or_alias: str, root_pc: int = 0) -> np.ndarray:
        """12-element multi-hot pitch-class vector of the chord rooted on root_pc."""
        if not 0 <= root_pc < 12:
            raise ValueError(f"root_pc must be in 0-11, got {root_pc}")
        v = np.zeros(12, dtype=np.float32)
        for ivl in self.intervals(name_or_alias):
            v[(interval.props(ivl).chroma + root_pc) % 12] = 1.0
        return v


CHORDS = ChordTable()


def get_chord(name_or_alias: str) -> ChordDefinition | None:
    """Shortcut for CHORDS.find()."""
    return CHORDS.find(name_or_alias)
