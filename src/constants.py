# ── Pitch-class lookup tables ─────────────────────────────────────────────────

# Semitones above C for each natural letter, indexed by step (C=0 … B=6).
_STEP_TO_SEMI: list[int] = [0, 2, 4, 5, 7, 9, 11]

# Flat-preferred spelling for reconstructing a note name from a pitch class.
_PC_TO_NOTE: list[str] = [
    "C", "Db", "D", "Eb", "E", "F", "Gb", "G", "Ab", "A", "Bb", "B"
]

# ── ABC notation ──────────────────────────────────────────────────────────────

# Octave of an upper-case ABC letter before any , or ' marks (C = middle C).
_ABC_BASE_OCTAVE = 4
_ABC_FLAT = "_"
_ABC_SHARP = "^"
_ABC_NATURAL = "="
_ABC_OCTAVE_DOWN = ","
_ABC_OCTAVE_UP = "'"
_ABC_LETTERS = frozenset("abcdefgABCDEFG")

# ── Intervals ─────────────────────────────────────────────────────────────────

# Simple-interval number (1-7) → semitones of its perfect / major form.
_NUMBER_TO_SEMI: dict[int, int] = {1: 0, 2: 2, 3: 4, 4: 5, 5: 7, 6: 9, 7: 11}
# Unisons, fourths and fifths are "perfectable"; the rest are "majorable".
_PERFECTABLE = frozenset({1, 4, 5})
# Quality letter → alteration relative to P (perfectable) or M (majorable).
# Diminished / augmented may be repeated ("dd", "AA").
_PERFECT_ALT: dict[str, int] = {"P": 0, "d": -1, "A": 1}
_MAJOR_ALT: dict[str, int] = {"M": 0, "m": -1, "d": -2, "A": 1}

# ── Sonority ──────────────────────────────────────────────────────────────────

# Bucket letters of the pmnsdt vector, in bucket order:
#   p  perfect fourths / fifths        (ic 5)
#   m  major thirds / minor sixths     (ic 4)
#   n  minor thirds / major sixths     (ic 3)
#   s  major seconds / minor sevenths  (ic 2)
#   d  minor seconds / major sevenths  (ic 1)
#   t  tritones                        (ic 6)
_PMNSDT = "pmnsdt"
_TRITONE = 6
