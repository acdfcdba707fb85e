#!/usr/bin/env python3
"""
scripts/abc_tool.py — command-line front end for the note converters, chord
dictionary and sonority analysis.

Usage (from project root):
    python scripts/abc_tool.py to-note c ^c _D,,
    python scripts/abc_tool.py to-abc C#4 Db2
    python scripts/abc_tool.py density C E G B
    python scripts/abc_tool.py chord maj7 --tonic C4

Exits with status 1 when any given token / note / chord is invalid.
"""
import os
import sys
import argparse

ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, ROOT)

from src.abc_notation import to_abc, to_note
from src.chord_table import CHORDS
from src.sonority import density, density_symbol

INVALID = "INVALID"


def _convert_all(values, convert) -> int:
    failures = 0
    for value in values:
        result = convert(value)
        if result is None:
            failures += 1
        print(f"    {value:<10} →  {result if result is not None else INVALID}")
    return failures


def cmd_to_note(args) -> int:
    return _convert_all(args.tokens, to_note)


def cmd_to_abc(args) -> int:
    return _convert_all(args.notes, to_abc)


def cmd_density(args) -> int:
    vector = density(args.notes)
    print(f"    pmnsdt : {vector}")
    print(f"    symbol : {density_symbol(vector) or '-'}")
    return 0


def cmd_chord(args) -> int:
    chord = CHORDS.find(args.chord)
    if chord is None:
        print(f"    {args.chord:<10} →  {INVALID}")
        return 1
    print(f"    name      : {chord.name or '-'}")
    print(f"    aliases   : {' '.join(a for a in chord.aliases if a) or '-'}")
    print(f"    intervals : {chord.signature}")
    if args.tonic:
        notes = CHORDS.chord_notes(args.tonic, args.chord)
        if not notes:
            print(f"    tonic     : {args.tonic} ({INVALID})")
            return 1
        vector = density(notes)
        print(f"    notes     : {' '.join(notes)}")
        print(f"    pmnsdt    : {vector}  {density_symbol(vector)}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="ABC / scientific note conversion and sonority analysis.")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("to-note", help="ABC tokens → scientific pitch notation")
    p.add_argument("tokens", nargs="+", help="ABC note tokens, e.g. ^c _D,,")
    p.set_defaults(func=cmd_to_note)

    p = sub.add_parser("to-abc", help="Scientific pitch notation → ABC tokens")
    p.add_argument("notes", nargs="+", help="Note names with octave, e.g. C#4 Db2")
    p.set_defaults(func=cmd_to_abc)

    p = sub.add_parser("density", help="pmnsdt interval analysis of a set of notes")
    p.add_argument("notes", nargs="*", help="Note names, e.g. C E G B")
    p.set_defaults(func=cmd_density)

    p = sub.add_parser("chord", help="Look up a chord by name or alias")
    p.add_argument("chord", help="Full name or alias, e.g. 'major seventh' or maj7")
    p.add_argument("--tonic", default=None, help="Build the chord on this note, e.g. C4")
    p.set_defaults(func=cmd_chord)
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    failures = args.func(args)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
