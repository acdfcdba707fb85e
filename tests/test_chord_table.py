import unittest
import numpy as np
from src.chord_table import ChordTable, ChordDefinition, build_table, CHORDS, get_chord
from src.chord_data import CHORD_DATA
from src import interval

class TestBuildTable(unittest.TestCase):
    def test_duplicates_merged(self):
        data = [
            ("1P 3m 5d 7m", "half-diminished", "m7b5 ø"),
            ("1P 3M 5P", "major", "M "),
            ("1P 3m 5d 7m", None, "m7b5 half-diminished h7"),
        ]
        table = build_table(data)
        self.assertEqual(list(table), ["1P 3m 5d 7m", "1P 3M 5P"])
        merged = table["1P 3m 5d 7m"]
        self.assertEqual(merged.name, "half-diminished")
        self.assertEqual(merged.aliases, ("m7b5", "ø", "half-diminished", "h7"))
        self.assertEqual(merged.intervals, ("1P", "3m", "5d", "7m"))

    def test_identical_duplicate_is_harmless(self):
        data = [("1P 5P", "fifth", "5"), ("1P 5P", "fifth", "5")]
        self.assertEqual(build_table(data), {"1P 5P": ChordDefinition("fifth", ("5",), ("1P", "5P"))})

    def test_source_data_has_duplicates(self):
        signatures = [row[0] for row in CHORD_DATA]
        self.assertGreater(len(signatures), len(set(signatures)))
        self.assertEqual(len(CHORDS), len(set(signatures)))

class TestChordTable(unittest.TestCase):
    def test_get_major(self):
        major = CHORDS.get("1P 3M 5P")
        self.assertEqual(major.name, "major")
        self.assertIn("M", major.aliases)
        self.assertEqual(major.signature, "1P 3M 5P")
        self.assertIn("1P 3M 5P", CHORDS)

    def test_get_unknown(self):
        self.assertIsNone(CHORDS.get("1P 2m"))
        self.assertIsNone(CHORDS.get("3M 1P 5P"))  # order matters

    def test_find_by_alias(self):
        self.assertEqual(CHORDS.find_by_alias("maj7").signature, "1P 3M 5P 7M")
        self.assertEqual(CHORDS.find_by_alias("Δ").name, "major seventh")
        self.assertEqual(CHORDS.find_by_alias("7alt").signature, "1P 3M 5A 7m 9A")
        # The trailing space in "M " gives the major chord an empty alias
        self.assertEqual(CHORDS.find_by_alias("").name, "major")
        self.assertIsNone(CHORDS.find_by_alias("nope"))

    def test_merged_source_entries(self):
        half_dim = CHORDS.get("1P 3m 5d 7m")
        self.assertEqual(half_dim.name, "half-diminished")
        self.assertIn("ø", half_dim.aliases)
        self.assertIn("h7", half_dim.aliases)

    def test_find_by_name_then_alias(self):
        self.assertEqual(CHORDS.find("minor seventh").signature, "1P 3m 5P 7m")
        self.assertEqual(CHORDS.find("m7").signature, "1P 3m 5P 7m")
        self.assertEqual(get_chord("dim7").signature, "1P 3m 5d 7d")
        self.assertIsNone(get_chord("not a chord"))

    def test_names(self):
        names = CHORDS.names()
        self.assertIn("major", names)
        self.assertIn("dominant seventh", names)
        self.assertNotIn(None, names)
        aliases = CHORDS.names(include_aliases=True)
        self.assertIn("M9#5", aliases)
        self.assertIn("sus2", aliases)

    def test_intervals(self):
        self.assertEqual(CHORDS.intervals("7"), ["1P", "3M", "5P", "7m"])
        self.assertEqual(CHORDS.intervals("unknown"), [])

    def test_every_interval_parses(self):
        for chord in ChordTable():
            for ivl in chord.intervals:
                self.assertIsNotNone(interval.props(ivl), msg=chord.signature)

    def test_chord_notes(self):
        self.assertEqual(CHORDS.chord_notes("C4", "maj7"), ["C4", "E4", "G4", "B4"])
        self.assertEqual(CHORDS.chord_notes("Db4", "m"), ["Db4", "Fb4", "Ab4"])
        self.assertEqual(CHORDS.chord_notes("G3", "dominant ninth"), ["G3", "B3", "D4", "F4", "A4"])
        # Pitch classes in, pitch classes out
        self.assertEqual(CHORDS.chord_notes("F", "sus4"), ["F", "Bb", "C"])

    def test_chord_notes_invalid(self):
        self.assertEqual(CHORDS.chord_notes("H4", "maj7"), [])
        self.assertEqual(CHORDS.chord_notes("C4", "nope"), [])
        self.assertEqual(CHORDS.chord_notes("C-", "maj7"), [])

    def test_chroma_template(self):
        expected = np.zeros(12, dtype=np.float32)
        expected[[0, 4, 7]] = 1.0
        np.testing.assert_array_equal(CHORDS.chroma_template("major"), expected)

        # G7 → G B D F
        expected = np.zeros(12, dtype=np.float32)
        expected[[7, 11, 2, 5]] = 1.0
        template = CHORDS.chroma_template("7", root_pc=7)
        np.testing.assert_array_equal(template, expected)
        self.assertEqual(template.dtype, np.float32)

        np.testing.assert_array_equal(CHORDS.chroma_template("nope"), np.zeros(12, dtype=np.float32))
        with self.assertRaises(ValueError):
            CHORDS.chroma_template("major", root_pc=12)

if __name__ == "__main__":
    unittest.main()
