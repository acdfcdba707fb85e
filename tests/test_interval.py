import unittest
from src.interval import ic, props, semitones, to_music21

class TestInterval(unittest.TestCase):
    def test_ic(self):
        expected = [0, 1, 2, 3, 4, 5, 6, 5, 4, 3, 2, 1]
        for distance, interval_class in enumerate(expected):
            self.assertEqual(ic(distance), interval_class)
        # Negative and compound distances fold the same way
        self.assertEqual(ic(-1), 1)
        self.assertEqual(ic(-7), 5)
        self.assertEqual(ic(-11), 1)
        self.assertEqual(ic(13), 1)
        self.assertEqual(ic(18), 6)

    def test_props(self):
        p = props("3M")
        self.assertEqual((p.num, p.q, p.simple, p.alt, p.semitones), (3, "M", 3, 0, 4))
        self.assertEqual(props("5d").semitones, 6)
        self.assertEqual(props("7d").semitones, 9)
        self.assertEqual(props("12d").semitones, 18)
        self.assertEqual(props("12d").chroma, 6)
        self.assertEqual(props("13m").semitones, 20)
        self.assertEqual(props("11A").semitones, 18)
        self.assertEqual(props("8P").semitones, 12)
        self.assertEqual(props("4AA").semitones, 7)

    def test_props_invalid(self):
        self.assertIsNone(props("3P"))     # thirds are not perfect
        self.assertIsNone(props("5M"))     # fifths are not major
        self.assertIsNone(props("0P"))
        self.assertIsNone(props("M3"))     # quality-first spelling
        self.assertIsNone(props(""))
        self.assertIsNone(props(None))

    def test_semitones_and_music21_name(self):
        self.assertEqual(semitones("7m"), 10)
        self.assertIsNone(semitones("x"))
        self.assertEqual(to_music21("3M"), "M3")
        self.assertEqual(to_music21("12d"), "d12")
        self.assertIsNone(to_music21("3P"))

if __name__ == '__main__':
    unittest.main()
