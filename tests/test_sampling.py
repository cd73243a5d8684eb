import random
import unittest
from collections import Counter

from textchain.sampling import sample_from_sequence, sample_key


class TestSampleFromSequence(unittest.TestCase):
    def test_empty_or_missing_returns_none(self):
        self.assertIsNone(sample_from_sequence([]))
        self.assertIsNone(sample_from_sequence(None))
        self.assertIsNone(sample_from_sequence(()))

    def test_picks_index_from_rng(self):
        rng = random.Random()
        rng.random = lambda: 0.99
        self.assertEqual(sample_from_sequence(["a", "b", "c"], rng), "c")
        rng.random = lambda: 0.0
        self.assertEqual(sample_from_sequence(["a", "b", "c"], rng), "a")

    def test_covers_every_element(self):
        rng = random.Random(7)
        seen = Counter(sample_from_sequence("xyz", rng) for _ in range(600))
        self.assertEqual(set(seen), {"x", "y", "z"})
        for count in seen.values():
            self.assertGreater(count, 100)


class TestSampleKey(unittest.TestCase):
    def test_empty_or_missing_returns_none(self):
        self.assertIsNone(sample_key({}))
        self.assertIsNone(sample_key(None))

    def test_uniform_over_distinct_keys(self):
        # a long value list must not make its key more likely
        table = {"abc": ["d"] * 50, "xyz": ["q"]}
        rng = random.Random(3)
        seen = Counter(sample_key(table, rng) for _ in range(1000))
        self.assertEqual(set(seen), {"abc", "xyz"})
        self.assertGreater(seen["xyz"], 400)

    def test_returns_key_not_value(self):
        self.assertEqual(sample_key({"only": ["v"]}), "only")


if __name__ == '__main__':
    unittest.main()
