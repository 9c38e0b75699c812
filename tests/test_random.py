import unittest

from lexipuzzle.data.normalization import clean_word
from lexipuzzle.engine.seeded_random import SeededRandom
from lexipuzzle.engine.shuffle import scramble_word, shuffle_array


class SeededRandomTests(unittest.TestCase):
    def test_first_values_follow_recurrence(self) -> None:
        rng = SeededRandom(1)
        self.assertAlmostEqual(rng.next(), 58598 / 233280)
        self.assertAlmostEqual(rng.next(), 127215 / 233280)
        self.assertAlmostEqual(rng.next(), 79852 / 233280)
        self.assertEqual(rng.state, 79852)

    def test_zero_seed(self) -> None:
        self.assertAlmostEqual(SeededRandom(0).next(), 49297 / 233280)

    def test_same_seed_same_sequence(self) -> None:
        a = SeededRandom(123456)
        b = SeededRandom(123456)
        self.assertEqual([a.next() for _ in range(50)], [b.next() for _ in range(50)])

    def test_values_stay_in_unit_interval(self) -> None:
        for seed in (-5, 0, 7, 2 ** 31 - 1):
            rng = SeededRandom(seed)
            for _ in range(200):
                value = rng.next()
                self.assertGreaterEqual(value, 0.0)
                self.assertLess(value, 1.0)

    def test_randrange_bounds(self) -> None:
        rng = SeededRandom(99)
        draws = [rng.randrange(8) for _ in range(500)]
        self.assertTrue(all(0 <= d < 8 for d in draws))


class ShuffleTests(unittest.TestCase):
    def test_known_permutation(self) -> None:
        self.assertEqual(shuffle_array([1, 2, 3], 1), [3, 2, 1])

    def test_input_not_mutated(self) -> None:
        items = ["a", "b", "c", "d", "e"]
        shuffle_array(items, 42)
        self.assertEqual(items, ["a", "b", "c", "d", "e"])

    def test_result_is_permutation(self) -> None:
        items = [3, 1, 4, 1, 5, 9, 2, 6, 5, 3, 5]
        for seed in range(25):
            shuffled = shuffle_array(items, seed)
            self.assertEqual(len(shuffled), len(items))
            self.assertEqual(sorted(shuffled), sorted(items))

    def test_tuple_input_accepted(self) -> None:
        self.assertEqual(sorted(shuffle_array((1, 2, 3), 8)), [1, 2, 3])

    def test_non_list_input_yields_empty(self) -> None:
        self.assertEqual(shuffle_array(None, 1), [])
        self.assertEqual(shuffle_array("abc", 1), [])
        self.assertEqual(shuffle_array({"a": 1}, 1), [])

    def test_empty_and_single(self) -> None:
        self.assertEqual(shuffle_array([], 3), [])
        self.assertEqual(shuffle_array(["x"], 3), ["x"])


class ScrambleTests(unittest.TestCase):
    def test_known_scramble(self) -> None:
        self.assertEqual(scramble_word("ABC", 1), "CBA")

    def test_scramble_keeps_letters(self) -> None:
        word = "ROBOTICA"
        for seed in range(10):
            self.assertEqual(sorted(scramble_word(word, seed)), sorted(word))

    def test_scramble_empty(self) -> None:
        self.assertEqual(scramble_word("", 5), "")


class CleanWordTests(unittest.TestCase):
    def test_strips_digits_and_punctuation(self) -> None:
        self.assertEqual(clean_word("Café-123"), "CAFÉ")

    def test_keeps_spanish_letters(self) -> None:
        self.assertEqual(clean_word("niño pingüino"), "NIÑOPINGÜINO")

    def test_empty(self) -> None:
        self.assertEqual(clean_word(""), "")
        self.assertEqual(clean_word("  --  "), "")

    def test_other_accents_removed(self) -> None:
        self.assertEqual(clean_word("Façade à"), "FAADE")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
