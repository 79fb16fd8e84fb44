import sys
import unittest
from itertools import islice
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "generator"))

from pixie_generator.seed import Seed


HELLO_DIGEST = bytes(
    [
        44, 242, 77, 186, 95, 176, 163, 14, 38, 232, 59, 42, 197, 185, 226, 158,
        27, 22, 30, 92, 31, 167, 66, 94, 115, 4, 51, 98, 147, 139, 152, 36,
    ]
)


class SeedTests(unittest.TestCase):
    def test_load_from_word(self):
        seed = Seed.from_word("hello")
        self.assertEqual(seed.position, 0)
        self.assertEqual(seed.data, HELLO_DIGEST)

    def test_digest_is_stable_across_instances(self):
        self.assertEqual(Seed.from_word("pixie").data, Seed.from_word("pixie").data)
        self.assertEqual(len(Seed.from_word("").data), 32)
        self.assertEqual(len(Seed.from_word("żółw").data), 32)

    def test_rollover(self):
        seed = Seed(bytes([12, 13, 240, 4]))
        self.assertEqual(
            list(islice(seed, 6)),
            [True, False, True, True, True, False],
        )

    def test_cycle_repeats_identically(self):
        seed = Seed(bytes([12, 13, 240, 4]))
        first = list(islice(seed, 4))
        for _ in range(10):
            self.assertEqual(list(islice(seed, 4)), first)
        self.assertEqual(seed.position, 0)

    def test_never_exhausts(self):
        seed = Seed.from_word("hello")
        self.assertEqual(len(list(islice(seed, 1000))), 1000)
        self.assertEqual(seed.position, 1000 % 32)

    def test_iter_returns_itself(self):
        seed = Seed.from_word("hello")
        self.assertIs(iter(seed), seed)

    def test_rejects_empty_data(self):
        with self.assertRaises(ValueError):
            Seed(b"")


if __name__ == "__main__":
    unittest.main()
