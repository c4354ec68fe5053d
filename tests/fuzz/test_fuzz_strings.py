import unittest
import pytest

import lectern_lang
from lectern_lang import string_methods

hypothesis = pytest.importorskip("hypothesis")
strategies = hypothesis.strategies

chars = strategies.characters()


class StringPropertyTests(unittest.TestCase):
    @hypothesis.given(strategies.text())
    def test_reverse_is_an_involution(self, text: str) -> None:
        self.assertEqual(lectern_lang.reverse_string(lectern_lang.reverse_string(text)), text)

    @hypothesis.given(strategies.text())
    def test_reverse_matches_slicing(self, text: str) -> None:
        self.assertEqual(lectern_lang.reverse_string(text), text[::-1])

    @hypothesis.given(strategies.text(), chars, chars)
    def test_replace_matches_str_replace(self, text: str, target: str, replacement: str) -> None:
        self.assertEqual(
            lectern_lang.replace_char(text, target, replacement),
            text.replace(target, replacement),
        )

    @hypothesis.given(strategies.text(), chars, chars)
    def test_replace_round_trip(self, text: str, target: str, replacement: str) -> None:
        hypothesis.assume(target != replacement and replacement not in text)
        swapped = lectern_lang.replace_char(text, target, replacement)
        self.assertEqual(lectern_lang.replace_char(swapped, replacement, target), text)

    @hypothesis.given(strategies.text(), chars, chars)
    def test_recursive_and_iterative_agree(self, text: str, target: str, replacement: str) -> None:
        self.assertEqual(
            string_methods._replace_recursively(text, target, replacement),
            string_methods._replace_iteratively(text, target, replacement),
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
