"""Tests for the list-literal helper."""

from orst import avec


class TestAvec:
    def test_empty_vec(self):
        v: list[int] = avec()
        assert v == []

    def test_single(self):
        v = avec(42)
        assert len(v) == 1
        assert v[0] == 42

    def test_double(self):
        v = avec(42, 43)
        assert v == [42, 43]

    def test_many(self):
        word = "dasdanjshaskdhasjkdhasdjkhasdjkashdjkashdajks"
        v = avec(word, word, word, word, word)
        assert v == [word] * 5

    def test_returns_fresh_list(self):
        assert avec(1) is not avec(1)
