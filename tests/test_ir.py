"""Unit tests for the Lexicon IR.

WHY: Every reader writes into the Lexicon and every formatter reads from
it. Its ordering and merge rules decide what ends up in the output.
"""

import pytest

from wordlist_converter.core.ir import Lexicon, WeightedString, Word


class TestWord:
    def test_ordering_is_by_text(self):
        words = [Word("b", 1), Word("a", 99), Word("c", 0)]
        assert [w.text for w in sorted(words)] == ["a", "b", "c"]

    def test_equality_includes_relations(self):
        assert Word("a", 1) != Word("a", 1, bigrams=[WeightedString("b", 1)])

    def test_weighted_string_is_immutable(self):
        ws = WeightedString("x", 1)
        with pytest.raises(AttributeError):
            ws.frequency = 2


class TestLexicon:
    def test_add_and_lookup(self):
        lexicon = Lexicon()
        lexicon.add("hello", 42)
        assert "hello" in lexicon
        assert len(lexicon) == 1
        assert lexicon.get("hello") == Word("hello", 42)
        assert lexicon.get("missing") is None

    def test_empty_lists_are_stored_as_none(self):
        lexicon = Lexicon()
        word = lexicon.add("x", 1, shortcut_targets=[], bigrams=[])
        assert word.shortcut_targets is None
        assert word.bigrams is None

    def test_lists_are_copied(self):
        bigrams = [WeightedString("b", 1)]
        lexicon = Lexicon()
        lexicon.add("a", 1, bigrams=bigrams)
        bigrams.append(WeightedString("c", 2))
        assert lexicon.get("a").bigrams == [WeightedString("b", 1)]

    def test_duplicate_add_merges(self):
        lexicon = Lexicon()
        lexicon.add("a", 10, bigrams=[WeightedString("b", 1), WeightedString("c", 5)])
        merged = lexicon.add(
            "a", 5,
            shortcut_targets=[WeightedString("aa", 3)],
            bigrams=[WeightedString("b", 4), WeightedString("d", 2)],
        )
        assert len(lexicon) == 1
        assert merged.frequency == 10
        assert merged.shortcut_targets == [WeightedString("aa", 3)]
        assert merged.bigrams == [
            WeightedString("b", 4),
            WeightedString("c", 5),
            WeightedString("d", 2),
        ]

    def test_duplicate_add_keeps_higher_relation_frequency(self):
        lexicon = Lexicon()
        lexicon.add("a", 1, bigrams=[WeightedString("b", 9)])
        lexicon.add("a", 1, bigrams=[WeightedString("b", 2)])
        assert lexicon.get("a").bigrams == [WeightedString("b", 9)]
