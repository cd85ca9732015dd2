"""Tests for dictionary assembly from the three documents.

WHY: The assembler is the only place the bigram → shortcut → unigram
order is enforced. Getting the order wrong silently drops every relation,
which is exactly the kind of regression nobody notices until users do.

HOW: Tests run read_dictionary_xml on the sample documents from
conftest.py, check the worked "cat" example, swap the relation sources,
demonstrate what a unigram-first pass loses, and cover each failure kind
plus the file-based entry point.
"""

import io

import pytest

from wordlist_converter.core.assembler import read_dictionary_files, read_dictionary_xml
from wordlist_converter.core.ir import Lexicon, WeightedString
from wordlist_converter.core.reader import parse_stream
from wordlist_converter.core.relations import (
    BIGRAM_RELATION,
    SHORTCUT_RELATION,
    read_relation_map,
)
from wordlist_converter.core.unigrams import UnigramHandler
from wordlist_converter.errors import (
    AttributeFormatError,
    ConfigurationError,
    DictionaryIOError,
    MalformedDocumentError,
)


def _snapshot(lexicon):
    return {
        w.text: (w.frequency, w.shortcut_targets, w.bigrams)
        for w in lexicon
    }


class TestEndToEndExample:
    """The worked example: cat / kitty / sat."""

    def test_cat_entry(self, unigram_source, shortcut_source, bigram_source):
        lexicon = read_dictionary_xml(unigram_source, shortcut_source, bigram_source)
        cat = lexicon.get("cat")
        assert cat.text == "cat"
        assert cat.frequency == 200
        assert cat.shortcut_targets == [WeightedString("kitty", 2)]
        assert cat.bigrams == [WeightedString("sat", 3)]

    def test_matches_sample_lexicon(self, unigram_source, shortcut_source, bigram_source,
                                    sample_lexicon):
        lexicon = read_dictionary_xml(unigram_source, shortcut_source, bigram_source)
        assert _snapshot(lexicon) == _snapshot(sample_lexicon)

    def test_relations_for_unknown_words_are_dropped(self, unigram_source):
        bigrams = io.StringIO('<b><bi w1="ghost"><w w2="cat" p="64"/></bi></b>')
        lexicon = read_dictionary_xml(unigram_source, bigrams=bigrams)
        assert "ghost" not in lexicon
        assert len(lexicon) == 3


class TestOptionalSources:
    """Absent relation sources behave as empty maps."""

    def test_unigrams_only(self, unigram_source):
        lexicon = read_dictionary_xml(unigram_source)
        assert len(lexicon) == 3
        for word in lexicon:
            assert word.shortcut_targets is None
            assert word.bigrams is None

    def test_shortcuts_only(self, unigram_source, shortcut_source):
        lexicon = read_dictionary_xml(unigram_source, shortcuts=shortcut_source)
        assert lexicon.get("cat").shortcut_targets == [WeightedString("kitty", 2)]
        assert lexicon.get("cat").bigrams is None

    def test_missing_unigrams(self, shortcut_source):
        with pytest.raises(ConfigurationError):
            read_dictionary_xml(None, shortcuts=shortcut_source)


class TestOrdering:
    """Relations must be complete before the unigram pass."""

    def test_relation_read_order_does_not_matter(self, sample_documents):
        unigram_xml, shortcut_xml, bigram_xml = sample_documents

        def assemble(relations_first):
            maps = {}
            for kind in relations_first:
                if kind == "bigrams":
                    maps[kind] = read_relation_map(io.StringIO(bigram_xml), BIGRAM_RELATION)
                else:
                    maps[kind] = read_relation_map(io.StringIO(shortcut_xml), SHORTCUT_RELATION)
            handler = UnigramHandler(Lexicon(), maps["shortcuts"], maps["bigrams"])
            return parse_stream(io.StringIO(unigram_xml), handler, "unigram")

        forward = assemble(["bigrams", "shortcuts"])
        backward = assemble(["shortcuts", "bigrams"])
        assert _snapshot(forward) == _snapshot(backward)
        assert forward.get("cat").bigrams == [WeightedString("sat", 3)]

    def test_unigram_pass_first_loses_relations(self, sample_documents):
        unigram_xml, _, bigram_xml = sample_documents

        # Running the unigram pass before any relation was read
        bigram_map = {}
        handler = UnigramHandler(Lexicon(), {}, bigram_map)
        lexicon = parse_stream(io.StringIO(unigram_xml), handler, "unigram")
        bigram_map.update(read_relation_map(io.StringIO(bigram_xml), BIGRAM_RELATION))

        assert lexicon.get("cat").bigrams is None
        correct = read_dictionary_xml(io.StringIO(unigram_xml), bigrams=io.StringIO(bigram_xml))
        assert correct.get("cat").bigrams == [WeightedString("sat", 3)]


class TestAssemblyErrors:
    """Any failure aborts the whole assembly."""

    def test_malformed_bigrams(self, unigram_source, shortcut_source):
        with pytest.raises(MalformedDocumentError):
            read_dictionary_xml(unigram_source, shortcut_source, io.StringIO("<b><bi w1='a'>"))

    def test_bad_shortcut_priority(self, unigram_source):
        shortcuts = io.StringIO(
            '<m><entry shortcut="cat"><target replacement="k" priority="x"/></entry></m>'
        )
        with pytest.raises(AttributeFormatError):
            read_dictionary_xml(unigram_source, shortcuts)

    def test_empty_unigram_document(self):
        with pytest.raises(MalformedDocumentError):
            read_dictionary_xml(io.StringIO(""))

    def test_read_failure(self):
        class BrokenStream:
            def read(self, size=-1):
                raise OSError("disk on fire")

        with pytest.raises(DictionaryIOError):
            read_dictionary_xml(BrokenStream())


class TestReadFromFiles:
    """read_dictionary_files opens each path for its own pass."""

    def test_reads_all_three(self, tmp_path, sample_documents):
        unigram_xml, shortcut_xml, bigram_xml = sample_documents
        (tmp_path / "words.xml").write_text(unigram_xml, encoding="utf-8")
        (tmp_path / "shortcuts.xml").write_text(shortcut_xml, encoding="utf-8")
        (tmp_path / "bigrams.xml").write_text(bigram_xml, encoding="utf-8")

        lexicon = read_dictionary_files(
            tmp_path / "words.xml",
            tmp_path / "shortcuts.xml",
            tmp_path / "bigrams.xml",
        )
        assert lexicon.get("cat").shortcut_targets == [WeightedString("kitty", 2)]
        assert lexicon.get("dog").bigrams == [WeightedString("sat", 15), WeightedString("cat", 0)]

    def test_latin1_declaration(self, tmp_path):
        doc = '<?xml version="1.0" encoding="ISO-8859-1"?><wordlist><w f="9">naïve</w></wordlist>'
        path = tmp_path / "latin.xml"
        path.write_bytes(doc.encode("iso-8859-1"))
        assert "naïve" in read_dictionary_files(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DictionaryIOError):
            read_dictionary_files(tmp_path / "nope.xml")

    def test_missing_unigram_path(self):
        with pytest.raises(ConfigurationError):
            read_dictionary_files(None)
