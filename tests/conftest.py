"""Shared test fixtures for the wordlist_converter test suite.

WHY: Most test modules need the same small dictionary: one unigram file,
one shortcut file, and one bigram file that agree on their words.
Centralizing them here keeps every test on the same worked example.

HOW: Module constants hold the raw documents; fixtures wrap them in fresh
StringIO streams (readers consume their stream) and provide a lexicon
already on the memory scale for formatter and round-trip tests.

RULES:
- "cat" has f=200, shortcut "kitty" priority 32 (→ 2), bigram "sat" p=48 (→ 3)
- "dog" has bigrams only, "sat" has no relations at all
- The memory-scale lexicon is what the three documents assemble into
"""

import io

import pytest

from wordlist_converter.core.ir import Lexicon, WeightedString


UNIGRAM_XML = """<wordlist>
  <w f="200">cat</w>
  <w f="150">dog</w>
  <w f="90">sat</w>
</wordlist>
"""

SHORTCUT_XML = """<map>
  <entry shortcut="cat">
    <target replacement="kitty" priority="32"/>
  </entry>
</map>
"""

BIGRAM_XML = """<bigrams>
  <bi w1="cat">
    <w w2="sat" p="48"/>
  </bi>
  <bi w1="dog">
    <w w2="sat" p="255"/>
    <w w2="cat" p="15"/>
  </bi>
</bigrams>
"""


@pytest.fixture
def unigram_source():
    return io.StringIO(UNIGRAM_XML)


@pytest.fixture
def shortcut_source():
    return io.StringIO(SHORTCUT_XML)


@pytest.fixture
def bigram_source():
    return io.StringIO(BIGRAM_XML)


@pytest.fixture
def sample_lexicon():
    """The lexicon the three sample documents assemble into."""
    lexicon = Lexicon()
    lexicon.add(
        "cat", 200,
        shortcut_targets=[WeightedString("kitty", 2)],
        bigrams=[WeightedString("sat", 3)],
    )
    lexicon.add(
        "dog", 150,
        bigrams=[WeightedString("sat", 15), WeightedString("cat", 0)],
    )
    lexicon.add("sat", 90)
    return lexicon


@pytest.fixture
def sample_documents():
    """Raw (unigram, shortcut, bigram) documents as strings."""
    return UNIGRAM_XML, SHORTCUT_XML, BIGRAM_XML
