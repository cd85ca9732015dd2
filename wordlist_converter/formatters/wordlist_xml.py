"""Wordlist XML formatter: the format-2 document with nested relations.

WHY: Dictionaries are reviewed and diffed as XML. The output must be
byte-for-byte reproducible for the same lexicon, so words are written in
a fixed order regardless of how the lexicon was built.

HOW: Words are sorted by their natural order (text), then each becomes
a <w> element carrying the word and its frequency as attributes, with
one nested <shortcut> or <bigram> element per relation entry. The
layout (indentation, blank separators) follows the format-2 files the
makedict tool has always produced.

RULES:
- Root: <wordlist format="2">
- Per word: <w word="…" f="…">, then shortcuts, then bigrams, then </w>
- Relation lists that are None produce no nested elements at all
- Relation frequencies are written on the memory scale, not rescaled
- "&", "<" and ">" are escaped everywhere, '"' in attributes as well
- CR is written as a character reference; so are TAB and LF in
  attributes, which the parser would otherwise normalize to spaces
- Output suffix: "-wordlist.xml"
- Media type: "application/xml"
"""

from __future__ import annotations

from typing import IO, Iterator, List
from xml.sax.saxutils import escape

from wordlist_converter.config import (
    BIGRAM_TAG,
    FORMAT_ATTR,
    FORMAT_VERSION,
    FREQUENCY_ATTR,
    SHORTCUT_TAG,
    WORD_ATTR,
    WORD_TAG,
    WORDLIST_TAG,
)
from wordlist_converter.core.ir import Lexicon, WeightedString
from wordlist_converter.formatters.base import BaseFormatter, FormatterOutput

_ATTR_ENTITIES = {'"': "&quot;", "\t": "&#9;", "\n": "&#10;", "\r": "&#13;"}
_TEXT_ENTITIES = {"\r": "&#13;"}


def _attr(value: object) -> str:
    return escape(str(value), _ATTR_ENTITIES)


def _text(value: str) -> str:
    return escape(value, _TEXT_ENTITIES)


def _relation_elements(tag: str, entries: List[WeightedString]) -> Iterator[str]:
    yield "\n"
    for entry in entries:
        yield '    <{0} {1}="{2}">{3}</{0}>\n'.format(
            tag, FREQUENCY_ATTR, _attr(entry.frequency), _text(entry.text)
        )
    yield "  "


def iter_wordlist_xml(lexicon: Lexicon) -> Iterator[str]:
    """Yield the wordlist document for ``lexicon`` piece by piece."""
    yield '<{} {}="{}">\n'.format(WORDLIST_TAG, FORMAT_ATTR, FORMAT_VERSION)
    for word in sorted(lexicon):
        yield '  <{} {}="{}" {}="{}">'.format(
            WORD_TAG, WORD_ATTR, _attr(word.text), FREQUENCY_ATTR, _attr(word.frequency)
        )
        if word.shortcut_targets is not None:
            yield from _relation_elements(SHORTCUT_TAG, word.shortcut_targets)
        if word.bigrams is not None:
            yield from _relation_elements(BIGRAM_TAG, word.bigrams)
        yield "</{}>\n".format(WORD_TAG)
    yield "</{}>\n".format(WORDLIST_TAG)


class WordlistXmlFormatter(BaseFormatter):
    """Formats a Lexicon as a format-2 wordlist XML document."""

    @property
    def name(self) -> str:
        return "Wordlist XML"

    def format(self, lexicon: Lexicon) -> list[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-wordlist.xml",
                content="".join(iter_wordlist_xml(lexicon)),
                media_type="application/xml",
            )
        ]

    def iter_content(self, lexicon: Lexicon) -> Iterator[str]:
        return iter_wordlist_xml(lexicon)


def write_dictionary_xml(sink: IO[str], lexicon: Lexicon) -> None:
    """Write ``lexicon`` as wordlist XML to ``sink`` and close it.

    The sink is closed exactly once whether writing succeeds or fails.
    """
    WordlistXmlFormatter().write(lexicon, sink)
