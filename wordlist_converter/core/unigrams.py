"""Streaming reader for the unigram word list.

WHY: The unigram document is the primary one: every lexicon entry comes
from a <w> element in it. Each entry must be joined with the shortcut and
bigram lists already read from the relation documents, by exact word.

HOW: An explicit state machine driven by parser events. Opening a <w>
element resets the text accumulator and reads its frequency. Text events
inside the element are concatenated (the parser may split text, e.g.
around an entity such as "&amp;"). Closing the element looks the word up
in both relation maps and inserts it into the lexicon.

The reader also accepts the format-2 documents the wordlist formatter
writes: the word may be carried on a ``word`` attribute, and <shortcut>
and <bigram> children carry relation entries that are already on the
memory scale.

RULES:
- <w f="…"> is required to have an integer ``f`` attribute
- Missing map key → relation is None, never an empty list
- Nested <shortcut>/<bigram> entries are appended after map entries and
  are not rescaled
- Any other element directly under the root is ignored with its text;
  any other element inside <w> is a MalformedDocumentError
"""

from __future__ import annotations

import enum
import logging
from typing import Any, List, Optional

from wordlist_converter.config import (
    BIGRAM_TAG,
    FREQUENCY_ATTR,
    SHORTCUT_TAG,
    WORD_ATTR,
    WORD_TAG,
)
from wordlist_converter.core.ir import Lexicon, WeightedString
from wordlist_converter.core.reader import local_attributes, local_name
from wordlist_converter.core.relations import RelationMap, parse_frequency
from wordlist_converter.errors import MalformedDocumentError

logger = logging.getLogger(__name__)


class ParserState(enum.Enum):
    NONE = "none"
    START = "start"
    WORD = "word"
    SHORTCUT = "shortcut"
    BIGRAM = "bigram"
    UNKNOWN = "unknown"
    END = "end"


def _required_frequency(tag: str, attrib: Any) -> int:
    attrs = local_attributes(attrib)
    raw = attrs.get(FREQUENCY_ATTR)
    if raw is None:
        raise MalformedDocumentError(
            "<{}> is missing its '{}' attribute".format(tag, FREQUENCY_ATTR)
        )
    return parse_frequency(tag, FREQUENCY_ATTR, raw)


class UnigramHandler:
    """lxml parser target that fills a Lexicon from <w> elements.

    Args:
        lexicon: The lexicon to populate.
        shortcuts: Shortcut relation map. May be empty.
        bigrams: Bigram relation map. May be empty.
    """

    def __init__(
        self,
        lexicon: Lexicon,
        shortcuts: RelationMap,
        bigrams: RelationMap,
    ) -> None:
        self.lexicon = lexicon
        self._shortcuts_map = shortcuts
        self._bigrams_map = bigrams
        self.state = ParserState.NONE

        self._word = ""
        self._word_attr: Optional[str] = None
        self._freq = 0
        self._nested_shortcuts: List[WeightedString] = []
        self._nested_bigrams: List[WeightedString] = []
        self._child_text = ""
        self._child_freq = 0
        self._unknown_depth = 0

    # -- parser target interface ------------------------------------------

    def start(self, tag: str, attrib: Any, nsmap: Any = None) -> None:
        name = local_name(tag)

        if self.state == ParserState.NONE:
            # Root wrapper element
            self.state = ParserState.START
            return

        if self.state == ParserState.UNKNOWN:
            self._unknown_depth += 1
            return

        if self.state == ParserState.START:
            if name == WORD_TAG:
                self._start_word(attrib)
            else:
                self.state = ParserState.UNKNOWN
                self._unknown_depth = 1
            return

        if self.state == ParserState.WORD:
            if name == SHORTCUT_TAG:
                self._start_child(ParserState.SHORTCUT, attrib)
            elif name == BIGRAM_TAG:
                self._start_child(ParserState.BIGRAM, attrib)
            else:
                raise MalformedDocumentError(
                    "Unexpected <{}> inside <{}> for {!r}".format(name, WORD_TAG, self._word)
                )
            return

        # SHORTCUT / BIGRAM children hold text only
        raise MalformedDocumentError(
            "Unexpected <{}> inside <{}>".format(name, self.state.value)
        )

    def data(self, data: str) -> None:
        if self.state == ParserState.WORD:
            self._word += data
        elif self.state in (ParserState.SHORTCUT, ParserState.BIGRAM):
            self._child_text += data

    def end(self, tag: str) -> None:
        if self.state == ParserState.UNKNOWN:
            self._unknown_depth -= 1
            if self._unknown_depth == 0:
                self.state = ParserState.START
        elif self.state == ParserState.SHORTCUT:
            self._nested_shortcuts.append(WeightedString(self._child_text, self._child_freq))
            self.state = ParserState.WORD
        elif self.state == ParserState.BIGRAM:
            self._nested_bigrams.append(WeightedString(self._child_text, self._child_freq))
            self.state = ParserState.WORD
        elif self.state == ParserState.WORD:
            self._finish_word()
            self.state = ParserState.START
        elif self.state == ParserState.START:
            # Closing the root wrapper
            self.state = ParserState.END

    def close(self) -> Lexicon:
        logger.debug("Unigram pass finished with %d words", len(self.lexicon))
        return self.lexicon

    # -- helpers ----------------------------------------------------------

    def _start_word(self, attrib: Any) -> None:
        self.state = ParserState.WORD
        self._word = ""
        self._word_attr = local_attributes(attrib).get(WORD_ATTR)
        self._freq = _required_frequency(WORD_TAG, attrib)
        self._nested_shortcuts = []
        self._nested_bigrams = []

    def _start_child(self, state: ParserState, attrib: Any) -> None:
        self.state = state
        self._child_text = ""
        self._child_freq = _required_frequency(state.value, attrib)

    def _finish_word(self) -> None:
        text = self._word_attr if self._word_attr is not None else self._word
        shortcuts = _combine(self._shortcuts_map.get(text), self._nested_shortcuts)
        bigrams = _combine(self._bigrams_map.get(text), self._nested_bigrams)
        self.lexicon.add(text, self._freq, shortcuts, bigrams)


def _combine(
    from_map: Optional[List[WeightedString]],
    nested: List[WeightedString],
) -> Optional[List[WeightedString]]:
    if not nested:
        return from_map
    if from_map is None:
        return list(nested)
    return list(from_map) + nested
