"""Intermediate representation for an assembled lexicon.

WHY: The three XML documents describe one dictionary from three angles.
Formatters, and any other consumer, need a single well-typed view with
each word's frequency, shortcut targets, and bigram successors together.

HOW: Three types form a hierarchy:
  WeightedString : a text with a frequency (shortcut target or bigram)
  Word           : one dictionary entry, ordered by its text
  Lexicon        : all Word entries, keyed by text

RULES:
- shortcut_targets / bigrams are None when the word has no relation of
  that kind; an empty list is never stored
- Relation frequencies are on the memory scale (0..16)
- Word ordering is by text only, so sorted output is reproducible
- Adding a word twice merges into the existing entry
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WeightedString:
    """A shortcut target or bigram successor with its frequency."""

    text: str
    frequency: int


@dataclass
class Word:
    """A single dictionary entry.

    RULES:
    - text: the word itself, unique within a Lexicon
    - frequency: unigram frequency, carried through unchanged from XML
    - shortcut_targets: alternate expansions, or None
    - bigrams: likely successor words, or None
    """

    text: str
    frequency: int
    shortcut_targets: Optional[List[WeightedString]] = None
    bigrams: Optional[List[WeightedString]] = None

    def __lt__(self, other: "Word") -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return self.text < other.text


def _merge_weighted(
    existing: Optional[List[WeightedString]],
    incoming: Optional[List[WeightedString]],
) -> Optional[List[WeightedString]]:
    """Merge two relation lists, keeping the higher frequency per text."""
    if not incoming:
        return existing
    if existing is None:
        return list(incoming)

    merged = list(existing)
    index_by_text = {ws.text: i for i, ws in enumerate(merged)}
    for ws in incoming:
        i = index_by_text.get(ws.text)
        if i is None:
            index_by_text[ws.text] = len(merged)
            merged.append(ws)
        elif ws.frequency > merged[i].frequency:
            merged[i] = ws
    return merged


class Lexicon:
    """Collection of Word entries keyed by their text.

    WHY: Both the unigram reader and every formatter work with the same
    container. Iteration order is insertion order, but formatters must
    not rely on it; they sort.

    HOW: A dict from text to Word. ``add`` inserts a new entry or merges
    into an existing one: the higher frequency wins, unseen relation
    entries are appended, and repeated relation entries keep the higher
    frequency.
    """

    def __init__(self) -> None:
        self._words: Dict[str, Word] = {}

    def add(
        self,
        text: str,
        frequency: int,
        shortcut_targets: Optional[List[WeightedString]] = None,
        bigrams: Optional[List[WeightedString]] = None,
    ) -> Word:
        """Insert a word, or merge it into the entry with the same text."""
        current = self._words.get(text)
        if current is None:
            word = Word(
                text=text,
                frequency=frequency,
                shortcut_targets=list(shortcut_targets) if shortcut_targets else None,
                bigrams=list(bigrams) if bigrams else None,
            )
            self._words[text] = word
            return word

        logger.debug("Merging duplicate entry for %r", text)
        current.frequency = max(current.frequency, frequency)
        current.shortcut_targets = _merge_weighted(current.shortcut_targets, shortcut_targets)
        current.bigrams = _merge_weighted(current.bigrams, bigrams)
        return current

    def get(self, text: str) -> Optional[Word]:
        return self._words.get(text)

    def __contains__(self, text: object) -> bool:
        return text in self._words

    def __iter__(self) -> Iterator[Word]:
        return iter(self._words.values())

    def __len__(self) -> int:
        return len(self._words)

    def __repr__(self) -> str:
        return "Lexicon({} words)".format(len(self._words))
