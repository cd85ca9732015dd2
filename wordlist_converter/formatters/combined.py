"""Combined plain-text formatter.

WHY: The line-based "combined" wordlist is easier to grep and to edit by
hand than XML, and is the text format other dictionary tools consume.

HOW: Same word order as the XML formatter. One line per word, followed
by one indented line per shortcut target and per bigram.

RULES:
- Word line: " word=<text>,f=<frequency>"
- Relation lines: "  shortcut=<text>,f=<frequency>" and
  "  bigram=<text>,f=<frequency>"
- Shortcuts are listed before bigrams
- Output suffix: "-combined.txt"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import List

from wordlist_converter.config import BIGRAM_TAG, SHORTCUT_TAG, WORD_ATTR
from wordlist_converter.core.ir import Lexicon
from wordlist_converter.formatters.base import BaseFormatter, FormatterOutput


class CombinedFormatter(BaseFormatter):
    """Formats a Lexicon as combined plain text."""

    @property
    def name(self) -> str:
        return "Combined text"

    def format(self, lexicon: Lexicon) -> list[FormatterOutput]:
        lines: List[str] = []
        for word in sorted(lexicon):
            lines.append(" {}={},f={}".format(WORD_ATTR, word.text, word.frequency))
            for tag, entries in ((SHORTCUT_TAG, word.shortcut_targets), (BIGRAM_TAG, word.bigrams)):
                for entry in entries or ():
                    lines.append("  {}={},f={}".format(tag, entry.text, entry.frequency))

        content = "\n".join(lines) + "\n" if lines else ""
        return [
            FormatterOutput(
                suffix="-combined.txt",
                content=content,
                media_type="text/plain",
            )
        ]
