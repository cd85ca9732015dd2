"""Abstract base formatter and output container.

WHY: Every output format consumes the same Lexicon IR but produces
different text. This base class enforces a consistent interface so the
CLI and library callers can work with any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type. ``write()`` sends
the text from ``iter_content()`` to an already-open sink.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; every current formatter returns one item
- ``suffix`` starts with a hyphen, e.g. ``"-wordlist.xml"``
- ``write()`` closes the sink exactly once, on success and on failure
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import IO, Iterator

from wordlist_converter.core.ir import Lexicon
from wordlist_converter.errors import DictionaryIOError


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``"-wordlist.xml"`` → ``"en-wordlist.xml"``.
        content: The file content.
        media_type: MIME type for the content, e.g. ``"application/xml"``.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Wordlist XML'."""

    @abstractmethod
    def format(self, lexicon: Lexicon) -> list[FormatterOutput]:
        """Convert the Lexicon IR into one or more output files.

        Args:
            lexicon: The assembled lexicon.

        Returns:
            List of FormatterOutput objects.
        """

    def iter_content(self, lexicon: Lexicon) -> Iterator[str]:
        """Yield the text ``write()`` sends to a sink.

        The default yields each output's content whole.
        Formatters that can render incrementally override this.
        """
        for output in self.format(lexicon):
            yield output.content

    def write(self, lexicon: Lexicon, sink: IO[str]) -> None:
        """Write ``lexicon`` to ``sink`` piece by piece, then close the sink.

        Raises:
            DictionaryIOError: Writing to or closing the sink failed.
        """
        try:
            for piece in self.iter_content(lexicon):
                sink.write(piece)
        except OSError as e:
            raise DictionaryIOError("Failed to write {}: {}".format(self.name, e)) from e
        finally:
            try:
                sink.close()
            except OSError as e:
                raise DictionaryIOError("Failed to close {} sink: {}".format(self.name, e)) from e
