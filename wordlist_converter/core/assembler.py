"""Dictionary assembly: run the three readers in the required order.

WHY: The unigram reader looks up each word's shortcuts and bigrams at the
moment the word is closed. Relations read after that point would never be
attached, so both relation documents must be fully read first. This
module is the single place that enforces that order.

HOW: read_dictionary_xml parses the bigram document, then the shortcut
document, into relation maps (empty when the source is absent), then
parses the unigram document into a fresh Lexicon.
read_dictionary_files does the same from paths, opening each file only
for its own pass.

RULES:
- Order: bigrams → shortcuts → unigrams, never interleaved
- Missing unigram source → ConfigurationError
- Missing relation source → empty map (every lookup is absent)
- Any failure aborts the whole assembly; no partial Lexicon is returned
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Any, Optional, Union

from wordlist_converter.core.ir import Lexicon
from wordlist_converter.core.reader import parse_stream
from wordlist_converter.core.relations import (
    BIGRAM_RELATION,
    SHORTCUT_RELATION,
    RelationMap,
    RelationSpec,
    read_relation_map,
)
from wordlist_converter.core.unigrams import UnigramHandler
from wordlist_converter.errors import ConfigurationError, DictionaryIOError

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_dictionary_xml(
    unigrams: Optional[IO[Any]],
    shortcuts: Optional[IO[Any]] = None,
    bigrams: Optional[IO[Any]] = None,
    chunk_size: Optional[int] = None,
) -> Lexicon:
    """Read a dictionary from its unigram, shortcut, and bigram documents.

    Args:
        unigrams: Stream with the word list. Required.
        shortcuts: Stream with the shortcut document, or None.
        bigrams: Stream with the bigram document, or None.
        chunk_size: Optional read size override for all three passes.

    Returns:
        The fully populated Lexicon.

    Raises:
        ConfigurationError: ``unigrams`` is None.
        MalformedDocumentError: A document is malformed.
        AttributeFormatError: A frequency attribute is not an integer.
        DictionaryIOError: A source could not be read.
    """
    if unigrams is None:
        raise ConfigurationError("A unigram source is required")

    bigram_map: RelationMap = {}
    if bigrams is not None:
        bigram_map = read_relation_map(bigrams, BIGRAM_RELATION, chunk_size=chunk_size)
        logger.info("Read bigrams for %d words", len(bigram_map))

    shortcut_map: RelationMap = {}
    if shortcuts is not None:
        shortcut_map = read_relation_map(shortcuts, SHORTCUT_RELATION, chunk_size=chunk_size)
        logger.info("Read shortcuts for %d words", len(shortcut_map))

    handler = UnigramHandler(Lexicon(), shortcut_map, bigram_map)
    lexicon = parse_stream(unigrams, handler, "unigram", chunk_size=chunk_size)
    logger.info("Assembled lexicon with %d words", len(lexicon))
    return lexicon


def _open_source(path: PathLike, label: str) -> IO[bytes]:
    try:
        return open(path, "rb")
    except OSError as e:
        raise DictionaryIOError("Cannot open {} file {}: {}".format(label, path, e)) from e


def _read_relation_file(path: Optional[PathLike], spec: RelationSpec) -> Optional[RelationMap]:
    if path is None:
        return None
    with _open_source(path, spec.name) as source:
        return read_relation_map(source, spec)


def read_dictionary_files(
    unigrams_path: Optional[PathLike],
    shortcuts_path: Optional[PathLike] = None,
    bigrams_path: Optional[PathLike] = None,
) -> Lexicon:
    """Read a dictionary from files on disk.

    Files are opened in binary mode so each document's own XML encoding
    declaration is honoured. Each file is closed as soon as its pass ends.
    """
    if unigrams_path is None:
        raise ConfigurationError("A unigram file is required")

    bigram_map = _read_relation_file(bigrams_path, BIGRAM_RELATION) or {}
    shortcut_map = _read_relation_file(shortcuts_path, SHORTCUT_RELATION) or {}

    handler = UnigramHandler(Lexicon(), shortcut_map, bigram_map)
    with _open_source(unigrams_path, "unigram") as source:
        lexicon = parse_stream(source, handler, "unigram")
    logger.info("Assembled lexicon with %d words from %s", len(lexicon), unigrams_path)
    return lexicon
