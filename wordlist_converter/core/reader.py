"""Incremental XML parsing shared by the relation and unigram readers.

WHY: Wordlists can be large, so documents are never loaded whole. Both
readers are event handlers; they only differ in what they do with the
events. This module owns the loop that feeds a stream to the parser and
the translation of library failures into our error types.

HOW: An ``lxml.etree.XMLParser`` is built with the handler as its parser
target. The source is read in READ_CHUNK_SIZE pieces and fed to the
parser; ``close()`` finishes the document and returns whatever the
handler's own ``close()`` returns.

RULES:
- Sources may yield ``str`` or ``bytes``; both are fed as-is
- XMLSyntaxError → MalformedDocumentError
- OSError while reading → DictionaryIOError
- Errors raised by the handler itself propagate unchanged
"""

from __future__ import annotations

import logging
from typing import IO, Any, Dict, Optional

from lxml import etree

from wordlist_converter.config import READ_CHUNK_SIZE
from wordlist_converter.errors import DictionaryIOError, MalformedDocumentError

logger = logging.getLogger(__name__)


def local_name(name: str) -> str:
    """Strip an lxml ``{namespace}`` prefix from a tag or attribute name."""
    return name.rpartition("}")[2]


def local_attributes(attrib: Any) -> Dict[str, str]:
    """Return element attributes keyed by their local names."""
    return {local_name(key): value for key, value in attrib.items()}


def parse_stream(
    source: IO[Any],
    target: Any,
    label: str,
    chunk_size: Optional[int] = None,
) -> Any:
    """Feed a whole document from ``source`` to ``target``.

    Args:
        source: Readable text or binary stream holding one XML document.
        target: Parser target with ``start``/``end``/``data``/``close``.
        label: Document name used in log and error messages.
        chunk_size: Read size override, defaults to READ_CHUNK_SIZE.

    Returns:
        The value returned by ``target.close()``.

    Raises:
        MalformedDocumentError: The document is not well-formed.
        DictionaryIOError: The source could not be read.
    """
    size = chunk_size or READ_CHUNK_SIZE
    parser = etree.XMLParser(target=target)
    logger.debug("Parsing %s document", label)

    try:
        while True:
            try:
                chunk = source.read(size)
            except OSError as e:
                raise DictionaryIOError("Failed to read {} document: {}".format(label, e)) from e
            if not chunk:
                break
            parser.feed(chunk)
        return parser.close()
    except etree.XMLSyntaxError as e:
        raise MalformedDocumentError("Malformed {} document: {}".format(label, e)) from e
