"""Configuration constants, frequency scales, and .env loading.

WHY: Tag names, attribute names, and the two frequency scales are shared
by every reader and writer. Keeping them as plain module constants (not
mutable state) makes them easy to find and impossible to change from
under a running parse.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level strings and ints. Runtime defaults (chunk size, default
formats, log level) can be overridden via environment variables.

RULES:
- XML documents use the 0..256 scale, memory uses 0..16
- Conversion is floor division by XML_TO_MEMORY_RATIO (16)
- Only relation edges (shortcuts, bigrams) are rescaled, never the
  unigram frequency
- All defaults can be overridden via environment variables
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

# ---------------------------------------------------------------------------
# Wordlist document: tags and attributes
# ---------------------------------------------------------------------------

WORDLIST_TAG = "wordlist"
FORMAT_ATTR = "format"
FORMAT_VERSION = "2"
"""Format marker written on the root element. Version 1 had no relations."""

WORD_TAG = "w"
BIGRAM_TAG = "bigram"
SHORTCUT_TAG = "shortcut"
FREQUENCY_ATTR = "f"
WORD_ATTR = "word"

# ---------------------------------------------------------------------------
# Frequency scales
# ---------------------------------------------------------------------------

XML_MAX = 256
"""Relation frequencies in XML documents are ints in 0..XML_MAX."""

MEMORY_MAX = 16
"""Relation frequencies in memory are ints in 0..MEMORY_MAX."""

XML_TO_MEMORY_RATIO = XML_MAX // MEMORY_MAX


def xml_to_memory_frequency(value: int) -> int:
    """Rescale a relation frequency from the XML scale to the memory scale.

    Lossy by design of the format: 255 → 15, 16 → 1, 15 → 0.
    """
    return value // XML_TO_MEMORY_RATIO


# ---------------------------------------------------------------------------
# Runtime defaults
# ---------------------------------------------------------------------------

READ_CHUNK_SIZE = int(os.getenv("WORDLIST_READ_CHUNK_SIZE", "65536"))
"""Number of characters (or bytes) fed to the XML parser per read."""

DEFAULT_FORMATS = os.getenv("WORDLIST_DEFAULT_FORMATS", "wordlist_xml")
LOG_LEVEL = os.getenv("WORDLIST_LOG_LEVEL", "WARNING").upper()
