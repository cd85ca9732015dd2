"""Typed failures raised while reading or writing wordlists.

WHY: Callers need to tell a broken document apart from a bad number, a
failing disk, or a missing required input, because each one calls for a
different fix. None of them is recovered internally.

RULES:
- Every failure derives from DictionaryError
- Parser and OS errors are translated at the pass boundary with
  ``raise ... from`` so the original cause stays attached
"""

from __future__ import annotations


class DictionaryError(Exception):
    """Base class for all wordlist conversion failures."""


class MalformedDocumentError(DictionaryError):
    """The document is not well-formed or has an unexpected structure."""


class AttributeFormatError(DictionaryError, ValueError):
    """A frequency or priority attribute is not an integer."""

    def __init__(self, tag: str, attribute: str, value: str) -> None:
        self.tag = tag
        self.attribute = attribute
        self.value = value
        super().__init__(
            "Attribute '{}' of <{}> is not an integer: {!r}".format(attribute, tag, value)
        )


class DictionaryIOError(DictionaryError, OSError):
    """A source could not be read or the sink could not be written."""


class ConfigurationError(DictionaryError):
    """The pipeline was called without a required input."""
