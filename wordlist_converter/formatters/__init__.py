"""Output formatter registry: pluggable format hub.

WHY: The CLI needs a single lookup to find the right formatter by name.
A central dict makes it trivial to add new formats: create the
formatter class, import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["wordlist_xml"]()``.

RULES:
- Keys are snake_case identifiers (used in CLI flags, config, etc.)
- Values are BaseFormatter subclasses (not instances)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wordlist_converter.formatters.combined import CombinedFormatter
from wordlist_converter.formatters.wordlist_xml import WordlistXmlFormatter

if TYPE_CHECKING:
    from wordlist_converter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "wordlist_xml": WordlistXmlFormatter,
    "combined": CombinedFormatter,
}
