"""Wordlist Converter: XML wordlists to and from an in-memory lexicon.

WHY: Predictive-text dictionaries are maintained as three separate XML
documents (unigrams, shortcuts, bigrams). Tools that build or inspect
dictionaries need a single in-memory lexicon that joins them by word,
and a deterministic way to write that lexicon back out.

HOW: Three-stage pipeline: read relations (bigrams, then shortcuts),
read unigrams into the Lexicon IR, format (pluggable formatters).
Each stage is independently testable.

RULES:
- Relation documents are always consumed before the unigram document
- All formatters consume the same Lexicon IR
- Adding a new output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
