"""Core readers and intermediate representation modules.

WHY: The core package contains the stable heart of the converter:
the Lexicon IR and the streaming readers that build it from XML.
These are consumed by all formatters and by the CLI.

HOW: ir.py defines the data structures, relations.py reads shortcut
and bigram documents into relation maps, unigrams.py reads the word
list into the lexicon, assembler.py runs them in the required order.

RULES:
- IR dataclasses are the contract; change with care
- Relation maps are complete before the unigram pass starts
- Reading logic is format-agnostic, no formatter-specific logic here
"""
