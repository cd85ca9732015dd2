"""Streaming reader for shortcut and bigram documents.

WHY: Shortcuts and bigrams are both "word → weighted word" edges, stored
in separate XML documents that only differ in their tag and attribute
names. The unigram reader needs them as ready-made lookup maps keyed by
the exact source word.

HOW: One handler, parameterised by a RelationSpec. It remembers the
current source word from each source element. Every destination element
becomes a WeightedString (frequency rescaled to the memory scale) that
is appended to the list for the current source word. All data is carried
on attributes, so element ends and text are ignored.

RULES:
- Bigram document: <bi w1="…"> containing <w w2="…" p="0..256"/>
- Shortcut document: <entry shortcut="…"> containing
  <target replacement="…" priority="0..256"/>
- Frequency rescale: xml // 16 (255 → 15, 16 → 1, 15 → 0)
- Destination before any source element → MalformedDocumentError
- Missing source/destination attribute → MalformedDocumentError
- Non-integer frequency (anything but sign + ASCII digits) → AttributeFormatError
- A list for a key exists only once an edge for that key was seen
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import IO, Any, Dict, List, Optional

from wordlist_converter.config import xml_to_memory_frequency
from wordlist_converter.core.ir import WeightedString
from wordlist_converter.core.reader import local_attributes, local_name, parse_stream
from wordlist_converter.errors import AttributeFormatError, MalformedDocumentError

logger = logging.getLogger(__name__)

RelationMap = Dict[str, List[WeightedString]]


@dataclass(frozen=True)
class RelationSpec:
    """Tag and attribute names of one kind of relation document."""

    name: str
    src_tag: str
    src_attribute: str
    dst_tag: str
    dst_attribute: str
    dst_frequency: str


BIGRAM_RELATION = RelationSpec(
    name="bigram",
    src_tag="bi",
    src_attribute="w1",
    dst_tag="w",
    dst_attribute="w2",
    dst_frequency="p",
)

SHORTCUT_RELATION = RelationSpec(
    name="shortcut",
    src_tag="entry",
    src_attribute="shortcut",
    dst_tag="target",
    dst_attribute="replacement",
    dst_frequency="priority",
)


_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


def parse_frequency(tag: str, attribute: str, value: str) -> int:
    """Parse an integer attribute, raising AttributeFormatError otherwise.

    Only an optional sign and ASCII digits are accepted, so digit
    separators ("1_0") and non-ASCII digits are format errors.
    """
    text = value.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise AttributeFormatError(tag, attribute, value)
    return int(text)


class AssociativeListHandler:
    """lxml parser target that builds a relation map.

    The only state is the current source word. ``close()`` hands the
    finished map back through ``parse_stream``.
    """

    def __init__(self, spec: RelationSpec) -> None:
        self.spec = spec
        self._src: Optional[str] = None
        self._assoc_map: RelationMap = {}
        self._edges = 0

    def start(self, tag: str, attrib: Any, nsmap: Any = None) -> None:
        name = local_name(tag)
        spec = self.spec
        if name == spec.src_tag:
            attrs = local_attributes(attrib)
            src = attrs.get(spec.src_attribute)
            if src is None:
                raise MalformedDocumentError(
                    "<{}> is missing its '{}' attribute".format(spec.src_tag, spec.src_attribute)
                )
            self._src = src
        elif name == spec.dst_tag:
            if self._src is None:
                raise MalformedDocumentError(
                    "<{}> found before any <{}> element".format(spec.dst_tag, spec.src_tag)
                )
            attrs = local_attributes(attrib)
            dst = attrs.get(spec.dst_attribute)
            raw_freq = attrs.get(spec.dst_frequency)
            if dst is None or raw_freq is None:
                raise MalformedDocumentError(
                    "<{}> needs both '{}' and '{}' attributes".format(
                        spec.dst_tag, spec.dst_attribute, spec.dst_frequency
                    )
                )
            freq = parse_frequency(spec.dst_tag, spec.dst_frequency, raw_freq)
            edge = WeightedString(dst, xml_to_memory_frequency(freq))
            self._assoc_map.setdefault(self._src, []).append(edge)
            self._edges += 1

    def end(self, tag: str) -> None:
        pass

    def data(self, data: str) -> None:
        pass

    def close(self) -> RelationMap:
        logger.debug(
            "Read %d <%s> edges for %d source words",
            self._edges, self.spec.dst_tag, len(self._assoc_map),
        )
        return self._assoc_map


def read_relation_map(
    source: IO[Any],
    spec: RelationSpec,
    chunk_size: Optional[int] = None,
) -> RelationMap:
    """Read a whole relation document into a map.

    Args:
        source: Readable stream holding the relation document.
        spec: Tag and attribute names for this kind of document.
        chunk_size: Optional read size override.

    Returns:
        Mapping from source word to its ordered destination list.
    """
    handler = AssociativeListHandler(spec)
    return parse_stream(source, handler, spec.name, chunk_size=chunk_size)
