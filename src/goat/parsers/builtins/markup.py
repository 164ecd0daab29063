# topmark:header:start
#
#   project      : Goat
#   file         : markup.py
#   file_relpath : src/goat/parsers/builtins/markup.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Markup formats.

XML documents are converted into the generic value algebra as follows:

- the document becomes ``{root_tag: element}``;
- an element with attributes or child elements becomes a ``dict``: attributes under
  ``"@name"`` keys, children under their tag name (repeated tags collapse into a
  ``list`` in document order), and non-blank text under ``"#text"``;
- a leaf element without attributes becomes its (stripped) text.

Namespaced tags and attributes are addressed by their local name.

Exports:
    PARSERS: Parser for XML.
"""

from __future__ import annotations

from typing import Any

from lxml import etree

from goat.parsers.base import FormatParser

TEXT_KEY = "#text"
ATTR_PREFIX = "@"


def _local_name(tag: str) -> str:
    return etree.QName(tag).localname


def element_to_value(element: etree._Element) -> Any:
    """Convert an lxml element (recursively) into a generic data value."""
    text: str = (element.text or "").strip()
    children = list(element.iterchildren(tag=etree.Element))
    if not children and not element.attrib:
        return text

    value: dict[str, Any] = {}
    for key, attr in element.attrib.items():
        value[ATTR_PREFIX + _local_name(key)] = attr

    grouped: dict[str, list[Any]] = {}
    for child in children:
        grouped.setdefault(_local_name(child.tag), []).append(element_to_value(child))
    for tag, items in grouped.items():
        value[tag] = items[0] if len(items) == 1 else items

    if text:
        value[TEXT_KEY] = text
    return value


def parse_xml(raw: str) -> dict[str, Any]:
    """Parse an XML document without resolving entities or touching the network.

    The input is already decoded text, so an `encoding` in the XML declaration is ignored.
    """
    parser = etree.XMLParser(
        encoding="utf-8",
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
    )
    root = etree.fromstring(raw.encode("utf-8"), parser)
    return {_local_name(root.tag): element_to_value(root)}


PARSERS: list[FormatParser] = [
    FormatParser(
        name="xml",
        description="XML document (elements as mappings, '@' attributes, '#text')",
        parse=parse_xml,
        errors=(etree.XMLSyntaxError,),
    ),
]
