"""
mapper.py

Source-agnostic XML -> JSON mapping. Conventions:

- An element with no attributes and no child elements maps to its text as a
  string ("" when empty)
- XML attributes become keys prefixed with '@' (e.g. attribute 'id' -> '@id')
- Text of an element that also has attributes or children is stored under
  '#text'; several text segments around child elements become a list
- Child elements with the same tag are grouped into lists, in document order;
  a tag that occurs once maps straight to the child's value
- Whitespace-only text is dropped and all text is stripped
- Values are never coerced: numbers and booleans stay strings
- Namespaces are preserved in tag names (e.g. '{ns}tag')
"""
from __future__ import annotations

from typing import Any, Dict, List
import xml.etree.ElementTree as ET

from xml_score.constants import ATTR_PREFIX, TEXT_KEY
from xml_score.errors import MappingError


def _text_segments(elem: ET.Element) -> List[str]:
    segments = [elem.text] + [child.tail for child in elem]
    return [s.strip() for s in segments if s and s.strip()]


def element_to_value(elem: ET.Element) -> Any:
    """Recursively convert an ElementTree Element into a JSON-ready value."""
    if not isinstance(elem.tag, str):
        raise MappingError(f"Cannot map non-element node {elem.tag!r}")

    node: Dict[str, Any] = {}

    # Attributes
    for k, v in elem.attrib.items():
        node[f"{ATTR_PREFIX}{k}"] = v

    texts = _text_segments(elem)
    children = list(elem)

    if not node and not children:
        return texts[0] if texts else ""

    # Text
    if texts:
        node[TEXT_KEY] = texts[0] if len(texts) == 1 else texts

    # Children
    child_map: Dict[str, List[Any]] = {}
    for child in children:
        if not isinstance(child.tag, str):
            raise MappingError(
                f"Cannot map non-element node {child.tag!r} inside <{elem.tag}>"
            )
        child_map.setdefault(child.tag, []).append(element_to_value(child))

    # Flatten singletons
    for tag, items in child_map.items():
        node[tag] = items[0] if len(items) == 1 else items

    return node


def document_to_json(root: ET.Element) -> Dict[str, Any]:
    """Map a whole document, keyed by its root tag."""
    try:
        return {root.tag: element_to_value(root)}
    except RecursionError as exc:
        raise MappingError("Document nesting is too deep to map") from exc
