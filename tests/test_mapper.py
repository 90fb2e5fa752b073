import xml.etree.ElementTree as ET

import pytest

from xml_score.errors import MappingError
from xml_score.mapper import document_to_json, element_to_value


def _map(xml: str):
    return document_to_json(ET.fromstring(xml))


def test_text_only_element_is_a_string():
    assert _map("<Score>5</Score>") == {"Score": "5"}
    assert _map("<Flag> true </Flag>") == {"Flag": "true"}


def test_empty_element_is_empty_string():
    assert _map("<a/>") == {"a": ""}
    assert _map("<a>   </a>") == {"a": ""}


def test_attributes_are_prefixed_and_text_goes_under_text_key():
    assert _map('<Match id="1" kind="x">Alpha</Match>') == {
        "Match": {"@id": "1", "@kind": "x", "#text": "Alpha"}
    }
    assert _map('<Match id="1"/>') == {"Match": {"@id": "1"}}


def test_repeated_children_become_lists_in_document_order():
    out = _map("<r><i>1</i><j>x</j><i>2</i><i>3</i></r>")
    assert out == {"r": {"i": ["1", "2", "3"], "j": "x"}}
    assert list(out["r"]) == ["i", "j"]


def test_single_child_is_not_wrapped():
    assert _map("<r><i><k>v</k></i></r>") == {"r": {"i": {"k": "v"}}}


def test_mixed_content():
    assert _map("<p>Hello <b>big</b></p>") == {"p": {"#text": "Hello", "b": "big"}}
    assert _map("<p>Hello <b>big</b> world</p>") == {
        "p": {"#text": ["Hello", "world"], "b": "big"}
    }


def test_whitespace_between_elements_is_ignored():
    out = _map("<r>\n    <a>1</a>\n    <b>2</b>\n</r>")
    assert out == {"r": {"a": "1", "b": "2"}}


def test_key_order_attributes_text_children():
    out = _map('<r z="1" a="2">t<c/><b/></r>')
    assert list(out["r"]) == ["@z", "@a", "#text", "c", "b"]


def test_namespaced_tags_are_preserved():
    out = _map('<r xmlns:n="urn:x"><n:a>1</n:a></r>')
    assert out == {"r": {"{urn:x}a": "1"}}


def test_no_type_coercion():
    out = _map('<r n="1"><x>42</x><y>false</y><z>3.5</z></r>')
    assert out == {"r": {"@n": "1", "x": "42", "y": "false", "z": "3.5"}}


def test_non_element_nodes_raise_mapping_error():
    root = ET.Element("r")
    root.append(ET.Comment("note"))
    with pytest.raises(MappingError):
        element_to_value(root)


def test_deep_nesting_raises_mapping_error():
    root = ET.fromstring("<a>" * 3000 + "</a>" * 3000)
    with pytest.raises(MappingError, match="too deep"):
        document_to_json(root)
