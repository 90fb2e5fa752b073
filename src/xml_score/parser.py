"""Parse raw XML into an ElementTree element.

Non-validating: DTDs are not enforced, but the input must be well-formed.
"""
from __future__ import annotations

from typing import Union
import xml.etree.ElementTree as ET

from xml_score.errors import ParseError


def parse_document(data: Union[bytes, str]) -> ET.Element:
    if not data.strip():
        raise ParseError("Empty document")
    try:
        return ET.fromstring(data)
    except ET.ParseError as exc:
        position = getattr(exc, "position", None)
        # expat appends its own "line X, column Y"; report it once
        message = str(exc).split(": line ")[0]
        raise ParseError(f"Malformed XML: {message}", position) from exc
    except UnicodeError as exc:
        raise ParseError(f"Undecodable XML: {exc}") from exc
