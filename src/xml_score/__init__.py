"""XML -> JSON conversion with score aggregation."""

from xml_score.converter import (
    ConversionResult,
    convert_document,
    convert_file,
    to_json_text,
)
from xml_score.errors import (
    ConversionError,
    InputReadError,
    MappingError,
    ParseError,
    PathError,
    ScoreFormatWarning,
    ScoreOverflowError,
)
from xml_score.rules import DEFAULT_RULE, ExtractionRule

__all__ = [
    "ConversionError",
    "ConversionResult",
    "DEFAULT_RULE",
    "ExtractionRule",
    "InputReadError",
    "MappingError",
    "ParseError",
    "PathError",
    "ScoreFormatWarning",
    "ScoreOverflowError",
    "convert_document",
    "convert_file",
    "to_json_text",
]
