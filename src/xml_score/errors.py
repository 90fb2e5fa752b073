"""Failure taxonomy for a conversion.

Fatal errors derive from :class:`ConversionError` and abort the whole
conversion. :class:`PathError` is a ``ConversionError`` too, but the converter
recovers from it. Per-node score problems are reported as
:class:`ScoreFormatWarning` instances and never raised out of the aggregator.
"""
from __future__ import annotations

from typing import Optional, Sequence, Tuple


class ConversionError(Exception):
    """Base class for conversion failures."""

    kind = "ConversionError"
    exit_code = 1


class InputReadError(ConversionError, OSError):
    kind = "IOError"
    exit_code = 2

    def __init__(self, path, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read file: {self.path} ({reason})")


class ParseError(ConversionError, ValueError):
    kind = "ParseError"
    exit_code = 3

    def __init__(self, message: str, position: Optional[Tuple[int, int]] = None):
        self.position = position
        if position:
            message = f"{message} (line {position[0]}, column {position[1]})"
        super().__init__(message)


class MappingError(ConversionError):
    kind = "MappingError"
    exit_code = 4


class ScoreOverflowError(ConversionError, OverflowError):
    kind = "OverflowError"
    exit_code = 5

    def __init__(self, total: int, score: int, bits: int):
        self.total = total
        self.score = score
        self.bits = bits
        super().__init__(
            f"Score {score} added to running total {total} exceeds the "
            f"{bits}-bit signed integer range"
        )


class PathError(ConversionError, LookupError):
    kind = "PathError"

    def __init__(self, path: Sequence[str], missing: str, reason: str):
        self.path = tuple(path)
        self.missing = missing
        self.reason = reason
        super().__init__(
            f"Cannot reach '{'.'.join(self.path)}': '{missing}' {reason}"
        )


class ScoreFormatWarning(UserWarning):
    """A matching element whose text is not a usable integer."""

    kind = "ScoreFormatWarning"

    def __init__(self, index: int, tag: str, text: str, reason: str):
        self.index = index
        self.tag = tag
        self.text = text
        self.reason = reason
        super().__init__(
            f"Invalid score format at node index {index} <{tag}>: {text!r} ({reason})"
        )
