"""
converter.py

read -> parse -> {map, aggregate} -> augment

Fatal failures (unreadable input, malformed XML, unmappable tree, overflowing
total) propagate to the caller. Recoverable ones, i.e. bad individual scores
and a missing target path, are reported to the observer and collected on the
result, which still carries the best-effort JSON structure.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from xml_score.aggregator import aggregate_scores
from xml_score.augmenter import augment
from xml_score.constants import INDENT_FACTOR
from xml_score.errors import PathError, ScoreFormatWarning
from xml_score.mapper import document_to_json
from xml_score.observers import ConversionObserver, resolve_observer
from xml_score.parser import parse_document
from xml_score.reader import read_document_bytes
from xml_score.rules import DEFAULT_RULE, ExtractionRule


@dataclass
class ConversionResult:
    data: Dict[str, Any]
    total: int
    warnings: List[Union[ScoreFormatWarning, PathError]] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        return not self.warnings

    @property
    def summary_added(self) -> bool:
        return not any(isinstance(w, PathError) for w in self.warnings)


def convert_document(
    data: Union[bytes, str],
    rule: ExtractionRule = DEFAULT_RULE,
    observer: Optional[ConversionObserver] = None,
) -> ConversionResult:
    obs = resolve_observer(observer)

    root = parse_document(data)
    tally = aggregate_scores(root, rule, obs)
    structure = document_to_json(root)

    result = ConversionResult(data=structure, total=tally.total)
    result.warnings.extend(tally.warnings)

    try:
        augment(structure, tally.total, rule)
    except PathError as exc:
        obs.error(
            "Failed to add total score to JSON",
            path=rule.dotted_path(),
            reason=str(exc),
        )
        result.warnings.append(exc)

    return result


def convert_file(
    path: Union[str, Path],
    rule: ExtractionRule = DEFAULT_RULE,
    observer: Optional[ConversionObserver] = None,
) -> ConversionResult:
    """Convert the XML file at ``path``; the file is checked before parsing."""
    obs = resolve_observer(observer)
    raw = read_document_bytes(path)
    obs.info("Read XML document", path=str(path), size=len(raw))
    return convert_document(raw, rule, obs)


def to_json_text(structure: Any, indent: int = INDENT_FACTOR) -> str:
    return json.dumps(structure, ensure_ascii=False, indent=indent)
