from __future__ import annotations

from dataclasses import dataclass, field
import re
from typing import List, Optional
import xml.etree.ElementTree as ET

from xml_score.errors import ScoreFormatWarning, ScoreOverflowError
from xml_score.observers import ConversionObserver, resolve_observer
from xml_score.rules import DEFAULT_RULE, ExtractionRule

# Base-10, optional sign, ASCII digits only. int() alone would also accept
# underscores and non-ASCII digits.
_INTEGER_RE = re.compile(r"[+-]?[0-9]+")


@dataclass
class ScoreTally:
    total: int = 0
    matched: int = 0
    skipped: int = 0
    warnings: List[ScoreFormatWarning] = field(default_factory=list)


def parse_score(text: str, rule: ExtractionRule = DEFAULT_RULE) -> int:
    """Parse one score; raises ValueError when it is not a usable integer."""
    stripped = text.strip()
    if not stripped:
        raise ValueError("empty text")
    if not _INTEGER_RE.fullmatch(stripped):
        raise ValueError("not a base-10 integer")
    value = int(stripped)
    if not rule.min_value <= value <= rule.max_value:
        raise ValueError(f"outside the {rule.int_bits}-bit signed integer range")
    return value


def aggregate_scores(
    root: ET.Element,
    rule: ExtractionRule = DEFAULT_RULE,
    observer: Optional[ConversionObserver] = None,
) -> ScoreTally:
    """Sum the direct text of every element tagged ``rule.match_tag``.

    Elements are visited in document order, the root included. Unparseable
    scores are skipped with a warning; a total that leaves the accumulator's
    range raises ScoreOverflowError.
    """
    obs = resolve_observer(observer)
    tally = ScoreTally()

    for index, elem in enumerate(root.iter(rule.match_tag)):
        tally.matched += 1
        text = elem.text or ""
        try:
            score = parse_score(text, rule)
        except ValueError as exc:
            warning = ScoreFormatWarning(index, rule.match_tag, text.strip(), str(exc))
            tally.skipped += 1
            tally.warnings.append(warning)
            obs.warning(
                "Invalid score format",
                index=index,
                tag=rule.match_tag,
                text=text.strip(),
                reason=str(exc),
            )
            continue

        if score > 0 and rule.max_value - tally.total < score:
            raise ScoreOverflowError(tally.total, score, rule.int_bits)
        if score < 0 and rule.min_value - tally.total > score:
            raise ScoreOverflowError(tally.total, score, rule.int_bits)
        tally.total += score

    obs.info(
        "Calculated total score",
        total=tally.total,
        matched=tally.matched,
        skipped=tally.skipped,
    )
    return tally
