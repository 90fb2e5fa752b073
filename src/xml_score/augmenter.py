from __future__ import annotations

from typing import Any, Dict

from xml_score.errors import PathError
from xml_score.rules import DEFAULT_RULE, ExtractionRule


def augment(
    structure: Dict[str, Any], total: int, rule: ExtractionRule = DEFAULT_RULE
) -> Dict[str, Any]:
    """Write ``{rule.result_key: total}`` at ``rule.target_path``.

    Every parent segment must already be an object. Nothing is modified when
    that does not hold.
    """
    node: Any = structure
    for depth, segment in enumerate(rule.parent_path):
        if not isinstance(node, dict) or segment not in node:
            raise PathError(rule.parent_path, segment, "is missing")
        node = node[segment]
        if not isinstance(node, dict):
            kind = "an array" if isinstance(node, list) else "not an object"
            raise PathError(rule.parent_path[: depth + 1], segment, f"is {kind}")

    node[rule.summary_key] = {rule.result_key: total}
    return structure
