"""Extraction rule: which elements to sum and where the sum is written."""
from __future__ import annotations

from typing import Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from xml_score.constants import (
    DEFAULT_INT_BITS,
    DEFAULT_RESULT_KEY,
    DEFAULT_SCORE_TAG,
    DEFAULT_TARGET_PATH,
)


class ExtractionRule(BaseModel):
    """Sum the integer text of every ``match_tag`` element and store it as
    ``{result_key: total}`` under ``target_path``.

    All segments of ``target_path`` except the last must already exist as
    objects in the mapped document; the last segment is (re)created.
    """

    model_config = ConfigDict(frozen=True)

    match_tag: str = DEFAULT_SCORE_TAG
    target_path: Tuple[str, ...] = DEFAULT_TARGET_PATH
    result_key: str = DEFAULT_RESULT_KEY
    int_bits: int = DEFAULT_INT_BITS

    @field_validator("match_tag", "result_key")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must be a non-empty string")
        return v

    @field_validator("target_path")
    @classmethod
    def _path_segments(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if len(v) < 2:
            raise ValueError("target_path needs a parent and a summary key")
        if any(not seg or not seg.strip() for seg in v):
            raise ValueError("target_path segments must be non-empty")
        return v

    @field_validator("int_bits")
    @classmethod
    def _bits(cls, v: int) -> int:
        if v < 2:
            raise ValueError("int_bits must be at least 2")
        return v

    @property
    def parent_path(self) -> Tuple[str, ...]:
        return self.target_path[:-1]

    @property
    def summary_key(self) -> str:
        return self.target_path[-1]

    @property
    def max_value(self) -> int:
        return 2 ** (self.int_bits - 1) - 1

    @property
    def min_value(self) -> int:
        return -(2 ** (self.int_bits - 1))

    @classmethod
    def from_dotted(cls, match_tag: str, target_path: str, result_key: str, **kw):
        """Build a rule from a dotted path such as ``Response.ResultBlock.MatchSummary``."""
        return cls(
            match_tag=match_tag,
            target_path=tuple(target_path.split(".")),
            result_key=result_key,
            **kw,
        )

    def dotted_path(self) -> str:
        return ".".join(self.target_path + (self.result_key,))


DEFAULT_RULE = ExtractionRule()
