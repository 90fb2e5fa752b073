# src/xml_score/settings.py
import os
from typing import List, Optional

import yaml
from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from xml_score.constants import (
    DEFAULT_INT_BITS,
    DEFAULT_RESULT_KEY,
    DEFAULT_SCORE_TAG,
    DEFAULT_TARGET_PATH,
    FILE_ENCODING,
    INDENT_FACTOR,
)
from xml_score.rules import ExtractionRule


class LoggingConfig(BaseModel):
    level: str = "INFO"
    format: str = "human"  # "json" or "human"
    structured: bool = False


class ConversionConfig(BaseModel):
    score_tag: str = DEFAULT_SCORE_TAG
    target_path: List[str] = list(DEFAULT_TARGET_PATH)
    result_key: str = DEFAULT_RESULT_KEY
    int_bits: int = DEFAULT_INT_BITS
    indent: int = INDENT_FACTOR

    def rule(self) -> ExtractionRule:
        return ExtractionRule(
            match_tag=self.score_tag,
            target_path=tuple(self.target_path),
            result_key=self.result_key,
            int_bits=self.int_bits,
        )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="XML_SCORE_",
        env_nested_delimiter="__",
        extra="ignore",
    )
    logging: LoggingConfig = LoggingConfig()
    conversion: ConversionConfig = ConversionConfig()

    @staticmethod
    def _deep_update(d: dict, u: dict) -> dict:
        # Recursively update dict d with values from u
        for k, v in u.items():
            if isinstance(v, dict) and isinstance(d.get(k), dict):
                d[k] = Settings._deep_update(d[k], v)
            else:
                d[k] = v
        return d

    @staticmethod
    def _read_yaml(path: str) -> dict:
        with open(path, "r", encoding=FILE_ENCODING) as f:
            return yaml.safe_load(f) or {}

    @staticmethod
    def load(path: Optional[str] = None) -> "Settings":
        """Load settings from ``path`` layered over ``base.yaml`` beside it.

        Without a path only defaults and ``XML_SCORE_*`` environment
        variables apply.
        """
        if not path:
            return Settings()
        base_path = os.path.join(os.path.dirname(path), "base.yaml")
        merged: dict = {}
        if os.path.exists(base_path) and os.path.abspath(base_path) != os.path.abspath(path):
            merged = Settings._read_yaml(base_path)
        merged = Settings._deep_update(merged, Settings._read_yaml(path))
        return Settings(**merged)
