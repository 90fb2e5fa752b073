from xml_score.settings import Settings


def test_defaults_without_config():
    s = Settings.load(None)
    assert s.logging.level == "INFO"
    assert s.conversion.score_tag == "Score"
    assert s.conversion.indent == 4
    rule = s.conversion.rule()
    assert rule.target_path == ("Response", "ResultBlock", "MatchSummary")
    assert rule.result_key == "TotalMatchScore"


def test_yaml_override_is_merged_over_base(tmp_path):
    (tmp_path / "base.yaml").write_text(
        "logging:\n  level: INFO\n  format: human\nconversion:\n  score_tag: Score\n  indent: 4\n"
    )
    override = tmp_path / "prod.yaml"
    override.write_text("logging:\n  format: json\nconversion:\n  score_tag: Points\n")

    s = Settings.load(str(override))
    assert s.logging.level == "INFO"
    assert s.logging.format == "json"
    assert s.conversion.score_tag == "Points"
    assert s.conversion.indent == 4


def test_config_without_base_file(tmp_path):
    cfg = tmp_path / "only.yaml"
    cfg.write_text("conversion:\n  target_path: [Doc, Body, Summary]\n")
    s = Settings.load(str(cfg))
    assert s.conversion.rule().parent_path == ("Doc", "Body")


def test_environment_override(monkeypatch):
    monkeypatch.setenv("XML_SCORE_CONVERSION__SCORE_TAG", "Points")
    monkeypatch.setenv("XML_SCORE_LOGGING__LEVEL", "DEBUG")
    s = Settings()
    assert s.conversion.score_tag == "Points"
    assert s.logging.level == "DEBUG"


def test_deep_update():
    d = {"a": {"b": 1, "c": 2}, "x": 1}
    Settings._deep_update(d, {"a": {"c": 3}, "y": 2})
    assert d == {"a": {"b": 1, "c": 3}, "x": 1, "y": 2}


def test_shipped_configs_load():
    from pathlib import Path

    configs = Path(__file__).resolve().parents[1] / "configs"
    base = Settings.load(str(configs / "base.yaml"))
    prod = Settings.load(str(configs / "prod.yaml"))
    assert base.conversion.rule() == prod.conversion.rule()
    assert base.logging.format == "human"
    assert prod.logging.format == "json"
    assert prod.logging.level == "WARNING"
