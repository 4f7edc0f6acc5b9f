import pytest
from pydantic import ValidationError

from src.scoring import KeywordLocale, PriorityScorer
from src.utils.config import Config, ConfigManager, ScoringConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("LOG_LEVEL", "API_HOST", "API_PORT", "KEYWORD_LOCALE"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_match_engine_constants():
    config = Config()

    assert config.scoring.weights == {"demand": 0.4, "market": 0.3, "competition": 0.3}
    assert config.scoring.levels == {"high": 3.5, "medium": 2.5}
    assert config.scoring.sample.preliminary == 50
    assert config.scoring.sample.reliable == 200
    assert config.scoring.market.locale == KeywordLocale.ZH


def test_bundled_config_file_loads():
    manager = ConfigManager()

    assert manager.config.scoring == ScoringConfig()
    assert manager.config.api.port == 8000


def test_missing_config_file_falls_back_to_defaults(tmp_path):
    manager = ConfigManager(tmp_path / "missing.yaml")

    assert manager.yaml_config == {}
    assert manager.config == Config()


def test_yaml_values_reach_the_scorers(tmp_path):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "scoring:\n"
        "  market:\n"
        "    locale: en\n"
        "  competition:\n"
        "    sentinel_substrings: ['N/A']\n",
        encoding="utf-8",
    )

    config = ConfigManager(config_file).config
    scorer = PriorityScorer(config.model_dump())

    assert scorer.market_scorer.locale == KeywordLocale.EN
    assert scorer.market_scorer.is_popular(["fitness tracker"])
    assert scorer.competition_scorer.sentinel_substrings == ("N/A",)


def test_environment_overrides_yaml(tmp_path, monkeypatch):
    config_file = tmp_path / "config.yaml"
    config_file.write_text("logging:\n  level: INFO\napi:\n  port: 8000\n", encoding="utf-8")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("API_PORT", "9100")
    monkeypatch.setenv("KEYWORD_LOCALE", "en")

    config = ConfigManager(config_file).config

    assert config.logging.level == "DEBUG"
    assert config.api.port == 9100
    assert config.scoring.market.locale == KeywordLocale.EN


def test_weights_must_sum_to_one():
    with pytest.raises(ValidationError):
        ScoringConfig(weights={"demand": 0.5, "market": 0.3, "competition": 0.3})

    with pytest.raises(ValidationError):
        ScoringConfig(weights={"demand": 0.7, "market": 0.3})


def test_levels_must_be_ordered():
    with pytest.raises(ValidationError):
        ScoringConfig(levels={"high": 2.0, "medium": 2.5})


def test_sample_thresholds_must_be_ordered():
    with pytest.raises(ValidationError):
        Config(scoring={"sample": {"preliminary": 300, "reliable": 200}})
