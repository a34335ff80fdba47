import pytest
from pydantic import ValidationError

from destructure.config.settings import MatcherSettings, RewriteSettings, Settings, load_settings
from destructure.core.sequence import SequenceStrategy


def test_defaults() -> None:
    settings = load_settings()
    assert settings.sequence_strategy is SequenceStrategy.STRICT
    assert settings.rewrite_max_passes == 100


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("DESTRUCTURE_SEQUENCE_STRATEGY", "search")
    monkeypatch.setenv("DESTRUCTURE_REWRITE_MAX_PASSES", "5")
    settings = Settings()
    assert settings.sequence_strategy is SequenceStrategy.SEARCH
    assert settings.rewrite_max_passes == 5
    assert MatcherSettings().sequence_strategy is SequenceStrategy.SEARCH
    assert RewriteSettings().rewrite_max_passes == 5


def test_dotenv_file(tmp_path) -> None:
    (tmp_path / ".env").write_text("DESTRUCTURE_SEQUENCE_STRATEGY=search\n", encoding="utf-8")
    assert load_settings().sequence_strategy is SequenceStrategy.SEARCH


def test_explicit_overrides() -> None:
    assert load_settings(rewrite_max_passes=3).rewrite_max_passes == 3


def test_invalid_values(monkeypatch) -> None:
    monkeypatch.setenv("DESTRUCTURE_SEQUENCE_STRATEGY", "fuzzy")
    with pytest.raises(ValidationError):
        Settings()
    monkeypatch.delenv("DESTRUCTURE_SEQUENCE_STRATEGY")
    with pytest.raises(ValidationError):
        load_settings(rewrite_max_passes=0)
