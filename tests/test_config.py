"""Tests for pathhelper.config: PathConfig frozen dataclass."""

from pathlib import Path

import pytest

from pathhelper.config import ENV_VAR, PathConfig
from pathhelper.errors import ConfigurationError


class TestPathConfig:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(ENV_VAR, raising=False)
        cfg = PathConfig()

        assert cfg.project_root is None
        assert cfg.candidates == ("app", "src/app")
        assert cfg.home_label == "Home"
        assert cfg.debounce == 0.1
        assert cfg.ignore_hidden is True
        assert cfg.log_level == "info"
        assert cfg.environment == "development"
        assert cfg.is_production is False

    def test_override(self) -> None:
        cfg = PathConfig(project_root="site", candidates=("routes",), debounce=0.0)

        assert cfg.project_root == "site"
        assert cfg.candidates == ("routes",)
        assert cfg.debounce == 0.0

    def test_frozen(self) -> None:
        cfg = PathConfig()

        with pytest.raises(AttributeError):
            cfg.debounce = 1.0  # type: ignore[misc]

    def test_empty_candidates_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="candidates"):
            PathConfig(candidates=())

    def test_negative_debounce_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="debounce"):
            PathConfig(debounce=-1.0)


class TestEnvironment:
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_VAR, "production")
        assert PathConfig().is_production is True

    def test_case_insensitive(self) -> None:
        assert PathConfig(environment="Production").is_production is True

    def test_explicit_wins(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(ENV_VAR, "production")
        assert PathConfig(environment="development").is_production is False


class TestResolveProjectRoot:
    def test_cwd_when_unset(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        assert PathConfig().resolve_project_root() == Path.cwd()

    def test_absolute(self, tmp_path: Path) -> None:
        assert PathConfig(project_root=tmp_path).resolve_project_root() == tmp_path.resolve()

    def test_relative(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.chdir(tmp_path)
        (tmp_path / "site").mkdir()
        resolved = PathConfig(project_root="site").resolve_project_root()
        assert resolved == (tmp_path / "site").resolve()
        assert resolved.is_absolute()
