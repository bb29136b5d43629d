"""Tests for settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from searchlink.config.settings import SearchSettings, Settings


class TestDefaults:
    def test_defaults(self, settings: Settings) -> None:
        assert settings.backend.root == "http://localhost:9200"
        assert settings.backend.index == "objects"
        assert settings.search.default_max_results == 100
        assert settings.search.default_field == "name"
        assert settings.search.selector_fields == ["name", "type"]
        assert settings.search.edit_distance is None
        assert settings.observability.log_format == "json"


class TestEnvironment:
    def test_nested_env_vars(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCHLINK_BACKEND__ROOT", "http://es.internal:9200")
        monkeypatch.setenv("SEARCHLINK_SEARCH__EDIT_DISTANCE", "1")
        settings = Settings(_env_file=None)  # type: ignore[call-arg]
        assert settings.backend.root == "http://es.internal:9200"
        assert settings.search.edit_distance == 1


class TestValidation:
    def test_selector_fields_from_json_string(self) -> None:
        assert SearchSettings(selector_fields='["name", "owner"]').selector_fields == ["name", "owner"]  # type: ignore[arg-type]

    def test_selector_fields_from_comma_list(self) -> None:
        assert SearchSettings(selector_fields="name, type").selector_fields == ["name", "type"]  # type: ignore[arg-type]

    def test_rejects_non_positive_default_max_results(self) -> None:
        with pytest.raises(ValidationError):
            SearchSettings(default_max_results=0)

    def test_rejects_large_edit_distance(self) -> None:
        with pytest.raises(ValidationError):
            SearchSettings(edit_distance=5)


class TestYaml:
    def test_from_yaml(self, tmp_path: Path) -> None:
        config = tmp_path / "searchlink.yaml"
        config.write_text(
            "backend:\n"
            "  root: http://es.yaml:9200\n"
            "  index: things\n"
            "search:\n"
            "  default_max_results: 25\n"
            "observability:\n"
            "  log_format: console\n"
        )
        settings = Settings.from_yaml(config)
        assert settings.backend.root == "http://es.yaml:9200"
        assert settings.backend.index == "things"
        assert settings.search.default_max_results == 25
        assert settings.observability.log_format == "console"

    def test_from_yaml_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            Settings.from_yaml(tmp_path / "missing.yaml")

    def test_yaml_wins_over_environment(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCHLINK_BACKEND__INDEX", "from-env")
        config = tmp_path / "searchlink.yaml"
        config.write_text("backend:\n  index: from-yaml\n")
        assert Settings.from_yaml(config).backend.index == "from-yaml"
