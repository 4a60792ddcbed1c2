"""
Rules loading and validation tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from primer.rules import (
    Rules,
    RulesAdapter,
    load_rules,
    load_rules_or_default,
)
from primer.rules import loader as loader_module


@pytest.fixture
def valid_rules_path(project_root: Path) -> Path:
    """Path to the shipped rules file."""
    return project_root / "primer_rules.yaml"


def write_rules(tmp_path: Path, rules: Any) -> Path:
    path = tmp_path / "rules.yaml"
    path.write_text(yaml.dump(rules))
    return path


class TestRulesLoading:
    def test_load_shipped_rules_file(self, valid_rules_path: Path) -> None:
        rules = load_rules(valid_rules_path)
        assert rules.text_case.default_upper is True
        assert rules.ratings.min_rating == 4
        assert rules.square.delay_seconds == 1.0

    def test_load_nonexistent_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_load_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.yaml"
        path.write_text("invalid: yaml: content: [")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_rules(path) == Rules()

    def test_partial_file_fills_defaults(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"ratings": {"min_rating": 3}})
        rules = load_rules(path)
        assert rules.ratings.min_rating == 3
        assert rules.square.delay_seconds == 1.0


class TestRulesValidation:
    def test_negative_delay_rejected(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"square": {"delay_seconds": -1}})
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_non_numeric_rating_rejected(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"ratings": {"min_rating": "high"}})
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_unknown_section_rejected(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"networking": {"port": 80}})
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)


    @pytest.mark.parametrize(
        "section",
        [
            {"text_case": {"default_uper": False}},
            {"ratings": {"min_ratng": 3}},
            {"square": {"delay": 0}},
        ],
    )
    def test_misspelled_key_rejected(self, tmp_path: Path, section: dict[str, Any]) -> None:
        path = write_rules(tmp_path, section)
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    @pytest.mark.parametrize(
        "section",
        [
            {"ratings": {"min_rating": True}},
            {"square": {"delay_seconds": False}},
            {"text_case": {"default_upper": 1}},
            {"text_case": {"default_upper": "yes"}},
        ],
    )
    def test_wrong_scalar_kind_rejected(self, tmp_path: Path, section: dict[str, Any]) -> None:
        path = write_rules(tmp_path, section)
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)


class TestLoadRulesOrDefault:
    def test_defaults_when_default_file_absent(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(loader_module, "DEFAULT_RULES_PATH", tmp_path / "absent.yaml")
        assert load_rules_or_default() == Rules()

    def test_explicit_missing_path_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules_or_default(tmp_path / "absent.yaml")

    def test_explicit_path_loaded(self, tmp_path: Path) -> None:
        path = write_rules(tmp_path, {"text_case": {"default_upper": False}})
        assert load_rules_or_default(path).text_case.default_upper is False


class TestRulesAdapter:
    def test_getters(self) -> None:
        adapter = RulesAdapter(
            Rules.model_validate(
                {
                    "text_case": {"default_upper": False},
                    "ratings": {"min_rating": 2.5},
                    "square": {"delay_seconds": 0},
                }
            )
        )
        assert adapter.get_default_upper() is False
        assert adapter.get_min_rating() == 2.5
        assert adapter.get_delay_seconds() == 0

    def test_defaults_without_rules(self) -> None:
        adapter = RulesAdapter()
        assert adapter.get_default_upper() is True
        assert adapter.get_min_rating() == 4
        assert adapter.get_delay_seconds() == 1.0
