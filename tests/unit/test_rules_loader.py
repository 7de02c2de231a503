"""
Toolbar rules loading and validation tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from rte_toolbar.adapters.rules_toolbar import RulesToolbarAdapter
from rte_toolbar.components.toolbar import (
    BASIC_MOBILE_TOOLS,
    DEFAULT_MOBILE_TOOLBAR,
    KNOWN_ADJACENT_PAIRS,
    PRESETS,
    normalize,
)
from rte_toolbar.rules.loader import load_rules, resolve_rules_path
from rte_toolbar.rules.models import ToolbarRules


def minimal_rules() -> dict[str, Any]:
    return {
        "presets": {"TINY": "bold,italic"},
        "default_toolbar": "bold",
    }


def write_rules(tmp_path: Path, rules: Any, name: str = "rules.yaml") -> Path:
    path = tmp_path / name
    with open(path, "w") as f:
        yaml.dump(rules, f)
    return path


class TestRulesLoading:
    """Test rules file loading."""

    def test_load_project_rules_file(self, toolbar_rules: ToolbarRules) -> None:
        """The shipped rules file loads and mirrors the built-in defaults."""
        assert set(toolbar_rules.presets) == set(PRESETS)
        for name, toolbar in toolbar_rules.presets.items():
            assert normalize(toolbar) == normalize(PRESETS[name])
        assert tuple(toolbar_rules.mobile.basic_tools) == BASIC_MOBILE_TOOLS
        assert toolbar_rules.mobile.default_toolbar == DEFAULT_MOBILE_TOOLBAR
        assert tuple(toolbar_rules.repair.adjacent_pairs) == KNOWN_ADJACENT_PAIRS

    def test_sections_default(self, tmp_path: Path) -> None:
        """mobile and repair sections fall back to built-in values."""
        rules = load_rules(write_rules(tmp_path, minimal_rules()))
        assert tuple(rules.mobile.basic_tools) == BASIC_MOBILE_TOOLS
        assert tuple(rules.repair.adjacent_pairs) == KNOWN_ADJACENT_PAIRS

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_rules(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("presets: [unclosed\n")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_rules(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(path)

    def test_comments_and_folded_presets(self, tmp_path: Path) -> None:
        path = tmp_path / "rules.yaml"
        path.write_text(
            "# local overrides\n"
            "presets:\n"
            "  WIDE: >-\n"
            "    bold,italic |\n"
            "    undo,redo\n"
            "default_toolbar: bold\n"
        )
        rules = load_rules(path)
        assert normalize(rules.presets["WIDE"]) == "bold,italic|undo,redo"


class TestRulesValidation:
    """Test schema validation."""

    def test_missing_presets(self, tmp_path: Path) -> None:
        rules = minimal_rules()
        del rules["presets"]
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(tmp_path, rules))

    def test_empty_presets(self, tmp_path: Path) -> None:
        rules = minimal_rules()
        rules["presets"] = {}
        with pytest.raises(ValueError, match="At least one preset"):
            load_rules(write_rules(tmp_path, rules))

    def test_empty_preset_toolbar(self, tmp_path: Path) -> None:
        rules = minimal_rules()
        rules["presets"]["EMPTY"] = "  "
        with pytest.raises(ValueError, match="empty toolbar"):
            load_rules(write_rules(tmp_path, rules))

    def test_empty_default_toolbar(self, tmp_path: Path) -> None:
        rules = minimal_rules()
        rules["default_toolbar"] = ""
        with pytest.raises(ValueError, match="default_toolbar"):
            load_rules(write_rules(tmp_path, rules))

    def test_adjacent_pairs_need_two_names(self, tmp_path: Path) -> None:
        rules = minimal_rules()
        rules["repair"] = {"adjacent_pairs": [["fontname", "fontsize", "extra"]]}
        with pytest.raises(ValueError, match="Rules validation failed"):
            load_rules(write_rules(tmp_path, rules))


class TestResolveRulesPath:
    """Test rules path resolution."""

    def test_explicit_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RTE_TOOLBAR_RULES", "/env/rules.yaml")
        assert resolve_rules_path("custom.yaml") == Path("custom.yaml")

    def test_env_path(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RTE_TOOLBAR_RULES", "/env/rules.yaml")
        assert resolve_rules_path() == Path("/env/rules.yaml")

    def test_default_path(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.delenv("RTE_TOOLBAR_RULES", raising=False)
        monkeypatch.chdir(tmp_path)
        assert resolve_rules_path() == Path.cwd() / "toolbar_rules.yaml"


class TestRulesToolbarAdapter:
    """Test the rules port adapter."""

    def test_serves_rules(self, tmp_path: Path) -> None:
        rules = minimal_rules()
        rules["mobile"] = {"basic_tools": ["bold"], "default_toolbar": "{help}"}
        rules["repair"] = {"adjacent_pairs": [["foo", "bar"]]}
        adapter = RulesToolbarAdapter(load_rules(write_rules(tmp_path, rules)))

        assert adapter.get_presets() == {"TINY": "bold,italic"}
        assert adapter.get_default_toolbar() == "bold"
        assert adapter.get_basic_mobile_tools() == ("bold",)
        assert adapter.get_default_mobile_toolbar() == "{help}"
        assert adapter.get_adjacent_pairs() == (("foo", "bar"),)
