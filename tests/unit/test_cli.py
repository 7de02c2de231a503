"""
Tests for the toolbar CLI.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rte_toolbar.app_shell.cli import main


@pytest.fixture
def no_rules(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run from a directory without a rules file."""
    monkeypatch.delenv("RTE_TOOLBAR_RULES", raising=False)
    monkeypatch.chdir(tmp_path)


class TestNormalizeCommand:
    def test_custom_toolbar(self, no_rules: None, capsys: pytest.CaptureFixture[str]) -> None:
        main(["normalize", "--toolbar", "a,b / c,d # e,f", "--exclude", "c"])
        assert capsys.readouterr().out.strip() == "a,b/d#e,f"

    def test_preset_from_rules_file(
        self, rules_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        main(["--rules", str(rules_path), "normalize", "--preset", "basic", "--exclude", "bold"])
        expected = "italic,underline|fontname,fontsize|forecolor,backcolor|removeformat"
        assert capsys.readouterr().out.strip() == expected

    def test_unknown_preset_exits(self, no_rules: None) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["normalize", "--preset", "HUGE"])
        assert exc.value.code == 1

    def test_missing_source_exits(self, no_rules: None) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["normalize"])
        assert exc.value.code == 1

    def test_missing_rules_file_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc:
            main(["--rules", str(tmp_path / "nope.yaml"), "normalize", "--preset", "FULL"])
        assert exc.value.code == 1


class TestOtherCommands:
    def test_repair(self, no_rules: None, capsys: pytest.CaptureFixture[str]) -> None:
        main(["repair", "{,bold,,italic}||{}"])
        assert capsys.readouterr().out.strip() == "{bold,italic}"

    def test_mobile(self, no_rules: None, capsys: pytest.CaptureFixture[str]) -> None:
        main(["mobile", "--preset", "BASIC"])
        assert capsys.readouterr().out.strip() == "forecolor,backcolor"

    def test_image(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["image", "delete", "imagestyle"])
        assert capsys.readouterr().out.strip() == "{delete,imagestyle}"

    def test_presets(self, no_rules: None, capsys: pytest.CaptureFixture[str]) -> None:
        main(["presets"])
        out = capsys.readouterr().out
        assert "BASIC: bold,italic,underline" in out
        assert "MINIMAL:" in out
