"""
Rules-backed adapter for the toolbar component's rules port.
"""

from __future__ import annotations

from rte_toolbar.rules.models import ToolbarRules


class RulesToolbarAdapter:
    """Serves toolbar configuration from loaded toolbar rules."""

    def __init__(self, rules: ToolbarRules) -> None:
        self._rules = rules

    def get_presets(self) -> dict[str, str]:
        return dict(self._rules.presets)

    def get_default_toolbar(self) -> str:
        return self._rules.default_toolbar

    def get_basic_mobile_tools(self) -> tuple[str, ...]:
        return tuple(self._rules.mobile.basic_tools)

    def get_default_mobile_toolbar(self) -> str:
        return self._rules.mobile.default_toolbar

    def get_adjacent_pairs(self) -> tuple[tuple[str, str], ...]:
        return tuple((left, right) for left, right in self._rules.repair.adjacent_pairs)
