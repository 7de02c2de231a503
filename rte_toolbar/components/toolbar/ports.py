"""
Toolbar component port definitions.
"""

from __future__ import annotations

from typing import Protocol


class ToolbarRulesPort(Protocol):
    """Port for accessing toolbar rules configuration."""

    def get_presets(self) -> dict[str, str]:
        """Get toolbar presets by name."""
        ...

    def get_default_toolbar(self) -> str:
        """Get the toolbar used when normalization empties a toolbar."""
        ...

    def get_basic_mobile_tools(self) -> tuple[str, ...]:
        """Get tools already shown by the basic mobile toolbar."""
        ...

    def get_default_mobile_toolbar(self) -> str:
        """Get the fallback expanded mobile toolbar."""
        ...

    def get_adjacent_pairs(self) -> tuple[tuple[str, str], ...]:
        """Get known (left, right-prefix) tool pairs for repair."""
        ...
