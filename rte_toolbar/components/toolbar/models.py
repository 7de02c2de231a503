"""
Toolbar component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field

# --- Errors ---


@dataclass(frozen=True)
class ToolbarError:
    """Toolbar resolution error."""

    code: str
    message: str


# --- Input Models ---


@dataclass(frozen=True)
class NormalizeToolbarInput:
    """Input for normalizing a preset or custom toolbar."""

    preset: str | None = None
    toolbar: str | None = None
    excluded: tuple[str, ...] = ()


@dataclass(frozen=True)
class RepairToolbarInput:
    """Input for repairing a toolbar damaged by substring edits."""

    toolbar: str
    excluded: tuple[str, ...] = ()


@dataclass(frozen=True)
class MobileToolbarInput:
    """Input for deriving the expanded mobile toolbar."""

    preset: str | None = None
    toolbar: str | None = None
    excluded: tuple[str, ...] = ()


@dataclass(frozen=True)
class ImageToolbarInput:
    """Input for building the image control toolbar."""

    items: tuple[str, ...]


@dataclass(frozen=True)
class AssembleToolbarInput:
    """Input for assembling the toolbar fields of an editor configuration."""

    preset: str | None = None
    toolbar: str | None = None
    excluded: tuple[str, ...] = ()
    image_items: tuple[str, ...] | None = None


# --- Output Models ---


@dataclass(frozen=True)
class NormalizeOutput:
    """Output for a normalized toolbar."""

    toolbar: str
    used_fallback: bool = False
    errors: list[ToolbarError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class RepairOutput:
    """Output for a repaired toolbar."""

    toolbar: str
    changed: bool = False
    success: bool = True


@dataclass(frozen=True)
class MobileToolbarOutput:
    """Output for the expanded mobile toolbar."""

    toolbar: str
    used_fallback: bool = False
    errors: list[ToolbarError] = field(default_factory=list)
    success: bool = True


@dataclass(frozen=True)
class ImageToolbarOutput:
    """Output for the image control toolbar."""

    toolbar: str
    success: bool = True


@dataclass(frozen=True)
class AssembleOutput:
    """Output for the assembled toolbar configuration fields."""

    config: dict[str, str] = field(default_factory=dict)
    errors: list[ToolbarError] = field(default_factory=list)
    success: bool = True
