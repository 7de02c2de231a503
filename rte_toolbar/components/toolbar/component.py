"""
Toolbar component - Compile editor toolbar strings.

Resolves presets, removes excluded tools, repairs damaged toolbars and
assembles the toolbar fields of an editor configuration.

Invariants:
- I1: Output has no empty groups and no doubled or dangling separators
- I2: Every non-excluded tool survives, in order
- I3: Brace grouping survives while a group keeps a tool
- I4: An emptied toolbar is replaced by the configured default
"""

from __future__ import annotations

import logging

from ._impl import (
    DEFAULT_CONFIG,
    ToolbarConfig,
    apply_exclusions,
    build_image_toolbar,
    derive_mobile_toolbar,
    get_preset,
    normalize,
    repair_structure,
    strip_modifiers,
)
from .models import (
    AssembleOutput,
    AssembleToolbarInput,
    ImageToolbarInput,
    ImageToolbarOutput,
    MobileToolbarInput,
    MobileToolbarOutput,
    NormalizeOutput,
    NormalizeToolbarInput,
    RepairOutput,
    RepairToolbarInput,
    ToolbarError,
)
from .ports import ToolbarRulesPort

logger = logging.getLogger(__name__)


def _build_config(rules: ToolbarRulesPort | None) -> ToolbarConfig:
    """Build toolbar config from rules port."""
    if rules is None:
        return DEFAULT_CONFIG

    return ToolbarConfig(
        presets=rules.get_presets(),
        default_toolbar=rules.get_default_toolbar(),
        basic_mobile_tools=rules.get_basic_mobile_tools(),
        default_mobile_toolbar=rules.get_default_mobile_toolbar(),
        adjacent_pairs=rules.get_adjacent_pairs(),
    )


def _resolve_source(
    preset: str | None,
    toolbar: str | None,
    config: ToolbarConfig,
) -> tuple[str | None, list[ToolbarError]]:
    """Pick the raw toolbar string: a named preset wins over a custom string."""
    if preset is not None:
        raw = get_preset(preset, config.presets)
        if raw is None:
            return None, [
                ToolbarError(
                    code="unknown_preset",
                    message=f"Unknown toolbar preset: {preset}",
                )
            ]
        return raw, []

    if toolbar is not None:
        return toolbar, []

    return None, [
        ToolbarError(
            code="missing_toolbar",
            message="Either a preset name or a toolbar string is required",
        )
    ]


# --- Component Entry Points ---


def run_normalize(
    inp: NormalizeToolbarInput,
    *,
    rules: ToolbarRulesPort | None = None,
) -> NormalizeOutput:
    """
    Normalize a preset or custom toolbar, removing excluded tools.

    Falls back to the configured default toolbar when every tool is
    excluded.

    Args:
        inp: Input naming the preset (or custom toolbar) and exclusions.
        rules: Optional rules port for configuration.

    Returns:
        NormalizeOutput with the canonical toolbar string.
    """
    config = _build_config(rules)
    raw, errors = _resolve_source(inp.preset, inp.toolbar, config)
    if raw is None:
        return NormalizeOutput(toolbar="", errors=errors, success=False)

    toolbar = normalize(raw, inp.excluded)
    logger.debug("Normalized toolbar %r excluding %s -> %r", raw, list(inp.excluded), toolbar)

    if not toolbar:
        logger.warning(
            "Toolbar is empty after excluding %s; using default toolbar",
            list(inp.excluded),
        )
        return NormalizeOutput(toolbar=config.default_toolbar, used_fallback=True)

    return NormalizeOutput(toolbar=toolbar)


def run_repair(
    inp: RepairToolbarInput,
    *,
    rules: ToolbarRulesPort | None = None,
) -> RepairOutput:
    """
    Repair a toolbar string edited by plain substring removal.

    Modifiers are stripped first; exclusions, when given, are applied as
    whole-word substring removal before the repair pass.
    """
    config = _build_config(rules)
    damaged = apply_exclusions(strip_modifiers(inp.toolbar), inp.excluded)
    repaired = repair_structure(damaged, config.adjacent_pairs)

    return RepairOutput(toolbar=repaired, changed=repaired != inp.toolbar)


def run_mobile(
    inp: MobileToolbarInput,
    *,
    rules: ToolbarRulesPort | None = None,
) -> MobileToolbarOutput:
    """
    Derive the expanded mobile toolbar from a preset or custom toolbar.

    Args:
        inp: Input naming the preset (or custom toolbar) and exclusions.
        rules: Optional rules port for configuration.

    Returns:
        MobileToolbarOutput; used_fallback is set when the default mobile
        toolbar was substituted.
    """
    config = _build_config(rules)
    raw, errors = _resolve_source(inp.preset, inp.toolbar, config)
    if raw is None:
        return MobileToolbarOutput(
            toolbar=config.default_mobile_toolbar,
            used_fallback=True,
            errors=errors,
            success=False,
        )

    derived = derive_mobile_toolbar(
        raw,
        inp.excluded,
        basic_tools=config.basic_mobile_tools,
        fallback="",
    )
    if not derived:
        logger.warning("Mobile toolbar is empty; using default mobile toolbar")
        return MobileToolbarOutput(toolbar=config.default_mobile_toolbar, used_fallback=True)

    return MobileToolbarOutput(toolbar=derived)


def run_image(inp: ImageToolbarInput) -> ImageToolbarOutput:
    """Build the image control toolbar."""
    return ImageToolbarOutput(toolbar=build_image_toolbar(inp.items))


def run_assemble(
    inp: AssembleToolbarInput,
    *,
    rules: ToolbarRulesPort | None = None,
) -> AssembleOutput:
    """
    Assemble the toolbar fields of an editor configuration.

    Only toolbar-related keys are produced; the caller merges them into
    the rest of the editor configuration.
    """
    config: dict[str, str] = {}

    main = run_normalize(
        NormalizeToolbarInput(preset=inp.preset, toolbar=inp.toolbar, excluded=inp.excluded),
        rules=rules,
    )
    if not main.success:
        return AssembleOutput(errors=main.errors, success=False)

    config["toolbar"] = "custom"
    config["toolbar_custom"] = main.toolbar

    mobile = run_mobile(
        MobileToolbarInput(preset=inp.preset, toolbar=inp.toolbar, excluded=inp.excluded),
        rules=rules,
    )
    config["toolbarMobile"] = "basic"
    config["subtoolbar_more_mobile"] = mobile.toolbar

    if inp.image_items is not None:
        image_toolbar = run_image(ImageToolbarInput(items=inp.image_items)).toolbar
        config["controltoolbar_IMG"] = image_toolbar
        config["imagecontrolbar"] = image_toolbar
        config["image_toolbar"] = image_toolbar

    return AssembleOutput(config=config)


def run(
    inp: NormalizeToolbarInput
    | RepairToolbarInput
    | MobileToolbarInput
    | ImageToolbarInput
    | AssembleToolbarInput,
    *,
    rules: ToolbarRulesPort | None = None,
) -> NormalizeOutput | RepairOutput | MobileToolbarOutput | ImageToolbarOutput | AssembleOutput:
    """
    Main entry point for the toolbar component.

    Dispatches to appropriate handler based on input type.
    """
    if isinstance(inp, NormalizeToolbarInput):
        return run_normalize(inp, rules=rules)
    elif isinstance(inp, RepairToolbarInput):
        return run_repair(inp, rules=rules)
    elif isinstance(inp, MobileToolbarInput):
        return run_mobile(inp, rules=rules)
    elif isinstance(inp, ImageToolbarInput):
        return run_image(inp)
    elif isinstance(inp, AssembleToolbarInput):
        return run_assemble(inp, rules=rules)
    else:
        raise ValueError(f"Unknown input type: {type(inp)}")
