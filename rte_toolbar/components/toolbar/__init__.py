"""
Toolbar component - Compile rich text editor toolbar strings.
"""

from ._impl import (
    BASIC_MOBILE_TOOLS,
    DEFAULT_CONFIG,
    DEFAULT_MOBILE_TOOLBAR,
    DEFAULT_TOOLBAR,
    KNOWN_ADJACENT_PAIRS,
    PRESETS,
    ToolbarConfig,
    ToolbarGroup,
    ToolbarLayout,
    ToolbarSection,
    apply_exclusions,
    build_image_toolbar,
    derive_mobile_toolbar,
    get_preset,
    normalize,
    parse_toolbar,
    remove_tools,
    repair_structure,
    serialize_toolbar,
    strip_modifiers,
    tool_pattern,
)
from .component import (
    run,
    run_assemble,
    run_image,
    run_mobile,
    run_normalize,
    run_repair,
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

__all__ = [
    # Entry points
    "run",
    "run_assemble",
    "run_image",
    "run_mobile",
    "run_normalize",
    "run_repair",
    # Input models
    "AssembleToolbarInput",
    "ImageToolbarInput",
    "MobileToolbarInput",
    "NormalizeToolbarInput",
    "RepairToolbarInput",
    # Output models
    "AssembleOutput",
    "ImageToolbarOutput",
    "MobileToolbarOutput",
    "NormalizeOutput",
    "RepairOutput",
    "ToolbarError",
    # Ports
    "ToolbarRulesPort",
    # Grammar
    "ToolbarConfig",
    "ToolbarGroup",
    "ToolbarLayout",
    "ToolbarSection",
    "apply_exclusions",
    "build_image_toolbar",
    "derive_mobile_toolbar",
    "get_preset",
    "normalize",
    "parse_toolbar",
    "remove_tools",
    "repair_structure",
    "serialize_toolbar",
    "strip_modifiers",
    "tool_pattern",
    # Constants
    "BASIC_MOBILE_TOOLS",
    "DEFAULT_CONFIG",
    "DEFAULT_MOBILE_TOOLBAR",
    "DEFAULT_TOOLBAR",
    "KNOWN_ADJACENT_PAIRS",
    "PRESETS",
]
