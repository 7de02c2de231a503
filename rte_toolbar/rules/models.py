from pydantic import BaseModel, Field, field_validator

from rte_toolbar.components.toolbar._impl import (
    BASIC_MOBILE_TOOLS,
    DEFAULT_MOBILE_TOOLBAR,
    KNOWN_ADJACENT_PAIRS,
)


class MobileRules(BaseModel):
    basic_tools: list[str] = Field(default_factory=lambda: list(BASIC_MOBILE_TOOLS))
    default_toolbar: str = DEFAULT_MOBILE_TOOLBAR


class RepairRules(BaseModel):
    adjacent_pairs: list[tuple[str, str]] = Field(
        default_factory=lambda: list(KNOWN_ADJACENT_PAIRS)
    )


class ToolbarRules(BaseModel):
    presets: dict[str, str]
    default_toolbar: str
    mobile: MobileRules = Field(default_factory=MobileRules)
    repair: RepairRules = Field(default_factory=RepairRules)

    @field_validator("presets")
    @classmethod
    def validate_presets(cls, v: dict[str, str]) -> dict[str, str]:
        """Presets must be named and non-empty."""
        if not v:
            raise ValueError("At least one preset is required")
        for name, toolbar in v.items():
            if not name.strip():
                raise ValueError("Preset names must be non-empty")
            if not toolbar.strip():
                raise ValueError(f"Preset {name} has an empty toolbar")
        return v

    @field_validator("default_toolbar")
    @classmethod
    def validate_default_toolbar(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("default_toolbar must be non-empty")
        return v
