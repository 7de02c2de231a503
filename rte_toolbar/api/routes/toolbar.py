"""
Toolbar endpoints for compiling editor toolbar configuration.

Endpoints:
- GET /api/toolbar/presets - List toolbar presets
- POST /api/toolbar/normalize - Normalize a preset or custom toolbar
- POST /api/toolbar/repair - Repair a toolbar damaged by substring edits
- POST /api/toolbar/mobile - Derive the expanded mobile toolbar
- POST /api/toolbar/image - Build the image control toolbar
- POST /api/toolbar/config - Assemble toolbar configuration fields
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from rte_toolbar.adapters.rules_toolbar import RulesToolbarAdapter
from rte_toolbar.api.deps import get_toolbar_rules
from rte_toolbar.components.toolbar import (
    AssembleToolbarInput,
    ImageToolbarInput,
    MobileToolbarInput,
    NormalizeToolbarInput,
    RepairToolbarInput,
    ToolbarError,
    run_assemble,
    run_image,
    run_mobile,
    run_normalize,
    run_repair,
)

router = APIRouter()


# --- Request/Response Models ---


class ToolbarRequest(BaseModel):
    """Request body naming a preset or a custom toolbar."""

    preset: str | None = Field(None, description="Preset name, e.g. FULL")
    toolbar: str | None = Field(None, description="Custom toolbar string")
    excluded: list[str] = Field(default_factory=list, description="Tools to remove")


class RepairRequest(BaseModel):
    """Request body for repairing a toolbar string."""

    toolbar: str
    excluded: list[str] = Field(default_factory=list)


class ImageToolbarRequest(BaseModel):
    """Request body for the image control toolbar."""

    items: list[str]


class ConfigRequest(ToolbarRequest):
    """Request body for toolbar configuration assembly."""

    image_items: list[str] | None = None


class ToolbarResponse(BaseModel):
    """Compiled toolbar string."""

    toolbar: str
    used_fallback: bool = False


class RepairResponse(BaseModel):
    """Repaired toolbar string."""

    toolbar: str
    changed: bool


class PresetsResponse(BaseModel):
    """Available toolbar presets."""

    presets: dict[str, str]


class ConfigResponse(BaseModel):
    """Toolbar fields of an editor configuration."""

    config: dict[str, str]


def _raise_for_errors(errors: list[ToolbarError]) -> None:
    detail = "; ".join(e.message for e in errors) or "Toolbar request failed"
    raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


@router.get("/presets", response_model=PresetsResponse)
def list_presets(
    rules: RulesToolbarAdapter = Depends(get_toolbar_rules),
) -> PresetsResponse:
    """List configured toolbar presets."""
    return PresetsResponse(presets=rules.get_presets())


@router.post("/normalize", response_model=ToolbarResponse)
def normalize_toolbar(
    body: ToolbarRequest,
    rules: RulesToolbarAdapter = Depends(get_toolbar_rules),
) -> ToolbarResponse:
    """
    Normalize a preset or custom toolbar.

    Returns 400 for an unknown preset or when neither preset nor toolbar
    is given.
    """
    result = run_normalize(
        NormalizeToolbarInput(
            preset=body.preset,
            toolbar=body.toolbar,
            excluded=tuple(body.excluded),
        ),
        rules=rules,
    )
    if not result.success:
        _raise_for_errors(result.errors)

    return ToolbarResponse(toolbar=result.toolbar, used_fallback=result.used_fallback)


@router.post("/repair", response_model=RepairResponse)
def repair_toolbar(
    body: RepairRequest,
    rules: RulesToolbarAdapter = Depends(get_toolbar_rules),
) -> RepairResponse:
    """Repair a toolbar string edited by substring removal."""
    result = run_repair(
        RepairToolbarInput(toolbar=body.toolbar, excluded=tuple(body.excluded)),
        rules=rules,
    )
    return RepairResponse(toolbar=result.toolbar, changed=result.changed)


@router.post("/mobile", response_model=ToolbarResponse)
def mobile_toolbar(
    body: ToolbarRequest,
    rules: RulesToolbarAdapter = Depends(get_toolbar_rules),
) -> ToolbarResponse:
    """Derive the expanded mobile toolbar."""
    result = run_mobile(
        MobileToolbarInput(
            preset=body.preset,
            toolbar=body.toolbar,
            excluded=tuple(body.excluded),
        ),
        rules=rules,
    )
    if not result.success:
        _raise_for_errors(result.errors)

    return ToolbarResponse(toolbar=result.toolbar, used_fallback=result.used_fallback)


@router.post("/image", response_model=ToolbarResponse)
def image_toolbar(body: ImageToolbarRequest) -> ToolbarResponse:
    """Build the image control toolbar."""
    result = run_image(ImageToolbarInput(items=tuple(body.items)))
    return ToolbarResponse(toolbar=result.toolbar)


@router.post("/config", response_model=ConfigResponse)
def toolbar_config(
    body: ConfigRequest,
    rules: RulesToolbarAdapter = Depends(get_toolbar_rules),
) -> ConfigResponse:
    """Assemble the toolbar fields of an editor configuration."""
    result = run_assemble(
        AssembleToolbarInput(
            preset=body.preset,
            toolbar=body.toolbar,
            excluded=tuple(body.excluded),
            image_items=tuple(body.image_items) if body.image_items is not None else None,
        ),
        rules=rules,
    )
    if not result.success:
        _raise_for_errors(result.errors)

    return ConfigResponse(config=result.config)
