"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    layouts_registered: int = 0


class VariantModel(BaseModel):
    id: str
    rect: list[float] | None = None


class CatalogEntryModel(BaseModel):
    char: str
    layouts: list[str]
    variants: dict[str, VariantModel] = Field(default_factory=dict)


class LayoutModel(BaseModel):
    id: str
    label: str
    description: str = ""
    terminal: bool = False


class GlyphResponse(BaseModel):
    name: str
    id: str
    data: str
    cached_parts: int = 0


class CompositionInfoModel(BaseModel):
    char: str
    layout: str


class CompositionResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: str
    logical_size: float = Field(..., alias="logicalSize")
    area: float
    visual_size: float = Field(0.0, alias="visualSize")
    scale_factor: float = Field(0.0, alias="scaleFactor")
    info: CompositionInfoModel | None = None


class StateResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: str
    logical_size: float = Field(..., alias="logicalSize")
    area: float
    history_depth: int = Field(0, alias="historyDepth")
    info: CompositionInfoModel | None = None


class UndoResponse(BaseModel):
    undone: bool
    state: StateResponse
