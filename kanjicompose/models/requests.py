"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from kanjicompose.engine.layout_constants import BASE_AREA, BASE_LOGICAL_SIZE
from kanjicompose.engine.registry import Layout


class RandomComposeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    data: str = Field("", description="Raw KAGE definition of the current composite")
    logical_size: float = Field(BASE_LOGICAL_SIZE, alias="logicalSize", gt=0, description="Current logical size")
    area: float = Field(BASE_AREA, gt=0, description="Current visual area")
    area_factor: float | None = Field(
        None,
        alias="areaFactor",
        description="Area growth factor (defaults to the configured value)",
    )


class ComposeRequest(RandomComposeRequest):
    char: str = Field(..., description="Catalog character to attach")
    layout: Layout = Field(..., description="Layout mode")


class ResetRequest(BaseModel):
    data: str = Field("", description="Initial KAGE definition")


class ResetFromCharRequest(BaseModel):
    name: str = Field(..., description="Character or GlyphWiki id to start from")


class StateComposeRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    area_factor: float | None = Field(None, alias="areaFactor", description="Area growth factor")
