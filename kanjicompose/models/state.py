"""Persisted editor state model (the JSON import/export shape)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PersistedState(BaseModel):
    """``{"data": str, "logicalSize": number, "area": number}``.

    Strict: numbers must be JSON numbers (booleans and numeric strings are
    rejected) and must be finite. ``data`` must be a JSON string.
    Extra fields are dropped.
    """

    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore", allow_inf_nan=False)

    data: str = Field(..., description="Raw KAGE definition of the composite")
    logical_size: float = Field(..., alias="logicalSize", description="Edge length of the composite's square")
    area: float = Field(..., description="Preserved visual area")
