"""Viewer context model."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from mojvis.models.enums import Municipality, ViewerMode


class ViewerContext(BaseModel):
    """Who is looking: an anonymous device, as a visitor or a local resident.

    A local viewer always has a municipality. A visitor never does; any
    municipality given for a visitor is dropped.
    """

    device_id: str = Field(default="anonymous", description="Anonymous device identifier")
    mode: ViewerMode = Field(default=ViewerMode.VISITOR)
    municipality: Municipality | None = Field(default=None)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _drop_visitor_municipality(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("mode", ViewerMode.VISITOR) == ViewerMode.VISITOR:
            return {**data, "municipality": None}
        return data

    @model_validator(mode="after")
    def _require_local_municipality(self) -> ViewerContext:
        if self.mode is ViewerMode.LOCAL and self.municipality is None:
            raise ValueError("Local viewers must have a municipality")
        return self

    @property
    def is_local(self) -> bool:
        return self.mode is ViewerMode.LOCAL


class ViewerContextOk(BaseModel):
    """Successful outcome of parsing a viewer context."""

    valid: Literal[True] = True
    context: ViewerContext

    model_config = ConfigDict(frozen=True)
