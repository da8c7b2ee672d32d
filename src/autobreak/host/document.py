"""Host-native drawing document model, stored as YAML.

Views carry the break operations already applied to them; the engine only
sees the count via ``SheetView.to_drawing_view()``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from autobreak.core.contracts import (
    BreakOrientation,
    BreakRequest,
    BreakStyle,
    CameraOrientation,
    DrawingView,
    Point2D,
)
from autobreak.core.loader import load_yaml_model, save_yaml_model


class AppliedBreak(BaseModel):
    orientation: BreakOrientation
    start: Point2D
    end: Point2D
    style: BreakStyle = BreakStyle.RECTANGULAR
    depth: int = 5
    gap: float = 0.6
    symbols: int = 1

    @classmethod
    def from_request(cls, request: BreakRequest) -> AppliedBreak:
        return cls(**request.model_dump(exclude={"view_id", "consume_existing"}))


class SheetView(BaseModel):
    name: str
    width: float = Field(..., ge=0)
    height: float = Field(..., ge=0)
    position: Point2D = Field(default_factory=Point2D, description="View center on the sheet")
    camera: CameraOrientation = CameraOrientation.FRONT
    breaks: list[AppliedBreak] = Field(default_factory=list)

    def to_drawing_view(self) -> DrawingView:
        return DrawingView(
            id=self.name,
            width=self.width,
            height=self.height,
            center=self.position,
            camera_orientation=self.camera,
            break_count=len(self.breaks),
        )


class Sheet(BaseModel):
    name: str
    views: list[SheetView] = Field(default_factory=list)

    @model_validator(mode="after")
    def _unique_view_names(self) -> Sheet:
        seen = set()
        for view in self.views:
            if view.name in seen:
                raise ValueError(f"Sheet '{self.name}' has more than one view named '{view.name}'")
            seen.add(view.name)
        return self

    def find_view(self, name: str) -> SheetView | None:
        return next((v for v in self.views if v.name == name), None)


class DrawingDocument(BaseModel):
    name: str = "untitled"
    kind: Literal["drawing", "part", "assembly", "presentation"] = "drawing"
    active_sheet: str | None = Field(None, description="Active sheet name (first sheet if unset)")
    sheets: list[Sheet] = Field(default_factory=list)


def load_document(path: Path) -> DrawingDocument:
    return load_yaml_model(path, DrawingDocument)


def save_document(document: DrawingDocument, path: Path) -> None:
    save_yaml_model(document, path)
