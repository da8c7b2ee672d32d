"""Shared pytest fixtures for AutoBreak tests."""

from pathlib import Path

import pytest
import yaml

from autobreak.core.contracts import CameraOrientation, DrawingView, Point2D


def make_view(
    view_id: str = "VIEW1",
    width: float = 100.0,
    height: float = 50.0,
    center: tuple[float, float] = (0.0, 0.0),
    camera: CameraOrientation = CameraOrientation.FRONT,
    break_count: int = 0,
) -> DrawingView:
    return DrawingView(
        id=view_id,
        width=width,
        height=height,
        center=Point2D(x=center[0], y=center[1]),
        camera_orientation=camera,
        break_count=break_count,
    )


@pytest.fixture
def sample_document_data() -> dict:
    """Drawing with a wide front view, a small side view and an iso view."""
    return {
        "name": "shaft",
        "kind": "drawing",
        "active_sheet": "Sheet:1",
        "sheets": [
            {
                "name": "Sheet:1",
                "views": [
                    {"name": "VIEW1", "width": 180.0, "height": 40.0,
                     "position": {"x": 150.0, "y": 120.0}, "camera": "front"},
                    {"name": "VIEW2", "width": 40.0, "height": 40.0,
                     "position": {"x": 280.0, "y": 120.0}, "camera": "right"},
                    {"name": "VIEW3", "width": 300.0, "height": 200.0,
                     "position": {"x": 300.0, "y": 40.0}, "camera": "iso_top_right"},
                ],
            },
            {
                "name": "Sheet:2",
                "views": [
                    {"name": "VIEW4", "width": 20.0, "height": 120.0,
                     "position": {"x": 50.0, "y": 80.0}, "camera": "top"},
                ],
            },
        ],
    }


@pytest.fixture
def document_file(tmp_path: Path, sample_document_data: dict) -> Path:
    path = tmp_path / "drawing.yaml"
    with open(path, "w") as f:
        yaml.safe_dump(sample_document_data, f)
    return path


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "break_settings.yaml"
    with open(path, "w") as f:
        yaml.safe_dump({"style": "structural", "gap": 1.0, "symbols": 2, "range_percent": 50}, f)
    return path
