"""Tests for shared contracts and YAML model loading."""

import io
import logging
from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from autobreak.core.contracts import (
    ALLOWED_ORIENTATIONS,
    BreakFailure,
    CameraOrientation,
    DrawingView,
    describe_failure,
)
from autobreak.core.loader import load_yaml_model, save_yaml_model
from autobreak.core.logging import setup_logging
from autobreak.steps.auto_break.config import BreakSettings


class TestContracts:
    def test_allowed_orientations(self):
        assert len(ALLOWED_ORIENTATIONS) == 7
        assert CameraOrientation.ARBITRARY in ALLOWED_ORIENTATIONS
        assert CameraOrientation.ISO_TOP_LEFT not in ALLOWED_ORIENTATIONS

    def test_view_area_and_degenerate(self):
        view = DrawingView(id="V", width=4, height=2.5)
        assert view.area == 10
        assert not view.is_degenerate
        assert DrawingView(id="Z", width=0, height=3).is_degenerate

    def test_negative_dimension_rejected(self):
        with pytest.raises(ValidationError):
            DrawingView(id="V", width=-1, height=2)

    def test_view_is_frozen(self):
        view = DrawingView(id="V", width=1, height=1)
        with pytest.raises(ValidationError):
            view.width = 5

    def test_every_failure_has_message(self):
        for reason in BreakFailure:
            assert describe_failure(reason)
        assert describe_failure(BreakFailure.NO_USABLE_VIEW) == "There are no usable views!"


class TestLoader:
    def test_load_settings_yaml(self, settings_file: Path):
        cfg = load_yaml_model(settings_file, BreakSettings)
        assert cfg.symbols == 2
        assert cfg.range_percent == 50

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_yaml_model(path, BreakSettings) == BreakSettings()

    def test_non_mapping_rejected(self, tmp_path: Path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="mapping"):
            load_yaml_model(path, BreakSettings)

    def test_save_creates_dirs(self, tmp_path: Path):
        path = tmp_path / "nested" / "out.yaml"
        save_yaml_model(BreakSettings(style=1, range_percent=40), path)
        with open(path) as f:
            raw = yaml.safe_load(f)
        assert raw["style"] == 1
        assert raw["range_percent"] == 40


class TestLogging:
    def test_unknown_level(self):
        with pytest.raises(ValueError, match="Unknown log level"):
            setup_logging("chatty")

    def test_sets_root_level(self):
        setup_logging("debug", stream=io.StringIO())
        assert logging.getLogger().level == logging.DEBUG
        setup_logging(logging.WARNING, stream=io.StringIO())
        assert logging.getLogger().level == logging.WARNING
