"""YAML <-> Pydantic model loading for settings and drawing documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TypeVar

import yaml
from pydantic import BaseModel

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = logging.getLogger(__name__)


def load_yaml_model(path: Path, model_class: type[ModelT]) -> ModelT:
    """Load a YAML file into ``model_class``. An empty file yields the defaults."""
    with open(path, encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{path}: expected a mapping at top level, got {type(raw).__name__}")
    logger.debug(f"Loaded {model_class.__name__} from {path}")
    return model_class(**raw)


def save_yaml_model(model: BaseModel, path: Path) -> None:
    """Write ``model`` as YAML, creating parent directories as needed."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        yaml.safe_dump(model.model_dump(mode="json"), f, sort_keys=False)
    logger.debug(f"Saved {type(model).__name__} -> {path}")
