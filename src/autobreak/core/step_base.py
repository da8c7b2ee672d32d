"""Base class for AutoBreak computation steps.

A step is pure: it reads its config and a typed input model and returns a
typed output model. Side effects (applying a break, saving a document)
belong to the caller.
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from pydantic import BaseModel

InputT = TypeVar("InputT", bound=BaseModel)
OutputT = TypeVar("OutputT", bound=BaseModel)
ConfigT = TypeVar("ConfigT", bound=BaseModel)

logger = logging.getLogger(__name__)


class BaseStep(ABC, Generic[InputT, OutputT, ConfigT]):
    """Subclasses set the three model types and implement ``run`` / ``validate_inputs``."""

    name: ClassVar[str] = ""
    input_type: ClassVar[type[BaseModel]]
    output_type: ClassVar[type[BaseModel]]
    config_type: ClassVar[type[BaseModel]]

    def __init__(self, config: ConfigT):
        self.config = config

    @property
    def step_name(self) -> str:
        return self.name or type(self).__name__

    @abstractmethod
    def run(self, inputs: InputT) -> OutputT: ...

    @abstractmethod
    def validate_inputs(self, inputs: InputT) -> bool: ...

    def execute(self, inputs: InputT) -> OutputT:
        """Validate, run and time the step. Malformed input raises ValueError."""
        if not self.validate_inputs(inputs):
            raise ValueError(f"[{self.step_name}] Input validation failed")

        started = time.perf_counter()
        output = self.run(inputs)
        logger.info(f"[{self.step_name}] Done in {(time.perf_counter() - started) * 1000:.2f}ms")
        return output
