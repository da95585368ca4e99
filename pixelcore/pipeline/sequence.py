# PixelCore Pipeline - Sequence
"""
Sequence for chaining multiple stages into one.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from pixelcore.errors import NoResultAvailableError, PipelineEmptyPushError
from pixelcore.image_base import ImageBase

from .stage import PipelineStage

logger = logging.getLogger(__name__)


class Sequence(PipelineStage):
    """
    Ordered chain of stages, itself a stage.

    Pushing an image drives it synchronously through every stage; the
    output of each stage is popped and pushed into the next. The sequence's
    own output is the output of its last stage. An error in any stage aborts
    the chain; stages before it keep whatever state their push left them in.

    :param stages: The initial stages in execution order
    """

    def __init__(self, stages: Iterable[PipelineStage] | None = None):
        super().__init__()
        self.stages: list[PipelineStage] = list(stages) if stages is not None else []

    def process(self, image: ImageBase) -> None:
        if not self.stages:
            raise PipelineEmptyPushError(self)
        current = image
        last = len(self.stages) - 1
        for index, stage in enumerate(self.stages):
            logger.debug("Sequence %s: pushing into stage %d (%s)", self, index, stage)
            stage.push(current)
            if stage.is_empty:
                raise NoResultAvailableError(stage)
            if index < last:
                current = stage.pop()

    @property
    def is_empty(self) -> bool:
        if not self.stages:
            return True
        return self.stages[-1].is_empty

    def pop(self) -> ImageBase:
        if not self.stages:
            raise NoResultAvailableError(self)
        return self.stages[-1].pop()

    def set_output(self, image: ImageBase) -> None:
        """
        Publishes a result in the last stage.

        :param image: The output image
        """
        if not self.stages:
            raise PipelineEmptyPushError(self)
        self.stages[-1].set_output(image)

    def append(self, stage: PipelineStage) -> Sequence:
        """Add stage to the end of the chain (chainable)."""
        self.stages.append(stage)
        return self

    def extend(self, stages: Iterable[PipelineStage]) -> Sequence:
        """Add multiple stages to the end of the chain (chainable)."""
        self.stages.extend(stages)
        return self

    def __len__(self) -> int:
        return len(self.stages)

    def __iter__(self) -> Iterator[PipelineStage]:
        return iter(self.stages)

    def __getitem__(self, index: int) -> PipelineStage:
        return self.stages[index]

    def __str__(self) -> str:
        return _describe(self.stages)


def _describe(stages: list[PipelineStage]) -> str:
    """Renders a chain as nested pairs, e.g. ``(A (B C))``."""
    if not stages:
        return "(None)"
    if len(stages) == 1:
        return f"({stages[0]})"
    if len(stages) == 2:
        return f"({stages[0]} {stages[1]})"
    return f"({stages[0]} {_describe(stages[1:])})"
