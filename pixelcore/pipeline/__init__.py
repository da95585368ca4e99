# PixelCore Pipeline Module
"""
Single-slot pipeline stages and their sequential composition.
"""

from .stage import FunctionStage, PipelineStage
from .sequence import Sequence

__all__ = [
    "PipelineStage",
    "FunctionStage",
    "Sequence",
]
