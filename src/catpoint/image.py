"""Cat detection interface and a fake implementation."""

from __future__ import annotations

import logging
import random
from typing import Protocol

from catpoint.models.frame import ImageFrame

_logger = logging.getLogger(__name__)

#: Confidence (0-100) a detection must reach to count as a cat.
DEFAULT_CONFIDENCE_THRESHOLD: float = 50.0


class ImageClassifier(Protocol):
    """Boolean oracle answering whether a frame shows a cat."""

    def contains_cat(self, frame: ImageFrame, confidence_threshold: float) -> bool: ...


class FakeImageClassifier:
    """Classifier stand-in that answers at random.

    Useful for wiring and demos where no real model is available.  Pass
    a *seed* for a reproducible sequence of answers.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def contains_cat(self, frame: ImageFrame, confidence_threshold: float) -> bool:
        detected = self._random.random() < 0.5
        _logger.debug(
            "Fake classification %dx%d threshold=%.1f cat=%s",
            frame.width,
            frame.height,
            confidence_threshold,
            detected,
        )
        return detected
