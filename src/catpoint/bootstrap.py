"""Wire an engine from configuration."""

from __future__ import annotations

import logging

from catpoint.config import CatpointConfig
from catpoint.engine import AlarmDecisionEngine
from catpoint.image import FakeImageClassifier, ImageClassifier
from catpoint.state.persistence import JsonFileStateStore
from catpoint.state.store import InMemoryStateStore, StateStore

_logger = logging.getLogger(__name__)


def create_engine(
    config: CatpointConfig | None = None,
    *,
    classifier: ImageClassifier | None = None,
) -> AlarmDecisionEngine:
    """Build an :class:`AlarmDecisionEngine` from *config*.

    The store is file backed when ``config.state_path`` is set.  Without
    an explicit *classifier* the seeded fake classifier is used.
    """
    if config is None:
        config = CatpointConfig()

    store: StateStore
    if config.state_path:
        store = JsonFileStateStore(config.state_path)
    else:
        store = InMemoryStateStore()
    if classifier is None:
        classifier = FakeImageClassifier(seed=config.classifier_seed)

    _logger.debug(
        "Engine created store=%s classifier=%s threshold=%.1f",
        type(store).__name__,
        type(classifier).__name__,
        config.confidence_threshold,
    )
    return AlarmDecisionEngine(store, classifier, confidence_threshold=config.confidence_threshold)
