"""Configuration for catpoint."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from catpoint.exceptions import CatpointConfigError
from catpoint.image import DEFAULT_CONFIDENCE_THRESHOLD


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise CatpointConfigError(f"{name} must be a number, got {value!r}") from exc


def _env_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError as exc:
        raise CatpointConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class CatpointConfig:
    """Engine configuration.

    Parameters
    ----------
    confidence_threshold : float
        Confidence (0-100) the classifier needs before it reports a cat.
    state_path : str or None
        Where to persist the state snapshot as JSON.  ``None`` keeps
        state in memory only.
    classifier_seed : int or None
        Seed for the fake image classifier, for reproducible runs.
    """

    confidence_threshold: float = DEFAULT_CONFIDENCE_THRESHOLD
    state_path: str | None = None
    classifier_seed: int | None = None

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence_threshold <= 100.0:
            raise CatpointConfigError(
                f"confidence_threshold must be between 0 and 100, got {self.confidence_threshold}"
            )

    @classmethod
    def from_env(cls, **overrides: Any) -> CatpointConfig:
        """Create configuration from ``CATPOINT_*`` environment variables.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        threshold_env = env.get("CATPOINT_CONFIDENCE_THRESHOLD")
        if threshold_env is not None and "confidence_threshold" not in overrides:
            config_kwargs["confidence_threshold"] = _env_float("CATPOINT_CONFIDENCE_THRESHOLD", threshold_env)

        path_env = env.get("CATPOINT_STATE_PATH")
        if path_env and "state_path" not in overrides:
            config_kwargs["state_path"] = path_env

        seed_env = env.get("CATPOINT_CLASSIFIER_SEED")
        if seed_env is not None and "classifier_seed" not in overrides:
            config_kwargs["classifier_seed"] = _env_int("CATPOINT_CLASSIFIER_SEED", seed_env)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
