"""Base model shared by catpoint data models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CatpointBaseModel(BaseModel):
    """Base for catpoint models.

    Models are mutable by default and re-validate on assignment, so a
    bad value never lands in a field after construction.  Unknown keys
    are rejected to keep persisted snapshots honest.
    """

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
    )
