"""Camera frame model."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from catpoint.models._base import CatpointBaseModel


class ImageFrame(CatpointBaseModel):
    """A raster frame handed to the image classifier.

    The pixel payload is opaque to the engine; only the dimensions are
    validated.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    data: bytes = b""
