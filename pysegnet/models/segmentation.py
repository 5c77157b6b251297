# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Segmentation Result Record
Exposed as ``SegNet.Segmentation``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Segmentation(BaseModel):
    """Image segmentation result: size in bytes of the produced image."""
    model_config = ConfigDict(validate_assignment=True, populate_by_name=True)

    image_bytes: int = Field(0, ge=0, le=0xFFFFFFFF, alias="imageBytes")
