# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Device Buffer Handle
Explicit tagged handle for device-resident pixel data. The binding
never owns the memory behind ``ptr``; it is valid only for one call.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DeviceBuffer(BaseModel):
    """Device pointer plus validity flag and optional layout metadata."""
    model_config = ConfigDict(frozen=True)

    ptr: int = Field(..., ge=0, description="Raw device address")
    valid: bool = True
    size: Optional[int] = Field(None, ge=0, description="Buffer size in bytes")
    stride: Optional[int] = Field(None, ge=0, description="Row pitch in bytes")

    @property
    def address(self) -> Optional[int]:
        """Return the usable address, or None for a null/invalidated buffer."""
        if not self.valid or self.ptr == 0:
            return None
        return self.ptr
