# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Entry Point Parameters
One typed parameter model per binding entry point. Validation failures
are converted to InvalidArgumentError at the boundary by ``parse_params``.
"""

from __future__ import annotations

import operator
from typing import Any, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictStr,
    ValidationError,
    field_validator,
)

from pysegnet.core.errors import InvalidArgumentError
from pysegnet.models.network import DEFAULT_NETWORK

P = TypeVar("P", bound=BaseModel)

C_INT_MAX = 2**31 - 1


class ConstructParams(BaseModel):
    """Arguments to SegNet(): a built-in network name or raw argv."""
    network: StrictStr = DEFAULT_NETWORK
    argv: list[StrictStr] = Field(default_factory=list)

    @field_validator("argv", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def use_argv(self) -> bool:
        return len(self.argv) > 0


class ImageParams(BaseModel):
    """Arguments to process(): opaque image handle plus dimensions."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    image: Any
    # Dimensions cross the native boundary as C int
    width: int = Field(..., gt=0, le=C_INT_MAX)
    height: int = Field(..., gt=0, le=C_INT_MAX)

    @field_validator("width", "height", mode="before")
    @classmethod
    def _as_index(cls, v: Any) -> int:
        if isinstance(v, bool) or not hasattr(type(v), "__index__"):
            raise ValueError("image dimensions must be integers")
        return operator.index(v)


class OverlayParams(ImageParams):
    """Arguments to overlay(): a truthy mask selects mask rendering."""
    mask: Any = False

    @property
    def use_mask(self) -> bool:
        return bool(self.mask)


def parse_params(model: type[P], op: str, **kwargs: Any) -> P:
    """Validate kwargs into ``model``; raise InvalidArgumentError on failure."""
    try:
        return model(**kwargs)
    except ValidationError as e:
        fields = ", ".join(
            ".".join(str(p) for p in err["loc"]) for err in e.errors()
        )
        raise InvalidArgumentError(
            f"segNet.{op}() invalid arguments ({fields}): "
            f"{e.errors()[0]['msg']}"
        ) from e
