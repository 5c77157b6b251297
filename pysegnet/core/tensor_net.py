# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Inference Object Base
Owns the native engine handle for one wrapper object.

Ownership is single and explicit: the handle stored in ``net`` is
released exactly once, either by close() / context-manager exit or by
the finalizer when the wrapper is garbage collected.
"""

from __future__ import annotations

import weakref
from typing import Optional

from pysegnet.core.engine import SegNetEngine
from pysegnet.utils.logger import get_logger

log = get_logger(__name__)


def _release(engine: SegNetEngine, owner: str) -> None:
    log.debug("engine_release", owner=owner)
    engine.destroy()


class TensorNet:
    """Base class for wrappers that hold a native inference engine."""

    net: Optional[SegNetEngine] = None
    _finalizer: Optional[weakref.finalize] = None

    def _attach(self, engine: SegNetEngine) -> None:
        """Take ownership of ``engine``. Any previous engine is released first."""
        self.close()
        self.net = engine
        self._finalizer = weakref.finalize(
            self, _release, engine, type(self).__name__
        )

    @property
    def is_loaded(self) -> bool:
        return self.net is not None

    def close(self) -> None:
        """Release the native engine. Further calls are no-ops."""
        finalizer = self._finalizer
        self.net = None
        self._finalizer = None
        if finalizer is not None:
            finalizer()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
