# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Engine Contracts
Structural interfaces for the native segmentation engine and its factory.
The ctypes implementation lives in pysegnet.core.native; tests supply fakes.
"""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable


@runtime_checkable
class SegNetEngine(Protocol):
    """A constructed native segmentation engine."""

    def process(self, ptr: int, width: int, height: int) -> bool:
        """Run segmentation on the image at ``ptr``."""

    def overlay(self, ptr: int, width: int, height: int) -> bool:
        """Render the class overlay into the image at ``ptr``."""

    def mask(self, ptr: int, width: int, height: int) -> bool:
        """Render the class mask into the image at ``ptr``."""

    def destroy(self) -> None:
        """Release the native engine. Called exactly once by the owner."""


@runtime_checkable
class EngineFactory(Protocol):
    """Builds engines from a built-in network type or raw argv."""

    def network_type_from_str(self, name: str) -> int:
        """Resolve a model name to the native network enum value."""

    def create(self, network_type: int) -> Optional[SegNetEngine]:
        """Load a built-in network. None when loading failed."""

    def create_from_argv(self, argv: Sequence[str]) -> Optional[SegNetEngine]:
        """Load a network from command-line style arguments. None on failure."""
