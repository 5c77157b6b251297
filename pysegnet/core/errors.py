# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Error Types
Every failure at the binding boundary is raised as one of these.
Each also derives from the matching builtin so plain
``except ValueError`` / ``except RuntimeError`` callers keep working.
"""


class SegNetError(Exception):
    """Base class for all binding errors."""


class InvalidArgumentError(SegNetError, ValueError):
    """Raised for malformed parameters, bad dimensions or unusable buffers."""


class InvalidStateError(SegNetError, RuntimeError):
    """Raised when an operation hits a wrapper with no engine handle."""


class ConstructionError(SegNetError, RuntimeError):
    """Raised when the native factory cannot produce an engine."""


class OperationError(SegNetError, RuntimeError):
    """Raised when a native inference call reports failure."""
