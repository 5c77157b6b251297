# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Python binding for the native segNet segmentation engine.
"""

from pysegnet.core.errors import (
    ConstructionError,
    InvalidArgumentError,
    InvalidStateError,
    OperationError,
    SegNetError,
)
from pysegnet.core.native import get_engine_factory, init_native, is_loaded
from pysegnet.core.pointer_bridge import get_pointer
from pysegnet.models.buffer import DeviceBuffer
from pysegnet.models.network import NetworkType, builtin_networks
from pysegnet.models.segmentation import Segmentation
from pysegnet.segnet import PLACEHOLDER_RESULT, SegNet
from pysegnet.utils.logger import configure_logging, get_logger

__all__ = [
    # Wrapper
    "SegNet",
    "Segmentation",
    "PLACEHOLDER_RESULT",
    # Native registration
    "init_native",
    "get_engine_factory",
    "is_loaded",
    # Logging
    "configure_logging",
    "get_logger",
    # Buffers
    "DeviceBuffer",
    "get_pointer",
    # Networks
    "NetworkType",
    "builtin_networks",
    # Errors
    "SegNetError",
    "InvalidArgumentError",
    "InvalidStateError",
    "ConstructionError",
    "OperationError",
]
