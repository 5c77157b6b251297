# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Pointer Bridge
Extracts a raw device address from the handle a caller passes in.

Accepted handles:
  - DeviceBuffer                      explicit tagged handle
  - __cuda_array_interface__ objects  CUDA images, CuPy / Numba arrays
  - torch.Tensor on a CUDA device     data_ptr()
  - PyCapsule                         pointer read via the capsule's own name

Anything else (including host-memory tensors) yields None.
"""

from __future__ import annotations

import ctypes
from typing import Any, Optional

import torch

from pysegnet.models.buffer import DeviceBuffer
from pysegnet.utils.logger import get_logger

log = get_logger(__name__)

_PyCapsule_GetName = ctypes.pythonapi.PyCapsule_GetName
_PyCapsule_GetName.restype = ctypes.c_char_p
_PyCapsule_GetName.argtypes = [ctypes.py_object]

_PyCapsule_GetPointer = ctypes.pythonapi.PyCapsule_GetPointer
_PyCapsule_GetPointer.restype = ctypes.c_void_p
_PyCapsule_GetPointer.argtypes = [ctypes.py_object, ctypes.c_char_p]

_PyCapsule_IsValid = ctypes.pythonapi.PyCapsule_IsValid
_PyCapsule_IsValid.restype = ctypes.c_int
_PyCapsule_IsValid.argtypes = [ctypes.py_object, ctypes.c_char_p]


def _is_capsule(handle: Any) -> bool:
    return type(handle).__name__ == "PyCapsule"


def _capsule_pointer(capsule: Any) -> Optional[int]:
    name = _PyCapsule_GetName(capsule)
    if not _PyCapsule_IsValid(capsule, name):
        return None
    return _PyCapsule_GetPointer(capsule, name)


def _cuda_interface_pointer(handle: Any) -> Optional[int]:
    iface = getattr(handle, "__cuda_array_interface__", None)
    if not isinstance(iface, dict):
        return None
    data = iface.get("data")
    if not data:
        return None
    return int(data[0])


def get_pointer(handle: Any) -> Optional[int]:
    """
    Return the device address behind ``handle``, or None when the handle
    is not a usable device buffer. Null addresses are reported as None.
    """
    if handle is None:
        return None

    if isinstance(handle, DeviceBuffer):
        ptr = handle.address
    elif isinstance(handle, torch.Tensor):
        # Host tensors are not device buffers
        ptr = handle.data_ptr() if handle.is_cuda else None
    elif _is_capsule(handle):
        ptr = _capsule_pointer(handle)
    else:
        ptr = _cuda_interface_pointer(handle)

    if not ptr:
        log.debug("pointer_extraction_failed", handle_type=type(handle).__name__)
        return None
    return ptr
