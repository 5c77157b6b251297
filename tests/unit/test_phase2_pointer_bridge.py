# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
Phase 2 — Pointer bridge tests.
Exercises every accepted handle kind with synthetic addresses.
CUDA tensor test is skipped when no GPU is present.
"""

import ctypes

import pytest
import torch


# ─── Helpers ─────────────────────────────────────────────────────────────────

_PyCapsule_New = ctypes.pythonapi.PyCapsule_New
_PyCapsule_New.restype = ctypes.py_object
_PyCapsule_New.argtypes = [ctypes.c_void_p, ctypes.c_char_p, ctypes.c_void_p]

# Capsule names must outlive the capsules that reference them
_CAPSULE_NAME = b"cudaImage"


class _CudaArray:
    """Minimal object exposing the CUDA array interface."""

    def __init__(self, ptr: int):
        self.__cuda_array_interface__ = {
            "shape": (720, 1280, 4),
            "typestr": "<f4",
            "data": (ptr, False),
            "version": 3,
        }


# ─── DeviceBuffer ────────────────────────────────────────────────────────────

def test_device_buffer_pointer():
    from pysegnet.core.pointer_bridge import get_pointer
    from pysegnet.models.buffer import DeviceBuffer
    assert get_pointer(DeviceBuffer(ptr=0x7F000000, size=1024)) == 0x7F000000


def test_device_buffer_invalid_flag():
    from pysegnet.core.pointer_bridge import get_pointer
    from pysegnet.models.buffer import DeviceBuffer
    assert get_pointer(DeviceBuffer(ptr=0x7F000000, valid=False)) is None


def test_device_buffer_null_pointer():
    from pysegnet.core.pointer_bridge import get_pointer
    from pysegnet.models.buffer import DeviceBuffer
    assert get_pointer(DeviceBuffer(ptr=0)) is None


def test_device_buffer_is_frozen():
    from pydantic import ValidationError
    from pysegnet.models.buffer import DeviceBuffer
    buf = DeviceBuffer(ptr=16)
    with pytest.raises(ValidationError):
        buf.ptr = 32


def test_device_buffer_rejects_negative_pointer():
    from pydantic import ValidationError
    from pysegnet.models.buffer import DeviceBuffer
    with pytest.raises(ValidationError):
        DeviceBuffer(ptr=-1)


# ─── CUDA Array Interface ────────────────────────────────────────────────────

def test_cuda_array_interface_pointer():
    from pysegnet.core.pointer_bridge import get_pointer
    assert get_pointer(_CudaArray(0xDEAD0000)) == 0xDEAD0000


def test_cuda_array_interface_null_data():
    from pysegnet.core.pointer_bridge import get_pointer
    assert get_pointer(_CudaArray(0)) is None


# ─── PyCapsule ───────────────────────────────────────────────────────────────

def test_named_capsule_pointer():
    from pysegnet.core.pointer_bridge import get_pointer
    capsule = _PyCapsule_New(0x1234, _CAPSULE_NAME, None)
    assert get_pointer(capsule) == 0x1234


def test_unnamed_capsule_pointer():
    from pysegnet.core.pointer_bridge import get_pointer
    capsule = _PyCapsule_New(0x5678, None, None)
    assert get_pointer(capsule) == 0x5678


# ─── torch ───────────────────────────────────────────────────────────────────

def test_cpu_tensor_is_not_a_device_buffer():
    from pysegnet.core.pointer_bridge import get_pointer
    assert get_pointer(torch.zeros(4, 4)) is None


@pytest.mark.skipif(not torch.cuda.is_available(), reason="CUDA not available")
def test_cuda_tensor_pointer():
    from pysegnet.core.pointer_bridge import get_pointer
    t = torch.zeros(4, 4, device="cuda")
    assert get_pointer(t) == t.data_ptr()


# ─── Unsupported Handles ─────────────────────────────────────────────────────

@pytest.mark.parametrize("handle", [None, "image.jpg", 0x1000, b"\x00" * 8, [1, 2]])
def test_unsupported_handles(handle):
    from pysegnet.core.pointer_bridge import get_pointer
    assert get_pointer(handle) is None
