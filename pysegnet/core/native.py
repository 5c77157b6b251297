# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Native Library Bridge
ctypes binding to libsegnet's flat C ABI:

    int   segnet_network_type_from_str(const char* name);
    void* segnet_create(int network_type);
    void* segnet_create_argv(int argc, char** argv);
    bool  segnet_process(void* net, void* img, int width, int height);
    bool  segnet_overlay(void* net, void* img, int width, int height);
    bool  segnet_mask(void* net, void* img, int width, int height);
    void  segnet_destroy(void* net);

init_native() is the one-time registration step. It is idempotent and
returns the engine factory capability handed to SegNet.
"""

from __future__ import annotations

import ctypes
import ctypes.util
from pathlib import Path
from typing import Any, Optional, Sequence

from pysegnet.config import get_settings
from pysegnet.core.errors import ConstructionError, InvalidStateError
from pysegnet.utils.logger import get_logger

log = get_logger(__name__)

_IMAGE_OP_ARGTYPES = [ctypes.c_void_p, ctypes.c_void_p, ctypes.c_int, ctypes.c_int]

# name -> (argtypes, restype)
_SIGNATURES: dict[str, tuple[list[Any], Any]] = {
    "segnet_network_type_from_str": ([ctypes.c_char_p], ctypes.c_int),
    "segnet_create": ([ctypes.c_int], ctypes.c_void_p),
    "segnet_create_argv": (
        [ctypes.c_int, ctypes.POINTER(ctypes.c_char_p)],
        ctypes.c_void_p,
    ),
    "segnet_process": (_IMAGE_OP_ARGTYPES, ctypes.c_bool),
    "segnet_overlay": (_IMAGE_OP_ARGTYPES, ctypes.c_bool),
    "segnet_mask": (_IMAGE_OP_ARGTYPES, ctypes.c_bool),
    "segnet_destroy": ([ctypes.c_void_p], None),
}

# ─── Module-level singleton ──────────────────────────────────────────────────
_factory: "NativeEngineFactory | None" = None


class NativeLibrary:
    """Loaded libsegnet with every exported symbol's signature declared."""

    def __init__(self, lib: Any) -> None:
        self._lib = lib
        for name, (argtypes, restype) in _SIGNATURES.items():
            fn = getattr(lib, name)
            fn.argtypes = argtypes
            fn.restype = restype

    def __getattr__(self, name: str) -> Any:
        if name not in _SIGNATURES:
            raise AttributeError(name)
        return getattr(self._lib, name)


class NativeEngine:
    """Handle to one native segNet instance."""

    def __init__(self, lib: NativeLibrary, handle: int) -> None:
        self._lib = lib
        self.handle = handle

    def process(self, ptr: int, width: int, height: int) -> bool:
        return bool(self._lib.segnet_process(self.handle, ptr, width, height))

    def overlay(self, ptr: int, width: int, height: int) -> bool:
        return bool(self._lib.segnet_overlay(self.handle, ptr, width, height))

    def mask(self, ptr: int, width: int, height: int) -> bool:
        return bool(self._lib.segnet_mask(self.handle, ptr, width, height))

    def destroy(self) -> None:
        self._lib.segnet_destroy(self.handle)
        self.handle = None

    def __repr__(self) -> str:
        return f"NativeEngine(handle={self.handle!r})"


def _pack_argv(argv: Sequence[str]) -> Any:
    """Build a ``char*[argc]`` vector of UTF-8 encoded arguments."""
    return (ctypes.c_char_p * len(argv))(*(a.encode("utf-8") for a in argv))


class NativeEngineFactory:
    """EngineFactory backed by libsegnet."""

    def __init__(self, lib: NativeLibrary) -> None:
        self._lib = lib

    def network_type_from_str(self, name: str) -> int:
        return int(self._lib.segnet_network_type_from_str(name.encode("utf-8")))

    def create(self, network_type: int) -> Optional[NativeEngine]:
        handle = self._lib.segnet_create(int(network_type))
        return NativeEngine(self._lib, handle) if handle else None

    def create_from_argv(self, argv: Sequence[str]) -> Optional[NativeEngine]:
        argc = len(argv)
        try:
            c_argv = _pack_argv(argv)
        except MemoryError as e:
            raise ConstructionError(
                "segNet failed to allocate memory for argv list"
            ) from e
        handle = self._lib.segnet_create_argv(argc, c_argv)
        return NativeEngine(self._lib, handle) if handle else None


def _resolve_library_path(path: Optional[str]) -> str:
    candidate = path or get_settings().native_library
    if candidate:
        if not Path(candidate).exists():
            raise FileNotFoundError(
                f"segNet native library not found at {candidate}. "
                "Set SEGNET_NATIVE_LIBRARY to the path of libsegnet."
            )
        return candidate

    found = ctypes.util.find_library("segnet")
    if found is None:
        raise FileNotFoundError(
            "segNet native library not found on the library search path. "
            "Set SEGNET_NATIVE_LIBRARY to the path of libsegnet."
        )
    return found


def init_native(path: Optional[str] = None) -> NativeEngineFactory:
    """
    Load libsegnet and return the engine factory.
    Safe to call multiple times — subsequent calls return the same factory.
    """
    global _factory

    if _factory is not None:
        log.debug("native_already_loaded")
        return _factory

    lib_path = _resolve_library_path(path)
    log.info("native_loading", path=lib_path)

    _factory = NativeEngineFactory(NativeLibrary(ctypes.CDLL(lib_path)))

    log.info("native_loaded", path=lib_path)
    return _factory


def get_engine_factory() -> NativeEngineFactory:
    """
    Return the engine factory singleton.
    Raises InvalidStateError if init_native() has not been called.
    """
    if _factory is None:
        raise InvalidStateError(
            "segNet native library not initialised. "
            "Call pysegnet.init_native() once at startup."
        )
    return _factory


def is_loaded() -> bool:
    """Return True if libsegnet has been successfully loaded."""
    return _factory is not None


def reset_native() -> None:
    """Forget the loaded factory. Engines already created keep their handles."""
    global _factory
    _factory = None
