# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — Built-in Network Types
Mirrors the native segNet network enumeration. The native library owns
name resolution; this table is the Python-side view of the same values,
used to label resolved types and to enumerate the built-in choices.
"""

from __future__ import annotations

from enum import IntEnum


class NetworkType(IntEnum):
    """Native segNet network identifiers. CUSTOM is the unresolved sentinel."""
    FCN_ALEXNET_PASCAL_VOC = 0
    FCN_ALEXNET_SYNTHIA_CVPR16 = 1
    FCN_ALEXNET_SYNTHIA_SUMMER_HD = 2
    FCN_ALEXNET_SYNTHIA_SUMMER_SD = 3
    FCN_ALEXNET_CITYSCAPES_HD = 4
    FCN_ALEXNET_CITYSCAPES_SD = 5
    FCN_ALEXNET_AERIAL_FPV_720P = 6
    CUSTOM = 7

    @classmethod
    def from_str(cls, name: str) -> "NetworkType":
        """
        Resolve a model name (case-insensitive). Unknown names give CUSTOM.

        Mirrors libsegnet's segnet_network_type_from_str for callers without
        the native library (name checks, engine factory stand-ins). SegNet
        itself always resolves through its factory.
        """
        return NETWORK_ALIASES.get(name.strip().lower(), cls.CUSTOM)

    @classmethod
    def from_native(cls, value: int) -> "NetworkType":
        """Map a raw native enum value; out-of-range values give CUSTOM."""
        try:
            return cls(value)
        except ValueError:
            return cls.CUSTOM


DEFAULT_NETWORK = "aerial-fpv"

# Long model name first, short alias second
NETWORK_ALIASES: dict[str, NetworkType] = {
    "fcn-alexnet-pascal-voc": NetworkType.FCN_ALEXNET_PASCAL_VOC,
    "pascal-voc": NetworkType.FCN_ALEXNET_PASCAL_VOC,
    "fcn-alexnet-synthia-cvpr16": NetworkType.FCN_ALEXNET_SYNTHIA_CVPR16,
    "synthia-cvpr16": NetworkType.FCN_ALEXNET_SYNTHIA_CVPR16,
    "fcn-alexnet-synthia-summer-hd": NetworkType.FCN_ALEXNET_SYNTHIA_SUMMER_HD,
    "synthia-summer-hd": NetworkType.FCN_ALEXNET_SYNTHIA_SUMMER_HD,
    "fcn-alexnet-synthia-summer-sd": NetworkType.FCN_ALEXNET_SYNTHIA_SUMMER_SD,
    "synthia-summer-sd": NetworkType.FCN_ALEXNET_SYNTHIA_SUMMER_SD,
    "fcn-alexnet-cityscapes-hd": NetworkType.FCN_ALEXNET_CITYSCAPES_HD,
    "cityscapes-hd": NetworkType.FCN_ALEXNET_CITYSCAPES_HD,
    "fcn-alexnet-cityscapes-sd": NetworkType.FCN_ALEXNET_CITYSCAPES_SD,
    "fcn-alexnet-cityscapes": NetworkType.FCN_ALEXNET_CITYSCAPES_SD,
    "cityscapes-sd": NetworkType.FCN_ALEXNET_CITYSCAPES_SD,
    "fcn-alexnet-aerial-fpv-720p": NetworkType.FCN_ALEXNET_AERIAL_FPV_720P,
    "aerial-fpv": NetworkType.FCN_ALEXNET_AERIAL_FPV_720P,
}


def builtin_networks() -> list[str]:
    """Return every accepted built-in network name, sorted."""
    return sorted(NETWORK_ALIASES)
