# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
PySegNet — segNet Wrapper
Image segmentation DNN: loads a built-in network or one described by
command-line style arguments, then runs segmentation, overlay or mask
rendering on device-resident images.

Example:
    factory = init_native()
    with SegNet("aerial-fpv", factory=factory) as net:
        net.process(cuda_img, 1280, 720)
        net.overlay(cuda_img, 1280, 720)
"""

from __future__ import annotations

from typing import Any, Optional, Sequence

from pysegnet.config import get_settings
from pysegnet.core.engine import EngineFactory, SegNetEngine
from pysegnet.core.errors import (
    ConstructionError,
    InvalidArgumentError,
    InvalidStateError,
    OperationError,
)
from pysegnet.core.native import get_engine_factory
from pysegnet.core.pointer_bridge import get_pointer
from pysegnet.core.tensor_net import TensorNet
from pysegnet.models.network import NetworkType
from pysegnet.models.params import (
    ConstructParams,
    ImageParams,
    OverlayParams,
    parse_params,
)
from pysegnet.models.segmentation import Segmentation
from pysegnet.utils.logger import get_logger

log = get_logger(__name__)

# Returned by every successful operation; the native calls produce no value
PLACEHOLDER_RESULT = 2


class SegNet(TensorNet):
    """
    Image Segmentation DNN — segments objects in an image.

    Args:
        network: name of a built-in network; defaults to the configured
                 default_network ("aerial-fpv").
        argv:    command-line arguments for the native loader. A non-empty
                 list takes precedence over ``network``.
        factory: engine factory; defaults to the one from init_native().
    """

    Segmentation = Segmentation

    _engine: Optional[SegNetEngine] = None

    def __init__(
        self,
        network: Optional[str] = None,
        argv: Optional[Sequence[str]] = None,
        *,
        factory: Optional[EngineFactory] = None,
    ) -> None:
        log.debug("segnet_init")
        if network is None:
            network = get_settings().default_network
        params = parse_params(
            ConstructParams, "__init__", network=network, argv=argv
        )

        if factory is None:
            factory = get_engine_factory()

        if params.use_argv:
            engine = self._load_from_argv(factory, params.argv)
        else:
            engine = self._load_builtin(factory, params.network)

        if engine is None:
            log.error("segnet_load_failed", network=params.network, argv=params.argv)
            self.close()
            raise ConstructionError("segNet failed to load network")

        self._attach(engine)
        self._engine = engine

    # ─── Construction ────────────────────────────────────────────────────────

    @staticmethod
    def _load_from_argv(
        factory: EngineFactory, argv: list[str]
    ) -> Optional[SegNetEngine]:
        log.info("segnet_loading_argv", argc=len(argv))
        for n, arg in enumerate(argv):
            log.debug("segnet_argv", index=n, value=arg)
        return factory.create_from_argv(argv)

    @staticmethod
    def _load_builtin(
        factory: EngineFactory, network: str
    ) -> Optional[SegNetEngine]:
        log.info("segnet_loading_builtin", network=network)
        network_type = NetworkType.from_native(factory.network_type_from_str(network))

        if network_type == NetworkType.CUSTOM:
            log.error("segnet_invalid_network", network=network)
            raise InvalidArgumentError(
                f"segNet invalid built-in network was requested ('{network}')"
            )

        log.debug("segnet_network_resolved", network_type=network_type.name)
        return factory.create(network_type)

    # ─── Operations ──────────────────────────────────────────────────────────

    def _require_engine(self, op: str) -> SegNetEngine:
        if self._engine is None or self.net is None:
            log.error("segnet_invalid_instance", op=op)
            raise InvalidStateError("segNet invalid object instance")
        return self._engine

    @staticmethod
    def _image_pointer(op: str, image: Any) -> int:
        ptr = get_pointer(image)
        if ptr is None:
            log.error("segnet_pointer_failed", op=op, handle_type=type(image).__name__)
            raise InvalidArgumentError(
                f"segNet.{op}() failed to get image pointer from device buffer handle"
            )
        return ptr

    def process(self, image: Any, width: int, height: int) -> tuple[int]:
        """Segment the device image. Returns a one-element result tuple."""
        engine = self._require_engine("process")
        params = parse_params(
            ImageParams, "process", image=image, width=width, height=height
        )
        ptr = self._image_pointer("process", params.image)

        if not engine.process(ptr, params.width, params.height):
            log.error("segnet_process_failed", width=params.width, height=params.height)
            raise OperationError(
                "segNet.process() encountered an error segmenting the image"
            )
        return (PLACEHOLDER_RESULT,)

    def overlay(
        self, image: Any, width: int, height: int, mask: Any = False
    ) -> tuple[int]:
        """
        Render the segmentation into the device image.
        A truthy ``mask`` renders the class mask instead of the colour overlay.
        """
        engine = self._require_engine("overlay")
        params = parse_params(
            OverlayParams,
            "overlay",
            image=image,
            width=width,
            height=height,
            mask=mask,
        )
        ptr = self._image_pointer("overlay", params.image)

        render = engine.mask if params.use_mask else engine.overlay
        if not render(ptr, params.width, params.height):
            log.error(
                "segnet_overlay_failed",
                mask=params.use_mask,
                width=params.width,
                height=params.height,
            )
            raise OperationError(
                "segNet.overlay() encountered an error rendering the image"
            )
        return (PLACEHOLDER_RESULT,)

    def mask(self, image: Any, width: int, height: int) -> tuple[int]:
        """Render the class mask into the device image."""
        return self.overlay(image, width, height, mask=True)

    def close(self) -> None:
        self._engine = None
        super().close()
