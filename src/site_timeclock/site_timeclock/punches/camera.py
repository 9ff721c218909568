from __future__ import annotations

import logging
from typing import Optional, Protocol, Union

import cv2
import numpy as np

from ..core.exceptions import DeviceError

logger = logging.getLogger(__name__)


class CameraDevice(Protocol):
    """Scoped capture device: started on entering CONFIRM, stopped on leaving it."""

    def start(self) -> None:
        raise NotImplementedError

    @property
    def ready(self) -> bool:
        raise NotImplementedError

    def capture(self) -> Optional[np.ndarray]:
        """Return one RGB frame, or None when the device has nothing to offer."""

        raise NotImplementedError

    def stop(self) -> None:
        raise NotImplementedError


class NullCamera:
    """No local device; the kiosk client sends its own frame with the confirmation."""

    def start(self) -> None:
        return None

    @property
    def ready(self) -> bool:
        return False

    def capture(self) -> Optional[np.ndarray]:
        return None

    def stop(self) -> None:
        return None


class OpenCVCamera:
    """Webcam attached to the kiosk host."""

    def __init__(self, source: Union[int, str] = 0):
        self._source = source
        self._cap = None

    def start(self) -> None:
        if self._cap is not None:
            return
        cap = cv2.VideoCapture(self._source)
        if not cap.isOpened():
            cap.release()
            raise DeviceError("Erro na câmera. Verifique permissões.")
        self._cap = cap
        logger.debug("Camera %s opened", self._source)

    @property
    def ready(self) -> bool:
        return self._cap is not None and self._cap.isOpened()

    def capture(self) -> Optional[np.ndarray]:
        if not self.ready:
            return None
        ok, frame = self._cap.read()
        if not ok or frame is None:
            raise DeviceError("Falha ao capturar imagem da câmera")
        return cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)

    def stop(self) -> None:
        if self._cap is not None:
            self._cap.release()
            self._cap = None
            logger.debug("Camera %s released", self._source)


def build_camera(source) -> CameraDevice:
    """``none``/empty selects NullCamera; digits select a device index; anything else is a stream URL."""
    if source is None:
        return NullCamera()
    text = str(source).strip()
    if not text or text.lower() == "none":
        return NullCamera()
    if text.isdigit():
        return OpenCVCamera(int(text))
    return OpenCVCamera(text)
