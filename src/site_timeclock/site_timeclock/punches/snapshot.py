from __future__ import annotations

import base64
import io
from typing import Union

import numpy as np
from PIL import Image

from ..core.constants import SNAPSHOT_HEIGHT, SNAPSHOT_JPEG_QUALITY, SNAPSHOT_WIDTH

DATA_URL_PREFIX = "data:image/jpeg;base64,"

Frame = Union[Image.Image, np.ndarray, bytes]


def decode_data_url(value: str) -> bytes:
    # value may include the "data:image/...;base64," prefix
    if "," in value:
        value = value.split(",", 1)[1]
    return base64.b64decode(value, validate=False)


def _to_image(frame: Frame) -> Image.Image:
    if isinstance(frame, Image.Image):
        return frame
    if isinstance(frame, np.ndarray):
        return Image.fromarray(frame)
    return Image.open(io.BytesIO(frame))


def encode_snapshot(frame: Frame) -> str:
    """Scale a still frame to the stored size and return it as a JPEG data URL.

    ``np.ndarray`` frames are expected in RGB order.
    """
    image = _to_image(frame).convert("RGB").resize((SNAPSHOT_WIDTH, SNAPSHOT_HEIGHT))
    out = io.BytesIO()
    image.save(out, format="JPEG", quality=SNAPSHOT_JPEG_QUALITY)
    return DATA_URL_PREFIX + base64.b64encode(out.getvalue()).decode("ascii")
