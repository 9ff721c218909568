import base64
import io

import numpy as np
from PIL import Image

from src.site_timeclock.site_timeclock.punches.snapshot import DATA_URL_PREFIX, decode_data_url, encode_snapshot


def _jpeg_size(data_url: str):
    raw = base64.b64decode(data_url[len(DATA_URL_PREFIX):])
    return Image.open(io.BytesIO(raw)).size


def test_array_frame_is_scaled_to_stored_size():
    frame = np.zeros((480, 640, 3), dtype=np.uint8)

    data_url = encode_snapshot(frame)

    assert data_url.startswith(DATA_URL_PREFIX)
    assert _jpeg_size(data_url) == (320, 240)


def test_uploaded_png_is_reencoded_as_jpeg():
    buf = io.BytesIO()
    Image.new("RGBA", (100, 50), (255, 0, 0, 255)).save(buf, format="PNG")
    data_url = "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode()

    encoded = encode_snapshot(decode_data_url(data_url))

    assert _jpeg_size(encoded) == (320, 240)
