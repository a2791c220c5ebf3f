import io
import logging
from typing import Callable, List

from PIL import Image

from .errors import RasterDecodeError

logger = logging.getLogger(__name__)

Decoder = Callable[[bytes], List[str]]


def load_image(data: bytes) -> Image.Image:
    """Decode raster bytes (PNG, JPEG, ...) into a fully loaded PIL image."""
    try:
        img = Image.open(io.BytesIO(data))
        img.load()
    except (OSError, SyntaxError, Image.DecompressionBombError) as e:
        raise RasterDecodeError(f'not a readable image: {e}') from e
    return img


def scan_qr_codes(img: Image.Image) -> List[str]:
    # zbar is a shared library; only load it when an image is actually scanned
    from pyzbar.pyzbar import ZBarSymbol, decode as decode_qr

    payloads = []
    for obj in decode_qr(img.convert('L'), symbols=[ZBarSymbol.QRCODE]):
        try:
            payloads.append(obj.data.decode('utf-8'))
        except UnicodeDecodeError:
            logger.warning('Dropping QR symbol with non UTF-8 payload (%d bytes)', len(obj.data))
    return payloads


def decode_image_bytes(data: bytes) -> List[str]:
    """Return every QR payload found in the image, possibly none."""
    return scan_qr_codes(load_image(data))
