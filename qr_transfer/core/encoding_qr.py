import io

import segno

from .config import DEFAULT_BORDER, DEFAULT_ERROR_LEVEL, DEFAULT_SCALE, FRAME_NAME_TEMPLATE
from .errors import SymbolEncodeError


def make_qr(content: str, error_level: str = DEFAULT_ERROR_LEVEL) -> 'segno.QRCode':
    """Build a (non-micro) QR symbol for content at a fixed error level."""
    try:
        return segno.make(content, error=error_level, micro=False, boost_error=False)
    except segno.DataOverflowError as e:
        raise SymbolEncodeError(
            f'{len(content)} characters do not fit a QR symbol at error level {error_level.upper()}') from e
    except ValueError as e:
        raise SymbolEncodeError(f'cannot encode QR symbol: {e}') from e


def render_qr_png(content: str, error_level: str = DEFAULT_ERROR_LEVEL,
                  scale: int = DEFAULT_SCALE, border: int = DEFAULT_BORDER) -> bytes:
    """Render content as a QR code and return the PNG bytes."""
    qr = make_qr(content, error_level)
    buf = io.BytesIO()
    qr.save(buf, kind='png', scale=scale, border=border)
    return buf.getvalue()


def frame_filename(index: int) -> str:
    return FRAME_NAME_TEMPLATE.format(index)
