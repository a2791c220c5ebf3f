from typing import List, Optional


class QRTransferError(Exception):
    """Base class for every error raised by the transfer pipelines."""


class ConfigError(QRTransferError):
    pass


class TransferError(QRTransferError):
    """File system failure in one of the pipeline steps."""


class SymbolEncodeError(QRTransferError):
    """A chunk could not be rendered as a QR symbol."""


class MalformedEncodingError(QRTransferError):
    """Reassembled text is not valid standard Base64."""


class MissingTotalError(QRTransferError):
    def __init__(self, message: str = 'no chunk declared a total chunk count'):
        super().__init__(message)


class MissingChunkError(QRTransferError):
    def __init__(self, index: int, missing: Optional[List[int]] = None):
        self.index = index
        self.missing = list(missing) if missing else [index]
        message = f'chunk {index} not found'
        if len(self.missing) > 1:
            message += ' (first missing: ' + ', '.join(str(i) for i in self.missing) + ')'
        super().__init__(message)


# Recoverable: the scanner logs these and moves on to the next unit.

class RasterDecodeError(QRTransferError):
    pass


class MalformedChunkError(QRTransferError):
    pass
