import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .errors import ConfigError

# Base64 characters per QR symbol. Kept well below the symbol capacity at
# error level M so the payload fits without computing the exact version.
CHUNK_SIZE = 1200

IMAGE_EXTENSION = '.png'
FRAME_NAME_TEMPLATE = 'qr_{:05d}' + IMAGE_EXTENSION

ERROR_LEVELS = ('l', 'm', 'q', 'h')
DEFAULT_ERROR_LEVEL = 'm'
DEFAULT_SCALE = 4
DEFAULT_BORDER = 4

ENV_PREFIX = 'QR_TRANSFER_'


@dataclass(frozen=True)
class TransferConfig:
    chunk_size: int = CHUNK_SIZE
    error_level: str = DEFAULT_ERROR_LEVEL
    scale: int = DEFAULT_SCALE
    border: int = DEFAULT_BORDER

    def __post_init__(self):
        if self.chunk_size <= 0:
            raise ConfigError(f'chunk size must be positive, got {self.chunk_size}')
        if self.error_level not in ERROR_LEVELS:
            raise ConfigError(f'unknown QR error level {self.error_level!r}, expected one of {ERROR_LEVELS}')
        if self.scale <= 0:
            raise ConfigError(f'scale must be positive, got {self.scale}')
        if self.border < 0:
            raise ConfigError(f'border must not be negative, got {self.border}')

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'TransferConfig':
        """Build a config from QR_TRANSFER_* variables, falling back to defaults."""
        env = os.environ if environ is None else environ
        return cls(
            chunk_size=_env_int(env, 'CHUNK_SIZE', CHUNK_SIZE),
            error_level=env.get(ENV_PREFIX + 'ERROR_LEVEL', DEFAULT_ERROR_LEVEL).lower(),
            scale=_env_int(env, 'SCALE', DEFAULT_SCALE),
            border=_env_int(env, 'BORDER', DEFAULT_BORDER),
        )


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name)
    if raw is None or raw == '':
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f'{ENV_PREFIX + name} must be an integer, got {raw!r}') from None
