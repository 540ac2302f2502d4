"""
utils - Общая инфраструктура

Экспортирует:
- Логирование
- Иерархию ошибок
- Конфигурацию анимации
"""

from .logging import get_logger, setup_file_logging
from .error_handling import (
    HanoiError, InvalidArgumentError, InvalidSizeError, InputError,
    ColormapError, ColormapOpenError, ColormapFormatError, ColormapRangeError,
    EmptyColormapError, IllegalMoveError, format_error, handle_errors
)
from .config import AnimationConfig, DEFAULT_COLORMAP_PATH, DEFAULT_DELAY

__all__ = [
    'get_logger', 'setup_file_logging',
    'HanoiError', 'InvalidArgumentError', 'InvalidSizeError', 'InputError',
    'ColormapError', 'ColormapOpenError', 'ColormapFormatError', 'ColormapRangeError',
    'EmptyColormapError', 'IllegalMoveError', 'format_error', 'handle_errors',
    'AnimationConfig', 'DEFAULT_COLORMAP_PATH', 'DEFAULT_DELAY',
]
