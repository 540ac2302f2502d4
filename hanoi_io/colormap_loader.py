"""
hanoi_io/colormap_loader.py

Загрузка палитры из CSV: по одной записи "r,g,b" на строку, без заголовка.
"""

import re
from typing import Iterable, List, Union

from core.colormap import Color, Colormap
from utils.config import DEFAULT_COLORMAP_PATH
from utils.error_handling import ColormapFormatError, ColormapOpenError, ColormapRangeError
from utils.logging import get_logger

_RECORD_PATTERN = re.compile(r'(\d+),(\d+),(\d+)')


def parse_record(text: str, index: int) -> Color:
    """
    Разбирает одну запись палитры.

    Args:
        text: строка без перевода строки
        index: номер записи (с 1) для сообщения об ошибке

    Raises:
        ColormapFormatError: запись не из трёх целых через запятую
        ColormapRangeError: канал вне 0..255
    """
    match = _RECORD_PATTERN.fullmatch(text)
    if match is None:
        raise ColormapFormatError(f"malformed colormap record {index}: {text!r}", record=index)
    channels = [int(group) for group in match.groups()]
    for channel in channels:
        if channel > 255:
            raise ColormapRangeError(
                f"colormap record {index} has channel {channel} outside 0..255",
                record=index,
            )
    return Color(*channels)


def parse_colormap(lines: Iterable[Union[str, bytes]]) -> Colormap:
    """
    Разбирает палитру из последовательности строк (str или bytes в ASCII).

    Перевод строки допускается после каждой записи, в том числе последней.
    Пустой ввод даёт пустую палитру.
    """
    samples: List[Color] = []
    for index, line in enumerate(lines, 1):
        if isinstance(line, bytes):
            try:
                line = line.decode('ascii')
            except UnicodeDecodeError as e:
                raise ColormapFormatError(
                    f"malformed colormap record {index}: {line!r} is not ASCII text",
                    record=index,
                ) from e
        samples.append(parse_record(line.rstrip('\n').rstrip('\r'), index))
    return Colormap(samples)


def load_colormap(path: str = DEFAULT_COLORMAP_PATH) -> Colormap:
    """
    Загружает палитру из файла.

    Raises:
        ColormapOpenError: файл не удалось открыть
        ColormapFormatError: некорректная запись
    """
    try:
        with open(path, 'rb') as f:
            colormap = parse_colormap(f)
    except OSError as e:
        raise ColormapOpenError(f"could not open colormap {path}: {e.strerror or e}") from e

    get_logger().debug(f"Палитра {path}: {len(colormap)} цветов")
    return colormap
