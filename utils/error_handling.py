"""
utils/error_handling.py

Иерархия ошибок и обработка ошибок на уровне CLI.
"""

import sys
from typing import Callable, Optional
from functools import wraps

from .logging import get_logger


ERROR_PREFIX = "Error:"


def format_error(message: str) -> str:
    """Добавляет префикс "Error:", если его ещё нет."""
    if message.startswith(ERROR_PREFIX):
        return message
    return f"{ERROR_PREFIX} {message}"


class HanoiError(Exception):
    """Базовое исключение. Все пользовательские ошибки завершают процесс с кодом 1."""
    exit_code = 1
    stream = "stderr"

    def __init__(self, message: str):
        super().__init__(format_error(message))

    @property
    def message(self) -> str:
        return str(self)


class InvalidArgumentError(HanoiError):
    """Неверный аргумент командной строки (N, количество аргументов)."""
    stream = "stdout"


class InvalidSizeError(InvalidArgumentError):
    """Недопустимое количество дисков (N < 1)."""
    pass


class InputError(HanoiError):
    """Конец ввода или ошибка чтения в интерактивном режиме."""
    pass


class ColormapError(HanoiError):
    """Базовая ошибка загрузки палитры."""
    pass


class ColormapOpenError(ColormapError):
    """Файл палитры не открывается."""
    pass


class ColormapFormatError(ColormapError):
    """Некорректная запись в файле палитры."""

    def __init__(self, message: str, record: Optional[int] = None):
        super().__init__(message)
        self.record = record


class ColormapRangeError(ColormapFormatError):
    """Канал цвета вне диапазона 0..255."""
    pass


class EmptyColormapError(ColormapError):
    """Палитра не содержит ни одного цвета."""
    pass


class IllegalMoveError(HanoiError):
    """
    Нарушение правил перекладывания или инварианта стопки.

    При корректном решателе недостижимо, это ошибка программы.
    """
    pass


def _write(stream_name: str, message: str) -> None:
    stream = sys.stdout if stream_name == "stdout" else sys.stderr
    stream.write(message + "\n")
    stream.flush()


def handle_errors(func: Callable[..., int]) -> Callable[..., int]:
    """
    Декоратор для точки входа CLI.

    Перехватывает HanoiError и MemoryError, логирует их, печатает сообщение
    в поток, соответствующий типу ошибки, и возвращает код выхода.
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> int:
        try:
            return func(*args, **kwargs)
        except HanoiError as e:
            get_logger().debug(f"{func.__name__}: {e.__class__.__name__}: {e}")
            _write(e.stream, e.message)
            return e.exit_code
        except MemoryError:
            get_logger().error(f"{func.__name__}: нехватка памяти", exc_info=True)
            _write("stderr", format_error("out of memory"))
            return 1
    return wrapper
