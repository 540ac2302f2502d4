"""
hanoi_io/parser.py

Разбор количества дисков из аргумента командной строки или с клавиатуры.
"""

import re
import sys
from typing import Optional, TextIO

from utils.error_handling import InputError, InvalidArgumentError

INT_MAX = 2 ** 31 - 1
PROMPT = "Enter the number of layers: "

# Как strtol: пробелы в начале, необязательный знак, только цифры до конца
_INTEGER_PATTERN = re.compile(r'\s*[+-]?[0-9]+')


def parse_num_layers(text: str) -> int:
    """
    Преобразует строку в количество дисков с проверкой границ.

    Args:
        text: строка с десятичным целым

    Returns:
        N в диапазоне 1..2^31-1

    Raises:
        InvalidArgumentError: не целое, N <= 0 или N > 2^31-1
    """
    if not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidArgumentError("num_layers must be an integer")
    n = int(text)
    if n <= 0:
        raise InvalidArgumentError("num_layers must be greater than zero")
    if n > INT_MAX:
        raise InvalidArgumentError(f"num_layers must be less than {INT_MAX}")
    return n


def prompt_num_layers(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """
    Запрашивает количество дисков, пока не будет введено корректное значение.

    Пустые строки пропускаются, ошибки разбора выводятся и запрос повторяется.

    Raises:
        InputError: конец ввода или ошибка чтения
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    while True:
        stdout.write(PROMPT)
        stdout.flush()
        try:
            line = stdin.readline()
        except OSError as e:
            raise InputError(f"could not read input: {e}") from e
        if line == '':
            # Конец файла
            stdout.write('\n')
            raise InputError("unexpected end of input")

        line = line.rstrip('\n')
        if line == '':
            continue
        try:
            return parse_num_layers(line)
        except InvalidArgumentError as e:
            stdout.write(e.message + '\n')
