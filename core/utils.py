"""
core/utils.py

Общие утилиты и константы для Ханойской башни.
"""

NUM_PEGS = 3
SOURCE_PEG = 0
TARGET_PEG = NUM_PEGS - 1

# Символы для отображения
DISK = '#'      # Диск
ROD = '|'       # Пустой стержень
EMPTY = ' '     # Пустое место

SPACE_BETWEEN_PEGS = 3  # Пробелов между стержнями при отрисовке


def spare_peg(src: int, dst: int) -> int:
    """Индекс стержня, который не src и не dst (индексы в сумме дают 3)."""
    return NUM_PEGS - src - dst


def total_moves(num_disks: int) -> int:
    """Минимальное количество ходов для N дисков: 2^N - 1."""
    return (1 << num_disks) - 1


def peg_width(num_disks: int) -> int:
    """Ширина поля одного стержня в символах."""
    return 2 * num_disks - 1


def frame_width(num_disks: int) -> int:
    """Видимая ширина строки кадра: 3 стержня и 2 промежутка."""
    return NUM_PEGS * peg_width(num_disks) + (NUM_PEGS - 1) * SPACE_BETWEEN_PEGS


def is_valid_peg(index: int) -> bool:
    """Проверяет, что индекс стержня в пределах 0..2."""
    return isinstance(index, int) and 0 <= index < NUM_PEGS
