"""
hanoi_io/renderer.py

Отрисовка доски в терминал с перерисовкой кадра на месте.

Кадр: строка заголовка "Moves: k / 2^N - 1" и N строк доски сверху вниз.
Диски окрашиваются truecolor-последовательностями ANSI.
"""

import re
import sys
import time
from typing import Callable, List, Optional, TextIO

from core.board import Board, PegView
from core.utils import DISK, ROD, EMPTY, SPACE_BETWEEN_PEGS, total_moves

# ANSI-последовательности
SGR_RESET = "\x1b[0;0m"
CURSOR_UP = "\x1b[A"
CARRIAGE_RETURN = "\r"
ERASE_DOWN = "\x1b[J"

ERASE_LINE = CURSOR_UP + CARRIAGE_RETURN + ERASE_DOWN

_SGR_PATTERN = re.compile(r'\x1b\[[0-9;]*m')

# Заголовок печатает 2^N - 1 целиком при любом допустимом N
if hasattr(sys, 'set_int_max_str_digits'):
    sys.set_int_max_str_digits(0)


def strip_ansi(text: str) -> str:
    """Удаляет SGR-последовательности (цвета) из строки."""
    return _SGR_PATTERN.sub('', text)


def render_layer_peg(peg: PegView, num_disks: int, layer: int) -> str:
    """
    Отрисовывает один уровень одного стержня.

    Args:
        peg: стержень
        num_disks: количество дисков N (задаёт ширину поля 2N-1)
        layer: уровень, 0 = нижний

    Returns:
        Строка видимой ширины 2N-1
    """
    disk = peg.disk_at(layer)
    if disk is None:
        side = EMPTY * (num_disks - 1)
        return side + ROD + side

    side = EMPTY * (num_disks - disk.size)
    body = DISK * (2 * disk.size - 1)
    return side + disk.color.sgr() + body + SGR_RESET + side


def render_layer(board: Board, layer: int) -> str:
    """Отрисовывает уровень layer всех трёх стержней."""
    gap = EMPTY * SPACE_BETWEEN_PEGS
    return gap.join(render_layer_peg(peg, board.num_disks, layer) for peg in board.pegs)


def render_header(board: Board) -> str:
    return f"Moves: {board.moves} / {total_moves(board.num_disks)}"


def render_frame(board: Board) -> List[str]:
    """
    Строки кадра: заголовок, затем уровни с верхнего (N-1) до нижнего (0).
    """
    lines = [render_header(board)]
    for layer in range(board.num_disks - 1, -1, -1):
        lines.append(render_layer(board, layer))
    return lines


class Renderer:
    """
    Рисует кадры в поток и стирает предыдущий кадр перед следующим.

    Первый кадр выводится без стирания; для каждого следующего сначала
    выполняется ровно столько циклов "вверх, в начало строки, стереть до
    конца экрана", сколько строк было выведено в предыдущем кадре.
    """

    def __init__(self, stream: Optional[TextIO] = None, delay: float = 1.0,
                 sleep: Callable[[float], None] = time.sleep):
        """
        Args:
            stream: поток вывода (по умолчанию sys.stdout)
            delay: пауза после каждого кадра в секундах
            sleep: функция паузы (подменяется в тестах)
        """
        self.stream = stream if stream is not None else sys.stdout
        self.delay = delay
        self.sleep = sleep
        self.first_frame = True
        self.lines_written = 0
        self.frames_drawn = 0

    def erase(self) -> None:
        """Стирает предыдущий кадр, если он был."""
        if self.first_frame:
            return
        self.stream.write(ERASE_LINE * self.lines_written)

    def draw(self, board: Board) -> None:
        """Перерисовывает кадр на месте предыдущего и делает паузу."""
        self.erase()
        lines = render_frame(board)
        self.stream.write(''.join(line + '\n' for line in lines))
        self.stream.flush()

        self.first_frame = False
        self.lines_written = len(lines)
        self.frames_drawn += 1

        if self.delay > 0:
            self.sleep(self.delay)

    def reset(self) -> None:
        """Забывает предыдущий кадр: следующий draw() не будет стирать."""
        self.first_frame = True
        self.lines_written = 0
