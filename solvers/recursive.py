"""
solvers/recursive.py

Классический рекурсивный решатель за минимальное число ходов.
"""

import sys
from typing import Iterator, Tuple

from .base import BaseSolver
from core.board import Board
from core.utils import SOURCE_PEG, TARGET_PEG, spare_peg

Move = Tuple[int, int]

# Запас стека сверх глубины рекурсии N
_STACK_MARGIN = 100


def plan_moves(size: int, src: int = SOURCE_PEG, dst: int = TARGET_PEG) -> Iterator[Move]:
    """
    Генерирует ходы (src, dst) для переноса стопки из size дисков.

    Порядок тот же, что у RecursiveSolver.
    """
    if size == 1:
        yield (src, dst)
        return
    spare = spare_peg(src, dst)
    yield from plan_moves(size - 1, src, spare)
    yield from plan_moves(1, src, dst)
    yield from plan_moves(size - 1, spare, dst)


def ensure_recursion_limit(depth: int) -> None:
    """Поднимает лимит рекурсии, если его не хватает для глубины depth."""
    needed = depth + _STACK_MARGIN
    if sys.getrecursionlimit() < needed:
        sys.setrecursionlimit(needed)


class RecursiveSolver(BaseSolver):
    """
    Рекурсивный решатель.

    move_stack(k, src, dst):
    - k == 1: один ход и перерисовка;
    - иначе: k-1 дисков на запасной, 1 диск на dst, k-1 дисков с запасного на dst.
    """

    def _run(self, board: Board) -> None:
        ensure_recursion_limit(board.num_disks)
        self._move_stack(board, board.num_disks, SOURCE_PEG, TARGET_PEG, 1)

    def _move_stack(self, board: Board, size: int, src: int, dst: int, depth: int) -> None:
        self.stats.max_depth = max(self.stats.max_depth, depth)
        if size == 1:
            self._apply(board, src, dst)
            return
        spare = spare_peg(src, dst)
        self._move_stack(board, size - 1, src, spare, depth + 1)
        self._move_stack(board, 1, src, dst, depth + 1)
        self._move_stack(board, size - 1, spare, dst, depth + 1)
