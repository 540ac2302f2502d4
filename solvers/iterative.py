"""
solvers/iterative.py

Итеративный решатель: тот же порядок ходов, что у рекурсивного, без рекурсии.

Правило:
- на нечётных ходах самый маленький диск сдвигается по циклу
  0 → 1 → 2 → 0 при чётном N и 0 → 2 → 1 → 0 при нечётном N;
- на чётных ходах делается единственный допустимый ход между двумя
  другими стержнями.
"""

from .base import BaseSolver
from core.board import Board
from core.utils import NUM_PEGS, SOURCE_PEG, spare_peg, total_moves


class IterativeSolver(BaseSolver):
    """Итеративный решатель по правилу самого маленького диска."""

    def _run(self, board: Board) -> None:
        n = board.num_disks
        step = 1 if n % 2 == 0 else NUM_PEGS - 1
        smallest = SOURCE_PEG

        for move_number in range(1, total_moves(n) + 1):
            if move_number % 2 == 1:
                target = (smallest + step) % NUM_PEGS
                self._apply(board, smallest, target)
                smallest = target
            else:
                a = (smallest + 1) % NUM_PEGS
                b = spare_peg(smallest, a)
                if board.can_move(a, b):
                    self._apply(board, a, b)
                else:
                    self._apply(board, b, a)
