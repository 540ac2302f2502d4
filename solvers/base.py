"""
solvers/base.py

Базовый класс для всех решателей.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional
import time

from core.board import Board
from hanoi_io.renderer import Renderer
from utils.logging import get_logger


@dataclass
class SolverStats:
    """Статистика работы решателя."""
    moves: int = 0
    frames: int = 0
    max_depth: int = 0
    time_elapsed: float = 0.0

    def __str__(self) -> str:
        return (
            f"Moves: {self.moves}, "
            f"Frames: {self.frames}, "
            f"Depth: {self.max_depth}, "
            f"Time: {self.time_elapsed:.3f}s"
        )


class BaseSolver(ABC):
    """
    Базовый класс решателя.

    Решатель перекладывает все диски со стержня 0 на стержень 2 и после
    каждого хода отдаёт доску рендереру (если он задан).
    """

    def __init__(self, renderer: Optional[Renderer] = None, verbose: bool = False):
        self.renderer = renderer
        self.verbose = verbose
        self.stats = SolverStats()

    @abstractmethod
    def _run(self, board: Board) -> None:
        """Выполняет все ходы решения на доске."""
        pass

    def solve(self, board: Board) -> int:
        """
        Решает головоломку.

        Args:
            board: начальная позиция (все диски на стержне 0)

        Returns:
            Количество выполненных ходов
        """
        self.stats = SolverStats()
        self._log(f"Starting (disks={board.num_disks})")

        start = time.time()
        moves_before = board.moves
        self._run(board)
        self.stats.time_elapsed = time.time() - start
        self.stats.moves = board.moves - moves_before

        self._log(f"Stats: {self.stats}")
        return self.stats.moves

    def _apply(self, board: Board, src: int, dst: int) -> None:
        """Один ход и перерисовка кадра."""
        board.move(src, dst)
        if self.renderer is not None:
            self.renderer.draw(board)
            self.stats.frames += 1

    def _log(self, message: str) -> None:
        """Пишет сообщение в лог (на уровне INFO, если verbose=True)."""
        logger = get_logger()
        text = f"[{self.__class__.__name__}] {message}"
        if self.verbose:
            logger.info(text)
        else:
            logger.debug(text)
