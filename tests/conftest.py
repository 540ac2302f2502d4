"""
tests/conftest.py

Общие фикстуры.
"""

import io
import os
import sys
from typing import List, Tuple

import pytest

# Добавляем корень проекта в путь
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.board import Board
from core.colormap import Colormap
from hanoi_io.renderer import Renderer


def make_colormap(length: int = 10) -> Colormap:
    """Палитра из length различимых цветов."""
    return Colormap((i % 256, (i * 7) % 256, 255 - i % 256) for i in range(length))


class RecordingBoard(Board):
    """Доска, которая запоминает каждый ход и проверяет инварианты после него."""

    def __init__(self, num_disks: int, colormap: Colormap):
        super().__init__(num_disks, colormap)
        self.history: List[Tuple[int, int]] = []
        self.states = [self.snapshot()]

    def move(self, src: int, dst: int) -> None:
        super().move(src, dst)
        self.history.append((src, dst))
        self.states.append(self.snapshot())


@pytest.fixture
def colormap() -> Colormap:
    return make_colormap(10)


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def renderer(output) -> Renderer:
    """Рендерер без пауз, пишущий в StringIO."""
    return Renderer(output, delay=0)


@pytest.fixture
def colormap_file(tmp_path):
    """CSV-файл палитры из 16 цветов в tmp_path."""
    path = tmp_path / "CET-I1.csv"
    path.write_text("".join(f"{i * 16},{255 - i * 16},128\n" for i in range(16)))
    return path
