"""
core - Ядро Ханойской башни

Базовые структуры данных и утилиты.
"""

from .colormap import Color, Colormap
from .board import Board, Disk, Peg, PegView
from .utils import (
    NUM_PEGS, SOURCE_PEG, TARGET_PEG,
    DISK, ROD, EMPTY, SPACE_BETWEEN_PEGS,
    spare_peg, total_moves, peg_width, frame_width
)

__all__ = [
    'Color', 'Colormap',
    'Board', 'Disk', 'Peg', 'PegView',
    'NUM_PEGS', 'SOURCE_PEG', 'TARGET_PEG',
    'DISK', 'ROD', 'EMPTY', 'SPACE_BETWEEN_PEGS',
    'spare_peg', 'total_moves', 'peg_width', 'frame_width'
]
