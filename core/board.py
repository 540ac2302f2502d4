"""
core/board.py

Представление доски: три стержня фиксированной ёмкости.
"""

from collections import Counter
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .colormap import Color, Colormap
from .utils import NUM_PEGS, SOURCE_PEG, TARGET_PEG, is_valid_peg
from utils.error_handling import EmptyColormapError, IllegalMoveError, InvalidSizeError


@dataclass(frozen=True)
class Disk:
    """Диск: размер (1..N, уникален на доске) и цвет."""
    size: int
    color: Color


class Peg:
    """
    Стопка дисков фиксированной ёмкости.

    Хранит заранее выделенный массив слотов и высоту, как массив
    со счётчиком. Индекс 0: нижний диск.
    """
    __slots__ = ('capacity', 'height', '_disks')

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.height = 0
        self._disks: List[Optional[Disk]] = [None] * capacity

    def is_empty(self) -> bool:
        return self.height == 0

    def is_full(self) -> bool:
        return self.height >= self.capacity

    def top(self) -> Optional[Disk]:
        """Верхний диск или None."""
        if self.height == 0:
            return None
        return self._disks[self.height - 1]

    def disk_at(self, layer: int) -> Optional[Disk]:
        """Диск на уровне layer (0: низ) или None, если уровень пуст."""
        if 0 <= layer < self.height:
            return self._disks[layer]
        return None

    def sizes(self) -> Tuple[int, ...]:
        """Размеры дисков снизу вверх."""
        return tuple(self._disks[i].size for i in range(self.height))

    def push(self, disk: Disk) -> None:
        self._disks[self.height] = disk
        self.height += 1

    def pop(self) -> Disk:
        self.height -= 1
        disk = self._disks[self.height]
        self._disks[self.height] = None
        return disk

    def is_stacked(self) -> bool:
        """Размеры строго убывают снизу вверх."""
        sizes = self.sizes()
        return all(lower > upper for lower, upper in zip(sizes, sizes[1:]))

    def __repr__(self) -> str:
        return f"Peg({list(self.sizes())}, capacity={self.capacity})"


class PegView:
    """Представление стержня только для чтения (для рендерера)."""
    __slots__ = ('_peg',)

    def __init__(self, peg: Peg):
        self._peg = peg

    @property
    def height(self) -> int:
        return self._peg.height

    @property
    def capacity(self) -> int:
        return self._peg.capacity

    def top(self) -> Optional[Disk]:
        return self._peg.top()

    def disk_at(self, layer: int) -> Optional[Disk]:
        return self._peg.disk_at(layer)

    def sizes(self) -> Tuple[int, ...]:
        return self._peg.sizes()

    def is_empty(self) -> bool:
        return self._peg.is_empty()

    def __repr__(self) -> str:
        return f"PegView({list(self.sizes())})"


class Board:
    """
    Доска из трёх стержней.

    Инварианты:
    - на каждом стержне размеры строго убывают снизу вверх;
    - мультимножество размеров на всех стержнях равно {1..N}.
    Доска изменяется только через move().
    """
    __slots__ = ('num_disks', '_pegs', '_views', '_moves')

    def __init__(self, num_disks: int, colormap: Colormap):
        """
        Создаёт доску: все диски на стержне 0, стержни 1 и 2 пусты.

        Raises:
            InvalidSizeError: если num_disks < 1
            EmptyColormapError: если палитра пуста
        """
        if isinstance(num_disks, bool) or not isinstance(num_disks, int) or num_disks < 1:
            raise InvalidSizeError(f"number of disks must be at least 1, got {num_disks!r}")
        if len(colormap) == 0:
            raise EmptyColormapError("colormap contains no colors")

        self.num_disks = num_disks
        self._pegs = [Peg(num_disks) for _ in range(NUM_PEGS)]
        self._views = tuple(PegView(peg) for peg in self._pegs)
        self._moves = 0

        first = self._pegs[SOURCE_PEG]
        for k in range(num_disks):
            first.push(Disk(num_disks - k, colormap.color_for(k, num_disks)))

    @property
    def moves(self) -> int:
        """Количество выполненных ходов."""
        return self._moves

    @property
    def pegs(self) -> Tuple[PegView, ...]:
        return self._views

    def peg(self, index: int) -> PegView:
        """Стержень index (0..2) только для чтения."""
        return self._views[index]

    def can_move(self, src: int, dst: int) -> bool:
        """Проверка допустимости хода без изменения доски."""
        return self._illegal_reason(src, dst) is None

    def _illegal_reason(self, src: int, dst: int) -> Optional[str]:
        if not is_valid_peg(src) or not is_valid_peg(dst):
            return f"peg index out of range 0..{NUM_PEGS - 1}"
        if src == dst:
            return "source and destination pegs are the same"
        source = self._pegs[src]
        dest = self._pegs[dst]
        if source.is_empty():
            return "source peg is empty"
        if dest.is_full():
            return "destination peg is full"
        if not dest.is_empty() and dest.top().size <= source.top().size:
            return (f"cannot place disk {source.top().size} "
                    f"on smaller disk {dest.top().size}")
        return None

    def move(self, src: int, dst: int) -> None:
        """
        Перекладывает верхний диск со стержня src на стержень dst.

        Raises:
            IllegalMoveError: если ход недопустим или нарушен инвариант
        """
        reason = self._illegal_reason(src, dst)
        if reason is not None:
            raise IllegalMoveError(f"illegal move {src} -> {dst}: {reason}")

        self._pegs[dst].push(self._pegs[src].pop())
        self._moves += 1
        self.check_invariants()

    def check_invariants(self) -> None:
        """Проверяет порядок дисков и сохранение множества размеров."""
        for index, peg in enumerate(self._pegs):
            if not peg.is_stacked():
                raise IllegalMoveError(
                    f"stacking invariant violated on peg {index}: {list(peg.sizes())}"
                )
        sizes = Counter(size for peg in self._pegs for size in peg.sizes())
        if sizes != Counter(range(1, self.num_disks + 1)):
            raise IllegalMoveError("disk sizes on the board are not {1..N}")

    def is_solved(self) -> bool:
        """Все диски на последнем стержне."""
        return self._pegs[TARGET_PEG].height == self.num_disks

    def snapshot(self) -> Tuple[Tuple[int, ...], ...]:
        """Размеры дисков на каждом стержне снизу вверх."""
        return tuple(peg.sizes() for peg in self._pegs)

    def __repr__(self) -> str:
        return f"Board({self.num_disks} disks, moves={self._moves}, pegs={self.snapshot()})"
