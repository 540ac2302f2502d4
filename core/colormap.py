"""
core/colormap.py

Палитра цветов дисков.

Палитра: упорядоченный набор RGB-образцов, равномерно распределённых
по отрезку [0, 1]. После загрузки не изменяется.
"""

from typing import Iterable, Iterator, NamedTuple, Tuple, Union


class Color(NamedTuple):
    """RGB-цвет, каждый канал в 0..255."""
    r: int
    g: int
    b: int

    @classmethod
    def checked(cls, r: int, g: int, b: int) -> 'Color':
        """Создаёт цвет с проверкой диапазона каналов."""
        for channel in (r, g, b):
            if not 0 <= channel <= 255:
                raise ValueError(f"channel out of range 0..255: {channel}")
        return cls(r, g, b)

    def sgr(self) -> str:
        """ANSI-последовательность truecolor для цвета текста."""
        return f"\x1b[38;2;{self.r};{self.g};{self.b}m"


class Colormap:
    """
    Неизменяемая палитра.

    Пустая палитра допустима на этапе загрузки, её отвергает Board.
    """
    __slots__ = ('_samples',)

    def __init__(self, samples: Iterable[Union[Color, Tuple[int, int, int]]] = ()):
        self._samples: Tuple[Color, ...] = tuple(Color.checked(*s) for s in samples)

    def __len__(self) -> int:
        return len(self._samples)

    def __getitem__(self, index: int) -> Color:
        return self._samples[index]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._samples)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Colormap):
            return NotImplemented
        return self._samples == other._samples

    def __hash__(self) -> int:
        return hash(self._samples)

    def __repr__(self) -> str:
        return f"Colormap({len(self)} samples)"

    def step(self, n: int) -> int:
        """
        Шаг выборки для n дисков.

        max(1, L // (n - 1)) при n > 1, иначе 0.
        """
        if n <= 1:
            return 0
        return max(1, len(self._samples) // (n - 1))

    def sample_index(self, i: int, n: int) -> int:
        """Индекс образца для диска i из n, с прижатием к последнему образцу."""
        if not 0 <= i < n:
            raise IndexError(f"disk index {i} out of range 0..{n - 1}")
        if not self._samples:
            raise IndexError("colormap is empty")
        return min(i * self.step(n), len(self._samples) - 1)

    def color_for(self, i: int, n: int) -> Color:
        """
        Цвет для диска с индексом i (0 ≤ i < n).

        Args:
            i: индекс диска (0: нижний, самый большой)
            n: общее количество дисков

        Returns:
            Color из палитры
        """
        return self._samples[self.sample_index(i, n)]
