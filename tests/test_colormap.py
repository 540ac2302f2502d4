"""
tests/test_colormap.py

Тесты выбора цвета диска из палитры.
"""

import pytest

from core.colormap import Color, Colormap
from conftest import make_colormap


def test_color_for_spreads_disks_across_colormap():
    """L=10, N=4: шаг 3, диски получают образцы 0, 3, 6, 9."""
    colormap = make_colormap(10)

    assert colormap.step(4) == 3
    assert [colormap.sample_index(i, 4) for i in range(4)] == [0, 3, 6, 9]
    assert [colormap.color_for(i, 4) for i in range(4)] == [colormap[0], colormap[3], colormap[6], colormap[9]]


def test_single_disk_uses_first_sample():
    colormap = make_colormap(10)

    assert colormap.step(1) == 0
    assert colormap.color_for(0, 1) == colormap[0]


def test_short_colormap_clamps_to_last_sample():
    """Палитра короче числа дисков: шаг 1, хвост прижат к последнему образцу."""
    colormap = make_colormap(3)

    assert colormap.step(5) == 1
    assert [colormap.sample_index(i, 5) for i in range(5)] == [0, 1, 2, 2, 2]


def test_single_sample_colormap():
    colormap = Colormap([(10, 20, 30)])

    assert all(colormap.color_for(i, 6) == Color(10, 20, 30) for i in range(6))


def test_color_for_rejects_out_of_range_index():
    colormap = make_colormap(10)

    with pytest.raises(IndexError):
        colormap.color_for(4, 4)
    with pytest.raises(IndexError):
        colormap.color_for(-1, 4)


def test_empty_colormap_has_no_colors():
    colormap = Colormap()

    assert len(colormap) == 0
    with pytest.raises(IndexError):
        colormap.color_for(0, 1)


def test_color_checked_rejects_bad_channel():
    with pytest.raises(ValueError):
        Color.checked(256, 0, 0)
    with pytest.raises(ValueError):
        Colormap([(0, -1, 0)])


def test_color_sgr_sequence():
    assert Color(1, 22, 255).sgr() == "\x1b[38;2;1;22;255m"


def test_colormap_is_immutable_sequence():
    colormap = Colormap([(1, 2, 3), Color(4, 5, 6)])

    assert list(colormap) == [Color(1, 2, 3), Color(4, 5, 6)]
    assert colormap == Colormap([(1, 2, 3), (4, 5, 6)])
    with pytest.raises(TypeError):
        colormap[0] = Color(0, 0, 0)
