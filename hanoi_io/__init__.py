"""
hanoi_io - Ввод/вывод для Ханойской башни

Экспортирует:
- Разбор количества дисков
- Загрузку палитры
- Отрисовку кадров в терминал
"""

from .parser import parse_num_layers, prompt_num_layers, INT_MAX, PROMPT
from .colormap_loader import load_colormap, parse_colormap
from .renderer import Renderer, render_frame, render_layer, render_header, strip_ansi

__all__ = [
    'parse_num_layers',
    'prompt_num_layers',
    'INT_MAX',
    'PROMPT',
    'load_colormap',
    'parse_colormap',
    'Renderer',
    'render_frame',
    'render_layer',
    'render_header',
    'strip_ansi'
]
