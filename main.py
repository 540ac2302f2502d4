#!/usr/bin/env python3
"""
main.py

Точка входа для анимации Ханойской башни.

Использование:
    python main.py                      # количество дисков вводится с клавиатуры
    python main.py 5                    # 5 дисков
    python main.py 5 --delay 0.2        # быстрее
    python main.py 5 --solver iterative # итеративный решатель
"""

import sys
import argparse
import logging
from typing import List, Optional

from core.board import Board
from hanoi_io import load_colormap, parse_num_layers, prompt_num_layers, Renderer
from solvers import SOLVERS
from utils.config import AnimationConfig, DEFAULT_COLORMAP_PATH, DEFAULT_DELAY
from utils.error_handling import IllegalMoveError, handle_errors
from utils.logging import get_logger, setup_file_logging


class UsageParser(argparse.ArgumentParser):
    """ArgumentParser, который при ошибке печатает usage в stdout и выходит с кодом 1."""

    def error(self, message):
        self.print_usage(sys.stdout)
        sys.stdout.write(f"Error: {message}\n")
        self.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = UsageParser(
        prog='tower-of-hanoi',
        usage='%(prog)s [num_layers] [options]',
        description='Animated Tower of Hanoi',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Примеры:
  tower-of-hanoi                   # ввод количества дисков
  tower-of-hanoi 4                 # 4 диска
  tower-of-hanoi 4 --delay 0.1     # пауза 0.1с между кадрами
        """
    )
    parser.add_argument(
        'num_layers', nargs='*',
        help='Количество дисков (если не задано, запрашивается)'
    )
    parser.add_argument(
        '--delay', '-d', type=float, default=DEFAULT_DELAY,
        help=f'Пауза между кадрами в секундах (default: {DEFAULT_DELAY})'
    )
    parser.add_argument(
        '--colormap', '-c', default=DEFAULT_COLORMAP_PATH,
        help=f'CSV-файл палитры (default: {DEFAULT_COLORMAP_PATH})'
    )
    parser.add_argument(
        '--solver', '-s', choices=list(SOLVERS.keys()),
        default='recursive', help='Выбор решателя (default: recursive)'
    )
    parser.add_argument(
        '--log-file', default=None,
        help='Записывать подробный лог в файл'
    )
    parser.add_argument(
        '--verbose', '-v', action='store_true',
        help='Подробный лог в stderr'
    )
    return parser


def configure_logging(config: AnimationConfig) -> None:
    logger = get_logger()
    if config.verbose:
        logger.set_level(logging.DEBUG)
    if config.log_file:
        setup_file_logging(config.log_file)


def animate(config: AnimationConfig, num_layers: int) -> int:
    """
    Загружает палитру, строит доску и проигрывает решение.

    Returns:
        Количество выполненных ходов
    """
    logger = get_logger()
    colormap = load_colormap(config.colormap_path)

    print(f"num_layers: {num_layers}")
    board = Board(num_layers, colormap)
    renderer = Renderer(sys.stdout, delay=config.delay)
    solver = SOLVERS[config.solver](renderer=renderer, verbose=config.verbose)

    renderer.draw(board)
    try:
        moves = solver.solve(board)
    except IllegalMoveError:
        # Показываем доску в состоянии ошибки
        try:
            renderer.draw(board)
        except OSError as e:
            logger.warning(f"Не удалось перерисовать доску: {e}")
        raise

    logger.info(f"Решено за {moves} ходов, кадров: {renderer.frames_drawn}")
    return moves


@handle_errors
def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.num_layers) > 1:
        print(f"Usage: {parser.prog} [num_layers]")
        return 1

    config = AnimationConfig.from_args(args)
    configure_logging(config)

    if args.num_layers:
        num_layers = parse_num_layers(args.num_layers[0])
    else:
        num_layers = prompt_num_layers()

    animate(config, num_layers)
    return 0


if __name__ == "__main__":
    sys.exit(main())
