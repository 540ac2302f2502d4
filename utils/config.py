"""
utils/config.py

Настройки анимации.
"""

from dataclasses import dataclass
from typing import Optional

from .error_handling import InvalidArgumentError


DEFAULT_COLORMAP_PATH = "CET-I1.csv"
DEFAULT_DELAY = 1.0  # секунд между кадрами


@dataclass
class AnimationConfig:
    """Конфигурация запуска анимации."""
    delay: float = DEFAULT_DELAY
    colormap_path: str = DEFAULT_COLORMAP_PATH
    solver: str = "recursive"
    log_file: Optional[str] = None
    verbose: bool = False

    def __post_init__(self):
        if self.delay < 0:
            raise InvalidArgumentError(f"delay must be non-negative, got {self.delay}")

    @classmethod
    def from_args(cls, args) -> 'AnimationConfig':
        """Собирает конфигурацию из результата argparse."""
        return cls(
            delay=args.delay,
            colormap_path=args.colormap,
            solver=args.solver,
            log_file=args.log_file,
            verbose=args.verbose,
        )
