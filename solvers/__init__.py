"""
solvers - Решатели Ханойской башни

Экспортирует:
- RecursiveSolver: классическая рекурсия
- IterativeSolver: правило самого маленького диска (тот же порядок ходов)
- plan_moves: генератор последовательности ходов
"""

from .base import BaseSolver, SolverStats
from .recursive import RecursiveSolver, plan_moves, ensure_recursion_limit
from .iterative import IterativeSolver

SOLVERS = {
    'recursive': RecursiveSolver,
    'iterative': IterativeSolver,
}

__all__ = [
    'BaseSolver',
    'SolverStats',
    'RecursiveSolver',
    'IterativeSolver',
    'plan_moves',
    'ensure_recursion_limit',
    'SOLVERS',
]
