"""
solutions - Проверка решений.
"""

from .verify import verify_solution, count_disk_moves

__all__ = [
    'verify_solution',
    'count_disk_moves',
]
