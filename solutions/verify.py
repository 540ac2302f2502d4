"""
solutions/verify.py

Проверка последовательности ходов без доски и рендерера.
"""

from typing import Iterable, List, Tuple

from core.utils import NUM_PEGS, SOURCE_PEG, TARGET_PEG


Move = Tuple[int, int]


def verify_solution(num_disks: int, moves: Iterable[Move], require_minimal: bool = True) -> bool:
    """
    Проверяет корректность решения.

    Правила:
    - каждый ход переносит верхний диск непустого стержня на пустой стержень
      или на больший диск;
    - после всех ходов все диски на последнем стержне, остальные пусты;
    - если require_minimal=True, ходов ровно 2^N - 1.
    """
    pegs: List[List[int]] = [[] for _ in range(NUM_PEGS)]
    pegs[SOURCE_PEG] = list(range(num_disks, 0, -1))
    count = 0

    for src, dst in moves:
        if not (0 <= src < NUM_PEGS and 0 <= dst < NUM_PEGS) or src == dst:
            return False
        if not pegs[src]:
            return False
        disk = pegs[src][-1]
        if pegs[dst] and pegs[dst][-1] < disk:
            return False
        pegs[dst].append(pegs[src].pop())
        count += 1

    if pegs[TARGET_PEG] != list(range(num_disks, 0, -1)):
        return False
    if require_minimal and count != (1 << num_disks) - 1:
        return False
    return True


def count_disk_moves(num_disks: int, moves: Iterable[Move]) -> List[int]:
    """
    Считает, сколько раз перемещался каждый диск.

    Returns:
        Список длины N + 1 по размеру диска (индекс 0 не используется)
    """
    pegs: List[List[int]] = [[] for _ in range(NUM_PEGS)]
    pegs[SOURCE_PEG] = list(range(num_disks, 0, -1))
    counts = [0] * (num_disks + 1)
    for src, dst in moves:
        disk = pegs[src].pop()
        pegs[dst].append(disk)
        counts[disk] += 1
    return counts
