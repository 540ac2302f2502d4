"""
tests/test_verify.py

Тесты проверки последовательности ходов.
"""

from solutions.verify import verify_solution, count_disk_moves
from solvers import plan_moves


def test_planned_moves_are_valid():
    for n in range(1, 8):
        assert verify_solution(n, plan_moves(n))


def test_larger_on_smaller_rejected():
    assert not verify_solution(2, [(0, 2), (0, 2), (1, 2)], require_minimal=False)


def test_empty_source_rejected():
    assert not verify_solution(1, [(1, 2)], require_minimal=False)


def test_out_of_range_and_same_peg_rejected():
    assert not verify_solution(1, [(0, 3)], require_minimal=False)
    assert not verify_solution(1, [(0, 0), (0, 2)], require_minimal=False)


def test_unfinished_solution_rejected():
    assert not verify_solution(2, [(0, 1), (0, 2)], require_minimal=False)


def test_non_minimal_solution():
    """Лишние ходы допустимы только при require_minimal=False."""
    moves = [(0, 1), (1, 2)]
    assert verify_solution(1, moves, require_minimal=False)
    assert not verify_solution(1, moves)


def test_count_disk_moves():
    counts = count_disk_moves(5, plan_moves(5))

    # Диск k перемещается 2^(N-k) раз
    assert counts[1:] == [16, 8, 4, 2, 1]
