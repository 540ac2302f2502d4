"""
tests/test_solvers.py

Тесты решателей: порядок ходов, количество ходов и кадров, инварианты.
"""

import sys

import pytest

from core.board import Board
from hanoi_io.renderer import render_header
from solvers import IterativeSolver, RecursiveSolver, plan_moves, ensure_recursion_limit, SOLVERS
from solutions.verify import count_disk_moves
from conftest import RecordingBoard


ALL_SOLVERS = [RecursiveSolver, IterativeSolver]


@pytest.mark.parametrize("solver_class", ALL_SOLVERS)
def test_one_disk(colormap, solver_class):
    board = RecordingBoard(1, colormap)

    assert solver_class().solve(board) == 1
    assert board.history == [(0, 2)]


@pytest.mark.parametrize("solver_class", ALL_SOLVERS)
def test_two_disks(colormap, solver_class):
    board = RecordingBoard(2, colormap)
    solver_class().solve(board)

    assert board.history == [(0, 1), (0, 2), (1, 2)]
    assert board.moves == 3
    assert render_header(board) == "Moves: 3 / 3"
    assert board.peg(2).sizes() == (2, 1)


@pytest.mark.parametrize("solver_class", ALL_SOLVERS)
def test_three_disks(colormap, solver_class):
    board = RecordingBoard(3, colormap)
    solver_class().solve(board)

    assert board.history == [(0, 2), (0, 1), (2, 1), (0, 2), (1, 0), (1, 2), (0, 2)]


@pytest.mark.parametrize("solver_class", ALL_SOLVERS)
def test_four_disks_invariants(colormap, solver_class):
    """N=4: 15 ходов, стопки упорядочены после каждого, диск 4 ходит 1 раз, диск 1 ходит 8 раз."""
    board = RecordingBoard(4, colormap)
    solver_class().solve(board)

    assert len(board.history) == 15
    for state in board.states:
        for sizes in state:
            assert list(sizes) == sorted(sizes, reverse=True)
        assert sorted(size for sizes in state for size in sizes) == [1, 2, 3, 4]

    counts = count_disk_moves(4, board.history)
    assert counts[4] == 1
    assert counts[1] == 8


@pytest.mark.parametrize("num_disks", range(1, 9))
def test_solvers_agree_with_plan(colormap, num_disks):
    """Оба решателя дают ту же последовательность, что plan_moves."""
    expected = list(plan_moves(num_disks))
    assert len(expected) == 2 ** num_disks - 1

    for solver_class in ALL_SOLVERS:
        board = RecordingBoard(num_disks, colormap)
        solver_class().solve(board)
        assert board.history == expected
        assert board.snapshot() == ((), (), tuple(range(num_disks, 0, -1)))
        assert board.is_solved()


@pytest.mark.parametrize("solver_class", ALL_SOLVERS)
def test_frame_per_move(colormap, renderer, solver_class):
    """Кадров: начальный + по одному на ход."""
    board = Board(5, colormap)
    renderer.draw(board)
    solver = solver_class(renderer=renderer)
    solver.solve(board)

    assert renderer.frames_drawn == 2 ** 5
    assert solver.stats.frames == 2 ** 5 - 1
    assert solver.stats.moves == 2 ** 5 - 1


def test_recursive_depth_stats(colormap):
    solver = RecursiveSolver()
    solver.solve(Board(6, colormap))

    assert solver.stats.max_depth == 6


def test_ensure_recursion_limit_raises_limit():
    original = sys.getrecursionlimit()
    try:
        ensure_recursion_limit(original + 500)
        assert sys.getrecursionlimit() >= original + 500
    finally:
        sys.setrecursionlimit(original)


def test_ensure_recursion_limit_never_lowers():
    original = sys.getrecursionlimit()
    ensure_recursion_limit(1)
    assert sys.getrecursionlimit() == original


def test_solver_registry():
    assert SOLVERS == {'recursive': RecursiveSolver, 'iterative': IterativeSolver}


def test_iterative_solver_reports_no_depth(colormap):
    solver = IterativeSolver()
    solver.solve(Board(4, colormap))

    assert solver.stats.max_depth == 0
    assert solver.stats.moves == 15
